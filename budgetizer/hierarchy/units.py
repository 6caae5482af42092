# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Unit constants for capacities, latencies and rates.

Capacities are binary (1 GB = 1024 MB), matching how device vendors
quote memory and how the reference catalog is written.
"""

from __future__ import annotations

# Capacity (bytes)
KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB

# Time (seconds)
ms = 1e-3
us = 1e-6
ns = 1e-9

# Rates (operations/second)
K = 1e3
M = 1e6


def format_capacity(capacity_bytes: float) -> str:
    """Render a byte count with the largest unit that keeps it >= 1.

    Args:
        capacity_bytes: Capacity in bytes.

    Returns:
        Human-readable capacity, e.g. ``"128 GB"``. Values below 1 MB are
        rendered as a bare byte count.
    """
    for unit, name in ((TB, "TB"), (GB, "GB"), (MB, "MB")):
        if capacity_bytes >= unit:
            return f"{capacity_bytes / unit:g} {name}"
    return f"{capacity_bytes:g}"
