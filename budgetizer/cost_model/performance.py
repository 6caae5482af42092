# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Performance reduction of an access distribution.

Both objectives are linear in the access fractions:
- Throughput: average device time per access, Σ fraction / IOPS
- Latency: average latency per access, Σ fraction * latency
"""

from __future__ import annotations

from collections.abc import Sequence

from ..hierarchy.catalog import TierCatalog
from ..types import Objective


def average_time_per_access(fractions: Sequence[float], catalog: TierCatalog) -> float:
    """Average time per access in seconds, weighted by inverse IOPS."""
    return sum(f * (1 / tier.iops) for f, tier in zip(fractions, catalog))


def average_latency_per_access(fractions: Sequence[float], catalog: TierCatalog) -> float:
    """Average latency per access in seconds."""
    return sum(f * tier.latency_s for f, tier in zip(fractions, catalog))


def time_per_access(
    fractions: Sequence[float],
    catalog: TierCatalog,
    objective: Objective,
) -> float:
    """Reduce an access distribution to the scalar ``objective`` minimizes."""
    if objective == Objective.THROUGHPUT:
        return average_time_per_access(fractions, catalog)
    return average_latency_per_access(fractions, catalog)
