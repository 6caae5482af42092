# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Storage hierarchy description.

This module provides the tier catalog the search runs over:
- TierDescriptor: Per-device capacity, cost, IOPS, latency and device limit
- TierCatalog: Ordered immutable tier list, fastest first
- units: Binary capacity units, time units and rate multipliers
"""

from .catalog import CatalogError, TierCatalog, TierDescriptor
from .units import format_capacity

__all__ = [
    "CatalogError",
    "TierCatalog",
    "TierDescriptor",
    "format_capacity",
]
