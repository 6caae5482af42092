# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""
budgetizer - Storage hierarchy design-space exploration.

budgetizer picks how many devices of each storage technology (RAM, NVM,
SSD, HDD, ...) to buy so that a workload runs as fast as possible for
less than a given budget. It is an analytical model; no device is ever
touched.

Architecture:
    ┌─────────────────────────────────────────────────────────────┐
    │                   budgetizer Architecture                   │
    ├─────────────────────────────────────────────────────────────┤
    │  hierarchy/             Tier catalog and units              │
    │  workload               Access groups (fraction, size)      │
    │  cost_model/            Analytical models                   │
    │    ├── cost               Device cost                       │
    │    ├── access             Inclusive-cache access split      │
    │    └── performance        Throughput / latency reduction    │
    │  search/                Configuration search                │
    │    ├── validator          Feasibility check                 │
    │    └── optimizer          Exhaustive search, budget sweep   │
    │  reporters/             Result rendering                    │
    └─────────────────────────────────────────────────────────────┘

Example:
    >>> from budgetizer import Workload, find_best_config
    >>> from budgetizer.hierarchy.units import GB, TB
    >>> workload = Workload.from_pairs([(0.8, 111 * GB), (0.199, 1 * TB), (0.001, 10 * TB)])
    >>> result = find_best_config(workload, cost_limit=2000)
    >>> result.best.configuration
    (1, 0, 1, 3)
"""

from __future__ import annotations

__version__ = "0.1.0"

from . import cost_model, hierarchy, reporters, search
from .config import BudgetizerConfig
from .hierarchy import CatalogError, TierCatalog, TierDescriptor
from .reporters import ConsoleReporter
from .search import ConfigurationOptimizer, find_best_config, is_valid
from .types import (
    BudgetizerError,
    Configuration,
    Objective,
    ScoredResult,
    SearchResult,
    SearchStatus,
)
from .workload import AccessGroup, Workload, WorkloadError

__all__ = [
    "__version__",
    # Configuration
    "BudgetizerConfig",
    # Hierarchy
    "TierCatalog",
    "TierDescriptor",
    # Workload
    "AccessGroup",
    "Workload",
    # Types
    "Configuration",
    "Objective",
    "ScoredResult",
    "SearchResult",
    "SearchStatus",
    # Errors
    "BudgetizerError",
    "CatalogError",
    "WorkloadError",
    # Search
    "ConfigurationOptimizer",
    "find_best_config",
    "is_valid",
    # Reporting
    "ConsoleReporter",
    # Submodules
    "cost_model",
    "hierarchy",
    "reporters",
    "search",
]
