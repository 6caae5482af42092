# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Configuration search.

- is_valid / active_tiers: Feasibility of a configuration
- iter_configurations: Lazy cross product of per-tier device counts
- ConfigurationOptimizer: Exhaustive search, budget sweep, async fan-out
- find_best_config: One-call search entry point
"""

from .optimizer import ConfigurationOptimizer, find_best_config, iter_configurations
from .validator import active_tiers, is_valid

__all__ = [
    "ConfigurationOptimizer",
    "find_best_config",
    "iter_configurations",
    "active_tiers",
    "is_valid",
]
