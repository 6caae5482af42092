#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""budgetizer budget sweep example.

Finds the best RAM/NVM/SSD/HDD mix for a skewed workload at several
budgets and prints each winner.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

from budgetizer import (  # noqa: E402
    ConfigurationOptimizer,
    ConsoleReporter,
    Objective,
    TierCatalog,
    Workload,
)
from budgetizer.hierarchy.units import GB, TB  # noqa: E402

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

BUDGETS = [2000, 4000, 6000, 8000, 10000, 15000, 100000]


def main():
    """Run the budget sweep example."""
    catalog = TierCatalog.default()
    optimizer = ConfigurationOptimizer(catalog)
    reporter = ConsoleReporter(catalog)

    # 80% of accesses hit 111 GB, almost all the rest 1 TB, a trickle 10 TB
    workload = Workload.from_pairs(
        [
            (0.8, 111 * GB),
            (0.2 - 0.001, 1 * TB),
            (0.001, 10 * TB),
        ]
    )

    print("=" * 80)
    print("Throughput-optimal configurations")
    print("=" * 80)
    reporter.report_sweep(optimizer.sweep(workload, BUDGETS, Objective.THROUGHPUT))

    print("=" * 80)
    print("Latency-optimal configuration (fan-out search)")
    print("=" * 80)
    result = asyncio.run(optimizer.find_best_async(workload, 10000, Objective.LATENCY))
    reporter.report(result)


if __name__ == "__main__":
    main()
