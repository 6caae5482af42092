# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""pytest configuration for budgetizer tests."""

import logging
import sys
from pathlib import Path

import pytest

# Configure logging
logging.basicConfig(level=logging.INFO)

# Set up path for budgetizer imports
root = Path(__file__).parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from budgetizer.hierarchy import TierCatalog, TierDescriptor  # noqa: E402
from budgetizer.hierarchy.units import GB, TB  # noqa: E402
from budgetizer.workload import Workload  # noqa: E402


@pytest.fixture
def default_catalog():
    """Fixture providing the reference RAM/NVM/SSD/HDD catalog."""
    return TierCatalog.default()


@pytest.fixture
def small_catalog():
    """Fixture providing a three-tier catalog with a small search space."""
    return TierCatalog(
        (
            TierDescriptor("fast", 10, 10, 1000, 1e-6, 4),
            TierDescriptor("mid", 40, 4, 100, 1e-4, 4),
            TierDescriptor("slow", 100, 1, 10, 1e-2, 4),
        )
    )


@pytest.fixture
def small_workload():
    """Fixture providing a workload that fits the small catalog."""
    return Workload.from_pairs([(0.6, 8), (0.3, 30), (0.1, 60)])


@pytest.fixture
def skewed_workload():
    """Fixture providing the skewed 111 GB / 1 TB / 10 TB workload."""
    return Workload.from_pairs([(0.8, 111 * GB), (0.199, 1 * TB), (0.001, 10 * TB)])
