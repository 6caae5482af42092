# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Monetary cost of a configuration."""

from __future__ import annotations

from ..hierarchy.catalog import TierCatalog
from ..types import Configuration


def configuration_cost(configuration: Configuration, catalog: TierCatalog) -> float:
    """Total price of all devices in ``configuration``."""
    return sum(catalog.cost_of(configuration, t) for t in range(len(catalog)))
