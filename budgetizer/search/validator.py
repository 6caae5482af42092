# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Feasibility check for candidate configurations."""

from __future__ import annotations

from ..hierarchy.catalog import TierCatalog
from ..types import Configuration
from ..workload import Workload


def active_tiers(configuration: Configuration) -> list[int]:
    """Indices of tiers with at least one device, in catalog order."""
    return [t for t, count in enumerate(configuration) if count]


def is_valid(configuration: Configuration, workload: Workload, catalog: TierCatalog) -> bool:
    """Decide whether a configuration can serve the workload.

    A configuration is feasible when:
    - the fastest tier has at least one device,
    - active tier capacities never shrink towards slower tiers, since
      every level caches everything held by the level above it,
    - the slowest active tier holds the whole workload.

    Args:
        configuration: Device count per tier.
        workload: Workload to place.
        catalog: Tier catalog the configuration indexes into.

    Returns:
        True if the configuration is feasible.

    Raises:
        ValueError: If the configuration does not match the catalog.
    """
    catalog.check_configuration(configuration)

    if configuration[0] == 0:
        return False

    indexes = active_tiers(configuration)
    for prev, cur in zip(indexes, indexes[1:]):
        if catalog.capacity_of(configuration, cur) < catalog.capacity_of(configuration, prev):
            return False  # level is not inclusive

    return catalog.capacity_of(configuration, indexes[-1]) >= workload.total_size
