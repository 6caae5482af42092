# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Access distribution across an inclusive cache hierarchy.

Groups are placed front to back. A group that does not fit into what is
left of the current tier is served there only in proportion to the
space it gets; the remainder spills to the next tier, which starts with
its full capacity. The spilled group keeps its full size: with inclusive
caches the whole object is also resident in every slower tier it spills
into. Once a group fits, it is charged against the current tier and the
next group continues from there.

Example (one 64 GB RAM device, groups of 32 GB and 64 GB with fractions
0.5 each): the first group is served fully from RAM and leaves 32 GB;
the second gets 32/64 of its 0.5 from RAM and spills 0.25 onward.
"""

from __future__ import annotations

from ..hierarchy.catalog import TierCatalog
from ..types import Configuration
from ..workload import Workload


def access_fractions(
    workload: Workload,
    configuration: Configuration,
    catalog: TierCatalog,
) -> tuple[float, ...]:
    """Compute the share of accesses served by each tier.

    Only meaningful for configurations accepted by
    :func:`budgetizer.search.validator.is_valid`; for those, fractions
    that sum to 1 over the workload also sum to 1 over the tiers.

    Args:
        workload: Workload whose groups are placed in order.
        configuration: Device count per tier.
        catalog: Tier catalog the configuration indexes into.

    Returns:
        Access fraction per tier, in catalog order.

    Raises:
        ValueError: If a group spills past the slowest tier.
    """
    fractions = [0.0] * len(catalog)
    tier = 0
    remaining = catalog.capacity_of(configuration, tier)

    for i, group in enumerate(workload):
        fraction = group.fraction
        while group.size_bytes > remaining:
            served = (remaining / group.size_bytes) * fraction
            fractions[tier] += served
            fraction -= served
            tier += 1
            if tier == len(catalog):
                raise ValueError(
                    f"Access group {i} does not fit into the slowest tier; "
                    f"configuration {configuration} cannot hold the workload"
                )
            remaining = catalog.capacity_of(configuration, tier)
        fractions[tier] += fraction
        remaining -= group.size_bytes

    return tuple(fractions)
