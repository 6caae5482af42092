# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Storage tier catalog.

A catalog is an ordered, immutable list of device technologies. Order
encodes the hierarchy level: tier 0 is the fastest, smallest and most
expensive per byte; higher indices are slower, larger and cheaper.

The reference catalog models a four-level RAM/NVM/SSD/HDD hierarchy:

    tier  capacity  cost   IOPS   latency  max
    RAM    64 GB    $500   10 M   100 ns   16
    NVM   256 GB    $500    5 M   400 ns    8
    SSD     1 TB    $500  500 K   100 us   16
    HDD     4 TB    $200    100    10 ms   16
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from ..types import BudgetizerError, Configuration
from .units import GB, TB, K, M, ms, ns, us


class CatalogError(BudgetizerError, ValueError):
    """Raised when a tier descriptor or catalog is malformed."""

    def __init__(self, message: str, tier: str | None = None):
        self.tier = tier
        super().__init__(message)


@dataclass(frozen=True)
class TierDescriptor:
    """One storage technology.

    Attributes:
        name: Tier name (e.g. "RAM").
        capacity_bytes: Capacity of a single device in bytes.
        cost: Price of a single device.
        iops: IO operations per second of a single device.
        latency_s: Access latency in seconds.
        max_devices: Exclusive upper bound on the device count; the
            search tries ``0 .. max_devices - 1`` devices.
    """

    name: str
    capacity_bytes: float
    cost: float
    iops: float
    latency_s: float
    max_devices: int

    def __post_init__(self) -> None:
        if not self.name:
            raise CatalogError("Tier name must not be empty")
        if self.capacity_bytes <= 0:
            raise CatalogError(
                f"Tier {self.name}: capacity must be positive, got {self.capacity_bytes}",
                tier=self.name,
            )
        if self.cost < 0:
            raise CatalogError(
                f"Tier {self.name}: cost must be non-negative, got {self.cost}",
                tier=self.name,
            )
        if self.iops <= 0:
            raise CatalogError(
                f"Tier {self.name}: IOPS must be positive, got {self.iops}",
                tier=self.name,
            )
        if self.latency_s < 0:
            raise CatalogError(
                f"Tier {self.name}: latency must be non-negative, got {self.latency_s}",
                tier=self.name,
            )
        if self.max_devices < 1:
            raise CatalogError(
                f"Tier {self.name}: max_devices must be at least 1, got {self.max_devices}",
                tier=self.name,
            )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "capacity_bytes": self.capacity_bytes,
            "cost": self.cost,
            "iops": self.iops,
            "latency_s": self.latency_s,
            "max_devices": self.max_devices,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TierDescriptor:
        """Deserialize from dictionary."""
        return cls(**data)


@dataclass(frozen=True)
class TierCatalog:
    """Ordered, immutable sequence of tiers, fastest first.

    Example:
        >>> catalog = TierCatalog.default()
        >>> catalog.names
        ('RAM', 'NVM', 'SSD', 'HDD')
        >>> catalog.capacity_of((2, 0, 0, 3), 0) == 128 * GB
        True
    """

    tiers: tuple[TierDescriptor, ...]

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the catalog stays hashable
        object.__setattr__(self, "tiers", tuple(self.tiers))
        if not self.tiers:
            raise CatalogError("Catalog must contain at least one tier")
        seen: set[str] = set()
        for tier in self.tiers:
            if tier.name in seen:
                raise CatalogError(f"Duplicate tier name: {tier.name}", tier=tier.name)
            seen.add(tier.name)

    def __len__(self) -> int:
        return len(self.tiers)

    def __iter__(self) -> Iterator[TierDescriptor]:
        return iter(self.tiers)

    def __getitem__(self, index: int) -> TierDescriptor:
        return self.tiers[index]

    @property
    def names(self) -> tuple[str, ...]:
        """Tier names in catalog order."""
        return tuple(t.name for t in self.tiers)

    def capacity_of(self, configuration: Configuration, tier: int) -> float:
        """Total capacity of ``tier`` under ``configuration`` in bytes."""
        return configuration[tier] * self.tiers[tier].capacity_bytes

    def cost_of(self, configuration: Configuration, tier: int) -> float:
        """Total cost of ``tier`` under ``configuration``."""
        return configuration[tier] * self.tiers[tier].cost

    def check_configuration(self, configuration: Sequence[int]) -> None:
        """Reject configurations that do not fit this catalog.

        Raises:
            ValueError: If the length differs from the tier count or a
                count is negative.
        """
        if len(configuration) != len(self.tiers):
            raise ValueError(
                f"Configuration has {len(configuration)} entries, "
                f"catalog has {len(self.tiers)} tiers"
            )
        for name, count in zip(self.names, configuration):
            if count < 0:
                raise ValueError(f"Negative device count {count} for tier {name}")

    def search_space_size(self) -> int:
        """Number of configurations an exhaustive search enumerates."""
        return math.prod(t.max_devices for t in self.tiers)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"tiers": [t.to_dict() for t in self.tiers]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TierCatalog:
        """Deserialize from dictionary."""
        return cls(tuple(TierDescriptor.from_dict(t) for t in data.get("tiers", [])))

    @classmethod
    def default(cls) -> TierCatalog:
        """Create the reference RAM/NVM/SSD/HDD catalog."""
        return cls(
            (
                TierDescriptor("RAM", 64 * GB, 500, 10 * M, 100 * ns, 16),
                TierDescriptor("NVM", 256 * GB, 500, 5 * M, 400 * ns, 8),
                TierDescriptor("SSD", 1 * TB, 500, 500 * K, 100 * us, 16),
                TierDescriptor("HDD", 4 * TB, 200, 100, 10 * ms, 16),
            )
        )
