# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Workload description.

A workload is an ordered list of access groups. Each group says which
share of all accesses goes to a data set of a given size, so the list is
a coarse access-size distribution: hot groups first, cold groups last.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .types import BudgetizerError

DEFAULT_FRACTION_TOLERANCE = 1e-6


class WorkloadError(BudgetizerError, ValueError):
    """Raised when a workload violates its invariants."""

    def __init__(self, message: str, group_index: int | None = None):
        self.group_index = group_index
        super().__init__(message)


@dataclass(frozen=True)
class AccessGroup:
    """A share of accesses hitting a data set of one size.

    Attributes:
        fraction: Fraction of all accesses (0..1).
        size_bytes: Size of the accessed data in bytes.
    """

    fraction: float
    size_bytes: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"fraction": self.fraction, "size_bytes": self.size_bytes}


@dataclass(frozen=True)
class Workload:
    """Ordered sequence of access groups.

    Example:
        >>> from budgetizer.hierarchy.units import GB, TB
        >>> workload = Workload.from_pairs([(0.8, 111 * GB), (0.2, 1 * TB)])
        >>> workload.total_size == 111 * GB + 1 * TB
        True
    """

    groups: tuple[AccessGroup, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", tuple(self.groups))

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[AccessGroup]:
        return iter(self.groups)

    @property
    def total_size(self) -> float:
        """Total data size in bytes (sum of group sizes)."""
        return sum(g.size_bytes for g in self.groups)

    @property
    def total_fraction(self) -> float:
        """Sum of group fractions; 1.0 for a well-formed workload."""
        return math.fsum(g.fraction for g in self.groups)

    def validate(self, tolerance: float = DEFAULT_FRACTION_TOLERANCE) -> None:
        """Check the workload invariants.

        Args:
            tolerance: Allowed absolute deviation of the fraction sum from 1.

        Raises:
            WorkloadError: If the workload is empty, a fraction is outside
                [0, 1], a size is not positive, or the fractions do not
                sum to 1.
        """
        if not self.groups:
            raise WorkloadError("Workload must contain at least one access group")

        for i, group in enumerate(self.groups):
            if not 0.0 <= group.fraction <= 1.0:
                raise WorkloadError(
                    f"Access group {i}: fraction {group.fraction} is outside [0, 1]",
                    group_index=i,
                )
            if not group.size_bytes > 0:
                raise WorkloadError(
                    f"Access group {i}: size must be positive, got {group.size_bytes}",
                    group_index=i,
                )

        total = self.total_fraction
        if abs(total - 1.0) > tolerance:
            raise WorkloadError(f"Access fractions sum to {total}, expected 1.0")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"groups": [g.to_dict() for g in self.groups]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Workload:
        """Deserialize from dictionary."""
        return cls(tuple(AccessGroup(**g) for g in data.get("groups", [])))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> Workload:
        """Create a workload from ``(fraction, size_bytes)`` pairs."""
        return cls(tuple(AccessGroup(fraction, size) for fraction, size in pairs))
