# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Core types shared across the budgetizer modules.

This module defines the objective selector, the per-configuration score
record and the search outcome returned by the optimizer, together with
the base exception of the package.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

# A device count per tier, in catalog order.
Configuration = tuple[int, ...]


class BudgetizerError(Exception):
    """Base exception for budgetizer input errors."""

    pass


class Objective(str, Enum):
    """Scalar minimized by the search.

    Both objectives are an average time per access; they differ in which
    per-tier figure is weighted by the access fractions.
    """

    THROUGHPUT = "throughput"  # Σ fraction / IOPS
    LATENCY = "latency"  # Σ fraction * latency

    @classmethod
    def from_flag(cls, optimize_throughput: bool) -> Objective:
        """Map the boolean selector used by callers to an objective."""
        return cls.THROUGHPUT if optimize_throughput else cls.LATENCY


class SearchStatus(str, Enum):
    """Outcome of a configuration search."""

    FOUND = "found"
    INFEASIBLE = "infeasible"  # Nothing valid under the budget


@dataclass(frozen=True)
class ScoredResult:
    """A feasible configuration together with its metrics.

    Attributes:
        configuration: Device count per tier.
        cost: Total cost of the configuration.
        access_fractions: Share of all accesses served by each tier.
        time_per_access: Average time per access in seconds under
            ``objective``.
        objective: Objective the time was computed for.
    """

    configuration: Configuration
    cost: float
    access_fractions: tuple[float, ...]
    time_per_access: float
    objective: Objective = Objective.THROUGHPUT

    @property
    def ops_per_second(self) -> float:
        """Effective operations per second (inverse of the average time)."""
        if self.time_per_access == 0:
            return math.inf
        return 1.0 / self.time_per_access

    def is_better_than(self, other: ScoredResult | None) -> bool:
        """Check whether this result should replace ``other`` as the best.

        Lower time wins; equal time is broken by strictly lower cost.
        """
        if other is None:
            return True
        if self.time_per_access < other.time_per_access:
            return True
        return self.time_per_access == other.time_per_access and self.cost < other.cost

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "configuration": list(self.configuration),
            "cost": self.cost,
            "access_fractions": list(self.access_fractions),
            "time_per_access": self.time_per_access,
            "ops_per_second": self.ops_per_second,
            "objective": self.objective.value,
        }


@dataclass(frozen=True)
class SearchResult:
    """Result of one optimizer run.

    ``best`` is ``None`` exactly when ``status`` is
    ``SearchStatus.INFEASIBLE``.

    Attributes:
        status: Whether an affordable feasible configuration was found.
        best: Winning configuration and metrics, if any.
        cost_limit: Exclusive budget the search ran with.
        objective: Objective the search minimized.
        evaluated: Number of configurations enumerated.
        feasible: Number of configurations accepted by the validator.
        affordable: Number of feasible configurations under the budget.
    """

    status: SearchStatus
    best: ScoredResult | None
    cost_limit: float
    objective: Objective
    evaluated: int = 0
    feasible: int = 0
    affordable: int = 0

    @property
    def found(self) -> bool:
        """Check if the search produced a configuration."""
        return self.status == SearchStatus.FOUND

    @classmethod
    def from_best(
        cls,
        best: ScoredResult | None,
        cost_limit: float,
        objective: Objective,
        evaluated: int = 0,
        feasible: int = 0,
        affordable: int = 0,
    ) -> SearchResult:
        """Build a result, deriving the status from ``best``."""
        status = SearchStatus.FOUND if best is not None else SearchStatus.INFEASIBLE
        return cls(
            status=status,
            best=best,
            cost_limit=cost_limit,
            objective=objective,
            evaluated=evaluated,
            feasible=feasible,
            affordable=affordable,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "status": self.status.value,
            "best": self.best.to_dict() if self.best is not None else None,
            "cost_limit": self.cost_limit,
            "objective": self.objective.value,
            "evaluated": self.evaluated,
            "feasible": self.feasible,
            "affordable": self.affordable,
        }
