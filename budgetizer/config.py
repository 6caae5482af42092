# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Configuration for configuration searches."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .types import Objective
from .workload import DEFAULT_FRACTION_TOLERANCE


@dataclass
class BudgetizerConfig:
    """Search settings.

    Attributes:
        objective: Objective used when a caller does not pick one.
        fraction_tolerance: Allowed deviation of the workload fraction
            sum from 1.
        validate_workload: Whether to reject malformed workloads before
            searching.
        max_workers: Worker count for the executor created by the async
            fan-out; None leaves it to ``concurrent.futures``.
        metadata: Additional caller-defined settings.
    """

    objective: Objective = Objective.THROUGHPUT
    fraction_tolerance: float = DEFAULT_FRACTION_TOLERANCE
    validate_workload: bool = True
    max_workers: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "objective": self.objective.value,
            "fraction_tolerance": self.fraction_tolerance,
            "validate_workload": self.validate_workload,
            "max_workers": self.max_workers,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BudgetizerConfig:
        """Deserialize from dictionary."""
        data = data.copy()
        if "objective" in data and isinstance(data["objective"], str):
            data["objective"] = Objective(data["objective"])
        return cls(**data)

    @classmethod
    def default(cls) -> BudgetizerConfig:
        """Create default configuration."""
        return cls()
