# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Analytical models for scoring storage configurations."""

from .access import access_fractions
from .cost import configuration_cost
from .performance import (
    average_latency_per_access,
    average_time_per_access,
    time_per_access,
)

__all__ = [
    "access_fractions",
    "configuration_cost",
    "average_latency_per_access",
    "average_time_per_access",
    "time_per_access",
]
