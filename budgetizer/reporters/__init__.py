# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Reporters module."""

from .console import ConsoleReporter

__all__ = [
    "ConsoleReporter",
]
