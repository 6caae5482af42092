# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Console reporter for search results."""

from __future__ import annotations

from collections.abc import Iterable

from ..hierarchy.catalog import TierCatalog
from ..hierarchy.units import format_capacity
from ..types import SearchResult


class ConsoleReporter:
    """Renders search results as plain text.

    Formatting never changes a result; ``format_*`` methods return the
    text and ``report*`` methods print it.

    Example:
        >>> reporter = ConsoleReporter(TierCatalog.default())
        >>> reporter.report(result)  # doctest: +SKIP
        ops/s: ... (throughput)
        RAM 64 GB ($500): ...
        totalCost: $1600
    """

    def __init__(self, catalog: TierCatalog | None = None):
        """Initialize reporter.

        Args:
            catalog: Catalog the reported configurations index into.
        """
        self.catalog = catalog or TierCatalog.default()

    def format_result(self, result: SearchResult) -> str:
        """Render one search result.

        Raises:
            ValueError: If the result's configuration does not match the
                reporter's catalog.
        """
        if result.best is None:
            return f"no configuration under ${result.cost_limit:g} ({result.objective.value})"

        best = result.best
        self.catalog.check_configuration(best.configuration)
        lines = [f"ops/s: {best.ops_per_second:g} ({result.objective.value})"]
        for t, tier in enumerate(self.catalog):
            capacity = format_capacity(self.catalog.capacity_of(best.configuration, t))
            cost = self.catalog.cost_of(best.configuration, t)
            lines.append(f"{tier.name} {capacity} (${cost:g}): {best.access_fractions[t]:g}")
        lines.append(f"totalCost: ${best.cost:g}")
        return "\n".join(lines)

    def format_sweep(self, results: Iterable[SearchResult]) -> str:
        """Render a budget sweep, one block per budget."""
        blocks = [
            f"---\ncost budget ${result.cost_limit:g}\n{self.format_result(result)}\n"
            for result in results
        ]
        return "\n".join(blocks)

    def report(self, result: SearchResult) -> None:
        """Print one search result."""
        print(self.format_result(result))
        print()

    def report_sweep(self, results: Iterable[SearchResult]) -> None:
        """Print a budget sweep."""
        print(self.format_sweep(results))
