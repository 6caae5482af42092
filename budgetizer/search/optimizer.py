# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Exhaustive configuration search.

The optimizer enumerates every device-count assignment allowed by the
catalog, drops infeasible and over-budget ones, scores the rest and keeps
the best:

    for configuration in product(range(max_0), ..., range(max_n)):
        valid? -> cost < limit? -> access fractions -> time per access

The best configuration has the lowest time per access; among equal
times the cheaper one wins. The search space is the product of the
per-tier device limits, so it is only practical for small catalogs.

Each tier-0 device count spans an independent branch of the search.
``find_best_async`` runs the branches in an executor and reduces the
partial bests in branch order, which yields the same result as the
sequential search.

Example:
    >>> from budgetizer.hierarchy.units import GB, TB
    >>> optimizer = ConfigurationOptimizer()
    >>> workload = Workload.from_pairs([(0.8, 111 * GB), (0.2, 1 * TB)])
    >>> result = optimizer.find_best(workload, cost_limit=4000)
    >>> result.found
    True
"""

from __future__ import annotations

import asyncio
import itertools
import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import Executor, ThreadPoolExecutor

from ..config import BudgetizerConfig
from ..cost_model import access_fractions, configuration_cost, time_per_access
from ..hierarchy.catalog import TierCatalog
from ..types import Configuration, Objective, ScoredResult, SearchResult
from ..workload import Workload
from .validator import is_valid

logger = logging.getLogger(__name__)

WorkloadLike = Workload | Sequence[tuple[float, float]]


def iter_configurations(
    catalog: TierCatalog,
    prefix: Configuration = (),
) -> Iterator[Configuration]:
    """Lazily yield every configuration of the catalog's search space.

    Tier 0 varies slowest and the last tier fastest.

    Args:
        catalog: Tier catalog giving the per-tier device limits.
        prefix: Fixed device counts for the leading tiers.

    Yields:
        Configurations starting with ``prefix``.
    """
    ranges = [range(t.max_devices) for t in catalog.tiers[len(prefix) :]]
    for suffix in itertools.product(*ranges):
        yield prefix + suffix


class ConfigurationOptimizer:
    """Finds the best configuration of a tier catalog under a budget.

    The optimizer holds no search state; every call works on its own
    locals, so one instance can serve concurrent searches.
    """

    def __init__(
        self,
        catalog: TierCatalog | None = None,
        config: BudgetizerConfig | None = None,
    ):
        """Initialize.

        Args:
            catalog: Tiers to search over (defaults to the reference catalog).
            config: Search settings (defaults to ``BudgetizerConfig.default()``).
        """
        self.catalog = catalog or TierCatalog.default()
        self.config = config or BudgetizerConfig.default()

    def prepare_workload(self, workload: WorkloadLike) -> Workload:
        """Convert and validate a caller-supplied workload.

        Raises:
            WorkloadError: If validation is enabled and the workload is
                malformed.
        """
        if not isinstance(workload, Workload):
            workload = Workload.from_pairs(workload)
        if self.config.validate_workload:
            workload.validate(self.config.fraction_tolerance)
        return workload

    def score(
        self,
        configuration: Configuration,
        workload: Workload,
        objective: Objective,
    ) -> ScoredResult:
        """Score a feasible configuration.

        The caller must have checked the configuration with ``is_valid``.
        """
        fractions = access_fractions(workload, configuration, self.catalog)
        return ScoredResult(
            configuration=configuration,
            cost=configuration_cost(configuration, self.catalog),
            access_fractions=fractions,
            time_per_access=time_per_access(fractions, self.catalog, objective),
            objective=objective,
        )

    def find_best(
        self,
        workload: WorkloadLike,
        cost_limit: float,
        objective: Objective | None = None,
    ) -> SearchResult:
        """Search the whole configuration space.

        Args:
            workload: Workload to serve.
            cost_limit: Exclusive upper bound on the total cost.
            objective: Objective to minimize (defaults to the configured one).

        Returns:
            Search result; its status is INFEASIBLE when no feasible
            configuration costs less than ``cost_limit``.
        """
        workload = self.prepare_workload(workload)
        objective = objective or self.config.objective
        self._check_cost_limit(cost_limit)

        result = self._search_branch(workload, cost_limit, objective, ())
        self._log_result(result)
        return result

    async def find_best_async(
        self,
        workload: WorkloadLike,
        cost_limit: float,
        objective: Objective | None = None,
        executor: Executor | None = None,
    ) -> SearchResult:
        """Search with one executor task per tier-0 device count.

        Args:
            workload: Workload to serve.
            cost_limit: Exclusive upper bound on the total cost.
            objective: Objective to minimize (defaults to the configured one).
            executor: Executor for the branches. When omitted, a thread
                pool sized by ``config.max_workers`` is used.

        Returns:
            The same result ``find_best`` returns for these inputs.
        """
        workload = self.prepare_workload(workload)
        objective = objective or self.config.objective
        self._check_cost_limit(cost_limit)

        if executor is None:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                partials = await self._run_branches(workload, cost_limit, objective, pool)
        else:
            partials = await self._run_branches(workload, cost_limit, objective, executor)

        result = self._merge(partials, cost_limit, objective)
        self._log_result(result)
        return result

    def sweep(
        self,
        workload: WorkloadLike,
        budgets: Iterable[float],
        objective: Objective | None = None,
    ) -> list[SearchResult]:
        """Run one search per budget.

        Returns:
            Results in the order of ``budgets``.
        """
        workload = self.prepare_workload(workload)
        return [self.find_best(workload, budget, objective) for budget in budgets]

    async def _run_branches(
        self,
        workload: Workload,
        cost_limit: float,
        objective: Objective,
        executor: Executor,
    ) -> list[SearchResult]:
        loop = asyncio.get_running_loop()
        futures = [
            loop.run_in_executor(
                executor,
                self._search_branch,
                workload,
                cost_limit,
                objective,
                (count,),
            )
            for count in range(self.catalog[0].max_devices)
        ]
        # gather keeps submission order, which the reduction depends on
        return list(await asyncio.gather(*futures))

    def _search_branch(
        self,
        workload: Workload,
        cost_limit: float,
        objective: Objective,
        prefix: Configuration,
    ) -> SearchResult:
        """Search all configurations that start with ``prefix``."""
        best: ScoredResult | None = None
        evaluated = feasible = affordable = 0

        for configuration in iter_configurations(self.catalog, prefix):
            evaluated += 1
            if not is_valid(configuration, workload, self.catalog):
                continue
            feasible += 1

            cost = configuration_cost(configuration, self.catalog)
            if cost >= cost_limit:
                continue
            affordable += 1

            candidate = self.score(configuration, workload, objective)
            if candidate.is_better_than(best):
                logger.debug(
                    f"New best {configuration}: "
                    f"time={candidate.time_per_access:.6g} cost={cost:.2f}"
                )
                best = candidate

        return SearchResult.from_best(
            best,
            cost_limit,
            objective,
            evaluated=evaluated,
            feasible=feasible,
            affordable=affordable,
        )

    @staticmethod
    def _merge(
        partials: Sequence[SearchResult],
        cost_limit: float,
        objective: Objective,
    ) -> SearchResult:
        """Reduce per-branch results, preserving the sequential tie-break."""
        best: ScoredResult | None = None
        for partial in partials:
            if partial.best is not None and partial.best.is_better_than(best):
                best = partial.best
        return SearchResult.from_best(
            best,
            cost_limit,
            objective,
            evaluated=sum(p.evaluated for p in partials),
            feasible=sum(p.feasible for p in partials),
            affordable=sum(p.affordable for p in partials),
        )

    @staticmethod
    def _check_cost_limit(cost_limit: float) -> None:
        if math.isnan(cost_limit):
            raise ValueError("cost_limit must be a number, got NaN")

    def _log_result(self, result: SearchResult) -> None:
        if result.best is None:
            logger.warning(
                f"No feasible configuration under ${result.cost_limit:g} "
                f"({result.objective.value}); {result.feasible} feasible, "
                f"{result.affordable} affordable of {result.evaluated}"
            )
            return
        logger.info(
            f"Best {result.objective.value} configuration under ${result.cost_limit:g}: "
            f"{dict(zip(self.catalog.names, result.best.configuration))} "
            f"cost=${result.best.cost:g} ops/s={result.best.ops_per_second:.6g} "
            f"({result.affordable} affordable of {result.evaluated})"
        )


def find_best_config(
    workload: WorkloadLike,
    cost_limit: float,
    optimize_throughput: bool = True,
    catalog: TierCatalog | None = None,
    config: BudgetizerConfig | None = None,
) -> SearchResult:
    """Find the best configuration for a workload under a budget.

    Args:
        workload: Workload, or ``(fraction, size_bytes)`` pairs.
        cost_limit: Exclusive upper bound on the total cost.
        optimize_throughput: Minimize inverse throughput when True,
            latency otherwise.
        catalog: Tiers to search over (defaults to the reference catalog).
        config: Search settings.

    Returns:
        Search result with the winning configuration, or an INFEASIBLE
        result when nothing fits the budget.
    """
    optimizer = ConfigurationOptimizer(catalog, config)
    return optimizer.find_best(workload, cost_limit, Objective.from_flag(optimize_throughput))
