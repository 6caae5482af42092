# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright contributors to the SAGE project

"""Unit tests for budgetizer configuration optimizer."""

import logging
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from budgetizer.config import BudgetizerConfig
from budgetizer.cost_model import access_fractions, configuration_cost, time_per_access
from budgetizer.hierarchy import TierCatalog, TierDescriptor
from budgetizer.hierarchy.units import GB, TB
from budgetizer.search import (
    ConfigurationOptimizer,
    find_best_config,
    is_valid,
    iter_configurations,
)
from budgetizer.types import Objective, SearchStatus
from budgetizer.workload import Workload, WorkloadError


def _brute_force_best(workload, cost_limit, catalog, objective):
    """Minimum over all affordable feasible configurations as (time, cost, config)."""
    candidates = []
    for config in iter_configurations(catalog):
        if not is_valid(config, workload, catalog):
            continue
        cost = configuration_cost(config, catalog)
        if cost >= cost_limit:
            continue
        fractions = access_fractions(workload, config, catalog)
        candidates.append((time_per_access(fractions, catalog, objective), cost, config))
    return min(candidates) if candidates else None


class TestIterConfigurations:
    """Tests for iter_configurations."""

    def test_covers_search_space(self, small_catalog) -> None:
        """Test that every configuration is produced exactly once."""
        configs = list(iter_configurations(small_catalog))
        assert len(configs) == small_catalog.search_space_size()
        assert len(set(configs)) == len(configs)

    def test_order(self, small_catalog) -> None:
        """Test that the last tier varies fastest."""
        configs = iter_configurations(small_catalog)
        assert next(configs) == (0, 0, 0)
        assert next(configs) == (0, 0, 1)

    def test_prefix(self, small_catalog) -> None:
        """Test pinning the leading tiers."""
        configs = list(iter_configurations(small_catalog, (2,)))
        assert len(configs) == 16
        assert all(c[0] == 2 for c in configs)


class TestFindBestConfig:
    """Tests for find_best_config."""

    def test_skewed_workload_small_budget(self, skewed_workload) -> None:
        """Test the best configuration under a $2000 budget."""
        result = find_best_config(skewed_workload, 2000, optimize_throughput=True)
        assert result.status == SearchStatus.FOUND
        best = result.best
        assert best.configuration == (1, 0, 1, 3)
        assert best.cost == 1600
        assert best.cost < 2000
        assert best.configuration[0] >= 1
        assert math.fsum(best.access_fractions) == pytest.approx(1.0)
        assert best.objective == Objective.THROUGHPUT

    def test_idempotent(self, skewed_workload) -> None:
        """Test that repeated searches return identical results."""
        first = find_best_config(skewed_workload, 4000)
        second = find_best_config(skewed_workload, 4000)
        assert first == second

    def test_budget_is_exclusive(self, skewed_workload) -> None:
        """Test that a budget equal to the cheapest feasible cost finds nothing."""
        # One RAM device and three HDDs is the cheapest hierarchy holding 11.1 TB
        result = find_best_config(skewed_workload, 1100)
        assert result.status == SearchStatus.INFEASIBLE
        assert result.best is None
        assert result.feasible > 0
        assert result.affordable == 0

        result = find_best_config(skewed_workload, 1100.5)
        assert result.found
        assert result.best.configuration == (1, 0, 0, 3)

    def test_oversized_workload(self, default_catalog) -> None:
        """Test that a workload no hierarchy can hold is infeasible at any budget."""
        workload = Workload.from_pairs([(1.0, 100 * TB)])
        result = find_best_config(workload, math.inf)
        assert result.status == SearchStatus.INFEASIBLE
        assert result.evaluated == default_catalog.search_space_size()
        assert result.feasible == 0

    def test_latency_objective(self, skewed_workload, default_catalog) -> None:
        """Test optimizing for latency."""
        result = find_best_config(skewed_workload, 4000, optimize_throughput=False)
        assert result.objective == Objective.LATENCY
        best = result.best
        expected = time_per_access(best.access_fractions, default_catalog, Objective.LATENCY)
        assert best.time_per_access == expected

    def test_accepts_pairs(self) -> None:
        """Test passing the workload as plain pairs."""
        result = find_best_config([(1.0, 64 * GB)], 1000)
        assert result.best.configuration == (1, 0, 0, 0)
        assert result.best.access_fractions == (1.0, 0.0, 0.0, 0.0)

    def test_malformed_workload_rejected(self) -> None:
        """Test that workloads are validated before searching."""
        with pytest.raises(WorkloadError):
            find_best_config([(0.5, 64 * GB)], 1000)

    def test_validation_can_be_disabled(self) -> None:
        """Test searching an unnormalized workload when validation is off."""
        config = BudgetizerConfig(validate_workload=False)
        result = find_best_config([(0.5, 64 * GB)], 1000, config=config)
        assert result.best.access_fractions == (0.5, 0.0, 0.0, 0.0)

    def test_nan_budget_rejected(self, skewed_workload) -> None:
        """Test that a NaN budget is an error."""
        with pytest.raises(ValueError, match="NaN"):
            find_best_config(skewed_workload, math.nan)


class TestConfigurationOptimizer:
    """Tests for ConfigurationOptimizer."""

    @pytest.fixture
    def optimizer(self, small_catalog):
        """Create an optimizer over the small catalog."""
        return ConfigurationOptimizer(small_catalog)

    @pytest.mark.parametrize("objective", [Objective.THROUGHPUT, Objective.LATENCY])
    @pytest.mark.parametrize("cost_limit", [15, 25, 40, 1000])
    def test_matches_brute_force(self, optimizer, small_catalog, small_workload, objective, cost_limit) -> None:
        """Test the search against a direct minimum over the search space."""
        result = optimizer.find_best(small_workload, cost_limit, objective)
        expected = _brute_force_best(small_workload, cost_limit, small_catalog, objective)
        if expected is None:
            assert not result.found
            return
        time, cost, config = expected
        assert result.best.time_per_access == time
        assert result.best.cost == cost
        assert result.best.configuration == config

    def test_tie_prefers_cheaper(self) -> None:
        """Test that equal times are broken by lower cost."""
        catalog = TierCatalog(
            (
                TierDescriptor("fast", 100, 10, 1000, 1e-6, 3),
                TierDescriptor("slow", 1000, 1, 10, 1e-3, 3),
            )
        )
        optimizer = ConfigurationOptimizer(catalog)
        # Everything fits in one fast device, so every feasible config ties
        result = optimizer.find_best([(1.0, 50)], 100)
        assert result.best.configuration == (1, 0)
        assert result.best.cost == 10
        assert result.affordable == 6

    def test_default_objective_from_config(self, small_catalog, small_workload) -> None:
        """Test that the configured objective is used when none is passed."""
        optimizer = ConfigurationOptimizer(
            small_catalog, BudgetizerConfig(objective=Objective.LATENCY)
        )
        result = optimizer.find_best(small_workload, 1000)
        assert result.objective == Objective.LATENCY

    def test_sweep(self, optimizer, small_workload) -> None:
        """Test one result per budget, in order."""
        budgets = [1000, 40, 5]
        results = optimizer.sweep(small_workload, budgets)
        assert [r.cost_limit for r in results] == budgets
        assert results[0].found
        assert not results[2].found

    def test_sweep_more_budget_never_slower(self, optimizer, small_workload) -> None:
        """Test that a larger budget never yields a slower configuration."""
        results = optimizer.sweep(small_workload, [15, 20, 30, 50, 1000])
        times = [r.best.time_per_access for r in results if r.found]
        assert times == sorted(times, reverse=True)

    def test_logs_result(self, optimizer, small_workload, caplog) -> None:
        """Test that searches log their outcome."""
        with caplog.at_level(logging.INFO, logger="budgetizer.search.optimizer"):
            optimizer.find_best(small_workload, 1000)
            optimizer.find_best(small_workload, 5)
        messages = [r.getMessage() for r in caplog.records]
        assert any("Best throughput configuration" in m for m in messages)
        assert any("No feasible configuration" in m for m in messages)

    @pytest.mark.asyncio
    async def test_async_matches_sequential(self, optimizer, small_workload) -> None:
        """Test that the fan-out search equals the sequential search."""
        for cost_limit in (5, 25, 1000):
            expected = optimizer.find_best(small_workload, cost_limit)
            result = await optimizer.find_best_async(small_workload, cost_limit)
            assert result == expected

    @pytest.mark.asyncio
    async def test_async_with_executor(self, skewed_workload) -> None:
        """Test the fan-out search with a caller-supplied executor."""
        optimizer = ConfigurationOptimizer()
        with ThreadPoolExecutor(max_workers=4) as executor:
            result = await optimizer.find_best_async(
                skewed_workload, 2000, Objective.THROUGHPUT, executor=executor
            )
        assert result.best.configuration == (1, 0, 1, 3)
        assert result.evaluated == TierCatalog.default().search_space_size()
