"""Tests for the random + greedy hybrid strategy."""

import random

import pytest

from src.scenario_solver.hybrid_strategy import HybridStrategy
from src.scenario_solver.margin_optimizer import MarginOptimizer
from src.scenario_solver.models import SolveMethod
from src.scenario_solver.problem import ScenarioProblem


class TestHybridInit:
    def test_negative_trials_raise(self):
        with pytest.raises(ValueError, match="random_trials"):
            HybridStrategy(random_trials=-1)

    def test_default_trials(self):
        assert HybridStrategy().random_trials == 2000


class TestRandomPhase:
    def test_random_phase_finds_easy_scenario(self, peak_tier, rng):
        problem = ScenarioProblem((0, 0, 0), [peak_tier] * 6)
        outcome = HybridStrategy(random_trials=500, rng=rng).solve(problem)

        assert outcome.found is True
        assert outcome.method is SolveMethod.RANDOMIZED
        assert problem.gap(outcome.assignment) == outcome.margin

    def test_iterations_include_trials_and_refinement(self, peak_tier, rng):
        problem = ScenarioProblem((0, 0, 0), [peak_tier] * 6)
        outcome = HybridStrategy(random_trials=500, rng=rng).solve(problem)

        assert outcome.iterations > 500

    def test_same_seed_same_answer(self, peak_tier):
        problem = ScenarioProblem((0, 0, 0), [peak_tier] * 6)
        first = HybridStrategy(random_trials=200, rng=random.Random(7)).solve(problem)
        second = HybridStrategy(random_trials=200, rng=random.Random(7)).solve(problem)

        assert first.assignment == second.assignment
        assert first.margin == second.margin


class TestDeterministicSeed:
    def test_seed_used_when_sampling_skipped(self, peak_tier):
        # Max catch-up: 215 / 205 / 160
        problem = ScenarioProblem((0, 100, 0), [peak_tier] * 5)
        outcome = HybridStrategy(random_trials=0).solve(problem)

        assert outcome.found is True
        assert outcome.method is SolveMethod.DETERMINISTIC_SEED
        seed_margin = problem.gap(problem.max_catchup_assignment())
        assert outcome.margin <= seed_margin
        assert problem.is_ordered(problem.simulate(outcome.assignment))

    def test_seed_failure_reports_not_found(self, peak_tier):
        # Feasible (leader wins, runner-up second every time) but the
        # max catch-up seed drops the runner-up below the trailer.
        problem = ScenarioProblem((0, 0, 0), [peak_tier] * 10)
        outcome = HybridStrategy(random_trials=0).solve(problem)

        assert outcome.found is False
        assert outcome.seed_failed is True
        assert outcome.method is None
        assert outcome.assignment is None
        assert outcome.iterations == 1

    def test_shared_optimizer_used(self, peak_tier, observer):
        optimizer = MarginOptimizer(max_sweeps=3, observer=observer)
        problem = ScenarioProblem((0, 100, 0), [peak_tier] * 5)
        HybridStrategy(random_trials=0, optimizer=optimizer, observer=observer).solve(problem)

        assert observer.phases() == ["random", "seed", "optimize"]
