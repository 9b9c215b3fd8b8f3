"""Scenario orchestrator - validates input and runs strategies in order.

Waterfall:

1. Branch-and-bound search. A proof of infeasibility ends the solve; a found
   assignment is relaxed by the margin optimizer.
2. Only when the search runs out of iterations does the hybrid strategy run,
   and its answers are marked non-exhaustive. The hybrid strategy never
   declares a scenario impossible.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

from src.scenario_solver.config import DIFFICULTY_THRESHOLDS, HARDEST_DIFFICULTY
from src.scenario_solver.feasibility_search import BranchAndBoundSearch
from src.scenario_solver.hybrid_strategy import HybridStrategy
from src.scenario_solver.margin_optimizer import MarginOptimizer
from src.scenario_solver.models import (
    ErrorCode,
    EventPlacement,
    ScenarioRequest,
    ScenarioResult,
    SearchStatus,
    SolveMethod,
    SolverSettings,
)
from src.scenario_solver.placements import LEADER, Placement
from src.scenario_solver.problem import ScenarioProblem, resolve_event_tiers
from src.scenario_solver.tracing import LoggingObserver, SolverObserver, TraceEvent
from src.scenario_solver.validation import (
    CapacityExceededError,
    ScenarioInputError,
    validate_request,
)
from src.vp_tiers.models import PointTier
from src.vp_tiers.tier_lookup import TierLookup

logger = logging.getLogger(__name__)


def get_current_standings(scores: Dict[str, int]) -> Tuple[str, ...]:
    """Team ids ordered by score, highest first (ties keep input order)."""
    return tuple(sorted(scores, key=lambda team: scores[team], reverse=True))


def calculate_difficulty(assignment: Sequence[Placement]) -> str:
    """Label by the share of events the desired leader must win outright."""
    if not assignment:
        return DIFFICULTY_THRESHOLDS[0][1]
    wins = sum(1 for placement in assignment if placement.rank_of(LEADER) == 1)
    share = wins / len(assignment)
    for threshold, label in DIFFICULTY_THRESHOLDS:
        if share <= threshold:
            return label
    return HARDEST_DIFFICULTY


class ScenarioSolver:
    """Single entry point for VP scenario questions.

    Every call builds its own problem, search, optimizer and random number
    generator, so one solver instance can serve concurrent callers. With a
    *seed* each call samples the same sequence; without one it draws fresh
    entropy per call.
    """

    def __init__(
        self,
        settings: Optional[SolverSettings] = None,
        observer: Optional[SolverObserver] = None,
        tier_lookup: Optional[TierLookup] = None,
        seed: Optional[int] = None,
    ):
        self.settings = settings or SolverSettings()
        self.observer = observer or LoggingObserver()
        self.tier_lookup = tier_lookup
        self.seed = seed

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def solve(self, request: ScenarioRequest) -> ScenarioResult:
        """Decide whether the desired order is reachable and at what cost.

        Never raises: validation failures and unexpected errors come back as
        infeasible results carrying an :class:`ErrorCode`.
        """
        try:
            min_margin = validate_request(request, self.settings)
        except CapacityExceededError as e:
            logger.warning("Scenario rejected: %s", e)
            return self._rejection(SolveMethod.CAPACITY_REJECTED, e)
        except ScenarioInputError as e:
            logger.warning("Scenario rejected: %s", e)
            return self._rejection(SolveMethod.REJECTED, e)

        try:
            return self._run_waterfall(request, min_margin)
        except Exception as e:
            logger.exception("Scenario solver failed")
            return ScenarioResult(
                feasible=False,
                method=SolveMethod.ERROR,
                reason=f"Solver error: {e}",
                error_code=ErrorCode.INTERNAL_ERROR,
            )

    # ------------------------------------------------------------------
    # Waterfall
    # ------------------------------------------------------------------

    def _run_waterfall(self, request: ScenarioRequest, min_margin: int) -> ScenarioResult:
        desired = tuple(request.desired_order)
        tiers = resolve_event_tiers(request.remaining_events, self.tier_lookup)
        problem = ScenarioProblem.from_team_scores(
            request.current_scores, desired, tiers, min_margin=min_margin
        )
        optimizer = MarginOptimizer(self.settings.optimizer_max_sweeps, self.observer)

        logger.info(
            "Solving %s > %s > %s over %d skirmishes (min margin %d)",
            desired[0], desired[1], desired[2], problem.num_events, min_margin,
        )

        search = BranchAndBoundSearch(self.settings.dfs_max_iterations, self.observer)
        outcome = search.solve(problem)

        if outcome.status is SearchStatus.INFEASIBLE:
            logger.info("Scenario proven infeasible after %d iterations", outcome.iterations)
            return ScenarioResult(
                feasible=False,
                method=SolveMethod.PROVEN_INFEASIBLE,
                iterations=outcome.iterations,
                exhaustive=True,
                reason=self._infeasible_reason(problem, desired, outcome.root_pruned),
                error_code=ErrorCode.PROVEN_INFEASIBLE,
            )

        if outcome.status is SearchStatus.FOUND:
            refined = optimizer.optimize(problem, outcome.assignment)
            logger.info(
                "Exhaustive search found a scenario (margin %d, %d iterations)",
                refined.margin, outcome.iterations,
            )
            return self._feasible_result(
                request,
                problem,
                tiers,
                refined.assignment,
                SolveMethod.EXHAUSTIVE,
                outcome.iterations + refined.evaluations,
                exhaustive=True,
            )

        logger.warning(
            "Exhaustive search gave up after %d iterations, trying hybrid strategy",
            outcome.iterations,
        )
        hybrid = HybridStrategy(
            self.settings.random_trials,
            optimizer=optimizer,
            rng=random.Random(self.seed),
            observer=self.observer,
        )
        hybrid_outcome = hybrid.solve(problem)
        iterations = outcome.iterations + hybrid_outcome.iterations

        if not hybrid_outcome.found:
            self.observer.on_event(
                TraceEvent("orchestrate", iterations, "timeout",
                           {"seed_failed": hybrid_outcome.seed_failed})
            )
            return ScenarioResult(
                feasible=False,
                method=SolveMethod.TIMEOUT,
                iterations=iterations,
                reason=(
                    "Could not determine whether the outcome is achievable within "
                    f"{self.settings.dfs_max_iterations} search iterations; "
                    "random sampling and the maximum catch-up scenario found "
                    "no valid placements."
                ),
                error_code=ErrorCode.SEARCH_TIMEOUT,
            )

        logger.info(
            "Hybrid strategy found a scenario via %s (margin %d)",
            hybrid_outcome.method.value, hybrid_outcome.margin,
        )
        return self._feasible_result(
            request,
            problem,
            tiers,
            hybrid_outcome.assignment,
            hybrid_outcome.method,
            iterations,
            exhaustive=False,
        )

    # ------------------------------------------------------------------
    # Result shaping
    # ------------------------------------------------------------------

    def _feasible_result(
        self,
        request: ScenarioRequest,
        problem: ScenarioProblem,
        tiers: List[PointTier],
        assignment: List[Placement],
        method: SolveMethod,
        iterations: int,
        exhaustive: bool,
    ) -> ScenarioResult:
        desired = tuple(request.desired_order)
        final = problem.simulate(assignment)
        final_scores = {team: final[slot] for slot, team in enumerate(desired)}

        placements = []
        for event, tier, placement in zip(request.remaining_events, tiers, assignment):
            ranks = placement.ranks
            placements.append(
                EventPlacement(
                    event_id=event.event_id,
                    start_time=event.start_time,
                    ranks={team: ranks[slot] for slot, team in enumerate(desired)},
                    points={
                        team: tier.points_for_rank(ranks[slot])
                        for slot, team in enumerate(desired)
                    },
                )
            )

        return ScenarioResult(
            feasible=True,
            method=method,
            iterations=iterations,
            final_scores=final_scores,
            margin=problem.margin(final),
            assignment=list(assignment),
            placements=placements,
            exhaustive=exhaustive,
            difficulty=calculate_difficulty(assignment),
        )

    @staticmethod
    def _rejection(method: SolveMethod, error: ScenarioInputError) -> ScenarioResult:
        return ScenarioResult(
            feasible=False,
            method=method,
            reason=str(error),
            error_code=error.code,
        )

    @staticmethod
    def _infeasible_reason(
        problem: ScenarioProblem,
        desired: Tuple[str, ...],
        root_pruned: bool,
    ) -> str:
        if not root_pruned:
            return (
                f"No sequence of placements finishes {desired[0]} > {desired[1]} > "
                f"{desired[2]}; every branch of the search was ruled out."
            )

        scores = problem.initial_scores
        swing = problem.max_spread[0]
        for ahead, behind in ((0, 1), (1, 2)):
            needed = scores[behind] - scores[ahead] + problem.min_margin
            if needed > swing:
                return (
                    f"{desired[ahead]} cannot finish ahead of {desired[behind]}: "
                    f"it needs to gain {needed} points but only {swing} are left "
                    "to swing in the remaining skirmishes."
                )
        return "The desired outcome is not mathematically achievable."


def calculate_scenario(
    request: ScenarioRequest,
    settings: Optional[SolverSettings] = None,
    observer: Optional[SolverObserver] = None,
    tier_lookup: Optional[TierLookup] = None,
    seed: Optional[int] = None,
) -> ScenarioResult:
    """Convenience wrapper around :meth:`ScenarioSolver.solve`."""
    solver = ScenarioSolver(settings, observer, tier_lookup, seed)
    return solver.solve(request)
