"""Relax a feasible assignment toward the minimum-effort margin.

Steepest-improvement hill climbing: each sweep visits every event, tries the
five other placements there and keeps the one with the lowest margin that
still achieves the desired order, if it beats the current margin. Sweeps
repeat until one changes nothing. The result is a local optimum only.
"""

import logging
from typing import Optional, Sequence

from src.scenario_solver.config import OPTIMIZER_MAX_SWEEPS
from src.scenario_solver.models import OptimizationOutcome
from src.scenario_solver.placements import ALL_PLACEMENTS, Placement
from src.scenario_solver.problem import ScenarioProblem
from src.scenario_solver.tracing import SolverObserver, TraceEvent

logger = logging.getLogger(__name__)


class MarginOptimizer:
    """Hill climber shared by the exhaustive and hybrid strategies."""

    def __init__(
        self,
        max_sweeps: int = OPTIMIZER_MAX_SWEEPS,
        observer: Optional[SolverObserver] = None,
    ):
        if max_sweeps < 1:
            raise ValueError(f"max_sweeps must be >= 1, got {max_sweeps}")
        self.max_sweeps = max_sweeps
        self.observer = observer or SolverObserver()

    def optimize(
        self,
        problem: ScenarioProblem,
        assignment: Sequence[Placement],
    ) -> OptimizationOutcome:
        """Lower the margin of *assignment* without breaking the order.

        Args:
            problem: The scenario being solved.
            assignment: A feasible assignment (one placement per event).

        Returns:
            :class:`OptimizationOutcome` whose margin is never greater than
            the margin of *assignment*.

        Raises:
            ValueError: If *assignment* does not achieve the desired order.
        """
        current = list(assignment)
        scores = problem.simulate(current)
        if not problem.is_ordered(scores):
            raise ValueError("Cannot optimize an assignment that misses the desired order")

        margin = problem.margin(scores)
        evaluations = 0
        sweeps = 0
        converged = False

        while sweeps < self.max_sweeps:
            sweeps += 1
            improved = False

            for index, original in enumerate(current):
                base = problem.award_table[index][original]
                best = None

                for candidate in ALL_PLACEMENTS:
                    if candidate is original:
                        continue
                    evaluations += 1
                    award = problem.award_table[index][candidate]
                    trial = (
                        scores[0] - base[0] + award[0],
                        scores[1] - base[1] + award[1],
                        scores[2] - base[2] + award[2],
                    )
                    if not problem.is_ordered(trial):
                        continue
                    trial_margin = problem.margin(trial)
                    if trial_margin < margin and (best is None or trial_margin < best[1]):
                        best = (candidate, trial_margin, trial)

                if best is not None:
                    current[index], margin, scores = best
                    improved = True

            if not improved:
                converged = True
                break

        if not converged:
            logger.warning(
                "Margin optimization stopped after %d sweeps without converging",
                sweeps,
            )

        self.observer.on_event(
            TraceEvent(
                "optimize",
                evaluations,
                "converged" if converged else "sweep_cap",
                {"sweeps": sweeps, "margin": margin},
            )
        )

        return OptimizationOutcome(
            assignment=current,
            margin=margin,
            evaluations=evaluations,
            sweeps=sweeps,
            converged=converged,
        )
