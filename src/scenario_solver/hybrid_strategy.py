"""Random + greedy scenario strategy.

A cheaper, non-exhaustive alternative to the branch-and-bound search:

1. **Random sampling** — independent uniformly random assignments; the
   lowest-margin one that reaches the desired order is kept.
2. **Maximum catch-up seed** — when sampling finds nothing, the leader is
   given every win and the runner-up every last place.
3. **Refinement** — whichever seed worked is relaxed by the
   :class:`MarginOptimizer`.

Failure here only means "not found". The seed maximises the leader's gain on
the runner-up but not the runner-up's gain on the trailer, so it is no proof
of impossibility.
"""

import random
from typing import List, Optional

from src.scenario_solver.base import SearchStrategy
from src.scenario_solver.config import RANDOM_TRIALS
from src.scenario_solver.margin_optimizer import MarginOptimizer
from src.scenario_solver.models import HybridOutcome, SolveMethod
from src.scenario_solver.placements import ALL_PLACEMENTS, Placement
from src.scenario_solver.problem import ScenarioProblem
from src.scenario_solver.tracing import SolverObserver


class HybridStrategy(SearchStrategy):
    """Random sampling, then the catch-up seed, then hill climbing."""

    def __init__(
        self,
        random_trials: int = RANDOM_TRIALS,
        optimizer: Optional[MarginOptimizer] = None,
        rng: Optional[random.Random] = None,
        observer: Optional[SolverObserver] = None,
    ):
        if random_trials < 0:
            raise ValueError(f"random_trials must be >= 0, got {random_trials}")
        super().__init__(observer)
        self.random_trials = random_trials
        self.optimizer = optimizer or MarginOptimizer(observer=self.observer)
        self.rng = rng

    def solve(self, problem: ScenarioProblem) -> HybridOutcome:
        rng = self.rng or random.Random()
        iterations = 0

        best: Optional[List[Placement]] = None
        best_margin: Optional[int] = None
        for _ in range(self.random_trials):
            iterations += 1
            assignment = [rng.choice(ALL_PLACEMENTS) for _ in range(problem.num_events)]
            margin = problem.gap(assignment)
            if margin is not None and (best_margin is None or margin < best_margin):
                best, best_margin = assignment, margin

        self._trace(
            "random",
            iterations,
            "found" if best is not None else "not_found",
            trials=self.random_trials,
            margin=best_margin,
        )

        method = SolveMethod.RANDOMIZED
        if best is None:
            seed = problem.max_catchup_assignment()
            iterations += 1
            seed_margin = problem.gap(seed)
            self._trace(
                "seed",
                iterations,
                "found" if seed_margin is not None else "not_found",
                margin=seed_margin,
            )
            if seed_margin is None:
                return HybridOutcome(found=False, iterations=iterations, seed_failed=True)
            best, method = seed, SolveMethod.DETERMINISTIC_SEED

        refined = self.optimizer.optimize(problem, best)
        iterations += refined.evaluations

        return HybridOutcome(
            found=True,
            iterations=iterations,
            method=method,
            assignment=refined.assignment,
            margin=refined.margin,
        )
