"""Branch-and-bound feasibility search.

Depth-first search over the events in order, trying all six placements at
each one. Guarantees:

* if an assignment reaching the desired order exists, it is found;
* if none exists, the search proves it;
* if the iteration cap is hit first, the outcome is ``EXHAUSTED`` and says
  nothing about feasibility.

The walk keeps its own stack of frames, so depth is limited by memory
rather than the interpreter's recursion limit.
"""

from typing import List, Optional

from src.scenario_solver.base import SearchStrategy
from src.scenario_solver.config import DFS_MAX_ITERATIONS
from src.scenario_solver.models import SearchOutcome, SearchStatus
from src.scenario_solver.placements import ALL_PLACEMENTS, LEADER, RUNNER_UP, Placement
from src.scenario_solver.problem import ScenarioProblem, Scores
from src.scenario_solver.tracing import SolverObserver


class _DepthFirstRun:
    """State of a single search; discarded once the search returns."""

    def __init__(self, problem: ScenarioProblem, max_iterations: int):
        self.problem = problem
        self.max_iterations = max_iterations
        self.iterations = 0
        self.exhausted = False
        self.path: List[Placement] = []

        # Try the placements that most widen the leader/runner-up gap first.
        self.branch_orders = [
            sorted(
                ALL_PLACEMENTS,
                key=lambda p, awards=awards: awards[p][RUNNER_UP] - awards[p][LEADER],
            )
            for awards in problem.award_table
        ]

    def _visit(self, index: int, scores: Scores) -> Optional[bool]:
        """Count one node. Returns its verdict, or ``None`` if it needs expanding."""
        self.iterations += 1
        if self.iterations > self.max_iterations:
            self.exhausted = True
            return False

        problem = self.problem
        if index == problem.num_events:
            return problem.is_ordered(scores)

        if not problem.can_still_order(scores, index):
            return False

        return None

    def search(self, scores: Scores) -> bool:
        verdict = self._visit(0, scores)
        if verdict is not None:
            return verdict

        problem = self.problem
        num_branches = len(ALL_PLACEMENTS)

        # Frames are [index, scores, next branch]; self.path holds the
        # placement that led into every frame but the root.
        stack = [[0, scores, 0]]
        while stack:
            frame = stack[-1]
            index, node_scores, cursor = frame
            if cursor == num_branches:
                stack.pop()
                if self.path:
                    self.path.pop()
                continue

            placement = self.branch_orders[index][cursor]
            frame[2] = cursor + 1
            child_scores = problem.apply(node_scores, index, placement)
            self.path.append(placement)

            verdict = self._visit(index + 1, child_scores)
            if verdict is None:
                stack.append([index + 1, child_scores, 0])
                continue
            if verdict:
                return True
            self.path.pop()
            if self.exhausted:
                return False

        return False


class BranchAndBoundSearch(SearchStrategy):
    """Exhaustive, pruned DFS returning a :class:`SearchOutcome`."""

    def __init__(
        self,
        max_iterations: int = DFS_MAX_ITERATIONS,
        observer: Optional[SolverObserver] = None,
    ):
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")
        super().__init__(observer)
        self.max_iterations = max_iterations

    def solve(self, problem: ScenarioProblem) -> SearchOutcome:
        if not problem.can_still_order(problem.initial_scores, 0):
            self._trace("search", 1, SearchStatus.INFEASIBLE.value, root_pruned=True)
            return SearchOutcome(
                status=SearchStatus.INFEASIBLE,
                iterations=1,
                root_pruned=True,
            )

        run = _DepthFirstRun(problem, self.max_iterations)
        found = run.search(problem.initial_scores)

        if found:
            outcome = SearchOutcome(
                status=SearchStatus.FOUND,
                iterations=run.iterations,
                assignment=list(run.path),
            )
        elif run.exhausted:
            outcome = SearchOutcome(
                status=SearchStatus.EXHAUSTED,
                iterations=run.iterations,
            )
        else:
            outcome = SearchOutcome(
                status=SearchStatus.INFEASIBLE,
                iterations=run.iterations,
            )

        self._trace(
            "search",
            outcome.iterations,
            outcome.status.value,
            events=problem.num_events,
            max_iterations=self.max_iterations,
        )
        return outcome
