"""Base interface for scenario search strategies."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from src.scenario_solver.tracing import SolverObserver, TraceEvent

if TYPE_CHECKING:
    from src.scenario_solver.problem import ScenarioProblem


class SearchStrategy(ABC):
    """Abstract base class for all scenario search strategies."""

    def __init__(self, observer: Optional[SolverObserver] = None):
        self.observer = observer or SolverObserver()

    @abstractmethod
    def solve(self, problem: "ScenarioProblem"):
        """Search *problem* for an assignment achieving the desired order."""

    def _trace(self, phase: str, iterations: int, outcome: str, **details) -> None:
        self.observer.on_event(TraceEvent(phase, iterations, outcome, details))
