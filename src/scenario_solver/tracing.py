"""Structured trace events emitted by the solver phases.

Solvers never log their progress directly; they hand :class:`TraceEvent`
records to a :class:`SolverObserver`. The default observer forwards them to
the ``logging`` module, tests use :class:`RecordingObserver`.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class TraceEvent:
    phase: str  # "search", "optimize", "random", "seed", "orchestrate"
    iterations: int
    outcome: str
    details: Dict[str, Any] = field(default_factory=dict)


class SolverObserver:
    """Receives trace events. The base implementation discards them."""

    def on_event(self, event: TraceEvent) -> None:
        pass


class LoggingObserver(SolverObserver):
    """Forward trace events to a logger at DEBUG level."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("src.scenario_solver.trace")

    def on_event(self, event: TraceEvent) -> None:
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        extras = ", ".join(f"{k}={v}" for k, v in sorted(event.details.items()))
        self.logger.debug(
            "[%s] %s after %d iterations%s",
            event.phase,
            event.outcome,
            event.iterations,
            f" ({extras})" if extras else "",
        )


class RecordingObserver(SolverObserver):
    """Keep every trace event in memory."""

    def __init__(self):
        self.events: List[TraceEvent] = []

    def on_event(self, event: TraceEvent) -> None:
        self.events.append(event)

    def phases(self) -> List[str]:
        return [event.phase for event in self.events]

    def find(self, phase: str) -> List[TraceEvent]:
        return [event for event in self.events if event.phase == phase]
