"""Data models for the VP scenario solver."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from src.scenario_solver.config import (
    DEFAULT_MIN_MARGIN,
    DFS_MAX_ITERATIONS,
    MAX_EVENTS,
    OPTIMIZER_MAX_SWEEPS,
    RANDOM_TRIALS,
)
from src.scenario_solver.placements import Placement
from src.vp_tiers.models import PointTier


class SolveMethod(str, Enum):
    """How a scenario result was reached."""

    EXHAUSTIVE = "exhaustive"
    RANDOMIZED = "randomized"
    DETERMINISTIC_SEED = "deterministic-seed"
    PROVEN_INFEASIBLE = "proven-infeasible"
    TIMEOUT = "timeout"
    REJECTED = "rejected"
    CAPACITY_REJECTED = "capacity-rejected"
    ERROR = "error"


class ErrorCode(str, Enum):
    INVALID_INPUT = "invalid_input"
    NO_REMAINING_EVENTS = "no_remaining_events"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    SEARCH_TIMEOUT = "search_timeout"
    PROVEN_INFEASIBLE = "proven_infeasible"
    INTERNAL_ERROR = "internal_error"


class SearchStatus(str, Enum):
    """Outcome of the branch-and-bound search."""

    FOUND = "found"
    INFEASIBLE = "infeasible"  # proof: no assignment exists
    EXHAUSTED = "exhausted"  # iteration cap hit, inconclusive


@dataclass
class SolverSettings:
    """Tunable limits for a single solve."""

    max_events: int = MAX_EVENTS
    dfs_max_iterations: int = DFS_MAX_ITERATIONS
    optimizer_max_sweeps: int = OPTIMIZER_MAX_SWEEPS
    random_trials: int = RANDOM_TRIALS
    default_min_margin: int = DEFAULT_MIN_MARGIN

    def __post_init__(self):
        for name in (
            "max_events",
            "dfs_max_iterations",
            "optimizer_max_sweeps",
            "default_min_margin",
        ):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        if self.random_trials < 0:
            raise ValueError(f"random_trials must be >= 0, got {self.random_trials}")


@dataclass
class ScoringEvent:
    """One remaining skirmish.

    ``tier`` may be left as ``None`` and resolved from ``start_time`` and
    ``region`` through a tier lookup before solving.
    """

    event_id: int
    start_time: Optional[datetime] = None
    region: Optional[str] = None
    tier: Optional[PointTier] = None


@dataclass
class ScenarioRequest:
    """Caller input: current standings, remaining skirmishes, target order."""

    current_scores: Dict[str, int]
    remaining_events: List[ScoringEvent]
    desired_order: Tuple[str, str, str]
    min_margin: Optional[int] = None


@dataclass
class SearchOutcome:
    """Result of the branch-and-bound feasibility search."""

    status: SearchStatus
    iterations: int
    assignment: Optional[List[Placement]] = None
    root_pruned: bool = False  # bound already failed before any branching


@dataclass
class OptimizationOutcome:
    """Result of relaxing a feasible assignment toward minimum margin."""

    assignment: List[Placement]
    margin: int
    evaluations: int
    sweeps: int
    converged: bool


@dataclass
class HybridOutcome:
    """Result of the random + greedy strategy."""

    found: bool
    iterations: int
    method: Optional[SolveMethod] = None  # RANDOMIZED or DETERMINISTIC_SEED
    assignment: Optional[List[Placement]] = None
    margin: Optional[int] = None
    seed_failed: bool = False  # max catch-up seed evaluated and failed


@dataclass
class EventPlacement:
    """Per-team ranks and points for one event of a scenario."""

    event_id: int
    start_time: Optional[datetime]
    ranks: Dict[str, int]
    points: Dict[str, int]


@dataclass
class ScenarioResult:
    """Outcome returned to callers of :func:`calculate_scenario`."""

    feasible: bool
    method: SolveMethod
    iterations: int = 0
    final_scores: Dict[str, int] = field(default_factory=dict)
    margin: Optional[int] = None
    assignment: List[Placement] = field(default_factory=list)
    placements: List[EventPlacement] = field(default_factory=list)
    exhaustive: bool = False
    difficulty: Optional[str] = None
    reason: Optional[str] = None
    error_code: Optional[ErrorCode] = None
