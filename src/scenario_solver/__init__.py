from src.scenario_solver.feasibility_search import BranchAndBoundSearch
from src.scenario_solver.hybrid_strategy import HybridStrategy
from src.scenario_solver.margin_optimizer import MarginOptimizer
from src.scenario_solver.models import (
    ErrorCode,
    EventPlacement,
    ScenarioRequest,
    ScenarioResult,
    ScoringEvent,
    SearchStatus,
    SolveMethod,
    SolverSettings,
)
from src.scenario_solver.orchestrator import (
    ScenarioSolver,
    calculate_difficulty,
    calculate_scenario,
    get_current_standings,
)
from src.scenario_solver.placements import Placement
from src.scenario_solver.problem import ScenarioProblem
from src.scenario_solver.validation import (
    CapacityExceededError,
    InvalidInputError,
    NoRemainingEventsError,
    ScenarioInputError,
)

__all__ = [
    "BranchAndBoundSearch",
    "CapacityExceededError",
    "ErrorCode",
    "EventPlacement",
    "HybridStrategy",
    "InvalidInputError",
    "MarginOptimizer",
    "NoRemainingEventsError",
    "Placement",
    "ScenarioInputError",
    "ScenarioProblem",
    "ScenarioRequest",
    "ScenarioResult",
    "ScenarioSolver",
    "ScoringEvent",
    "SearchStatus",
    "SolveMethod",
    "SolverSettings",
    "calculate_difficulty",
    "calculate_scenario",
    "get_current_standings",
]
