"""Request validation, run before any search is attempted."""

from src.scenario_solver.models import ErrorCode, ScenarioRequest, SolverSettings


class ScenarioInputError(Exception):
    """Raised when a scenario request cannot be solved as given."""

    code = ErrorCode.INVALID_INPUT


class InvalidInputError(ScenarioInputError):
    """Desired order, score table or margin is malformed."""

    code = ErrorCode.INVALID_INPUT


class NoRemainingEventsError(ScenarioInputError):
    """There are no skirmishes left to assign."""

    code = ErrorCode.NO_REMAINING_EVENTS


class CapacityExceededError(ScenarioInputError):
    """Too many events for an exhaustive search."""

    code = ErrorCode.CAPACITY_EXCEEDED


def resolve_min_margin(request: ScenarioRequest, settings: SolverSettings) -> int:
    if request.min_margin is None:
        return settings.default_min_margin
    return request.min_margin


def validate_request(request: ScenarioRequest, settings: SolverSettings) -> int:
    """Check a request against the solver's input rules.

    Returns:
        The effective minimum margin.

    Raises:
        InvalidInputError: Duplicate or unknown teams in the desired order,
            a score table without exactly three teams, or a margin below 1.
        NoRemainingEventsError: The event list is empty.
        CapacityExceededError: More events than ``settings.max_events``.
    """
    scores = request.current_scores
    if len(scores) != 3:
        raise InvalidInputError(
            f"Expected scores for exactly 3 teams, got {len(scores)}"
        )

    desired = tuple(request.desired_order)
    if len(desired) != 3 or len(set(desired)) != 3:
        raise InvalidInputError(
            "Invalid desired outcome: teams cannot have the same placement."
        )

    unknown = [team for team in desired if team not in scores]
    if unknown:
        raise InvalidInputError(
            f"Desired order names unknown teams: {', '.join(unknown)}"
        )

    min_margin = resolve_min_margin(request, settings)
    if min_margin < 1:
        raise InvalidInputError(f"min_margin must be >= 1, got {min_margin}")

    num_events = len(request.remaining_events)
    if num_events == 0:
        raise NoRemainingEventsError("No remaining skirmishes to optimize.")

    if num_events > settings.max_events:
        raise CapacityExceededError(
            f"{num_events} remaining skirmishes exceeds the limit of "
            f"{settings.max_events} for exhaustive search"
        )

    return min_margin
