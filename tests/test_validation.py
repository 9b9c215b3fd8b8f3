"""Tests for request validation and rejection results."""

import pytest

from src.scenario_solver.models import (
    ErrorCode,
    ScenarioRequest,
    ScoringEvent,
    SolveMethod,
    SolverSettings,
)
from src.scenario_solver.orchestrator import calculate_scenario
from src.scenario_solver.validation import (
    CapacityExceededError,
    InvalidInputError,
    NoRemainingEventsError,
    validate_request,
)
from src.vp_tiers.models import PointTier

PEAK = PointTier(43, 32, 21)


# ── Helpers ──────────────────────────────────────────────────────────


def _make_request(num_events=1, order=("red", "blue", "green"), scores=None, **kwargs):
    if scores is None:
        scores = {"red": 1000, "blue": 950, "green": 900}
    return ScenarioRequest(
        current_scores=scores,
        remaining_events=[ScoringEvent(event_id=i, tier=PEAK) for i in range(num_events)],
        desired_order=order,
        **kwargs,
    )


# ── validate_request ─────────────────────────────────────────────────


class TestValidateRequest:
    def setup_method(self):
        self.settings = SolverSettings()

    def test_valid_request_returns_default_margin(self):
        assert validate_request(_make_request(), self.settings) == 1

    def test_explicit_margin_returned(self):
        assert validate_request(_make_request(min_margin=25), self.settings) == 25

    def test_duplicate_team_in_order(self):
        with pytest.raises(InvalidInputError, match="same placement"):
            validate_request(_make_request(order=("red", "red", "green")), self.settings)

    def test_unknown_team_in_order(self):
        with pytest.raises(InvalidInputError, match="unknown teams: purple"):
            validate_request(_make_request(order=("red", "blue", "purple")), self.settings)

    def test_two_team_score_table(self):
        request = _make_request(scores={"red": 1, "blue": 2})
        with pytest.raises(InvalidInputError, match="exactly 3 teams"):
            validate_request(request, self.settings)

    def test_zero_margin_rejected(self):
        with pytest.raises(InvalidInputError, match="min_margin"):
            validate_request(_make_request(min_margin=0), self.settings)

    def test_no_events(self):
        with pytest.raises(NoRemainingEventsError):
            validate_request(_make_request(num_events=0), self.settings)

    def test_event_ceiling_is_inclusive(self):
        assert validate_request(_make_request(num_events=50), self.settings) == 1

    def test_above_ceiling(self):
        with pytest.raises(CapacityExceededError, match="51 remaining skirmishes"):
            validate_request(_make_request(num_events=51), self.settings)

    def test_ceiling_configurable(self):
        settings = SolverSettings(max_events=3)
        with pytest.raises(CapacityExceededError):
            validate_request(_make_request(num_events=4), settings)

    def test_error_codes(self):
        assert InvalidInputError.code is ErrorCode.INVALID_INPUT
        assert NoRemainingEventsError.code is ErrorCode.NO_REMAINING_EVENTS
        assert CapacityExceededError.code is ErrorCode.CAPACITY_EXCEEDED


# ── Rejections from calculate_scenario ───────────────────────────────


class TestRejectedResults:
    def test_no_remaining_events(self, observer):
        result = calculate_scenario(_make_request(num_events=0), observer=observer)

        assert result.feasible is False
        assert result.method is SolveMethod.REJECTED
        assert result.error_code is ErrorCode.NO_REMAINING_EVENTS
        assert result.iterations == 0
        assert observer.events == []

    def test_duplicate_order(self, observer):
        result = calculate_scenario(
            _make_request(order=("red", "blue", "red")), observer=observer
        )

        assert result.method is SolveMethod.REJECTED
        assert result.error_code is ErrorCode.INVALID_INPUT
        assert "same placement" in result.reason
        assert observer.events == []

    def test_capacity(self, observer):
        result = calculate_scenario(_make_request(num_events=51), observer=observer)

        assert result.feasible is False
        assert result.method is SolveMethod.CAPACITY_REJECTED
        assert result.error_code is ErrorCode.CAPACITY_EXCEEDED
        assert observer.events == []


# ── SolverSettings ───────────────────────────────────────────────────


class TestSolverSettings:
    def test_defaults(self):
        settings = SolverSettings()
        assert settings.max_events == 50
        assert settings.dfs_max_iterations == 500_000
        assert settings.optimizer_max_sweeps == 1_000
        assert settings.random_trials == 2_000
        assert settings.default_min_margin == 1

    def test_zero_iterations_rejected(self):
        with pytest.raises(ValueError, match="dfs_max_iterations"):
            SolverSettings(dfs_max_iterations=0)

    def test_zero_random_trials_allowed(self):
        assert SolverSettings(random_trials=0).random_trials == 0

    def test_negative_random_trials_rejected(self):
        with pytest.raises(ValueError, match="random_trials"):
            SolverSettings(random_trials=-5)
