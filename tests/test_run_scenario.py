"""Tests for src.scenario_solver.run_scenario (file-driven solving)."""

import json
import logging

import pandas as pd
import pytest

from src.logging_config import setup_logging
from src.scenario_solver.models import SolveMethod
from src.scenario_solver.run_scenario import load_request, run_scenario

_SCENARIO = {
    "current_scores": {"red": 1000, "blue": 950, "green": 900},
    "desired_order": ["red", "blue", "green"],
    "events": [
        {"id": 1, "start_time": "2025-01-03T00:00:00Z", "region": "na"},
        {"id": 2, "tier": {"first": 19, "second": 16, "third": 13}},
    ],
}


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(_SCENARIO))
    return path


# ── Loading ──────────────────────────────────────────────────────────


class TestLoadRequest:
    def test_scores_and_order(self, scenario_file):
        request = load_request(scenario_file)
        assert request.current_scores == {"red": 1000, "blue": 950, "green": 900}
        assert request.desired_order == ("red", "blue", "green")
        assert request.min_margin is None

    def test_zulu_timestamp_parsed_as_utc(self, scenario_file):
        event = load_request(scenario_file).remaining_events[0]
        assert event.start_time.utcoffset().total_seconds() == 0
        assert event.start_time.hour == 0
        assert event.tier is None

    def test_inline_tier(self, scenario_file):
        event = load_request(scenario_file).remaining_events[1]
        assert event.tier.as_tuple() == (19, 16, 13)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_request(tmp_path / "nope.json")

    def test_missing_scores_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"desired_order": ["red", "blue", "green"]}))
        with pytest.raises(KeyError):
            load_request(path)


# ── Running ──────────────────────────────────────────────────────────


class TestRunScenario:
    def test_solves_without_output(self, scenario_file):
        result = run_scenario(scenario_file)
        assert result.feasible is True
        assert result.method is SolveMethod.EXHAUSTIVE

    def test_writes_json_and_csv(self, scenario_file, tmp_path):
        output = tmp_path / "out" / "result.json"
        result = run_scenario(scenario_file, output)

        with open(output) as f:
            summary = json.load(f)
        assert summary["feasible"] is True
        assert summary["final_scores"] == result.final_scores

        table = pd.read_csv(output.with_suffix(".csv"))
        assert len(table) == 2
        assert list(table["event_id"]) == [1, 2]


class TestSetupLogging:
    def test_creates_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging("DEBUG", log_dir=log_dir)
        assert log_dir.is_dir()

    def test_root_level_follows_requested_level(self, tmp_path, monkeypatch):
        root = logging.getLogger()
        original_level = root.level
        monkeypatch.setattr(root, "handlers", [])

        setup_logging("WARNING", log_dir=tmp_path)
        try:
            assert root.level == logging.WARNING
            assert not root.isEnabledFor(logging.DEBUG)
            assert len(root.handlers) == 2
        finally:
            for handler in root.handlers:
                handler.close()
            root.setLevel(original_level)
