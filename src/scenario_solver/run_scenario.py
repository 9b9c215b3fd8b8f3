"""Solve a VP scenario described in a JSON file.

Usage:
    python -m src.scenario_solver.run_scenario <scenario.json> [output.json]

The scenario file looks like::

    {
        "current_scores": {"red": 1000, "blue": 950, "green": 900},
        "desired_order": ["green", "blue", "red"],
        "min_margin": 1,
        "events": [
            {"id": 1, "start_time": "2025-01-03T00:00:00Z", "region": "na"},
            {"id": 2, "tier": {"first": 43, "second": 32, "third": 21}}
        ]
    }

When an output path is given the JSON summary is written there and the
per-event table next to it as CSV.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from src.logging_config import setup_logging
from src.scenario_solver.models import ScenarioRequest, ScenarioResult, ScoringEvent
from src.scenario_solver.orchestrator import calculate_scenario
from src.scenario_solver.reporting import scenario_table, summarize_result
from src.vp_tiers.models import PointTier

logger = logging.getLogger(__name__)


def _parse_time(value):
    """Parse an ISO timestamp, accepting a trailing ``Z`` for UTC."""
    if value is None:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _event_from_dict(raw: dict) -> ScoringEvent:
    tier = raw.get("tier")
    return ScoringEvent(
        event_id=int(raw["id"]),
        start_time=_parse_time(raw.get("start_time")),
        region=raw.get("region"),
        tier=PointTier(tier["first"], tier["second"], tier["third"]) if tier else None,
    )


def load_request(path: Path) -> ScenarioRequest:
    """Read a scenario JSON file into a :class:`ScenarioRequest`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        KeyError: If a required key is missing.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return ScenarioRequest(
        current_scores={team: int(vp) for team, vp in data["current_scores"].items()},
        remaining_events=[_event_from_dict(raw) for raw in data.get("events", [])],
        desired_order=tuple(data["desired_order"]),
        min_margin=data.get("min_margin"),
    )


def run_scenario(scenario_file: Path, output_file: Path | None = None) -> ScenarioResult:
    """Load, solve and optionally write out a scenario.

    Args:
        scenario_file: JSON scenario description.
        output_file: Where to write the JSON summary. The CSV table goes
            to the same path with a ``.csv`` suffix.

    Returns:
        The :class:`ScenarioResult`.
    """
    logger.info("Loading scenario from %s", scenario_file)
    request = load_request(scenario_file)
    result = calculate_scenario(request)

    if output_file is not None:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(summarize_result(result), f, indent=2)

        table = scenario_table(result, request.current_scores)
        csv_file = output_file.with_suffix(".csv")
        table.to_csv(csv_file, index=False)
        logger.info("Wrote %s and %s", output_file, csv_file)

    return result


def _print_summary(result: ScenarioResult) -> None:
    if not result.feasible:
        print(f"Not achievable ({result.method.value}): {result.reason}")
        return

    standings = sorted(result.final_scores.items(), key=lambda kv: kv[1], reverse=True)
    print(
        f"Achievable ({result.method.value}, {result.difficulty}), "
        f"margin {result.margin}"
    )
    print("  Final: " + ", ".join(f"{team}={vp}" for team, vp in standings))
    for event in result.placements:
        order = sorted(event.ranks, key=event.ranks.get)
        print(f"  Skirmish {event.event_id}: " + " > ".join(order))


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    scenario_path = Path(sys.argv[1])
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        outcome = run_scenario(scenario_path, output_path)
        _print_summary(outcome)
    except Exception:
        logger.exception("Scenario run failed")
        sys.exit(1)
