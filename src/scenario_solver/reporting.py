"""Tabular and JSON-ready views of a scenario result."""

import logging
from typing import Dict

import pandas as pd

from src.scenario_solver.models import ScenarioResult

logger = logging.getLogger(__name__)


def scenario_table(result: ScenarioResult, current_scores: Dict[str, int]) -> pd.DataFrame:
    """One row per event with ranks, points and running totals per team.

    Columns: ``event_id``, ``start_time``, ``tier_first``, ``tier_second``,
    ``tier_third`` and, for every team, ``{team}_rank``, ``{team}_points``
    and ``{team}_total`` (cumulative score after the event).

    An infeasible result yields an empty DataFrame.
    """
    teams = list(current_scores)
    if not result.feasible or not result.placements:
        columns = ["event_id", "start_time", "tier_first", "tier_second", "tier_third"]
        for team in teams:
            columns += [f"{team}_rank", f"{team}_points", f"{team}_total"]
        return pd.DataFrame(columns=columns)

    rows: list[dict] = []
    for event in result.placements:
        by_rank = {rank: event.points[team] for team, rank in event.ranks.items()}
        row = {
            "event_id": event.event_id,
            "start_time": event.start_time,
            "tier_first": by_rank[1],
            "tier_second": by_rank[2],
            "tier_third": by_rank[3],
        }
        for team in teams:
            row[f"{team}_rank"] = event.ranks[team]
            row[f"{team}_points"] = event.points[team]
        rows.append(row)

    table = pd.DataFrame(rows)
    for team in teams:
        table[f"{team}_total"] = table[f"{team}_points"].cumsum() + current_scores[team]

    logger.debug("Built scenario table: %d events, %d teams", len(table), len(teams))
    return table


def summarize_result(result: ScenarioResult) -> dict:
    """Convert a result to plain JSON-serialisable types."""
    return {
        "feasible": result.feasible,
        "method": result.method.value,
        "exhaustive": result.exhaustive,
        "iterations": result.iterations,
        "final_scores": dict(result.final_scores),
        "margin": result.margin,
        "difficulty": result.difficulty,
        "reason": result.reason,
        "error_code": result.error_code.value if result.error_code else None,
        "required_placements": [
            {
                "event_id": event.event_id,
                "start_time": event.start_time.isoformat() if event.start_time else None,
                "placements": dict(event.ranks),
                "points": dict(event.points),
            }
            for event in result.placements
        ],
    }
