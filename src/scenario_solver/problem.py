"""Scenario problem model shared by every search strategy.

Scores inside the solver are always indexed by desired slot
``(leader, runner-up, trailer)`` rather than by team id, so the goal is
simply ``s[0] > s[1] > s[2]`` with at least ``min_margin`` between
neighbours.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from src.scenario_solver.placements import ALL_PLACEMENTS, MAX_CATCHUP, Placement
from src.scenario_solver.models import ScoringEvent
from src.vp_tiers.models import PointTier
from src.vp_tiers.tier_lookup import TierLookup, get_tier_for_time

Scores = Tuple[int, int, int]


def resolve_event_tiers(
    events: Sequence[ScoringEvent],
    tier_lookup: Optional[TierLookup] = None,
) -> List[PointTier]:
    """Return the point tier of every event, in event order.

    Events that already carry a tier keep it; the rest are resolved via
    *tier_lookup* (default: the built-in VP schedule).

    Raises:
        ValueError: If an event has neither a tier nor a start time and
            region to look one up with.
    """
    lookup = tier_lookup or get_tier_for_time
    tiers = []
    for event in events:
        if event.tier is not None:
            tiers.append(event.tier)
            continue
        if event.start_time is None or event.region is None:
            raise ValueError(
                f"Event {event.event_id} has no tier and no start_time/region "
                "to resolve one from"
            )
        tiers.append(lookup(event.start_time, event.region))
    return tiers


class ScenarioProblem:
    """Immutable description of one solve: start scores, tiers, margin."""

    def __init__(
        self,
        initial_scores: Sequence[int],
        tiers: Sequence[PointTier],
        min_margin: int = 1,
    ):
        if len(initial_scores) != 3:
            raise ValueError(
                f"initial_scores must hold 3 values, got {len(initial_scores)}"
            )
        self.initial_scores: Scores = tuple(int(s) for s in initial_scores)
        self.tiers = list(tiers)
        self.min_margin = min_margin

        # Points per slot for every (event, placement) pair.
        self.award_table: List[Dict[Placement, Scores]] = [
            {placement: placement.points(tier) for placement in ALL_PLACEMENTS}
            for tier in self.tiers
        ]

        # max_spread[i]: most one team can gain on another from event i onward.
        self.max_spread = [0] * (len(self.tiers) + 1)
        for i in range(len(self.tiers) - 1, -1, -1):
            self.max_spread[i] = self.max_spread[i + 1] + self.tiers[i].spread

    @classmethod
    def from_team_scores(
        cls,
        current_scores: Dict[str, int],
        desired_order: Sequence[str],
        tiers: Sequence[PointTier],
        min_margin: int = 1,
    ) -> "ScenarioProblem":
        """Build a problem from team-keyed scores and a desired order."""
        return cls(
            [current_scores[team] for team in desired_order],
            tiers,
            min_margin=min_margin,
        )

    @property
    def num_events(self) -> int:
        return len(self.tiers)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def apply(self, scores: Scores, index: int, placement: Placement) -> Scores:
        """Scores after awarding event *index* according to *placement*."""
        a, b, c = self.award_table[index][placement]
        return (scores[0] + a, scores[1] + b, scores[2] + c)

    def simulate(self, assignment: Sequence[Placement]) -> Scores:
        """Final scores produced by a full assignment."""
        if len(assignment) != self.num_events:
            raise ValueError(
                f"Assignment covers {len(assignment)} events, "
                f"expected {self.num_events}"
            )
        scores = self.initial_scores
        for index, placement in enumerate(assignment):
            scores = self.apply(scores, index, placement)
        return scores

    def is_ordered(self, scores: Scores) -> bool:
        """True when leader > runner-up > trailer by at least min_margin."""
        return (
            scores[0] - scores[1] >= self.min_margin
            and scores[1] - scores[2] >= self.min_margin
        )

    @staticmethod
    def margin(scores: Scores) -> int:
        return (scores[0] - scores[1]) + (scores[1] - scores[2])

    def gap(self, assignment: Sequence[Placement]) -> Optional[int]:
        """Margin of *assignment*, or ``None`` if the order is not achieved."""
        scores = self.simulate(assignment)
        if self.is_ordered(scores):
            return self.margin(scores)
        return None

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def can_still_order(self, scores: Scores, index: int) -> bool:
        """Upper bound check from event *index* onward.

        No event separates two teams by more than its own first-minus-third
        spread, so if even the whole remaining spread cannot open the
        required gap for either neighbouring pair the branch is dead.
        """
        remaining = self.max_spread[index]
        if scores[0] + remaining - scores[1] < self.min_margin:
            return False
        if scores[1] + remaining - scores[2] < self.min_margin:
            return False
        return True

    def max_catchup_assignment(self) -> List[Placement]:
        """Leader wins and runner-up finishes last in every event."""
        return [MAX_CATCHUP] * self.num_events
