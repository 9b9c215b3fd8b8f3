"""The six ways three teams can finish a single skirmish.

Teams are referred to by their *desired* slot rather than by colour:

* **leader** — the team that should finish the match 1st
* **runner-up** — the team that should finish 2nd
* **trailer** — the team that should finish 3rd

Each :class:`Placement` names the finishing order for one skirmish, e.g.
``LEADER_TRAILER_RUNNER`` means the leader takes 1st, the trailer 2nd and
the runner-up 3rd.
"""

from enum import Enum
from typing import Tuple

from src.vp_tiers.models import PointTier

LEADER = 0
RUNNER_UP = 1
TRAILER = 2

SLOTS = (LEADER, RUNNER_UP, TRAILER)


class Placement(Enum):
    """Finishing order of one skirmish, as a tuple of desired slots."""

    LEADER_RUNNER_TRAILER = (LEADER, RUNNER_UP, TRAILER)
    LEADER_TRAILER_RUNNER = (LEADER, TRAILER, RUNNER_UP)
    RUNNER_LEADER_TRAILER = (RUNNER_UP, LEADER, TRAILER)
    RUNNER_TRAILER_LEADER = (RUNNER_UP, TRAILER, LEADER)
    TRAILER_LEADER_RUNNER = (TRAILER, LEADER, RUNNER_UP)
    TRAILER_RUNNER_LEADER = (TRAILER, RUNNER_UP, LEADER)

    @property
    def finishing_order(self) -> Tuple[int, int, int]:
        """Desired slots in the order they finish (1st, 2nd, 3rd)."""
        return self.value

    @property
    def ranks(self) -> Tuple[int, int, int]:
        """1-based rank of the leader, runner-up and trailer."""
        ranks = [0, 0, 0]
        for rank, slot in enumerate(self.value, start=1):
            ranks[slot] = rank
        return tuple(ranks)

    def rank_of(self, slot: int) -> int:
        return self.ranks[slot]

    def points(self, tier: PointTier) -> Tuple[int, int, int]:
        """Points earned by the leader, runner-up and trailer."""
        return tuple(tier.points_for_rank(rank) for rank in self.ranks)


ALL_PLACEMENTS = tuple(Placement)

# Leader wins, runner-up comes last: the widest leader/runner-up swing.
MAX_CATCHUP = Placement.LEADER_TRAILER_RUNNER
