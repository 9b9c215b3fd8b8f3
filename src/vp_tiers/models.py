"""Data models for the VP tier table."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PointTier:
    """Points awarded for 1st, 2nd and 3rd place in a single skirmish."""

    first: int
    second: int
    third: int
    label: Optional[str] = None  # "low", "medium", "high", "peak"

    def __post_init__(self):
        if not (self.first >= self.second >= self.third >= 0):
            raise ValueError(
                f"Malformed tier ({self.first}, {self.second}, {self.third}): "
                "expected first >= second >= third >= 0"
            )

    @property
    def spread(self) -> int:
        """Largest swing one team can take over another in this skirmish."""
        return self.first - self.third

    def points_for_rank(self, rank: int) -> int:
        """Points for a 1-based finishing rank."""
        if rank == 1:
            return self.first
        if rank == 2:
            return self.second
        if rank == 3:
            return self.third
        raise ValueError(f"Invalid rank: {rank!r}. Must be 1, 2, or 3.")

    def as_tuple(self) -> tuple:
        return (self.first, self.second, self.third)
