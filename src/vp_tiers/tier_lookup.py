"""Resolve skirmish start times to VP point tiers."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from src.vp_tiers.config import (
    FALLBACK_TIERS,
    NA_REGION_CODE,
    SKIRMISH_DURATION_HOURS,
    VALID_REGIONS,
    VP_SCHEDULES,
)
from src.vp_tiers.models import PointTier

logger = logging.getLogger(__name__)

# (start_time, region) -> PointTier
TierLookup = Callable[[datetime, str], PointTier]


def _validate_region(region: str) -> str:
    if region not in VALID_REGIONS:
        raise ValueError(
            f"Invalid region: {region!r}. Must be 'na' or 'eu'."
        )
    return region


def _utc_hour(moment: datetime) -> int:
    """Hour of *moment* in UTC; naive datetimes are taken as UTC already."""
    if moment.tzinfo is None:
        return moment.hour
    return moment.astimezone(timezone.utc).hour


def get_tier_for_time(start_time: datetime, region: str) -> PointTier:
    """Return the VP tier for a skirmish starting at *start_time*.

    Args:
        start_time: Skirmish start. Naive values are interpreted as UTC.
        region: ``"na"`` or ``"eu"``.

    Returns:
        The :class:`PointTier` for the two-hour UTC block containing
        the start time.

    Raises:
        ValueError: If *region* is unknown.
    """
    _validate_region(region)
    hour = _utc_hour(start_time)

    for start, end, (first, second, third), label in VP_SCHEDULES[region]:
        if start <= hour < end:
            return PointTier(first, second, third, label=label)

    logger.warning("No VP tier found for hour %d in %s, using low tier", hour, region)
    first, second, third = FALLBACK_TIERS[region]
    return PointTier(first, second, third, label="low")


def get_tier_for_skirmish(
    skirmish_id: int,
    match_start: datetime,
    region: str,
) -> PointTier:
    """Return the VP tier for the 1-based *skirmish_id* of a match.

    Skirmish N starts ``(N - 1) * SKIRMISH_DURATION_HOURS`` after
    *match_start*.
    """
    if skirmish_id < 1:
        raise ValueError(f"skirmish_id must be >= 1, got {skirmish_id}")
    start_time = match_start + timedelta(
        hours=(skirmish_id - 1) * SKIRMISH_DURATION_HOURS
    )
    return get_tier_for_time(start_time, region)


def get_region_from_match_id(match_id: str) -> str:
    """Map a match ID such as ``"1-5"`` to its region (``"na"``/``"eu"``)."""
    region_code = match_id.split("-")[0]
    return "na" if region_code == NA_REGION_CODE else "eu"
