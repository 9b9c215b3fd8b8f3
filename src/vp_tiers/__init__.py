from src.vp_tiers.models import PointTier
from src.vp_tiers.tier_lookup import (
    TierLookup,
    get_region_from_match_id,
    get_tier_for_skirmish,
    get_tier_for_time,
)

__all__ = [
    "PointTier",
    "TierLookup",
    "get_region_from_match_id",
    "get_tier_for_skirmish",
    "get_tier_for_time",
]
