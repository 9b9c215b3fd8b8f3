"""VP award schedules per region.

Each entry covers a two-hour UTC block: ``(start_hour, end_hour, (first,
second, third), label)``. Values follow the World vs. World rules effective
March 28, 2025.
"""

# Every skirmish lasts two hours
SKIRMISH_DURATION_HOURS = 2

VALID_REGIONS = ("na", "eu")

# Match IDs look like "1-5"; region code 1 is North America
NA_REGION_CODE = "1"

VP_SCHEDULES = {
    "eu": [
        (0, 2, (15, 14, 12), "low"),
        (2, 4, (15, 14, 12), "low"),
        (4, 6, (15, 14, 12), "low"),
        (6, 8, (15, 14, 12), "low"),
        (8, 10, (22, 18, 14), "medium"),
        (10, 12, (22, 18, 14), "medium"),
        (12, 14, (22, 18, 14), "medium"),
        (14, 16, (31, 24, 17), "high"),
        (16, 18, (31, 24, 17), "high"),
        (18, 20, (51, 37, 24), "peak"),
        (20, 22, (51, 37, 24), "peak"),
        (22, 24, (31, 24, 17), "high"),
    ],
    "na": [
        (0, 2, (43, 32, 21), "peak"),
        (2, 4, (43, 32, 21), "peak"),
        (4, 6, (31, 24, 17), "high"),
        (6, 8, (23, 18, 14), "medium"),
        (8, 10, (19, 16, 13), "low"),
        (10, 12, (19, 16, 13), "low"),
        (12, 14, (19, 16, 13), "low"),
        (14, 16, (23, 18, 14), "medium"),
        (16, 18, (23, 18, 14), "medium"),
        (18, 20, (23, 18, 14), "medium"),
        (20, 22, (23, 18, 14), "medium"),
        (22, 24, (31, 24, 17), "high"),
    ],
}

# Used when an hour falls outside every slot
FALLBACK_TIERS = {
    "na": (19, 16, 13),
    "eu": (15, 14, 12),
}
