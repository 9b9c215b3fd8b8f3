"""Shared fixtures for the scenario solver test suite."""

import random
from datetime import datetime, timedelta, timezone

import pytest

from src.scenario_solver.tracing import RecordingObserver
from src.vp_tiers.models import PointTier

# Friday 02:00 UTC: NA weekly reset
NA_MATCH_START = datetime(2025, 1, 3, 2, 0, tzinfo=timezone.utc)


# ------------------------------------------------------------------
# Tiers
# ------------------------------------------------------------------

@pytest.fixture
def peak_tier():
    """NA peak tier (00:00-04:00 UTC)."""
    return PointTier(43, 32, 21, label="peak")


@pytest.fixture
def low_tier():
    """NA low tier (08:00-14:00 UTC)."""
    return PointTier(19, 16, 13, label="low")


# ------------------------------------------------------------------
# Solver collaborators
# ------------------------------------------------------------------

@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def rng():
    """Seeded RNG so randomized strategies are repeatable."""
    return random.Random(1234)


@pytest.fixture
def skirmish_times():
    """Start times of the first 50 skirmishes of an NA match."""
    return [NA_MATCH_START + timedelta(hours=2 * i) for i in range(50)]
