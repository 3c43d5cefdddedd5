"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from training_load.models import (
    Activity,
    AthleteThresholds,
    LoadActivitySummary,
    LoadPoint,
)


ACTIVITY_DEFAULTS = {
    "id": "1",
    "athlete_id": "user-123",
    "name": "Morning Run",
    "sport_type": "Run",
    "start_date_local": "2024-01-15T08:00:00Z",
    "moving_time": 1800,  # 30 minutes
    "elapsed_time": 1800,
    "has_heartrate": True,
    "average_heartrate": 150,
    "max_heartrate": 175,
    "average_watts": 200,
    "weighted_average_watts": 210,
}


def build_activity(**overrides) -> Activity:
    """Build an Activity from Strava-style defaults plus overrides."""
    return Activity.model_validate({**ACTIVITY_DEFAULTS, **overrides})


def build_point(day: date, load: float, trimp: float = 0.0, tss: float = 0.0) -> LoadPoint:
    return LoadPoint(
        date=day,
        trimp=trimp,
        tss=tss,
        normalized_load=load,
        activity=LoadActivitySummary(name="Run", sport_type="Run", duration=3600),
    )


@pytest.fixture
def make_activity():
    """Factory for activities with overridable fields."""
    return build_activity


@pytest.fixture
def make_point():
    """Factory for load points."""
    return build_point


@pytest.fixture
def thresholds():
    """Thresholds for a typical athlete with known FTP."""
    return AthleteThresholds(
        max_heart_rate=190,
        resting_heart_rate=60,
        functional_threshold_power=250,
        lactate_threshold=161,
    )


@pytest.fixture
def hr_only_thresholds():
    """Thresholds without FTP (power unknown)."""
    return AthleteThresholds(max_heart_rate=190, resting_heart_rate=60)
