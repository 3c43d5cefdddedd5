"""Data models for the training load engine."""

from .activity import Activity
from .athlete import (
    AthleteThresholds,
    DEFAULT_MAX_HEART_RATE,
    DEFAULT_RESTING_HEART_RATE,
)
from .load import (
    ActivityScore,
    LoadActivitySummary,
    LoadPoint,
    LoadTrendPoint,
    ScoringPath,
    TrainingLoadMetrics,
    TrainingStatus,
)

__all__ = [
    "Activity",
    "AthleteThresholds",
    "DEFAULT_MAX_HEART_RATE",
    "DEFAULT_RESTING_HEART_RATE",
    "ActivityScore",
    "LoadActivitySummary",
    "LoadPoint",
    "LoadTrendPoint",
    "ScoringPath",
    "TrainingLoadMetrics",
    "TrainingStatus",
]
