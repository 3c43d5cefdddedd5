"""Training load analytics: TRIMP, TSS, daily load and acute/chronic metrics."""

from .calculator import TrainingLoadCalculator
from .metrics import (
    DataQuality,
    DataQualityReport,
    assess_data_quality,
    calculate_load_metrics,
    calculate_load_trends,
    estimate_athlete_thresholds,
    filter_recent_activities,
)
from .models import (
    Activity,
    ActivityScore,
    AthleteThresholds,
    LoadActivitySummary,
    LoadPoint,
    LoadTrendPoint,
    TrainingLoadMetrics,
    TrainingStatus,
)

__version__ = "0.1.0"

__all__ = [
    "TrainingLoadCalculator",
    "estimate_athlete_thresholds",
    "calculate_load_metrics",
    "calculate_load_trends",
    "filter_recent_activities",
    "assess_data_quality",
    "DataQuality",
    "DataQualityReport",
    "Activity",
    "ActivityScore",
    "AthleteThresholds",
    "LoadActivitySummary",
    "LoadPoint",
    "LoadTrendPoint",
    "TrainingLoadMetrics",
    "TrainingStatus",
]
