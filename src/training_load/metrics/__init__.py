"""Training load metrics calculations."""

from .load import (
    SPORT_MULTIPLIERS,
    calculate_hrss,
    calculate_power_tss,
    calculate_trimp,
    estimate_normalized_power,
    get_sport_multiplier,
    heart_rate_reserve_fraction,
)
from .scoring import (
    HeartRateBased,
    PowerBased,
    ScoringInput,
    Unscoreable,
    calculate_activity_trimp,
    calculate_tss,
    combine_load,
    resolve_scoring_input,
    score_activity,
)
from .strength import (
    WeightTrainingType,
    calculate_weight_training_load,
    determine_weight_training_type,
)
from .aggregation import (
    MIN_ACTIVITY_SECONDS,
    aggregate_load_points,
    filter_recent_activities,
)
from .fitness import (
    ACUTE_WINDOW_DAYS,
    CHRONIC_WINDOW_DAYS,
    calculate_load_metrics,
    calculate_load_trends,
    determine_training_status,
    get_training_recommendation,
)
from .thresholds import estimate_athlete_thresholds
from .quality import DataQuality, DataQualityReport, assess_data_quality

__all__ = [
    # Load calculations
    "SPORT_MULTIPLIERS",
    "calculate_hrss",
    "calculate_power_tss",
    "calculate_trimp",
    "estimate_normalized_power",
    "get_sport_multiplier",
    "heart_rate_reserve_fraction",
    # Scoring
    "HeartRateBased",
    "PowerBased",
    "ScoringInput",
    "Unscoreable",
    "calculate_activity_trimp",
    "calculate_tss",
    "combine_load",
    "resolve_scoring_input",
    "score_activity",
    # Weight training
    "WeightTrainingType",
    "calculate_weight_training_load",
    "determine_weight_training_type",
    # Aggregation
    "MIN_ACTIVITY_SECONDS",
    "aggregate_load_points",
    "filter_recent_activities",
    # Rolling metrics
    "ACUTE_WINDOW_DAYS",
    "CHRONIC_WINDOW_DAYS",
    "calculate_load_metrics",
    "calculate_load_trends",
    "determine_training_status",
    "get_training_recommendation",
    # Thresholds
    "estimate_athlete_thresholds",
    # Data quality
    "DataQuality",
    "DataQualityReport",
    "assess_data_quality",
]
