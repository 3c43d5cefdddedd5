"""Per-activity scoring: TRIMP, TSS and normalized load.

TSS can come from two models. The choice is made once per activity by
resolve_scoring_input(), which returns one of three variants:

- PowerBased: average power is present and FTP is known. Preferred
  whenever it applies, even if heart rate is also available.
- HeartRateBased: heart rate data is present (HRSS).
- Unscoreable: neither; TSS is 0.

calculate_tss() then handles each variant explicitly. The two models are
never averaged.
"""

from dataclasses import dataclass
from typing import Union

from ..models import Activity, ActivityScore, AthleteThresholds, ScoringPath
from .load import (
    calculate_hrss,
    calculate_power_tss,
    calculate_trimp,
    estimate_normalized_power,
    get_sport_multiplier,
)
from .strength import calculate_weight_training_load, is_weight_training


TRIMP_WEIGHT = 0.6
TSS_WEIGHT = 0.4
LOAD_SCALE = 0.5  # Maps combined TRIMP/TSS onto the 0-100 band
MAX_NORMALIZED_LOAD = 100.0


@dataclass(frozen=True)
class PowerBased:
    duration_sec: int
    normalized_power: float
    ftp: float


@dataclass(frozen=True)
class HeartRateBased:
    duration_min: float
    avg_hr: float
    threshold_hr: float
    max_hr: float
    rest_hr: float
    sport_multiplier: float


@dataclass(frozen=True)
class Unscoreable:
    reason: str


ScoringInput = Union[PowerBased, HeartRateBased, Unscoreable]


def resolve_scoring_input(
    activity: Activity,
    thresholds: AthleteThresholds,
) -> ScoringInput:
    """Pick the TSS model for an activity (power preferred over heart rate)."""
    if activity.moving_time <= 0:
        return Unscoreable("no moving time")

    if activity.has_power_data and thresholds.has_ftp:
        return PowerBased(
            duration_sec=activity.moving_time,
            normalized_power=estimate_normalized_power(
                activity.average_watts,
                activity.sport_type,
                activity.weighted_average_watts,
            ),
            ftp=thresholds.functional_threshold_power,
        )

    if activity.has_heart_rate_data:
        return HeartRateBased(
            duration_min=activity.duration_minutes,
            avg_hr=activity.average_heartrate,
            threshold_hr=thresholds.threshold_heart_rate,
            max_hr=thresholds.max_heart_rate,
            rest_hr=thresholds.resting_heart_rate,
            sport_multiplier=get_sport_multiplier(activity.sport_type),
        )

    if activity.has_power_data:
        return Unscoreable("power without a known FTP")
    return Unscoreable("no heart rate or power data")


def scoring_path(scoring_input: ScoringInput) -> ScoringPath:
    if isinstance(scoring_input, PowerBased):
        return ScoringPath.POWER
    if isinstance(scoring_input, HeartRateBased):
        return ScoringPath.HEART_RATE
    if isinstance(scoring_input, Unscoreable):
        return ScoringPath.UNSCOREABLE
    raise TypeError(f"Unknown scoring input: {scoring_input!r}")


def calculate_tss(scoring_input: ScoringInput) -> float:
    """Training Stress Score for a resolved scoring input."""
    if isinstance(scoring_input, PowerBased):
        return calculate_power_tss(
            scoring_input.duration_sec,
            scoring_input.normalized_power,
            scoring_input.ftp,
        )
    if isinstance(scoring_input, HeartRateBased):
        hrss = calculate_hrss(
            scoring_input.duration_min,
            scoring_input.avg_hr,
            scoring_input.threshold_hr,
            scoring_input.max_hr,
            scoring_input.rest_hr,
        )
        return round(max(0.0, hrss * scoring_input.sport_multiplier), 1)
    if isinstance(scoring_input, Unscoreable):
        return 0.0
    raise TypeError(f"Unknown scoring input: {scoring_input!r}")


def calculate_activity_trimp(
    activity: Activity,
    thresholds: AthleteThresholds,
) -> float:
    """
    TRIMP for an activity, including the sport multiplier.

    Exactly 0 unless the activity has the heart rate flag, an average
    heart rate and positive moving time.
    """
    if not activity.has_heart_rate_data or activity.moving_time <= 0:
        return 0.0

    trimp = calculate_trimp(
        activity.duration_minutes,
        activity.average_heartrate,
        thresholds.resting_heart_rate,
        thresholds.max_heart_rate,
        thresholds.sex,
    )
    return trimp * get_sport_multiplier(activity.sport_type)


def clamp_load(value: float) -> float:
    """Clamp a load value onto the 0-100 band."""
    return round(max(0.0, min(MAX_NORMALIZED_LOAD, value)), 1)


def combine_load(trimp: float, tss: float) -> float:
    """
    Combine TRIMP and TSS into a 0-100 normalized load.

    Both present: weighted blend. One present: that one alone.
    """
    if trimp > 0 and tss > 0:
        combined = trimp * TRIMP_WEIGHT + tss * TSS_WEIGHT
    elif tss > 0:
        combined = tss
    elif trimp > 0:
        combined = trimp
    else:
        return 0.0
    return clamp_load(combined * LOAD_SCALE)


def score_activity(
    activity: Activity,
    thresholds: AthleteThresholds,
) -> ActivityScore:
    """Compute TRIMP, TSS and normalized load for one activity."""
    scoring_input = resolve_scoring_input(activity, thresholds)
    trimp = calculate_activity_trimp(activity, thresholds)
    tss = calculate_tss(scoring_input)

    if is_weight_training(activity):
        normalized_load = clamp_load(calculate_weight_training_load(activity, thresholds))
    else:
        normalized_load = combine_load(trimp, tss)

    return ActivityScore(
        trimp=trimp,
        tss=tss,
        normalized_load=normalized_load,
        scoring_path=scoring_path(scoring_input),
    )
