"""Training load calculations (TRIMP, HRSS, power TSS)."""

import math
from typing import Optional


# Sport-specific multipliers for TRIMP and HR-based TSS. Running carries more
# musculoskeletal load per unit of cardiovascular stimulus than cycling.
SPORT_MULTIPLIERS = {
    "Run": 1.0,
    "TrailRun": 1.0,
    "VirtualRun": 1.0,
    "Ride": 0.85,
    "VirtualRide": 0.85,
    "GravelRide": 0.85,
    "MountainBikeRide": 0.9,
    "EBikeRide": 0.6,
    "Swim": 1.1,
    "Hike": 0.7,
    "Walk": 0.5,
    "Workout": 0.9,
    "WeightTraining": 0.8,
    "Yoga": 0.6,
    "CrossCountrySkiing": 1.0,
    "AlpineSki": 0.8,
    "Snowboard": 0.8,
    "IceSkate": 0.9,
    "InlineSkate": 0.9,
    "Rowing": 1.0,
    "Kayaking": 0.9,
    "Canoeing": 0.9,
    "StandUpPaddling": 0.8,
    "Surfing": 0.7,
    "Kitesurf": 0.8,
    "Windsurf": 0.8,
    "Soccer": 1.0,
    "Tennis": 0.9,
    "Basketball": 0.95,
    "Badminton": 0.9,
    "Golf": 0.4,
    "RockClimbing": 0.9,
}
DEFAULT_SPORT_MULTIPLIER = 0.8

# Variability index (NP / average power) by sport, used when the platform
# does not report weighted average watts.
SPORT_VARIABILITY_INDEX = {
    "Run": 1.02,
    "Ride": 1.05,
    "VirtualRide": 1.02,
}
DEFAULT_VARIABILITY_INDEX = 1.03

# Banister coefficients (a, b) by sex
TRIMP_COEFFICIENTS = {
    "male": (0.64, 1.92),
    "female": (0.86, 1.67),
}


def get_sport_multiplier(sport_type: str) -> float:
    """Return the load multiplier for a sport, falling back to the default."""
    return SPORT_MULTIPLIERS.get(sport_type, DEFAULT_SPORT_MULTIPLIER)


def get_variability_index(sport_type: str) -> float:
    """Return the estimated variability index for a sport."""
    return SPORT_VARIABILITY_INDEX.get(sport_type, DEFAULT_VARIABILITY_INDEX)


def heart_rate_reserve_fraction(avg_hr: float, rest_hr: float, max_hr: float) -> float:
    """
    Fraction of heart rate reserve used, clamped to [0, 1].

    Returns 0 when the reserve is zero or negative.
    """
    hr_reserve = max_hr - rest_hr
    if hr_reserve <= 0:
        return 0.0
    fraction = (avg_hr - rest_hr) / hr_reserve
    return max(0.0, min(1.0, fraction))


def calculate_hrss(
    duration_min: float,
    avg_hr: float,
    threshold_hr: float,
    max_hr: float,
    rest_hr: float,
) -> float:
    """
    Heart Rate Stress Score - TSS equivalent for HR-based training.
    Uses normalized HR and intensity factor.

    Args:
        duration_min: Duration of activity in minutes
        avg_hr: Average heart rate during activity
        threshold_hr: Lactate threshold heart rate
        max_hr: Maximum heart rate
        rest_hr: Resting heart rate

    Returns:
        HRSS value (similar scale to TSS: 100 = 1 hour at threshold)
    """
    hr_reserve = max_hr - rest_hr
    if hr_reserve <= 0 or duration_min <= 0:
        return 0.0

    normalized_hr = heart_rate_reserve_fraction(avg_hr, rest_hr, max_hr)

    # Threshold as percentage of reserve
    threshold_reserve_ratio = (threshold_hr - rest_hr) / hr_reserve
    if threshold_reserve_ratio <= 0:
        threshold_reserve_ratio = 0.85  # Default assumption

    intensity_factor = normalized_hr / threshold_reserve_ratio

    # ~100 HRSS for 1 hour at threshold
    hrss = (duration_min * (intensity_factor ** 2)) / 60 * 100
    return round(hrss, 1)


def calculate_trimp(
    duration_min: float,
    avg_hr: float,
    rest_hr: float,
    max_hr: float,
    sex: Optional[str] = None,
) -> float:
    """
    Training Impulse using Banister's exponential formula.

    TRIMP accounts for both duration and intensity, with an exponential
    weighting that emphasizes high-intensity work.

    Args:
        duration_min: Duration of activity in minutes
        avg_hr: Average heart rate during activity
        rest_hr: Resting heart rate
        max_hr: Maximum heart rate
        sex: 'male' or 'female'; None uses the male coefficients

    Returns:
        TRIMP value, unrounded (arbitrary units, typical session: 50-150)
    """
    if max_hr - rest_hr <= 0 or duration_min <= 0:
        return 0.0

    delta_hr = heart_rate_reserve_fraction(avg_hr, rest_hr, max_hr)
    a, b = TRIMP_COEFFICIENTS.get((sex or "male").lower(), TRIMP_COEFFICIENTS["male"])

    # TRIMP = duration * delta_hr * a * e^(b * delta_hr)
    return duration_min * delta_hr * a * math.exp(b * delta_hr)


def estimate_normalized_power(
    avg_power: float,
    sport_type: str,
    weighted_power: Optional[float] = None,
) -> float:
    """
    Normalized power for a whole activity.

    The platform's weighted average watts is used when reported; otherwise
    average power is scaled by a sport-typical variability index.
    """
    if weighted_power is not None and weighted_power > 0:
        return weighted_power
    return avg_power * get_variability_index(sport_type)


def calculate_power_tss(
    duration_sec: int,
    normalized_power: float,
    ftp: float,
) -> float:
    """
    Calculate Training Stress Score from power.

    A TSS of 100 represents one hour at FTP.

    Formula: TSS = (duration_sec * NP * IF) / (FTP * 3600) * 100

    Args:
        duration_sec: Duration of activity in seconds
        normalized_power: Normalized Power in watts
        ftp: Functional Threshold Power in watts

    Returns:
        Training Stress Score
    """
    if ftp <= 0 or duration_sec <= 0 or normalized_power <= 0:
        return 0.0

    intensity_factor = normalized_power / ftp
    tss = (duration_sec * normalized_power * intensity_factor) / (ftp * 3600) * 100
    return round(tss, 1)
