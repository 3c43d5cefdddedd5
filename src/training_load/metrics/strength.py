"""Weight training load.

Heart rate underestimates the stress of lifting, so strength sessions get
their own model: HR reserve scaled by a neuromuscular factor, adjusted by
the kind of session (read from the activity name) and perceived exertion.
"""

import re
from enum import Enum

from ..models import Activity, AthleteThresholds
from .load import heart_rate_reserve_fraction


WEIGHT_TRAINING_SPORTS = {"WeightTraining"}

NEUROMUSCULAR_FACTOR = 1.3
NO_HEART_RATE_FACTOR = 0.8  # Load per minute when only RPE is known


class WeightTrainingType(str, Enum):
    """Kind of strength session, inferred from its name."""
    STRENGTH = "strength"
    POWER = "power"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    CIRCUIT = "circuit"


WEIGHT_TRAINING_MULTIPLIERS = {
    WeightTrainingType.STRENGTH: 0.7,
    WeightTrainingType.POWER: 0.75,
    WeightTrainingType.HYPERTROPHY: 0.8,
    WeightTrainingType.ENDURANCE: 0.9,
    WeightTrainingType.CIRCUIT: 1.0,
}

# First match wins; power lifts are checked before generic strength words.
_TYPE_PATTERNS = [
    (WeightTrainingType.CIRCUIT, re.compile(r"circuit|crossfit|hiit|metcon|amrap|emom")),
    (WeightTrainingType.POWER, re.compile(r"power|clean|jerk|snatch|plyo")),
    (WeightTrainingType.STRENGTH, re.compile(r"heavy|strength|\b[1-5]x[1-5]\b|\bmax\b|deadlift|squat")),
    (WeightTrainingType.ENDURANCE, re.compile(r"endurance|\blight\b|high.rep|\b(1[5-9]|[2-9]\d)(\+|\s*reps?\b)")),
]


def is_weight_training(activity: Activity) -> bool:
    return activity.sport_type in WEIGHT_TRAINING_SPORTS


def determine_weight_training_type(name: str) -> WeightTrainingType:
    """Classify a strength session from its name; hypertrophy by default."""
    lowered = name.lower()
    for training_type, pattern in _TYPE_PATTERNS:
        if pattern.search(lowered):
            return training_type
    return WeightTrainingType.HYPERTROPHY


def calculate_weight_training_load(
    activity: Activity,
    thresholds: AthleteThresholds,
) -> float:
    """
    Load for a weight training session.

    Args:
        activity: The strength session
        thresholds: Athlete thresholds (HR reserve band)

    Returns:
        Load on roughly the same scale as normalized load; 0 when the
        session carries neither heart rate nor perceived exertion.
    """
    minutes = activity.duration_minutes
    if minutes <= 0:
        return 0.0

    if activity.has_heart_rate_data:
        hr_ratio = heart_rate_reserve_fraction(
            activity.average_heartrate,
            thresholds.resting_heart_rate,
            thresholds.max_heart_rate,
        )
        base_load = minutes * hr_ratio * NEUROMUSCULAR_FACTOR
    elif activity.perceived_exertion is not None:
        base_load = minutes * NO_HEART_RATE_FACTOR
    else:
        return 0.0

    training_type = determine_weight_training_type(activity.name)
    type_multiplier = WEIGHT_TRAINING_MULTIPLIERS[training_type]

    if activity.perceived_exertion is not None:
        intensity_multiplier = 0.5 + (activity.perceived_exertion / 10) * 0.8
    else:
        intensity_multiplier = 1.0

    load = base_load * type_multiplier * intensity_multiplier
    return round(max(0.0, load), 1)
