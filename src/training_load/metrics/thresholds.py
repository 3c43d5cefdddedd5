"""Estimate athlete thresholds from activity history."""

import logging
import math
from typing import Iterable, List, Optional

from ..models import (
    Activity,
    AthleteThresholds,
    DEFAULT_MAX_HEART_RATE,
    DEFAULT_RESTING_HEART_RATE,
)
from ..models.athlete import LACTATE_THRESHOLD_FRACTION

logger = logging.getLogger(__name__)

SUSTAINED_EFFORT_SECONDS = 20 * 60
FTP_PERCENTILE_INDEX = 0.1  # 90th percentile from a descending list
FTP_FROM_SUSTAINED_POWER = 0.95  # Same 5% reduction as a 20-minute test


def estimate_max_heart_rate(activities: Iterable[Activity]) -> float:
    """Highest recorded max heart rate, or 190 when none is reported."""
    recorded = [a.max_heartrate for a in activities if a.max_heartrate is not None]
    if not recorded:
        return DEFAULT_MAX_HEART_RATE
    return max(recorded)


def estimate_ftp(activities: Iterable[Activity]) -> Optional[float]:
    """
    Estimate FTP from activities that report power.

    Uses weighted average watts where reported, otherwise average watts.
    Efforts of 20 minutes or more are preferred; if there are none every
    power activity counts. FTP is 95% of the 90th-percentile value.

    Returns:
        FTP in watts, or None when no activity reports average power
    """
    power_activities = [a for a in activities if a.has_power_data]
    if not power_activities:
        return None

    sustained = [a for a in power_activities if a.moving_time >= SUSTAINED_EFFORT_SECONDS]
    candidates: List[float] = sorted(
        (a.weighted_average_watts or a.average_watts for a in (sustained or power_activities)),
        reverse=True,
    )

    reference = candidates[math.floor(len(candidates) * FTP_PERCENTILE_INDEX)]
    return float(max(1, round(reference * FTP_FROM_SUSTAINED_POWER)))


def estimate_athlete_thresholds(activities: Iterable[Activity]) -> AthleteThresholds:
    """
    Derive athlete thresholds from historical activities.

    - Max HR: highest recorded max HR (default 190)
    - Resting HR: 60; no activity field measures it
    - FTP: only when some activity reports power, else None (unknown)
    - Lactate threshold: 85% of max HR

    Total over any input, including an empty list.
    """
    activities = list(activities)
    max_heart_rate = estimate_max_heart_rate(activities)
    functional_threshold_power = estimate_ftp(activities)

    logger.debug(
        "Estimated thresholds from %d activities: max_hr=%s ftp=%s",
        len(activities), max_heart_rate, functional_threshold_power,
    )

    return AthleteThresholds(
        max_heart_rate=max_heart_rate,
        resting_heart_rate=DEFAULT_RESTING_HEART_RATE,
        functional_threshold_power=functional_threshold_power,
        lactate_threshold=round(max_heart_rate * LACTATE_THRESHOLD_FRACTION, 1),
    )
