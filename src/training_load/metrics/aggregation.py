"""Daily load aggregation: activities to one LoadPoint per local date."""

import logging
from datetime import date, timedelta
from itertools import groupby
from typing import Callable, Iterable, List, Optional, Sequence

from ..models import Activity, ActivityScore, LoadActivitySummary, LoadPoint

logger = logging.getLogger(__name__)

# Shorter activities are GPS drift or accidental recordings
MIN_ACTIVITY_SECONDS = 5 * 60

MIXED_SPORT = "Mixed"

ScoreFn = Callable[[Activity], ActivityScore]


def is_qualifying_activity(activity: Activity) -> bool:
    """At least five minutes of moving time."""
    return activity.moving_time >= MIN_ACTIVITY_SECONDS


def filter_recent_activities(
    activities: Iterable[Activity],
    days: int,
    as_of: date,
) -> List[Activity]:
    """
    Keep activities whose local start date is within the last `days` days.

    The window ends at as_of (inclusive) and spans `days` calendar days.
    """
    if days <= 0:
        return []
    start = as_of - timedelta(days=days - 1)
    return [a for a in activities if start <= a.local_date <= as_of]


def _mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return round(sum(values) / len(values), 1)


def summarize_day(day_activities: Sequence[Activity]) -> LoadActivitySummary:
    """Describe a day's activities; a single activity describes itself."""
    heart_rates = [a.average_heartrate for a in day_activities if a.average_heartrate is not None]
    powers = [a.average_watts for a in day_activities if a.average_watts is not None]

    if len(day_activities) == 1:
        only = day_activities[0]
        return LoadActivitySummary(
            name=only.name,
            sport_type=only.sport_type,
            duration=only.moving_time,
            avg_hr=only.average_heartrate,
            avg_power=only.average_watts,
            activity_count=1,
        )

    sports = {a.sport_type for a in day_activities}
    return LoadActivitySummary(
        name=f"{len(day_activities)} activities",
        sport_type=MIXED_SPORT if len(sports) > 1 else sports.pop(),
        duration=sum(a.moving_time for a in day_activities),
        avg_hr=_mean(heart_rates),
        avg_power=_mean(powers),
        activity_count=len(day_activities),
    )


def build_load_point(
    day: date,
    day_activities: Sequence[Activity],
    score: ScoreFn,
) -> LoadPoint:
    """Sum the per-activity scores of one day into a LoadPoint."""
    scores = [score(a) for a in day_activities]
    return LoadPoint(
        date=day,
        trimp=round(sum(s.trimp for s in scores), 1),
        tss=round(sum(s.tss for s in scores), 1),
        normalized_load=round(sum(s.normalized_load for s in scores), 1),
        activity=summarize_day(day_activities),
    )


def aggregate_load_points(
    activities: Iterable[Activity],
    score: ScoreFn,
) -> List[LoadPoint]:
    """
    Aggregate activities into daily load points.

    Activities under five minutes are dropped. The rest are sorted by
    local start time and folded one local date at a time, so the result
    is in ascending date order by construction.

    Args:
        activities: Activities in any order (not modified)
        score: Per-activity scoring function

    Returns:
        One LoadPoint per local date with at least one qualifying activity
    """
    activities = list(activities)
    qualifying = sorted(
        (a for a in activities if is_qualifying_activity(a)),
        key=lambda a: a.start_date_local,
    )

    points = [
        build_load_point(day, list(day_activities), score)
        for day, day_activities in groupby(qualifying, key=lambda a: a.local_date)
    ]

    logger.debug(
        "Aggregated %d activities (%d under %ds dropped) into %d load points",
        len(activities),
        len(activities) - len(qualifying),
        MIN_ACTIVITY_SECONDS,
        len(points),
    )
    return points
