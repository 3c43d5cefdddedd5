"""Rolling load metrics (acute, chronic, balance, ramp rate, status)."""

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from ..models import LoadPoint, LoadTrendPoint, TrainingLoadMetrics, TrainingStatus

logger = logging.getLogger(__name__)

ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28
MIN_HISTORY_DAYS = 7  # Below this the status is always recover
RAMP_HISTORY_DAYS = 14  # Two full weeks to compare

# Acute:chronic workload ratio bands (Gabbett 2016)
PEAK_BALANCE = 1.3
BUILD_BALANCE = 1.05
RECOVER_BALANCE = 0.8
BUILD_RAMP_RATE = 10.0  # Percent week over week

EMPTY_HISTORY_RECOMMENDATION = (
    "Start building your training history: log a few sessions each week "
    "to begin accumulating training load."
)
INSUFFICIENT_HISTORY_RECOMMENDATION = (
    "Not enough training history yet to judge your load. Keep building "
    "your training history with regular, easy-to-moderate sessions."
)

RECOMMENDATIONS = {
    TrainingStatus.PEAK: (
        "High training stress detected. Consider reducing intensity and "
        "incorporating recovery."
    ),
    TrainingStatus.BUILD: (
        "Good building phase. Maintain current training progression while "
        "monitoring recovery."
    ),
    TrainingStatus.MAINTAIN: (
        "Steady training load. Consider varying intensity or adding "
        "progressive overload."
    ),
    TrainingStatus.RECOVER: (
        "Low training stress. Good time for recovery or gradually "
        "increasing training load."
    ),
}


def build_daily_loads(
    points: Sequence[LoadPoint],
    as_of: Optional[date] = None,
) -> Tuple[Optional[date], List[float]]:
    """
    Lay load points out on a day-indexed array.

    The array runs from the first point's date through as_of (default: the
    last point's date). Days without a point are zero-load days; points
    after as_of are ignored and same-date points are summed.

    Returns:
        (first date, daily normalized loads); (None, []) if nothing is in range
    """
    if not points:
        return None, []

    start = min(p.date for p in points)
    end = as_of if as_of is not None else max(p.date for p in points)
    if end < start:
        return None, []

    daily = [0.0] * ((end - start).days + 1)
    for point in points:
        if point.date <= end:
            daily[(point.date - start).days] += point.normalized_load
    return start, daily


def trailing_mean(daily: Sequence[float], end_index: int, window: int) -> float:
    """
    Mean of the `window` days ending at end_index.

    When fewer days of history exist, the mean is over the days available.
    """
    if end_index < 0:
        return 0.0
    begin = max(0, end_index - window + 1)
    span = daily[begin:end_index + 1]
    return sum(span) / len(span)


def calculate_balance(acute: float, chronic: float) -> float:
    """Acute:chronic workload ratio; 0 without a chronic baseline."""
    if chronic <= 0:
        return 0.0
    return acute / chronic


def calculate_ramp_rate(daily: Sequence[float]) -> float:
    """
    Percentage change of the last 7 days' load over the 7 days before.

    Returns 0 with under two weeks of history or an empty prior week.
    """
    if len(daily) < RAMP_HISTORY_DAYS:
        return 0.0
    recent = sum(daily[-ACUTE_WINDOW_DAYS:])
    prior = sum(daily[-RAMP_HISTORY_DAYS:-ACUTE_WINDOW_DAYS])
    if prior <= 0:
        return 0.0
    return (recent - prior) / prior * 100


def determine_training_status(
    chronic: float,
    balance: float,
    ramp_rate: float,
    history_days: int,
) -> TrainingStatus:
    """
    Classify training status from the workload ratio and ramp rate.

    - recover: no baseline, under a week of history, or ratio < 0.8
    - peak: ratio >= 1.3 (acute load well above baseline)
    - build: ratio >= 1.05 or load ramping >= 10% week over week
    - maintain: otherwise
    """
    if chronic <= 0 or history_days < MIN_HISTORY_DAYS:
        return TrainingStatus.RECOVER
    if balance < RECOVER_BALANCE:
        return TrainingStatus.RECOVER
    if balance >= PEAK_BALANCE:
        return TrainingStatus.PEAK
    if balance >= BUILD_BALANCE or ramp_rate >= BUILD_RAMP_RATE:
        return TrainingStatus.BUILD
    return TrainingStatus.MAINTAIN


def get_training_recommendation(status: TrainingStatus) -> str:
    """Recommendation text for a training status."""
    return RECOMMENDATIONS[status]


def empty_load_metrics() -> TrainingLoadMetrics:
    return TrainingLoadMetrics(
        acute=0.0,
        chronic=0.0,
        balance=0.0,
        ramp_rate=0.0,
        status=TrainingStatus.RECOVER,
        recommendation=EMPTY_HISTORY_RECOMMENDATION,
    )


def calculate_load_metrics(
    points: Sequence[LoadPoint],
    as_of: Optional[date] = None,
) -> TrainingLoadMetrics:
    """
    Summarize a load point history into rolling metrics.

    Args:
        points: Load points in any order (not modified); gaps are rest days
        as_of: Day the windows end on (default: last point's date)

    Returns:
        TrainingLoadMetrics; the all-zero recover summary for empty input
    """
    _, daily = build_daily_loads(points, as_of)
    if not daily:
        return empty_load_metrics()

    last = len(daily) - 1
    acute = trailing_mean(daily, last, ACUTE_WINDOW_DAYS)
    chronic = trailing_mean(daily, last, CHRONIC_WINDOW_DAYS)
    balance = calculate_balance(acute, chronic)
    ramp_rate = calculate_ramp_rate(daily)

    status = determine_training_status(chronic, balance, ramp_rate, len(daily))
    if len(daily) < MIN_HISTORY_DAYS:
        recommendation = INSUFFICIENT_HISTORY_RECOMMENDATION
    else:
        recommendation = get_training_recommendation(status)

    logger.debug(
        "Load metrics over %d days: acute=%.1f chronic=%.1f balance=%.2f ramp=%.1f -> %s",
        len(daily), acute, chronic, balance, ramp_rate, status.value,
    )

    return TrainingLoadMetrics(
        acute=round(acute, 1),
        chronic=round(chronic, 1),
        balance=round(balance, 2),
        ramp_rate=round(ramp_rate, 1),
        status=status,
        recommendation=recommendation,
    )


def calculate_load_trends(
    points: Sequence[LoadPoint],
    as_of: Optional[date] = None,
) -> List[LoadTrendPoint]:
    """
    Daily acute/chronic series for charting.

    One row per calendar day of history, using the same windows as
    calculate_load_metrics() evaluated on each day.
    """
    start, daily = build_daily_loads(points, as_of)
    if start is None:
        return []

    trimp_by_day: Dict[date, float] = {}
    tss_by_day: Dict[date, float] = {}
    for point in points:
        trimp_by_day[point.date] = trimp_by_day.get(point.date, 0.0) + point.trimp
        tss_by_day[point.date] = tss_by_day.get(point.date, 0.0) + point.tss

    trends = []
    for index, load in enumerate(daily):
        day = start + timedelta(days=index)
        acute = trailing_mean(daily, index, ACUTE_WINDOW_DAYS)
        chronic = trailing_mean(daily, index, CHRONIC_WINDOW_DAYS)
        trends.append(
            LoadTrendPoint(
                date=day,
                daily_load=round(load, 1),
                acute=round(acute, 1),
                chronic=round(chronic, 1),
                balance=round(calculate_balance(acute, chronic), 2),
                trimp=round(trimp_by_day.get(day, 0.0), 1),
                tss=round(tss_by_day.get(day, 0.0), 1),
            )
        )
    return trends
