"""Training load calculator bound to one athlete's thresholds."""

import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence

from .models import (
    Activity,
    ActivityScore,
    AthleteThresholds,
    LoadPoint,
    LoadTrendPoint,
    TrainingLoadMetrics,
)
from .metrics.aggregation import aggregate_load_points
from .metrics.fitness import calculate_load_metrics, calculate_load_trends
from .metrics.scoring import (
    calculate_activity_trimp,
    calculate_tss,
    resolve_scoring_input,
    score_activity,
)
from .metrics.strength import calculate_weight_training_load

logger = logging.getLogger(__name__)


class TrainingLoadCalculator:
    """
    Scores activities and aggregates them into load metrics.

    Configured once with AthleteThresholds, which stay fixed for the
    calculator's lifetime. Holds no other state, so one instance can be
    shared between threads.
    """

    __slots__ = ("_thresholds",)

    def __init__(self, thresholds: AthleteThresholds):
        """
        Initialize the calculator.

        Args:
            thresholds: Athlete thresholds (estimated or supplied by the caller)
        """
        self._thresholds = thresholds

    @property
    def thresholds(self) -> AthleteThresholds:
        return self._thresholds

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(thresholds={self._thresholds!r})"

    # Per-activity scoring

    def calculate_trimp(self, activity: Activity) -> float:
        """Heart-rate TRIMP; exactly 0 without heart rate data."""
        return calculate_activity_trimp(activity, self._thresholds)

    def calculate_tss(self, activity: Activity) -> float:
        """Power-based TSS when possible, otherwise HR-based, otherwise 0."""
        return calculate_tss(resolve_scoring_input(activity, self._thresholds))

    def calculate_normalized_load(self, activity: Activity) -> float:
        """Load on a 0-100 scale."""
        return self.score_activity(activity).normalized_load

    def calculate_weight_training_load(self, activity: Activity) -> float:
        return calculate_weight_training_load(activity, self._thresholds)

    def score_activity(self, activity: Activity) -> ActivityScore:
        return score_activity(activity, self._thresholds)

    # Batch processing

    def process_activities(self, activities: Iterable[Activity]) -> List[LoadPoint]:
        """
        Aggregate activities into daily load points, ascending by date.

        Activities under five minutes of moving time are ignored.
        """
        return aggregate_load_points(activities, self.score_activity)

    def calculate_load_metrics(
        self,
        load_points: Sequence[LoadPoint],
        as_of: Optional[date] = None,
    ) -> TrainingLoadMetrics:
        return calculate_load_metrics(load_points, as_of)

    def calculate_load_trends(
        self,
        load_points: Sequence[LoadPoint],
        as_of: Optional[date] = None,
    ) -> List[LoadTrendPoint]:
        return calculate_load_trends(load_points, as_of)
