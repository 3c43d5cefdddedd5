"""Tests for the TrainingLoadCalculator facade."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from training_load import TrainingLoadCalculator
from training_load.metrics.thresholds import estimate_athlete_thresholds
from training_load.models import AthleteThresholds, TrainingStatus


@pytest.fixture
def calculator(thresholds):
    return TrainingLoadCalculator(thresholds)


def no_physiology(make_activity, **overrides):
    return make_activity(
        has_heartrate=False,
        average_heartrate=None,
        max_heartrate=None,
        average_watts=None,
        weighted_average_watts=None,
        **overrides,
    )


class TestPerActivityOrdering:

    def test_no_heart_rate_means_zero_trimp(self, calculator, make_activity):
        assert calculator.calculate_trimp(make_activity(has_heartrate=False)) == 0
        assert calculator.calculate_trimp(make_activity(average_heartrate=None)) == 0

    def test_higher_heart_rate_gives_more_trimp(self, calculator, make_activity):
        easy = calculator.calculate_trimp(make_activity(average_heartrate=130))
        hard = calculator.calculate_trimp(make_activity(average_heartrate=165))
        assert hard > easy

    def test_running_above_cycling(self, calculator, make_activity):
        run = calculator.calculate_trimp(make_activity(sport_type="Run"))
        ride = calculator.calculate_trimp(make_activity(sport_type="Ride"))
        assert run > ride

    @pytest.mark.parametrize("with_power", [True, False])
    def test_longer_activity_gives_more_tss(self, calculator, make_activity, with_power):
        watts = {} if with_power else {"average_watts": None, "weighted_average_watts": None}
        short = calculator.calculate_tss(make_activity(moving_time=1800, **watts))
        long = calculator.calculate_tss(make_activity(moving_time=5400, **watts))
        assert long > short > 0


class TestNormalizedLoadBand:

    def test_no_physiology_is_zero(self, calculator, make_activity):
        assert calculator.calculate_normalized_load(no_physiology(make_activity)) == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"moving_time": 0},
            {"moving_time": 300, "average_heartrate": 61},
            {"moving_time": 36000, "average_heartrate": 189, "average_watts": 400},
            {"moving_time": 86400, "average_heartrate": 250, "weighted_average_watts": 2000},
            {"sport_type": "WeightTraining", "moving_time": 20000, "perceived_exertion": 10},
            {"sport_type": "Unknown Sport", "average_heartrate": "bad", "average_watts": -1},
        ],
    )
    def test_always_within_band(self, calculator, make_activity, overrides):
        load = calculator.calculate_normalized_load(make_activity(**overrides))
        assert 0 <= load <= 100

    def test_band_holds_without_ftp(self, hr_only_thresholds, make_activity):
        calculator = TrainingLoadCalculator(hr_only_thresholds)
        load = calculator.calculate_normalized_load(make_activity(moving_time=36000))
        assert 0 <= load <= 100


class TestProcessActivities:

    def test_history_to_metrics(self, calculator, make_activity):
        start = date(2024, 1, 1)
        activities = [
            make_activity(
                id=str(i),
                start_date_local=f"{start + timedelta(days=i)}T07:00:00",
                moving_time=3600,
            )
            for i in range(28)
        ]
        points = calculator.process_activities(reversed(activities))

        assert len(points) == 28
        assert [p.date for p in points] == sorted(p.date for p in points)

        metrics = calculator.calculate_load_metrics(points)
        assert metrics.acute == metrics.chronic
        assert metrics.balance == 1.0
        assert metrics.status == TrainingStatus.MAINTAIN

    def test_empty_history(self, calculator):
        points = calculator.process_activities([])
        assert points == []
        assert calculator.calculate_load_metrics(points).status == TrainingStatus.RECOVER
        assert calculator.calculate_load_trends(points) == []

    def test_estimated_thresholds(self, make_activity):
        activities = [no_physiology(make_activity, id=str(i)) for i in range(3)]
        calculator = TrainingLoadCalculator(estimate_athlete_thresholds(activities))
        assert calculator.thresholds.functional_threshold_power is None
        assert all(p.normalized_load == 0 for p in calculator.process_activities(activities))


class TestSharing:

    def test_thresholds_are_immutable(self, calculator):
        with pytest.raises(ValidationError):
            calculator.thresholds.max_heart_rate = 200

    def test_no_instance_attributes(self, calculator):
        with pytest.raises(AttributeError):
            calculator.extra = 1

    def test_concurrent_scoring(self, calculator, make_activity):
        activities = [
            make_activity(id=str(i), average_heartrate=120 + i, moving_time=1800 + i * 60)
            for i in range(40)
        ]
        expected = [calculator.score_activity(a) for a in activities]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(calculator.score_activity, activities))

        assert results == expected

    def test_repr(self, calculator):
        assert repr(calculator).startswith("TrainingLoadCalculator(thresholds=")
