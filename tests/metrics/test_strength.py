"""Tests for weight training load."""

import pytest

from training_load.metrics.strength import (
    WeightTrainingType,
    calculate_weight_training_load,
    determine_weight_training_type,
)


def lifting(make_activity, **overrides):
    fields = {
        "sport_type": "WeightTraining",
        "average_watts": None,
        "weighted_average_watts": None,
        "max_heartrate": None,
        "has_heartrate": False,
        "average_heartrate": None,
    }
    fields.update(overrides)
    return make_activity(**fields)


class TestWeightTrainingLoad:

    def test_strength_session_with_heart_rate(self, make_activity, thresholds):
        """60 min heavy lifting at 140 bpm, RPE 8."""
        activity = lifting(
            make_activity,
            name="Heavy Squats 3x5",
            moving_time=3600,
            has_heartrate=True,
            average_heartrate=140,
            perceived_exertion=8,
        )
        # 60 * (80/130) * 1.3 * 0.7 * 1.14
        assert calculate_weight_training_load(activity, thresholds) == pytest.approx(38.3, abs=0.1)

    def test_circuit_session_scores_higher_per_minute(self, make_activity, thresholds):
        activity = lifting(
            make_activity,
            name="Circuit Training HIIT",
            moving_time=1800,
            has_heartrate=True,
            average_heartrate=170,
            perceived_exertion=9,
        )
        load = calculate_weight_training_load(activity, thresholds)
        assert 35 < load < 70

    def test_endurance_session(self, make_activity, thresholds):
        activity = lifting(
            make_activity,
            name="Light Endurance Sets 15+",
            moving_time=2700,
            has_heartrate=True,
            average_heartrate=120,
            perceived_exertion=5,
        )
        load = calculate_weight_training_load(activity, thresholds)
        assert 20 < load < 40

    def test_rpe_only_fallback(self, make_activity, thresholds):
        """Without heart rate, perceived exertion drives a duration-based load."""
        activity = lifting(
            make_activity,
            name="General Weight Training",
            moving_time=3600,
            perceived_exertion=6,
        )
        # 60 * 0.8 * 0.8 * 0.98
        assert calculate_weight_training_load(activity, thresholds) == pytest.approx(37.6, abs=0.1)

    def test_no_heart_rate_or_rpe_is_zero(self, make_activity, thresholds):
        activity = lifting(make_activity, name="Power Clean and Jerk", moving_time=1800)
        assert calculate_weight_training_load(activity, thresholds) == 0.0

    def test_zero_duration_is_zero(self, make_activity, thresholds):
        activity = lifting(make_activity, moving_time=0, perceived_exertion=8)
        assert calculate_weight_training_load(activity, thresholds) == 0.0


class TestWeightTrainingType:

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Heavy Squats 3x5", WeightTrainingType.STRENGTH),
            ("Deadlift day", WeightTrainingType.STRENGTH),
            ("Power Clean and Jerk", WeightTrainingType.POWER),
            ("CrossFit Circuit", WeightTrainingType.CIRCUIT),
            ("Lunchtime HIIT", WeightTrainingType.CIRCUIT),
            ("Light Endurance Sets 15+", WeightTrainingType.ENDURANCE),
            ("Upper body 20 reps", WeightTrainingType.ENDURANCE),
            ("General Weight Training", WeightTrainingType.HYPERTROPHY),
            ("Chest and back", WeightTrainingType.HYPERTROPHY),
            ("Max Effort Bench", WeightTrainingType.STRENGTH),
            ("Light Day", WeightTrainingType.ENDURANCE),
            ("Maximal Hypertrophy", WeightTrainingType.HYPERTROPHY),
            ("Climax Cardio", WeightTrainingType.HYPERTROPHY),
            ("Delight Arms", WeightTrainingType.HYPERTROPHY),
        ],
    )
    def test_classification(self, name, expected):
        assert determine_weight_training_type(name) == expected
