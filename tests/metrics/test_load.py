"""Tests for TRIMP, HRSS and power TSS calculations."""

import pytest

from training_load.metrics.load import (
    DEFAULT_SPORT_MULTIPLIER,
    calculate_hrss,
    calculate_power_tss,
    calculate_trimp,
    estimate_normalized_power,
    get_sport_multiplier,
    heart_rate_reserve_fraction,
)


class TestHRSSCalculation:
    """Tests for Heart Rate Stress Score calculation."""

    def test_hrss_at_threshold_for_one_hour(self):
        """One hour at threshold should give approximately 100 HRSS."""
        hrss = calculate_hrss(
            duration_min=60,
            avg_hr=165,
            threshold_hr=165,
            max_hr=185,
            rest_hr=55,
        )
        assert abs(hrss - 100) < 1, f"Expected ~100, got {hrss}"

    def test_hrss_below_threshold(self):
        """Below threshold should give less than 100 HRSS for one hour."""
        hrss = calculate_hrss(
            duration_min=60,
            avg_hr=140,
            threshold_hr=165,
            max_hr=185,
            rest_hr=55,
        )
        assert 0 < hrss < 100

    def test_hrss_scales_with_duration(self):
        """HRSS should scale linearly with duration at same intensity."""
        hrss_30min = calculate_hrss(30, 165, 165, 185, 55)
        hrss_60min = calculate_hrss(60, 165, 165, 185, 55)
        ratio = hrss_60min / hrss_30min
        assert 1.9 < ratio < 2.1, f"Expected ratio ~2, got {ratio}"

    def test_hrss_zero_hr_reserve(self):
        """Should return 0 if HR reserve is zero or negative."""
        assert calculate_hrss(60, 100, 100, 100, 100) == 0.0

    def test_hrss_zero_duration(self):
        assert calculate_hrss(0, 165, 165, 185, 55) == 0.0


class TestTRIMPCalculation:
    """Tests for Training Impulse calculation."""

    def test_trimp_basic(self):
        """One hour at moderate intensity gives a substantial TRIMP."""
        trimp = calculate_trimp(duration_min=60, avg_hr=150, rest_hr=60, max_hr=190)
        assert 80 < trimp < 120, f"Expected ~100, got {trimp}"

    def test_trimp_male_vs_female_difference(self):
        """Male and female TRIMP differ due to different coefficients."""
        male = calculate_trimp(60, 150, 60, 190, sex="male")
        female = calculate_trimp(60, 150, 60, 190, sex="female")
        assert male != female

    def test_trimp_defaults_to_male_coefficients(self):
        assert calculate_trimp(60, 150, 60, 190) == calculate_trimp(60, 150, 60, 190, sex="male")

    def test_trimp_increases_with_intensity(self):
        """Higher intensity should give disproportionately higher TRIMP."""
        low = calculate_trimp(60, 120, 60, 190)
        high = calculate_trimp(60, 170, 60, 190)
        assert high > low * 2, "High intensity should be much higher due to exponential"

    def test_trimp_scales_linearly_with_duration(self):
        short = calculate_trimp(30, 150, 60, 190)
        long = calculate_trimp(60, 150, 60, 190)
        assert long == pytest.approx(short * 2, abs=0.2)

    def test_trimp_zero_hr_reserve(self):
        assert calculate_trimp(60, 100, 100, 100) == 0.0

    def test_trimp_below_resting_hr(self):
        """Average HR at or below resting contributes nothing."""
        assert calculate_trimp(60, 55, 60, 190) == 0.0


class TestHeartRateReserve:

    def test_fraction_in_band(self):
        assert heart_rate_reserve_fraction(125, 60, 190) == pytest.approx(0.5)

    def test_fraction_clamped(self):
        assert heart_rate_reserve_fraction(200, 60, 190) == 1.0
        assert heart_rate_reserve_fraction(40, 60, 190) == 0.0


class TestPowerTSS:
    """Tests for power-based Training Stress Score."""

    def test_one_hour_at_ftp_is_100(self):
        assert calculate_power_tss(3600, 250, 250) == 100.0

    def test_scales_with_duration(self):
        short = calculate_power_tss(1800, 200, 250)
        long = calculate_power_tss(7200, 200, 250)
        assert long == pytest.approx(short * 4, abs=0.2)

    def test_invalid_inputs_give_zero(self):
        assert calculate_power_tss(3600, 200, 0) == 0.0
        assert calculate_power_tss(0, 200, 250) == 0.0
        assert calculate_power_tss(3600, 0, 250) == 0.0


class TestNormalizedPower:

    def test_weighted_power_preferred(self):
        assert estimate_normalized_power(200, "Ride", weighted_power=230) == 230

    def test_variability_index_by_sport(self):
        assert estimate_normalized_power(200, "Ride") == pytest.approx(210)
        assert estimate_normalized_power(200, "Run") == pytest.approx(204)
        assert estimate_normalized_power(200, "Kayaking") == pytest.approx(206)


class TestSportMultipliers:

    def test_run_above_ride(self):
        assert get_sport_multiplier("Run") > get_sport_multiplier("Ride")

    def test_unknown_sport_uses_default(self):
        assert get_sport_multiplier("Underwater Basket Weaving") == DEFAULT_SPORT_MULTIPLIER
