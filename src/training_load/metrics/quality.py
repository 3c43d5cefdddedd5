"""Data quality assessment for training load calculations."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ..models import Activity


class DataQuality(str, Enum):
    """How much physiological data backs the load numbers."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    NONE = "none"


@dataclass(frozen=True)
class DataQualityReport:
    total_activities: int
    activities_with_hr: int
    activities_with_power: int
    quality: DataQuality

    @property
    def hr_percentage(self) -> float:
        if self.total_activities == 0:
            return 0.0
        return self.activities_with_hr / self.total_activities * 100

    @property
    def power_percentage(self) -> float:
        if self.total_activities == 0:
            return 0.0
        return self.activities_with_power / self.total_activities * 100

    def to_dict(self) -> dict:
        return {
            "total_activities": self.total_activities,
            "activities_with_hr": self.activities_with_hr,
            "activities_with_power": self.activities_with_power,
            "quality": self.quality.value,
        }


def grade_data_quality(with_hr: int, with_power: int, total: int) -> DataQuality:
    """
    Grade coverage of heart rate and power data.

    - excellent: HR >= 80%, power >= 20%, at least 20 activities
    - good: HR >= 60% with 15+ activities, or power >= 40% with 10+
    - fair: HR >= 30% or 10+ activities
    - poor: HR >= 10% or 5+ activities
    """
    if total == 0:
        return DataQuality.NONE

    hr_pct = with_hr / total * 100
    power_pct = with_power / total * 100

    if hr_pct >= 80 and power_pct >= 20 and total >= 20:
        return DataQuality.EXCELLENT
    if (hr_pct >= 60 and total >= 15) or (power_pct >= 40 and total >= 10):
        return DataQuality.GOOD
    if hr_pct >= 30 or total >= 10:
        return DataQuality.FAIR
    if hr_pct >= 10 or total >= 5:
        return DataQuality.POOR
    return DataQuality.NONE


def assess_data_quality(activities: Iterable[Activity]) -> DataQualityReport:
    activities = list(activities)
    with_hr = sum(1 for a in activities if a.has_heart_rate_data)
    with_power = sum(1 for a in activities if a.has_power_data)
    return DataQualityReport(
        total_activities=len(activities),
        activities_with_hr=with_hr,
        activities_with_power=with_power,
        quality=grade_data_quality(with_hr, with_power, len(activities)),
    )
