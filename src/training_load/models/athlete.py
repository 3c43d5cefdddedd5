"""Athlete physiological reference values."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_MAX_HEART_RATE = 190.0
DEFAULT_RESTING_HEART_RATE = 60.0
LACTATE_THRESHOLD_FRACTION = 0.85  # LTHR as a fraction of max HR


class AthleteThresholds(BaseModel):
    """
    Physiological thresholds used to scale training load.

    Immutable once constructed. A missing functional_threshold_power means
    "unknown", not zero: power-based scoring is skipped rather than run
    against a made-up FTP.
    """

    model_config = ConfigDict(frozen=True)

    max_heart_rate: float = Field(DEFAULT_MAX_HEART_RATE, gt=0, description="Max heart rate (bpm)")
    resting_heart_rate: float = Field(DEFAULT_RESTING_HEART_RATE, ge=0, description="Resting heart rate (bpm)")
    functional_threshold_power: Optional[float] = Field(None, gt=0, description="FTP (watts)")
    lactate_threshold: Optional[float] = Field(None, gt=0, description="Lactate threshold heart rate (bpm)")
    weight_kg: Optional[float] = Field(None, gt=0, description="Body weight (kg)")
    sex: Optional[Literal["male", "female"]] = Field(
        None, description="Selects Banister TRIMP coefficients; None uses male coefficients"
    )

    @property
    def heart_rate_reserve(self) -> float:
        """Max HR minus resting HR."""
        return self.max_heart_rate - self.resting_heart_rate

    @property
    def threshold_heart_rate(self) -> float:
        """Lactate threshold HR, estimated from max HR when not provided."""
        if self.lactate_threshold is not None:
            return self.lactate_threshold
        return self.max_heart_rate * LACTATE_THRESHOLD_FRACTION

    @property
    def has_ftp(self) -> bool:
        return self.functional_threshold_power is not None

    @property
    def power_to_weight(self) -> Optional[float]:
        """FTP in W/kg; None unless both FTP and body weight are known."""
        if self.functional_threshold_power is None or self.weight_kg is None:
            return None
        return round(self.functional_threshold_power / self.weight_kg, 2)
