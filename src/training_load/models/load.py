"""Derived training load data: scores, daily load points, rolling metrics."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class TrainingStatus(str, Enum):
    """Training status derived from acute vs chronic load."""
    PEAK = "peak"            # Load sustained high relative to chronic baseline
    MAINTAIN = "maintain"    # Balanced, near baseline
    BUILD = "build"          # Rising but not yet strained
    RECOVER = "recover"      # Low relative load or insufficient data


class ScoringPath(str, Enum):
    """Which TSS model scored an activity."""
    POWER = "power"
    HEART_RATE = "heart_rate"
    UNSCOREABLE = "unscoreable"


@dataclass(frozen=True)
class ActivityScore:
    """All per-activity load scores, computed together."""

    trimp: float  # Full precision; to_dict() rounds
    tss: float
    normalized_load: float
    scoring_path: ScoringPath

    def to_dict(self) -> dict:
        return {
            "trimp": round(self.trimp, 1),
            "tss": self.tss,
            "normalized_load": self.normalized_load,
            "scoring_path": self.scoring_path.value,
        }


@dataclass(frozen=True)
class LoadActivitySummary:
    """
    Descriptive summary of what made up a day's load.

    For a single-activity day this is the activity itself; for a
    multi-activity day it is a synthetic merge ("3 activities", "Mixed").
    """

    name: str
    sport_type: str
    duration: int  # Moving time in seconds
    avg_hr: Optional[float] = None
    avg_power: Optional[float] = None
    activity_count: int = 1

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "sport_type": self.sport_type,
            "duration": self.duration,
            "avg_hr": self.avg_hr,
            "avg_power": self.avg_power,
            "activity_count": self.activity_count,
        }


@dataclass(frozen=True)
class LoadPoint:
    """One calendar day's aggregated training stimulus."""

    date: date
    trimp: float
    tss: float
    normalized_load: float
    activity: LoadActivitySummary

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "date": self.date.isoformat(),
            "trimp": self.trimp,
            "tss": self.tss,
            "normalized_load": self.normalized_load,
            "activity": self.activity.to_dict(),
        }


@dataclass(frozen=True)
class TrainingLoadMetrics:
    """Rolling summary over a sequence of load points."""

    acute: float  # 7-day mean load (fatigue)
    chronic: float  # 28-day mean load (fitness baseline)
    balance: float  # Acute:chronic workload ratio
    ramp_rate: float  # Week-over-week change, percent
    status: TrainingStatus
    recommendation: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "acute": self.acute,
            "chronic": self.chronic,
            "balance": self.balance,
            "rampRate": self.ramp_rate,
            "status": self.status.value,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class LoadTrendPoint:
    """Daily load with the rolling metrics as of that day."""

    date: date
    daily_load: float
    acute: float
    chronic: float
    balance: float
    trimp: float
    tss: float

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "daily_load": self.daily_load,
            "acute": self.acute,
            "chronic": self.chronic,
            "balance": self.balance,
            "trimp": self.trimp,
            "tss": self.tss,
        }
