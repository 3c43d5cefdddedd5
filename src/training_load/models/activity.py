"""Activity input model for workout records from the fitness platform."""

import math
from datetime import date, datetime
from typing import Any, Iterable, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ActivityParseError


_TRUTHY_STRINGS = {"true", "1", "yes", "y"}


def _positive_number(value: Any) -> Optional[float]:
    """Return value as a finite positive float, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


class Activity(BaseModel):
    """
    A single recorded workout, consumed read-only.

    Field names follow the Strava activity payload. Optional physiology
    that is missing or malformed (non-numeric, NaN, zero, negative) is
    stored as None so scoring can fall back to a lower-fidelity path.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    id: str
    athlete_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("athlete_id", "user_id")
    )
    name: str = "Activity"
    sport_type: str = Field(
        "Workout", validation_alias=AliasChoices("sport_type", "type")
    )

    # Timing
    start_date_local: datetime = Field(..., description="Local wall-clock start time")
    moving_time: int = Field(0, ge=0, description="Moving time in seconds")
    elapsed_time: Optional[int] = Field(None, description="Elapsed time in seconds")

    # Physiology
    has_heartrate: bool = False
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None
    average_watts: Optional[float] = None
    weighted_average_watts: Optional[float] = None
    perceived_exertion: Optional[float] = Field(None, description="RPE on a 1-10 scale")

    @field_validator("id", "athlete_id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return "Activity"
        return value

    @field_validator("sport_type", mode="before")
    @classmethod
    def _default_sport(cls, value: Any) -> Any:
        if not isinstance(value, str) or not value.strip():
            return "Workout"
        return value.strip()

    @field_validator("start_date_local", mode="after")
    @classmethod
    def _wall_clock(cls, value: datetime) -> datetime:
        # Strava marks local times with a misleading "Z"; keep the wall clock.
        return value.replace(tzinfo=None)

    @field_validator("moving_time", mode="before")
    @classmethod
    def _whole_seconds(cls, value: Any) -> Any:
        if isinstance(value, float) and math.isfinite(value):
            return int(round(value))
        return value

    @field_validator("elapsed_time", mode="before")
    @classmethod
    def _optional_seconds(cls, value: Any) -> Optional[int]:
        number = _positive_number(value)
        return int(round(number)) if number is not None else None

    @field_validator("has_heartrate", mode="before")
    @classmethod
    def _lenient_flag(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY_STRINGS
        if isinstance(value, (bool, int, float)):
            return bool(value)
        return False

    @field_validator(
        "average_heartrate",
        "max_heartrate",
        "average_watts",
        "weighted_average_watts",
        mode="before",
    )
    @classmethod
    def _drop_malformed(cls, value: Any) -> Optional[float]:
        return _positive_number(value)

    @field_validator("perceived_exertion", mode="before")
    @classmethod
    def _rpe_scale(cls, value: Any) -> Optional[float]:
        number = _positive_number(value)
        if number is None or number > 10:
            return None
        return number

    @property
    def has_heart_rate_data(self) -> bool:
        """Heart rate flag is set and an average heart rate is present."""
        return self.has_heartrate and self.average_heartrate is not None

    @property
    def has_power_data(self) -> bool:
        """Average power is present."""
        return self.average_watts is not None

    @property
    def duration_minutes(self) -> float:
        """Moving time in minutes."""
        return self.moving_time / 60

    @property
    def local_date(self) -> date:
        """Athlete-local calendar date of the start time."""
        return self.start_date_local.date()

    @classmethod
    def from_dicts(cls, rows: Iterable[dict]) -> List["Activity"]:
        """
        Parse raw activity rows.

        Raises:
            ActivityParseError: If a row is structurally invalid (missing id
                or start time, negative moving time, not a mapping).
        """
        activities = []
        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                raise ActivityParseError(
                    f"Activity row {index} is not an object",
                    index=index,
                )
            try:
                activities.append(cls.model_validate(row))
            except ValidationError as e:
                raise ActivityParseError(
                    f"Activity row {index} is invalid: {e.error_count()} validation error(s)",
                    index=index,
                    details={"errors": [err["msg"] for err in e.errors()]},
                ) from e
        return activities
