"""Runtime settings for schedule computations.

Values are read from the environment (prefix ``METER_SCHEDULE_``) or an
optional ``.env`` file.  Every component also accepts explicit overrides, so
the cached instance returned by :func:`get_settings` is only a default.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScheduleSettings(BaseSettings):
    due_offset_days: int = Field(default=15, ge=1)
    disconnection_business_days: int = Field(default=3, ge=1)
    roll_forward_max_days: int = Field(default=366, ge=1)
    # numpy weekmask, Monday first
    weekmask: str = "1111100"
    # Python weekday of the first grid column (6 = Sunday)
    week_starts_on: int = Field(default=6, ge=0, le=6)
    holiday_date_format: str = "%B %d, %Y"

    model_config = SettingsConfigDict(
        env_prefix="METER_SCHEDULE_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("weekmask")
    @classmethod
    def validate_weekmask(cls, value: str) -> str:
        value = value.strip()
        if len(value) != 7 or set(value) - {"0", "1"}:
            raise ValueError(f"weekmask must be seven 0/1 characters; got {value!r}")
        if "1" not in value:
            raise ValueError("weekmask must contain at least one business day")
        return value


@lru_cache
def get_settings() -> ScheduleSettings:
    return ScheduleSettings()
