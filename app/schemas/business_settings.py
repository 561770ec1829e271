"""Business settings schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from app.scheduling.slots import (
    DEFAULT_CLOSING,
    DEFAULT_OPENING,
    DEFAULT_STEP_MINUTES,
    format_time_of_day,
    parse_time_of_day,
)


def _validate_time_of_day(v: str) -> str:
    try:
        parse_time_of_day(v)
    except ValueError:
        raise ValueError("Time must use the HH:MM format")
    return v


class BlockedPeriodCreate(BaseModel):
    """Schema for blocking a time range on a given day."""

    day: date
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def validate_times(cls, v: str) -> str:
        """Validate HH:MM."""
        return _validate_time_of_day(v)

    @model_validator(mode="after")
    def validate_range(self) -> "BlockedPeriodCreate":
        """End must come after start."""
        if self.end <= self.start:
            raise ValueError("Blocked period must end after it starts")
        return self


class BlockedPeriod(BlockedPeriodCreate):
    """Stored blocked period."""

    id: str


class BusinessSettingsUpdate(BaseModel):
    """Schema for updating business settings. Omitted fields are kept."""

    business_name: str | None = Field(None, max_length=200)
    opening_time: str | None = None
    closing_time: str | None = None

    @field_validator("opening_time", "closing_time")
    @classmethod
    def validate_times(cls, v: str | None) -> str | None:
        """Validate HH:MM when provided."""
        return _validate_time_of_day(v) if v is not None else v

    @field_validator("business_name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v


class BusinessSettingsResponse(BaseModel):
    """Business settings response schema."""

    business_name: str = ""
    opening_time: str = format_time_of_day(DEFAULT_OPENING)
    closing_time: str = format_time_of_day(DEFAULT_CLOSING)
    slot_minutes: int = DEFAULT_STEP_MINUTES
    blocked_periods: list[BlockedPeriod] = Field(default_factory=list)
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}

    def blocked_on(self, day: date) -> list[BlockedPeriod]:
        """Blocked periods falling on ``day``."""
        return [period for period in self.blocked_periods if period.day == day]
