from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from errors import ValidationError


class Frequency(str, Enum):
    daily = "daily"
    weekly = "weekly"
    weekdays = "weekdays"
    weekends = "weekends"


class HabitCreate(BaseModel):
    name: str
    frequency: Frequency
    goal: str

    @field_validator("name", "goal", mode="before")
    @classmethod
    def not_blank(cls, value):
        if value is None or not str(value).strip():
            raise ValueError("must not be empty")
        return str(value).strip()


class HabitLogUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    completed: bool = False
    notes: str | None = None
    log_date: dt.date | None = Field(default=None, alias="date")

    @field_validator("log_date", mode="before")
    @classmethod
    def iso_day(cls, value):
        # Days are trusted as sent, but they must be plain YYYY-MM-DD strings
        if value is None or value == "" or isinstance(value, dt.date):
            return value or None
        text = str(value)
        try:
            day = dt.datetime.strptime(text, "%Y-%m-%d").date()
        except ValueError:
            day = None
        if day is None or day.isoformat() != text:
            raise ValueError("date must be formatted as YYYY-MM-DD")
        return day


class LogDay(BaseModel):
    completed: bool
    notes: str = ""


class HabitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    frequency: str
    goal: str
    created_at: dt.datetime | None = None


class EnrichedHabit(HabitRead):
    logs: dict[str, LogDay] = Field(default_factory=dict)
    current_streak: int = 0
    longest_streak: int = 0
    completion_rate: int = 0
    total_entries: int = 0


class HistoryDay(BaseModel):
    date: str
    day_name: str
    is_today: bool
    status: str  # completed, missed, pending
    notes: str = ""


class HabitSummary(BaseModel):
    total_habits: int = 0
    completed_today: int = 0
    best_streak: int = 0
    average_completion: int = 0


def validate(model, data):
    """Parse ``data`` into ``model``, raising the API's ValidationError on bad input."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        problems = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "body"
            problems.append(f"{field}: {err['msg']}")
        raise ValidationError("; ".join(problems)) from exc
