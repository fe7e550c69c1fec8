"""Pydantic models describing training sessions and derived views."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gym_scheduler.services.identifiers import new_id


NAME_MAX_LENGTH = 60
LOCATION_MAX_LENGTH = 60
NOTES_MAX_LENGTH = 220


class TrainingFocus(str, Enum):
    """Training-goal category of a session, in display order."""

    STRENGTH = "Strength"
    HYPERTROPHY = "Hypertrophy"
    CONDITIONING = "Conditioning"
    MOBILITY = "Mobility"
    SKILL = "Skill"
    RECOVERY = "Recovery"


class Intensity(str, Enum):
    """Coarse perceived-effort tier."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class DayKey(str, Enum):
    """Weekday names, Monday first."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


DAYS: list[DayKey] = list(DayKey)
TRAINING_FOCI: list[TrainingFocus] = list(TrainingFocus)


class SessionDraft(BaseModel):
    """A session as supplied by the editor form, without an id.

    Every field falls back to the default draft so partially filled payloads
    (and older stored records) still validate. Free-text fields are clipped to
    their caps instead of being rejected; ``duration`` is deliberately left
    unbounded.
    """

    model_config = ConfigDict(frozen=True)

    name: str = "Untitled Session"
    focus: TrainingFocus = TrainingFocus.STRENGTH
    intensity: Intensity = Intensity.MEDIUM
    day: DayKey = DayKey.MONDAY
    start: str = Field(default="07:00", pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    duration: int = 60
    location: str = "Main Floor"
    notes: str = ""
    completed: bool = False

    @field_validator("name", mode="before")
    @classmethod
    def clip_name(cls, value):
        return value[:NAME_MAX_LENGTH] if isinstance(value, str) else value

    @field_validator("location", mode="before")
    @classmethod
    def clip_location(cls, value):
        return value[:LOCATION_MAX_LENGTH] if isinstance(value, str) else value

    @field_validator("notes", mode="before")
    @classmethod
    def clip_notes(cls, value):
        if value is None:
            return ""
        return value[:NOTES_MAX_LENGTH] if isinstance(value, str) else value

    @field_validator("completed", mode="before")
    @classmethod
    def coerce_completed(cls, value):
        # Strings such as "false" go through pydantic's bool parsing.
        if isinstance(value, str):
            return value
        return bool(value)


class TrainingSession(SessionDraft):
    """A scheduled session with its immutable identifier."""

    id: str = Field(default_factory=new_id)

    @field_validator("id", mode="before")
    @classmethod
    def backfill_id(cls, value):
        if value is None or value == "":
            return new_id()
        return str(value)


class SessionTemplate(BaseModel):
    """A canned session used to seed the week or prefill the editor."""

    model_config = ConfigDict(frozen=True)

    name: str
    focus: TrainingFocus
    intensity: Intensity
    duration: int
    location: str
    notes: str


class ScheduledSession(TrainingSession):
    """Session enriched with its computed end time for the weekly view."""

    end: str


class ScheduledDay(BaseModel):
    """One column of the weekly board."""

    day: DayKey
    sessions: list[ScheduledSession] = []
    total_minutes: int = 0
    total_duration: str = "0 min"


class DaySchedule(BaseModel):
    """All sessions planned on one weekday, earliest first."""

    day: DayKey
    sessions: list[TrainingSession] = []
    total_minutes: int = 0


class FocusVolume(BaseModel):
    """Planned and completed minutes for one training focus."""

    focus: TrainingFocus
    total_minutes: int = 0
    completed_minutes: int = 0


class FocusShare(BaseModel):
    """Share of the weekly volume taken by one focus, as 0..1 fractions."""

    focus: TrainingFocus
    planned: float = 0.0
    completed: float = 0.0


class WeekSummary(BaseModel):
    """Headline metrics for the whole week."""

    weekly_minutes: int
    weekly_volume: str
    session_count: int
    completion_rate: int = Field(ge=0, le=100)
    focus_volume: list[FocusVolume] = []
    focus_share: list[FocusShare] = []
