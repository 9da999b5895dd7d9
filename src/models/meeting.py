"""Meeting models: the logged meeting record and its creation draft."""

import datetime as dt
import json
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import Field, field_validator

from src.models.base import DomainModel, utc_now
from src.models.dates import normalize_meeting_date

DEFAULT_TITLE = "Untitled Meeting"
DEFAULT_DURATION_MINUTES = 30
DEFAULT_ATTENDEE_COUNT = 1


class MeetingType(str, Enum):
    """Fixed vocabulary of meeting types."""

    STANDUP = "standup"
    PLANNING = "planning"
    RETRO = "retro"
    REVIEW = "review"
    ONE_ON_ONE = "one-on-one"
    TEAM_SYNC = "team-sync"
    AD_HOC = "ad-hoc"
    ALL_HANDS = "all-hands"
    INTERVIEW = "interview"

    @classmethod
    def coerce(cls, value: Any) -> "MeetingType":
        """Map any raw value onto the vocabulary, unknown values to ad-hoc."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.AD_HOC


def parse_attendee_roles(value: Any) -> list[str]:
    """Parse attendee roles given as a list or a JSON-serialized list.

    Never raises: anything that is not a list of role ids (or a string
    holding one) yields an empty list. Duplicates are dropped keeping
    first-seen order.
    """
    if value is None:
        return []

    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            value = json.loads(value)
        except ValueError:
            return []

    if not isinstance(value, list | tuple | set | frozenset):
        return []

    roles: list[str] = []
    for item in value:
        if not isinstance(item, str):
            continue
        role_id = item.strip()
        if role_id and role_id not in roles:
            roles.append(role_id)
    return roles


def parse_int(value: Any) -> int | None:
    """Parse an integer leniently, returning None when impossible.

    Accepts ints, integral floats and numeric strings ("45", "45.0").
    Booleans are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return None


class CostInput(DomainModel):
    """The parts of a meeting that determine its cost.

    Unlike a MeetingDraft, a zero duration is kept as zero so cost guards
    can be exercised directly.
    """

    duration_minutes: int = Field(default=0, ge=0)
    attendee_roles: list[str] = Field(default_factory=list)
    attendee_count: int = Field(default=DEFAULT_ATTENDEE_COUNT, ge=0)

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def lenient_duration(cls, v: Any) -> int:
        parsed = parse_int(v)
        return parsed if parsed is not None and parsed > 0 else 0

    @field_validator("attendee_roles", mode="before")
    @classmethod
    def lenient_roles(cls, v: Any) -> list[str]:
        return parse_attendee_roles(v)

    @field_validator("attendee_count", mode="before")
    @classmethod
    def lenient_count(cls, v: Any) -> int:
        parsed = parse_int(v)
        if parsed is None or parsed < 0:
            return DEFAULT_ATTENDEE_COUNT
        return parsed


class MeetingDraft(DomainModel):
    """Caller-supplied meeting fields, before cost and identity are assigned.

    Every field is optional on input; missing or malformed values are
    replaced by the documented defaults instead of failing validation.
    """

    title: str = Field(default=DEFAULT_TITLE, description="Display title")
    date: dt.date | None = Field(
        default=None,
        description="Meeting date; defaults to the creation date",
    )
    duration_minutes: int = Field(default=DEFAULT_DURATION_MINUTES, gt=0)
    attendee_count: int = Field(default=DEFAULT_ATTENDEE_COUNT, gt=0)
    attendee_roles: list[str] = Field(default_factory=list)
    meeting_type: MeetingType = Field(default=MeetingType.AD_HOC)

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            return DEFAULT_TITLE
        return v

    @field_validator("date", mode="before")
    @classmethod
    def lenient_date(cls, v: Any) -> dt.date | None:
        return normalize_meeting_date(v)

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def lenient_duration(cls, v: Any) -> int:
        parsed = parse_int(v)
        return parsed if parsed is not None and parsed > 0 else DEFAULT_DURATION_MINUTES

    @field_validator("attendee_count", mode="before")
    @classmethod
    def lenient_count(cls, v: Any) -> int:
        parsed = parse_int(v)
        return parsed if parsed is not None and parsed > 0 else DEFAULT_ATTENDEE_COUNT

    @field_validator("attendee_roles", mode="before")
    @classmethod
    def lenient_roles(cls, v: Any) -> list[str]:
        return parse_attendee_roles(v)

    @field_validator("meeting_type", mode="before")
    @classmethod
    def lenient_type(cls, v: Any) -> MeetingType:
        return MeetingType.coerce(v)

    def cost_input(self) -> CostInput:
        """Project the cost-relevant fields."""
        return CostInput(
            duration_minutes=self.duration_minutes,
            attendee_roles=self.attendee_roles,
            attendee_count=self.attendee_count,
        )


class Meeting(MeetingDraft):
    """A logged meeting with its cost snapshot.

    Meetings are immutable once created: ``calculated_cost`` is computed
    with the rate table in effect at creation time and never recomputed,
    so later rate changes do not rewrite history.
    """

    id: str = Field(
        default_factory=lambda: f"meeting-{uuid4()}",
        description="Unique meeting identifier",
    )
    date: dt.date = Field(
        default_factory=lambda: utc_now().date(),
        description="Calendar date the meeting took place",
    )
    calculated_cost: float = Field(
        default=0.0,
        ge=0.0,
        description="Cost snapshot taken at creation time",
    )
    created_at: dt.datetime = Field(
        default_factory=utc_now,
        description="When the meeting was logged",
    )

    @field_validator("date", mode="before")
    @classmethod
    def lenient_date(cls, v: Any) -> dt.date:
        """Replaces the draft validator: a stored date that cannot be read is rejected."""
        parsed = normalize_meeting_date(v)
        if parsed is None:
            raise ValueError(f"unreadable meeting date: {v!r}")
        return parsed

    @field_validator("calculated_cost", mode="before")
    @classmethod
    def lenient_cost(cls, v: Any) -> float:
        try:
            cost = float(v)
        except (TypeError, ValueError):
            return 0.0
        return cost if cost > 0 else 0.0

    @property
    def hours(self) -> float:
        return self.duration_minutes / 60

    @classmethod
    def from_draft(cls, draft: MeetingDraft, calculated_cost: float) -> "Meeting":
        """Build the persisted record for a draft with its computed cost."""
        fields = draft.model_dump(exclude={"date"})
        if draft.date is not None:
            fields["date"] = draft.date
        return cls(**fields, calculated_cost=calculated_cost)
