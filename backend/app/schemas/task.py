"""Task Schemas — request validation for POST /task and the recurrence config.

Invariants:
    - title: trimmed, 3-100 chars
    - description: <= 1000 chars, blank normalized to None
    - priority: Low(0) | Medium(1) | High(2) as a JSON integer, default Medium
    - estimatedTime: integer 5-1440 minutes or None (numeric strings and floats refused)
    - recurrence end: ISO date, positive count or None; never 0, a bool or a float
    - recurrenceConfig: None or a JSON string matching RecurrenceConfig; forwarded verbatim

Design Decisions:
    - recurrenceConfig stays a string on the wire (the UI serializes it) but is parsed
      once here so malformed JSON fails as a 400 instead of inside the procedure
    - dueDate as date: asyncpg binds date objects, not strings
"""

import re
from datetime import date

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from app.core.domain_types import RecurrenceType, TaskPriority
from app.schemas.common import CamelModel, blank_to_none

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


class RecurrenceConfig(BaseModel):
    """Repeat rule: every `interval` units of `type`, until a date or a count."""
    type: RecurrenceType
    interval: StrictInt = Field(1, ge=1)
    end: date | StrictInt | None = None

    @field_validator("end", mode="before")
    @classmethod
    def count_or_iso_date(cls, v):
        # Numbers are occurrence counts, never epoch offsets.
        bad_count = isinstance(v, (bool, float)) or (isinstance(v, int) and v < 1)
        bad_date = isinstance(v, str) and not _ISO_DATE.fullmatch(v)
        if bad_count or bad_date:
            raise ValueError("end must be an ISO date or a positive occurrence count")
        return v


class TaskCreate(CamelModel):
    """Task creation payload."""
    title: str = Field(min_length=3, max_length=100)
    description: str | None = Field(None, max_length=1000)
    due_date: date | None = None
    priority: TaskPriority = TaskPriority.MEDIUM
    estimated_time: StrictInt | None = Field(None, ge=5, le=1440)
    recurrence_config: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("title cannot be empty or whitespace")
        return v

    @field_validator("priority", mode="before")
    @classmethod
    def integer_priority(cls, v):
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError("priority must be an integer (0, 1 or 2)")
        return v

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str | None) -> str | None:
        return blank_to_none(v)

    @field_validator("recurrence_config")
    @classmethod
    def validate_recurrence(cls, v: str | None) -> str | None:
        if not v:
            return None
        try:
            RecurrenceConfig.model_validate_json(v)
        except ValidationError as e:
            raise ValueError(f"invalid recurrence config: {e.errors()[0]['msg']}")
        return v


class TaskCreateResult(CamelModel):
    id_task: int
