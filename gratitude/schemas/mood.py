# schemas/mood.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List
from datetime import datetime

from gratitude.core.pagination import to_limit
from gratitude.core.timeutil import as_utc

MOOD_NOTE_MAX = 240
MOOD_LIST_DEFAULT = 30
MOOD_LIST_MAX = 100


# =====================================================================
# A. REQUEST MESSAGES
# =====================================================================

class CreateMoodRequest(BaseModel):
    mood: str = ""
    note: str = ""


class ListMoodsRequest(BaseModel):
    limit: int = 0

    @field_validator("limit", mode="before")
    @classmethod
    def _lenient_limit(cls, value) -> int:
        return to_limit(value)


# =====================================================================
# B. RESPONSE MESSAGES
# =====================================================================

class MoodRead(BaseModel):
    """A persisted mood tag."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    mood: str
    note: str = ""
    created_at: datetime

    @field_validator("note", mode="before")
    @classmethod
    def _empty_note(cls, value):
        return value or ""

    @field_validator("created_at")
    @classmethod
    def _utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class ListMoodsResponse(BaseModel):
    moods: List[MoodRead] = Field(default_factory=list)


# =====================================================================
# C. DISPLAY
# =====================================================================

class MoodOption(BaseModel):
    """Presentation metadata for one mood value."""
    value: str
    label: str
    emoji: str
