# schemas/entry.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List
from datetime import datetime

from gratitude.core.pagination import to_limit
from gratitude.core.timeutil import as_utc

ENTRY_TEXT_MAX = 200
ENTRY_LIST_DEFAULT = 50
ENTRY_LIST_MAX = 200


# =====================================================================
# A. REQUEST MESSAGES
# =====================================================================

class CreateEntryRequest(BaseModel):
    """CreateEntry input. Trimming and length checks happen in the store."""
    text: str = ""


class ListEntriesRequest(BaseModel):
    """ListEntries input. Non-positive limits fall back to the default."""
    limit: int = 0

    @field_validator("limit", mode="before")
    @classmethod
    def _lenient_limit(cls, value) -> int:
        return to_limit(value)


# =====================================================================
# B. RESPONSE MESSAGES
# =====================================================================

class EntryRead(BaseModel):
    """A persisted gratitude entry."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str = Field(..., max_length=ENTRY_TEXT_MAX)
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class ListEntriesResponse(BaseModel):
    entries: List[EntryRead] = Field(default_factory=list)
