# schemas/stats.py
from pydantic import BaseModel, Field
from typing import List
from datetime import date


class GetOverviewRequest(BaseModel):
    """GetOverview takes no input."""
    pass


class DayCount(BaseModel):
    date: date
    count: int = Field(..., ge=0)


class MoodCount(BaseModel):
    mood: str
    count: int = Field(..., ge=0)


class Overview(BaseModel):
    """Statistics snapshot, recomputed on every call."""
    total_entries: int = Field(..., ge=0)
    entries_today: int = Field(..., ge=0)
    streak_days: int = Field(..., ge=0)
    last7_days: List[DayCount] = Field(..., min_length=7, max_length=7)
    mood_trend: List[MoodCount] = Field(default_factory=list)
