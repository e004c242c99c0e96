# models/mood.py

from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer, String, Text
from gratitude.core.database import Base


class Mood(Base):
    __tablename__ = "moods"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    mood = Column(String(32), nullable=False, index=True)  # Enum: grateful, happy, calm, focused, energized, tired, stressed
    note = Column(Text, nullable=True)  # 0-240 chars
    created_at = Column(DateTime(timezone=True), nullable=False, index=True, default=lambda: datetime.now(timezone.utc))
