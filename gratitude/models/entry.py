# models/entry.py

from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer, Text
from gratitude.core.database import Base


class Entry(Base):
    __tablename__ = "entries"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    text = Column(Text, nullable=False)  # trimmed, 1-200 chars
    created_at = Column(DateTime(timezone=True), nullable=False, index=True, default=lambda: datetime.now(timezone.utc))
