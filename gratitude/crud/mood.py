# crud/mood.py
from typing import List
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy import desc

from gratitude.models.mood import Mood


class CRUDMood:
    """CRUD operations for Mood model. Rows are append-only."""

    def create(self, db: Session, *, mood: str, note: str, created_at: datetime) -> Mood:
        db_obj = Mood(mood=mood, note=note, created_at=created_at)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def list_recent(self, db: Session, *, limit: int) -> List[Mood]:
        return (
            db.query(Mood)
            .order_by(desc(Mood.created_at), desc(Mood.id))
            .limit(limit)
            .all()
        )


crud_mood = CRUDMood()
