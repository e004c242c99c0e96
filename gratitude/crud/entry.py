# crud/entry.py
from typing import List
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy import desc

from gratitude.models.entry import Entry


class CRUDEntry:
    """CRUD operations for Entry model. Rows are append-only."""

    def create(self, db: Session, *, text: str, created_at: datetime) -> Entry:
        """
        Insert a new entry.

        Args:
            db: Database session
            text: Already trimmed and validated text
            created_at: UTC timestamp assigned by the store

        Returns:
            Persisted Entry with its server-assigned id
        """
        db_obj = Entry(text=text, created_at=created_at)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def list_recent(self, db: Session, *, limit: int) -> List[Entry]:
        """Most recent entries first; same-instant rows newest insert first."""
        return (
            db.query(Entry)
            .order_by(desc(Entry.created_at), desc(Entry.id))
            .limit(limit)
            .all()
        )


crud_entry = CRUDEntry()
