# crud/stats.py
from typing import Iterator, List, Optional, Tuple
from datetime import date, datetime
from sqlalchemy.orm import Session
from sqlalchemy import desc, func

from gratitude.core.timeutil import utc_day
from gratitude.models.entry import Entry
from gratitude.models.mood import Mood


class CRUDStats:
    """Read-only queries over the entries and moods tables."""

    # =====================================================================
    # ENTRIES
    # =====================================================================

    def count_entries(self, db: Session) -> int:
        return db.query(func.count(Entry.id)).scalar() or 0

    def count_entries_since(self, db: Session, *, since: datetime) -> int:
        return (
            db.query(func.count(Entry.id))
            .filter(Entry.created_at >= since)
            .scalar()
        ) or 0

    def entry_timestamps_since(self, db: Session, *, since: datetime) -> List[datetime]:
        """Creation times of every entry at or after ``since``."""
        rows = db.query(Entry.created_at).filter(Entry.created_at >= since).all()
        return [created_at for (created_at,) in rows]

    def iter_entry_days(self, db: Session, *, batch_size: int = 500) -> Iterator[date]:
        """
        Distinct UTC days holding at least one entry, most recent first.

        Streams timestamps newest-first in batches, so a consumer that stops
        early never reads the rest of the table.
        """
        query = (
            db.query(Entry.created_at)
            .order_by(desc(Entry.created_at))
            .yield_per(batch_size)
        )
        previous: Optional[date] = None
        for (created_at,) in query:
            day = utc_day(created_at)
            if day != previous:
                previous = day
                yield day

    # =====================================================================
    # MOODS
    # =====================================================================

    def mood_counts_since(self, db: Session, *, since: datetime) -> List[Tuple[str, int]]:
        rows = (
            db.query(Mood.mood, func.count(Mood.id))
            .filter(Mood.created_at >= since)
            .group_by(Mood.mood)
            .all()
        )
        return [(mood, int(count)) for mood, count in rows]


crud_stats = CRUDStats()
