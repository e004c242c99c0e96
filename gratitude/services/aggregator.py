# services/aggregator.py
import logging
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Iterable, List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gratitude.core.database import Database
from gratitude.core.timeutil import Clock, as_utc, days_back, start_of_day, utc_day, utc_now
from gratitude.crud.stats import crud_stats
from gratitude.rpc.status import Ok, RpcResult, internal
from gratitude.schemas.stats import DayCount, GetOverviewRequest, MoodCount, Overview

logger = logging.getLogger(__name__)

WINDOW_DAYS = 7


# =====================================================================
# PURE HELPERS
# =====================================================================

def window_days(today: date, size: int = WINDOW_DAYS) -> List[date]:
    """``size`` consecutive days ending at ``today``, oldest first."""
    return [days_back(today, offset) for offset in range(size - 1, -1, -1)]


def build_last7_days(timestamps: Iterable[datetime], today: date) -> List[DayCount]:
    """Bucket timestamps by UTC day into the 7-day window; empty days report 0."""
    per_day = Counter(utc_day(ts) for ts in timestamps)
    return [DayCount(date=day, count=per_day.get(day, 0)) for day in window_days(today)]


def compute_streak(days_desc: Iterable[date], today: date) -> int:
    """
    Consecutive entry days ending today.

    ``days_desc`` are distinct days, most recent first. The run must
    include today: a run that ends yesterday counts as 0. The walk stops
    at the first day that breaks the run, so the iterable is consumed
    lazily.
    """
    expected = today
    streak = 0
    for day in days_desc:
        if day != expected:
            break
        streak += 1
        expected = expected - timedelta(days=1)
    return streak


def rank_moods(counts: Iterable[Tuple[str, int]]) -> List[MoodCount]:
    """Drop zero counts; order by count descending, then mood name."""
    ranked = sorted(
        ((mood, count) for mood, count in counts if count > 0),
        key=lambda item: (-item[1], item[0]),
    )
    return [MoodCount(mood=mood, count=count) for mood, count in ranked]


# =====================================================================
# SERVICE
# =====================================================================

class AggregatorService:
    """
    Derives the statistics overview from the entries and moods tables.

    Served as ``stats.Stats``. Holds no state of its own; every call runs
    five independent read queries in one scoped session. There is no
    snapshot across them, so concurrent writes may show up in some
    figures and not others. Any failing query fails the whole call.
    """

    service_name = "stats.Stats"
    rpc_methods = {
        "GetOverview": (GetOverviewRequest, "get_overview"),
    }

    def __init__(self, database: Database, *, clock: Clock = utc_now):
        self.db = database
        self.clock = clock
        self.crud = crud_stats

    def get_overview(self, request: GetOverviewRequest) -> RpcResult:
        now = as_utc(self.clock())

        try:
            with self.db.session() as db:
                overview = self._build_overview(db, now)
        except SQLAlchemyError:
            logger.exception("GetOverview failed")
            return internal("stats unavailable")

        return Ok(overview)

    def _build_overview(self, db: Session, now: datetime) -> Overview:
        today = now.date()
        window_start = start_of_day(window_days(today)[0])
        # Moods use a rolling window, entries use calendar days
        mood_since = now - timedelta(days=WINDOW_DAYS - 1)

        total_entries = self.crud.count_entries(db)
        entries_today = self.crud.count_entries_since(db, since=start_of_day(today))
        last7_days = build_last7_days(
            self.crud.entry_timestamps_since(db, since=window_start), today
        )
        streak_days = compute_streak(self.crud.iter_entry_days(db), today)
        mood_trend = rank_moods(self.crud.mood_counts_since(db, since=mood_since))

        return Overview(
            total_entries=total_entries,
            entries_today=entries_today,
            streak_days=streak_days,
            last7_days=last7_days,
            mood_trend=mood_trend,
        )
