"""
Shared fixtures: a file-backed SQLite database per test, a frozen clock,
the service registry and the gateway app wired in-process.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from gratitude.api.app import create_app
from gratitude.bootstrap import build_clients, build_registry
from gratitude.core.config import Settings
from gratitude.core.database import Database
from gratitude.core.timeutil import start_of_day
from gratitude.models import Entry, Mood
from gratitude.services.aggregator import AggregatorService
from gratitude.services.entry_store import EntryStoreService
from gratitude.services.mood_store import MoodStoreService

NOW = datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc)
TODAY = NOW.date()


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def at(days_ago: int, hour: int = 12, minute: int = 0) -> datetime:
    """UTC timestamp ``days_ago`` calendar days before TODAY."""
    return start_of_day(TODAY - timedelta(days=days_ago)) + timedelta(hours=hour, minutes=minute)


# ─────────────────────────────────────────────────────────
# Storage
# ─────────────────────────────────────────────────────────

@pytest.fixture
def clock():
    return FrozenClock(NOW)


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'gratitude-test.db'}")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def add_entries(database):
    """Insert entries straight into the table at the given timestamps."""
    def _add(*timestamps: datetime, text: str = "thankful") -> None:
        with database.session() as db:
            db.add_all([Entry(text=text, created_at=ts) for ts in timestamps])
    return _add


@pytest.fixture
def add_moods(database):
    """Insert (mood, timestamp) pairs straight into the table."""
    def _add(*rows) -> None:
        with database.session() as db:
            db.add_all([Mood(mood=mood, note="", created_at=ts) for mood, ts in rows])
    return _add


# ─────────────────────────────────────────────────────────
# Services
# ─────────────────────────────────────────────────────────

@pytest.fixture
def entry_store(database, clock):
    return EntryStoreService(database, clock=clock)


@pytest.fixture
def mood_store(database, clock):
    return MoodStoreService(database, clock=clock)


@pytest.fixture
def aggregator(database, clock):
    return AggregatorService(database, clock=clock)


@pytest.fixture
def registry(database, clock):
    return build_registry(database, clock=clock)


# ─────────────────────────────────────────────────────────
# Gateway
# ─────────────────────────────────────────────────────────

@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        LOG_LEVEL="DEBUG",
        ENTRIES_SERVICE_URL=None,
        MOODS_SERVICE_URL=None,
        STATS_SERVICE_URL=None,
    )


@pytest.fixture
def gateway(settings, registry):
    app = create_app(settings, build_clients(settings, registry))
    with TestClient(app) as client:
        yield client
