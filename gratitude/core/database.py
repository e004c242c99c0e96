import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from gratitude.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


# =====================================================================
# DATABASE
# =====================================================================


class Database:
    """
    Owns the connection pool for one backing store.

    Built once at bootstrap and handed to every service that needs it.
    Sessions are checked out per call through ``session()`` and always
    returned to the pool.
    """

    def __init__(self, url: str, *, pool_size: int = 5, max_overflow: int = 10, pool_recycle: int = 1800):
        self.url = url
        engine_kwargs = dict(pool_pre_ping=True)
        connect_args = {}

        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        else:
            engine_kwargs.update({
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_recycle": pool_recycle,
            })

        self.engine: Engine = create_engine(url, connect_args=connect_args, **engine_kwargs)
        self._sessionmaker = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )

    def create_tables(self) -> None:
        """Create any missing tables."""
        # Registers the mapped classes on Base.metadata
        import gratitude.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Tables ensured on %s", self.engine.url.render_as_string(hide_password=True))

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Scoped session: commit on success, rollback on error, always closed."""
        db = self._sessionmaker()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
