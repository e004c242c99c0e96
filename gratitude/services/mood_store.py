# services/mood_store.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from gratitude.core.database import Database
from gratitude.core.pagination import clamp_limit
from gratitude.core.timeutil import Clock, as_utc, utc_now
from gratitude.crud.mood import crud_mood
from gratitude.data.moods import parse_mood
from gratitude.rpc.status import Ok, RpcResult, internal, invalid_argument
from gratitude.schemas.mood import (
    MOOD_LIST_DEFAULT,
    MOOD_LIST_MAX,
    MOOD_NOTE_MAX,
    CreateMoodRequest,
    ListMoodsRequest,
    ListMoodsResponse,
    MoodRead,
)

logger = logging.getLogger(__name__)


class MoodStoreService:
    """Owns mood tags; served as ``moods.Moods``."""

    service_name = "moods.Moods"
    rpc_methods = {
        "CreateMood": (CreateMoodRequest, "create_mood"),
        "ListMoods": (ListMoodsRequest, "list_moods"),
    }

    def __init__(self, database: Database, *, clock: Clock = utc_now):
        self.db = database
        self.clock = clock
        self.crud = crud_mood

    def create_mood(self, request: CreateMoodRequest) -> RpcResult:
        """
        Validate and persist one mood tag.

        The mood must be in the closed enumeration (case-insensitive);
        there is no fallback here. The note is optional, up to 240 chars.
        """
        mood = parse_mood(request.mood)
        if mood is None:
            return invalid_argument("invalid mood")

        note = (request.note or "").strip()
        if len(note) > MOOD_NOTE_MAX:
            return invalid_argument(f"note max {MOOD_NOTE_MAX} chars")

        try:
            with self.db.session() as db:
                row = self.crud.create(db, mood=mood.value, note=note, created_at=as_utc(self.clock()))
                return Ok(MoodRead.model_validate(row))
        except SQLAlchemyError:
            logger.exception("CreateMood failed")
            return internal("db error")

    def list_moods(self, request: ListMoodsRequest) -> RpcResult:
        limit = clamp_limit(request.limit, default=MOOD_LIST_DEFAULT, maximum=MOOD_LIST_MAX)
        try:
            with self.db.session() as db:
                rows = self.crud.list_recent(db, limit=limit)
                return Ok(ListMoodsResponse(moods=[MoodRead.model_validate(row) for row in rows]))
        except SQLAlchemyError:
            logger.exception("ListMoods failed")
            return internal("db error")
