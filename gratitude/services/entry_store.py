# services/entry_store.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from gratitude.core.database import Database
from gratitude.core.pagination import clamp_limit
from gratitude.core.timeutil import Clock, as_utc, utc_now
from gratitude.crud.entry import crud_entry
from gratitude.rpc.status import Ok, RpcResult, internal, invalid_argument
from gratitude.schemas.entry import (
    ENTRY_LIST_DEFAULT,
    ENTRY_LIST_MAX,
    ENTRY_TEXT_MAX,
    CreateEntryRequest,
    EntryRead,
    ListEntriesRequest,
    ListEntriesResponse,
)

logger = logging.getLogger(__name__)


class EntryStoreService:
    """
    Owns gratitude entries; served as ``entries.Entries``.

    Entries are append-only: there is no update or delete.
    """

    service_name = "entries.Entries"
    rpc_methods = {
        "CreateEntry": (CreateEntryRequest, "create_entry"),
        "ListEntries": (ListEntriesRequest, "list_entries"),
    }

    def __init__(self, database: Database, *, clock: Clock = utc_now):
        self.db = database
        self.clock = clock
        self.crud = crud_entry

    # =====================================================================
    # CREATE
    # =====================================================================

    def create_entry(self, request: CreateEntryRequest) -> RpcResult:
        """
        Validate and persist one entry.

        Errors:
            INVALID_ARGUMENT: empty text or more than 200 characters
            INTERNAL: storage failure
        """
        text = (request.text or "").strip()
        if not text:
            return invalid_argument("text is required")
        if len(text) > ENTRY_TEXT_MAX:
            return invalid_argument(f"max {ENTRY_TEXT_MAX} chars")

        try:
            with self.db.session() as db:
                entry = self.crud.create(db, text=text, created_at=as_utc(self.clock()))
                return Ok(EntryRead.model_validate(entry))
        except SQLAlchemyError:
            logger.exception("CreateEntry failed")
            return internal("db error")

    # =====================================================================
    # LIST
    # =====================================================================

    def list_entries(self, request: ListEntriesRequest) -> RpcResult:
        limit = clamp_limit(request.limit, default=ENTRY_LIST_DEFAULT, maximum=ENTRY_LIST_MAX)
        try:
            with self.db.session() as db:
                rows = self.crud.list_recent(db, limit=limit)
                return Ok(ListEntriesResponse(entries=[EntryRead.model_validate(row) for row in rows]))
        except SQLAlchemyError:
            logger.exception("ListEntries failed")
            return internal("db error")
