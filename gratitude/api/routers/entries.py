# gratitude/api/routers/entries.py
from typing import Optional
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from gratitude.api.deps import get_entries_client
from gratitude.core.exceptions import unwrap
from gratitude.core.pagination import parse_limit
from gratitude.rpc.clients import EntriesClient
from gratitude.schemas.entry import ENTRY_LIST_DEFAULT, ENTRY_LIST_MAX


# ====================================================
# PYDANTIC SCHEMAS
# ====================================================


class EntryCreateBody(BaseModel):
    text: Optional[str] = Field(default="", description="Gratitude note, 1-200 characters")


# ====================================================
# ROUTER
# ====================================================


router = APIRouter(prefix="/entries", tags=["Entries"])


@router.get("/all")
def list_entries(
    limit: Optional[str] = Query(None, description="1-200, default 50"),
    client: EntriesClient = Depends(get_entries_client),
):
    """Most recent entries, wrapped as ``{rows: [...]}``."""
    limit_value = parse_limit(limit, default=ENTRY_LIST_DEFAULT, maximum=ENTRY_LIST_MAX)
    rows = unwrap(client.list_entries(limit_value))
    return {"rows": rows}


@router.post("")
def create_entry(
    body: Optional[EntryCreateBody] = None,
    client: EntriesClient = Depends(get_entries_client),
):
    """Save a gratitude entry. Validation failures come back as 400."""
    text = (body.text if body and body.text else "").strip()
    entry = unwrap(client.create_entry(text))
    return {"ok": True, "entry": entry}
