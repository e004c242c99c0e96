# gratitude/api/routers/moods.py
from typing import Optional
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from gratitude.api.deps import get_moods_client
from gratitude.core.exceptions import unwrap
from gratitude.core.pagination import parse_limit
from gratitude.data.moods import MOOD_OPTIONS, mood_option
from gratitude.rpc.clients import MoodsClient
from gratitude.schemas.mood import MOOD_LIST_DEFAULT, MOOD_LIST_MAX, MoodOption


# ====================================================
# PYDANTIC SCHEMAS
# ====================================================


class MoodCreateBody(BaseModel):
    mood: Optional[str] = Field(default="", description="One of the mood options")
    note: Optional[str] = Field(default="", description="Optional note, up to 240 characters")


# ====================================================
# ROUTER
# ====================================================


router = APIRouter(prefix="/moods", tags=["Moods"])


@router.get("/all")
def list_moods(
    limit: Optional[str] = Query(None, description="1-100, default 30"),
    client: MoodsClient = Depends(get_moods_client),
):
    limit_value = parse_limit(limit, default=MOOD_LIST_DEFAULT, maximum=MOOD_LIST_MAX)
    rows = unwrap(client.list_moods(limit_value))
    return {"rows": rows}


@router.post("")
def create_mood(
    body: Optional[MoodCreateBody] = None,
    client: MoodsClient = Depends(get_moods_client),
):
    """Tag a mood. Unknown moods are rejected by the store with a 400."""
    mood = (body.mood if body else "") or ""
    note = (body.note if body else "") or ""
    created = unwrap(client.create_mood(mood, note))
    return {"ok": True, "mood": created}


@router.get("/options")
def list_mood_options():
    """Display labels and emoji for every mood, in presentation order."""
    return {"rows": [MoodOption(**option) for option in MOOD_OPTIONS]}


@router.get("/options/{value}", response_model=MoodOption)
def get_mood_option(value: str):
    """Display metadata for one stored value; unknown values get the default option."""
    return MoodOption(**mood_option(value))
