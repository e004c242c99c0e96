# gratitude/api/routers/stats.py
from fastapi import APIRouter, Depends

from gratitude.api.deps import get_stats_client
from gratitude.core.exceptions import unwrap
from gratitude.rpc.clients import StatsClient

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/overview")
def get_overview(client: StatsClient = Depends(get_stats_client)):
    """Totals, streak, 7-day histogram and mood trend, wrapped as ``{data: ...}``."""
    overview = unwrap(client.get_overview())
    return {"data": overview}
