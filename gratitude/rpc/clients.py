# gratitude/rpc/clients.py
import logging
from typing import Type

from pydantic import BaseModel, ValidationError

from gratitude.rpc.channels import Channel
from gratitude.rpc.status import Ok, RpcResult, internal
from gratitude.schemas.entry import (
    CreateEntryRequest,
    EntryRead,
    ListEntriesRequest,
    ListEntriesResponse,
)
from gratitude.schemas.mood import (
    CreateMoodRequest,
    ListMoodsRequest,
    ListMoodsResponse,
    MoodRead,
)
from gratitude.schemas.stats import GetOverviewRequest, Overview

logger = logging.getLogger(__name__)


class RpcClient:
    """Typed stub over a channel: builds requests, decodes responses."""

    service: str = ""

    def __init__(self, channel: Channel):
        self.channel = channel

    def _call(self, method: str, request: BaseModel, response_type: Type[BaseModel]) -> RpcResult:
        result = self.channel.call(self.service, method, request)
        if not result.ok:
            return result
        try:
            return Ok(response_type.model_validate(result.value))
        except ValidationError:
            logger.exception("Undecodable %s/%s response", self.service, method)
            return internal("malformed response")


class EntriesClient(RpcClient):
    service = "entries.Entries"

    def create_entry(self, text: str) -> RpcResult:
        return self._call("CreateEntry", CreateEntryRequest(text=text), EntryRead)

    def list_entries(self, limit: int) -> RpcResult:
        result = self._call("ListEntries", ListEntriesRequest(limit=limit), ListEntriesResponse)
        return result.map(lambda response: response.entries)


class MoodsClient(RpcClient):
    service = "moods.Moods"

    def create_mood(self, mood: str, note: str = "") -> RpcResult:
        return self._call("CreateMood", CreateMoodRequest(mood=mood, note=note), MoodRead)

    def list_moods(self, limit: int) -> RpcResult:
        result = self._call("ListMoods", ListMoodsRequest(limit=limit), ListMoodsResponse)
        return result.map(lambda response: response.moods)


class StatsClient(RpcClient):
    service = "stats.Stats"

    def get_overview(self) -> RpcResult:
        return self._call("GetOverview", GetOverviewRequest(), Overview)
