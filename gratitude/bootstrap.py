# gratitude/bootstrap.py
import logging
from dataclasses import dataclass
from typing import Optional

from gratitude.core.config import Settings
from gratitude.core.database import Database
from gratitude.core.timeutil import Clock, utc_now
from gratitude.rpc.channels import Channel, HttpChannel, InProcessChannel
from gratitude.rpc.clients import EntriesClient, MoodsClient, StatsClient
from gratitude.rpc.registry import ServiceRegistry
from gratitude.services.aggregator import AggregatorService
from gratitude.services.entry_store import EntryStoreService
from gratitude.services.mood_store import MoodStoreService

logger = logging.getLogger(__name__)


@dataclass
class RpcClients:
    """One stub per backend the gateway talks to."""
    entries: EntriesClient
    moods: MoodsClient
    stats: StatsClient

    def close(self) -> None:
        for client in (self.entries, self.moods, self.stats):
            client.channel.close()


def build_registry(database: Database, *, clock: Clock = utc_now) -> ServiceRegistry:
    """Entry store, mood store and aggregator sharing one injected pool."""
    return ServiceRegistry([
        EntryStoreService(database, clock=clock),
        MoodStoreService(database, clock=clock),
        AggregatorService(database, clock=clock),
    ])


def _channel(url: Optional[str], registry: Optional[ServiceRegistry], settings: Settings, name: str) -> Channel:
    if url:
        logger.info("%s served remotely at %s", name, url)
        return HttpChannel(url, timeout=settings.RPC_TIMEOUT_SECONDS)
    if registry is None:
        raise ValueError(f"{name} has no service URL and no local registry")
    return InProcessChannel(registry)


def build_clients(settings: Settings, registry: Optional[ServiceRegistry] = None) -> RpcClients:
    """
    Pick a channel per backend: HTTP when its ``*_SERVICE_URL`` is set,
    otherwise the local registry.
    """
    return RpcClients(
        entries=EntriesClient(_channel(settings.ENTRIES_SERVICE_URL, registry, settings, "entries")),
        moods=MoodsClient(_channel(settings.MOODS_SERVICE_URL, registry, settings, "moods")),
        stats=StatsClient(_channel(settings.STATS_SERVICE_URL, registry, settings, "stats")),
    )
