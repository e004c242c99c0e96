# gratitude/api/deps.py
from fastapi import Depends, Request

from gratitude.bootstrap import RpcClients
from gratitude.rpc.clients import EntriesClient, MoodsClient, StatsClient


def get_clients(request: Request) -> RpcClients:
    """RPC stubs built at startup and stored on the app."""
    return request.app.state.clients


def get_entries_client(clients: RpcClients = Depends(get_clients)) -> EntriesClient:
    return clients.entries


def get_moods_client(clients: RpcClients = Depends(get_clients)) -> MoodsClient:
    return clients.moods


def get_stats_client(clients: RpcClients = Depends(get_clients)) -> StatsClient:
    return clients.stats
