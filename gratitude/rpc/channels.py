# gratitude/rpc/channels.py
import logging
from typing import Optional, Protocol

import httpx
from pydantic import BaseModel

from gratitude.rpc.envelope import decode_envelope
from gratitude.rpc.registry import ServiceRegistry
from gratitude.rpc.status import Err, RpcResult, StatusCode, internal

logger = logging.getLogger(__name__)


class Channel(Protocol):
    def call(self, service: str, method: str, request: BaseModel) -> RpcResult:
        ...


# =====================================================================
# IN-PROCESS
# =====================================================================

class InProcessChannel:
    """Dispatches straight into a local registry."""

    def __init__(self, registry: ServiceRegistry):
        self.registry = registry

    def call(self, service: str, method: str, request: BaseModel) -> RpcResult:
        return self.registry.dispatch(service, method, request.model_dump(mode="json"))

    def close(self) -> None:
        pass


# =====================================================================
# HTTP
# =====================================================================

class HttpChannel:
    """
    Posts calls to a remote RPC host at ``/rpc/{service}/{method}``.

    Every call is bounded by ``timeout`` seconds; a timeout surfaces as
    DEADLINE_EXCEEDED, any other transport failure as UNAVAILABLE.
    """

    def __init__(self, base_url: str, *, timeout: float = 10.0, client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def call(self, service: str, method: str, request: BaseModel) -> RpcResult:
        path = f"/rpc/{service}/{method}"
        try:
            response = self._client.post(path, json=request.model_dump(mode="json"))
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException:
            logger.warning("RPC %s/%s to %s timed out", service, method, self.base_url)
            return Err(StatusCode.DEADLINE_EXCEEDED, "deadline exceeded")
        except httpx.HTTPError as e:
            logger.error("RPC %s/%s to %s failed: %s", service, method, self.base_url, e)
            return Err(StatusCode.UNAVAILABLE, "service unavailable")
        except ValueError:
            logger.error("RPC %s/%s to %s returned a non-JSON body", service, method, self.base_url)
            return internal("malformed response")

        return decode_envelope(body)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
