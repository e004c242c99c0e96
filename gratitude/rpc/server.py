# gratitude/rpc/server.py
import logging

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool

from gratitude.rpc.envelope import encode_result
from gratitude.rpc.registry import ServiceRegistry
from gratitude.rpc.status import invalid_argument

logger = logging.getLogger(__name__)


def create_rpc_app(registry: ServiceRegistry, *, title: str = "Gratitude RPC") -> FastAPI:
    """ASGI host exposing every service in ``registry`` over HTTP."""
    app = FastAPI(title=title, docs_url=None, redoc_url=None)

    @app.get("/healthz")
    def health_check():
        """Liveness only."""
        return {"ok": True, "services": list(registry.services)}

    @app.post("/rpc/{service}/{method}")
    async def call(service: str, method: str, request: Request):
        try:
            payload = await request.json()
        except ValueError:
            return encode_result(invalid_argument("request body must be JSON"))

        # Handlers block on the database; keep them off the event loop
        result = await run_in_threadpool(registry.dispatch, service, method, payload)
        if not result.ok:
            logger.info("RPC %s/%s -> %s", service, method, result.code.value)
        return encode_result(result)

    return app
