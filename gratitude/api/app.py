# gratitude/api/app.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gratitude.api.routers import entries, moods, stats
from gratitude.bootstrap import RpcClients
from gratitude.core.config import Settings
from gratitude.core.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)


def create_app(settings: Settings, clients: RpcClients) -> FastAPI:
    """Facade gateway: one RPC call per route, stable response shapes."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        clients.close()
        logger.info("RPC channels closed")

    # =====================================================================
    # CREATE APP
    # =====================================================================

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        description="Gratitude journal gateway",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.clients = clients

    # =====================================================================
    # CORS MIDDLEWARE
    # =====================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # =====================================================================
    # HEALTH CHECK (before routers)
    # =====================================================================

    @app.get("/healthz")
    def health_check():
        """Liveness only; no dependency checks."""
        return {"ok": True}

    # =====================================================================
    # ROUTES
    # =====================================================================

    app.include_router(entries.router)
    app.include_router(moods.router)
    app.include_router(stats.router)

    logger.info("Gateway routes registered")
    return app
