"""
Application entry point.

Creates the FastAPI application and wires together:
- The shared in-memory store
- The request pipeline (error classification, load shedding, timeout)
- Application error handlers
- The key-value router
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from kvstore.core.config import Settings, settings as default_settings
from kvstore.domain.kv.ports import KeyValueStore
from kvstore.infrastructure.kv.in_memory_store import InMemoryKeyValueStore
from kvstore.interfaces.kv.router import router as kv_router
from kvstore.shared.errors.handlers import (
    ErrorClassifierMiddleware,
    register_error_handlers,
)
from kvstore.shared.logging import configure_logging
from kvstore.shared.middleware.load_shedding import (
    ConcurrencyLimiter,
    LoadSheddingMiddleware,
)
from kvstore.shared.middleware.timeout import TimeoutMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: the store lives exactly as long as the app."""
    logger.info(
        "Store ready (timeout=%.1fs, max_concurrent_requests=%d)",
        app.state.settings.request_timeout_seconds,
        app.state.settings.max_concurrent_requests,
    )
    yield
    entries = await app.state.store.list_all()
    logger.info("Shutting down, discarding %d entries", len(entries))


def create_app(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Each call builds
    a fresh store unless one is passed in.

    Args:
        settings: Settings to use instead of the environment-loaded ones.
        store: Store to serve instead of a new empty in-memory store.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store if store is not None else InMemoryKeyValueStore()
    app.state.limiter = ConcurrencyLimiter(settings.max_concurrent_requests)

    # --- Request pipeline (last added runs first) ---
    app.add_middleware(
        TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds
    )
    app.add_middleware(LoadSheddingMiddleware, limiter=app.state.limiter)
    app.add_middleware(ErrorClassifierMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(kv_router)

    return app
