"""Application factory"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from game_catalog.api.errors import register_exception_handlers
from game_catalog.api.middleware import (
    FixedWindowRateLimiter,
    RateLimitMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from game_catalog.api.routes import router as videogames_router
from game_catalog.api.static import mount_static
from game_catalog.core.config import Settings
from game_catalog.core.logging import get_logger
from game_catalog.db.database import build_engine, build_session_factory, check_connection

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    engine: Engine = app.state.engine
    try:
        check_connection(engine)
    except SQLAlchemyError as exc:
        log.error("Error connecting to database", error=str(exc), exc_info=True)
        raise
    yield
    engine.dispose()


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Build the FastAPI app. An engine can be injected (tests); otherwise one is built from the settings."""
    settings = settings or Settings.from_env()
    engine = engine or build_engine(settings)

    app = FastAPI(title="Video Game Catalog", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.rate_limiter = FixedWindowRateLimiter(
        settings.rate_limit_max, settings.rate_limit_window_seconds
    )

    # Last added runs first: 429 responses still get CORS and security headers
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RateLimitMiddleware, limiter=app.state.rate_limiter)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(videogames_router)
    mount_static(app, settings)
    return app
