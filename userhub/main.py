"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from userhub.config import Settings, configure_logging, get_settings
from userhub.database import create_tables, dispose_engine, get_engine, initialize_database
from userhub.document_store import close_document_store, initialize_document_store
from userhub.infrastructure.common.error_handlers import register_exception_handlers
from userhub.infrastructure.common.rate_limit import limiter
from userhub.infrastructure.common.schemas.response_wrappers import SuccessResponse
from userhub.infrastructure.identity.routers import auth, users

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open both store clients once at startup and close them once at shutdown."""
    settings: Settings = app.state.settings
    initialize_database(settings)
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables(get_engine())
    await initialize_document_store(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT)
    try:
        yield
    finally:
        await close_document_store()
        await dispose_engine()
        logger.info("application_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.state.settings = settings
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
    register_exception_handlers(app, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
    app.include_router(users.router, prefix=settings.API_V1_PREFIX)

    @app.get("/health")
    async def health() -> SuccessResponse:
        return SuccessResponse(message="OK")

    return app


app = create_app()
