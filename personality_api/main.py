"""Personality API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Paths match exactly: a trailing slash is a 404, never a redirect
    - Middleware chain (outermost first): recovery → logging → CORS → content type
    - Global error handlers map PersonalityAPIError → shared JSON envelope
    - Database initialized on startup via lifespan context manager, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema creation on startup is opt-out (DATABASE_CREATE_SCHEMA=false when alembic owns it)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from personality_api.api.error_handlers import register_error_handlers
from personality_api.api.middleware import register_middleware
from personality_api.api.routes import health, home, personalities
from personality_api.config import get_settings
from personality_api.infrastructure.database import close_db, init_db
from personality_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    logger.info(f"Personality API started ({settings.env})")
    yield
    await close_db()
    logger.info("Personality API shut down")


app = FastAPI(
    title="Personality API", version="1.0.0", lifespan=lifespan,
    redirect_slashes=False,
)

settings = get_settings()
register_middleware(app, settings.cors_origins)
register_error_handlers(app)

# Routes (explicit registration)
app.include_router(home.router)
app.include_router(personalities.router)
app.include_router(health.router)
