"""ContentDesk API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_prefix (no auto-discovery)
    - Global error handlers map ContentDeskError → envelope responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contentdesk.api.error_handlers import register_error_handlers
from contentdesk.api.routes import (
    events, health, newsletters, opportunities, publications, reports, subscribers,
)
from contentdesk.config import get_settings
from contentdesk.infrastructure.database import init_db
from contentdesk.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("ContentDesk API started")
    yield
    logger.info("ContentDesk API shutting down")
    await manager.dispose()


app = FastAPI(
    title="ContentDesk API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (
    health, events, opportunities, publications, reports, newsletters, subscribers,
):
    app.include_router(module.router, prefix=settings.api_prefix)

register_error_handlers(app)
