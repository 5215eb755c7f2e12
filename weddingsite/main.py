"""Wedding Site API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WeddingSiteError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import weddingsite.infrastructure.database as db_module
from weddingsite.api.error_handlers import register_error_handlers
from weddingsite.infrastructure.observability import setup_logging
from weddingsite.config import get_settings
from weddingsite.api.routes import (
    dashboard, events, gifts, guest_tags, guests, health, households,
    invitations, public_site, questions, users, websites, weddings,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if db_module.db_manager is None:
        db_module.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    logger.info("Wedding Site API started")
    yield
    logger.info("Wedding Site API shutting down")
    if db_module.db_manager is not None:
        await db_module.db_manager.dispose()


app = FastAPI(
    title="Wedding Site API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(users.router)
app.include_router(weddings.router)
app.include_router(websites.router)
app.include_router(events.router)
app.include_router(households.router)
app.include_router(guests.router)
app.include_router(invitations.router)
app.include_router(gifts.router)
app.include_router(questions.router)
app.include_router(guest_tags.router)
app.include_router(dashboard.router)
app.include_router(public_site.router)

register_error_handlers(app)
