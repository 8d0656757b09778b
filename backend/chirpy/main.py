"""Chirpy API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ChirpyError → {"error": message} responses
    - One VisitCounter per application, stored on app.state
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static files mounted under /app AFTER API routes, only if the directory exists
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from chirpy.api.error_handlers import register_error_handlers
from chirpy.api.middleware import STATIC_PREFIX, register_visit_counter
from chirpy.api.routes import admin, chirps, health, users
from chirpy.config import get_settings
from chirpy.core.visit_counter import VisitCounter
from chirpy.infrastructure.database import close_db, init_db
from chirpy.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Chirpy API started (platform={settings.platform})")
    yield
    await close_db()
    logger.info("Chirpy API shutting down")


app = FastAPI(title="Chirpy API", version="1.0.0", lifespan=lifespan)
app.state.visit_counter = VisitCounter()

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_visit_counter(app)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(chirps.router)
app.include_router(users.router)
app.include_router(admin.router)

if os.path.isdir(settings.static_dir):
    app.mount(
        STATIC_PREFIX,
        StaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )
