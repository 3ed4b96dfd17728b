"""Marketplace Admin API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MarketplaceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - SQLite databases (local runs) get their schema from metadata.create_all;
      PostgreSQL is migrated by alembic
    - Uploaded images served from blob_root under /uploads when the directory exists
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from marketplace_admin.api.error_handlers import register_error_handlers
from marketplace_admin.api.routes import (
    categories, category_sliders, coupons, health, notifications, products, vendors,
)
from marketplace_admin.config import get_settings
from marketplace_admin.db.base import Base
from marketplace_admin.infrastructure.database import init_db
from marketplace_admin.infrastructure.observability import setup_logging
import marketplace_admin.models  # noqa: F401  (registers tables on Base.metadata)

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
    if settings.database_url.startswith("sqlite"):
        async with manager.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    logger.info("Marketplace admin API started")
    yield
    await manager.dispose()
    logger.info("Marketplace admin API shutting down")


app = FastAPI(
    title="Marketplace Admin API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(categories.router)
app.include_router(category_sliders.router)
app.include_router(coupons.router)
app.include_router(products.router)
app.include_router(notifications.router)
app.include_router(vendors.router)

if os.path.isdir(settings.blob_root):
    app.mount("/uploads", StaticFiles(directory=settings.blob_root), name="uploads")

register_error_handlers(app)
