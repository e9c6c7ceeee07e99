"""Northwind Reporting API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ReportingError → structured JSON responses
    - CORS configured from settings (not hardcoded), GET only
    - Every request gets an X-Request-ID and one access log line
    - DatabaseSessionManager created on startup and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: startup and shutdown paired in one function
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reporting import __version__
from reporting.api.error_handlers import register_error_handlers
from reporting.api.routes import health, orders, reports
from reporting.config import get_settings
from reporting.infrastructure.database import DatabaseSessionManager
from reporting.infrastructure.observability import (
    request_context_middleware, setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Northwind Reporting API started")
    yield
    await app.state.db_manager.dispose()
    logger.info("Northwind Reporting API shutting down")


app = FastAPI(
    title="Northwind Reporting API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.middleware("http")(request_context_middleware)

app.include_router(health.router)
app.include_router(reports.router)
app.include_router(orders.router)

register_error_handlers(app)
