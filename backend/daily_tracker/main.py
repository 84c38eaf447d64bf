"""Daily Tracker API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - One DatabaseSessionManager per app, created in lifespan, stored on app.state
    - Startup connectivity check only logs; a failed check never stops the process
    - The store password is never logged

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - create_app() factory so tests get a fresh app bound to their own settings
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from daily_tracker.api.error_handlers import register_error_handlers
from daily_tracker.api.routes import health, tasks, water_intake
from daily_tracker.config import get_settings
from daily_tracker.infrastructure.database import DatabaseSessionManager
from daily_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

LISTEN_HOST = "0.0.0.0"
LISTEN_PORT = 3000


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "Store settings loaded",
        extra={
            "db_host": settings.db_host,
            "db_user": settings.db_user,
            "db_name": settings.db_name,
            "db_port": settings.db_port,
        },
    )
    db_manager = DatabaseSessionManager(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        pool_timeout=settings.database_pool_timeout,
    )
    app.state.db_manager = db_manager

    if await db_manager.health_check():
        logger.info("Connected to database")
        if settings.create_tables:
            await db_manager.create_tables()
    else:
        logger.error("Database unreachable at startup; serving anyway")

    logger.info(f"Daily Tracker API listening on port {LISTEN_PORT}")
    yield
    await db_manager.dispose()
    logger.info("Daily Tracker API shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Daily Tracker API", version="1.0.0", lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(tasks.router)
    app.include_router(water_intake.router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=LISTEN_HOST, port=LISTEN_PORT)


if __name__ == "__main__":
    run()
