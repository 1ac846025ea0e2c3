"""Animal API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AnimalApiError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - MongoDB connected and pinged on startup, closed on shutdown (lifespan)
    - Startup failure (store unreachable, bad config) aborts before serving traffic

Design Decisions:
    - Lifespan over @app.on_event
    - Connector stored on app.state and injected per request via Depends
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from animal_api import __version__
from animal_api.api.error_handlers import register_error_handlers
from animal_api.api.routes import animals, health
from animal_api.config import get_settings
from animal_api.core.errors import DatabaseError
from animal_api.infrastructure.database import connect_database
from animal_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        app.state.database = await connect_database(settings)
    except DatabaseError as e:
        logger.critical(
            f"Startup aborted: {e.message}", extra={"error_code": e.code},
        )
        raise
    logger.info("Animal API started")
    try:
        yield
    finally:
        logger.info("Animal API shutting down")
        app.state.database.close()
        app.state.database = None


app = FastAPI(
    title="Animal API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(animals.router)

register_error_handlers(app)


def run() -> None:
    """Serve on HOST:PORT (PORT defaults to 5000)."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
