"""Request Dependencies - inject the connector and repository into route handlers.

Invariants:
    - Handlers never reach app.state directly; they declare Depends(...)
    - A fresh AnimalRepository per request, sharing the process-wide collection handle
    - Tests replace get_animal_repository via app.dependency_overrides
"""

from fastapi import Depends, Request

from animal_api.config import Settings, get_settings
from animal_api.infrastructure.animal_repository import AnimalRepository
from animal_api.infrastructure.database import AnimalDatabase


def get_database(request: Request) -> AnimalDatabase | None:
    """Connector stored by the lifespan; None before startup completes."""
    return getattr(request.app.state, "database", None)


def get_animal_repository(
    request: Request, settings: Settings = Depends(get_settings),
) -> AnimalRepository:
    database = get_database(request)
    if database is None:
        raise RuntimeError("Database not initialized")
    return AnimalRepository(
        database.collection, timeout_seconds=settings.request_timeout_seconds,
    )
