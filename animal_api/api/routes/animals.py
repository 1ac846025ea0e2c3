"""Animal Routes - list, create, update and delete over the animals collection.

Invariants:
    - Each handler issues at most one store call through AnimalRepository
    - Request bodies are validated by Pydantic before the handler runs
    - Malformed path ids are rejected (400) before the store is contacted
    - Update is a full overwrite of the five mutable fields, never a merge
    - Delete reports success whether or not a document matched
"""

import logging

from fastapi import APIRouter, Depends, status

from animal_api.api.dependencies import get_animal_repository
from animal_api.core.domain_types import parse_animal_id
from animal_api.core.errors import AnimalNotFoundError
from animal_api.infrastructure.animal_repository import AnimalRepository
from animal_api.schemas.animal import (
    AnimalCreate,
    AnimalCreatedResponse,
    AnimalPayload,
    AnimalRecord,
    AnimalUpdatedResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/animals", tags=["animals"])


@router.get("", response_model=list[AnimalRecord])
async def list_animals(
    repository: AnimalRepository = Depends(get_animal_repository),
):
    """Every stored animal, unfiltered and unpaginated."""
    return await repository.list_all()


@router.post(
    "", response_model=AnimalCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_animal(
    body: AnimalCreate,
    repository: AnimalRepository = Depends(get_animal_repository),
):
    animal_id = await repository.insert(body)
    logger.info(
        f"Animal {animal_id} created", extra={"animal_id": str(animal_id)},
    )
    return AnimalCreatedResponse(
        message="Animal added successfully", id=str(animal_id),
    )


@router.put("/{animal_id}", response_model=AnimalUpdatedResponse)
async def update_animal(
    animal_id: str,
    body: AnimalPayload,
    repository: AnimalRepository = Depends(get_animal_repository),
):
    """Replace all mutable fields of one animal."""
    object_id = parse_animal_id(animal_id)
    outcome = await repository.replace_fields(object_id, body)
    if outcome.matched_count == 0:
        raise AnimalNotFoundError(animal_id)
    logger.info(
        f"Animal {animal_id} updated (modified={outcome.modified_count})",
        extra={"animal_id": animal_id},
    )
    return AnimalUpdatedResponse(
        message="Animal updated successfully",
        modified_count=outcome.modified_count,
    )


@router.delete("/{animal_id}", response_model=MessageResponse)
async def delete_animal(
    animal_id: str,
    repository: AnimalRepository = Depends(get_animal_repository),
):
    object_id = parse_animal_id(animal_id)
    deleted = await repository.delete(object_id)
    if deleted:
        logger.info(f"Animal {animal_id} deleted", extra={"animal_id": animal_id})
    else:
        logger.info(
            f"Delete of unknown animal {animal_id} ignored",
            extra={"animal_id": animal_id},
        )
    return MessageResponse(message="Animal deleted successfully")
