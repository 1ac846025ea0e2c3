"""Animal Repository - one method per store call against the animals collection.

Invariants:
    - Each public method issues exactly one collection operation
    - The deadline is enforced by the driver (client timeoutMS), never by
      abandoning an in-flight call: a reported failure means the driver gave up
    - PyMongo errors -> DatabaseError, driver timeouts (e.timeout) -> DatabaseTimeoutError
    - Documents that fail to decode abort the whole listing (DatabaseError "decode")
    - _id and __v are never written by this module
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, TypeVar

from bson import ObjectId
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from animal_api.core.domain_types import AnimalId
from animal_api.core.errors import (
    DatabaseError, DatabaseTimeoutError, ErrorContext,
)
from animal_api.schemas.animal import AnimalPayload, AnimalRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class UpdateOutcome:
    """Counts reported by update_one."""
    matched_count: int
    modified_count: int


class AnimalRepository:
    """Store operations for animal records over a Motor collection."""

    def __init__(self, collection: Any, timeout_seconds: float | None = 10.0):
        # timeout_seconds mirrors the client timeoutMS; it is only reported, not enforced here
        self._collection = collection
        self.timeout_seconds = timeout_seconds

    async def list_all(self) -> list[AnimalRecord]:
        """Every animal in store iteration order (no filter, no sort)."""
        documents = await self._run("find", self._fetch_all())
        try:
            return [AnimalRecord.from_document(doc) for doc in documents]
        except ValidationError as e:
            logger.error(
                f"Stored animal document could not be decoded: {e}",
                extra={"operation": "decode"},
            )
            raise DatabaseError("Stored document could not be decoded", "decode")

    async def insert(self, animal: AnimalPayload) -> AnimalId:
        result = await self._run(
            "insert", self._collection.insert_one(animal.to_document()),
        )
        return AnimalId(result.inserted_id)

    async def replace_fields(
        self, animal_id: AnimalId, animal: AnimalPayload,
    ) -> UpdateOutcome:
        """Overwrite the five mutable fields; omitted fields were zeroed by the schema."""
        result = await self._run(
            "update",
            self._collection.update_one(
                {"_id": animal_id}, {"$set": animal.to_document()},
            ),
            animal_id,
        )
        return UpdateOutcome(result.matched_count, result.modified_count)

    async def delete(self, animal_id: AnimalId) -> int:
        """Delete by id. Returns deleted_count (0 when nothing matched)."""
        result = await self._run(
            "delete", self._collection.delete_one({"_id": animal_id}), animal_id,
        )
        return result.deleted_count

    async def _fetch_all(self) -> list[dict]:
        return [doc async for doc in self._collection.find({})]

    async def _run(
        self, operation: str, call: Awaitable[T], animal_id: ObjectId | None = None,
    ) -> T:
        context = ErrorContext(
            animal_id=str(animal_id) if animal_id is not None else None,
        )
        extra = {"operation": operation, "animal_id": context.animal_id}
        try:
            return await call
        except PyMongoError as e:
            if e.timeout:
                logger.error(
                    f"MongoDB {operation} exceeded {self.timeout_seconds}s: {e}",
                    extra=extra,
                )
                raise DatabaseTimeoutError(operation, self.timeout_seconds, context)
            logger.error(f"MongoDB {operation} failed: {e}", extra=extra)
            raise DatabaseError("Store operation failed", operation, context)
