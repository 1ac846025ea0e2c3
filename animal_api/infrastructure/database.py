"""Database Connector - one long-lived Motor client bound to the animals collection.

Invariants:
    - Exactly one AsyncIOMotorClient per process, created by the lifespan
    - connect_database() pings before returning; an unreachable store never serves traffic
    - The connector lives on app.state (no module-level handle)
    - All PyMongo exceptions mapped to DatabaseError (core/errors.py)

Design Decisions:
    - Motor (async PyMongo): handlers await store calls on the event loop
    - serverSelectionTimeoutMS bounds how long the startup ping may block
    - timeoutMS carries the per-request deadline into the driver: PyMongo sends
      maxTimeMS so the server aborts the operation, and raises an error whose
      .timeout is True. A network timeout after the server applied a write
      cannot undo that write
    - tz_aware: datetimes come back as UTC-aware, matching what was written
"""

import logging

from motor.motor_asyncio import (
    AsyncIOMotorClient, AsyncIOMotorCollection,
)
from pymongo.errors import PyMongoError

from animal_api.config import Settings
from animal_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class AnimalDatabase:
    """Holds the Motor client and the animals collection handle."""

    def __init__(
        self,
        uri: str,
        database_name: str,
        collection_name: str,
        server_selection_timeout_ms: int = 5000,
        max_pool_size: int = 100,
        timeout_ms: int | None = None,
    ):
        try:
            self.client: AsyncIOMotorClient = AsyncIOMotorClient(
                uri,
                serverSelectionTimeoutMS=server_selection_timeout_ms,
                maxPoolSize=max_pool_size,
                timeoutMS=timeout_ms,
                tz_aware=True,
            )
        except PyMongoError as e:
            logger.error(f"Invalid MongoDB client configuration: {e}")
            raise DatabaseError("Invalid MongoDB configuration", "connect")
        self.collection: AsyncIOMotorCollection = (
            self.client[database_name][collection_name]
        )

    async def ping(self) -> None:
        """Round trip to the server; raises DatabaseError when unreachable."""
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}", extra={"operation": "ping"})
            raise DatabaseError("Store unreachable", "ping")

    async def health_check(self) -> bool:
        """Check database connectivity (for the readiness check)."""
        try:
            await self.ping()
            return True
        except DatabaseError:
            return False

    def close(self) -> None:
        self.client.close()


async def connect_database(settings: Settings) -> AnimalDatabase:
    """Create the connector and verify reachability. Closes the client on failure."""
    database = AnimalDatabase(
        settings.mongodb_uri,
        settings.mongodb_database,
        settings.mongodb_collection,
        server_selection_timeout_ms=settings.mongodb_server_selection_timeout_ms,
        max_pool_size=settings.mongodb_max_pool_size,
        timeout_ms=int(settings.request_timeout_seconds * 1000),
    )
    try:
        await database.ping()
    except DatabaseError:
        database.close()
        raise
    logger.info(
        f"Connected to MongoDB database '{settings.mongodb_database}'",
    )
    return database
