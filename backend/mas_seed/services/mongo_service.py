"""MongoDB document store backed by Motor.

Implements ``DocumentStore`` on top of an ``AsyncIOMotorDatabase``.  The
seed record ``id`` becomes the document ``_id``; the stored body never
carries an ``id`` field of its own.

A write group is a single ``bulk_write`` of upserting ``ReplaceOne``
operations.  With transactions enabled (the default; needs a replica set)
the group runs inside a multi-document transaction so it commits all or
nothing.  Without them it is an ordered bulk write, which stops at the
first failing document.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import DeleteOne, ReplaceOne

logger = logging.getLogger(__name__)


class MongoService:
    """Async MongoDB operations via Motor.

    Parameters
    ----------
    client:
        The ``AsyncIOMotorClient`` the service owns; closed by ``close()``.
    db_name:
        Database holding the seed collections (one per project).
    use_transactions:
        Wrap every write/delete group in a multi-document transaction.
    """

    def __init__(
        self,
        client: AsyncIOMotorClient,
        db_name: str,
        use_transactions: bool = True,
    ) -> None:
        self._client = client
        self._db: AsyncIOMotorDatabase = client[db_name]
        self._use_transactions = use_transactions

    @classmethod
    def from_settings(cls, settings: Any) -> "MongoService":
        """Build a service (and its client) from application settings."""
        client = AsyncIOMotorClient(settings.MONGODB_URL, tz_aware=True)
        logger.info(
            "Connecting to MongoDB at %s (db=%s, transactions=%s)",
            settings.MONGODB_URL, settings.database_name, settings.MONGODB_USE_TRANSACTIONS,
        )
        return cls(client, settings.database_name, settings.MONGODB_USE_TRANSACTIONS)

    # ------------------------------------------------------------------
    # Atomic groups
    # ------------------------------------------------------------------

    async def _run_group(self, collection: str, operations: list[Any]) -> None:
        coll = self._db[collection]
        if not self._use_transactions:
            await coll.bulk_write(operations, ordered=True)
            return

        async with await self._client.start_session() as session:
            async with session.start_transaction():
                await coll.bulk_write(operations, ordered=True, session=session)

    async def commit_writes(
        self, collection: str, documents: Sequence[tuple[str, dict[str, Any]]]
    ) -> int:
        """Upsert every ``(key, body)`` pair into *collection* as one group."""
        if not documents:
            return 0
        operations = [
            ReplaceOne({"_id": key}, body, upsert=True) for key, body in documents
        ]
        await self._run_group(collection, operations)
        logger.debug("Committed %d writes to %s", len(operations), collection)
        return len(operations)

    async def commit_deletes(self, collection: str, keys: Sequence[str]) -> int:
        """Delete *keys* from *collection* as one group."""
        if not keys:
            return 0
        operations = [DeleteOne({"_id": key}) for key in keys]
        await self._run_group(collection, operations)
        logger.debug("Committed %d deletes to %s", len(operations), collection)
        return len(operations)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_keys(self, collection: str, limit: int) -> list[str]:
        """Return up to *limit* ``_id`` values from *collection*."""
        cursor = self._db[collection].find({}, projection={"_id": 1}).limit(limit)
        return [doc["_id"] async for doc in cursor]

    async def has_documents(self, collection: str) -> bool:
        doc = await self._db[collection].find_one({}, projection={"_id": 1})
        return doc is not None

    async def count(self, collection: str) -> int:
        """Return the number of documents in *collection*."""
        return await self._db[collection].count_documents({})

    async def ping(self) -> bool:
        """Ping the database to check connectivity."""
        try:
            await self._db.command("ping")
            return True
        except Exception:
            logger.warning("MongoDB ping failed", exc_info=True)
            return False

    async def close(self) -> None:
        self._client.close()
