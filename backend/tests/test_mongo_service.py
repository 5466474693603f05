"""Tests for the Motor-backed document store (driver calls mocked)."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import DeleteOne, ReplaceOne
from pymongo.errors import BulkWriteError, ServerSelectionTimeoutError

from mas_seed.services.document_store import DocumentStore
from mas_seed.services.mongo_service import MongoService


def _service(use_transactions: bool = False):
    collection = MagicMock()
    collection.bulk_write = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.count_documents = AsyncMock(return_value=0)

    db = MagicMock()
    db.__getitem__.return_value = collection
    db.command = AsyncMock(return_value={"ok": 1})

    session = MagicMock()
    session.__aenter__.return_value = session

    client = MagicMock()
    client.__getitem__.return_value = db
    client.start_session = AsyncMock(return_value=session)

    service = MongoService(client, "mas-test", use_transactions=use_transactions)
    return service, client, collection, session


class TestMongoService:

    def test_implements_document_store(self) -> None:
        service, *_ = _service()
        assert isinstance(service, DocumentStore)

    @pytest.mark.asyncio
    async def test_writes_are_upserting_replaces_keyed_by_id(self) -> None:
        service, client, collection, _ = _service()
        written = await service.commit_writes("users", [("u-1", {"name": "A"}), ("u-2", {"name": "B"})])

        assert written == 2
        collection.bulk_write.assert_awaited_once_with(
            [
                ReplaceOne({"_id": "u-1"}, {"name": "A"}, upsert=True),
                ReplaceOne({"_id": "u-2"}, {"name": "B"}, upsert=True),
            ],
            ordered=True,
        )
        client.start_session.assert_not_called()

    @pytest.mark.asyncio
    async def test_transactional_group_uses_a_session(self) -> None:
        service, client, collection, session = _service(use_transactions=True)
        await service.commit_deletes("users", ["u-1"])

        client.start_session.assert_awaited_once()
        session.start_transaction.assert_called_once()
        collection.bulk_write.assert_awaited_once_with(
            [DeleteOne({"_id": "u-1"})], ordered=True, session=session
        )

    @pytest.mark.asyncio
    async def test_empty_groups_skip_the_driver(self) -> None:
        service, _, collection, _ = _service()
        assert await service.commit_writes("users", []) == 0
        assert await service.commit_deletes("users", []) == 0
        collection.bulk_write.assert_not_called()

    @pytest.mark.asyncio
    async def test_driver_errors_propagate(self) -> None:
        service, _, collection, _ = _service()
        collection.bulk_write.side_effect = BulkWriteError({"writeErrors": []})
        with pytest.raises(BulkWriteError):
            await service.commit_writes("users", [("u-1", {})])

    @pytest.mark.asyncio
    async def test_probes(self) -> None:
        service, _, collection, _ = _service()
        collection.find_one.return_value = {"_id": "u-1"}
        collection.count_documents.return_value = 4
        assert await service.has_documents("users") is True
        assert await service.count("users") == 4

    @pytest.mark.asyncio
    async def test_ping_failure_returns_false(self) -> None:
        service, client, _, _ = _service()
        client.__getitem__.return_value.command.side_effect = ServerSelectionTimeoutError("down")
        assert await service.ping() is False

    @pytest.mark.asyncio
    async def test_close_closes_client(self) -> None:
        service, client, _, _ = _service()
        await service.close()
        client.close.assert_called_once()
