"""Tests for chunked seed writes and audit stamping."""

from datetime import datetime, timezone

import pytest
from pymongo.errors import OperationFailure

from mas_seed.models.seed import SeedValidationError
from mas_seed.services.batch_writer import prepare_document, stamp_audit_fields, write_collection

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
EARLIER = datetime(2023, 1, 1, tzinfo=timezone.utc)


def _records(n: int) -> list[dict]:
    return [{"id": f"rec-{i}", "value": i} for i in range(n)]


class TestAuditStamping:

    def test_missing_fields_are_defaulted(self) -> None:
        stamped = stamp_audit_fields({"name": "x"}, NOW)
        assert stamped["createdAt"] == NOW
        assert stamped["updatedAt"] == NOW
        assert stamped["createdBy"] == "seeder"
        assert stamped["updatedBy"] == "seeder"

    def test_existing_fields_are_kept(self) -> None:
        record = {"createdAt": EARLIER, "updatedAt": EARLIER, "createdBy": "alice"}
        stamped = stamp_audit_fields(record, NOW)
        assert stamped["createdAt"] == EARLIER
        assert stamped["updatedAt"] == EARLIER
        assert stamped["createdBy"] == "alice"
        assert stamped["updatedBy"] == "seeder"

    def test_stamping_twice_is_identity(self) -> None:
        once = stamp_audit_fields({"name": "x"}, NOW)
        twice = stamp_audit_fields(once, datetime(2030, 1, 1, tzinfo=timezone.utc), "other")
        assert twice == once

    def test_null_fields_are_replaced(self) -> None:
        stamped = stamp_audit_fields({"createdAt": None}, NOW)
        assert stamped["createdAt"] == NOW

    def test_source_record_is_not_mutated(self) -> None:
        record = {"id": "r1"}
        stamp_audit_fields(record, NOW)
        assert record == {"id": "r1"}

    def test_organization_id_is_defaulted_only_when_given(self) -> None:
        assert "organizationId" not in stamp_audit_fields({}, NOW)
        assert stamp_audit_fields({}, NOW, organization_id="org-1")["organizationId"] == "org-1"
        kept = stamp_audit_fields({"organizationId": "org-0"}, NOW, organization_id="org-1")
        assert kept["organizationId"] == "org-0"

    def test_prepare_document_strips_id(self) -> None:
        key, body = prepare_document({"id": "user-1", "name": "A"}, NOW)
        assert key == "user-1"
        assert "id" not in body
        assert body["name"] == "A"

    @pytest.mark.parametrize("record", [{"name": "no id"}, {"id": ""}, {"id": 42}])
    def test_prepare_document_requires_string_id(self, record: dict) -> None:
        with pytest.raises(SeedValidationError):
            prepare_document(record, NOW)


class TestWriteCollection:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("n, batch, expected", [
        (1201, 500, [500, 500, 201]),
        (1000, 500, [500, 500]),
        (7, 3, [3, 3, 1]),
        (1, 500, [1]),
    ])
    async def test_commits_ceil_n_over_b_chunks(self, store, n, batch, expected) -> None:
        written = await write_collection(store, "items", _records(n), batch)
        assert written == n
        assert [size for _, size in store.calls_of("write")] == expected
        assert len(store.docs("items")) == n

    @pytest.mark.asyncio
    async def test_document_keys_are_record_ids(self, store) -> None:
        await write_collection(store, "users", [{"id": "u-1", "name": "A"}, {"id": "u-2", "name": "B"}], now=NOW)
        docs = store.docs("users")
        assert set(docs) == {"u-1", "u-2"}
        for body in docs.values():
            assert "id" not in body
            assert body["createdAt"] == NOW
            assert body["updatedBy"] == "seeder"

    @pytest.mark.asyncio
    async def test_actor_and_organization_are_applied(self, store) -> None:
        await write_collection(store, "users", [{"id": "u-1"}], actor="migration", organization_id="org-9")
        body = store.docs("users")["u-1"]
        assert body["createdBy"] == "migration"
        assert body["organizationId"] == "org-9"

    @pytest.mark.asyncio
    async def test_empty_records_commit_nothing(self, store) -> None:
        assert await write_collection(store, "items", []) == 0
        assert store.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("batch", [0, -5])
    async def test_invalid_batch_size(self, store, batch) -> None:
        with pytest.raises(ValueError):
            await write_collection(store, "items", _records(3), batch)
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_record_without_id_stops_before_its_chunk(self, store) -> None:
        records = _records(4) + [{"value": "orphan"}]
        with pytest.raises(SeedValidationError):
            await write_collection(store, "items", records, 2)
        # Chunks [0,1] and [2,3] committed; the chunk holding the bad record did not.
        assert [size for _, size in store.calls_of("write")] == [2, 2]
        assert len(store.docs("items")) == 4

    @pytest.mark.asyncio
    async def test_failed_commit_propagates_and_keeps_earlier_chunks(self, store) -> None:
        store.fail_after_writes = 1
        with pytest.raises(OperationFailure):
            await write_collection(store, "items", _records(5), 2)
        assert len(store.calls_of("write")) == 2
        assert set(store.docs("items")) == {"rec-0", "rec-1"}
