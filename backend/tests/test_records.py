"""Tests for per-collection record schemas."""

import pytest

from mas_seed.models.records import RECORD_SCHEMAS, SeedRecord, schema_for, validate_collection
from mas_seed.models.seed import SeedCollection, SeedValidationError
from mas_seed.seeds.registry import SEED_MODULES


def test_every_registered_collection_has_a_schema() -> None:
    names = {c.name for m in SEED_MODULES for c in m.collections}
    assert names == set(RECORD_SCHEMAS)


def test_unknown_collection_falls_back_to_base_schema() -> None:
    assert schema_for("somethingElse") is SeedRecord
    validate_collection(SeedCollection(name="somethingElse", records=[{"id": "x", "anything": 1}]))


def test_all_seed_data_validates() -> None:
    for module in SEED_MODULES:
        for collection in module.collections:
            validate_collection(collection)


class TestValidationErrors:

    def test_bad_literal_names_collection_and_record(self) -> None:
        collection = SeedCollection(
            name="candidates",
            records=[{"id": "cand-1", "name": "A", "email": "a@example.com", "stage": "ghosted"}],
        )
        with pytest.raises(SeedValidationError) as excinfo:
            validate_collection(collection)
        message = str(excinfo.value)
        assert "candidates" in message
        assert "cand-1" in message
        assert "stage" in message

    def test_missing_required_field(self) -> None:
        collection = SeedCollection(name="departments", records=[{"id": "dept-x", "name": "X"}])
        with pytest.raises(SeedValidationError, match="code"):
            validate_collection(collection)

    def test_missing_id(self) -> None:
        collection = SeedCollection(name="departments", records=[{"name": "X", "code": "X"}])
        with pytest.raises(SeedValidationError, match="id"):
            validate_collection(collection)

    def test_empty_id(self) -> None:
        with pytest.raises(SeedValidationError):
            validate_collection(SeedCollection(name="things", records=[{"id": ""}]))

    def test_duplicate_id(self) -> None:
        collection = SeedCollection(name="things", records=[{"id": "dup"}, {"id": "dup"}])
        with pytest.raises(SeedValidationError, match="Duplicate id 'dup'"):
            validate_collection(collection)

    def test_nested_permission_is_checked(self) -> None:
        role = {
            "id": "role-x",
            "name": "X",
            "permissions": [{"resource": "tasks", "actions": ["fly"], "scope": "own"}],
        }
        with pytest.raises(SeedValidationError, match="permissions"):
            validate_collection(SeedCollection(name="roles", records=[role]))


def test_extra_fields_are_left_untouched() -> None:
    record = {"id": "dept-x", "name": "X", "code": "X", "budget": {"year": 2024}}
    validate_collection(SeedCollection(name="departments", records=[record]))
    assert record == {"id": "dept-x", "name": "X", "code": "X", "budget": {"year": 2024}}
