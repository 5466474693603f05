"""Shared fixtures: an in-memory document store and seeder settings."""

from __future__ import annotations

from typing import Any, Sequence

import pytest
from pymongo.errors import OperationFailure

from mas_seed.config import Settings
from mas_seed.models.seed import SeedCollection, SeedModule


class FakeStore:
    """In-memory ``DocumentStore`` that records every call it receives.

    ``fail_on`` names collections whose commits and probes raise, and
    ``fail_after_writes`` lets that many write commits succeed before every
    further one raises.  A failing commit changes nothing.
    """

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, dict[str, Any]]] = {}
        self.calls: list[tuple[str, str, int]] = []
        self.fail_on: set[str] = set()
        self.fail_after_writes: int | None = None
        self.closed = False

    # -- helpers -------------------------------------------------------

    def preload(self, collection: str, count: int) -> None:
        bucket = self.collections.setdefault(collection, {})
        for i in range(count):
            bucket[f"{collection}-{i:05d}"] = {"n": i}

    def docs(self, collection: str) -> dict[str, dict[str, Any]]:
        return self.collections.get(collection, {})

    def calls_of(self, op: str) -> list[tuple[str, int]]:
        return [(coll, n) for kind, coll, n in self.calls if kind == op]

    @property
    def mutations(self) -> list[tuple[str, str, int]]:
        return [c for c in self.calls if c[0] in ("write", "delete")]

    def _check(self, collection: str) -> None:
        if collection in self.fail_on:
            raise OperationFailure(f"simulated failure on {collection}")

    # -- DocumentStore -------------------------------------------------

    async def commit_writes(
        self, collection: str, documents: Sequence[tuple[str, dict[str, Any]]]
    ) -> int:
        self.calls.append(("write", collection, len(documents)))
        self._check(collection)
        if self.fail_after_writes is not None:
            if len(self.calls_of("write")) > self.fail_after_writes:
                raise OperationFailure("simulated commit failure")
        bucket = self.collections.setdefault(collection, {})
        for key, body in documents:
            bucket[key] = dict(body)
        return len(documents)

    async def commit_deletes(self, collection: str, keys: Sequence[str]) -> int:
        self.calls.append(("delete", collection, len(keys)))
        self._check(collection)
        bucket = self.collections.get(collection, {})
        for key in keys:
            bucket.pop(key, None)
        return len(keys)

    async def list_keys(self, collection: str, limit: int) -> list[str]:
        self.calls.append(("list", collection, limit))
        return list(self.docs(collection))[:limit]

    async def has_documents(self, collection: str) -> bool:
        self._check(collection)
        return bool(self.docs(collection))

    async def count(self, collection: str) -> int:
        self._check(collection)
        return len(self.docs(collection))

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def make_settings():
    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {"PROJECT_ID": "mas-test", "ENVIRONMENT": "development"}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def chain_modules() -> list[SeedModule]:
    """Two small modules where ``beta`` depends on ``alpha``."""
    alpha = SeedModule(
        name="alpha",
        description="first",
        collections=[
            SeedCollection(name="a1", records=[{"id": "a1-1"}, {"id": "a1-2"}]),
            SeedCollection(name="a2", records=[{"id": "a2-1"}], dependencies=["a1"]),
        ],
    )
    beta = SeedModule(
        name="beta",
        description="second",
        collections=[
            SeedCollection(name="b1", records=[{"id": "b1-1"}, {"id": "b1-2"}, {"id": "b1-3"}],
                           dependencies=["a2"]),
        ],
    )
    return [alpha, beta]
