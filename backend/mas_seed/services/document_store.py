"""The document-store interface the seeder writes through.

Everything that touches the store (batch writer, clearer, pipeline, CLI,
API) receives a ``DocumentStore`` explicitly.  ``MongoService`` is the
production implementation; tests pass an in-memory fake.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class DocumentStore(Protocol):

    async def commit_writes(
        self, collection: str, documents: Sequence[tuple[str, dict[str, Any]]]
    ) -> int:
        """Write every ``(key, body)`` pair as one atomic group; overwrite existing keys.

        Returns the number of documents written.  Raises if the group fails,
        in which case none of its documents were written.
        """
        ...

    async def commit_deletes(self, collection: str, keys: Sequence[str]) -> int:
        """Delete *keys* as one atomic group.  Returns the number requested."""
        ...

    async def list_keys(self, collection: str, limit: int) -> list[str]:
        """Return up to *limit* document keys from *collection*."""
        ...

    async def has_documents(self, collection: str) -> bool:
        ...

    async def count(self, collection: str) -> int:
        ...

    async def ping(self) -> bool:
        ...

    async def close(self) -> None:
        ...
