"""Chunked, audit-stamped writes of seed records into a document store."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterator, Sequence

from mas_seed.models.seed import SeedValidationError
from mas_seed.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 500
DEFAULT_ACTOR = "seeder"

_TIMESTAMP_FIELDS = ("createdAt", "updatedAt")
_ACTOR_FIELDS = ("createdBy", "updatedBy")


def stamp_audit_fields(
    record: dict[str, Any],
    now: datetime,
    actor: str = DEFAULT_ACTOR,
    organization_id: str | None = None,
) -> dict[str, Any]:
    """Return a copy of *record* with audit fields defaulted.

    ``createdAt``/``updatedAt`` default to *now* and ``createdBy``/``updatedBy``
    to *actor*.  When *organization_id* is given, ``organizationId`` is
    defaulted too.  Fields already holding a non-null value are kept.
    """
    stamped = dict(record)
    for field in _TIMESTAMP_FIELDS:
        if stamped.get(field) is None:
            stamped[field] = now
    for field in _ACTOR_FIELDS:
        if stamped.get(field) is None:
            stamped[field] = actor
    if organization_id and stamped.get("organizationId") is None:
        stamped["organizationId"] = organization_id
    return stamped


def prepare_document(
    record: dict[str, Any],
    now: datetime,
    actor: str = DEFAULT_ACTOR,
    organization_id: str | None = None,
) -> tuple[str, dict[str, Any]]:
    """Split *record* into its document key and the body to store."""
    record_id = record.get("id")
    if not isinstance(record_id, str) or not record_id:
        raise SeedValidationError(f"Seed record has no usable 'id': {record!r:.120}")
    body = {k: v for k, v in record.items() if k != "id"}
    return record_id, stamp_audit_fields(body, now, actor, organization_id)


def iter_chunks(records: Sequence[Any], size: int) -> Iterator[Sequence[Any]]:
    """Yield consecutive slices of at most *size* items; the last may be shorter."""
    if size < 1:
        raise ValueError(f"batch size must be at least 1, got {size}")
    for start in range(0, len(records), size):
        yield records[start:start + size]


async def write_collection(
    store: DocumentStore,
    collection: str,
    records: Sequence[dict[str, Any]],
    batch_size: int = DEFAULT_BATCH_SIZE,
    *,
    actor: str = DEFAULT_ACTOR,
    organization_id: str | None = None,
    now: datetime | None = None,
) -> int:
    """
    Write *records* into *collection*, one atomic group per chunk.

    Parameters
    ----------
    store : the document store to commit to.
    collection : target collection name.
    records : seed records; each must carry an ``id``.
    batch_size : maximum records per commit.
    actor : value for ``createdBy``/``updatedBy`` when absent.
    organization_id : default ``organizationId`` for every record, if given.
    now : timestamp used for ``createdAt``/``updatedAt`` (default: current UTC time).

    Returns the number of records written.  A failing commit propagates
    immediately; chunks committed before it are left in place.
    """
    chunks = iter_chunks(records, batch_size)
    stamp_time = now or datetime.now(timezone.utc)

    written = 0
    for index, chunk in enumerate(chunks, start=1):
        documents = [prepare_document(r, stamp_time, actor, organization_id) for r in chunk]
        written += await store.commit_writes(collection, documents)
        logger.debug("%s: committed batch %d (%d records)", collection, index, len(documents))

    logger.info("Wrote %d records to %s", written, collection)
    return written
