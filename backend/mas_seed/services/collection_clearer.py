"""Page-wise deletion of every document in a collection."""

from __future__ import annotations

import logging

from mas_seed.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 500


async def clear_page(
    store: DocumentStore, collection: str, page_size: int = DEFAULT_PAGE_SIZE
) -> int:
    """Delete up to *page_size* documents from *collection* in one atomic group.

    Returns the number deleted.  Anything beyond the page stays in place.
    """
    if page_size < 1:
        raise ValueError(f"page size must be at least 1, got {page_size}")

    keys = await store.list_keys(collection, page_size)
    if not keys:
        return 0
    return await store.commit_deletes(collection, keys)


async def clear_collection(
    store: DocumentStore,
    collection: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int | None = None,
) -> int:
    """Delete every document in *collection*, one page at a time.

    Stops when a page comes back shorter than *page_size*, or after
    *max_pages* pages when that is set.  Returns the total deleted.
    """
    total = 0
    pages = 0
    while max_pages is None or pages < max_pages:
        deleted = await clear_page(store, collection, page_size)
        pages += 1
        total += deleted
        if deleted < page_size:
            break

    logger.info("Cleared %d documents from %s (%d page%s)", total, collection, pages, "" if pages == 1 else "s")
    return total
