"""Tests for bounded and full collection clearing."""

import pytest

from mas_seed.services.collection_clearer import clear_collection, clear_page


class TestClearPage:

    @pytest.mark.asyncio
    async def test_deletes_at_most_one_page(self, store) -> None:
        store.preload("tickets", 1200)
        deleted = await clear_page(store, "tickets")
        assert deleted == 500
        assert len(store.docs("tickets")) == 700
        assert store.calls_of("delete") == [("tickets", 500)]

    @pytest.mark.asyncio
    async def test_small_collection_is_emptied(self, store) -> None:
        store.preload("tickets", 12)
        assert await clear_page(store, "tickets") == 12
        assert store.docs("tickets") == {}

    @pytest.mark.asyncio
    async def test_empty_collection_commits_nothing(self, store) -> None:
        assert await clear_page(store, "tickets") == 0
        assert store.calls_of("delete") == []

    @pytest.mark.asyncio
    async def test_invalid_page_size(self, store) -> None:
        with pytest.raises(ValueError):
            await clear_page(store, "tickets", 0)


class TestClearCollection:

    @pytest.mark.asyncio
    async def test_loops_until_empty(self, store) -> None:
        store.preload("tickets", 1200)
        assert await clear_collection(store, "tickets") == 1200
        assert store.docs("tickets") == {}
        assert [n for _, n in store.calls_of("delete")] == [500, 500, 200]

    @pytest.mark.asyncio
    async def test_exact_multiple_of_page_size(self, store) -> None:
        store.preload("tickets", 1000)
        assert await clear_collection(store, "tickets") == 1000
        assert [n for _, n in store.calls_of("delete")] == [500, 500]
        assert len(store.calls_of("list")) == 3

    @pytest.mark.asyncio
    async def test_max_pages_bounds_the_loop(self, store) -> None:
        store.preload("tickets", 1200)
        assert await clear_collection(store, "tickets", max_pages=1) == 500
        assert len(store.docs("tickets")) == 700

    @pytest.mark.asyncio
    async def test_custom_page_size(self, store) -> None:
        store.preload("tickets", 25)
        assert await clear_collection(store, "tickets", page_size=10) == 25
        assert [n for _, n in store.calls_of("delete")] == [10, 10, 5]
