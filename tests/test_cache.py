"""Tests for the local article cache and its key-value stores."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from spaceflight_news.cache import (
    ARTICLES_KEY,
    SEARCH_TEXT_KEY,
    TIMESTAMP_KEY,
    JsonFileKeyValueStore,
    LocalCacheStore,
    MemoryKeyValueStore,
)
from spaceflight_news.errors import InvalidDataError, SaveFailedError

NOW = 1_750_000_000.0


class FakeClock:
    """Settable wall clock."""

    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class RecordingStore(MemoryKeyValueStore):
    """Memory store that records each update."""

    def __init__(self) -> None:
        super().__init__()
        self.updates: list[dict] = []

    def set_many(self, values) -> None:
        self.updates.append(dict(values))
        super().set_many(values)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def cache(store: MemoryKeyValueStore, clock: FakeClock) -> LocalCacheStore:
    return LocalCacheStore(store, clock=clock)


class TestLocalCacheStore:
    """Tests for LocalCacheStore."""

    async def test_save_and_read_articles(self, cache: LocalCacheStore, make_article) -> None:
        articles = [make_article(1), make_article(2)]
        await cache.save_articles(articles)

        cached = await cache.get_cached_articles()
        assert [a.id for a in cached] == [1, 2]
        assert cached[0].title == "Article 1"

    async def test_save_stamps_time_with_articles(self, clock: FakeClock, make_article) -> None:
        store = RecordingStore()
        cache = LocalCacheStore(store, clock=clock)

        await cache.save_articles([make_article(1)])

        # List and timestamp land in one update
        assert len(store.updates) == 1
        assert set(store.updates[0]) == {ARTICLES_KEY, TIMESTAMP_KEY}
        assert store.updates[0][TIMESTAMP_KEY] == NOW
        assert json.loads(store.updates[0][ARTICLES_KEY])[0]["id"] == 1

    async def test_save_overwrites(self, cache: LocalCacheStore, make_article) -> None:
        await cache.save_articles([make_article(1), make_article(2)])
        await cache.save_articles([make_article(3)])

        cached = await cache.get_cached_articles()
        assert [a.id for a in cached] == [3]

    async def test_expired_entry_is_purged(
        self,
        cache: LocalCacheStore,
        store: MemoryKeyValueStore,
        clock: FakeClock,
        make_article,
    ) -> None:
        await cache.save_articles([make_article(1)])
        await cache.save_search_text("mars")
        clock.now = NOW + 3601

        assert await cache.get_cached_articles() == []
        assert len(store) == 0
        assert await cache.get_cached_search_text() == ""

    async def test_entry_at_expiration_boundary_is_kept(
        self, cache: LocalCacheStore, clock: FakeClock, make_article
    ) -> None:
        await cache.save_articles([make_article(1)])
        clock.now = NOW + 3600

        assert len(await cache.get_cached_articles()) == 1

    async def test_custom_expiration(self, store: MemoryKeyValueStore, clock: FakeClock, make_article) -> None:
        cache = LocalCacheStore(store, expiration_seconds=60, clock=clock)
        await cache.save_articles([make_article(1)])
        clock.now = NOW + 61

        assert await cache.get_cached_articles() == []

    async def test_corrupted_payload_is_purged(self, store: MemoryKeyValueStore, clock: FakeClock) -> None:
        store.set_many({ARTICLES_KEY: "[{broken", TIMESTAMP_KEY: NOW, SEARCH_TEXT_KEY: "moon"})
        cache = LocalCacheStore(store, clock=clock)

        assert await cache.get_cached_articles() == []
        assert len(store) == 0

    async def test_wrong_payload_type_is_purged(self, store: MemoryKeyValueStore, clock: FakeClock) -> None:
        store.set_many({ARTICLES_KEY: 12, TIMESTAMP_KEY: NOW})
        cache = LocalCacheStore(store, clock=clock)

        assert await cache.get_cached_articles() == []
        assert len(store) == 0

    async def test_missing_timestamp_counts_as_expired(self, store: MemoryKeyValueStore, clock: FakeClock) -> None:
        store.set_many({ARTICLES_KEY: "[]", TIMESTAMP_KEY: "yesterday"})
        cache = LocalCacheStore(store, clock=clock)

        assert await cache.get_cached_articles() == []
        assert len(store) == 0

    async def test_empty_store_returns_empty(self, cache: LocalCacheStore) -> None:
        assert await cache.get_cached_articles() == []
        assert await cache.get_cached_search_text() == ""

    async def test_search_text(self, cache: LocalCacheStore) -> None:
        await cache.save_search_text("starship")
        assert await cache.get_cached_search_text() == "starship"

    async def test_clear_is_idempotent(
        self, cache: LocalCacheStore, store: MemoryKeyValueStore, make_article
    ) -> None:
        await cache.save_articles([make_article(1)])
        await cache.save_search_text("moon")

        await cache.clear_cache()
        assert len(store) == 0
        await cache.clear_cache()
        assert len(store) == 0
        assert await cache.get_cached_articles() == []

    async def test_concurrent_operations(self, cache: LocalCacheStore, make_article) -> None:
        await asyncio.gather(
            *(cache.save_articles([make_article(i)]) for i in range(10)),
            *(cache.get_cached_articles() for _ in range(10)),
            cache.save_search_text("iss"),
        )

        cached = await cache.get_cached_articles()
        assert len(cached) == 1
        assert await cache.get_cached_search_text() == "iss"


class TestJsonFileKeyValueStore:
    """Tests for the JSON file store."""

    def test_missing_file_reads_empty(self, tmp_path: Path) -> None:
        store = JsonFileKeyValueStore(tmp_path / "cache.json")
        assert store.get("anything") is None

    def test_persists_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "cache.json"
        JsonFileKeyValueStore(path).set_many({"a": 1, "b": "two"})

        reopened = JsonFileKeyValueStore(path)
        assert reopened.get("a") == 1
        assert reopened.get("b") == "two"
        assert json.loads(path.read_text()) == {"a": 1, "b": "two"}

    def test_write_leaves_no_temp_file(self, tmp_path: Path) -> None:
        store = JsonFileKeyValueStore(tmp_path / "cache.json")
        store.set_many({"a": 1})

        assert [p.name for p in tmp_path.iterdir()] == ["cache.json"]

    def test_remove_many(self, tmp_path: Path) -> None:
        store = JsonFileKeyValueStore(tmp_path / "cache.json")
        store.set_many({"a": 1, "b": 2, "c": 3})
        store.remove_many(["a", "b", "missing"])

        assert store.get("a") is None
        assert store.get("c") == 3

    def test_corrupted_file_raises_on_read(self, tmp_path: Path) -> None:
        path = tmp_path / "cache.json"
        path.write_text("{truncated")

        with pytest.raises(InvalidDataError):
            JsonFileKeyValueStore(path).get("a")

    def test_remove_resets_corrupted_file(self, tmp_path: Path) -> None:
        path = tmp_path / "cache.json"
        path.write_text("[1, 2, 3]")
        store = JsonFileKeyValueStore(path)

        store.remove_many(["a"])

        assert json.loads(path.read_text()) == {}

    async def test_cache_over_corrupted_file_recovers(self, tmp_path: Path, clock: FakeClock) -> None:
        path = tmp_path / "cache.json"
        path.write_text("not json at all")
        cache = LocalCacheStore(JsonFileKeyValueStore(path), clock=clock)

        assert await cache.get_cached_articles() == []
        assert json.loads(path.read_text()) == {}

    async def test_cache_round_trip_on_disk(self, tmp_path: Path, clock: FakeClock, make_article) -> None:
        path = tmp_path / "cache.json"
        await LocalCacheStore(JsonFileKeyValueStore(path), clock=clock).save_articles(
            [make_article(7), make_article(8)]
        )

        reopened = LocalCacheStore(JsonFileKeyValueStore(path), clock=clock)
        assert [a.id for a in await reopened.get_cached_articles()] == [7, 8]


class ReadOnlyStore(MemoryKeyValueStore):
    """Memory store whose writes always fail."""

    def set_many(self, values) -> None:
        raise SaveFailedError("read-only")

    def remove_many(self, keys) -> None:
        raise SaveFailedError("read-only")


class TestUnwritableCache:
    """Reads never fail because a purge could not be written."""

    async def test_empty_store_is_not_purged(self, clock: FakeClock) -> None:
        cache = LocalCacheStore(ReadOnlyStore(), clock=clock)

        assert await cache.get_cached_articles() == []

    async def test_expired_entry_reads_empty_when_purge_fails(self, clock: FakeClock) -> None:
        store = ReadOnlyStore({ARTICLES_KEY: "[]", TIMESTAMP_KEY: NOW - 7200})
        cache = LocalCacheStore(store, clock=clock)

        assert await cache.get_cached_articles() == []
        assert store.get(TIMESTAMP_KEY) == NOW - 7200

    async def test_corrupted_entry_reads_empty_when_purge_fails(self, clock: FakeClock) -> None:
        cache = LocalCacheStore(ReadOnlyStore({ARTICLES_KEY: "{", TIMESTAMP_KEY: NOW}), clock=clock)

        assert await cache.get_cached_articles() == []

    async def test_explicit_clear_still_reports_failure(self, clock: FakeClock) -> None:
        cache = LocalCacheStore(ReadOnlyStore(), clock=clock)

        with pytest.raises(SaveFailedError):
            await cache.clear_cache()

    async def test_file_under_regular_file(self, tmp_path: Path, clock: FakeClock, make_article) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        cache = LocalCacheStore(JsonFileKeyValueStore(blocker / "cache.json"), clock=clock)

        assert await cache.get_cached_articles() == []
        assert await cache.get_cached_search_text() == ""
        with pytest.raises(SaveFailedError):
            await cache.save_articles([make_article(1)])
