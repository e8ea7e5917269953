"""Local article cache with time-based expiration."""

import asyncio
import logging
import time
from collections.abc import Callable

import pydantic

from spaceflight_news.cache.store import KeyValueStore
from spaceflight_news.data import Article, decode_articles, encode_articles
from spaceflight_news.errors import DataError

logger = logging.getLogger(__name__)

ARTICLES_KEY = "cached_articles"
SEARCH_TEXT_KEY = "cached_search_text"
TIMESTAMP_KEY = "cache_timestamp"
ALL_KEYS = (ARTICLES_KEY, SEARCH_TEXT_KEY, TIMESTAMP_KEY)

DEFAULT_EXPIRATION_SECONDS = 3600.0


class LocalCacheStore:
    """Last-known article list and search text, expiring after an hour.

    All operations are serialized through one lock, so concurrent callers
    never interleave a read with a write. Expired or corrupted entries are
    purged on read and reported as an empty cache.
    Store access runs in a worker thread, so file I/O never blocks the
    event loop.

    Args:
        store: Key-value store holding the three cache keys.
        expiration_seconds: Age after which cached articles are discarded.
        clock: Returns the current wall-clock time in epoch seconds.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        expiration_seconds: float = DEFAULT_EXPIRATION_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._expiration = expiration_seconds
        self._clock = clock
        self._lock = asyncio.Lock()

    async def save_articles(self, articles: list[Article]) -> None:
        """Overwrite the cached list and stamp the current time.

        Raises:
            SaveFailedError: If the underlying store cannot be written.
        """
        payload = encode_articles(list(articles))
        async with self._lock:
            await asyncio.to_thread(
                self._store.set_many, {ARTICLES_KEY: payload, TIMESTAMP_KEY: self._clock()}
            )
        logger.info(f"Saved {len(articles)} articles to cache")

    async def get_cached_articles(self) -> list[Article]:
        async with self._lock:
            try:
                timestamp = await asyncio.to_thread(self._store.get, TIMESTAMP_KEY)
                payload = await asyncio.to_thread(self._store.get, ARTICLES_KEY)
            except DataError as e:
                logger.error(f"Cache unreadable, clearing: {e.user_message}")
                await self._discard()
                return []

            if timestamp is None and payload is None:
                return []

            if not self._is_fresh(timestamp):
                logger.info("Cache expired, clearing")
                await self._discard()
                return []

            if payload is None:
                return []

            try:
                if not isinstance(payload, str):
                    raise TypeError(f"expected a JSON string, got {type(payload).__name__}")
                articles = decode_articles(payload)
            except (pydantic.ValidationError, TypeError) as e:
                logger.error(f"Corrupted cache, clearing: {e}")
                await self._discard()
                return []

        logger.info(f"Loaded {len(articles)} articles from cache")
        return articles

    async def save_search_text(self, text: str) -> None:
        async with self._lock:
            await asyncio.to_thread(self._store.set_many, {SEARCH_TEXT_KEY: text})
        logger.debug(f"Saved search text: {text!r}")

    async def get_cached_search_text(self) -> str:
        async with self._lock:
            try:
                text = await asyncio.to_thread(self._store.get, SEARCH_TEXT_KEY)
            except DataError as e:
                logger.error(f"Cache unreadable: {e.user_message}")
                return ""
        return text if isinstance(text, str) else ""

    async def clear_cache(self) -> None:
        """Remove every cache key.

        Raises:
            DataError: If the underlying store cannot be written.
        """
        async with self._lock:
            await self._purge()

    def _is_fresh(self, timestamp: object) -> bool:
        # A missing or non-numeric timestamp counts as expired
        if isinstance(timestamp, bool) or not isinstance(timestamp, int | float):
            return False
        return self._clock() - timestamp <= self._expiration

    async def _purge(self) -> None:
        await asyncio.to_thread(self._store.remove_many, ALL_KEYS)
        logger.info("Cache cleared")

    async def _discard(self) -> None:
        """Purge on the read path, where a failed write still reads as empty."""
        try:
            await self._purge()
        except DataError as e:
            logger.warning(f"Could not clear stale cache: {e.user_message}")
