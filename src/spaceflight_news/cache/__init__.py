from spaceflight_news.cache.base import LocalDataSource
from spaceflight_news.cache.local import (
    ARTICLES_KEY,
    DEFAULT_EXPIRATION_SECONDS,
    SEARCH_TEXT_KEY,
    TIMESTAMP_KEY,
    LocalCacheStore,
)
from spaceflight_news.cache.store import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore

__all__ = [
    "ARTICLES_KEY",
    "DEFAULT_EXPIRATION_SECONDS",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "LocalCacheStore",
    "LocalDataSource",
    "MemoryKeyValueStore",
    "SEARCH_TEXT_KEY",
    "TIMESTAMP_KEY",
]
