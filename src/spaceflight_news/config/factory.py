"""Factory functions to create components from configuration.

This module is the composition root: every dependency is built here and
passed down through constructors.
"""

from spaceflight_news.cache.local import LocalCacheStore
from spaceflight_news.cache.store import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from spaceflight_news.config.models import (
    ApiConfig,
    CacheConfig,
    FileCacheConfig,
    ListConfig,
    MemoryCacheConfig,
    SpaceflightNewsConfig,
)
from spaceflight_news.controller.list_controller import ArticleListController
from spaceflight_news.remote.spaceflight import SpaceflightNewsClient
from spaceflight_news.repository.articles import ArticleRepository
from spaceflight_news.usecases.fetch import FetchArticlesUseCase
from spaceflight_news.usecases.search import SearchArticlesUseCase


def create_remote(config: ApiConfig) -> SpaceflightNewsClient:
    """Create the API client from config."""
    return SpaceflightNewsClient(
        base_url=config.base_url,
        connect_timeout=config.connect_timeout,
        total_timeout=config.total_timeout,
        connect_retries=config.connect_retries,
    )


def create_key_value_store(config: CacheConfig) -> KeyValueStore:
    """Create the persistent key-value store from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, FileCacheConfig):
        return JsonFileKeyValueStore(config.path)
    if isinstance(config, MemoryCacheConfig):
        return MemoryKeyValueStore()
    msg = f"Unknown cache config type: {type(config)}"
    raise ValueError(msg)


def create_local_store(config: CacheConfig) -> LocalCacheStore:
    """Create the local article cache from config."""
    return LocalCacheStore(
        create_key_value_store(config),
        expiration_seconds=config.expiration_seconds,
    )


def create_repository(config: SpaceflightNewsConfig, local: LocalCacheStore) -> ArticleRepository:
    """Create the article repository from config."""
    return ArticleRepository(remote=create_remote(config.api), local=local)


def create_controller(
    config: ListConfig,
    repository: ArticleRepository,
    local: LocalCacheStore,
) -> ArticleListController:
    """Create the list controller and its use cases."""
    return ArticleListController(
        fetch_use_case=FetchArticlesUseCase(repository),
        search_use_case=SearchArticlesUseCase(
            repository,
            min_query_length=config.min_search_length,
            page_size=config.search_page_size,
        ),
        local_store=local,
        page_size=config.page_size,
        toast_duration=config.toast_duration,
    )


def create_from_config(
    config: SpaceflightNewsConfig,
    *,
    cache_path_override: str | None = None,
) -> tuple[ArticleListController, ArticleRepository]:
    """Create the complete object graph from root config.

    The local cache is shared by the repository and the controller.

    Args:
        config: Root configuration.
        cache_path_override: Override the file cache location.

    Returns:
        Tuple of (controller, repository).
    """
    cache_config = config.cache
    if cache_path_override is not None:
        cache_config = FileCacheConfig(
            path=cache_path_override,
            expiration_seconds=cache_config.expiration_seconds,
        )

    local = create_local_store(cache_config)
    repository = create_repository(config, local)
    controller = create_controller(config.listing, repository, local)
    return (controller, repository)
