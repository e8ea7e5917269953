"""Spaceflight News: data access, caching and list state for a spaceflight news reader."""

from spaceflight_news.cache import (
    JsonFileKeyValueStore,
    KeyValueStore,
    LocalCacheStore,
    LocalDataSource,
    MemoryKeyValueStore,
)
from spaceflight_news.config import SpaceflightNewsConfig, create_from_config, load_config
from spaceflight_news.controller import ArticleListController
from spaceflight_news.data import (
    Article,
    ArticleResponse,
    ListBackup,
    ListState,
    SearchPhase,
    SearchState,
)
from spaceflight_news.errors import (
    AppError,
    DataError,
    NetworkError,
    UnexpectedError,
    ValidationError,
    describe_error,
)
from spaceflight_news.remote import RemoteDataSource, SpaceflightNewsClient
from spaceflight_news.repository import ArticleRepository, ArticleRepositoryProtocol
from spaceflight_news.url import extract_domain, secure_https, validate_image_url
from spaceflight_news.usecases import (
    FetchArticles,
    FetchArticlesUseCase,
    SearchArticles,
    SearchArticlesUseCase,
)

__all__ = [
    # Models
    "Article",
    "ArticleResponse",
    "ListBackup",
    "ListState",
    "SearchPhase",
    "SearchState",
    # Errors
    "AppError",
    "DataError",
    "NetworkError",
    "UnexpectedError",
    "ValidationError",
    "describe_error",
    # Functions
    "extract_domain",
    "secure_https",
    "validate_image_url",
    # Protocols
    "ArticleRepositoryProtocol",
    "FetchArticles",
    "KeyValueStore",
    "LocalDataSource",
    "RemoteDataSource",
    "SearchArticles",
    # Data sources
    "JsonFileKeyValueStore",
    "LocalCacheStore",
    "MemoryKeyValueStore",
    "SpaceflightNewsClient",
    # Repository and use cases
    "ArticleRepository",
    "FetchArticlesUseCase",
    "SearchArticlesUseCase",
    # Controller
    "ArticleListController",
    # Config
    "SpaceflightNewsConfig",
    "create_from_config",
    "load_config",
]
