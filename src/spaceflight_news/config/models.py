"""Pydantic configuration models for Spaceflight News components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from spaceflight_news.cache.local import DEFAULT_EXPIRATION_SECONDS
from spaceflight_news.remote.spaceflight import MAX_LIMIT, SPACEFLIGHT_NEWS_API_URL
from spaceflight_news.usecases.fetch import DEFAULT_LIMIT
from spaceflight_news.usecases.search import MIN_QUERY_LENGTH, SEARCH_PAGE_SIZE

# ============================================================
# Remote Config
# ============================================================


class ApiConfig(BaseModel):
    """Configuration for the Spaceflight News API client."""

    base_url: str = SPACEFLIGHT_NEWS_API_URL
    connect_timeout: float = Field(default=15.0, gt=0)
    total_timeout: float = Field(default=60.0, gt=0)
    connect_retries: int = Field(default=2, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Cache Configs
# ============================================================


class FileCacheConfig(BaseModel):
    """Cache persisted to a JSON file."""

    type: Literal["file"] = "file"
    path: str = "~/.cache/spaceflight-news/cache.json"
    expiration_seconds: float = Field(default=DEFAULT_EXPIRATION_SECONDS, gt=0)

    model_config = {"frozen": True}


class MemoryCacheConfig(BaseModel):
    """Cache kept in memory for the lifetime of the process."""

    type: Literal["memory"] = "memory"
    expiration_seconds: float = Field(default=DEFAULT_EXPIRATION_SECONDS, gt=0)

    model_config = {"frozen": True}


CacheConfig = Annotated[
    FileCacheConfig | MemoryCacheConfig,
    Field(discriminator="type"),
]


# ============================================================
# List Config
# ============================================================


class ListConfig(BaseModel):
    """Pagination, search and notification settings for the article list."""

    page_size: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    search_page_size: int = Field(default=SEARCH_PAGE_SIZE, ge=1, le=MAX_LIMIT)
    min_search_length: int = Field(default=MIN_QUERY_LENGTH, ge=1)
    toast_duration: float = Field(default=3.0, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class SpaceflightNewsConfig(BaseModel):
    """Root configuration for Spaceflight News."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    cache: FileCacheConfig | MemoryCacheConfig = Field(
        default_factory=FileCacheConfig, discriminator="type"
    )
    listing: ListConfig = Field(default_factory=ListConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
