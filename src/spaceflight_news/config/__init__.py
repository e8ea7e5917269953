"""Configuration module for Spaceflight News."""

from spaceflight_news.config.factory import create_from_config
from spaceflight_news.config.loader import get_default_config_path, load_config
from spaceflight_news.config.models import (
    ApiConfig,
    CacheConfig,
    FileCacheConfig,
    ListConfig,
    LoggingConfig,
    MemoryCacheConfig,
    SpaceflightNewsConfig,
)

__all__ = [
    "ApiConfig",
    "CacheConfig",
    "FileCacheConfig",
    "ListConfig",
    "LoggingConfig",
    "MemoryCacheConfig",
    "SpaceflightNewsConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
