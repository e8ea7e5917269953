from spaceflight_news.remote.base import RemoteDataSource
from spaceflight_news.remote.spaceflight import SPACEFLIGHT_NEWS_API_URL, SpaceflightNewsClient

__all__ = [
    "RemoteDataSource",
    "SPACEFLIGHT_NEWS_API_URL",
    "SpaceflightNewsClient",
]
