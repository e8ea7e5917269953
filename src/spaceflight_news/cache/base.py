from typing import Protocol

from spaceflight_news.data import Article


class LocalDataSource(Protocol):
    """Interface for the on-device article cache."""

    async def save_articles(self, articles: list[Article]) -> None:
        """Overwrite the cached article list and stamp the current time."""
        ...

    async def get_cached_articles(self) -> list[Article]:
        """Return cached articles, or an empty list if expired or corrupted."""
        ...

    async def save_search_text(self, text: str) -> None: ...

    async def get_cached_search_text(self) -> str: ...

    async def clear_cache(self) -> None:
        """Remove every cached key. Safe to call repeatedly."""
        ...
