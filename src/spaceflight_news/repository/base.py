from typing import Protocol

from spaceflight_news.data import Article, ArticleResponse


class ArticleRepositoryProtocol(Protocol):
    """Single source of truth for articles, regardless of network state."""

    async def fetch_articles(
        self,
        search_query: str | None,
        limit: int,
        offset: int,
    ) -> ArticleResponse:
        """Fetch a page, falling back to cached articles when the network fails."""
        ...

    async def fetch_article_detail(self, article_id: int) -> Article: ...

    async def get_cached_articles(self) -> list[Article]: ...

    async def clear_cache(self) -> None: ...
