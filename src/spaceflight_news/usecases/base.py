from typing import Protocol

from spaceflight_news.data import ArticleResponse


class FetchArticles(Protocol):
    """Interface for fetching a page of articles."""

    async def execute(
        self,
        search_query: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> ArticleResponse: ...


class SearchArticles(Protocol):
    """Interface for a validated search, always starting from the first page."""

    async def execute(self, query: str) -> ArticleResponse: ...
