from typing import Protocol

from spaceflight_news.data import Article, ArticleResponse


class RemoteDataSource(Protocol):
    """Interface for fetching articles from the network."""

    async def fetch_articles(
        self,
        search_query: str | None,
        limit: int,
        offset: int,
    ) -> ArticleResponse:
        """Fetch one page of articles.

        Args:
            search_query: Free-text search; omitted from the request when empty.
            limit: Page size.
            offset: Number of items already fetched.

        Returns:
            The page as reported by the server.

        Raises:
            NetworkError: On any transport, status or decoding failure.
        """
        ...

    async def fetch_article_detail(self, article_id: int) -> Article:
        """Fetch a single article by id."""
        ...
