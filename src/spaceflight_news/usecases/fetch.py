"""Paged article listing."""

from spaceflight_news.data import ArticleResponse
from spaceflight_news.repository.base import ArticleRepositoryProtocol

DEFAULT_LIMIT = 10


class FetchArticlesUseCase:
    """Fetch a page of articles through the repository.

    No validation is applied: the arguments are passed through unchanged.
    """

    def __init__(self, repository: ArticleRepositoryProtocol) -> None:
        self._repository = repository

    async def execute(
        self,
        search_query: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> ArticleResponse:
        return await self._repository.fetch_articles(search_query, limit, offset)
