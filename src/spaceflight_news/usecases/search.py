"""Validated article search."""

import logging

from spaceflight_news.data import ArticleResponse
from spaceflight_news.errors import InvalidInputError, RequiredFieldError
from spaceflight_news.repository.base import ArticleRepositoryProtocol

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
SEARCH_PAGE_SIZE = 20


class SearchArticlesUseCase:
    """Search articles after validating the query.

    A search always restarts pagination: the repository is asked for the
    first page with a larger page size than regular browsing.

    Args:
        repository: Article repository.
        min_query_length: Minimum number of characters in the raw query.
        page_size: Number of results requested per search.
    """

    def __init__(
        self,
        repository: ArticleRepositoryProtocol,
        *,
        min_query_length: int = MIN_QUERY_LENGTH,
        page_size: int = SEARCH_PAGE_SIZE,
    ) -> None:
        self._repository = repository
        self._min_length = min_query_length
        self._page_size = page_size

    async def execute(self, query: str) -> ArticleResponse:
        """Run the search.

        Args:
            query: Search text as typed by the reader.

        Returns:
            The first page of results.

        Raises:
            RequiredFieldError: If the query is blank.
            InvalidInputError: If the query is shorter than the minimum length.
        """
        if not query.strip():
            error = RequiredFieldError("search query")
            logger.warning(error.user_message)
            raise error

        if len(query) < self._min_length:
            error = InvalidInputError(f"search query (at least {self._min_length} characters)")
            logger.warning(error.user_message)
            raise error

        return await self._repository.fetch_articles(query, self._page_size, 0)
