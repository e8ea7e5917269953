"""Article repository: remote first, local cache as fallback."""

import logging

from spaceflight_news.cache.base import LocalDataSource
from spaceflight_news.data import Article, ArticleResponse
from spaceflight_news.errors import DataError, describe_error
from spaceflight_news.remote.base import RemoteDataSource

logger = logging.getLogger(__name__)


class ArticleRepository:
    """Compose the remote source and the local cache.

    Flow for ``fetch_articles``:
    1. Ask the remote source for the page
    2. On success, store the page in the cache and return it unchanged
    3. On failure, serve cached articles as a single synthetic page
    4. With nothing cached, re-raise the original error

    Args:
        remote: Network data source.
        local: Local cache.
    """

    def __init__(self, remote: RemoteDataSource, local: LocalDataSource) -> None:
        self._remote = remote
        self._local = local

    async def fetch_articles(
        self,
        search_query: str | None,
        limit: int,
        offset: int,
    ) -> ArticleResponse:
        try:
            response = await self._remote.fetch_articles(search_query, limit, offset)
        except Exception as error:
            logger.warning(f"Remote fetch failed: {describe_error(error)}")
            cached = await self._cached_or_empty()
            if not cached:
                raise
            logger.info(f"Serving {len(cached)} articles from cache")
            return ArticleResponse(
                count=len(cached),
                next=None,
                previous=None,
                results=tuple(cached),
                from_cache=True,
            )

        try:
            await self._local.save_articles(list(response.results))
        except DataError as e:
            logger.warning(f"Could not cache fetched articles: {e.user_message}")

        return response

    async def fetch_article_detail(self, article_id: int) -> Article:
        return await self._remote.fetch_article_detail(article_id)

    async def get_cached_articles(self) -> list[Article]:
        return await self._local.get_cached_articles()

    async def clear_cache(self) -> None:
        await self._local.clear_cache()

    async def _cached_or_empty(self) -> list[Article]:
        try:
            return await self._local.get_cached_articles()
        except DataError as e:
            logger.warning(f"Cache unavailable for fallback: {e.user_message}")
            return []
