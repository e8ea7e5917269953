"""HTTP client for the Spaceflight News API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TypeVar

import httpx
import pydantic

from spaceflight_news.data import Article, ArticleResponse, decode_article, decode_article_response
from spaceflight_news.errors import (
    DecodingError,
    InvalidURLError,
    NetworkError,
    NoConnectionError,
    NoDataError,
    RequestTimeoutError,
    ServerError,
    TransportError,
)

logger = logging.getLogger(__name__)

SPACEFLIGHT_NEWS_API_URL = "https://api.spaceflightnewsapi.net/v4"
MAX_LIMIT = 100  # API page size cap

T = TypeVar("T")


class SpaceflightNewsClient:
    """Fetch articles from the Spaceflight News API.

    Every failure is raised as a ``NetworkError`` subclass; nothing is
    cached here.

    Args:
        base_url: API root (defaults to the public v4 endpoint).
        connect_timeout: Seconds allowed to establish a connection.
        total_timeout: Seconds allowed for the whole request.
        connect_retries: Extra connection attempts made while the network is
            unreachable before giving up.
        transport: Optional transport override (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        *,
        base_url: str = SPACEFLIGHT_NEWS_API_URL,
        connect_timeout: float = 15.0,
        total_timeout: float = 60.0,
        connect_retries: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(total_timeout, connect=connect_timeout)
        self._total_timeout = total_timeout
        self._connect_retries = connect_retries
        self._transport = transport

    async def fetch_articles(
        self,
        search_query: str | None,
        limit: int,
        offset: int,
    ) -> ArticleResponse:
        """Fetch one page of ``/articles``.

        Args:
            search_query: Free-text search; omitted from the request when empty.
            limit: Page size (capped at 100).
            offset: Number of items already fetched.

        Returns:
            The decoded page.
        """
        params: dict[str, str | int] = {
            "limit": min(limit, MAX_LIMIT),
            "offset": offset,
        }
        if search_query:
            params["search"] = search_query

        url = self._build_url("/articles")
        response = await self._request(url, params, decode_article_response)
        logger.info(f"Fetched {len(response.results)} articles from server (total {response.count})")
        return response

    async def fetch_article_detail(self, article_id: int) -> Article:
        """Fetch ``/articles/{id}``."""
        url = self._build_url(f"/articles/{article_id}")
        article = await self._request(url, None, decode_article)
        logger.info(f"Fetched article detail {article.id}")
        return article

    def _build_url(self, path: str) -> httpx.URL:
        try:
            url = httpx.URL(self._base_url + path)
        except httpx.InvalidURL as e:
            raise self._log(InvalidURLError(self._base_url)) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise self._log(InvalidURLError(self._base_url))
        return url

    async def _request(
        self,
        url: httpx.URL,
        params: dict[str, str | int] | None,
        decode: Callable[[bytes], T],
    ) -> T:
        """Perform a GET and decode the body, mapping every failure."""
        transport = self._transport or httpx.AsyncHTTPTransport(retries=self._connect_retries)
        try:
            async with asyncio.timeout(self._total_timeout):
                async with httpx.AsyncClient(
                    timeout=self._timeout, transport=transport, follow_redirects=True
                ) as client:
                    response = await client.get(url, params=params)
        except TimeoutError as e:
            raise self._log(RequestTimeoutError()) from e
        except httpx.TimeoutException as e:
            raise self._log(RequestTimeoutError()) from e
        except httpx.ConnectError as e:
            raise self._log(NoConnectionError(str(e))) from e
        except httpx.TransportError as e:
            raise self._log(TransportError(str(e) or type(e).__name__)) from e

        if not response.is_success:
            raise self._log(ServerError(response.status_code))
        if not response.content:
            raise self._log(NoDataError())

        try:
            return decode(response.content)
        except pydantic.ValidationError as e:
            raise self._log(DecodingError(str(e))) from e

    @staticmethod
    def _log(error: NetworkError) -> NetworkError:
        logger.error(f"{type(error).__name__}: {error.user_message}")
        return error
