from spaceflight_news.usecases.base import FetchArticles, SearchArticles
from spaceflight_news.usecases.fetch import DEFAULT_LIMIT, FetchArticlesUseCase
from spaceflight_news.usecases.search import (
    MIN_QUERY_LENGTH,
    SEARCH_PAGE_SIZE,
    SearchArticlesUseCase,
)

__all__ = [
    "DEFAULT_LIMIT",
    "FetchArticles",
    "FetchArticlesUseCase",
    "MIN_QUERY_LENGTH",
    "SEARCH_PAGE_SIZE",
    "SearchArticles",
    "SearchArticlesUseCase",
]
