"""Data models for Spaceflight News."""

from spaceflight_news.data.models import (
    Article,
    ArticleResponse,
    ListBackup,
    ListState,
    SearchPhase,
    SearchState,
    decode_article,
    decode_article_response,
    decode_articles,
    encode_articles,
)

__all__ = [
    "Article",
    "ArticleResponse",
    "ListBackup",
    "ListState",
    "SearchPhase",
    "SearchState",
    "decode_article",
    "decode_article_response",
    "decode_articles",
    "encode_articles",
]
