"""Shared fixtures."""

from collections.abc import Callable

import pytest

from spaceflight_news.data import Article, ArticleResponse

ArticleFactory = Callable[..., Article]
ResponseFactory = Callable[..., ArticleResponse]


def _make_article(article_id: int, title: str | None = None, image_url: str | None = None) -> Article:
    return Article(
        id=article_id,
        title=title or f"Article {article_id}",
        url=f"https://example.com/articles/{article_id}",
        news_site="Example News",
        summary=f"Summary {article_id}",
        published_at="2025-06-10T12:00:00Z",
        updated_at="2025-06-10T12:30:00Z",
        image_url=image_url,
    )


@pytest.fixture
def make_article() -> ArticleFactory:
    """Build an Article with predictable fields."""
    return _make_article


@pytest.fixture
def make_response() -> ResponseFactory:
    """Build an ArticleResponse for a range of article ids."""

    def factory(ids: range | list[int], *, next_url: str | None = None, count: int | None = None) -> ArticleResponse:
        results = tuple(_make_article(i) for i in ids)
        return ArticleResponse(
            count=count if count is not None else len(results),
            next=next_url,
            previous=None,
            results=results,
        )

    return factory


@pytest.fixture
def article_payload() -> dict:
    """Sample article as returned by the API."""
    return {
        "id": 31337,
        "title": "Starship completes orbital test",
        "authors": [{"name": "Jane Doe", "socials": None}],
        "url": "https://www.spacenews.com/starship-orbital-test/",
        "image_url": "http://cdn.spacenews.com/starship.jpg",
        "news_site": "SpaceNews",
        "summary": "The vehicle reached orbit.",
        "published_at": "2025-06-10T12:00:00Z",
        "updated_at": "2025-06-10T12:30:00.123456Z",
        "featured": False,
        "launches": [],
        "events": [],
    }
