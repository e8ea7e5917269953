"""Core data models for Spaceflight News."""

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import TypeAdapter

from spaceflight_news.url import validate_image_url


@dataclass(frozen=True, eq=False)
class Article:
    """A single news article as returned by the Spaceflight News API.

    Identity is the server-assigned ``id``: two articles with the same id
    compare equal even if their other fields differ.
    """

    id: int
    title: str
    url: str
    news_site: str
    summary: str
    published_at: str
    updated_at: str
    image_url: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def secure_image_url(self) -> str | None:
        """The image URL upgraded to https, or None if it is missing or unsafe."""
        return validate_image_url(self.image_url)


@dataclass(frozen=True)
class ArticleResponse:
    """A page of articles.

    ``count`` is the server-reported total of matches, not the page size.
    ``from_cache`` marks a page served from the local cache after the
    network request failed; it carries the whole cached list.
    """

    count: int
    next: str | None = None
    previous: str | None = None
    results: tuple[Article, ...] = ()
    from_cache: bool = False

    @property
    def has_next(self) -> bool:
        return self.next is not None


class SearchPhase(StrEnum):
    """Search feedback shown next to the search box."""

    IDLE = "idle"
    SEARCHING = "searching"
    EMPTY = "empty"
    FOUND = "found"


@dataclass(frozen=True)
class SearchState:
    """Search feedback plus the number of results for ``FOUND``."""

    phase: SearchPhase = SearchPhase.IDLE
    count: int = 0

    @classmethod
    def idle(cls) -> "SearchState":
        return cls(SearchPhase.IDLE)

    @classmethod
    def searching(cls) -> "SearchState":
        return cls(SearchPhase.SEARCHING)

    @classmethod
    def for_results(cls, count: int) -> "SearchState":
        if count == 0:
            return cls(SearchPhase.EMPTY)
        return cls(SearchPhase.FOUND, count)

    def __str__(self) -> str:
        if self.phase is SearchPhase.FOUND:
            return f"found:{self.count}"
        return self.phase.value


@dataclass(frozen=True)
class ListBackup:
    """Browsing position saved when a search starts."""

    articles: tuple[Article, ...]
    offset: int
    has_more_pages: bool


@dataclass
class ListState:
    """Observable state of the article list."""

    articles: list[Article] = field(default_factory=list)
    is_loading: bool = False
    error_message: str | None = None
    search_text: str = ""
    offset: int = 0
    has_more_pages: bool = True
    is_search_mode: bool = False
    search_state: SearchState = field(default_factory=SearchState.idle)
    toast_message: str | None = None
    backup: ListBackup | None = None


# Pydantic adapters used to decode API payloads and cache entries. Unknown
# keys in the payload (authors, launches, events, ...) are ignored.
_article_adapter = TypeAdapter(Article)
_articles_adapter = TypeAdapter(list[Article])
_response_adapter = TypeAdapter(ArticleResponse)


def decode_article(payload: bytes | str) -> Article:
    """Decode a single article from JSON.

    Raises:
        pydantic.ValidationError: If the payload is not a valid article.
    """
    return _article_adapter.validate_json(payload)


def decode_articles(payload: bytes | str) -> list[Article]:
    """Decode a JSON array of articles."""
    return _articles_adapter.validate_json(payload)


def decode_article_response(payload: bytes | str) -> ArticleResponse:
    """Decode an ``/articles`` page from JSON."""
    return _response_adapter.validate_json(payload)


def encode_articles(articles: list[Article]) -> str:
    """Encode articles as a JSON array string."""
    return _articles_adapter.dump_json(articles).decode()
