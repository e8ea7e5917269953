from spaceflight_news.repository.articles import ArticleRepository
from spaceflight_news.repository.base import ArticleRepositoryProtocol

__all__ = ["ArticleRepository", "ArticleRepositoryProtocol"]
