from spaceflight_news.controller.list_controller import (
    CACHE_CLEARED_MESSAGE,
    ArticleListController,
    Listener,
)

__all__ = ["ArticleListController", "CACHE_CLEARED_MESSAGE", "Listener"]
