"""State controller for the paginated, searchable article list."""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from spaceflight_news.cache.base import LocalDataSource
from spaceflight_news.data import Article, ArticleResponse, ListBackup, ListState, SearchState
from spaceflight_news.errors import DataError, NoDataError, RequiredFieldError, describe_error
from spaceflight_news.usecases.base import FetchArticles, SearchArticles

logger = logging.getLogger(__name__)

Listener = Callable[[ListState], None]

CACHE_CLEARED_MESSAGE = "Cache cleared"


class ArticleListController:
    """Owns the article list state: pagination, search mode and persistence.

    All state mutation happens on the event loop that drives the controller,
    between suspension points, so observers never see a half-applied update.

    Overlapping fetches follow a cancel-on-supersede policy: each call to
    ``fetch_articles`` cancels the in-flight fetch, and every completion
    checks a generation counter before touching state. A superseded fetch
    therefore never applies its result and never clears the loading flag
    set by its successor.

    Args:
        fetch_use_case: Paged listing.
        search_use_case: Validated search.
        local_store: Cache used for the initial load and for persisting state.
        page_size: Articles requested per page while browsing.
        toast_duration: Seconds before a toast is dismissed (0 keeps it until
            ``dismiss_toast`` is called).
    """

    def __init__(
        self,
        fetch_use_case: FetchArticles,
        search_use_case: SearchArticles,
        local_store: LocalDataSource,
        *,
        page_size: int = 10,
        toast_duration: float = 3.0,
    ) -> None:
        self._fetch = fetch_use_case
        self._search = search_use_case
        self._local = local_store
        self._page_size = page_size
        self._toast_duration = toast_duration

        self._state = ListState()
        self._listeners: list[Listener] = []
        self._generation = 0
        self._active_task: asyncio.Task[None] | None = None
        self._toast_task: asyncio.Task[None] | None = None
        self._background_tasks: set[asyncio.Task[None]] = set()

    # ------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------

    @property
    def state(self) -> ListState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with the state after every change.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_search_text(self, text: str) -> None:
        self._state.search_text = text
        self._notify()

    def dismiss_toast(self) -> None:
        if self._state.toast_message is None:
            return
        self._state.toast_message = None
        self._notify()

    # ------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------

    async def load_initial_data(self) -> None:
        """Restore the cached list and search text, fetching if nothing is cached."""
        try:
            articles = await self._local.get_cached_articles()
            search_text = await self._local.get_cached_search_text()
        except DataError as e:
            logger.warning(f"Could not restore cached list: {e.user_message}")
            articles, search_text = [], ""

        state = self._state
        state.articles = list(articles)
        state.search_text = search_text
        state.offset = len(articles)
        if articles and search_text:
            # No browsing position survives a restart, so there is no backup
            state.is_search_mode = True
            state.search_state = SearchState.for_results(len(articles))
        self._notify()

        if not articles:
            await self.fetch_articles()

    async def fetch_articles(self) -> None:
        """Load the first page, or run a search when search text is set.

        Always restarts pagination. With empty search text and a saved
        backup, the pre-search list is restored without a network call.
        """
        self._cancel_active()
        generation = self._next_generation()

        state = self._state
        search_text = state.search_text
        state.is_loading = True
        state.error_message = None

        if search_text and not state.is_search_mode:
            state.backup = ListBackup(
                articles=tuple(state.articles),
                offset=state.offset,
                has_more_pages=state.has_more_pages,
            )
            state.is_search_mode = True

        state.offset = 0
        state.has_more_pages = True

        if not search_text and state.backup is not None:
            self.handle_search_cancellation()
            state.is_loading = False
            self._notify()
            return

        if search_text:
            state.search_state = SearchState.searching()
        else:
            state.is_search_mode = False
            state.search_state = SearchState.idle()
        self._notify()

        await self._run_active(self._fetch_first_page(generation, search_text))

    async def load_more_articles(self) -> None:
        """Append the next page while browsing.

        No-op in search mode, while loading, or when no pages remain.
        """
        state = self._state
        if state.is_search_mode or state.is_loading or not state.has_more_pages:
            return

        # Set before the first suspension point so a second caller is refused
        state.is_loading = True
        state.error_message = None
        self._cancel_active()
        generation = self._next_generation()
        self._notify()

        await self._run_active(self._fetch_next_page(generation, state.offset))

    async def search_articles(self) -> None:
        if not self._state.search_text.strip():
            self._state.error_message = RequiredFieldError("search").user_message
            self._notify()
            return

        await self.fetch_articles()

    def handle_search_cancellation(self) -> None:
        """Leave search mode and restore the list saved when the search began."""
        state = self._state
        backup = state.backup
        if not state.is_search_mode or backup is None:
            return

        # A search still in flight must not overwrite the restored list
        self._cancel_active()
        self._next_generation()

        state.articles = list(backup.articles)
        state.offset = backup.offset
        state.has_more_pages = backup.has_more_pages
        state.search_text = ""
        state.is_search_mode = False
        state.search_state = SearchState.idle()
        state.error_message = None
        state.is_loading = False
        state.backup = None
        self._notify()

        self._persist(state.articles, "")

    async def refresh_articles(self) -> None:
        """Pull-to-refresh: replace the list with a fresh first page."""
        await self.fetch_articles()

    async def retry(self) -> None:
        await self.fetch_articles()

    async def clear_cache(self) -> None:
        """Clear the local cache. The articles on screen are kept."""
        try:
            await self._local.clear_cache()
        except DataError as e:
            logger.error(f"Could not clear cache: {e.user_message}")
            self._show_toast(e.user_message)
            return
        self._show_toast(CACHE_CLEARED_MESSAGE)

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    async def wait_for_background_tasks(self) -> None:
        """Wait until pending state persistence has finished."""
        while self._background_tasks:
            await asyncio.gather(*self._background_tasks, return_exceptions=True)

    async def aclose(self) -> None:
        """Finish persistence, then cancel any in-flight fetch and toast timer."""
        await self.wait_for_background_tasks()
        pending = [t for t in (self._active_task, self._toast_task) if t is not None and not t.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        self._state.is_loading = False

    # ------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------

    async def _fetch_first_page(self, generation: int, search_text: str) -> None:
        state = self._state
        try:
            if search_text:
                response = await self._search.execute(search_text)
            else:
                response = await self._fetch.execute(None, self._page_size, 0)
        except Exception as error:
            if self._is_current(generation):
                message = describe_error(error)
                logger.error(f"Fetching articles failed: {message}")
                state.error_message = message
                state.search_state = SearchState.idle()
                self._show_toast(message)
            return
        else:
            if not self._is_current(generation):
                return
            state.articles = list(response.results)
            state.offset = len(response.results)
            state.has_more_pages = response.has_next
            if search_text:
                state.search_state = SearchState.for_results(len(response.results))
            else:
                state.search_state = SearchState.idle()
            logger.info(f"Loaded {len(state.articles)} articles")
            self._persist(state.articles, search_text)
        finally:
            if self._is_current(generation):
                state.is_loading = False
                self._notify()

    async def _fetch_next_page(self, generation: int, offset: int) -> None:
        state = self._state
        try:
            response = await self._fetch.execute(None, self._page_size, offset)
        except Exception as error:
            if self._is_current(generation):
                message = describe_error(error)
                logger.error(f"Loading more articles failed: {message}")
                state.error_message = message
            return
        else:
            if not self._is_current(generation):
                return
            if response.from_cache:
                # The cached list is already on screen; the next page is still unknown
                logger.warning(f"Next page at offset {offset} unavailable, cache served instead")
                state.error_message = NoDataError().user_message
                return
            state.articles = _append_new(state.articles, response)
            state.offset += len(response.results)
            state.has_more_pages = response.has_next
            logger.info(f"Loaded page at offset {offset}, {len(state.articles)} articles total")
            self._persist(state.articles, state.search_text)
        finally:
            if self._is_current(generation):
                state.is_loading = False
                self._notify()

    async def _run_active(self, operation: Coroutine[Any, Any, None]) -> None:
        """Run ``operation`` as the active fetch task and wait for it.

        Returns quietly when the task is cancelled by a newer fetch; a
        cancellation of the caller itself is propagated.
        """
        task = asyncio.create_task(operation)
        self._active_task = task
        try:
            await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            logger.debug("Fetch superseded by a newer request")

    def _cancel_active(self) -> None:
        if self._active_task is not None and not self._active_task.done():
            self._active_task.cancel()

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _persist(self, articles: list[Article], search_text: str) -> None:
        """Save the list and search text in the background."""
        task = asyncio.create_task(self._save_state(list(articles), search_text))
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

    async def _save_state(self, articles: list[Article], search_text: str) -> None:
        try:
            await self._local.save_articles(articles)
            await self._local.save_search_text(search_text)
        except DataError as e:
            logger.warning(f"Could not persist list state: {e.user_message}")

    def _show_toast(self, message: str) -> None:
        if self._toast_task is not None and not self._toast_task.done():
            self._toast_task.cancel()
        self._state.toast_message = message
        self._notify()
        if self._toast_duration > 0:
            self._toast_task = asyncio.create_task(self._expire_toast(message))

    async def _expire_toast(self, message: str) -> None:
        await asyncio.sleep(self._toast_duration)
        if self._state.toast_message == message:
            self.dismiss_toast()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener failed")


def _append_new(existing: list[Article], response: ArticleResponse) -> list[Article]:
    """Append a page, skipping articles already in the list."""
    seen = {article.id for article in existing}
    appended = list(existing)
    for article in response.results:
        if article.id not in seen:
            seen.add(article.id)
            appended.append(article)
    return appended
