"""
Search view orchestrator.

Mediates between user intents, the OMDb client and the per-session
``ViewState``. Every operation is a single round trip:

    Idle -> Loading -> {Success | Empty | Error} -> Idle

Usage:
    view = SearchView(OmdbClient.from_env())
    view.search_by_title("Batman")
    view.select_result(view.state.result_list[2])
"""

import logging
from typing import Callable, Literal

import requests

from omdb_explorer.models.movie import MovieDetail, SearchResultItem
from omdb_explorer.models.view_state import DetailDisplay, ListDisplay, ViewState
from omdb_explorer.core.omdb_client import OmdbClient, OmdbError

logger = logging.getLogger(__name__)

SearchMode = Literal["title", "exact", "rating"]

DEFAULT_TOP_N = 10


class SearchView:
    """
    Owns the interaction state of the movie search page.

    Operations return ``True`` when a request was dispatched and ``False``
    when the call was a no-op (blank query, or a request already in
    flight). Failures never propagate: they land in ``state.last_error``,
    which is only replaced by a later failure.
    """

    def __init__(self, client: OmdbClient, state: ViewState | None = None):
        self.client = client
        self.state = state or ViewState()

    # Operations

    def search_by_title(self, query: str) -> bool:
        """Title-substring search; replaces the display with the result list."""
        if not query.strip():
            return False
        return self._run(
            f"search {query!r}",
            lambda: self._show_list(self.client.search(query)),
        )

    def fetch_detail_by_exact_title(self, title: str) -> bool:
        """Exact-title lookup; replaces the display with the detail record."""
        if not title.strip():
            return False
        return self._run(
            f"detail by title {title!r}",
            lambda: self._show_detail(self.client.get_by_title(title)),
        )

    def fetch_detail_by_id(self, imdb_id: str) -> bool:
        """Lookup by IMDb id; replaces the display with the detail record."""
        return self._run(
            f"detail by id {imdb_id}",
            lambda: self._show_detail(self.client.get_by_id(imdb_id)),
        )

    def search_and_filter_by_rating(self, query: str, rating: str) -> bool:
        """Search, then keep only items whose rating equals ``rating`` exactly."""
        if not query.strip():
            return False

        def apply():
            items = self.client.search(query)
            self._show_list([item for item in items if item.rated == rating])

        return self._run(f"search {query!r} rated {rating!r}", apply)

    def top_n_by_language(self, language: str, n: int = DEFAULT_TOP_N) -> bool:
        """
        Search using the language as the free-text term and keep the first
        ``n`` results in upstream order. OMDb has no language facet, so this
        is a heuristic.
        """
        if not language.strip():
            return False
        return self._run(
            f"top {n} for {language!r}",
            lambda: self._show_list(self.client.search(language)[:max(n, 0)]),
        )

    def select_result(self, item: SearchResultItem) -> bool:
        """User picked an entry from the result list."""
        return self.fetch_detail_by_id(item.imdb_id)

    # Form handlers

    def submit_search(self, text: str, mode: SearchMode = "title", rating: str | None = None) -> bool:
        """Handle the title form: record the text and dispatch by mode."""
        self.state.search_query_text = text
        if not text.strip():
            return False
        if mode == "exact":
            return self.fetch_detail_by_exact_title(text)
        if mode == "rating":
            return self.search_and_filter_by_rating(text, rating or "")
        return self.search_by_title(text)

    def submit_language(self, text: str) -> bool:
        """Handle the language form."""
        self.state.language_query_text = text
        if not text.strip():
            return False
        return self.top_n_by_language(text)

    # Internals

    def _show_list(self, items: list[SearchResultItem]) -> None:
        self.state.display = ListDisplay(items=items)

    def _show_detail(self, record: MovieDetail) -> None:
        self.state.display = DetailDisplay(record=record)

    def _run(self, description: str, work: Callable[[], None]) -> bool:
        """Drive one fetch through Loading and record its outcome."""
        if self.state.is_loading:
            logger.warning("Ignoring %s: a request is already in flight", description)
            return False

        logger.info("Dispatching %s", description)
        self.state.is_loading = True
        try:
            work()
        except OmdbError as e:
            logger.warning("OMDb error for %s: %s", description, e.message)
            self.state.last_error = e.message
        except requests.RequestException as e:
            message = self.client.redact(str(e)) or "Network request failed"
            logger.error("Request failed for %s: %s", description, message)
            self.state.last_error = message
        except ValueError as e:
            logger.error("Malformed OMDb response for %s: %s", description, e)
            self.state.last_error = f"Malformed response from OMDb: {e}"
        finally:
            self.state.is_loading = False
        return True
