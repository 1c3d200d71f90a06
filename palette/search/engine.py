"""
Search Engine - Owns the application list and its derived views.

Derived lists are rebuilt from scratch on every change of search text,
selected filter, applications or pinned actions:
  filtered_applications: applications matching the search text (when not
                         blank) and accepted by the selected filter
  search_results:        matching applications followed by matching pinned
                         actions, empty when the search text is blank

Search text is matched as typed. Whitespace-only text counts as blank.
"""

from typing import Iterable, Optional, Sequence

from loguru import logger

from palette.models import ApplicationItem, PinnedAction
from palette.search.filters import AppFilter
from palette.search.handlers import AppSearchHandler, PinnedActionsHandler
from palette.search.handlers.app_search import title_matches
from palette.search.router import QueryRouter, SearchResult


def is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


def filter_applications(
    applications: Iterable[ApplicationItem],
    search_text: str = "",
    app_filter: Optional[AppFilter] = None,
) -> list[ApplicationItem]:
    """
    Filter applications by search text and the selected filter.

    Args:
        applications: Source items, order is preserved
        search_text: Title substring, ignored when blank
        app_filter: Selected filter, None accepts everything

    Returns:
        New list with the items passing both tests
    """
    searching = not is_blank(search_text)
    return [
        app for app in applications
        if (not searching or title_matches(app.title, search_text))
        and (app_filter is None or app_filter.applies_to(app))
    ]


class SearchEngine:
    """Pull-based recomputation of the filtered list and search results."""

    def __init__(self):
        self.applications: list[ApplicationItem] = []
        self.pinned_actions: list[PinnedAction] = []
        self.search_text = ""
        self.selected_filter: Optional[AppFilter] = None

        self.filtered_applications: list[ApplicationItem] = []
        self.search_results: list[SearchResult] = []

        self.router = QueryRouter()
        self.router.register(AppSearchHandler(lambda: self.applications))
        self.router.register(PinnedActionsHandler(lambda: self.pinned_actions))

    @property
    def has_search_text(self) -> bool:
        return not is_blank(self.search_text)

    @property
    def search_results_header(self) -> str:
        return "Search Results" if self.has_search_text else "Recent"

    def update_applications(self, applications: Iterable[ApplicationItem]) -> None:
        """Replace the application list and rebuild both views."""
        self.applications = list(applications)
        logger.debug(f"Application list replaced ({len(self.applications)} items)")
        self.refresh()

    def set_pinned_actions(self, pinned_actions: Iterable[PinnedAction]) -> None:
        self.pinned_actions = list(pinned_actions)
        self.refresh_search_results()

    def set_search_text(self, text: Optional[str]) -> None:
        text = text or ""
        if text == self.search_text:
            return
        self.search_text = text
        self.refresh()

    def select_filter(self, app_filter: Optional[AppFilter]) -> None:
        if app_filter == self.selected_filter:
            return
        self.selected_filter = app_filter
        self.refresh()

    def refresh(self) -> None:
        self.refresh_filtered_applications()
        self.refresh_search_results()

    def refresh_filtered_applications(self) -> Sequence[ApplicationItem]:
        self.filtered_applications = filter_applications(
            self.applications, self.search_text, self.selected_filter
        )
        return self.filtered_applications

    def refresh_search_results(self) -> Sequence[SearchResult]:
        self.search_results = self.router.route(self.search_text)
        return self.search_results
