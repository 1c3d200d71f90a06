"""
App Search Handler - Case-insensitive title search over indexed applications.

Results keep the order of the application list. Category is the item's
own category and the subtitle is its source.
"""

from typing import Callable, Sequence

from palette.models import ApplicationItem
from palette.search.router import SearchResult


def title_matches(title: str, query: str) -> bool:
    """Case-insensitive substring test used by every title search."""
    return query.lower() in (title or "").lower()


class AppSearchHandler:
    """Search indexed applications by title."""

    name = "app_search"
    priority = 100

    def __init__(self, applications: Callable[[], Sequence[ApplicationItem]]):
        self._applications = applications

    def get_results(self, query: str) -> list[SearchResult]:
        return [
            SearchResult(
                icon=app.icon,
                title=app.title,
                subtitle=app.source,
                category=app.category,
                action=app.action,
            )
            for app in self._applications()
            if title_matches(app.title, query)
        ]
