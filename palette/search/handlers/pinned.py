"""
Pinned Actions Handler - Title search over pinned actions.

Listed after applications. Results use the "Pinned" category and the
action's description as subtitle.
"""

from typing import Callable, Sequence

from palette.models import PINNED_CATEGORY, PinnedAction
from palette.search.handlers.app_search import title_matches
from palette.search.router import SearchResult


class PinnedActionsHandler:
    """Search pinned actions by title."""

    name = "pinned"
    priority = 200

    def __init__(self, pinned_actions: Callable[[], Sequence[PinnedAction]]):
        self._pinned_actions = pinned_actions

    def get_results(self, query: str) -> list[SearchResult]:
        return [
            SearchResult(
                icon=pinned.icon,
                title=pinned.title,
                subtitle=pinned.description,
                category=PINNED_CATEGORY,
                action=pinned.action,
            )
            for pinned in self._pinned_actions()
            if title_matches(pinned.title, query)
        ]
