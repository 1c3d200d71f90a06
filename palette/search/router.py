"""
Query Router - Collects search results from priority-ordered handlers.

Each handler declares a priority (lower = earlier in the result list) and
returns the results it finds for a query. The router concatenates the
results of every handler in priority order. Blank queries produce no
results.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from palette.actions.models import Action


@dataclass(frozen=True)
class SearchResult:
    """A single search result from any handler."""
    icon: str
    title: str
    subtitle: str
    category: str
    action: Action


class SearchHandler(ABC):
    """Base class for all search handlers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower number = results listed first."""
        ...

    @abstractmethod
    def get_results(self, query: str) -> list[SearchResult]:
        """Return results for a non-blank query."""
        ...


class QueryRouter:
    """Concatenates handler results in priority order."""

    def __init__(self):
        self._handlers: list[SearchHandler] = []

    def register(self, handler: SearchHandler) -> None:
        """Register a handler and re-sort by priority."""
        self._handlers.append(handler)
        # Stable sort keeps registration order for equal priorities
        self._handlers.sort(key=lambda h: h.priority)

    def route(self, query: str) -> list[SearchResult]:
        """
        Collect results from every handler.

        Args:
            query: The search query string, matched as-is

        Returns:
            Results of all handlers, in handler priority order.
            Returns [] for a blank query.
        """
        if not query or not query.strip():
            return []

        results = []
        for handler in self._handlers:
            results.extend(handler.get_results(query))
        return results
