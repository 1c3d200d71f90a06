"""
Search package - Filter expressions and derived result lists.

Results are collected from priority-ordered handlers (applications, then
pinned actions) and concatenated. The SearchEngine rebuilds the filtered
application list and the search results whenever its inputs change.
"""

from .engine import SearchEngine, filter_applications
from .filters import AppFilter, parse_filter
from .router import QueryRouter, SearchHandler, SearchResult

__all__ = [
    "SearchEngine",
    "filter_applications",
    "AppFilter",
    "parse_filter",
    "QueryRouter",
    "SearchHandler",
    "SearchResult",
]
