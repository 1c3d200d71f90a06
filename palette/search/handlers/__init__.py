"""
Search handlers - Result sources for the query router.

Each handler scans one collection and returns typed results.
"""

from .app_search import AppSearchHandler
from .pinned import PinnedActionsHandler

__all__ = [
    "AppSearchHandler",
    "PinnedActionsHandler",
]
