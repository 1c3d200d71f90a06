"""
Tests for the QueryRouter.

Uses the real router with minimal stub handlers.
"""

from palette.actions import NoOp
from palette.search.router import QueryRouter, SearchResult


class StubHandler:
    """Minimal handler for testing result collection."""

    def __init__(self, name, priority, titles=None):
        self.name = name
        self.priority = priority
        self._titles = titles if titles is not None else [name]

    def get_results(self, query):
        return [SearchResult("", title, query, self.name, NoOp()) for title in self._titles]


class TestQueryRouter:
    """Test priority-ordered concatenation."""

    def test_blank_query_returns_nothing(self):
        router = QueryRouter()
        router.register(StubHandler("apps", 100))
        assert router.route("") == []
        assert router.route("   ") == []

    def test_results_concatenated_in_priority_order(self):
        router = QueryRouter()
        router.register(StubHandler("late", 200, ["c"]))
        router.register(StubHandler("early", 100, ["a", "b"]))
        assert [r.title for r in router.route("x")] == ["a", "b", "c"]

    def test_query_passed_as_typed(self):
        router = QueryRouter()
        router.register(StubHandler("apps", 100))
        assert router.route(" note ")[0].subtitle == " note "

    def test_handlers_sorted_by_priority(self):
        router = QueryRouter()
        router.register(StubHandler("c", 300))
        router.register(StubHandler("a", 100))
        router.register(StubHandler("b", 200))
        priorities = [h.priority for h in router._handlers]
        assert priorities == [100, 200, 300]

    def test_handler_without_results(self):
        router = QueryRouter()
        router.register(StubHandler("empty", 100, []))
        router.register(StubHandler("full", 200, ["x"]))
        assert [r.title for r in router.route("q")] == ["x"]
