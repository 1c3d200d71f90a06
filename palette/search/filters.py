"""
Filter expressions for the application list.

Syntax:
  source:<value>      → source equals value (case-insensitive)
  category:<value>    → category equals value (case-insensitive)
  <other>:<value>     → title contains value (unknown property names
                        are not rejected, only the value is used)
  <text>              → title contains text

Only the first ':' separates property from value, so "source:C:\\x"
compares the source against "C:\\x".
"""

from dataclasses import dataclass
from typing import Optional, Union


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def _equals(left: str, right: str) -> bool:
    return (left or "").lower() == right.lower()


@dataclass(frozen=True)
class MatchesSource:
    value: str

    def __call__(self, item) -> bool:
        return _equals(item.source, self.value)


@dataclass(frozen=True)
class MatchesCategory:
    value: str

    def __call__(self, item) -> bool:
        return _equals(item.category, self.value)


@dataclass(frozen=True)
class MatchesTitleSubstring:
    value: str

    def __call__(self, item) -> bool:
        return _contains(item.title, self.value)


@dataclass(frozen=True)
class Always:
    def __call__(self, item) -> bool:
        return True


FilterPredicate = Union[MatchesSource, MatchesCategory, MatchesTitleSubstring, Always]

PROPERTY_PREDICATES = {
    "source": MatchesSource,
    "category": MatchesCategory,
}


def parse_filter(expression: Optional[str]) -> tuple[bool, FilterPredicate]:
    """
    Parse a filter expression into a predicate.

    Args:
        expression: Raw expression from the configuration document

    Returns:
        Tuple of (ok, predicate). Blank input gives (False, Always()).
    """
    if expression is None or not expression.strip():
        return False, Always()

    if ":" in expression:
        prop, value = expression.split(":", 1)
        prop = prop.strip().lower()
        value = value.strip()
        predicate_type = PROPERTY_PREDICATES.get(prop, MatchesTitleSubstring)
        return True, predicate_type(value)

    return True, MatchesTitleSubstring(expression)


@dataclass(frozen=True)
class AppFilter:
    """Named filter. A filter without predicate accepts every item."""
    name: str
    predicate: Optional[FilterPredicate] = None

    def applies_to(self, item) -> bool:
        if self.predicate is None:
            return True
        return self.predicate(item)
