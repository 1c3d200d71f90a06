"""
View entries shown by the launcher.

Each entry owns the Action resolved from its configuration command. All
entries are immutable values compared by content.
"""

from dataclasses import dataclass

from palette.actions.models import Action

PINNED_CATEGORY = "Pinned"


@dataclass(frozen=True)
class ApplicationItem:
    """An indexed application shortcut."""
    title: str
    category: str
    source: str
    action: Action
    icon: str = ""


@dataclass(frozen=True)
class PinnedAction:
    icon: str
    title: str
    description: str
    action: Action


@dataclass(frozen=True)
class WorkflowAction:
    title: str
    description: str
    action: Action


@dataclass(frozen=True)
class MacroGroup:
    name: str
    actions: tuple = ()


@dataclass(frozen=True)
class RecentItem:
    icon: str
    title: str
    subtitle: str
    action: Action


@dataclass(frozen=True)
class TileItem:
    icon: str
    title: str
    action: Action


@dataclass(frozen=True)
class TileGroup:
    name: str
    tiles: tuple = ()
