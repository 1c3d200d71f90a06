"""
Launcher Model - State behind the launcher window.

Binds a configuration document into view entries (pinned actions, macro
groups, recent items, app filters, tiles) and owns the SearchEngine that
keeps the filtered application list and search results current.

The host window calls into this model on every user input event; all
work runs synchronously on the caller's thread.
"""

from typing import Iterable, Optional

from loguru import logger

from palette.actions import ActionExecutor, resolve
from palette.actions.executor import get_executor
from palette.models import (
    ApplicationItem,
    MacroGroup,
    PinnedAction,
    RecentItem,
    TileGroup,
    TileItem,
    WorkflowAction,
)
from palette.search.engine import SearchEngine
from palette.search.filters import AppFilter, parse_filter
from palette.services.configuration import LauncherConfiguration

ALL_FILTER_NAME = "All"


class LauncherModel:
    """
    View model for the launcher.

    Attributes:
        pinned_actions, macro_groups, recent_items, tile_groups: Bound entries
        app_filters: "All" followed by every configured filter that parsed
        engine: SearchEngine owning applications and derived lists
    """

    def __init__(self, executor: Optional[ActionExecutor] = None):
        self.executor = executor or get_executor()
        self.engine = SearchEngine()

        self.macro_groups: list[MacroGroup] = []
        self.recent_items: list[RecentItem] = []
        self.tile_groups: list[TileGroup] = []
        self.app_filters: list[AppFilter] = [AppFilter(ALL_FILTER_NAME)]
        self.engine.select_filter(self.app_filters[0])

    @property
    def pinned_actions(self) -> list[PinnedAction]:
        return self.engine.pinned_actions

    @property
    def applications(self) -> list[ApplicationItem]:
        return self.engine.applications

    @property
    def filtered_applications(self):
        return self.engine.filtered_applications

    @property
    def search_results(self):
        return self.engine.search_results

    @property
    def search_text(self) -> str:
        return self.engine.search_text

    @search_text.setter
    def search_text(self, value: str) -> None:
        self.engine.set_search_text(value)

    @property
    def selected_filter(self) -> Optional[AppFilter]:
        return self.engine.selected_filter

    @selected_filter.setter
    def selected_filter(self, value: Optional[AppFilter]) -> None:
        self.engine.select_filter(value)

    @property
    def has_search_text(self) -> bool:
        return self.engine.has_search_text

    @property
    def search_results_header(self) -> str:
        return self.engine.search_results_header

    def apply_configuration(self, configuration: LauncherConfiguration) -> None:
        """Rebuild every bound collection from a configuration document."""
        self.engine.set_pinned_actions(
            PinnedAction(p.icon, p.title, p.description, resolve(p.command))
            for p in configuration.pinned
        )

        self.macro_groups = [
            MacroGroup(
                group.name,
                tuple(
                    WorkflowAction(a.title, a.description, resolve(a.command))
                    for a in group.actions
                ),
            )
            for group in configuration.macro_groups
        ]

        self.recent_items = [
            RecentItem(r.icon, r.title, r.subtitle, resolve(r.command))
            for r in configuration.recent
        ]

        self.app_filters = [AppFilter(ALL_FILTER_NAME)]
        for filter_config in configuration.app_filters:
            ok, predicate = parse_filter(filter_config.predicate)
            if ok:
                self.app_filters.append(AppFilter(filter_config.name, predicate))
            else:
                logger.debug(f"Ignoring filter '{filter_config.name}' with empty predicate")

        self.tile_groups = [
            TileGroup(
                group.name,
                tuple(TileItem(t.icon, t.title, resolve(t.command)) for t in group.tiles),
            )
            for group in configuration.tile_groups
        ]

        self.engine.select_filter(self.app_filters[0])

    def update_applications(self, applications: Iterable[ApplicationItem]) -> None:
        self.engine.update_applications(applications)

    def select_filter_by_name(self, name: str) -> bool:
        """
        Select the first app filter with the given name (case-insensitive).

        Returns:
            True if a filter was found and selected
        """
        for app_filter in self.app_filters:
            if app_filter.name.lower() == name.lower():
                self.engine.select_filter(app_filter)
                return True
        return False

    def activate_first_result(self) -> bool:
        """
        Execute the first search result, as the Enter key does.

        Returns:
            True if there was a result to execute
        """
        if not self.has_search_text or not self.search_results:
            return False

        result = self.search_results[0]
        logger.info(f"Activating '{result.title}'")
        self.executor.execute(result.action)
        return True

    def clear_search(self) -> None:
        self.engine.set_search_text("")
