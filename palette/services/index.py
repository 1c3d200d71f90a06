"""
Shortcut Index Service - Enumerate installed application shortcuts.

Every file matching one of the configured glob patterns below one of the
configured directories becomes an ApplicationItem that launches it.
"""

from pathlib import Path
from typing import Iterable, Iterator

from loguru import logger

from palette.actions.models import Launch
from palette.models import ApplicationItem

SHORTCUT_CATEGORY = "Shortcut"
START_MENU_SOURCE = "Start Menu"


class ShortcutIndexService:
    """
    Builds the ordered application list from shortcut files.

    The index is rebuilt on demand; there are no incremental updates.
    """

    def __init__(self, directories: Iterable[str], patterns: Iterable[str]):
        self.directories = [Path(d).expanduser() for d in directories]
        self.patterns = list(patterns)
        self._applications: list[ApplicationItem] = []

    @classmethod
    def from_settings(cls, settings: dict) -> "ShortcutIndexService":
        index = settings.get("index", {})
        return cls(index.get("directories", []), index.get("patterns", []))

    @property
    def applications(self) -> list[ApplicationItem]:
        return list(self._applications)

    def build_index(self) -> list[ApplicationItem]:
        """
        Rebuild the application list.

        Returns:
            The new list of ApplicationItem, directories in configured order
        """
        self._applications = list(self._enumerate())
        logger.debug(f"Indexed {len(self._applications)} shortcuts")
        return self.applications

    def _enumerate(self) -> Iterator[ApplicationItem]:
        for directory in self.directories:
            if not directory.is_dir():
                logger.debug(f"Shortcut directory not found: {directory}")
                continue

            shortcuts = set()
            for pattern in self.patterns:
                shortcuts.update(p for p in directory.rglob(pattern) if p.is_file())

            for shortcut in sorted(shortcuts):
                yield ApplicationItem(
                    title=shortcut.stem,
                    category=SHORTCUT_CATEGORY,
                    source=START_MENU_SOURCE,
                    action=Launch(str(shortcut)),
                )
