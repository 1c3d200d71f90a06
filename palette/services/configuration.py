"""
Configuration Service - Load and save the launcher document.

The document is JSON with camelCase keys and five sections:

    {
      "pinned":      [{"icon", "title", "description", "command"}],
      "macroGroups": [{"name", "actions": [{"title", "description", "command"}]}],
      "recent":      [{"icon", "title", "subtitle", "command"}],
      "appFilters":  [{"name", "predicate"}],
      "tileGroups":  [{"name", "tiles": [{"icon", "title", "command"}]}]
    }

Command and predicate strings are kept as raw text. They are resolved by
the launcher model, not here.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path

from loguru import logger


@dataclass
class PinnedActionConfiguration:
    icon: str = ""
    title: str = ""
    description: str = ""
    command: str = ""


@dataclass
class WorkflowConfiguration:
    title: str = ""
    description: str = ""
    command: str = ""


@dataclass
class MacroGroupConfiguration:
    name: str = ""
    actions: list[WorkflowConfiguration] = field(default_factory=list)


@dataclass
class RecentItemConfiguration:
    icon: str = ""
    title: str = ""
    subtitle: str = ""
    command: str = ""


@dataclass
class AppFilterConfiguration:
    name: str = ""
    predicate: str = ""


@dataclass
class TileConfiguration:
    icon: str = ""
    title: str = ""
    command: str = ""


@dataclass
class TileGroupConfiguration:
    name: str = ""
    tiles: list[TileConfiguration] = field(default_factory=list)


@dataclass
class LauncherConfiguration:
    pinned: list[PinnedActionConfiguration] = field(default_factory=list)
    macro_groups: list[MacroGroupConfiguration] = field(default_factory=list)
    recent: list[RecentItemConfiguration] = field(default_factory=list)
    app_filters: list[AppFilterConfiguration] = field(default_factory=list)
    tile_groups: list[TileGroupConfiguration] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "LauncherConfiguration":
        """Build a configuration from a decoded JSON document, skipping malformed entries."""
        if not isinstance(data, dict):
            logger.warning(f"Configuration root is {type(data).__name__}, expected an object")
            return cls()

        return cls(
            pinned=_entries(data, "pinned", PinnedActionConfiguration),
            macro_groups=[
                MacroGroupConfiguration(
                    name=_text(group.get("name")),
                    actions=_entries(group, "actions", WorkflowConfiguration),
                )
                for group in _objects(data, "macroGroups")
            ],
            recent=_entries(data, "recent", RecentItemConfiguration),
            app_filters=_entries(data, "appFilters", AppFilterConfiguration),
            tile_groups=[
                TileGroupConfiguration(
                    name=_text(group.get("name")),
                    tiles=_entries(group, "tiles", TileConfiguration),
                )
                for group in _objects(data, "tileGroups")
            ],
        )

    def to_dict(self) -> dict:
        return {
            "pinned": [asdict(item) for item in self.pinned],
            "macroGroups": [asdict(group) for group in self.macro_groups],
            "recent": [asdict(item) for item in self.recent],
            "appFilters": [asdict(item) for item in self.app_filters],
            "tileGroups": [asdict(group) for group in self.tile_groups],
        }


def _text(value) -> str:
    return value if isinstance(value, str) else ""


def _objects(data: dict, key: str) -> list[dict]:
    """Return the JSON objects listed under key, warning about anything else."""
    section = data.get(key) or []
    if not isinstance(section, list):
        logger.warning(f"Skipping section '{key}': expected a list")
        return []

    objects = []
    for entry in section:
        if isinstance(entry, dict):
            objects.append(entry)
        else:
            logger.warning(f"Skipping malformed entry in '{key}': {entry!r}")
    return objects


def _entries(data: dict, key: str, entry_type) -> list:
    fields = entry_type.__dataclass_fields__
    return [
        entry_type(**{name: _text(entry.get(name)) for name in fields})
        for entry in _objects(data, key)
    ]


class ConfigurationService:
    """
    Reads and writes the launcher document.

    Methods:
        load_configuration(): Parsed document, empty on any error
        save_configuration(config): Write the document back to disk
    """

    def __init__(self, config_path: Path):
        self.config_path = Path(config_path).expanduser()
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if not self.config_path.exists():
            self.save_configuration(LauncherConfiguration())
            logger.info(f"Created default configuration at {self.config_path}")

    def load_configuration(self) -> LauncherConfiguration:
        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.exception(f"Failed to load configuration from {self.config_path}")
            return LauncherConfiguration()

        return LauncherConfiguration.from_dict(data)

    def save_configuration(self, configuration: LauncherConfiguration) -> None:
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(configuration.to_dict(), f, indent=2)
