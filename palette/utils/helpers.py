"""
Helper utilities for the Palette launcher.

Provides common functions used across the package:
- Settings loading with defaults
- Platform defaults for the shell interpreter and shortcut locations
- Logging setup
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "palette" / "settings.toml"


def default_shell() -> tuple[str, list[str]]:
    """
    Get the platform's shell interpreter and the flags that precede a command.

    Returns:
        Tuple of (program, args)
    """
    if os.name == "nt":
        return "powershell.exe", ["-NoProfile", "-Command"]
    return "sh", ["-c"]


def default_shortcut_locations() -> tuple[list[str], list[str]]:
    """
    Get the default shortcut directories and file patterns for this platform.

    Returns:
        Tuple of (directories, glob patterns)
    """
    if os.name == "nt":
        appdata = os.environ.get("APPDATA", "")
        programdata = os.environ.get("PROGRAMDATA", "")
        start_menu = os.path.join("Microsoft", "Windows", "Start Menu")
        directories = [os.path.join(root, start_menu) for root in (appdata, programdata) if root]
        return directories, ["*.lnk"]

    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return [os.path.join(data_home, "applications"), "/usr/share/applications"], ["*.desktop"]


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load launcher settings from TOML file.

    Args:
        settings_path: Settings file to read, defaults to
                       ~/.config/palette/settings.toml

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "launcher": {
                "config_path": "~/.config/palette/launcher.json"
            },
            "shell": {
                "program": "sh",
                "args": ["-c"]
            },
            "index": {
                "directories": ["~/.local/share/applications"],
                "patterns": ["*.desktop"]
            },
            "logging": {
                "level": "INFO"
            }
        }
    """
    shell_program, shell_args = default_shell()
    directories, patterns = default_shortcut_locations()

    # Default settings
    defaults = {
        "launcher": {
            "config_path": str(Path.home() / ".config" / "palette" / "launcher.json"),
        },
        "shell": {
            "program": shell_program,
            "args": shell_args,
        },
        "index": {
            "directories": directories,
            "patterns": patterns,
        },
        "logging": {
            "level": "INFO",
        },
    }

    settings_path = Path(settings_path) if settings_path else DEFAULT_SETTINGS_PATH

    # Load from file if it exists
    if settings_path.exists():
        try:
            loaded = toml.load(settings_path)
            # Merge loaded settings with defaults
            return _deep_merge(defaults, loaded)
        except Exception as e:
            logger.warning(f"Could not load settings from {settings_path}: {e}")
            logger.info("Using default settings")
            return defaults
    else:
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return defaults


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def setup_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
