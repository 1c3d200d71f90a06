# Palette Services Package
"""
Backend services for the Palette launcher.

Services load the configuration document and index installed shortcuts.
"""

from .configuration import ConfigurationService, LauncherConfiguration
from .index import ShortcutIndexService

__all__ = ["ConfigurationService", "LauncherConfiguration", "ShortcutIndexService"]
