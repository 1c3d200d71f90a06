# Palette Launcher Package
"""
Command-palette launcher core.

Subpackages:
  - actions: Resolve configuration command strings and execute them
  - search: Filter expressions, search handlers and the derived-list engine
  - services: Configuration document and shortcut index
"""

__version__ = "0.1.0.dev0"
