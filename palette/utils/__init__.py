# Palette Utilities Package
"""
Shared utility functions and helpers for the Palette launcher.
"""

from .helpers import load_settings, setup_logging

__all__ = ["load_settings", "setup_logging"]
