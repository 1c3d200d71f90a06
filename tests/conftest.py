"""
Shared test fixtures for the Palette launcher test suite.

Provides configuration documents, settings and shortcut directories
that use real file I/O (no mocking of the filesystem).
"""

import json

import pytest
import toml
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture loguru output as a list of 'LEVEL:message' strings."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m), level="DEBUG", format="{level}:{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def existing_file(tmp_path):
    """A real file that Launch preconditions accept."""
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    return path


@pytest.fixture
def shortcut_dir(tmp_path):
    """Create a Start Menu style tree of shortcut files."""
    root = tmp_path / "Start Menu"
    (root / "Programs" / "Accessories").mkdir(parents=True)
    (root / "Programs" / "Notepad.lnk").write_text("")
    (root / "Programs" / "Accessories" / "Calculator.lnk").write_text("")
    (root / "Programs" / "readme.txt").write_text("")
    return root


@pytest.fixture
def launcher_document():
    """A configuration document with every section filled."""
    return {
        "pinned": [
            {"icon": "note", "title": "Note Taker", "description": "Quick notes",
             "command": "shell:notepad"},
            {"icon": "term", "title": "Terminal", "description": "Open a shell",
             "command": "C:\\Windows\\System32\\cmd.exe"},
        ],
        "macroGroups": [
            {"name": "Morning", "actions": [
                {"title": "Start day", "description": "Mail and news",
                 "command": "workflow:mail.exe && shell:start https://news &&"},
            ]},
        ],
        "recent": [
            {"icon": "doc", "title": "Report", "subtitle": "Yesterday",
             "command": "C:\\docs\\report.docx"},
        ],
        "appFilters": [
            {"name": "Start Menu", "predicate": "source:Start Menu"},
            {"name": "Shortcuts", "predicate": "category: shortcut"},
            {"name": "Broken", "predicate": "   "},
            {"name": "Code", "predicate": "code"},
        ],
        "tileGroups": [
            {"name": "Tools", "tiles": [
                {"icon": "gear", "title": "Settings", "command": "shell:ms-settings:"},
                {"icon": "blank", "title": "Empty", "command": ""},
            ]},
        ],
    }


@pytest.fixture
def tmp_config(tmp_path, launcher_document):
    """Write the configuration document to a real JSON file."""
    config_path = tmp_path / "launcher.json"
    config_path.write_text(json.dumps(launcher_document, indent=2))
    return config_path


@pytest.fixture
def tmp_settings(tmp_path, tmp_config, shortcut_dir):
    """Create a real settings TOML file pointing at the temporary files."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "launcher": {"config_path": str(tmp_config)},
        "shell": {"program": "sh", "args": ["-c"]},
        "index": {"directories": [str(shortcut_dir)], "patterns": ["*.lnk"]},
        "logging": {"level": "DEBUG"},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
