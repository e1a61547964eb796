"""Pytest configuration and fixtures for metacmd tests."""

import json
import logging
from pathlib import Path

import pytest

from metacmd.models import Desc, MetaCommand, build_registry
from metacmd.sections import Section


@pytest.fixture
def two_section_registry():
    """General holds \\go with alias \\g; Help is empty."""
    return build_registry(
        [
            (
                Section.GENERAL,
                MetaCommand("go", Desc("execute query buffer"), {"g": Desc("execute query buffer")}),
            ),
        ],
        section_order=(Section.GENERAL, Section.HELP),
    )


@pytest.fixture
def sample_registry_data():
    """Decoded JSON registry document."""
    return {
        "commands": [
            {
                "name": "go",
                "section": "General",
                "desc": "execute query buffer",
                "aliases": {
                    "g": {"desc": "execute query buffer"},
                    "gg": {},
                },
            },
            {
                "name": "?",
                "section": "Help",
                "desc": "show help on backslash commands",
                "params": "[commands]",
            },
        ]
    }


@pytest.fixture
def sample_registry_file(tmp_path: Path, sample_registry_data):
    """Write the sample registry document to a file."""
    path = tmp_path / "registry.json"
    path.write_text(json.dumps(sample_registry_data, indent=2), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo global logging changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.disable(logging.NOTSET)
