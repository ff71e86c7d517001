"""Pytest configuration and fixtures for cman tests."""

import json
import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo global logging changes made by setup_logging()."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def sample_sheet_data():
    """Cheatsheet document with uneven command counts."""
    return {
        "headings": [
            {"title": "Files", "commands": ["ls -la", "cp a b", "mv a b"]},
            {"title": "Search", "commands": ["grep -rn x ."]},
        ]
    }


@pytest.fixture
def sheet_dir(tmp_path: Path, sample_sheet_data) -> Path:
    """Directory holding shell.json built from sample_sheet_data."""
    path = tmp_path / "shell.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(sample_sheet_data, f, indent=2)
    return tmp_path
