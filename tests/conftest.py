"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from fixture_tree.filesystem import RealFileSystem


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Create an empty root directory for a tree."""
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def filesystem() -> RealFileSystem:
    """Real filesystem backend."""
    return RealFileSystem()


# ============================================================================
# Mock StorageBackend Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock StorageBackend for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.read_text.return_value = ""
    return fs


# ============================================================================
# Sample Descriptor Fixtures
# ============================================================================


@pytest.fixture
def sample_tree() -> dict[str, Any]:
    """Sample nested descriptor with literal and producer data."""
    return {
        "file1": {"type": "file"},
        "file2": {"type": "file", "data": "File 2 test"},
        "dir1": {"type": "dir"},
        "dir2": {
            "type": "dir",
            "children": {
                "file1": {"type": "file"},
                "file2": {"type": "file", "data": lambda: "Dir 2\nFile 2 test"},
                "dir1": {"type": "dir"},
                "dir2": {
                    "type": "dir",
                    "children": {
                        "file1": {"type": "file", "data": "Dir 2\nDir 2\nFile 1 test"},
                        "file2": {
                            "type": "file",
                            "data": lambda: "Dir 2\nDir 2\nFile 2 test",
                        },
                    },
                },
            },
        },
    }


@pytest.fixture
def sample_yaml_content() -> str:
    """Sample YAML descriptor file content."""
    return """config.json:
  type: file
  data: "{}"
logs:
  type: dir
  children:
    app.log:
      type: file
      skip: true
"""
