"""Shared test fixtures."""

from __future__ import annotations

import posixpath
from pathlib import Path as SystemPath
from unittest.mock import MagicMock

import pytest

from filekit import Path
from filekit.config import ConfigManager, FileKitConfig
from filekit.context import AppContext
from filekit.filesystem import RealFileSystem


@pytest.fixture
def temp_home(tmp_path: SystemPath, monkeypatch: pytest.MonkeyPatch) -> SystemPath:
    """Override home directory for testing."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(SystemPath, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def temp_config_dir(tmp_path: SystemPath) -> SystemPath:
    """Create a temporary configuration directory."""
    config_dir = tmp_path / ".filekit"
    config_dir.mkdir(parents=True)
    return config_dir


# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def tree(tmp_path: SystemPath) -> Path:
    """Create the directory tree root/{x, y/z} and return root."""
    root = tmp_path / "root"
    (root / "y").mkdir(parents=True)
    (root / "x").touch()
    (root / "y" / "z").touch()
    return Path(str(root))


def _tree_provider(entries: dict[str, list[str]]) -> MagicMock:
    def list_directory(path: str) -> list[str]:
        if path not in entries:
            raise NotADirectoryError(path)
        return list(entries[path])

    fs = MagicMock()
    fs.list_directory.side_effect = list_directory
    fs.is_dir.side_effect = lambda path: path in entries
    fs.exists.side_effect = lambda path: path in entries or any(
        path == posixpath.join(d, name) for d, names in entries.items() for name in names
    )
    return fs


@pytest.fixture
def make_tree_provider():
    """Build mock providers that serve a fixed directory tree.

    The returned factory takes a mapping of directory path to the names it
    contains. Every other path is treated as a file.
    """
    return _tree_provider


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystemProvider for testing.

    The mock tracks all provider calls without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.list_directory.return_value = []
    fs.current_directory.return_value = "/work"
    fs.standardize.side_effect = RealFileSystem().standardize
    fs.delete_last_component.side_effect = RealFileSystem().delete_last_component
    return fs


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def app_context(temp_config_dir: SystemPath) -> AppContext:
    """Create an AppContext backed by the real filesystem and a temp config."""
    return AppContext(
        config=FileKitConfig(confirm_delete=False),
        filesystem=RealFileSystem(),
        config_manager=ConfigManager.create(temp_config_dir),
    )
