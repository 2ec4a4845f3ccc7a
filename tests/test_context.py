"""Tests for context module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from filekit.config import ConfigManager, FileKitConfig
from filekit.context import AppContext, create_context
from filekit.filesystem import RealFileSystem


class TestAppContext:
    """Tests for AppContext dataclass."""

    def test_create_with_all_dependencies(self) -> None:
        """Test creating context with all dependencies."""
        config = FileKitConfig()
        filesystem = MagicMock()
        manager = MagicMock()
        ctx = AppContext(config=config, filesystem=filesystem, config_manager=manager)
        assert ctx.config is config
        assert ctx.filesystem is filesystem
        assert ctx.config_manager is manager

    def test_default_filesystem(self) -> None:
        """Test context creates default filesystem if not provided."""
        ctx = AppContext()
        assert isinstance(ctx.filesystem, RealFileSystem)
        assert isinstance(ctx.config_manager, ConfigManager)

    def test_path_uses_filesystem(self) -> None:
        """Test paths built by the context are bound to its filesystem."""
        filesystem = MagicMock()
        ctx = AppContext(filesystem=filesystem)
        assert ctx.path("/a").provider is filesystem


class TestCreateContext:
    """Tests for create_context factory function."""

    def test_create_context_respects_config_dir(self, temp_config_dir: Path) -> None:
        """Test create_context uses the provided configuration directory."""
        ctx = create_context(config_dir=temp_config_dir)
        assert ctx.config_manager.config_dir == temp_config_dir
        assert isinstance(ctx.filesystem, RealFileSystem)

    def test_create_context_loads_config(self, temp_config_dir: Path) -> None:
        """Test the stored configuration is loaded."""
        ConfigManager.create(temp_config_dir).save(FileKitConfig(search_depth=4))

        ctx = create_context(config_dir=temp_config_dir)

        assert ctx.config.search_depth == 4
