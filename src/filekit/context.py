"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

The filesystem dependency is typed using the FileSystemProvider protocol
rather than a concrete implementation, so tests can inject a double.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path as SystemPath

from filekit.config import ConfigManager, FileKitConfig
from filekit.path import Path
from filekit.protocols import FileSystemProvider


def _default_filesystem() -> FileSystemProvider:
    """Create the default filesystem implementation."""
    from filekit.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for command line dependencies.

    Provides a single injection point for the configuration and the
    filesystem provider used by every CLI command.
    """

    config: FileKitConfig = field(default_factory=FileKitConfig)
    filesystem: FileSystemProvider = field(default_factory=_default_filesystem)
    config_manager: ConfigManager = field(default_factory=ConfigManager.create_default)

    def path(self, raw: str) -> Path:
        """Build a path bound to this context's filesystem."""
        return Path(raw, provider=self.filesystem)


def create_context(config_dir: SystemPath | None = None) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Args:
        config_dir: Override configuration directory (for testing).

    Returns:
        Configured AppContext.
    """
    from filekit.filesystem import RealFileSystem

    manager = (
        ConfigManager.create(config_dir) if config_dir else ConfigManager.create_default()
    )
    return AppContext(
        config=manager.load(),
        filesystem=RealFileSystem(),
        config_manager=manager,
    )
