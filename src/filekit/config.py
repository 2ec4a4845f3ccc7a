"""Configuration for the filekit command line."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Default configuration location, overridable with FILEKIT_CONFIG_DIR
CONFIG_DIR = Path.home() / ".filekit"

CONFIG_DIR_ENV = "FILEKIT_CONFIG_DIR"


class FileKitConfig(BaseModel):
    """User preferences for the command line."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = "1.0"
    search_depth: int | None = Field(default=0, alias="searchDepth", ge=0)
    show_hidden: bool = Field(default=False, alias="showHidden")
    sort_entries: bool = Field(default=True, alias="sortEntries")
    confirm_delete: bool = Field(default=True, alias="confirmDelete")


class ConfigManager:
    """Loads and saves the configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Directory holding config.json. Defaults to
                $FILEKIT_CONFIG_DIR, then ~/.filekit.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        env_dir = os.environ.get(CONFIG_DIR_ENV)
        self.config_dir = config_dir or (Path(env_dir) if env_dir else CONFIG_DIR)
        self.config_file = self.config_dir / "config.json"

    @classmethod
    def create(cls, config_dir: Path) -> ConfigManager:
        """Create a config manager with a custom directory.

        Args:
            config_dir: Directory for the configuration file.

        Returns:
            Configured ConfigManager instance.
        """
        return cls(config_dir=config_dir)

    @classmethod
    def create_default(cls) -> ConfigManager:
        """Create a config manager with the default directory."""
        return cls()

    def ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> FileKitConfig:
        """Load configuration from disk.

        Returns:
            Stored configuration, or defaults when no file exists.

        Raises:
            ValueError: If the file is not valid JSON or fails validation.
        """
        if not self.config_file.exists():
            return FileKitConfig()

        data = json.loads(self.config_file.read_text())
        return FileKitConfig.model_validate(data)

    def save(self, config: FileKitConfig) -> None:
        """Save configuration to disk.

        Args:
            config: Configuration to save.
        """
        self.ensure_config_dir()
        data = config.model_dump(by_alias=True)
        self.config_file.write_text(json.dumps(data, indent=2))
