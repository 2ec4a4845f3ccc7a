"""Shared data types for filekit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from filekit.path import Path

__all__ = ["PathInfo"]


class PathInfo(BaseModel):
    """Snapshot of a path's derived values, as shown by ``filekit info``."""

    model_config = ConfigDict(populate_by_name=True)

    raw: str
    components: list[str] = Field(default_factory=list)
    parent: str
    extension: str = ""
    standardized: str
    resolved: str
    absolute: str
    is_absolute: bool = Field(alias="isAbsolute")
    exists: bool
    is_directory: bool = Field(alias="isDirectory")

    @classmethod
    def from_path(cls, path: Path) -> PathInfo:
        """Collect the derived values of a path.

        Args:
            path: Path to describe.

        Returns:
            PathInfo for the path.
        """
        return cls(
            raw=path.raw,
            components=[c.raw for c in path.components],
            parent=path.parent.raw,
            extension=path.extension,
            standardized=path.standardized.raw,
            resolved=path.resolved.raw,
            absolute=path.absolute.raw,
            is_absolute=path.is_absolute,
            exists=path.exists,
            is_directory=path.is_directory,
        )
