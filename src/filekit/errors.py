"""Errors raised by filesystem operations on paths.

Every mutating operation either completes or raises exactly one of the
FileKitError subclasses below. Provider exceptions are chained as the
``__cause__`` of the translated error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filekit.path import Path

__all__ = [
    "FileKitError",
    "FileDoesNotExist",
    "CreateSymlinkFail",
    "CreateFileFail",
    "DeleteFileFail",
    "MoveFileFail",
    "CopyFileFail",
]


class FileKitError(Exception):
    """Base class for path operation failures.

    Attributes:
        path: The path the operation was applied to.
        dest: The destination path for two-path operations, otherwise None.
    """

    message = "File operation failed"

    def __init__(self, path: Path | str, dest: Path | str | None = None) -> None:
        self.path = path
        self.dest = dest
        if dest is None:
            text = f"{self.message}: {path}"
        else:
            text = f"{self.message}: {path} -> {dest}"
        super().__init__(text)


class FileDoesNotExist(FileKitError):
    """A source path that must exist does not."""

    message = "File does not exist"


class CreateSymlinkFail(FileKitError):
    """The link destination already exists or the link could not be made."""

    message = "Could not create symlink"


class CreateFileFail(FileKitError):
    """A file or directory could not be created."""

    message = "Could not create file"


class DeleteFileFail(FileKitError):
    """A file or directory could not be removed."""

    message = "Could not delete file"


class MoveFileFail(FileKitError):
    """The destination already exists or the move failed."""

    message = "Could not move file"


class CopyFileFail(FileKitError):
    """The destination already exists or the copy failed."""

    message = "Could not copy file"
