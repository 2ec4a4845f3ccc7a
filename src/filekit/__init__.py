"""Filesystem path value type with thin OS operation wrappers."""

__version__ = "0.1.0"

# Export the path type, its errors and the provider interface
from filekit.directories import DirectoryKind, DirectoryScope
from filekit.errors import (
    CopyFileFail,
    CreateFileFail,
    CreateSymlinkFail,
    DeleteFileFail,
    FileDoesNotExist,
    FileKitError,
    MoveFileFail,
)
from filekit.filesystem import RealFileSystem
from filekit.path import Path, find_paths
from filekit.protocols import FileSystemProvider

__all__ = [
    "__version__",
    "CopyFileFail",
    "CreateFileFail",
    "CreateSymlinkFail",
    "DeleteFileFail",
    "DirectoryKind",
    "DirectoryScope",
    "FileDoesNotExist",
    "FileKitError",
    "FileSystemProvider",
    "MoveFileFail",
    "Path",
    "RealFileSystem",
    "find_paths",
]
