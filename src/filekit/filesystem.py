"""Filesystem provider backed by the operating system.

This module provides the production implementation of the
FileSystemProvider protocol. RealFileSystem wraps ``os``, ``os.path`` and
``shutil`` operations; paths use ``/`` as the separator.
"""

from __future__ import annotations

import os
import posixpath
import shutil
import tempfile

from filekit.directories import DirectoryKind, DirectoryScope, standard_directories


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os and shutil operations.
    Satisfies the FileSystemProvider protocol structurally.
    """

    def current_directory(self) -> str:
        """Get the process working directory."""
        return os.getcwd()

    def set_current_directory(self, path: str) -> None:
        """Change the process working directory."""
        os.chdir(path)

    def exists(self, path: str) -> bool:
        """Check if a path exists, counting broken symlinks."""
        return os.path.lexists(path)

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def standardize(self, path: str) -> str:
        """Expand ``~`` and collapse redundant components."""
        if not path:
            return path
        standardized = posixpath.normpath(os.path.expanduser(path))
        if standardized.startswith("//"):
            # normpath keeps exactly two leading separators
            standardized = standardized[1:]
        return standardized

    def resolve_symlinks(self, path: str) -> str:
        """Resolve every symlink in an absolute path.

        Relative paths are returned as given, so they stay relative.
        """
        expanded = os.path.expanduser(path)
        if not expanded.startswith("/"):
            return path
        return os.path.realpath(expanded)

    def delete_last_component(self, path: str) -> str:
        """Remove the last component of a path."""
        stripped = path.rstrip("/")
        if not stripped:
            # Empty stays empty, any run of separators is the root
            return "/" if path else ""
        head = posixpath.dirname(stripped)
        return head.rstrip("/") or ("/" if head else "")

    def list_directory(self, path: str) -> list[str]:
        """List the entry names of a directory."""
        return os.listdir(path)

    def create_file(self, path: str) -> None:
        """Create an empty file, truncating an existing one."""
        with open(path, "wb"):
            pass

    def create_directory(self, path: str) -> None:
        """Create a directory and its parents."""
        os.makedirs(path, exist_ok=True)

    def remove(self, path: str) -> None:
        """Remove a file, a symlink, or a directory tree."""
        if os.path.islink(path) or not os.path.isdir(path):
            os.remove(path)
        else:
            shutil.rmtree(path)

    def move(self, src: str, dst: str) -> None:
        """Move a file or directory."""
        shutil.move(src, dst)

    def copy(self, src: str, dst: str) -> None:
        """Copy a file or a directory tree, keeping symlinks as links."""
        if os.path.isdir(src) and not os.path.islink(src):
            shutil.copytree(src, dst, symlinks=True)
        else:
            shutil.copy2(src, dst, follow_symlinks=False)

    def create_symlink(self, link: str, target: str) -> None:
        """Create a symbolic link at ``link`` pointing to ``target``."""
        os.symlink(target, link)

    def home_directory(self) -> str:
        """Get the user's home directory."""
        return os.path.expanduser("~")

    def temporary_directory(self) -> str:
        """Get the temporary directory."""
        return tempfile.gettempdir()

    def standard_directories(
        self, kind: DirectoryKind, scope: DirectoryScope
    ) -> list[str]:
        """Look up a well-known directory for the running platform."""
        return standard_directories(kind, scope, home=self.home_directory())
