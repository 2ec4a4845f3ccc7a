"""Protocol definitions for the filesystem provider.

Every operating-system call made by ``filekit.Path`` goes through an object
satisfying ``FileSystemProvider``. Designing to this interface enables:
- Testing path logic without touching the real filesystem
- Easy substitution of test doubles
- A single place where OS behavior is defined

Implementations satisfy the protocol structurally (duck typing).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from filekit.directories import DirectoryKind, DirectoryScope


@runtime_checkable
class FileSystemProvider(Protocol):
    """Protocol for filesystem operations.

    All paths are plain strings. Mutating operations raise ``OSError`` on
    failure; ``filekit.Path`` translates those into ``FileKitError``s.
    """

    def current_directory(self) -> str:
        """Get the process working directory.

        Returns:
            Absolute path of the working directory.
        """
        ...

    def set_current_directory(self, path: str) -> None:
        """Change the process working directory.

        Args:
            path: New working directory.

        Raises:
            OSError: If the directory cannot be entered.
        """
        ...

    def exists(self, path: str) -> bool:
        """Check if anything exists at a path.

        Args:
            path: Path to check.

        Returns:
            True if a file, directory or symlink exists, False otherwise.
        """
        ...

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def standardize(self, path: str) -> str:
        """Remove extraneous components without touching the filesystem.

        Args:
            path: Path to standardize.

        Returns:
            Path with ``~`` expanded and ``.``/``..``/duplicate separators collapsed.
        """
        ...

    def resolve_symlinks(self, path: str) -> str:
        """Resolve every symlink in a path.

        Args:
            path: Path to resolve.

        Returns:
            Path with symlinks replaced by their targets. A relative path is
            returned unchanged.
        """
        ...

    def delete_last_component(self, path: str) -> str:
        """Remove the last component of a path.

        Args:
            path: Path to shorten.

        Returns:
            Path without its last component.
        """
        ...

    def list_directory(self, path: str) -> list[str]:
        """List the entries of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entry names, without the directory prefix.

        Raises:
            OSError: If the directory cannot be read.
        """
        ...

    def create_file(self, path: str) -> None:
        """Create an empty file, truncating any existing file.

        Args:
            path: File to create.

        Raises:
            OSError: If the file cannot be created.
        """
        ...

    def create_directory(self, path: str) -> None:
        """Create a directory and any missing parents.

        Args:
            path: Directory to create.

        Raises:
            OSError: If the directory cannot be created.
        """
        ...

    def remove(self, path: str) -> None:
        """Remove a file, symlink or directory tree.

        Args:
            path: Item to remove.

        Raises:
            OSError: If the item cannot be removed.
        """
        ...

    def move(self, src: str, dst: str) -> None:
        """Move an item.

        Args:
            src: Item to move.
            dst: New location.

        Raises:
            OSError: If the move fails.
        """
        ...

    def copy(self, src: str, dst: str) -> None:
        """Copy a file or directory tree.

        Args:
            src: Item to copy.
            dst: Location of the copy.

        Raises:
            OSError: If the copy fails.
        """
        ...

    def create_symlink(self, link: str, target: str) -> None:
        """Create a symbolic link.

        Args:
            link: Location of the new link.
            target: Path the link points to.

        Raises:
            OSError: If the link cannot be created.
        """
        ...

    def home_directory(self) -> str:
        """Get the user's home directory."""
        ...

    def temporary_directory(self) -> str:
        """Get the user's temporary directory."""
        ...

    def standard_directories(
        self, kind: DirectoryKind, scope: DirectoryScope
    ) -> list[str]:
        """Look up a well-known directory.

        Args:
            kind: Which directory to look up.
            scope: User or system domain.

        Returns:
            Matching directories, empty if the kind does not exist on this platform.
        """
        ...
