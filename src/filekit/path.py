"""Path value type.

A ``Path`` wraps a path string exactly as given. Nothing is normalized on
construction: two paths are equal only when their strings are equal, so
callers standardize or resolve explicitly before comparing.

Every operating-system call goes through a FileSystemProvider. A path
built without one uses the process-wide RealFileSystem, and paths derived
from it (parents, children, joins, components) keep the same provider.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from filekit.directories import DirectoryKind, DirectoryScope
from filekit.errors import (
    CopyFileFail,
    CreateFileFail,
    CreateSymlinkFail,
    DeleteFileFail,
    FileDoesNotExist,
    MoveFileFail,
)
from filekit.filesystem import RealFileSystem

if TYPE_CHECKING:
    from filekit.protocols import FileSystemProvider

__all__ = ["Path", "find_paths"]

logger = logging.getLogger(__name__)

_DEFAULT_PROVIDER = RealFileSystem()


class Path:
    """A representation of a filesystem path."""

    __slots__ = ("_raw", "_provider")

    separator = "/"

    def __init__(self, raw: str = "/", provider: FileSystemProvider | None = None) -> None:
        """Initialize a path.

        Args:
            raw: The path string, stored as is. Defaults to "/".
            provider: Filesystem provider. Defaults to the real filesystem.
        """
        if not isinstance(raw, str):
            raise TypeError(f"Path expects a str, got {type(raw).__name__}")
        self._raw = raw
        self._provider = provider

    # ------------------------------------------------------------------
    # Construction from the environment
    # ------------------------------------------------------------------

    @classmethod
    def current(cls, provider: FileSystemProvider | None = None) -> Path:
        """Get the program's current working directory.

        The working directory is process-wide state. Callers changing it from
        several threads must synchronize themselves.
        """
        fs = provider or _DEFAULT_PROVIDER
        return cls(fs.current_directory(), provider)

    @classmethod
    def set_current(cls, path: Path | str, provider: FileSystemProvider | None = None) -> None:
        """Change the program's current working directory.

        Raises:
            OSError: If the directory cannot be entered.
        """
        fs = provider or _DEFAULT_PROVIDER
        fs.set_current_directory(str(path))

    @classmethod
    def home(cls, provider: FileSystemProvider | None = None) -> Path:
        """Get the user's home directory."""
        fs = provider or _DEFAULT_PROVIDER
        return cls(fs.home_directory(), provider)

    @classmethod
    def temporary(cls, provider: FileSystemProvider | None = None) -> Path:
        """Get the user's temporary directory."""
        fs = provider or _DEFAULT_PROVIDER
        return cls(fs.temporary_directory(), provider)

    @classmethod
    def standard_directories(
        cls,
        kind: DirectoryKind,
        scope: DirectoryScope = DirectoryScope.USER,
        provider: FileSystemProvider | None = None,
    ) -> list[Path]:
        """Get every match for a well-known directory.

        Returns:
            Matching paths, empty when the platform has no such directory.
        """
        fs = provider or _DEFAULT_PROVIDER
        return [cls(p, provider) for p in fs.standard_directories(kind, scope)]

    @classmethod
    def standard_directory(
        cls,
        kind: DirectoryKind,
        scope: DirectoryScope = DirectoryScope.USER,
        provider: FileSystemProvider | None = None,
    ) -> Path | None:
        """Get the primary match for a well-known directory, or None."""
        paths = cls.standard_directories(kind, scope, provider)
        return paths[0] if paths else None

    # ------------------------------------------------------------------
    # Stored and derived values
    # ------------------------------------------------------------------

    @property
    def raw(self) -> str:
        """The stored path string."""
        return self._raw

    @property
    def provider(self) -> FileSystemProvider:
        """The filesystem provider used for OS calls."""
        return self._provider or _DEFAULT_PROVIDER

    def _derive(self, raw: str) -> Path:
        return Path(raw, self._provider)

    @property
    def components(self) -> list[Path]:
        """The components of the path, starting with "/" when absolute."""
        result = [self._derive(self.separator)] if self.is_absolute else []
        result.extend(
            self._derive(name) for name in self._raw.split(self.separator) if name
        )
        return result

    @property
    def name(self) -> str:
        """The last component of the path, or "" for an empty path."""
        components = self.components
        return components[-1].raw if components else ""

    @property
    def extension(self) -> str:
        """The text after the last "." of the last component."""
        name = self.name
        if name == self.separator or "." not in name:
            return ""
        return name.rsplit(".", 1)[1]

    @property
    def parent(self) -> Path:
        """The path with its last component removed."""
        return self._derive(self.provider.delete_last_component(self._raw))

    @property
    def standardized(self) -> Path:
        """A new path with extraneous components removed."""
        return self._derive(self.provider.standardize(self._raw))

    @property
    def resolved(self) -> Path:
        """A new path with all symlinks resolved, then standardized."""
        fs = self.provider
        return self._derive(fs.standardize(fs.resolve_symlinks(self._raw)))

    @property
    def absolute(self) -> Path:
        """A new absolute, standardized path.

        A relative path is taken relative to the current working directory.
        """
        if self.is_absolute:
            return self.standardized
        return (Path.current(self._provider) + self).standardized

    @property
    def is_absolute(self) -> bool:
        """True if the path begins with "/"."""
        return self._raw.startswith(self.separator)

    @property
    def is_relative(self) -> bool:
        """True if the path does not begin with "/"."""
        return not self.is_absolute

    @property
    def exists(self) -> bool:
        """True if something exists at the path."""
        return self.provider.exists(self._raw)

    @property
    def is_directory(self) -> bool:
        """True if the path points to a directory."""
        return self.provider.is_dir(self._raw)

    @property
    def children(self) -> list[Path]:
        """The entries of the directory at the path.

        Empty when the path cannot be listed.
        """
        try:
            names = self.provider.list_directory(self._raw)
        except OSError as e:
            logger.debug("Cannot list %s: %s", self._raw, e)
            return []
        return [self + name for name in names]

    def standardize(self) -> Path:
        """Return the standardized path."""
        return self.standardized

    def resolve(self) -> Path:
        """Return the path with symlinks resolved and standardized."""
        return self.resolved

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find_paths(self, condition: Callable[[Path], bool], depth: int | None = 0) -> list[Path]:
        """Find paths under this one that match a condition.

        See ``find_paths``.
        """
        return find_paths(self, condition, depth)

    # ------------------------------------------------------------------
    # Filesystem operations
    # ------------------------------------------------------------------

    def create_file(self) -> None:
        """Create an empty file at the path.

        Raises:
            CreateFileFail: If the file cannot be created.
        """
        try:
            self.provider.create_file(self._raw)
        except OSError as e:
            logger.debug("create_file failed for %s: %s", self._raw, e)
            raise CreateFileFail(self) from e

    def create_directory(self) -> None:
        """Create a directory at the path, with intermediate directories.

        Raises:
            CreateFileFail: If the directory cannot be created.
        """
        try:
            self.provider.create_directory(self._raw)
        except OSError as e:
            logger.debug("create_directory failed for %s: %s", self._raw, e)
            raise CreateFileFail(self) from e

    def delete_file(self) -> None:
        """Delete the file or directory at the path.

        Raises:
            DeleteFileFail: If the item cannot be deleted.
        """
        try:
            self.provider.remove(self._raw)
        except OSError as e:
            logger.debug("delete_file failed for %s: %s", self._raw, e)
            raise DeleteFileFail(self) from e

    def move_file(self, dest: Path | str) -> None:
        """Move the file at the path to ``dest``.

        An existing destination is never overwritten.

        Raises:
            FileDoesNotExist: If nothing exists at the path.
            MoveFileFail: If ``dest`` exists or the move fails.
        """
        dest = self._coerce(dest)
        if not self.exists:
            raise FileDoesNotExist(self)
        if dest.exists:
            raise MoveFileFail(self, dest)
        try:
            self.provider.move(self._raw, dest.raw)
        except OSError as e:
            logger.debug("move failed for %s -> %s: %s", self._raw, dest.raw, e)
            raise MoveFileFail(self, dest) from e

    def copy_file(self, dest: Path | str) -> None:
        """Copy the file at the path to ``dest``.

        An existing destination is never overwritten.

        Raises:
            FileDoesNotExist: If nothing exists at the path.
            CopyFileFail: If ``dest`` exists or the copy fails.
        """
        dest = self._coerce(dest)
        if not self.exists:
            raise FileDoesNotExist(self)
        if dest.exists:
            raise CopyFileFail(self, dest)
        try:
            self.provider.copy(self._raw, dest.raw)
        except OSError as e:
            logger.debug("copy failed for %s -> %s: %s", self._raw, dest.raw, e)
            raise CopyFileFail(self, dest) from e

    def symlink_to(self, dest: Path | str) -> Path:
        """Create a symbolic link at ``dest`` that points to the path.

        If ``dest`` exists and is not a directory, no link is created. If
        ``dest`` is a directory and the path is not, the link is created
        inside ``dest`` under the path's last component.

        Returns:
            The location of the created link.

        Raises:
            FileDoesNotExist: If nothing exists at the path.
            CreateSymlinkFail: If ``dest`` is an existing non-directory or
                the link cannot be created.
        """
        link = self._coerce(dest)
        if not self.exists:
            raise FileDoesNotExist(self)
        if link.exists and not link.is_directory:
            raise CreateSymlinkFail(self, link)
        if link.is_directory and not self.is_directory:
            link = link + self.components[-1]
        try:
            self.provider.create_symlink(link.raw, self._raw)
        except OSError as e:
            logger.debug("symlink failed for %s -> %s: %s", link.raw, self._raw, e)
            raise CreateSymlinkFail(self, link) from e
        return link

    def _coerce(self, other: Path | str) -> Path:
        if isinstance(other, Path):
            return other
        return self._derive(other)

    # ------------------------------------------------------------------
    # Operators and protocols
    # ------------------------------------------------------------------

    def __add__(self, other: Path | str) -> Path:
        if isinstance(other, Path):
            right = other.raw
        elif isinstance(other, str):
            right = other
        else:
            return NotImplemented
        left = self._raw
        if not left:
            return self._derive(right)
        if not right:
            return self._derive(left)
        sep = self.separator
        # Keep a root-only left side, otherwise drop its trailing separators
        left = left.rstrip(sep) or sep
        right = right.lstrip(sep)
        if left.endswith(sep) or not right:
            return self._derive(left + right)
        return self._derive(left + sep + right)

    def __radd__(self, other: str) -> Path:
        if not isinstance(other, str):
            return NotImplemented
        return Path(other, self._provider) + self

    __truediv__ = __add__
    __rtruediv__ = __radd__

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index: int) -> Path:
        """Return the path made of every component up to and including ``index``.

        Negative indices are out of range.
        """
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"Path indices must be integers, not {type(index).__name__}")
        components = self.components
        if index < 0 or index >= len(components):
            raise IndexError("Path index out of range")
        result = components[0]
        for component in components[1 : index + 1]:
            result += component
        return result

    def __iter__(self) -> Iterator[Path]:
        for index in range(len(self)):
            yield self[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other: Path) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __str__(self) -> str:
        return self._raw

    def __fspath__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw!r})"


def find_paths(
    root: Path, condition: Callable[[Path], bool], depth: int | None = 0
) -> list[Path]:
    """Find paths below ``root`` that match a condition.

    Children are visited depth-first in listing order. A matching child is
    collected and not descended into; a non-matching child is searched
    while depth remains.

    Args:
        root: Directory to search.
        condition: Predicate selecting the paths to collect.
        depth: How many levels below the direct children to descend. 0 only
            examines direct children; None searches the whole tree.

    Returns:
        The matching paths.

    Raises:
        ValueError: If depth is negative.
    """
    if depth is not None and depth < 0:
        raise ValueError(f"Search depth must be >= 0 or None, got {depth}")

    paths: list[Path] = []
    for child in root.children:
        if condition(child):
            paths.append(child)
        elif depth is None:
            paths.extend(find_paths(child, condition, None))
        elif depth != 0:
            paths.extend(find_paths(child, condition, depth - 1))
    return paths
