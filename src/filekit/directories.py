"""Well-known user and system directories.

Each platform exposes a different set of standard locations. Kinds that do
not exist on a platform resolve to an empty list instead of being left
undefined, so every platform shares one interface.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

__all__ = ["DirectoryKind", "DirectoryScope", "standard_directories"]


class DirectoryKind(str, Enum):
    """Named standard directories."""

    CACHES = "caches"
    APPLICATIONS = "applications"
    APPLICATION_SUPPORT = "application-support"
    DESKTOP = "desktop"
    DOCUMENTS = "documents"
    DOWNLOADS = "downloads"
    LIBRARY = "library"
    MOVIES = "movies"
    MUSIC = "music"
    PICTURES = "pictures"
    CORE_SERVICES = "core-services"


class DirectoryScope(str, Enum):
    """Domain a standard directory belongs to."""

    USER = "user"
    SYSTEM = "system"


# Folders found directly under the home directory on desktop platforms
_HOME_FOLDERS = {
    DirectoryKind.DESKTOP: "Desktop",
    DirectoryKind.DOCUMENTS: "Documents",
    DirectoryKind.DOWNLOADS: "Downloads",
    DirectoryKind.MUSIC: "Music",
    DirectoryKind.PICTURES: "Pictures",
}


def _darwin(kind: DirectoryKind, scope: DirectoryScope, home: Path) -> list[Path]:
    if scope is DirectoryScope.USER:
        library = home / "Library"
        user = {
            DirectoryKind.CACHES: library / "Caches",
            DirectoryKind.APPLICATIONS: home / "Applications",
            DirectoryKind.APPLICATION_SUPPORT: library / "Application Support",
            DirectoryKind.LIBRARY: library,
            DirectoryKind.MOVIES: home / "Movies",
        }
        user.update({k: home / name for k, name in _HOME_FOLDERS.items()})
        return [user[kind]] if kind in user else []

    system = {
        DirectoryKind.CACHES: Path("/Library/Caches"),
        DirectoryKind.APPLICATIONS: Path("/Applications"),
        DirectoryKind.APPLICATION_SUPPORT: Path("/Library/Application Support"),
        DirectoryKind.LIBRARY: Path("/Library"),
        DirectoryKind.CORE_SERVICES: Path("/System/Library/CoreServices"),
    }
    return [system[kind]] if kind in system else []


def _windows(
    kind: DirectoryKind, scope: DirectoryScope, home: Path, environ: Mapping[str, str]
) -> list[Path]:
    if scope is DirectoryScope.USER:
        local = Path(environ.get("LOCALAPPDATA") or home / "AppData" / "Local")
        user = {
            DirectoryKind.CACHES: local,
            DirectoryKind.APPLICATION_SUPPORT: Path(
                environ.get("APPDATA") or home / "AppData" / "Roaming"
            ),
            DirectoryKind.MOVIES: home / "Videos",
        }
        user.update({k: home / name for k, name in _HOME_FOLDERS.items()})
        return [user[kind]] if kind in user else []

    system = {
        DirectoryKind.APPLICATIONS: Path(
            environ.get("PROGRAMFILES") or "C:/Program Files"
        ),
        DirectoryKind.APPLICATION_SUPPORT: Path(
            environ.get("PROGRAMDATA") or "C:/ProgramData"
        ),
    }
    return [system[kind]] if kind in system else []


def _xdg(
    kind: DirectoryKind, scope: DirectoryScope, home: Path, environ: Mapping[str, str]
) -> list[Path]:
    if scope is DirectoryScope.USER:
        data_home = Path(environ.get("XDG_DATA_HOME") or home / ".local" / "share")
        user = {
            DirectoryKind.CACHES: Path(environ.get("XDG_CACHE_HOME") or home / ".cache"),
            DirectoryKind.APPLICATIONS: data_home / "applications",
            DirectoryKind.APPLICATION_SUPPORT: data_home,
            DirectoryKind.MOVIES: home / "Videos",
        }
        user.update({k: home / name for k, name in _HOME_FOLDERS.items()})
        return [user[kind]] if kind in user else []

    data_dirs = [
        Path(d)
        for d in (environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share").split(":")
        if d
    ]
    if kind is DirectoryKind.CACHES:
        return [Path("/var/cache")]
    if kind is DirectoryKind.APPLICATIONS:
        return [d / "applications" for d in data_dirs]
    if kind is DirectoryKind.APPLICATION_SUPPORT:
        return data_dirs
    return []


def standard_directories(
    kind: DirectoryKind,
    scope: DirectoryScope = DirectoryScope.USER,
    platform: str | None = None,
    home: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Look up a well-known directory for a platform.

    Args:
        kind: Which directory to look up.
        scope: User or system domain.
        platform: ``sys.platform`` style name. Defaults to the running platform.
        home: Home directory to build user paths from. Defaults to ``Path.home()``.
        environ: Environment to read overrides from. Defaults to ``os.environ``.

    Returns:
        Matching directory paths, most specific first. Empty if the kind has
        no counterpart on the platform.
    """
    platform = platform or sys.platform
    home_dir = Path(home) if home is not None else Path.home()
    env = os.environ if environ is None else environ

    if platform == "darwin":
        paths = _darwin(kind, scope, home_dir)
    elif platform == "win32":
        paths = _windows(kind, scope, home_dir, env)
    else:
        paths = _xdg(kind, scope, home_dir, env)
    return [str(p) for p in paths]
