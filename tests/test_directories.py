"""Tests for standard directory lookup."""

from __future__ import annotations

from pathlib import Path as SystemPath
from unittest.mock import MagicMock

import pytest

from filekit import Path
from filekit.directories import DirectoryKind, DirectoryScope, standard_directories

HOME = "/home/me"


def lookup(kind: DirectoryKind, scope: DirectoryScope, platform: str, environ=None) -> list[str]:
    """Look up a directory with a fixed home and environment."""
    return standard_directories(kind, scope, platform=platform, home=HOME, environ=environ or {})


class TestDarwin:
    """Tests for macOS directories."""

    def test_user_directories(self) -> None:
        """Test user directories live under the home Library."""
        assert lookup(DirectoryKind.CACHES, DirectoryScope.USER, "darwin") == [
            "/home/me/Library/Caches"
        ]
        assert lookup(DirectoryKind.MOVIES, DirectoryScope.USER, "darwin") == ["/home/me/Movies"]

    def test_system_directories(self) -> None:
        """Test system directories are absolute system locations."""
        assert lookup(DirectoryKind.APPLICATIONS, DirectoryScope.SYSTEM, "darwin") == [
            "/Applications"
        ]
        assert lookup(DirectoryKind.CORE_SERVICES, DirectoryScope.SYSTEM, "darwin") == [
            "/System/Library/CoreServices"
        ]

    def test_user_core_services_unavailable(self) -> None:
        """Test kinds without a user counterpart are empty."""
        assert lookup(DirectoryKind.CORE_SERVICES, DirectoryScope.USER, "darwin") == []


class TestLinux:
    """Tests for XDG based directories."""

    def test_defaults(self) -> None:
        """Test XDG defaults without environment overrides."""
        assert lookup(DirectoryKind.CACHES, DirectoryScope.USER, "linux") == ["/home/me/.cache"]
        assert lookup(DirectoryKind.APPLICATION_SUPPORT, DirectoryScope.USER, "linux") == [
            "/home/me/.local/share"
        ]
        assert lookup(DirectoryKind.MOVIES, DirectoryScope.USER, "linux") == ["/home/me/Videos"]

    def test_environment_overrides(self) -> None:
        """Test XDG variables take precedence."""
        env = {"XDG_CACHE_HOME": "/fast/cache", "XDG_DATA_DIRS": "/opt/share:/usr/share"}
        assert lookup(DirectoryKind.CACHES, DirectoryScope.USER, "linux", env) == ["/fast/cache"]
        assert lookup(DirectoryKind.APPLICATIONS, DirectoryScope.SYSTEM, "linux", env) == [
            "/opt/share/applications",
            "/usr/share/applications",
        ]

    @pytest.mark.parametrize(
        "kind", [DirectoryKind.LIBRARY, DirectoryKind.CORE_SERVICES]
    )
    def test_unavailable(self, kind: DirectoryKind) -> None:
        """Test macOS-only kinds are empty."""
        assert lookup(kind, DirectoryScope.USER, "linux") == []
        assert lookup(kind, DirectoryScope.SYSTEM, "linux") == []


class TestWindows:
    """Tests for Windows directories."""

    def test_app_data(self) -> None:
        """Test application data follows the environment."""
        env = {"APPDATA": "C:/Users/me/AppData/Roaming"}
        assert lookup(DirectoryKind.APPLICATION_SUPPORT, DirectoryScope.USER, "win32", env) == [
            "C:/Users/me/AppData/Roaming"
        ]

    def test_program_files_default(self) -> None:
        """Test the system applications default."""
        assert lookup(DirectoryKind.APPLICATIONS, DirectoryScope.SYSTEM, "win32") == [
            "C:/Program Files"
        ]

    def test_library_unavailable(self) -> None:
        """Test kinds without a Windows counterpart are empty."""
        assert lookup(DirectoryKind.LIBRARY, DirectoryScope.USER, "win32") == []


class TestEveryPlatform:
    """Tests shared by all platforms."""

    @pytest.mark.parametrize("platform", ["darwin", "linux", "win32", "freebsd"])
    @pytest.mark.parametrize("kind", list(DirectoryKind))
    @pytest.mark.parametrize("scope", list(DirectoryScope))
    def test_always_a_list(self, platform: str, kind: DirectoryKind, scope: DirectoryScope) -> None:
        """Test every combination answers with a list of strings."""
        result = lookup(kind, scope, platform)
        assert isinstance(result, list)
        assert all(isinstance(p, str) for p in result)

    @pytest.mark.parametrize("platform", ["darwin", "linux", "win32"])
    def test_documents_everywhere(self, platform: str) -> None:
        """Test the documents folder exists on every desktop platform."""
        assert lookup(DirectoryKind.DOCUMENTS, DirectoryScope.USER, platform) == [
            str(SystemPath(HOME) / "Documents")
        ]


class TestPathLookup:
    """Tests for the Path lookup helpers."""

    def test_standard_directory_first_match(self) -> None:
        """Test the first provider result is returned."""
        fs = MagicMock()
        fs.standard_directories.return_value = ["/a", "/b"]

        assert Path.standard_directory(DirectoryKind.CACHES, provider=fs) == Path("/a")
        assert Path.standard_directories(DirectoryKind.CACHES, provider=fs) == [
            Path("/a"),
            Path("/b"),
        ]
        fs.standard_directories.assert_called_with(DirectoryKind.CACHES, DirectoryScope.USER)

    def test_standard_directory_absent(self) -> None:
        """Test a missing directory is None."""
        fs = MagicMock()
        fs.standard_directories.return_value = []

        assert Path.standard_directory(DirectoryKind.LIBRARY, DirectoryScope.SYSTEM, fs) is None
