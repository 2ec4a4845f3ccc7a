"""CLI commands using Typer."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Callable
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.logging import RichHandler
from rich.markup import escape

from filekit import __version__
from filekit.config import FileKitConfig
from filekit.console import Output
from filekit.context import create_context
from filekit.directories import DirectoryKind, DirectoryScope
from filekit.errors import FileKitError
from filekit.path import Path
from filekit.types import PathInfo

app = typer.Typer(
    name="filekit",
    help="Inspect and manipulate filesystem paths",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")

app.add_typer(config_app, name="config")

output = Output()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"filekit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log filesystem calls")
    ] = False,
) -> None:
    """Inspect and manipulate filesystem paths."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=output.console, show_path=False)],
        )


def _fail(error: FileKitError) -> typer.Exit:
    """Report a filesystem error and build the exit to raise."""
    output.show_error(escape(str(error)))
    return typer.Exit(1)


# ============================================================================
# Inspection Commands
# ============================================================================


@app.command("components")
def components(
    path: Annotated[str, typer.Argument(help="Path to split")],
    _context=None,
) -> None:
    """Show the components of a path."""
    ctx = _context or create_context()
    for component in ctx.path(path).components:
        output.console.print(component.raw, markup=False, highlight=False)


@app.command("info")
def info(
    path: Annotated[str, typer.Argument(help="Path to describe")],
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
    _context=None,
) -> None:
    """Show derived values of a path."""
    ctx = _context or create_context()
    path_info = PathInfo.from_path(ctx.path(path))
    if as_json:
        output.console.print_json(path_info.model_dump_json(by_alias=True))
    else:
        output.show_path_info(path_info)


@app.command("ls")
def ls(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    show_all: Annotated[
        bool, typer.Option("--all", "-a", help="Include hidden entries")
    ] = False,
    _context=None,
) -> None:
    """List the children of a directory."""
    ctx = _context or create_context()
    directory = ctx.path(path)
    children = directory.children
    if not (show_all or ctx.config.show_hidden):
        children = [c for c in children if not c.name.startswith(".")]
    if ctx.config.sort_entries:
        children.sort()
    output.show_paths(children, empty_message=f"{escape(directory.raw)} is empty or unreadable")


def _build_condition(
    name: str | None, ext: str | None, dirs_only: bool
) -> Callable[[Path], bool]:
    """Combine the find filters into one predicate."""

    def condition(path: Path) -> bool:
        if name is not None and not fnmatch.fnmatch(path.name, name):
            return False
        if ext is not None and path.extension != ext.lstrip("."):
            return False
        if dirs_only and not path.is_directory:
            return False
        return True

    return condition


@app.command("find")
def find(
    root: Annotated[str, typer.Argument(help="Directory to search")] = ".",
    name: Annotated[
        str | None, typer.Option("--name", "-n", help="Glob matched against entry names")
    ] = None,
    ext: Annotated[str | None, typer.Option("--ext", "-e", help="File extension")] = None,
    dirs_only: Annotated[
        bool, typer.Option("--dirs-only", help="Only match directories")
    ] = False,
    depth: Annotated[
        int | None,
        typer.Option("--depth", "-d", min=0, help="Levels to descend below direct children"),
    ] = None,
    unlimited: Annotated[
        bool, typer.Option("--unlimited", help="Search the whole tree")
    ] = False,
    _context=None,
) -> None:
    """Find entries under a directory.

    Matching directories are reported and not searched further.
    """
    ctx = _context or create_context()
    if unlimited:
        search_depth = None
    elif depth is not None:
        search_depth = depth
    else:
        search_depth = ctx.config.search_depth

    condition = _build_condition(name, ext, dirs_only)
    matches = ctx.path(root).find_paths(condition, depth=search_depth)
    if ctx.config.sort_entries:
        matches.sort()
    output.show_paths(matches, empty_message="No matching paths")


@app.command("dirs")
def dirs(
    scope: Annotated[
        DirectoryScope | None, typer.Option("--scope", "-s", help="Only show one scope")
    ] = None,
    _context=None,
) -> None:
    """Show the standard directories of this platform."""
    ctx = _context or create_context()
    scopes = [scope] if scope else list(DirectoryScope)
    rows = []
    for directory_scope in scopes:
        for kind in DirectoryKind:
            paths = Path.standard_directories(kind, directory_scope, provider=ctx.filesystem)
            rows.append((kind.value, directory_scope.value, paths))
    output.show_directories(rows)


# ============================================================================
# File Commands
# ============================================================================


@app.command("touch")
def touch(
    path: Annotated[str, typer.Argument(help="File to create")],
    _context=None,
) -> None:
    """Create an empty file."""
    ctx = _context or create_context()
    try:
        ctx.path(path).create_file()
    except FileKitError as e:
        raise _fail(e) from e
    output.show_success(f"Created {escape(path)}")


@app.command("mkdir")
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    _context=None,
) -> None:
    """Create a directory and any missing parents."""
    ctx = _context or create_context()
    try:
        ctx.path(path).create_directory()
    except FileKitError as e:
        raise _fail(e) from e
    output.show_success(f"Created {escape(path)}")


@app.command("rm")
def rm(
    path: Annotated[str, typer.Argument(help="File or directory to delete")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    _context=None,
) -> None:
    """Delete a file or directory tree."""
    ctx = _context or create_context()
    target = ctx.path(path)
    if not yes and ctx.config.confirm_delete:
        kind = "directory" if target.is_directory else "file"
        if not output.confirm(f"Delete {kind} {escape(path)}?"):
            output.show_warning("Cancelled")
            raise typer.Exit()
    try:
        target.delete_file()
    except FileKitError as e:
        raise _fail(e) from e
    output.show_success(f"Deleted {escape(path)}")


@app.command("mv")
def mv(
    source: Annotated[str, typer.Argument(help="Item to move")],
    dest: Annotated[str, typer.Argument(help="New location, must not exist")],
    _context=None,
) -> None:
    """Move a file or directory."""
    ctx = _context or create_context()
    try:
        ctx.path(source).move_file(ctx.path(dest))
    except FileKitError as e:
        raise _fail(e) from e
    output.show_success(f"Moved {escape(source)} to {escape(dest)}")


@app.command("cp")
def cp(
    source: Annotated[str, typer.Argument(help="Item to copy")],
    dest: Annotated[str, typer.Argument(help="Location of the copy, must not exist")],
    _context=None,
) -> None:
    """Copy a file or directory tree."""
    ctx = _context or create_context()
    try:
        ctx.path(source).copy_file(ctx.path(dest))
    except FileKitError as e:
        raise _fail(e) from e
    output.show_success(f"Copied {escape(source)} to {escape(dest)}")


@app.command("ln")
def ln(
    source: Annotated[str, typer.Argument(help="Existing item the link points to")],
    dest: Annotated[str, typer.Argument(help="Link location or existing directory")],
    _context=None,
) -> None:
    """Create a symbolic link to an existing item."""
    ctx = _context or create_context()
    try:
        link = ctx.path(source).symlink_to(ctx.path(dest))
    except FileKitError as e:
        raise _fail(e) from e
    output.show_success(f"Linked {escape(link.raw)} -> {escape(source)}")


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or create_context()
    output.console.print("\n[bold]Configuration[/bold]")
    output.console.print(f"  Config file: {ctx.config_manager.config_file}")
    for key, value in ctx.config.model_dump(by_alias=True).items():
        output.console.print(f"  {key}: {value}")


def _parse_config_value(value: str) -> str | None:
    """Map the spellings of "no value" to None."""
    if value.lower() in ("none", "null", "unlimited"):
        return None
    return value


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Setting name, e.g. searchDepth")],
    value: Annotated[str, typer.Argument(help="New value")],
    _context=None,
) -> None:
    """Change a configuration value."""
    ctx = _context or create_context()
    data = ctx.config.model_dump(by_alias=True)
    if key not in data or key == "version":
        output.show_error(f"Unknown setting '{escape(key)}'")
        raise typer.Exit(1)

    data[key] = _parse_config_value(value)
    try:
        config = FileKitConfig.model_validate(data)
    except ValidationError as e:
        output.show_error(f"Invalid value for {escape(key)}: {escape(value)}")
        raise typer.Exit(1) from e

    ctx.config_manager.save(config)
    ctx.config = config
    output.show_success(f"Set {escape(key)} = {escape(value)}")


if __name__ == "__main__":
    app()
