"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .appctx import AppContext
from .errors import ProjectNotFoundError, ScenesInBuildError, SettingsError
from .settings.manager import SettingsManager
from .utils.console_logger import ensure_console_logger

app = typer.Typer(help="Manage the ordered list of scenes included in the build")
console = Console(highlight=False)


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ProjectNotFoundError, SettingsError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except ScenesInBuildError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(
    ctx: typer.Context,
    project: Optional[Path] = typer.Option(
        None, "--project", "-p", help="Project directory (defaults to the remembered one or the CWD)"
    ),
    store: Optional[Path] = typer.Option(
        None, "--store", help="Build list JSON file (defaults to ProjectSettings/scenes_in_build.json)"
    ),
    settings: Optional[Path] = typer.Option(None, "--settings", help="Alternative settings.json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    ensure_console_logger(
        logging.getLogger("scenes_in_build"),
        "scenes_in_build.console",
        level=logging.DEBUG if verbose else logging.WARNING,
    )
    ctx.obj = {"project": project, "store": store, "settings": settings, "verbose": verbose}


def _open_context(ctx: typer.Context) -> tuple[AppContext, list[str]]:
    options = ctx.obj or {}
    manager = SettingsManager(options.get("settings"))
    manager.load()
    context = AppContext(
        project_root=options.get("project"),
        store_path=options.get("store"),
        settings=manager,
    )
    errors: list[str] = []
    context.viewmodel.error_occurred.connect(errors.append)
    context.viewmodel.refresh()
    if errors:
        raise typer.Exit(_report(errors))
    return context, errors


def _report(errors: list[str]) -> int:
    for message in errors:
        typer.echo(f"Error: {message}", err=True)
    return 1 if errors else 0


def _print_footer(context: AppContext) -> None:
    console.print(context.viewmodel.summary.value.footer_text, style="dim")


@app.command("list")
@_handle_errors
def list_scenes(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive name/path filter"),
    build_only: bool = typer.Option(False, "--build-only", help="Only show scenes in the build"),
) -> None:
    """Print every scene with its build index."""

    context, _ = _open_context(ctx)
    vm = context.viewmodel
    vm.set_search_text(search)

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", width=4)
    table.add_column("In Build", justify="center")
    table.add_column("Scene")
    table.add_column("Directory", style="dim")
    for entry in vm.visible.value:
        if build_only and not entry.is_in_build:
            continue
        table.add_row(
            str(entry.build_index) if entry.is_in_build else "-",
            "[green]✓[/green]" if entry.is_in_build else "",
            entry.file_name,
            entry.directory,
        )
    console.print(table)
    _print_footer(context)


@app.command()
@_handle_errors
def add(ctx: typer.Context, scene: str = typer.Argument(..., help="Project-relative scene path")) -> None:
    """Append a scene to the end of the build order."""

    _set_membership(ctx, scene, True)


@app.command()
@_handle_errors
def remove(ctx: typer.Context, scene: str = typer.Argument(..., help="Project-relative scene path")) -> None:
    """Remove a scene from the build order."""

    _set_membership(ctx, scene, False)


def _set_membership(ctx: typer.Context, scene: str, value: bool) -> None:
    context, errors = _open_context(ctx)
    vm = context.viewmodel
    entry = vm.entry(scene)
    if entry is None:
        typer.echo(f"Error: unknown scene {scene}", err=True)
        raise typer.Exit(1)
    if not vm.set_membership(scene, value):
        if errors:
            raise typer.Exit(_report(errors))
        state = "already in" if value else "not in"
        console.print(f"[yellow]{scene} is {state} the build")
        return
    updated = vm.entry(scene)
    if updated is not None and updated.is_in_build:
        console.print(f"[green]Added {scene} at index {updated.build_index}")
    else:
        console.print(f"[green]Removed {scene}")
    _print_footer(context)


@app.command()
@_handle_errors
def move(
    ctx: typer.Context,
    from_index: int = typer.Argument(..., help="Current build index of the scene"),
    to_index: int = typer.Argument(..., help="Gap to insert into (0 = first, count = last)"),
) -> None:
    """Move a build scene; the target is clamped into the valid range."""

    context, errors = _open_context(ctx)
    vm = context.viewmodel
    count = vm.collection.value.build_count
    if from_index < 0 or from_index >= count:
        typer.echo(f"Error: index {from_index} is outside 0..{count - 1}", err=True)
        raise typer.Exit(1)
    if not vm.move_scene(from_index, to_index):
        if errors:
            raise typer.Exit(_report(errors))
        console.print("[yellow]Build order unchanged")
        return
    for index, path in enumerate(vm.collection.value.build_paths()):
        console.print(f"{index:>3}  {path}")


@app.command()
@_handle_errors
def gui(ctx: typer.Context) -> None:
    """Open the interactive editor window."""

    from .gui.main import main as gui_main

    options = ctx.obj or {}
    argv = ["scenes-in-build"]
    if options.get("project") is not None:
        argv.append(str(options["project"]))
    raise typer.Exit(gui_main(argv, verbose=bool(options.get("verbose"))))


if __name__ == "__main__":  # pragma: no cover - manual launch
    app()
