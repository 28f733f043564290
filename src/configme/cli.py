"""Typer commands exposed to the user."""
from __future__ import annotations

import asyncio
from typing import List, Optional

import typer
from rich.console import Console

from .config import APP_NAME_ENV
from .models import InvalidNameError
from .registry import ConfigDir, init_config

console = Console()
app = typer.Typer(help="Create and populate a per-application configuration directory.")


def _handle(ctx: typer.Context) -> ConfigDir:
    return ctx.obj["config_dir"]


@app.callback()
def main(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(
        None,
        "--name",
        envvar=APP_NAME_ENV,
        help="Application name used for the directory (defaults to the program name).",
    ),
    where: str = typer.Option("home", "--where", help="Directory placement: 'home' or 'opt'."),
    hide: bool = typer.Option(False, "--hide/--no-hide", help="Prefix the directory name with a dot."),
) -> None:
    try:
        config_dir = init_config(name=name, where=where, hide=hide)
    except InvalidNameError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    ctx.obj = {"config_dir": config_dir}


@app.command("path")
def show_path(ctx: typer.Context) -> None:
    """Print the configuration directory."""

    typer.echo(str(_handle(ctx).path))


@app.command("mkdir")
def make_dirs(
    ctx: typer.Context,
    names: List[str] = typer.Argument(..., help="Subdirectories to create"),
) -> None:
    """Create subdirectories inside the configuration directory."""

    _handle(ctx).create_subdirs(*names)


@app.command("touch")
def touch_file(ctx: typer.Context, name: str = typer.Argument(..., help="File to create")) -> None:
    """Create an empty file unless it already exists."""

    _handle(ctx).create_file(name)


@app.command("sqlite")
def make_sqlite(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Database file, relative to the configuration directory"),
) -> None:
    """Create an empty SQLite database file."""

    asyncio.run(_handle(ctx).ensure_database_file(name))


@app.command("demo")
def demo(ctx: typer.Context) -> None:
    """Create the cache and logs directories and a settings.json file."""

    config_dir = _handle(ctx)
    config_dir.create_subdirs("cache", "logs")
    config_dir.create_file("settings.json")
    console.print(f"Config directory: {config_dir.path}", soft_wrap=True, highlight=False, markup=False)


@app.command("demo-sqlite")
def demo_sqlite(ctx: typer.Context) -> None:
    """Create a db directory holding an empty app.sqlite database."""

    config_dir = _handle(ctx)
    config_dir.create_subdirs("db")
    asyncio.run(config_dir.ensure_database_file("db/app.sqlite"))
    console.print(f"Config directory: {config_dir.path}", soft_wrap=True, highlight=False, markup=False)


__all__ = ["app"]
