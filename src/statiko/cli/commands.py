"""CLI command implementations"""

from typing import Annotated

import typer

from statiko.config import Settings, load_config
from statiko.core.pipeline import copy_resources, create_dirs, run_render
from statiko.version import VERSION


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings() -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config()
    except ValueError as e:
        _fail("Invalid configuration", e)


def _plural(n: int) -> str:
    return "" if n == 1 else "s"


def build_cmd(
    version: Annotated[bool, typer.Option("--version", help="Print version and exit")] = False,
    ):
    """Render the site described by config.yaml."""
    if version:
        typer.echo(VERSION)
        raise typer.Exit()

    settings = _settings()

    try:
        create_dirs(settings)
    except OSError as e:
        _fail("Could not create output directories", e)

    # --- render ---
    try:
        result = run_render(settings)
    except Exception as e:
        _fail("Render failed", e)
    npages = len(result.pages)
    typer.echo(f":: Rendering {npages} page{_plural(npages)}")
    for idx, (src, out) in enumerate(result.pages, start=1):
        typer.echo(f"   {idx}: {src} -> {out}")
    typer.echo(f":: Found {len(result.posts)} post{_plural(len(result.posts))}")
    if result.listing:
        typer.echo(f"   Saving posts: {result.listing}")
    typer.echo(":: Rendering complete!")

    # --- resources ---
    typer.echo(":: Copying resources")
    try:
        copied = copy_resources(settings)
    except OSError as e:
        _fail("Resource copy failed", e)
    for src, dst in copied:
        typer.echo(f"   {src} -> {dst}")
    typer.echo("== Done ==")
