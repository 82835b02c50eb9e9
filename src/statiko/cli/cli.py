"""CLI entrypoint: Typer app definition and command registration"""

import typer

from statiko.cli.commands import build_cmd


app = typer.Typer(name="statiko", add_completion=False, help="Markdown static site generator")

app.command(name="build")(build_cmd)


def main() -> None:
    app()
