"""Typer CLI for cabinet assembly generation."""

import logging
from typing import Annotated

import typer

from cabineato.cli.commands import build_command, summary_command, validate_command

app = typer.Typer(
    name="cabineato",
    help="Generate CNC-ready cabinet parts from an assembly configuration.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log generation details"),
    ] = False,
) -> None:
    """Generate CNC-ready cabinet parts from an assembly configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="validate")(validate_command)
app.command(name="build")(build_command)
app.command(name="summary")(summary_command)


if __name__ == "__main__":
    app()
