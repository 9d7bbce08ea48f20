"""Build and summary commands.

`build` writes the generated assembly as JSON; `summary` prints a short
part count for a configuration.
"""

from pathlib import Path
from typing import Annotated

import typer

from cabineato.application import AssemblyBuildError, build_assembly, summarize_assembly
from cabineato.application.config import ConfigError, load_config
from cabineato.application.units import format_as_inches
from cabineato.cli.commands.validate import display_load_error
from cabineato.domain.value_objects import Assembly
from cabineato.infrastructure import AssemblyJsonExporter


def _load_and_build(config_file: Path) -> Assembly:
    """Load a configuration file and build it, exiting with code 1 on failure."""
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    try:
        return build_assembly(config)
    except AssemblyBuildError as e:
        typer.echo("Errors:", err=True)
        for message in e.errors:
            typer.echo(f"  {message}", err=True)
        raise typer.Exit(code=1)


def build_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the assembly JSON to this file"),
    ] = None,
    reliefs: Annotated[
        bool,
        typer.Option("--reliefs", help="Include dogbone reliefs for slots and notches"),
    ] = False,
) -> None:
    """Generate every part of a cabinet and output it as JSON.

    Example:
        cabineato build base-cabinet.json -o base-cabinet.assembly.json
    """
    assembly = _load_and_build(config_file)
    exporter = AssemblyJsonExporter(include_reliefs=reliefs)

    if output_file is not None:
        exporter.export(assembly, output_file)
        typer.echo(f"Wrote {len(assembly.components)} components to {output_file}")
    else:
        typer.echo(exporter.export_string(assembly))


def summary_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    inches: Annotated[
        bool,
        typer.Option("--inches", help="Show dimensions in inches"),
    ] = False,
) -> None:
    """Show overall dimensions and part counts for a cabinet."""
    assembly = _load_and_build(config_file)
    summary = summarize_assembly(assembly)
    bounds = assembly.config.global_bounds
    interior = assembly.interior_bounds

    def fmt(mm: float) -> str:
        return format_as_inches(mm) if inches else f"{mm:g}mm"

    typer.echo(f"Cabinet:  {fmt(bounds.w)} x {fmt(bounds.h)} x {fmt(bounds.d)}")
    typer.echo(f"Interior: {fmt(interior.w)} x {fmt(interior.h)} x {fmt(interior.d)}")
    typer.echo()
    typer.echo("Components:")
    for role, count in summary.by_role.items():
        typer.echo(f"  {role.value:<20} {count}")
    typer.echo()
    typer.echo(
        f"Total: {summary.total_components} components, "
        f"{summary.feature_count} features"
    )
