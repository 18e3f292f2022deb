"""Bed catalog commands.

Provides the `beds` command group for listing catalog beds and showing
the volume of a single bed.
"""

from dataclasses import replace
from typing import Annotated

import typer

from soilcalc.domain import (
    ALL_BEDS,
    BedNotFoundError,
    BedShape,
    VolumeUnit,
    beds_by_shape,
    calculate_bed_volume,
    get_bed,
)
from soilcalc.infrastructure import (
    BedListFormatter,
    VolumeReportFormatter,
    format_bed_dimensions,
)

beds_app = typer.Typer(
    name="beds",
    help="Browse the predefined garden bed catalog.",
)


@beds_app.command(name="list")
def list_beds(
    shape: Annotated[
        BedShape | None,
        typer.Option("--shape", "-s", help="Only list beds of this shape"),
    ] = None,
) -> None:
    """List catalog garden beds.

    Example:
        soilcalc beds list --shape circular
    """
    beds = beds_by_shape()[shape] if shape is not None else ALL_BEDS
    typer.echo(BedListFormatter().format(beds))
    typer.echo()
    typer.echo("Use 'soilcalc beds show <id>' to see the soil volume of a bed.")


@beds_app.command(name="show")
def show_bed(
    bed_id: Annotated[str, typer.Argument(help="Catalog bed id")],
    display_unit: Annotated[
        VolumeUnit,
        typer.Option("--display-unit", "-u", help="Unit to highlight"),
    ] = VolumeUnit.CUBIC_FEET,
) -> None:
    """Show a catalog bed and its soil volume."""
    try:
        bed = get_bed(bed_id)
    except BedNotFoundError:
        typer.echo(f"Error: Garden bed not found: {bed_id}", err=True)
        typer.echo("Run 'soilcalc beds list' to see available beds.", err=True)
        raise typer.Exit(code=1)

    volume = calculate_bed_volume(bed)
    typer.echo(f"{bed.name} ({bed.id})")
    if bed.description:
        typer.echo(bed.description)
    typer.echo(f"Dimensions: {format_bed_dimensions(bed)}")
    typer.echo()
    typer.echo(VolumeReportFormatter().format(replace(volume, display_unit=display_unit)))
