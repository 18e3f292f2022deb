"""Typer CLI for garden soil calculation."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from soilcalc.application import CalculatePlanCommand
from soilcalc.application.config import ConfigError, load_plan
from soilcalc.cli.commands import beds_app, display_load_error, validate_command
from soilcalc.domain import (
    CalculationError,
    CircularDimensions,
    LengthUnit,
    RectangularDimensions,
    VolumeResult,
    VolumeUnit,
    apply_fill_factor,
    bags_required,
    circular_volume,
    parse_length_unit,
    rectangular_volume,
    validate_fill_factor,
)
from soilcalc.infrastructure import (
    JsonExporter,
    SelectionReportFormatter,
    VolumeReportFormatter,
    format_volume,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

app = typer.Typer(
    name="soilcalc",
    help="Calculate how much soil your garden beds need.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register beds subcommand group
app.add_typer(beds_app, name="beds")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Calculate how much soil your garden beds need."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )


def _resolve_unit(value: str, option: str) -> LengthUnit:
    unit = parse_length_unit(value)
    if unit is None:
        choices = ", ".join(u.value for u in LengthUnit)
        typer.echo(f"Error: Unknown unit for {option}: {value} (use {choices})", err=True)
        raise typer.Exit(code=1)
    return unit


def _print_volume(volume: VolumeResult, fill: float, display_unit: VolumeUnit) -> None:
    filled = replace(apply_fill_factor(volume, fill), display_unit=display_unit)
    title = "VOLUME" if fill == 1.0 else f"VOLUME (filled to {fill:.0%})"
    typer.echo(VolumeReportFormatter().format(filled, title=title))
    typer.echo(f"Volume: {format_volume(filled, display_unit)}")


@app.command()
def rectangular(
    length: Annotated[float, typer.Option("--length", "-l", help="Bed length")],
    width: Annotated[float, typer.Option("--width", "-w", help="Bed width")],
    height: Annotated[float, typer.Option("--height", "-h", help="Soil depth")],
    unit: Annotated[
        str, typer.Option("--unit", "-u", help="Unit for length and width")
    ] = "feet",
    height_unit: Annotated[
        str | None,
        typer.Option("--height-unit", help="Unit for height (defaults to --unit)"),
    ] = None,
    display_unit: Annotated[
        VolumeUnit, typer.Option("--display-unit", help="Unit for the result")
    ] = VolumeUnit.CUBIC_FEET,
    fill: Annotated[
        float, typer.Option("--fill", "-f", help="Fill level: 0.25, 0.5, 0.75 or 1")
    ] = 1.0,
) -> None:
    """Calculate the soil volume of a rectangular bed."""
    length_width_unit = _resolve_unit(unit, "--unit")
    dimensions = RectangularDimensions(
        length=length,
        width=width,
        height=height,
        length_width_unit=length_width_unit,
        height_unit=(
            _resolve_unit(height_unit, "--height-unit")
            if height_unit
            else length_width_unit
        ),
    )
    try:
        fill = validate_fill_factor(fill)
        volume = rectangular_volume(dimensions)
    except CalculationError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    _print_volume(volume, fill, display_unit)


@app.command()
def circular(
    diameter: Annotated[float, typer.Option("--diameter", "-d", help="Bed diameter")],
    height: Annotated[float, typer.Option("--height", "-h", help="Soil depth")],
    unit: Annotated[str, typer.Option("--unit", "-u", help="Unit for diameter")] = "feet",
    height_unit: Annotated[
        str | None,
        typer.Option("--height-unit", help="Unit for height (defaults to --unit)"),
    ] = None,
    display_unit: Annotated[
        VolumeUnit, typer.Option("--display-unit", help="Unit for the result")
    ] = VolumeUnit.CUBIC_FEET,
    fill: Annotated[
        float, typer.Option("--fill", "-f", help="Fill level: 0.25, 0.5, 0.75 or 1")
    ] = 1.0,
) -> None:
    """Calculate the soil volume of a circular bed."""
    diameter_unit = _resolve_unit(unit, "--unit")
    dimensions = CircularDimensions(
        diameter=diameter,
        height=height,
        diameter_unit=diameter_unit,
        height_unit=(
            _resolve_unit(height_unit, "--height-unit") if height_unit else diameter_unit
        ),
    )
    try:
        fill = validate_fill_factor(fill)
        volume = circular_volume(dimensions)
    except CalculationError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    _print_volume(volume, fill, display_unit)


@app.command()
def bags(
    volume: Annotated[
        float, typer.Option("--volume", help="Volume to fill in cubic feet", min=0)
    ],
    bag_size: Annotated[
        float, typer.Option("--bag-size", "-b", help="Bag size in cubic feet")
    ] = 1.0,
) -> None:
    """Estimate how many bags are needed for a volume."""
    try:
        count = bags_required(volume, bag_size)
    except CalculationError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Bags required: {count}")
    typer.echo(
        f"Based on {volume:.2f} cubic feet of soil and a bag size of "
        f"{bag_size:g} cubic feet"
    )


@app.command()
def plan(
    plan_file: Annotated[Path, typer.Argument(help="Path to a JSON garden plan")],
    display_unit: Annotated[
        VolumeUnit | None,
        typer.Option("--display-unit", help="Override the plan's display unit"),
    ] = None,
    bag_size: Annotated[
        float | None,
        typer.Option("--bag-size", "-b", help="Override the plan's bag size"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
) -> None:
    """Calculate total soil volume and bags for a garden plan file."""
    if output_format not in ("text", "json"):
        typer.echo(f"Error: Unknown format: {output_format} (use text or json)", err=True)
        raise typer.Exit(code=1)

    try:
        garden_plan = load_plan(plan_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    output = CalculatePlanCommand().execute(garden_plan)

    selection = output.selection
    if display_unit is not None:
        selection = selection.with_display_unit(display_unit)
    selection = selection.with_bag_size(bag_size)
    output = replace(output, selection=selection)

    if output_format == "json":
        typer.echo(JsonExporter().export(output))
    else:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        typer.echo(SelectionReportFormatter().format(output.selection, output.cost))

    if not output.is_valid:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
