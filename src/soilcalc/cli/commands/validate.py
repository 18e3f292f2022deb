"""Validate command for checking garden plan files."""

from pathlib import Path
from typing import Annotated

import typer

from soilcalc.application.commands import CalculatePlanCommand
from soilcalc.application.config import ConfigError, load_plan


def display_load_error(error: ConfigError) -> None:
    """Print a plan loading error to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def validate_command(
    plan_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON garden plan to validate"),
    ],
) -> None:
    """Validate a garden plan file.

    Checks JSON syntax, the plan schema, and that every bed can be
    calculated (known catalog ids, positive dimensions within limits).

    Example:
        soilcalc validate my-garden.json
    """
    typer.echo(f"Validating {plan_file}...")

    try:
        plan = load_plan(plan_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    output = CalculatePlanCommand().execute(plan)
    if not output.is_valid:
        typer.echo("Errors:", err=True)
        for error in output.errors:
            typer.echo(f"  {error}", err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Plan is valid ({len(plan.beds)} bed item(s)).")
