"""Output formatters for volumes, beds and selections."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from soilcalc.domain import (
    FILL_FACTOR_LABELS,
    BedDefinition,
    CircularDimensions,
    RectangularDimensions,
    VolumeResult,
    VolumeUnit,
    unit_abbreviation,
)

if TYPE_CHECKING:
    from soilcalc.application.dtos import PlanOutput
    from soilcalc.domain import Selection


def format_number(value: float) -> str:
    """Render a rounded value without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(round(float(value), 2))


def format_volume(volume: VolumeResult | None, unit: VolumeUnit | str) -> str:
    """Format ``volume`` in ``unit``, e.g. ``12.57 ft³``.

    A missing volume formats as ``0 ft³``; an unknown unit falls back to
    cubic feet.
    """
    if volume is None:
        return f"0 {VolumeUnit.CUBIC_FEET.symbol}"
    try:
        unit = VolumeUnit(unit)
    except ValueError:
        unit = VolumeUnit.CUBIC_FEET
    return f"{format_number(volume.value_in(unit))} {unit.symbol}"


def format_bed_dimensions(bed: BedDefinition) -> str:
    """Render bed dimensions, e.g. ``8ft × 4ft × 1ft`` or ``3ft diameter × 12in``."""
    dims = bed.dimensions
    if isinstance(dims, RectangularDimensions):
        lw = unit_abbreviation(dims.length_width_unit)
        return (
            f"{dims.length:g}{lw} × {dims.width:g}{lw} × "
            f"{dims.height:g}{unit_abbreviation(dims.height_unit)}"
        )
    if isinstance(dims, CircularDimensions):
        return (
            f"{dims.diameter:g}{unit_abbreviation(dims.diameter_unit)} diameter × "
            f"{dims.height:g}{unit_abbreviation(dims.height_unit)}"
        )
    return ""


def fill_factor_label(fill_factor: float) -> str:
    return FILL_FACTOR_LABELS.get(fill_factor, f"{fill_factor:.0%}")


class VolumeReportFormatter:
    """Formats a single volume result in every unit."""

    def format(self, volume: VolumeResult, title: str = "VOLUME") -> str:
        lines = [
            title,
            "=" * 40,
        ]
        for unit in VolumeUnit:
            marker = "*" if unit == volume.display_unit else " "
            lines.append(
                f"{marker} {unit.value.replace('_', ' '):<14} "
                f"{format_volume(volume, unit):>20}"
            )
        lines.append("=" * 40)
        return "\n".join(lines)


class BedListFormatter:
    """Formats catalog beds as a table."""

    def format(self, beds: list[BedDefinition] | tuple[BedDefinition, ...]) -> str:
        if not beds:
            return "No garden beds."

        id_width = max(len(bed.id) for bed in beds)
        name_width = max(len(bed.name) for bed in beds)
        lines = [
            "GARDEN BEDS",
            "=" * (id_width + name_width + 40),
            f"{'Id':<{id_width}}  {'Name':<{name_width}}  {'Shape':<11}  Dimensions",
            "-" * (id_width + name_width + 40),
        ]
        for bed in beds:
            lines.append(
                f"{bed.id:<{id_width}}  {bed.name:<{name_width}}  "
                f"{bed.shape.value:<11}  {format_bed_dimensions(bed)}"
            )
        return "\n".join(lines)


class SelectionReportFormatter:
    """Formats a working selection with its total and bag estimate."""

    def format(self, selection: Selection, cost: float | None = None) -> str:
        if not selection.entries:
            return "No garden beds selected."

        unit = selection.display_unit
        name_width = max(max(len(e.bed.name) for e in selection.entries), 4)
        lines = [
            "SELECTED BEDS",
            "=" * (name_width + 50),
            f"{'Name':<{name_width}}  {'Dimensions':<26}  {'Fill':>5}  {'Volume':>12}",
            "-" * (name_width + 50),
        ]
        for entry in selection.entries:
            lines.append(
                f"{entry.bed.name:<{name_width}}  "
                f"{format_bed_dimensions(entry.bed):<26}  "
                f"{fill_factor_label(entry.fill_factor):>5}  "
                f"{format_volume(entry.filled_volume, unit):>12}"
            )
        lines.append("-" * (name_width + 50))
        lines.append(f"Total volume: {format_volume(selection.total, unit)}")
        lines.append(
            f"Bags required: {selection.bags_required} "
            f"(bag size {format_number(selection.bag_size)} "
            f"{VolumeUnit.CUBIC_FEET.symbol})"
        )
        if cost is not None:
            lines.append(f"Estimated cost: ${cost:.2f}")
        return "\n".join(lines)


class JsonExporter:
    """Exports plan results as JSON."""

    def export(self, output: PlanOutput) -> str:
        """Export plan output as a JSON string."""
        selection = output.selection
        total = selection.total
        data: dict[str, Any] = {
            "is_valid": output.is_valid,
            "errors": output.errors,
            "display_unit": selection.display_unit.value,
            "entries": [
                {
                    "id": entry.id,
                    "bed_id": entry.bed.id,
                    "name": entry.bed.name,
                    "shape": entry.bed.shape.value,
                    "dimensions": format_bed_dimensions(entry.bed),
                    "fill_factor": entry.fill_factor,
                    "volume": entry.volume.to_dict(),
                    "filled_volume": entry.filled_volume.to_dict(),
                }
                for entry in selection.entries
            ],
            "total": total.to_dict() if total else None,
            "formatted_total": format_volume(total, selection.display_unit),
            "bag_size": selection.bag_size,
            "bags_required": selection.bags_required,
            "cost": output.cost,
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
