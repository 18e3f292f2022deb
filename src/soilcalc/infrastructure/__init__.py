"""Infrastructure layer - formatters and exporters."""

from .formatters import (
    BedListFormatter,
    JsonExporter,
    SelectionReportFormatter,
    VolumeReportFormatter,
    fill_factor_label,
    format_bed_dimensions,
    format_number,
    format_volume,
)

__all__ = [
    "BedListFormatter",
    "JsonExporter",
    "SelectionReportFormatter",
    "VolumeReportFormatter",
    "fill_factor_label",
    "format_bed_dimensions",
    "format_number",
    "format_volume",
]
