"""Working selection of garden beds and its running total.

Every operation here returns a new value; nothing is mutated in place.
Each entry keeps the fill factor that was active when it was added, so
changing the fill level afterwards only affects beds added later.
"""

from __future__ import annotations

import logging
import math
import time
import uuid
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Callable

from ..catalog import beds_for_tab
from ..errors import InvalidInput
from ..value_objects import (
    BedDefinition,
    BedDimensions,
    BedShape,
    CircularDimensions,
    RectangularDimensions,
    ShapeTab,
    VolumeResult,
    VolumeUnit,
)
from .bag_estimator import DEFAULT_BAG_SIZE, bags_required
from .unit_converter import unit_abbreviation
from .volume_calculator import calculate_bed_volume, volume_from_cubic_feet

__all__ = [
    "ALLOWED_FILL_FACTORS",
    "FILL_FACTOR_LABELS",
    "BedEntry",
    "Selection",
    "add_entry",
    "apply_fill_factor",
    "make_custom_bed",
    "recompute_total",
    "remove_entry",
    "validate_fill_factor",
]

logger = logging.getLogger(__name__)

ALLOWED_FILL_FACTORS: tuple[float, ...] = (0.25, 0.5, 0.75, 1.0)

FILL_FACTOR_LABELS: dict[float, str] = {
    0.25: "1/4",
    0.5: "1/2",
    0.75: "3/4",
    1.0: "Full",
}


def _timestamp_ms() -> int:
    return time.time_ns() // 1_000_000


def _new_entry_id(bed_id: str) -> str:
    # Two adds within the same millisecond still get distinct ids.
    return f"{bed_id}-{_timestamp_ms()}-{uuid.uuid4().hex[:6]}"


def validate_fill_factor(fill_factor: float) -> float:
    """Return ``fill_factor`` if it is one of the supported fill levels.

    Raises:
        InvalidInput: For any other value.
    """
    if fill_factor not in ALLOWED_FILL_FACTORS:
        allowed = ", ".join(f"{f:g}" for f in ALLOWED_FILL_FACTORS)
        raise InvalidInput(
            f"Fill factor must be one of: {allowed} (got {fill_factor})",
            "fill_factor",
        )
    return float(fill_factor)


@dataclass(frozen=True)
class BedEntry:
    """One bed in the working selection.

    Attributes:
        id: Unique instance id; the same catalog bed can appear many times.
        bed: The bed definition this entry was created from.
        volume: Full (unfilled) volume of the bed.
        fill_factor: Fill level captured when the entry was added.
    """

    id: str
    bed: BedDefinition
    volume: VolumeResult
    fill_factor: float = 1.0

    @property
    def filled_volume(self) -> VolumeResult:
        """Volume after applying this entry's own fill factor."""
        return apply_fill_factor(self.volume, self.fill_factor)


def apply_fill_factor(volume: VolumeResult, fill_factor: float) -> VolumeResult:
    """Scale every field of ``volume`` by ``fill_factor``, rounding each."""
    return VolumeResult(
        cubic_feet=round(volume.cubic_feet * fill_factor, 2),
        cubic_yards=round(volume.cubic_yards * fill_factor, 2),
        cubic_meters=round(volume.cubic_meters * fill_factor, 2),
        liters=round(volume.liters * fill_factor, 2),
        gallons=round(volume.gallons * fill_factor, 2),
        display_unit=volume.display_unit,
    )


def add_entry(
    entries: tuple[BedEntry, ...] | list[BedEntry],
    bed: BedDefinition,
    volume: VolumeResult,
    fill_factor: float,
    id_factory: Callable[[str], str] = _new_entry_id,
    count: int = 1,
) -> tuple[BedEntry, ...]:
    """Append ``count`` new entries for ``bed``, snapshotting ``fill_factor``.

    Each entry gets its own instance id. All of them are appended in one
    step, so adding a bed many times copies the existing entries once.
    """
    fill_factor = validate_fill_factor(fill_factor)
    if count < 1:
        raise InvalidInput("Count must be at least 1", "count")
    added = tuple(
        BedEntry(
            id=id_factory(bed.id),
            bed=bed,
            volume=volume,
            fill_factor=fill_factor,
        )
        for _ in range(count)
    )
    logger.debug(f"Added bed '{bed.id}' x{count} at fill {fill_factor:g}")
    return (*entries, *added)


def remove_entry(
    entries: tuple[BedEntry, ...] | list[BedEntry],
    entry_id: str,
) -> tuple[BedEntry, ...]:
    """Drop the entry with ``entry_id``; unknown ids leave the list as is."""
    remaining = tuple(entry for entry in entries if entry.id != entry_id)
    if len(remaining) == len(entries):
        logger.debug(f"No entry with id {entry_id} to remove")
    else:
        logger.debug(f"Removed entry {entry_id}")
    return remaining


def recompute_total(
    entries: tuple[BedEntry, ...] | list[BedEntry],
    display_unit: VolumeUnit = VolumeUnit.CUBIC_FEET,
) -> VolumeResult | None:
    """Total fill-adjusted volume of ``entries``, or None when empty.

    Each entry's cubic feet is scaled by its own fill factor and rounded
    before summing; the other units are derived from the sum.
    """
    if not entries:
        return None
    total_cubic_feet = sum(
        round(entry.volume.cubic_feet * entry.fill_factor, 2) for entry in entries
    )
    logger.debug(f"Total of {len(entries)} entries: {total_cubic_feet:.2f} cubic feet")
    return volume_from_cubic_feet(total_cubic_feet, display_unit)


def make_custom_bed(
    shape: BedShape | str,
    dimensions: BedDimensions,
    name: str | None = None,
) -> BedDefinition:
    """Build a user-defined bed with a generated id and display name."""
    shape = BedShape(shape)
    if name is None:
        if isinstance(dimensions, RectangularDimensions):
            unit = unit_abbreviation(dimensions.length_width_unit)
            name = (
                f"Custom Rectangular ({dimensions.length:g}{unit} "
                f"× {dimensions.width:g}{unit})"
            )
        elif isinstance(dimensions, CircularDimensions):
            unit = unit_abbreviation(dimensions.diameter_unit)
            name = f"Custom Circular ({dimensions.diameter:g}{unit} diameter)"
        else:
            name = f"Custom {shape.value.capitalize()}"
    return BedDefinition(
        id=f"custom-{_timestamp_ms()}-{uuid.uuid4().hex[:6]}",
        name=name,
        shape=shape,
        dimensions=dimensions,
    )


@dataclass(frozen=True)
class Selection:
    """Immutable application state for the bed picker.

    ``fill_factor`` is the current value of the fill level control and is
    only read when a bed is added. The total is derived on access.
    """

    entries: tuple[BedEntry, ...] = ()
    display_unit: VolumeUnit = VolumeUnit.CUBIC_FEET
    fill_factor: float = 1.0
    active_tab: ShapeTab = ShapeTab.RECTANGULAR
    bag_size: float = DEFAULT_BAG_SIZE

    def add_bed(
        self,
        bed: BedDefinition,
        volume: VolumeResult | None = None,
        id_factory: Callable[[str], str] = _new_entry_id,
        quantity: int = 1,
    ) -> Selection:
        """Add ``bed`` ``quantity`` times at the current fill level.

        The volume is calculated first, so a bed with invalid dimensions
        raises before the selection changes.
        """
        if volume is None:
            volume = calculate_bed_volume(bed)
        entries = add_entry(
            self.entries, bed, volume, self.fill_factor, id_factory, count=quantity
        )
        return replace(self, entries=entries)

    def add_custom_bed(
        self,
        shape: BedShape | str,
        dimensions: BedDimensions,
        name: str | None = None,
    ) -> Selection:
        bed = make_custom_bed(shape, dimensions, name)
        return self.add_bed(bed)

    def remove(self, entry_id: str) -> Selection:
        return replace(self, entries=remove_entry(self.entries, entry_id))

    def clear(self) -> Selection:
        return replace(self, entries=())

    def with_fill_factor(self, fill_factor: float) -> Selection:
        return replace(self, fill_factor=validate_fill_factor(fill_factor))

    def with_display_unit(self, display_unit: VolumeUnit | str) -> Selection:
        return replace(self, display_unit=VolumeUnit(display_unit))

    def with_active_tab(self, tab: ShapeTab | str) -> Selection:
        return replace(self, active_tab=ShapeTab(tab))

    def with_bag_size(self, bag_size: float | None) -> Selection:
        """Set the bag size; missing, non-positive or non-finite values are ignored."""
        if bag_size is None or not math.isfinite(bag_size) or bag_size <= 0:
            logger.debug(f"Ignoring invalid bag size: {bag_size}")
            return self
        return replace(self, bag_size=float(bag_size))

    @cached_property
    def total(self) -> VolumeResult | None:
        """Fill-adjusted total, computed once per selection value."""
        return recompute_total(self.entries, self.display_unit)

    @property
    def bags_required(self) -> int:
        total = self.total
        return bags_required(total.cubic_feet if total else 0, self.bag_size)

    @property
    def available_beds(self) -> tuple[BedDefinition, ...]:
        """Catalog beds offered under the active tab."""
        return beds_for_tab(self.active_tab)
