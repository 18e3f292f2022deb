"""Unit tests for the volume calculator.

These tests verify:
- Rectangular and circular volumes in cubic feet
- Mixed units for length/width and height
- Independent rounding of each derived unit
- Validation order and error types
- The non-raising safe_calculate_volume wrapper
"""

import math

import pytest

from soilcalc.domain import (
    BedShape,
    CircularDimensions,
    DimensionTooLarge,
    InvalidDimension,
    InvalidInput,
    LengthUnit,
    RectangularDimensions,
    VolumeResult,
    VolumeUnit,
    circular_volume,
    rectangular_volume,
    safe_calculate_volume,
    volume_from_cubic_feet,
)


class TestRectangularVolume:
    """Tests for rectangular_volume."""

    def test_basic_volume(self) -> None:
        result = rectangular_volume(RectangularDimensions(length=4, width=3, height=1))
        assert result.cubic_feet == 12.0
        assert result.cubic_yards == 0.44
        assert result.cubic_meters == 0.34
        assert result.liters == 339.8
        assert result.gallons == 89.77
        assert result.display_unit == VolumeUnit.CUBIC_FEET

    def test_length_and_width_are_interchangeable(self) -> None:
        a = rectangular_volume(RectangularDimensions(length=4, width=3, height=1))
        b = rectangular_volume(RectangularDimensions(length=3, width=4, height=1))
        assert a.cubic_feet == b.cubic_feet == 12.0

    def test_inches_match_feet(self) -> None:
        """A 48in x 36in x 12in bed equals a 4ft x 3ft x 1ft bed."""
        in_inches = rectangular_volume(
            RectangularDimensions(
                length=48,
                width=36,
                height=12,
                length_width_unit=LengthUnit.INCHES,
                height_unit=LengthUnit.INCHES,
            )
        )
        in_feet = rectangular_volume(RectangularDimensions(length=4, width=3, height=1))
        assert in_inches == in_feet
        assert in_inches.cubic_feet == 12.0

    def test_height_uses_its_own_unit(self) -> None:
        """Feet for the footprint, inches for the depth."""
        result = rectangular_volume(
            RectangularDimensions(
                length=4, width=4, height=6, height_unit=LengthUnit.INCHES
            )
        )
        assert result.cubic_feet == 8.0

    def test_metric_dimensions(self) -> None:
        result = rectangular_volume(
            RectangularDimensions(
                length=100,
                width=100,
                height=30,
                length_width_unit=LengthUnit.CENTIMETERS,
                height_unit=LengthUnit.CENTIMETERS,
            )
        )
        assert result.cubic_meters == pytest.approx(0.3, abs=0.01)
        assert result.cubic_feet == pytest.approx(10.59, abs=0.01)


class TestCircularVolume:
    """Tests for circular_volume."""

    def test_basic_volume(self) -> None:
        result = circular_volume(CircularDimensions(diameter=4, height=1))
        assert result.cubic_feet == pytest.approx(math.pi * 2**2 * 1, abs=0.01)
        assert result.cubic_feet == 12.57

    def test_inch_height(self) -> None:
        result = circular_volume(
            CircularDimensions(diameter=3, height=12, height_unit=LengthUnit.INCHES)
        )
        assert result.cubic_feet == 7.07


class TestVolumeFromCubicFeet:
    """Tests for deriving all units from cubic feet."""

    def test_each_field_rounded_from_unrounded_value(self) -> None:
        """Liters come from the unrounded cubic feet, not from 12.57."""
        cubic_feet = math.pi * 4  # 12.566...
        result = volume_from_cubic_feet(cubic_feet)
        assert result.cubic_feet == 12.57
        assert result.liters == 355.84
        assert result.liters != round(12.57 * 28.3168, 2)

    def test_liters_go_through_cubic_meters(self) -> None:
        result = volume_from_cubic_feet(100)
        assert result.cubic_meters == 2.83
        assert result.liters == 2831.68

    def test_display_unit(self) -> None:
        result = volume_from_cubic_feet(27, VolumeUnit.CUBIC_YARDS)
        assert result.cubic_yards == 1.0
        assert result.display_unit == VolumeUnit.CUBIC_YARDS


class TestValidation:
    """Tests for dimension validation."""

    @pytest.mark.parametrize("field", ["length", "width", "height"])
    @pytest.mark.parametrize("bad_value", [0, -1])
    def test_non_positive_rectangular(self, field: str, bad_value: float) -> None:
        values = {"length": 4, "width": 3, "height": 1, field: bad_value}
        with pytest.raises(InvalidDimension) as exc_info:
            rectangular_volume(RectangularDimensions(**values))
        assert exc_info.value.field == field
        assert field.capitalize() in str(exc_info.value)

    def test_zero_diameter(self) -> None:
        with pytest.raises(InvalidDimension) as exc_info:
            circular_volume(CircularDimensions(diameter=0, height=1))
        assert exc_info.value.field == "diameter"

    def test_missing_value(self) -> None:
        with pytest.raises(InvalidInput) as exc_info:
            rectangular_volume(RectangularDimensions(length=None, width=3, height=1))  # type: ignore[arg-type]
        assert exc_info.value.field == "length"

    def test_too_large_after_conversion(self) -> None:
        """400 meters is about 1312 feet."""
        with pytest.raises(DimensionTooLarge) as exc_info:
            rectangular_volume(
                RectangularDimensions(
                    length=400, width=1, height=1, length_width_unit=LengthUnit.METERS
                )
            )
        assert exc_info.value.field == "length"
        assert exc_info.value.limit == 1000

    def test_large_value_in_small_unit_is_allowed(self) -> None:
        """1200 inches is only 100 feet."""
        result = rectangular_volume(
            RectangularDimensions(
                length=1200, width=12, height=12,
                length_width_unit=LengthUnit.INCHES, height_unit=LengthUnit.INCHES,
            )
        )
        assert result.cubic_feet == 100.0

    def test_circular_height_too_large(self) -> None:
        with pytest.raises(DimensionTooLarge) as exc_info:
            circular_volume(CircularDimensions(diameter=4, height=1001))
        assert exc_info.value.field == "height"

    def test_positivity_checked_before_size(self) -> None:
        """A negative height is reported even when the length is too large."""
        with pytest.raises(InvalidDimension):
            rectangular_volume(RectangularDimensions(length=5000, width=3, height=-1))


class TestSafeCalculateVolume:
    """Tests for safe_calculate_volume."""

    def test_returns_result(self) -> None:
        result = safe_calculate_volume(
            RectangularDimensions(length=4, width=3, height=1), BedShape.RECTANGULAR
        )
        assert result is not None
        assert result.cubic_feet == 12.0

    def test_returns_none_on_error(self) -> None:
        assert (
            safe_calculate_volume(CircularDimensions(diameter=-4, height=1), "circular")
            is None
        )

    def test_returns_none_on_shape_mismatch(self) -> None:
        assert (
            safe_calculate_volume(CircularDimensions(diameter=4, height=1), "rectangular")
            is None
        )

    def test_returns_none_on_unknown_shape(self) -> None:
        assert (
            safe_calculate_volume(CircularDimensions(diameter=4, height=1), "hexagonal")
            is None
        )


class TestNonFiniteDimensions:
    """NaN and infinite dimensions are rejected like non-positive ones."""

    @pytest.mark.parametrize("bad_value", [math.nan, math.inf, -math.inf])
    @pytest.mark.parametrize("field", ["length", "width", "height"])
    def test_rectangular(self, field: str, bad_value: float) -> None:
        values = {"length": 4, "width": 3, "height": 1, field: bad_value}
        with pytest.raises(InvalidDimension) as exc_info:
            rectangular_volume(RectangularDimensions(**values))
        assert exc_info.value.field == field

    @pytest.mark.parametrize("bad_value", [math.nan, math.inf])
    def test_circular(self, bad_value: float) -> None:
        with pytest.raises(InvalidDimension) as exc_info:
            circular_volume(CircularDimensions(diameter=bad_value, height=1))
        assert exc_info.value.field == "diameter"

    def test_safe_calculate_returns_none(self) -> None:
        assert (
            safe_calculate_volume(
                RectangularDimensions(length=math.nan, width=3, height=1),
                BedShape.RECTANGULAR,
            )
            is None
        )

    def test_volume_result_rejects_nan(self) -> None:
        with pytest.raises(ValueError):
            VolumeResult(
                cubic_feet=math.nan,
                cubic_yards=1,
                cubic_meters=1,
                liters=1,
                gallons=1,
            )
