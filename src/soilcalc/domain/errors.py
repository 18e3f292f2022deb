"""Calculation errors raised by the domain layer."""

from __future__ import annotations


class CalculationError(ValueError):
    """Base class for errors raised while calculating soil volumes."""

    error_type = "calculation"

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class InvalidInput(CalculationError):
    """Raised when a required numeric value is missing or out of its domain."""

    error_type = "invalid_input"


class InvalidDimension(CalculationError):
    """Raised when a bed dimension is zero, negative or not finite."""

    error_type = "invalid_dimension"

    def __init__(self, field: str) -> None:
        super().__init__(f"{field.capitalize()} must be a positive number", field)


class DimensionTooLarge(CalculationError):
    """Raised when a dimension exceeds the maximum once converted to feet."""

    error_type = "dimension_too_large"

    def __init__(self, field: str, limit: float) -> None:
        self.limit = limit
        super().__init__(
            f"{field.capitalize()} exceeds maximum allowed value "
            f"({limit:g} feet when converted)",
            field,
        )


class BedNotFoundError(Exception):
    """Raised when a bed id is not in the catalog."""

    def __init__(self, bed_id: str) -> None:
        self.bed_id = bed_id
        super().__init__(f"Garden bed not found: {bed_id}")
