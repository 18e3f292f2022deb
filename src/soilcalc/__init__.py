"""Garden soil volume calculator."""

__version__ = "1.0.0"
