"""Command line interface for the soil calculator."""
