"""CLI command implementations for the soilcalc application.

This package contains subcommands for the soilcalc CLI:
- validate: Validate a garden plan file
- beds: Browse the bed catalog
"""

from soilcalc.cli.commands.beds import beds_app
from soilcalc.cli.commands.validate import display_load_error, validate_command

__all__ = ["beds_app", "display_load_error", "validate_command"]
