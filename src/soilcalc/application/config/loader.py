"""Loading of garden plan files.

Plans are JSON documents validated against :class:`GardenPlanConfig`.
File system problems, JSON syntax errors and schema violations are all
reported as :class:`ConfigError` with an ``error_type`` and per-field
details so the CLI and API can show them the same way.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from soilcalc.application.config.schema import GardenPlanConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a garden plan cannot be loaded.

    Attributes:
        message: Human-readable summary.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: Plan file path, when loaded from disk.
        details: Per-error dicts (path/message/value for validation,
            line/column/message for JSON syntax).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple, e.g. ``beds[2].fill_factor``."""
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _scalar_value(value: Any) -> Any:
    """Keep scalar inputs for display; drop containers, stringify NaN/inf."""
    if isinstance(value, (dict, list)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": format_json_path(err["loc"]) or "(root)",
                "message": err["msg"],
                "value": _scalar_value(err.get("input")) if err["loc"] else None,
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Garden plan validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_plan_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> GardenPlanConfig:
    """Validate a garden plan held in memory.

    Raises:
        ConfigError: With ``error_type="validation"`` if the data does not
            match the schema.
    """
    try:
        return GardenPlanConfig.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_plan(path: Path) -> GardenPlanConfig:
    """Read and validate a garden plan JSON file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            JSON, or fails schema validation.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Plan file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading plan file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading plan file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in plan file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Plan file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
            details=[{"path": "(root)", "message": "Expected a JSON object"}],
        )

    logger.debug(f"Loaded plan file {path}")
    return load_plan_from_dict(data, path=path)
