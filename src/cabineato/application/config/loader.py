"""Configuration loader with comprehensive error handling.

This module loads assembly configurations from JSON files or mappings. It
handles file system errors, JSON parsing errors, and Pydantic validation
errors with clear, actionable error messages. Legacy configuration shapes
are migrated before validation.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabineato.application.config.adapter import migrate_legacy_shelves
from cabineato.application.config.schema import AssemblyConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration loading errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, field errors)
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


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("features", "drawers", "count"))
        'features.drawers.count'
        >>> _format_json_path(("features", "shelves", "fixed", "positions", 0))
        'features.shelves.fixed.positions[0]'
    """
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


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_config_from_dict(data: dict[str, Any], path: Path | None = None) -> AssemblyConfig:
    """Validate a configuration mapping.

    Args:
        data: Configuration mapping with camelCase keys.
        path: Source file, reported in errors when given.

    Returns:
        A validated AssemblyConfig.

    Raises:
        ConfigError: With error_type "validation" if the mapping does not
            match the schema.
    """
    if not isinstance(data, dict):
        raise ConfigError(
            "Configuration must be a JSON object",
            error_type="validation",
            path=path,
            details=[{"path": "", "message": "Expected an object", "value": data}],
        )
    try:
        return AssemblyConfig.model_validate(migrate_legacy_shelves(data))
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            _format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> AssemblyConfig:
    """Load and validate an assembly configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A validated AssemblyConfig.

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute is "file_not_found", "json_parse" or
            "validation".
    """
    if not path.exists():
        raise ConfigError(
            f"Configuration file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            f"Could not read configuration file {path}: {e}",
            error_type="file_not_found",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path}: {e.msg} at line {e.lineno}, column {e.colno}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    logger.debug(f"Loaded configuration from {path}")
    return load_config_from_dict(data, path=path)
