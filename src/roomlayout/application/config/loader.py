"""Configuration file loader with error handling.

This module loads JSON files for engine configuration and saved room
documents. File system errors, JSON syntax errors and Pydantic validation
errors are all reported as ConfigError with a clear message and structured
details.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from roomlayout.application.config.schemas import RoomLayoutConfiguration

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised for configuration and document loading errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
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
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("engine", "snapping", "cabinet"))
        'engine.snapping.cabinet'
        >>> _format_json_path(("elements", 0, "x"))
        'elements[0].x'
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


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error_type from a ValidationError."""
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


def _format_validation_error_message(
    details: list[dict[str, Any]], heading: str = "Configuration validation failed:"
) -> str:
    lines = [heading]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def read_json_file(path: Path, kind: str = "config") -> Any:
    """Read and parse a JSON file.

    Args:
        path: File to read.
        kind: Word used in error messages, e.g. "config" or "room document".

    Returns:
        The parsed JSON value.

    Raises:
        ConfigError: If the file is missing, unreadable, or not valid JSON.
    """
    if not path.exists():
        raise ConfigError(
            message=f"{kind.capitalize()} file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading {kind} file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading {kind} file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in {kind} file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def validate_model(
    model: type[ModelT],
    data: Any,
    path: Path | None = None,
    heading: str = "Configuration validation failed:",
) -> ModelT:
    """Validate data against a Pydantic model, raising ConfigError on failure."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details, heading),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> RoomLayoutConfiguration:
    """Load and validate an engine configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated RoomLayoutConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed

    Example:
        >>> from pathlib import Path
        >>> try:
        ...     config = load_config(Path("layout.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    data = read_json_file(path)
    return validate_model(RoomLayoutConfiguration, data, path)


def load_config_from_dict(data: dict[str, Any]) -> RoomLayoutConfiguration:
    """Load and validate an engine configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return validate_model(RoomLayoutConfiguration, data)
