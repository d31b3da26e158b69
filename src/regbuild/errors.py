"""Error hierarchy for the regbuild artifact pipeline."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "RegistryBuildError",
    "ConfigNotFoundError",
    "ConfigError",
    "SchemaValidationError",
    "SourceParseError",
    "ArtifactWriteError",
    "DuplicateEntryError",
    "RegistryFileError",
    "ErrorCodes",
]


class RegistryBuildError(Exception):
    """Base error for all regbuild errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(RegistryBuildError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(RegistryBuildError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class SchemaValidationError(RegistryBuildError):
    """Raised when registry data does not match the entry schema."""

    def __init__(
        self,
        message: str = "Schema validation failed",
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="SCHEMA_VALIDATION_ERROR",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )

    @property
    def errors(self) -> list[dict[str, Any]]:
        """The individual validation error dicts."""
        return self.details["errors"]


class SourceParseError(RegistryBuildError):
    """Raised when a registry source file cannot be parsed."""

    def __init__(self, path: str, line: int | None = None, **kwargs: Any) -> None:
        location = f"{path}:{line}" if line is not None else path
        super().__init__(
            code="SOURCE_PARSE_ERROR",
            message=f"Unable to parse source file: {location}",
            details={"path": path, "line": line},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The registry-relative path of the unparseable file."""
        return self.details["path"]


class ArtifactWriteError(RegistryBuildError):
    """Raised when an output artifact cannot be written."""

    def __init__(self, artifact_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="ARTIFACT_WRITE_ERROR",
            message=f"Unable to write artifact: {artifact_path}",
            details={"artifact_path": artifact_path},
            **kwargs,
        )


class DuplicateEntryError(RegistryBuildError):
    """Raised in strict mode when two entries share a name."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            code="DUPLICATE_ENTRY_NAME",
            message=f"Duplicate registry entry name: {name}",
            details={"name": name},
            **kwargs,
        )

    @property
    def name(self) -> str:
        """The duplicated entry name."""
        return self.details["name"]


class RegistryFileError(RegistryBuildError):
    """Raised when a registry definition file cannot be read or decoded."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="REGISTRY_FILE_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All error and diagnostic codes as constants.

    Use these instead of hardcoding code strings.

    Example:
        if diagnostic.code == ErrorCodes.SOURCE_FILE_MISSING:
            handle_missing_file()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"
    SOURCE_PARSE_ERROR = "SOURCE_PARSE_ERROR"
    ARTIFACT_WRITE_ERROR = "ARTIFACT_WRITE_ERROR"
    DUPLICATE_ENTRY_NAME = "DUPLICATE_ENTRY_NAME"
    REGISTRY_FILE_INVALID = "REGISTRY_FILE_INVALID"
    SOURCE_FILE_MISSING = "SOURCE_FILE_MISSING"
    ENTRY_VALIDATION_FAILED = "ENTRY_VALIDATION_FAILED"
    ENTRY_NOT_INDEXED = "ENTRY_NOT_INDEXED"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
