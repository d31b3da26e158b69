"""Tests for the regbuild error hierarchy."""

from __future__ import annotations

import pytest

from regbuild.errors import (
    ArtifactWriteError,
    ConfigError,
    DuplicateEntryError,
    ErrorCodes,
    RegistryBuildError,
    SchemaValidationError,
    SourceParseError,
)


class TestRegistryBuildError:
    def test_str_includes_code(self) -> None:
        error = ConfigError(message="bad value")
        assert str(error) == "[CONFIG_INVALID] bad value"
        assert isinstance(error, RegistryBuildError)

    def test_cause_kept(self) -> None:
        cause = PermissionError("denied")
        error = ArtifactWriteError(artifact_path="out/index.json", cause=cause)
        assert error.cause is cause
        assert error.details == {"artifact_path": "out/index.json"}
        assert error.code == ErrorCodes.ARTIFACT_WRITE_ERROR

    def test_source_parse_error_location(self) -> None:
        error = SourceParseError(path="ui/x.tsx", line=3)
        assert error.message == "Unable to parse source file: ui/x.tsx:3"
        assert error.path == "ui/x.tsx"

    def test_schema_validation_error_defaults(self) -> None:
        error = SchemaValidationError()
        assert error.errors == []

    def test_duplicate_entry_name(self) -> None:
        assert DuplicateEntryError(name="button").name == "button"


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().SOURCE_FILE_MISSING = "x"  # type: ignore[misc]
