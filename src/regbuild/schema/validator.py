"""Entry validation: whole-registry checks and per-entry trim-and-validate."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from regbuild.errors import SchemaValidationError
from regbuild.schema.types import Registry, RegistryEntry

__all__ = [
    "DETAIL_OMITTED_FIELDS",
    "ValidationErrorDetail",
    "TrimResult",
    "validate_list",
    "validate_and_trim",
]

# Fields only the docs site needs; never written into per-entry artifacts.
DETAIL_OMITTED_FIELDS: frozenset[str] = frozenset({"source", "category", "subcategory", "chunks"})

_REGISTRY_ADAPTER: TypeAdapter[list[RegistryEntry]] = TypeAdapter(list[RegistryEntry])

_PYDANTIC_TO_CONSTRAINT: dict[str, str] = {
    "missing": "required",
    "string_type": "type",
    "list_type": "type",
    "dict_type": "type",
    "model_type": "type",
    "enum": "enum",
    "literal_error": "enum",
    "union_tag_invalid": "oneOf",
}

_EXPECTED_KEYS = (
    "expected",
    "ge",
    "le",
    "gt",
    "lt",
    "min_length",
    "max_length",
    "pattern",
)


@dataclass
class ValidationErrorDetail:
    """One validation error, addressed by a slash-separated path."""

    path: str
    message: str
    constraint: str | None = None
    expected: Any = None
    actual: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "message": self.message,
            "constraint": self.constraint,
            "expected": self.expected,
            "actual": self.actual,
        }


@dataclass
class TrimResult:
    """Outcome of validate_and_trim: trimmed data on success, errors otherwise."""

    valid: bool
    data: dict[str, Any] | None = None
    errors: list[ValidationErrorDetail] = field(default_factory=list)

    def to_error(self) -> SchemaValidationError:
        """Convert a failed result into a SchemaValidationError."""
        if self.valid:
            raise ValueError("Cannot convert valid result to error")
        return SchemaValidationError(errors=[e.to_dict() for e in self.errors])


def _error_details(error: PydanticValidationError) -> list[ValidationErrorDetail]:
    details: list[ValidationErrorDetail] = []
    for err in error.errors():
        loc = err.get("loc", ())
        path = "/" + "/".join(str(segment) for segment in loc) if loc else "/"
        pydantic_type = err.get("type", "")
        ctx = err.get("ctx", {})

        expected = None
        for key in _EXPECTED_KEYS:
            val = ctx.get(key)
            if val is not None:
                expected = val
                break

        actual = ctx.get("actual")
        if actual is None:
            actual = err.get("input")

        details.append(
            ValidationErrorDetail(
                path=path,
                message=err.get("msg", ""),
                constraint=_PYDANTIC_TO_CONSTRAINT.get(pydantic_type, pydantic_type),
                expected=expected,
                actual=actual,
            )
        )
    return details


def validate_list(raw_entries: Any) -> Registry:
    """Validate a full list of raw entry dicts into a Registry.

    Raises:
        SchemaValidationError: If the list or any entry does not match the schema.
    """
    try:
        return _REGISTRY_ADAPTER.validate_python(raw_entries)
    except PydanticValidationError as e:
        details = _error_details(e)
        raise SchemaValidationError(
            message=f"Registry validation failed with {len(details)} error(s)",
            errors=[d.to_dict() for d in details],
            cause=e,
        ) from e


def validate_and_trim(
    entry: Mapping[str, Any] | RegistryEntry,
    omit: Iterable[str] = DETAIL_OMITTED_FIELDS,
) -> TrimResult:
    """Validate a single entry and return its serialized form without ``omit`` fields.

    ``omit`` takes attribute names or their camelCase aliases.

    Never raises for invalid input; inspect ``TrimResult.valid`` instead.
    """
    raw = entry.to_dict() if isinstance(entry, RegistryEntry) else dict(entry)
    try:
        model = RegistryEntry.model_validate(raw)
    except PydanticValidationError as e:
        return TrimResult(valid=False, errors=_error_details(e))

    fields = RegistryEntry.model_fields
    omitted = {(fields[name].alias or name) if name in fields else name for name in omit}
    data = {key: value for key, value in model.to_dict().items() if key not in omitted}
    return TrimResult(valid=True, data=data)
