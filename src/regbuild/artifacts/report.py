"""Build report: written artifacts and non-fatal diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

__all__ = ["BuildDiagnostic", "BuildReport"]


@dataclass(frozen=True)
class BuildDiagnostic:
    """A non-fatal skip recorded during a build.

    Attributes:
        code: One of the ``ErrorCodes`` diagnostic codes.
        entry: Name of the registry entry concerned.
        message: Human-readable explanation.
        path: Registry-relative file path, when the skip concerns one file.
        details: Extra structured data, e.g. validation errors.
    """

    code: str
    entry: str
    message: str
    path: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class BuildReport:
    """What a build wrote and what it skipped."""

    written: list[Path] = field(default_factory=list)
    diagnostics: list[BuildDiagnostic] = field(default_factory=list)

    def add(self, diagnostic: BuildDiagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def by_code(self, code: str) -> list[BuildDiagnostic]:
        """All diagnostics carrying ``code``."""
        return [d for d in self.diagnostics if d.code == code]

    def skipped_entries(self, code: str) -> set[str]:
        return {d.entry for d in self.by_code(code)}
