"""Shared test fixtures for the regbuild test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from regbuild.artifacts.resolver import FileContentResolver, SourceReader
from regbuild.schema.types import RegistryEntry


ALERT_SOURCE = "export function Alert() {}"

CARD_SOURCE = """import * as React from "react"

export const description = "A card with a header"

export const iframeHeight = "600px"

export function Card() {
  return <div className="rounded-lg border" />
}
"""


def _write_source(root: Path, rel_path: str, text: str) -> Path:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


# === Fixtures ===


@pytest.fixture
def make_entry() -> Callable[..., RegistryEntry]:
    """Factory building a RegistryEntry from camelCase fields, as in registry files."""

    def _make(**fields: Any) -> RegistryEntry:
        return RegistryEntry.model_validate(fields)

    return _make


@pytest.fixture
def registry_root(tmp_path: Path) -> Path:
    """A registry source root holding an alert and a card component."""
    root = tmp_path / "registry"
    _write_source(root, "ui/alert.tsx", ALERT_SOURCE)
    _write_source(root, "blocks/card.tsx", CARD_SOURCE)
    return root


@pytest.fixture
def write_source(registry_root: Path) -> Callable[[str, str], Path]:
    """Write an extra source file under the registry root."""

    def _write(rel_path: str, text: str) -> Path:
        return _write_source(registry_root, rel_path, text)

    return _write


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def resolver(registry_root: Path) -> FileContentResolver:
    return FileContentResolver(SourceReader(registry_root))
