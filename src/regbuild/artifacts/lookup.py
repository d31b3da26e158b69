"""Lookup index builder: generates the ``index.tsx`` table consumed by the docs app."""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePosixPath
from typing import Any

from regbuild.artifacts.output import write_artifact
from regbuild.artifacts.report import BuildDiagnostic, BuildReport
from regbuild.errors import DuplicateEntryError, ErrorCodes
from regbuild.schema.types import Registry, RegistryEntry, normalize_file

logger = logging.getLogger(__name__)

__all__ = [
    "LOOKUP_INDEX_FILENAME",
    "SOURCE_ROOT",
    "component_path",
    "render_lookup_index",
    "build_lookup_index",
]

LOOKUP_INDEX_FILENAME = "index.tsx"
SOURCE_ROOT = "registry"

_MODULE_SUFFIXES = {".tsx", ".ts", ".jsx", ".js"}

_HEADER = """// @ts-nocheck
// This file is autogenerated by regbuild.
// Do not edit this file directly.
import * as React from "react"

export const Index: Record<string, any> = {"""


def _literal(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def component_path(entry: RegistryEntry) -> str:
    """Registry-relative path of the module that implements ``entry``."""
    if entry.files:
        return normalize_file(entry.files[0], entry.type).path
    return f"{entry.type.kind}/{entry.name}"


def _module_specifier(path: str, import_prefix: str) -> str:
    pure = PurePosixPath(path)
    if pure.suffix in _MODULE_SUFFIXES:
        pure = pure.with_suffix("")
    return f"{import_prefix}/{pure.as_posix()}"


def _render_entry(entry: RegistryEntry, import_prefix: str) -> str:
    files = [f"{SOURCE_ROOT}/{normalize_file(f, entry.type).path}" for f in entry.files or []]
    specifier = _module_specifier(component_path(entry), import_prefix)
    # source and chunks are not populated yet; the docs app treats them as optional.
    return f"""
{_literal(entry.name)}: {{
  name: {_literal(entry.name)},
  description: {_literal(entry.description or '')},
  type: {_literal(entry.type.value)},
  registryDependencies: {_literal(entry.registry_dependencies or [])},
  files: {_literal(files)},
  component: React.lazy(() => import({_literal(specifier)})),
  source: "",
  category: {_literal(entry.category or '')},
  subcategory: {_literal(entry.subcategory or '')},
  chunks: []
}},"""


def render_lookup_index(
    registry: Registry,
    report: BuildReport | None = None,
    strict: bool = False,
    import_prefix: str = "@/registry",
) -> str:
    """Render the lookup module source for every entry that declares files.

    A later entry with an already-seen name replaces the earlier one, unless
    ``strict`` is set.

    Raises:
        DuplicateEntryError: If ``strict`` and two indexed entries share a name.
    """
    report = report if report is not None else BuildReport()
    table: dict[str, RegistryEntry] = {}
    for entry in registry:
        if not entry.files:
            report.add(
                BuildDiagnostic(
                    code=ErrorCodes.ENTRY_NOT_INDEXED,
                    entry=entry.name,
                    message="Entry declares no files and cannot be looked up",
                )
            )
            continue
        if entry.name in table:
            if strict:
                raise DuplicateEntryError(name=entry.name)
            logger.warning("Duplicate entry name '%s', later definition wins", entry.name)
            report.add(
                BuildDiagnostic(
                    code=ErrorCodes.DUPLICATE_ENTRY_NAME,
                    entry=entry.name,
                    message="Duplicate entry name; the later definition replaced the earlier one",
                )
            )
        table[entry.name] = entry

    body = "".join(_render_entry(entry, import_prefix) for entry in table.values())
    return f"{_HEADER}{body}\n}}\n"


def build_lookup_index(
    registry: Registry,
    output_dir: str | Path,
    report: BuildReport | None = None,
    strict: bool = False,
    import_prefix: str = "@/registry",
) -> Path:
    """Write ``index.tsx`` mapping entry names to metadata and lazy loaders."""
    text = render_lookup_index(registry, report=report, strict=strict, import_prefix=import_prefix)
    path = write_artifact(Path(output_dir) / LOOKUP_INDEX_FILENAME, text)
    logger.info("Wrote lookup index to %s", path)
    return path
