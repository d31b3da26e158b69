"""Artifact builders: manifest, per-entry detail files and the lookup index.

Usage::

    from regbuild.artifacts import FileContentResolver, SourceReader, build_detail_files

    resolver = FileContentResolver(SourceReader("registry"))
    report = build_detail_files(registry, "public/registry", resolver)
"""

from __future__ import annotations

from regbuild.artifacts.detail import build_detail_files, resolve_entry_files
from regbuild.artifacts.lookup import build_lookup_index, component_path, render_lookup_index
from regbuild.artifacts.manifest import build_manifest, manifest_items
from regbuild.artifacts.report import BuildDiagnostic, BuildReport
from regbuild.artifacts.resolver import FileContentResolver, SourceReader, compute_target
from regbuild.artifacts.source import AUTHORING_DIRECTIVES, strip_declarations

__all__ = [
    "AUTHORING_DIRECTIVES",
    "BuildDiagnostic",
    "BuildReport",
    "FileContentResolver",
    "SourceReader",
    "build_detail_files",
    "build_lookup_index",
    "build_manifest",
    "component_path",
    "compute_target",
    "manifest_items",
    "render_lookup_index",
    "resolve_entry_files",
    "strip_declarations",
]
