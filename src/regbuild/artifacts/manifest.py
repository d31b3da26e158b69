"""Manifest builder: writes index.json summarizing the registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from regbuild.artifacts.output import write_json_artifact
from regbuild.schema.types import Registry, RegistryEntry, RegistryItemType, normalize_file

logger = logging.getLogger(__name__)

__all__ = ["MANIFEST_FILENAME", "manifest_items", "build_manifest"]

MANIFEST_FILENAME = "index.json"


def _manifest_item(entry: RegistryEntry) -> dict[str, Any]:
    item = entry.to_dict()
    if entry.files is not None:
        item["files"] = [
            normalize_file(f, entry.type).model_dump(mode="json", exclude_none=True, exclude={"content"})
            for f in entry.files
        ]
    return item


def manifest_items(registry: Registry, include_types: Iterable[str]) -> list[dict[str, Any]]:
    """Filter the registry to ``include_types`` kinds and normalize file lists."""
    included = {RegistryItemType.from_kind(kind) for kind in include_types}
    return [_manifest_item(entry) for entry in registry if entry.type in included]


def build_manifest(registry: Registry, output_dir: str | Path, include_types: Iterable[str]) -> Path:
    """Write ``index.json`` for the entries whose kind is in ``include_types``.

    File contents are never read; each file is listed as ``{path, type}``.
    """
    items = manifest_items(registry, include_types)
    path = write_json_artifact(Path(output_dir) / MANIFEST_FILENAME, items)
    logger.info("Wrote manifest with %d entries to %s", len(items), path)
    return path
