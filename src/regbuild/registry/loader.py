"""Registry definition file loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from regbuild.errors import RegistryFileError
from regbuild.schema.types import Registry
from regbuild.schema.validator import validate_list

logger = logging.getLogger(__name__)

__all__ = ["load_registry"]


def load_registry(registry_path: str | Path) -> Registry:
    """Load and validate a registry definition from a JSON or YAML file.

    The document is either a list of entries or a mapping with an ``items`` list.

    Raises:
        RegistryFileError: If the file is missing, unparseable or has the wrong shape.
        SchemaValidationError: If any entry fails validation.
    """
    path = Path(registry_path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RegistryFileError(message=f"Unable to read registry file: {path}", cause=e) from e

    # YAML is a superset of JSON, so one parser covers both formats.
    try:
        parsed: Any = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise RegistryFileError(message=f"Invalid registry file: {path}", cause=e) from e

    if isinstance(parsed, dict):
        parsed = parsed.get("items")
    if not isinstance(parsed, list):
        raise RegistryFileError(message=f"Registry file must contain a list of entries: {path}")

    registry = validate_list(parsed)
    logger.info("Loaded %d registry entries from %s", len(registry), path)
    return registry
