"""regbuild entry schema -- public API.

Example usage::

    from regbuild.schema import RegistryEntry, validate_list, validate_and_trim
"""

from __future__ import annotations

from regbuild.schema.types import (
    BlockChunk,
    ChunkContainer,
    FileEntry,
    FileRef,
    Registry,
    RegistryEntry,
    RegistryItemCssVars,
    RegistryItemTailwind,
    RegistryItemType,
    TailwindConfig,
    normalize_file,
)
from regbuild.schema.validator import (
    DETAIL_OMITTED_FIELDS,
    TrimResult,
    ValidationErrorDetail,
    validate_and_trim,
    validate_list,
)

__all__ = [
    "RegistryItemType",
    "FileRef",
    "FileEntry",
    "BlockChunk",
    "ChunkContainer",
    "TailwindConfig",
    "RegistryItemTailwind",
    "RegistryItemCssVars",
    "RegistryEntry",
    "Registry",
    "normalize_file",
    "DETAIL_OMITTED_FIELDS",
    "TrimResult",
    "ValidationErrorDetail",
    "validate_and_trim",
    "validate_list",
]
