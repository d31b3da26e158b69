"""regbuild - Static artifact builder for UI component registries."""

from __future__ import annotations

# Core
from regbuild.pipeline import RegistryBuilder
from regbuild.registry import load_registry

# Config
from regbuild.config import Config

# Schema
from regbuild.schema import (
    FileRef,
    Registry,
    RegistryEntry,
    RegistryItemType,
    validate_and_trim,
    validate_list,
)

# Artifacts
from regbuild.artifacts import (
    BuildDiagnostic,
    BuildReport,
    FileContentResolver,
    SourceReader,
    build_detail_files,
    build_lookup_index,
    build_manifest,
)

# Errors
from regbuild.errors import (
    ArtifactWriteError,
    ConfigError,
    ConfigNotFoundError,
    DuplicateEntryError,
    ErrorCodes,
    RegistryBuildError,
    RegistryFileError,
    SchemaValidationError,
    SourceParseError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "RegistryBuilder",
    "load_registry",
    # Config
    "Config",
    # Schema
    "FileRef",
    "Registry",
    "RegistryEntry",
    "RegistryItemType",
    "validate_and_trim",
    "validate_list",
    # Artifacts
    "BuildDiagnostic",
    "BuildReport",
    "FileContentResolver",
    "SourceReader",
    "build_detail_files",
    "build_lookup_index",
    "build_manifest",
    # Errors
    "ErrorCodes",
    "RegistryBuildError",
    "ConfigError",
    "ConfigNotFoundError",
    "SchemaValidationError",
    "SourceParseError",
    "ArtifactWriteError",
    "DuplicateEntryError",
    "RegistryFileError",
]
