"""Registry entry types: RegistryItemType, FileRef, RegistryEntry and friends."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from regbuild.errors import ConfigError

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
]

TYPE_PREFIX = "registry:"


class RegistryItemType(str, Enum):
    """The closed set of registry entry kinds."""

    UI = "registry:ui"
    LIB = "registry:lib"
    HOOK = "registry:hook"
    BLOCK = "registry:block"
    EXAMPLE = "registry:example"

    @classmethod
    def from_kind(cls, kind: str) -> RegistryItemType:
        """Look up a member by its bare kind name, e.g. ``"ui"``."""
        try:
            return cls(f"{TYPE_PREFIX}{kind}")
        except ValueError as e:
            raise ConfigError(message=f"Unknown registry item kind: '{kind}'", cause=e) from e

    @property
    def kind(self) -> str:
        """Bare kind name without the ``registry:`` namespace."""
        return self.value[len(TYPE_PREFIX) :]

    @property
    def install_dir(self) -> str:
        """Default install folder for files of this kind."""
        return _INSTALL_DIRS[self]

    @property
    def detail_eligible(self) -> bool:
        """Whether entries of this kind get a per-entry detail artifact."""
        return self in _DETAIL_WHITELIST


_INSTALL_DIRS: dict[RegistryItemType, str] = {
    RegistryItemType.UI: "components/ui",
    RegistryItemType.LIB: "lib",
    RegistryItemType.HOOK: "hooks",
    RegistryItemType.BLOCK: "components",
    RegistryItemType.EXAMPLE: "components",
}

_DETAIL_WHITELIST: frozenset[RegistryItemType] = frozenset(RegistryItemType)


class _RegistryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FileRef(_RegistryModel):
    """Structured file reference of a registry entry."""

    path: str
    type: RegistryItemType
    content: str | None = None
    target: str | None = None


# Legacy entries list their files as bare path strings.
FileEntry = Union[str, FileRef]


class ChunkContainer(_RegistryModel):
    class_name: str | None = Field(default=None, alias="className")


class BlockChunk(_RegistryModel):
    """A named sub-part of a block, rendered separately by the docs site."""

    name: str
    description: str
    component: Any = None
    file: str
    code: str | None = None
    container: ChunkContainer | None = None


class TailwindConfig(_RegistryModel):
    content: list[str] | None = None
    theme: dict[str, Any] | None = None
    plugins: list[str] | None = None


class RegistryItemTailwind(_RegistryModel):
    config: TailwindConfig


class RegistryItemCssVars(_RegistryModel):
    light: dict[str, str] | None = None
    dark: dict[str, str] | None = None


class RegistryEntry(_RegistryModel):
    """One distributable unit: a UI component, hook, lib helper, block or example."""

    name: str
    type: RegistryItemType
    description: str | None = None
    dependencies: list[str] | None = None
    dev_dependencies: list[str] | None = Field(default=None, alias="devDependencies")
    registry_dependencies: list[str] | None = Field(default=None, alias="registryDependencies")
    files: list[FileEntry] | None = None
    tailwind: RegistryItemTailwind | None = None
    css_vars: RegistryItemCssVars | None = Field(default=None, alias="cssVars")
    source: str | None = None
    category: str | None = None
    subcategory: str | None = None
    chunks: list[BlockChunk] | None = None

    def to_dict(self, **kwargs: Any) -> dict[str, Any]:
        """Serialize by alias, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, **kwargs)


Registry = list[RegistryEntry]


def normalize_file(file: FileEntry, entry_type: RegistryItemType) -> FileRef:
    """Convert a bare path string to a FileRef typed after its entry."""
    if isinstance(file, str):
        return FileRef(path=file, type=entry_type)
    return file
