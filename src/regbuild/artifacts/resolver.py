"""File content resolution for per-entry artifacts."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from regbuild.artifacts.source import AUTHORING_DIRECTIVES, strip_declarations
from regbuild.schema.types import FileEntry, FileRef, RegistryItemType, normalize_file

logger = logging.getLogger(__name__)

__all__ = ["EXTERNAL_ENTRY_PREFIX", "SourceReader", "FileContentResolver", "compute_target"]

# Entries imported from outside the registry carry this prefix and need explicit targets.
EXTERNAL_ENTRY_PREFIX = "v0-"


class SourceReader:
    """Reads registry source files relative to a fixed root directory."""

    def __init__(self, root: str | Path = "registry") -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def read(self, path: str) -> str | None:
        """Return the file's text, or None if it is missing or unreadable."""
        file_path = self._root / path
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", file_path, e)
            return None


def compute_target(file: FileRef, entry_name: str) -> str | None:
    """Return the install target of ``file``, deriving one for external entries."""
    if file.target:
        return file.target
    if not entry_name.startswith(EXTERNAL_ENTRY_PREFIX):
        return file.target
    file_name = PurePosixPath(file.path).name
    return f"{file.type.install_dir}/{file_name}"


class FileContentResolver:
    """Resolves a file reference into its distributable content and target."""

    def __init__(
        self,
        reader: SourceReader,
        directives: tuple[str, ...] = AUTHORING_DIRECTIVES,
    ) -> None:
        self._reader = reader
        self._directives = directives

    def resolve(self, file: FileEntry, entry_name: str, entry_type: RegistryItemType) -> FileRef | None:
        """Resolve one file of an entry.

        Returns:
            The FileRef with ``content`` and ``target`` filled in, or None when
            the source file cannot be read.

        Raises:
            SourceParseError: If the source file is not valid TSX.
        """
        ref = normalize_file(file, entry_type)
        text = self._reader.read(ref.path)
        if text is None:
            return None

        content = strip_declarations(text, self._directives, path=ref.path)
        return FileRef(
            path=ref.path,
            type=ref.type,
            content=content,
            target=compute_target(ref, entry_name),
        )
