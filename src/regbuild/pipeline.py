"""Build pipeline running every artifact builder over one registry."""

from __future__ import annotations

import logging
from pathlib import Path

from regbuild.artifacts.detail import build_detail_files
from regbuild.artifacts.lookup import build_lookup_index
from regbuild.artifacts.manifest import build_manifest
from regbuild.artifacts.report import BuildReport
from regbuild.artifacts.resolver import FileContentResolver, SourceReader
from regbuild.config import Config
from regbuild.errors import ArtifactWriteError
from regbuild.schema.types import Registry

logger = logging.getLogger(__name__)

__all__ = ["RegistryBuilder"]


class RegistryBuilder:
    """Builds index.json, per-entry detail files and index.tsx from a registry."""

    def __init__(self, config: Config | None = None, base_dir: str | Path = ".") -> None:
        """Initialize the builder.

        Args:
            config: Build configuration; defaults apply when omitted.
            base_dir: Directory that relative source and output paths resolve against.
        """
        self._config = config if config is not None else Config()
        base = Path(base_dir)
        self.source_root = base / self._config.get("source.root")
        self.registry_dir = base / self._config.get("output.registry_dir")
        self.index_dir = base / self._config.get("output.index_dir")

    def _ensure_dir(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArtifactWriteError(artifact_path=str(path), cause=e) from e

    def build(self, registry: Registry) -> BuildReport:
        """Regenerate every artifact for ``registry``.

        Returns:
            A report of written artifacts and skipped entries or files.

        Raises:
            SourceParseError: If a source file is not valid TSX.
            ArtifactWriteError: If an output directory or file cannot be written.
            DuplicateEntryError: If strict unique names are configured and violated.
        """
        report = BuildReport()
        self._ensure_dir(self.registry_dir)
        self._ensure_dir(self.index_dir)

        report.written.append(
            build_manifest(registry, self.registry_dir, self._config.get("manifest.include_types"))
        )

        resolver = FileContentResolver(SourceReader(self.source_root))
        build_detail_files(
            registry,
            self.registry_dir,
            resolver,
            report=report,
            max_workers=self._config.get("build.max_workers"),
        )

        report.written.append(
            build_lookup_index(
                registry,
                self.index_dir,
                report=report,
                strict=self._config.get("lookup.strict_unique_names", False),
                import_prefix=self._config.get("lookup.import_prefix"),
            )
        )

        logger.info(
            "Registry build finished: %d artifacts written, %d diagnostics",
            len(report.written),
            len(report.diagnostics),
        )
        return report
