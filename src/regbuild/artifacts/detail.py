"""Detail file builder: writes one ``<name>.json`` artifact per registry entry."""

from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from pathlib import Path
from typing import Any

from regbuild.artifacts.output import write_json_artifact
from regbuild.artifacts.report import BuildDiagnostic, BuildReport
from regbuild.artifacts.resolver import FileContentResolver
from regbuild.errors import ErrorCodes
from regbuild.schema.types import FileRef, Registry, RegistryEntry, normalize_file
from regbuild.schema.validator import DETAIL_OMITTED_FIELDS, validate_and_trim

logger = logging.getLogger(__name__)

__all__ = ["build_detail_files", "resolve_entry_files"]


def resolve_entry_files(
    entry: RegistryEntry,
    resolver: FileContentResolver,
    executor: Executor,
    report: BuildReport,
) -> list[FileRef]:
    """Resolve every file of ``entry`` in parallel, keeping declaration order.

    Files that cannot be read are dropped and reported.
    """
    if not entry.files:
        return []

    results = executor.map(lambda f: resolver.resolve(f, entry.name, entry.type), entry.files)
    resolved: list[FileRef] = []
    for file, result in zip(entry.files, results):
        if result is not None:
            resolved.append(result)
            continue
        path = normalize_file(file, entry.type).path
        logger.warning("Source file '%s' of entry '%s' not found, skipping file", path, entry.name)
        report.add(
            BuildDiagnostic(
                code=ErrorCodes.SOURCE_FILE_MISSING,
                entry=entry.name,
                message=f"Source file not found: {path}",
                path=path,
            )
        )
    return resolved


def _detail_payload(entry: RegistryEntry, files: list[FileRef]) -> dict[str, Any]:
    payload = entry.to_dict()
    payload["files"] = [f.model_dump(mode="json", exclude_none=True) for f in files]
    return payload


def build_detail_files(
    registry: Registry,
    output_dir: str | Path,
    resolver: FileContentResolver,
    report: BuildReport | None = None,
    max_workers: int | None = None,
) -> BuildReport:
    """Write ``<name>.json`` with resolved file contents for each eligible entry.

    Entries that fail validation are skipped without writing anything; each
    skip is recorded in the returned report.

    Raises:
        SourceParseError: If a source file is not valid TSX.
        ArtifactWriteError: If an artifact cannot be written.
    """
    report = report if report is not None else BuildReport()
    output_path = Path(output_dir)
    written = 0

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        for entry in registry:
            if not entry.type.detail_eligible:
                continue

            files = resolve_entry_files(entry, resolver, executor, report)
            result = validate_and_trim(_detail_payload(entry, files), DETAIL_OMITTED_FIELDS)
            if not result.valid:
                errors = [e.to_dict() for e in result.errors]
                logger.warning("Entry '%s' failed validation, skipping artifact: %s", entry.name, errors)
                report.add(
                    BuildDiagnostic(
                        code=ErrorCodes.ENTRY_VALIDATION_FAILED,
                        entry=entry.name,
                        message="Entry failed schema validation",
                        details={"errors": errors},
                    )
                )
                continue

            report.written.append(write_json_artifact(output_path / f"{entry.name}.json", result.data))
            written += 1

    logger.info("Wrote %d detail artifacts to %s", written, output_path)
    return report
