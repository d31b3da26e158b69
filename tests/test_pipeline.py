"""End-to-end tests for RegistryBuilder."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from regbuild.config import Config
from regbuild.errors import DuplicateEntryError, ErrorCodes
from regbuild.pipeline import RegistryBuilder
from regbuild.schema.validator import validate_list


@pytest.fixture
def project(tmp_path: Path, registry_root: Path) -> Path:
    """A project directory whose registry/ holds the shared source fixtures."""
    assert registry_root == tmp_path / "registry"
    return tmp_path


class TestRegistryBuilder:
    def test_alert_scenario(self, project: Path) -> None:
        registry = validate_list([{"name": "alert", "type": "registry:ui", "files": ["ui/alert.tsx"]}])
        report = RegistryBuilder(base_dir=project).build(registry)

        registry_dir = project / "public" / "registry"
        index = json.loads((registry_dir / "index.json").read_text(encoding="utf-8"))
        assert index == [{"name": "alert", "type": "registry:ui", "files": [{"path": "ui/alert.tsx", "type": "registry:ui"}]}]

        detail = json.loads((registry_dir / "alert.json").read_text(encoding="utf-8"))
        assert detail["files"] == [
            {"path": "ui/alert.tsx", "type": "registry:ui", "content": "export function Alert() {}"}
        ]
        assert "target" not in detail["files"][0]

        lookup = (project / "__registry__" / "index.tsx").read_text(encoding="utf-8")
        assert '"alert": {' in lookup
        assert 'React.lazy(() => import("@/registry/ui/alert"))' in lookup

        assert set(report.written) == {
            registry_dir / "index.json",
            registry_dir / "alert.json",
            project / "__registry__" / "index.tsx",
        }
        assert report.diagnostics == []

    def test_idempotent(self, project: Path) -> None:
        registry = validate_list(
            [
                {"name": "alert", "type": "registry:ui", "files": ["ui/alert.tsx"]},
                {"name": "card", "type": "registry:block", "files": ["blocks/card.tsx"]},
            ]
        )
        builder = RegistryBuilder(base_dir=project)
        builder.build(registry)
        artifacts = sorted((project / "public" / "registry").iterdir())
        first = {p.name: p.read_bytes() for p in artifacts}
        builder.build(registry)
        second = {p.name: p.read_bytes() for p in sorted((project / "public" / "registry").iterdir())}
        assert first == second

    def test_config_directories(self, project: Path) -> None:
        config = Config({"output": {"registry_dir": "dist/r", "index_dir": "gen"}, "manifest": {"include_types": ["block"]}})
        registry = validate_list(
            [
                {"name": "alert", "type": "registry:ui", "files": ["ui/alert.tsx"]},
                {"name": "card", "type": "registry:block", "files": ["blocks/card.tsx"]},
            ]
        )
        RegistryBuilder(config, base_dir=project).build(registry)
        index = json.loads((project / "dist" / "r" / "index.json").read_text(encoding="utf-8"))
        assert [item["name"] for item in index] == ["card"]
        assert (project / "dist" / "r" / "alert.json").exists()
        assert (project / "gen" / "index.tsx").exists()

    def test_skips_reported(self, project: Path) -> None:
        registry = validate_list(
            [
                {"name": "alert", "type": "registry:ui", "files": ["ui/alert.tsx", "ui/gone.tsx"]},
                {"name": "utils", "type": "registry:lib"},
            ]
        )
        report = RegistryBuilder(base_dir=project).build(registry)
        assert report.skipped_entries(ErrorCodes.SOURCE_FILE_MISSING) == {"alert"}
        assert report.skipped_entries(ErrorCodes.ENTRY_NOT_INDEXED) == {"utils"}
        assert (project / "public" / "registry" / "utils.json").exists()

    def test_strict_unique_names(self, project: Path) -> None:
        config = Config({"lookup": {"strict_unique_names": True}})
        registry = validate_list(
            [
                {"name": "alert", "type": "registry:ui", "files": ["ui/alert.tsx"]},
                {"name": "alert", "type": "registry:example", "files": ["ui/alert.tsx"]},
            ]
        )
        with pytest.raises(DuplicateEntryError):
            RegistryBuilder(config, base_dir=project).build(registry)
