"""Atomic artifact writing."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from regbuild.errors import ArtifactWriteError

logger = logging.getLogger(__name__)

__all__ = ["write_artifact", "write_json_artifact", "dump_json"]


def dump_json(data: Any) -> str:
    """Serialize with 2-space indentation, keeping key order and non-ASCII text."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_artifact(path: Path, text: str) -> Path:
    """Replace ``path`` with ``text`` atomically.

    The text goes to a temporary file in the same directory, which is then
    renamed over the destination.

    Raises:
        ArtifactWriteError: If the directory is missing or not writable.
    """
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        # NamedTemporaryFile creates 0600; artifacts are published as static files.
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ArtifactWriteError(artifact_path=str(path), cause=e) from e

    logger.debug("Wrote artifact %s (%d bytes)", path, len(text))
    return path


def write_json_artifact(path: Path, data: Any) -> Path:
    return write_artifact(path, dump_json(data))
