"""Registry definition loading."""

from __future__ import annotations

from regbuild.registry.loader import load_registry

__all__ = ["load_registry"]
