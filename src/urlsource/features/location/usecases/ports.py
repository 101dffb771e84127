"""
Summary: Ports describing the configuration and filesystem access location resolution needs.
Why: Let use cases run against fakes in tests and against the process in production.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigurationLookup(Protocol):
    """Read-only access to named configuration values."""

    def get(self, name: str) -> str | None:
        """Return the raw value for ``name`` or ``None`` when absent."""
        ...


@runtime_checkable
class FilesystemProbe(Protocol):
    """Minimal filesystem queries used during classification."""

    def is_directory(self, path: str) -> bool:
        """Return True when ``path`` names an existing directory."""
        ...

    def exists(self, path: str) -> bool:
        """Return True when anything exists at ``path``."""
        ...

    def cwd(self) -> Path:
        """Return the directory relative entries are resolved against."""
        ...


__all__ = ["ConfigurationLookup", "FilesystemProbe"]
