"""
Summary: Filesystem probe backed by the local disk.
Why: Keep pathlib calls in adapters while classification targets the port.
"""

from __future__ import annotations

from pathlib import Path

from urlsource.features.location.usecases.ports import FilesystemProbe


class LocalFilesystemProbe(FilesystemProbe):
    """Probe the real filesystem relative to the process working directory.

    Paths the operating system refuses to stat (too long, unreadable parent,
    invalid characters) report ``False`` instead of raising.
    """

    def is_directory(self, path: str) -> bool:
        try:
            return Path(path).is_dir()
        except (OSError, ValueError):
            return False

    def exists(self, path: str) -> bool:
        try:
            return Path(path).exists()
        except (OSError, ValueError):
            return False

    def cwd(self) -> Path:
        return Path.cwd()


__all__ = ["LocalFilesystemProbe"]
