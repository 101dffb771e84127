"""
Summary: Classify path entries as directories or archives and build their locators.
Why: The directory-versus-archive decision is a runtime filesystem query kept behind a port.
"""

from __future__ import annotations

import os

from urlsource.features.location.domain.locator import (
    Locator,
    LocatorKind,
    UnencodablePathError,
)
from urlsource.platform.logging import logger

from .ports import FilesystemProbe


def absolute_entry_path(entry: str, probe: FilesystemProbe) -> str:
    """Return ``entry`` as a lexically normalized absolute path.

    Relative entries are anchored at ``probe.cwd()``. Symlinks are left
    untouched so locators mirror what the configuration names. Surrounding
    spaces are part of the name.
    """
    candidate = entry
    if not os.path.isabs(candidate):
        candidate = os.path.join(os.fspath(probe.cwd()), candidate)
    return os.path.normpath(candidate)


def classify_entry(entry: str, probe: FilesystemProbe) -> LocatorKind:
    """Return the locator shape for ``entry``.

    Anything that is not an existing directory is treated as an archive,
    whether or not the archive exists.
    """
    if probe.is_directory(absolute_entry_path(entry, probe)):
        return LocatorKind.DIRECTORY
    return LocatorKind.ARCHIVE


def entry_to_locator(entry: str, probe: FilesystemProbe) -> Locator:
    """Convert one path entry into its locator.

    Args:
        entry: Non-empty path entry, absolute or relative.
        probe: Filesystem capability used for classification.

    Returns:
        Locator: Directory or archive locator for the entry.

    Raises:
        ValueError: ``entry`` is blank.
        UnencodablePathError: The entry cannot be expressed as a locator.
    """
    if not entry.strip():
        raise ValueError("Path entry must not be empty")

    if "\x00" in entry:
        # Reject before touching the filesystem; NUL never names a real path.
        raise UnencodablePathError(entry, "contains a NUL character")

    path = absolute_entry_path(entry, probe)
    base_path = None if os.path.isabs(entry) else os.fspath(probe.cwd())

    try:
        if probe.is_directory(path):
            locator = Locator.directory(path)
            event = "resolution.entry.directory"
        else:
            locator = Locator.archive(path)
            event = "resolution.entry.archive"
    except UnencodablePathError as exc:
        logger.error(
            "Cannot encode class path entry %r: %s",
            entry,
            exc.reason,
            extra={
                "resolution_event": "resolution.entry.error",
                "entry_path": path,
                "error_message": exc.reason,
            },
        )
        raise

    logger.debug(
        "Resolved %s to %s",
        path,
        locator.url,
        extra={
            "resolution_event": event,
            "entry_path": path,
            "base_path": base_path,
            "locator": locator.url,
        },
    )
    if locator.kind is LocatorKind.ARCHIVE and not probe.exists(path):
        logger.debug(
            "Archive entry %s does not exist",
            path,
            extra={"resolution_event": "resolution.entry.missing", "entry_path": path},
        )
    return locator


__all__ = ["absolute_entry_path", "classify_entry", "entry_to_locator"]
