"""
Summary: Split delimited class path strings into individual path entries.
Why: Entry extraction is pure string logic shared by every configuration origin.
"""

from __future__ import annotations

import os


def split_path_entries(raw: str | None, separator: str | None = None) -> list[str]:
    """Split a class path value into entries, dropping blank ones.

    Non-blank entries are kept verbatim, surrounding spaces included.

    Args:
        raw: Raw configuration value; ``None`` or blank yields no entries.
        separator: Path separator character. Defaults to ``os.pathsep``.

    Returns:
        list[str]: Entries in left-to-right order.

    Raises:
        ValueError: ``separator`` is an empty string.
    """
    sep = os.pathsep if separator is None else separator
    if not sep:
        raise ValueError("Path separator must not be empty")
    if not raw:
        return []

    return [chunk for chunk in raw.split(sep) if chunk.strip()]


__all__ = ["split_path_entries"]
