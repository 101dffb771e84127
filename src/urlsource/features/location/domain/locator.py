"""
Summary: Locator value object plus path encoding and decoding helpers.
Why: Keep the two locator shapes and their escaping rules in one place.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath
from typing import ClassVar, final
from urllib.parse import quote, unquote_to_bytes

FILE_SCHEME: str = "file:"
ARCHIVE_PREFIX: str = "jar:"
ARCHIVE_ROOT_MARKER: str = "!/"

# Characters left as-is besides ASCII letters, digits and "_.-~".
# "!" is deliberately absent so the archive root marker stays unambiguous.
_SAFE_CHARACTERS: str = "/:@$&'()*+,;="

_DRIVE_PATH: re.Pattern[str] = re.compile(r"^/[A-Za-z]:")

# POSIX paths are byte strings; undecodable bytes travel as surrogate escapes.
_PATH_ERRORS: str = "strict" if os.name == "nt" else "surrogateescape"


class LocatorKind(Enum):
    """Shape of a locator."""

    DIRECTORY = "directory"
    ARCHIVE = "archive"


class UnencodablePathError(ValueError):
    """Raised when a path entry cannot be expressed as a valid locator."""

    def __init__(self, entry: str, reason: str) -> None:
        self.entry: str = entry
        self.reason: str = reason
        super().__init__(f"Cannot encode path entry {entry!r}: {reason}")


class InvalidLocatorError(ValueError):
    """Raised when a string is not a directory or archive locator."""

    def __init__(self, url: str, reason: str) -> None:
        self.url: str = url
        self.reason: str = reason
        super().__init__(f"Invalid locator {url!r}: {reason}")


def encode_path(path: str | PurePath) -> str:
    """Percent-encode an absolute filesystem path into a locator path.

    Args:
        path: Absolute path in native form.

    Returns:
        str: Slash separated, percent-encoded path starting with ``/``.

    Raises:
        UnencodablePathError: The path holds a NUL character or text that
            cannot be encoded as UTF-8. On POSIX, surrogate escapes produced
            by the filesystem encoding are written back as their raw bytes.
    """
    raw = str(path)
    if "\x00" in raw:
        raise UnencodablePathError(raw, "contains a NUL character")

    if os.sep != "/":
        posix = PurePath(raw).as_posix()
    else:
        # "//x" would otherwise read back as a host named "x".
        posix = "/" + raw.lstrip("/") if raw.startswith("//") else raw
    if not posix.startswith("/"):
        posix = "/" + posix

    try:
        raw_bytes = posix.encode("utf-8", _PATH_ERRORS)
    except UnicodeEncodeError as exc:
        raise UnencodablePathError(raw, f"not representable as UTF-8 ({exc.reason})") from exc
    return quote(raw_bytes, safe=_SAFE_CHARACTERS)


def decode_path(encoded: str) -> Path:
    """Reverse :func:`encode_path`, returning the native absolute path."""

    try:
        decoded = unquote_to_bytes(encoded).decode("utf-8", _PATH_ERRORS)
    except UnicodeDecodeError as exc:
        raise InvalidLocatorError(encoded, "escaped bytes are not valid UTF-8") from exc
    if os.name == "nt" and _DRIVE_PATH.match(decoded):
        decoded = decoded[1:]
    if len(decoded) > 1 and decoded.endswith("/"):
        decoded = decoded.rstrip("/") or "/"
    return Path(decoded)


@final
@dataclass(frozen=True, slots=True)
class Locator:
    """Normalized absolute reference to a directory or an archive root.

    Equality and hashing use the URL string only, so two locators built from
    the same path compare equal no matter how they were produced.
    """

    url: str

    DIRECTORY_SUFFIX: ClassVar[str] = "/"

    @classmethod
    def directory(cls, path: str | PurePath) -> Locator:
        """Build a ``file:`` locator with a trailing slash."""

        encoded = encode_path(path)
        if not encoded.endswith(cls.DIRECTORY_SUFFIX):
            encoded += cls.DIRECTORY_SUFFIX
        return cls(f"{FILE_SCHEME}{encoded}")

    @classmethod
    def archive(cls, path: str | PurePath) -> Locator:
        """Build a ``jar:file:`` locator pointing at the archive root."""

        encoded = encode_path(path)
        if len(encoded) > 1:
            encoded = encoded.rstrip("/")
        return cls(f"{ARCHIVE_PREFIX}{FILE_SCHEME}{encoded}{ARCHIVE_ROOT_MARKER}")

    @classmethod
    def parse(cls, url: str) -> Locator:
        """Validate an existing locator string and return its canonical form.

        ``file:///x/`` style URLs (empty authority) are accepted. The path is
        decoded and encoded again, so ``file:/a b/`` and ``file:/a%20b/``
        yield the same locator as ``Locator.directory("/a b")``.

        Raises:
            InvalidLocatorError: The string is neither locator shape, or its
                decoded path cannot name a file.
        """
        candidate = url.strip()
        is_archive = candidate.startswith(ARCHIVE_PREFIX)
        body = candidate[len(ARCHIVE_PREFIX):] if is_archive else candidate

        if not body.startswith(FILE_SCHEME):
            raise InvalidLocatorError(url, "expected a file: URL")
        path_part = body[len(FILE_SCHEME):]
        if path_part.startswith("//"):
            authority, _, rest = path_part[2:].partition("/")
            if authority:
                raise InvalidLocatorError(url, f"unsupported host {authority!r}")
            path_part = "/" + rest
        if not path_part.startswith("/"):
            raise InvalidLocatorError(url, "path must be absolute")

        if is_archive:
            if not path_part.endswith(ARCHIVE_ROOT_MARKER):
                raise InvalidLocatorError(url, "archive locator must end with '!/'")
            inner = path_part[: -len(ARCHIVE_ROOT_MARKER)]
            if "!" in inner:
                raise InvalidLocatorError(url, "unescaped '!' inside archive path")
            return cls._canonical(url, inner, LocatorKind.ARCHIVE)

        if not path_part.endswith(cls.DIRECTORY_SUFFIX):
            raise InvalidLocatorError(url, "directory locator must end with '/'")
        return cls._canonical(url, path_part, LocatorKind.DIRECTORY)

    @classmethod
    def _canonical(cls, url: str, encoded: str, kind: LocatorKind) -> Locator:
        path = decode_path(encoded)
        try:
            if kind is LocatorKind.ARCHIVE:
                return cls.archive(path)
            return cls.directory(path)
        except UnencodablePathError as exc:
            raise InvalidLocatorError(url, exc.reason) from exc

    @property
    def kind(self) -> LocatorKind:
        if self.url.startswith(ARCHIVE_PREFIX):
            return LocatorKind.ARCHIVE
        return LocatorKind.DIRECTORY

    def to_path(self) -> Path:
        """Decode the locator back into the absolute filesystem path."""

        body = self.url
        if self.kind is LocatorKind.ARCHIVE:
            body = body[len(ARCHIVE_PREFIX): -len(ARCHIVE_ROOT_MARKER)]
        return decode_path(body[len(FILE_SCHEME):])

    def __str__(self) -> str:
        return self.url


__all__ = [
    "ARCHIVE_PREFIX",
    "ARCHIVE_ROOT_MARKER",
    "FILE_SCHEME",
    "InvalidLocatorError",
    "Locator",
    "LocatorKind",
    "UnencodablePathError",
    "decode_path",
    "encode_path",
]
