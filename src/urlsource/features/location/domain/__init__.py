"""
Summary: Domain types for location resolution.
Why: Give use cases and adapters a single import path for locator values.
"""

from .classpath import split_path_entries
from .locator import (
    InvalidLocatorError,
    Locator,
    LocatorKind,
    UnencodablePathError,
    decode_path,
    encode_path,
)

__all__ = [
    "InvalidLocatorError",
    "Locator",
    "LocatorKind",
    "UnencodablePathError",
    "decode_path",
    "encode_path",
    "split_path_entries",
]
