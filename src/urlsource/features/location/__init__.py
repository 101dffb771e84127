"""
Summary: Export location feature domain, use case, and adapter symbols.
Why: Provide a stable import surface for the application layer and tests.
"""

from .adapters import EnvironmentLookup, LocalFilesystemProbe
from .domain import (
    InvalidLocatorError,
    Locator,
    LocatorKind,
    UnencodablePathError,
    split_path_entries,
)
from .usecases import (
    ConfigurationLookup,
    FilesystemProbe,
    LocationSource,
    absolute_entry_path,
    classify_entry,
    entry_to_locator,
)

__all__ = [
    "ConfigurationLookup",
    "EnvironmentLookup",
    "FilesystemProbe",
    "InvalidLocatorError",
    "LocalFilesystemProbe",
    "LocationSource",
    "Locator",
    "LocatorKind",
    "UnencodablePathError",
    "absolute_entry_path",
    "classify_entry",
    "entry_to_locator",
    "split_path_entries",
]
