"""
urlsource: resolve class path style strings into deduplicated locator URLs.

Quick-start::

    from urlsource import from_configuration_origins
    for locator in from_configuration_origins(["CLASSPATH"]):
        print(locator.url)
"""

from __future__ import annotations

from urlsource.application.services import (
    ResolutionRequest,
    ResolutionService,
    from_class_path_origins,
    from_configuration_origins,
    from_locators,
)
from urlsource.features.location import (
    ConfigurationLookup,
    EnvironmentLookup,
    FilesystemProbe,
    InvalidLocatorError,
    LocalFilesystemProbe,
    LocationSource,
    Locator,
    LocatorKind,
    UnencodablePathError,
    classify_entry,
    entry_to_locator,
    split_path_entries,
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
    "ResolutionRequest",
    "ResolutionService",
    "UnencodablePathError",
    "classify_entry",
    "entry_to_locator",
    "from_class_path_origins",
    "from_configuration_origins",
    "from_locators",
    "split_path_entries",
]
