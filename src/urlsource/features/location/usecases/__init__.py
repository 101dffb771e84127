"""
Summary: Use cases resolving configuration origins into location sources.
Why: Offer one import path for classification, ports, and the location source.
"""

from .classifier import absolute_entry_path, classify_entry, entry_to_locator
from .location_source import LocationSource
from .ports import ConfigurationLookup, FilesystemProbe

__all__ = [
    "ConfigurationLookup",
    "FilesystemProbe",
    "LocationSource",
    "absolute_entry_path",
    "classify_entry",
    "entry_to_locator",
]
