"""Display helpers for CLI output."""

from .locators import LocatorDisplay

__all__ = ["LocatorDisplay"]
