"""
Summary: Adapters implementing location resolution ports.
Why: Group process-facing implementations away from the use cases.
"""

from .environment_lookup import EnvironmentLookup
from .local_filesystem import LocalFilesystemProbe

__all__ = ["EnvironmentLookup", "LocalFilesystemProbe"]
