"""
Summary: Configuration lookup backed by the process environment or any mapping.
Why: Class path values arrive through environment variables in production.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from urlsource.features.location.usecases.ports import ConfigurationLookup


class EnvironmentLookup(ConfigurationLookup):
    """Read configuration values from ``env`` (``os.environ`` by default).

    The mapping is consulted on every call so changes to the environment
    between resolutions are picked up.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get(self, name: str) -> str | None:
        value = self._env.get(name)
        if value is None or not value.strip():
            return None
        return value


__all__ = ["EnvironmentLookup"]
