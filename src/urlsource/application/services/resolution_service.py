"""src/urlsource/application/services/resolution_service.py
What: Wire location resolution use cases to the process environment and local disk.
Why: Keep default adapter selection out of the use cases and in one place for callers.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import final

from urlsource.config.config import Config
from urlsource.features.location import (
    ConfigurationLookup,
    EnvironmentLookup,
    FilesystemProbe,
    LocalFilesystemProbe,
    LocationSource,
    Locator,
)

LITERAL_ORIGIN_PREFIX = "<classpath "


@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    """Inputs for one resolution run."""

    origins: tuple[str, ...]
    class_paths: tuple[str, ...] = field(default_factory=tuple)
    separator: str | None = None


class _LiteralOverlayLookup(ConfigurationLookup):
    """Serve literal class path strings ahead of a delegate lookup."""

    def __init__(self, literals: dict[str, str], delegate: ConfigurationLookup) -> None:
        self._literals = literals
        self._delegate = delegate

    def get(self, name: str) -> str | None:
        if name in self._literals:
            return self._literals[name]
        return self._delegate.get(name)


@final
class ResolutionService:
    """Resolve configuration origins with injectable lookup and probe."""

    def __init__(
        self,
        lookup: ConfigurationLookup | None = None,
        probe: FilesystemProbe | None = None,
    ) -> None:
        self.lookup: ConfigurationLookup = lookup or EnvironmentLookup()
        self.probe: FilesystemProbe = probe or LocalFilesystemProbe()

    def resolve(self, request: ResolutionRequest) -> LocationSource:
        """Resolve named origins first, then literal class path strings."""

        literals = {
            f"{LITERAL_ORIGIN_PREFIX}{index}>": value
            for index, value in enumerate(request.class_paths, start=1)
        }
        lookup = (
            _LiteralOverlayLookup(literals, self.lookup) if literals else self.lookup
        )
        return LocationSource.from_configuration_origins(
            [*request.origins, *literals],
            lookup=lookup,
            probe=self.probe,
            separator=request.separator,
        )


def from_locators(locators: Iterable[Locator | str]) -> LocationSource:
    """Build a location source from already formed locators."""

    return LocationSource.from_locators(locators)


def from_configuration_origins(
    names: Sequence[str],
    *,
    lookup: ConfigurationLookup | None = None,
    probe: FilesystemProbe | None = None,
    separator: str | None = None,
) -> LocationSource:
    """Resolve ``names`` against the environment (or ``lookup``)."""

    service = ResolutionService(lookup=lookup, probe=probe)
    return service.resolve(ResolutionRequest(origins=tuple(names), separator=separator))


def from_class_path_origins(
    *,
    lookup: ConfigurationLookup | None = None,
    probe: FilesystemProbe | None = None,
    config: Config | None = None,
) -> LocationSource:
    """Resolve the configured primary and bootstrap class path origins."""

    configuration = config or Config.load()
    return from_configuration_origins(configuration.origins, lookup=lookup, probe=probe)


__all__ = [
    "ResolutionRequest",
    "ResolutionService",
    "from_class_path_origins",
    "from_configuration_origins",
    "from_locators",
]
