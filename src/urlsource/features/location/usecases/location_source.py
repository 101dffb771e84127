"""
Summary: Deduplicated, insertion-ordered collection of locators and its constructors.
Why: Make uniqueness and first-seen ordering structural instead of incidental.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import final

from urlsource.features.location.domain.classpath import split_path_entries
from urlsource.features.location.domain.locator import InvalidLocatorError, Locator
from urlsource.platform.logging import logger

from .classifier import entry_to_locator
from .ports import ConfigurationLookup, FilesystemProbe


@final
class LocationSource:
    """Read-only ordered set of :class:`Locator` values.

    Iteration yields each locator once, in first-insertion order, and can be
    repeated any number of times.
    """

    __slots__ = ("_locators",)

    def __init__(self, locators: Iterable[Locator] = ()) -> None:
        self._locators: dict[Locator, None] = dict.fromkeys(locators)

    @classmethod
    def from_locators(cls, locators: Iterable[Locator | str]) -> LocationSource:
        """Collect ``locators`` keeping the first occurrence of each.

        Plain strings are validated through :meth:`Locator.parse`.
        """
        return cls(
            item if isinstance(item, Locator) else Locator.parse(item)
            for item in locators
        )

    @classmethod
    def from_configuration_origins(
        cls,
        names: Sequence[str],
        *,
        lookup: ConfigurationLookup,
        probe: FilesystemProbe,
        separator: str | None = None,
    ) -> LocationSource:
        """Resolve the named configuration origins into a location source.

        Origins are read in the given order; an origin without a value
        contributes nothing. Entries are classified in split order and merged
        across origins, keeping the first occurrence of every locator.

        Args:
            names: Origin names, primary first.
            lookup: Source of raw configuration values.
            probe: Filesystem capability used for classification.
            separator: Path separator; the platform's ``os.pathsep`` by default.

        Returns:
            LocationSource: The merged, deduplicated locators.

        Raises:
            UnencodablePathError: An entry cannot be expressed as a locator.
                No partial result is produced.
        """
        collected: dict[Locator, None] = {}
        duplicate_count = 0

        for name in names:
            raw = lookup.get(name)
            if not raw:
                logger.debug(
                    "Configuration origin %s is not set",
                    name,
                    extra={"resolution_event": "resolution.origin.absent", "origin": name},
                )
                continue

            entries = split_path_entries(raw, separator)
            logger.debug(
                "Configuration origin %s holds %d entries",
                name,
                len(entries),
                extra={
                    "resolution_event": "resolution.origin.loaded",
                    "origin": name,
                    "entry_count": len(entries),
                },
            )
            for entry in entries:
                locator = entry_to_locator(entry, probe)
                if locator in collected:
                    duplicate_count += 1
                    logger.debug(
                        "Skipping duplicate locator %s",
                        locator.url,
                        extra={
                            "resolution_event": "resolution.entry.duplicate",
                            "locator": locator.url,
                        },
                    )
                    continue
                collected[locator] = None

        logger.debug(
            "Resolved %d locators from %d origins",
            len(collected),
            len(names),
            extra={
                "resolution_event": "resolution.complete",
                "origin_count": len(names),
                "locator_count": len(collected),
                "duplicate_count": duplicate_count,
            },
        )
        return cls(collected)

    def __len__(self) -> int:
        return len(self._locators)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            try:
                item = Locator.parse(item)
            except InvalidLocatorError:
                return False
        return item in self._locators

    def __iter__(self) -> Iterator[Locator]:
        return iter(tuple(self._locators))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocationSource):
            return NotImplemented
        return list(self._locators) == list(other._locators)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        urls = ", ".join(locator.url for locator in self._locators)
        return f"LocationSource([{urls}])"

    def urls(self) -> list[str]:
        """Return the locator strings in iteration order."""

        return [locator.url for locator in self._locators]


__all__ = ["LocationSource"]
