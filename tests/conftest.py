"""Shared pytest fixtures for location resolution tests."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest

from urlsource.config.config import Config


class FakeFilesystemProbe:
    """In-memory filesystem probe with a fixed working directory."""

    def __init__(
        self,
        directories: Iterable[str] = (),
        files: Iterable[str] = (),
        cwd: str = "/work",
    ) -> None:
        self.directories: set[str] = {os.path.normpath(d) for d in directories}
        self.files: set[str] = {os.path.normpath(f) for f in files}
        self._cwd = Path(cwd)
        self.queried: list[str] = []

    def is_directory(self, path: str) -> bool:
        self.queried.append(path)
        return os.path.normpath(path) in self.directories

    def exists(self, path: str) -> bool:
        normalized = os.path.normpath(path)
        return normalized in self.directories or normalized in self.files

    def cwd(self) -> Path:
        return self._cwd


@pytest.fixture
def fake_probe() -> FakeFilesystemProbe:
    """Probe knowing the directories used by the class path examples."""

    return FakeFilesystemProbe(
        directories=[
            "/some/path/classes",
            "/more/classes",
            "/some/bootstrap/classes",
            "/a/classes",
            "/b/classes",
            "/work/classes",
        ],
        files=["/other/lib/some.jar"],
    )


@pytest.fixture(autouse=True)
def reset_config_cache() -> Iterator[None]:
    """Keep cached configuration from leaking between tests."""

    Config.reset()
    yield None
    Config.reset()


@pytest.fixture
def make_probe() -> type[FakeFilesystemProbe]:
    """Expose the fake probe class so tests can build custom layouts."""

    return FakeFilesystemProbe
