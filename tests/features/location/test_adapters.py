"""
Summary: Tests for the environment lookup and local filesystem probe adapters.
Why: Production resolution runs against real environment values and real directories.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from urlsource.features.location import (
    ConfigurationLookup,
    EnvironmentLookup,
    FilesystemProbe,
    LocalFilesystemProbe,
    LocationSource,
    Locator,
    LocatorKind,
)


def test_environment_lookup_reads_mapping() -> None:
    lookup = EnvironmentLookup({"CLASSPATH": "/a", "EMPTY": "", "BLANK": "  "})

    assert lookup.get("CLASSPATH") == "/a"
    assert lookup.get("EMPTY") is None
    assert lookup.get("BLANK") is None
    assert lookup.get("MISSING") is None


def test_environment_lookup_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("URLSOURCE_TEST_ORIGIN", "/from/env")
    lookup = EnvironmentLookup()

    assert lookup.get("URLSOURCE_TEST_ORIGIN") == "/from/env"

    monkeypatch.delenv("URLSOURCE_TEST_ORIGIN")
    assert lookup.get("URLSOURCE_TEST_ORIGIN") is None


def test_adapters_satisfy_ports() -> None:
    assert isinstance(EnvironmentLookup({}), ConfigurationLookup)
    assert isinstance(LocalFilesystemProbe(), FilesystemProbe)


def test_local_probe_queries_disk(tmp_path: Path) -> None:
    archive = tmp_path / "lib.jar"
    archive.write_bytes(b"PK")
    probe = LocalFilesystemProbe()

    assert probe.is_directory(str(tmp_path))
    assert not probe.is_directory(str(archive))
    assert probe.exists(str(archive))
    assert not probe.exists(str(tmp_path / "missing.jar"))
    assert probe.cwd() == Path.cwd()


def test_handles_paths_with_spaces(tmp_path: Path) -> None:
    path_with_spaces = tmp_path / "path with spaces"
    path_with_spaces.mkdir()
    destination = path_with_spaces / "UrlSourceTest.class"
    destination.write_bytes(b"\xca\xfe\xba\xbe")

    source = LocationSource.from_configuration_origins(
        ["CLASSPATH"],
        lookup=EnvironmentLookup({"CLASSPATH": str(destination)}),
        probe=LocalFilesystemProbe(),
    )

    assert Locator.archive(destination) in source
    (locator,) = list(source)
    assert "%20" in locator.url
    assert " " not in locator.url
    assert locator.to_path() == destination


def test_real_directories_with_spaces_become_directory_locators(tmp_path: Path) -> None:
    classes = tmp_path / "build dir" / "classes"
    classes.mkdir(parents=True)
    archive = tmp_path / "lib" / "dep.jar"
    value = os.pathsep.join([str(classes), str(archive)])

    source = LocationSource.from_configuration_origins(
        ["CLASSPATH"],
        lookup=EnvironmentLookup({"CLASSPATH": value}),
        probe=LocalFilesystemProbe(),
    )

    kinds = [locator.kind for locator in source]
    assert kinds == [LocatorKind.DIRECTORY, LocatorKind.ARCHIVE]
    assert [locator.to_path() for locator in source] == [classes, archive]


def test_relative_entries_use_process_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "classes").mkdir()
    monkeypatch.chdir(tmp_path)

    source = LocationSource.from_configuration_origins(
        ["CLASSPATH"],
        lookup=EnvironmentLookup({"CLASSPATH": "classes"}),
        probe=LocalFilesystemProbe(),
    )

    assert list(source) == [Locator.directory(Path.cwd() / "classes")]


def test_overlong_entry_is_classified_as_archive(tmp_path: Path) -> None:
    entry = tmp_path / ("a" * 300 + ".jar")
    probe = LocalFilesystemProbe()

    assert probe.is_directory(str(entry)) is False
    assert probe.exists(str(entry)) is False

    source = LocationSource.from_configuration_origins(
        ["CLASSPATH"],
        lookup=EnvironmentLookup({"CLASSPATH": str(entry)}),
        probe=probe,
    )

    assert list(source) == [Locator.archive(entry)]


@pytest.mark.skipif(os.name == "nt", reason="Windows drops trailing spaces from names")
def test_directory_names_keep_surrounding_spaces(tmp_path: Path) -> None:
    spaced = tmp_path / " classes "
    spaced.mkdir()

    source = LocationSource.from_configuration_origins(
        ["CLASSPATH"],
        lookup=EnvironmentLookup({"CLASSPATH": str(spaced)}),
        probe=LocalFilesystemProbe(),
    )

    assert list(source) == [Locator.directory(spaced)]
    assert source.urls()[0].endswith("/%20classes%20/")
