"""
Summary: Tests for directory-versus-archive classification of path entries.
Why: Classification drives the locator shape and must be stable and idempotent.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import pytest

from urlsource.features.location import (
    Locator,
    LocatorKind,
    UnencodablePathError,
    absolute_entry_path,
    classify_entry,
    entry_to_locator,
)

pytestmark = pytest.mark.skipif(os.name == "nt", reason="Uses POSIX absolute paths")


def test_existing_directory_becomes_directory_locator(fake_probe: Any) -> None:
    assert classify_entry("/some/path/classes", fake_probe) is LocatorKind.DIRECTORY
    assert entry_to_locator("/some/path/classes", fake_probe) == Locator("file:/some/path/classes/")


def test_non_directory_becomes_archive_locator(fake_probe: Any) -> None:
    assert classify_entry("/other/lib/some.jar", fake_probe) is LocatorKind.ARCHIVE
    assert entry_to_locator("/other/lib/some.jar", fake_probe) == Locator(
        "jar:file:/other/lib/some.jar!/"
    )


def test_missing_path_is_optimistically_an_archive(fake_probe: Any) -> None:
    locator = entry_to_locator("/typo/clases", fake_probe)

    assert locator.kind is LocatorKind.ARCHIVE
    assert locator.url == "jar:file:/typo/clases!/"


def test_relative_entries_resolve_against_probe_cwd(fake_probe: Any) -> None:
    assert absolute_entry_path("lib/a.jar", fake_probe) == "/work/lib/a.jar"
    assert entry_to_locator("lib/a.jar", fake_probe).url == "jar:file:/work/lib/a.jar!/"
    assert entry_to_locator("./classes/../classes/", fake_probe).url == "file:/work/classes/"


def test_trailing_separator_does_not_change_locator(fake_probe: Any) -> None:
    assert entry_to_locator("/more/classes/", fake_probe) == entry_to_locator(
        "/more/classes", fake_probe
    )


def test_blank_entry_is_rejected(fake_probe: Any) -> None:
    with pytest.raises(ValueError):
        _ = entry_to_locator("   ", fake_probe)


def test_nul_entry_fails_before_probing(fake_probe: Any) -> None:
    with pytest.raises(UnencodablePathError):
        _ = entry_to_locator("/bad\x00entry", fake_probe)

    assert fake_probe.queried == []


def test_round_trip_through_decoded_path(fake_probe: Any) -> None:
    for entry in ["/some/path/classes", "/other/lib/some.jar", "rel/dir with space"]:
        locator = entry_to_locator(entry, fake_probe)
        assert entry_to_locator(str(locator.to_path()), fake_probe) == locator


def test_missing_archive_is_logged(fake_probe: Any, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="urlsource")

    _ = entry_to_locator("/nowhere/lib.jar", fake_probe)
    _ = entry_to_locator("/other/lib/some.jar", fake_probe)

    missing = [
        record
        for record in caplog.records
        if getattr(record, "resolution_event", None) == "resolution.entry.missing"
    ]
    assert [getattr(record, "entry_path") for record in missing] == ["/nowhere/lib.jar"]


def test_unencodable_entry_is_logged_as_error(
    make_probe: Any, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger="urlsource")
    probe = make_probe(cwd="/work")

    with pytest.raises(UnencodablePathError):
        _ = entry_to_locator("/lib/\ud800.jar", probe)

    assert any(
        getattr(record, "resolution_event", None) == "resolution.entry.error"
        and record.levelno == logging.ERROR
        for record in caplog.records
    )


def test_make_probe_cwd_is_used(make_probe: Any) -> None:
    probe = make_probe(directories=["/srv/app/classes"], cwd="/srv/app")

    assert probe.cwd() == Path("/srv/app")
    assert entry_to_locator("classes", probe).url == "file:/srv/app/classes/"
