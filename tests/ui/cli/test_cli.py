"""Tests for the command processor end to end."""

import json
import os
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from urlsource.features.location import Locator, UnencodablePathError
from urlsource.ui.cli import CommandProcessor
from urlsource.ui.cli.commands import ResolveCommand


@pytest.fixture(autouse=True)
def quiet_logging(mocker: MockerFixture, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Avoid writing log files and point config lookups at a temp location."""

    _ = mocker.patch("urlsource.ui.cli.args.parser.setup_logger")
    monkeypatch.setenv("URLSOURCE_CONFIG", str(tmp_path / "config" / "config.toml"))


def test_resolve_prints_json(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    classes = tmp_path / "classes"
    classes.mkdir()
    archive = tmp_path / "lib" / "dep.jar"
    monkeypatch.setenv("URLSOURCE_TEST_CP", os.pathsep.join([str(classes), str(archive), str(classes)]))

    CommandProcessor.process_command(["resolve", "--origin", "URLSOURCE_TEST_CP", "--json"])

    assert json.loads(capsys.readouterr().out) == [
        Locator.directory(classes).url,
        Locator.archive(archive).url,
    ]


def test_resolve_literal_class_path_table(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    CommandProcessor.process_command(["resolve", "--classpath", str(tmp_path)])

    output = capsys.readouterr().out
    assert "Resolved locators (1)" in output


def test_resolve_with_nothing_configured(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("URLSOURCE_TEST_NONE", raising=False)

    CommandProcessor.process_command(["resolve", "--origin", "URLSOURCE_TEST_NONE", "--json"])

    assert json.loads(capsys.readouterr().out) == []


@pytest.mark.skipif(os.name == "nt", reason="Uses POSIX absolute paths")
def test_decode_prints_paths(capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["decode", "jar:file:/opt/lib/a%20b.jar!/"])

    assert "/opt/lib/a b.jar" in capsys.readouterr().out


def test_invalid_locator_exits_with_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["decode", "http://example.com/"])

    assert exc_info.value.code == 1


def test_unencodable_entry_exits_with_error(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(
        ResolveCommand, "execute", side_effect=UnencodablePathError("/x", "bad")
    )

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["resolve"])

    assert exc_info.value.code == 1


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(ResolveCommand, "execute", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["resolve"])

    assert exc_info.value.code == 130


def test_init_config_writes_once(tmp_path: Path) -> None:
    target = tmp_path / "generated.toml"

    CommandProcessor.process_command(["--config", str(target), "init-config"])
    assert target.exists()
    assert "origins = [\"CLASSPATH\", \"BOOT_CLASSPATH\"]" in target.read_text(encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["--config", str(target), "init-config"])
    assert exc_info.value.code == 1

    CommandProcessor.process_command(["--config", str(target), "init-config", "--force"])
