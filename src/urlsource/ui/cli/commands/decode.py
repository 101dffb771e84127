"""Decode command implementation."""

from pathlib import Path
from typing import final, override

from urlsource.features.location import Locator
from urlsource.ui.cli.args.options import DecodeArgs
from urlsource.ui.cli.commands.executor import CommandExecutor


@final
class DecodeCommand(CommandExecutor[DecodeArgs, list[tuple[str, Path]]]):
    """Turn locator URLs back into filesystem paths."""

    @override
    def execute(self) -> list[tuple[str, Path]]:
        rows: list[tuple[str, Path]] = []
        for raw in self.args.locators:
            locator = Locator.parse(raw)
            rows.append((locator.url, locator.to_path()))
        self.display.show_decoded(rows)
        return rows
