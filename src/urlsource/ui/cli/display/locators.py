"""Rendering of resolved locators and decoded paths."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from urlsource.features.location import LocationSource, LocatorKind

_KIND_STYLES: dict[LocatorKind, str] = {
    LocatorKind.DIRECTORY: "green",
    LocatorKind.ARCHIVE: "magenta",
}


@final
class LocatorDisplay:
    """Print location sources and decoded paths to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()

    def show_source(self, source: LocationSource) -> None:
        """Render a table of locators in resolution order."""

        if not source:
            self.console.print("[yellow]No locators resolved[/yellow]")
            return

        table = Table(title=f"Resolved locators ({len(source)})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind")
        table.add_column("Locator", overflow="fold")
        for index, locator in enumerate(source, start=1):
            style = _KIND_STYLES[locator.kind]
            table.add_row(str(index), f"[{style}]{locator.kind.value}[/{style}]", escape(locator.url))
        self.console.print(table)

    def show_json(self, source: LocationSource) -> None:
        """Print the locators as a JSON array of strings."""

        self.console.print_json(json.dumps(source.urls()))

    def show_decoded(self, rows: Sequence[tuple[str, Path]]) -> None:
        """Print ``locator -> path`` pairs."""

        for url, path in rows:
            self.console.print(f"{escape(url)} [dim]→[/dim] {escape(str(path))}", highlight=False)


__all__ = ["LocatorDisplay"]
