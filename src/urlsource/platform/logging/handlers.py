"""Rich console handler rendering resolution events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class LocatorRichHandler(RichHandler):
    """Rich handler that renders resolution events with compact paths."""

    _RESOLUTION_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "resolution.origin.absent": ("∅", "yellow"),
        "resolution.origin.loaded": ("📥", "cyan"),
        "resolution.entry.directory": ("📁", "green"),
        "resolution.entry.archive": ("📦", "magenta"),
        "resolution.entry.missing": ("⚠️", "yellow"),
        "resolution.entry.duplicate": ("↪️", "yellow"),
        "resolution.entry.error": ("⛔", "red"),
        "resolution.complete": ("✅", "green"),
    }
    _ENTRY_LABELS: ClassVar[dict[str, str]] = {
        "resolution.entry.directory": "Directory ",
        "resolution.entry.archive": "Archive ",
        "resolution.entry.missing": "Archive not found ",
        "resolution.entry.duplicate": "Duplicate ",
        "resolution.entry.error": "Unencodable ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with colored separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and self._is_relative_to(pure_path, base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = self._build_display_string(
            anchor=anchor,
            body_parts=body_parts,
            separator=separator,
            truncated=truncated,
            is_windows=isinstance(display_path, PureWindowsPath),
        )
        return self._style_path_string(display_string, separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _is_relative_to(path: PurePath, other: PurePath) -> bool:
        try:
            _ = path.relative_to(other)
            return True
        except ValueError:
            return False

    @staticmethod
    def _build_display_string(
        *,
        anchor: str,
        body_parts: list[str],
        separator: str,
        truncated: bool,
        is_windows: bool,
    ) -> str:
        display_string = ""
        if anchor:
            if is_windows:
                display_string = anchor.rstrip("\\/") + separator
            else:
                display_string = separator

        if truncated:
            display_string += "…"
            if body_parts:
                display_string += separator

        if body_parts:
            display_string += separator.join(body_parts)

        return display_string or "."

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_resolution_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured resolution events with dedicated styling."""

        event = getattr(record, "resolution_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._RESOLUTION_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("resolution.origin"):
            origin = getattr(record, "origin", None)
            if event == "resolution.origin.absent":
                _ = body.append(f"Origin {origin} not set")
            else:
                _ = body.append(f"Origin {origin}")
                entry_count = getattr(record, "entry_count", None)
                if isinstance(entry_count, int):
                    _ = body.append(f" [entries={entry_count}]")
        elif event == "resolution.complete":
            _ = body.append("Resolution complete")
            metrics: list[str] = []
            for key in ("origin_count", "locator_count", "duplicate_count"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key.removesuffix('_count')}s={value}")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        else:
            label = self._ENTRY_LABELS.get(event)
            if label:
                _ = body.append(label)
            entry_path = getattr(record, "entry_path", None)
            if entry_path:
                _ = body.append_text(
                    self._format_path(str(entry_path), base=getattr(record, "base_path", None))
                )
            locator = getattr(record, "locator", None)
            if locator and event != "resolution.entry.missing":
                _ = body.append(f" → {locator}" if entry_path else str(locator))
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        resolution_text = self._render_resolution_message(record)
        if resolution_text is not None:
            return resolution_text
        return super().render_message(record, message)


__all__ = ["LocatorRichHandler"]
