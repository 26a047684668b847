"""Rich console handler rendering directory events.

Where: platform/logging/handlers.py
What: Format structured ``fs_event`` log records with icons, colours and compact paths.
Why: Keep console output readable when deep directory trees are created.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EventRichHandler(RichHandler):
    """Rich handler that styles directory and stream events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "ensure.created": ("📁", "green", "Created"),
        "ensure.exists": ("✔", "cyan", "Exists"),
        "ensure.mode_changed": ("🔒", "magenta", "Mode changed"),
        "ensure.parent_missing": ("↳", "yellow", "Parent missing"),
        "ensure.failed": ("⛔", "red", "Failed"),
        "stream.item.forwarded": ("➜", "blue", "Forwarded"),
        "stream.failed": ("❌", "red", "Stream failed"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators, keeping only its last segments."""

        display_path: PurePath = self._to_pure_path(path)
        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]

        prefix = anchor.rstrip("\\/") + separator if anchor else ""
        if truncated:
            prefix += "…" + separator
        rendered = prefix + separator.join(parts) or "."

        text = Text()
        for char in rendered:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured events; returns None for plain records."""

        event = getattr(record, "fs_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._EVENT_STYLES.get(event, ("ℹ️", "blue", event))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(label, style=Style(color=color))

        path = getattr(record, "path", None)
        if path:
            _ = text.append(" ")
            _ = text.append_text(self._format_path(str(path)))

        details: list[str] = []
        mode = getattr(record, "mode", None)
        if isinstance(mode, int):
            details.append(f"mode={mode:04o}")
        sequence = getattr(record, "sequence", None)
        if isinstance(sequence, int) and sequence > 0:
            details.append(f"item={sequence}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = text.append(" (" + ", ".join(details) + ")", style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["EventRichHandler"]
