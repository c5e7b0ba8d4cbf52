"""Rich console handler for countdown events.

Where: platform/logging/handlers.py
What: Render structured ``countdown_event`` log records with icons and colours.
Why: Keep console formatting out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class CountdownRichHandler(RichHandler):
    """Rich handler that renders countdown lifecycle events compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "countdown.parse.success": ("🎯", "cyan"),
        "countdown.parse.error": ("⛔", "red"),
        "countdown.wait.start": ("⏳", "blue"),
        "countdown.wait.complete": ("✅", "green"),
        "countdown.wait.cancelled": ("↪️", "yellow"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render a structured countdown event, or ``None`` for plain records."""

        event = getattr(record, "countdown_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        details: list[str] = []
        end_time = getattr(record, "end_time", None)
        if end_time is not None:
            details.append(f"end={end_time}")
        quiet = getattr(record, "quiet", None)
        if quiet:
            details.append("quiet")
        tokens = getattr(record, "tokens", None)
        if tokens:
            details.append("tokens=" + " ".join(str(token) for token in tokens))
        if details:
            _ = text.append(" [" + ", ".join(details) + "]", style=Style(color="white"))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for countdown events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["CountdownRichHandler"]
