"""Rich console handler for devprops log records.

Where: platform/logging/handlers.py
What: Render structured value events with icons and colors on the console.
Why: Keep event formatting apart from logger setup.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ValueEventRichHandler(RichHandler):
    """Rich handler that styles records carrying a ``value_event`` extra."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "value.type.unknown": ("❔", "yellow", "Unknown declared type"),
        "config.loaded": ("⚙️", "cyan", "Configuration loaded"),
        "config.saved": ("💾", "green", "Configuration saved"),
        "config.defaulted": ("ℹ️", "blue", "Configuration defaults in use"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact console settings."""
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_value_event(self, record: logging.LogRecord) -> Text | None:
        """Render a structured event, or None when the record carries none."""

        event = getattr(record, "value_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._EVENT_STYLES.get(event, ("ℹ️", "blue", event))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(label, style=Style(color=color))

        details: list[str] = []
        type_tag = getattr(record, "type_tag", None)
        if event == "value.type.unknown":
            details.append(f"tag={type_tag!r}")
        config_path = getattr(record, "config_path", None)
        if config_path:
            details.append(str(config_path))
        if details:
            _ = text.append(" [" + ", ".join(details) + "]", style=Style(color="white"))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for value events."""

        event_text = self._render_value_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["ValueEventRichHandler"]
