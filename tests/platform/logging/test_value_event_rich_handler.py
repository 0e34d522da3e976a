"""Tests for the ``ValueEventRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from pytest_mock import MockerFixture
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from devprops.platform.logging import ValueEventRichHandler


def _make_handler() -> ValueEventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return ValueEventRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with the given extras."""

    record = logging.LogRecord(
        name="devprops",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_unknown_type_event_shows_tag() -> None:
    """Unknown declared type events name the offending tag."""

    handler = _make_handler()
    record = _build_record(value_event="value.type.unknown", type_tag="xs:string")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Unknown declared type" in rendered.plain
    assert "tag='xs:string'" in rendered.plain


def test_render_config_event_shows_path() -> None:
    """Configuration events include the file path."""

    handler = _make_handler()
    record = _build_record(value_event="config.loaded", config_path="/etc/devprops.toml")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Configuration loaded" in rendered.plain
    assert "/etc/devprops.toml" in rendered.plain


def test_render_unlisted_event_uses_event_name() -> None:
    """Events without a registered style fall back to their name."""

    handler = _make_handler()
    record = _build_record(value_event="value.custom")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "value.custom" in rendered.plain


def test_plain_records_use_default_rendering(mocker: MockerFixture) -> None:
    """Records without an event defer to RichHandler."""

    handler = _make_handler()
    parent = mocker.spy(RichHandler, "render_message")
    record = _build_record("plain message")

    _ = handler.render_message(record, "plain message")

    parent.assert_called_once()


def test_emit_writes_to_console() -> None:
    """Handled records reach the configured console."""

    stream = StringIO()
    handler = ValueEventRichHandler(console=Console(file=stream, force_terminal=False, width=120))
    handler.handle(_build_record(value_event="config.saved", config_path="/tmp/c.toml"))

    assert "Configuration saved" in stream.getvalue()
