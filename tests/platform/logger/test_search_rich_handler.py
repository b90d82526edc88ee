"""Tests for the ``SearchRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from kpopneon.platform.logging import SearchRichHandler, setup_logger


def _make_handler() -> SearchRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return SearchRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with search extras for testing."""

    record = logging.LogRecord(
        name="kpopneon",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_success_event_includes_count_and_duration() -> None:
    handler = _make_handler()
    record = _build_record(
        search_event="search.success",
        query="Stray Kids",
        artist_count=3,
        duration_ms=241.7,
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert 'Found "Stray Kids" (3 artists, 242 ms)' in rendered.plain


def test_render_failure_event_includes_reason() -> None:
    handler = _make_handler()
    record = _build_record(search_event="search.failure", query="BTS", reason="ConnectionError")

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert 'Search failed "BTS" (ConnectionError)' in rendered.plain


def test_long_queries_are_truncated() -> None:
    handler = _make_handler()
    record = _build_record(search_event="search.start", query="x" * 100)

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "…" in rendered.plain
    assert "x" * 41 not in rendered.plain


def test_plain_messages_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_adds_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "kpopneon.log"
    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    try:
        logger.info("hello file")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello file" in log_file.read_text(encoding="utf-8")
        assert any(isinstance(h, SearchRichHandler) for h in logger.handlers)
    finally:
        _ = setup_logger(console_level=logging.WARNING)
