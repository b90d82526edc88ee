"""Rich console handler for search events.

Where: platform/logging/handlers.py
What: Render structured ``search_event`` log records with icons and colors.
Why: Keep console formatting out of the search flow itself.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SearchRichHandler(RichHandler):
    """Rich handler that renders search lifecycle events compactly."""

    _SEARCH_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "search.start": ("🔎", "cyan"),
        "search.success": ("💖", "magenta"),
        "search.empty": ("ℹ️", "yellow"),
        "search.failure": ("⛔", "red"),
        "search.rejected": ("✋", "yellow"),
        "search.stale": ("↪️", "blue"),
    }
    _QUERY_LIMIT: ClassVar[int] = 40

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
        super().__init__(*args, **kwargs)

    @classmethod
    def _format_query(cls, query: str) -> str:
        """Quote the query and shorten it with an ellipsis when too long."""

        flattened = " ".join(query.split())
        if len(flattened) > cls._QUERY_LIMIT:
            flattened = flattened[: cls._QUERY_LIMIT - 1] + "…"
        return f'"{flattened}"'

    def _render_search_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured search events with dedicated styling."""

        event = getattr(record, "search_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._SEARCH_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        label = {
            "search.start": "Searching",
            "search.success": "Found",
            "search.empty": "No results",
            "search.failure": "Search failed",
            "search.rejected": "Rejected",
            "search.stale": "Discarded stale result",
        }.get(event, event)
        _ = body.append(label)

        query = getattr(record, "query", None)
        if isinstance(query, str):
            _ = body.append(" ")
            _ = body.append(self._format_query(query), style=Style(color="white"))

        details: list[str] = []
        artist_count = getattr(record, "artist_count", None)
        if isinstance(artist_count, int) and event == "search.success":
            details.append(f"{artist_count} artist" + ("" if artist_count == 1 else "s"))
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.0f} ms")
        reason = getattr(record, "reason", None)
        if reason:
            details.append(str(reason))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for search events."""

        search_text = self._render_search_message(record)
        if search_text is not None:
            return search_text
        return super().render_message(record, message)


__all__ = ["SearchRichHandler"]
