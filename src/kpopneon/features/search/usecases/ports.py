"""
Summary: Ports for the search feature.
Why: Let the client accept any JSON fetcher, including test doubles.
"""

from __future__ import annotations

from typing import Any, Protocol


class JSONResponse(Protocol):
    """Minimal view of an HTTP result carrying decoded JSON."""

    @property
    def data(self) -> Any:
        ...


class JSONFetcher(Protocol):
    """Fetch a URL and return its decoded JSON body.

    Implementations raise on any transport, status or decoding failure.
    """

    def get_json(self, url: str) -> JSONResponse:
        ...
