"""Where: src/kpopneon/platform/musicbrainz/http_client.py
What: HTTP adapter performing a single MusicBrainz WS2 GET and JSON decode.
Why: Decouple network concerns from payload parsing and outcome mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import requests

from kpopneon.platform.logging import logger


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response payload relevant to the search client."""

    status: int
    data: Any


class MusicBrainzRequestError(Exception):
    """Raised when the request fails or the body is not usable JSON."""

    def __init__(self, message: str, *, status: int = 0) -> None:
        super().__init__(message)
        self.status: int = status


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch JSON payloads."""

    def get_json(self, url: str) -> HTTPResult:
        ...


class MusicBrainzHTTPClient:
    """Perform one GET per call: no custom headers, no retries.

    ``timeout`` is passed straight to ``requests``; ``None`` keeps the
    library default.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout: float | None = timeout

    def get_json(self, url: str) -> HTTPResult:
        """Fetch ``url`` and decode the body as JSON.

        Raises:
            MusicBrainzRequestError: On transport errors, non-2xx statuses or
                bodies that do not decode as JSON.
        """
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("MusicBrainz request error: %s", exc)
            raise MusicBrainzRequestError(f"request failed: {exc}") from exc

        status = int(response.status_code)

        if not 200 <= status < 300:
            logger.warning("MusicBrainz HTTP error: status=%s", status)
            raise MusicBrainzRequestError(f"unexpected status {status}", status=status)

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("MusicBrainz JSON parse error: %s", exc)
            raise MusicBrainzRequestError(f"invalid JSON body: {exc}", status=status) from exc

        logger.debug("MusicBrainz responded with status=%s", status)
        return HTTPResult(status=status, data=data)


__all__ = [
    "HTTPClient",
    "HTTPResult",
    "MusicBrainzHTTPClient",
    "MusicBrainzRequestError",
]
