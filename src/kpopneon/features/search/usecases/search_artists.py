"""Where: src/kpopneon/features/search/usecases/search_artists.py
What: Run one k-pop artist search and map it to a ``SearchOutcome``.
Why: Give the presentation layer a single entry point that never raises.
"""

from __future__ import annotations

import time
from typing import Final, final

from kpopneon.config.settings import MB_ARTIST_SEARCH_URL, SEARCH_FAILED_MESSAGE
from kpopneon.features.search.domain.models import SearchFailure, SearchOutcome, SearchSuccess
from kpopneon.platform.logging import logger
from kpopneon.platform.musicbrainz.http_client import MusicBrainzHTTPClient
from kpopneon.platform.musicbrainz.query import build_search_url

from .parsing import parse_artists
from .ports import JSONFetcher

_MS_PER_SECOND: Final[float] = 1000.0


@final
class ArtistSearchClient:
    """Search MusicBrainz for artists tagged k-pop.

    Each ``search`` call issues exactly one request and keeps no state
    between calls, so one instance may serve concurrent callers.
    """

    def __init__(
        self,
        http_client: JSONFetcher | None = None,
        *,
        endpoint: str = MB_ARTIST_SEARCH_URL,
    ) -> None:
        self._http_client: JSONFetcher = http_client or MusicBrainzHTTPClient()
        self._endpoint: str = endpoint

    @classmethod
    def with_timeout(cls, timeout: float | None) -> "ArtistSearchClient":
        """Build a client whose request gives up after ``timeout`` seconds."""

        return cls(MusicBrainzHTTPClient(timeout=timeout))

    def search(self, query: str) -> SearchOutcome:
        """Search for ``query``; callers must reject blank input beforehand.

        Every failure, whatever its cause, becomes the same ``SearchFailure``.
        """
        started = time.perf_counter()

        try:
            url = build_search_url(query, endpoint=self._endpoint)
            logger.debug(
                "MusicBrainz search URL: %s",
                url,
                extra={"search_event": "search.start", "query": query},
            )
            result = self._http_client.get_json(url)
            artists = parse_artists(result.data)
        except Exception as exc:
            logger.warning(
                "MusicBrainz search failed for '%s': %s",
                query,
                exc,
                extra={
                    "search_event": "search.failure",
                    "query": query,
                    "reason": type(exc).__name__,
                },
            )
            return SearchFailure(SEARCH_FAILED_MESSAGE)

        duration_ms = (time.perf_counter() - started) * _MS_PER_SECOND
        logger.info(
            "MusicBrainz returned %d artist(s) for '%s'",
            len(artists),
            query,
            extra={
                "search_event": "search.success" if artists else "search.empty",
                "query": query,
                "artist_count": len(artists),
                "duration_ms": duration_ms,
            },
        )
        return SearchSuccess(artists)


__all__ = ["ArtistSearchClient"]
