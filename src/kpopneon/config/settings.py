"""Where: src/kpopneon/config/settings.py
What: Fixed runtime constants for the MusicBrainz search and its messages.
Why: Keep endpoint, tag filter and user-facing copy in one place.
"""

from __future__ import annotations

from typing import Final

# MusicBrainz WS2 ---------------------------------------------------------------

MB_ARTIST_SEARCH_URL: Final[str] = "https://musicbrainz.org/ws/2/artist"
MB_RESPONSE_FORMAT: Final[str] = "json"

# Every search is restricted to this MusicBrainz tag.
KPOP_TAG: Final[str] = "k-pop"


# User-facing messages ----------------------------------------------------------

SEARCH_FAILED_MESSAGE: Final[str] = "Error while contacting MusicBrainz API."
BLANK_QUERY_MESSAGE: Final[str] = "Please type an artist name."
NO_RESULTS_MESSAGE: Final[str] = "No K-Pop artists found for this search."

APP_TITLE: Final[str] = "K-Pop Neon Finder"
ABOUT_LINES: Final[tuple[str, ...]] = (
    "This app uses the MusicBrainz API to search for artists tagged as K-Pop.",
    "Type the name of a K-Pop group or artist (for example: BTS, Stray Kids), "
    "then run a search to see matching artists.",
    "Data source: musicbrainz.org. This is a community-maintained open music database.",
)


__all__ = [
    "ABOUT_LINES",
    "APP_TITLE",
    "BLANK_QUERY_MESSAGE",
    "KPOP_TAG",
    "MB_ARTIST_SEARCH_URL",
    "MB_RESPONSE_FORMAT",
    "NO_RESULTS_MESSAGE",
    "SEARCH_FAILED_MESSAGE",
]
