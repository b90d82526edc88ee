"""Where: src/kpopneon/platform/musicbrainz/query.py
What: Build the tag-filtered Lucene query and the artist search URL.
Why: The filter expression must be percent-encoded as one unit before it
     is placed into the ``query=`` parameter.
"""

from __future__ import annotations

from typing import Final
from urllib.parse import quote_plus

from kpopneon.config.settings import KPOP_TAG, MB_ARTIST_SEARCH_URL, MB_RESPONSE_FORMAT

_FILTER_TEMPLATE: Final[str] = "tag:{tag} AND artist:{name}"


def build_filter_expression(name: str) -> str:
    """Return ``tag:k-pop AND artist:<name>`` for the raw user text."""

    return _FILTER_TEMPLATE.format(tag=KPOP_TAG, name=name)


def encode_artist_query(name: str) -> str:
    """Percent-encode the complete filter expression for a ``query=`` value.

    Spaces become ``+`` and every reserved character, including ``&``, ``=``
    and ``:``, is escaped. Never raises; an empty name yields the encoded
    filter prefix alone.
    """

    return quote_plus(build_filter_expression(name), safe="")


def build_search_url(name: str, endpoint: str = MB_ARTIST_SEARCH_URL) -> str:
    """Return ``<endpoint>?query=<encoded filter>&fmt=json``."""

    return f"{endpoint}?query={encode_artist_query(name)}&fmt={MB_RESPONSE_FORMAT}"


__all__ = [
    "build_filter_expression",
    "build_search_url",
    "encode_artist_query",
]
