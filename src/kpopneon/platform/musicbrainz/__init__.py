"""MusicBrainz infrastructure package.

This package provides the query encoder and the HTTP adapter used to talk to
the MusicBrainz Web Service (WS2) artist search endpoint.
"""

from .http_client import HTTPClient, HTTPResult, MusicBrainzHTTPClient, MusicBrainzRequestError
from .query import build_filter_expression, build_search_url, encode_artist_query

__all__ = [
    "HTTPClient",
    "HTTPResult",
    "MusicBrainzHTTPClient",
    "MusicBrainzRequestError",
    "build_filter_expression",
    "build_search_url",
    "encode_artist_query",
]
