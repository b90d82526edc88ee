"""
Summary: Use cases for the search feature.
Why: Re-export the client and parser from one import path.
"""

from .parsing import MalformedPayloadError, parse_artists
from .search_artists import ArtistSearchClient

__all__ = ["ArtistSearchClient", "MalformedPayloadError", "parse_artists"]
