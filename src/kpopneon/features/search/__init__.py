"""
Summary: Public surface for the search feature.
Why: Let callers import models and the client without knowing the layout.
"""

from .domain.models import Artist, SearchFailure, SearchOutcome, SearchSuccess
from .usecases.search_artists import ArtistSearchClient

__all__ = [
    "Artist",
    "ArtistSearchClient",
    "SearchFailure",
    "SearchOutcome",
    "SearchSuccess",
]
