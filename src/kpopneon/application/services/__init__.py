"""Application services coordinating features for presentation layers."""

from .search_service import ArtistSearchController, SearchScreenState

__all__ = ["ArtistSearchController", "SearchScreenState"]
