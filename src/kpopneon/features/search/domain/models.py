"""
Summary: Immutable artist record and the two-variant search outcome.
Why: Exactly one of success or failure is ever produced per search.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final


@final
@dataclass(slots=True, frozen=True)
class Artist:
    """A MusicBrainz artist tagged k-pop.

    ``name`` is never blank. Optional fields are either ``None`` or a
    non-blank string.
    """

    id: str
    name: str
    country: str | None = None
    disambiguation: str | None = None
    type: str | None = None


@final
@dataclass(slots=True, frozen=True)
class SearchSuccess:
    """Search completed; artists are in server response order."""

    artists: tuple[Artist, ...] = ()


@final
@dataclass(slots=True, frozen=True)
class SearchFailure:
    """Search could not be completed."""

    message: str


SearchOutcome = SearchSuccess | SearchFailure

__all__ = ["Artist", "SearchFailure", "SearchOutcome", "SearchSuccess"]
