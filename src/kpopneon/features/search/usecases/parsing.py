"""Where: src/kpopneon/features/search/usecases/parsing.py
What: Map a MusicBrainz artist search payload to ``Artist`` records.
Why: Separate payload interpretation from HTTP and outcome handling.
"""

from __future__ import annotations

import json
from typing import Any, Final, cast

from kpopneon.features.search.domain.models import Artist

_ARTISTS_KEY: Final[str] = "artists"


class MalformedPayloadError(ValueError):
    """Raised when the payload shape cannot be interpreted at all."""


def coerce_text(value: Any) -> str:
    """Render a JSON value as text; ``None`` becomes the empty string."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def blank_to_none(value: str) -> str | None:
    """Return ``None`` for blank strings and the untouched value otherwise."""

    return value if value.strip() else None


def parse_artist(entry: dict[str, Any]) -> Artist | None:
    """Build an ``Artist`` from one payload entry, or ``None`` if unnamed."""

    name = coerce_text(entry.get("name"))
    if not name.strip():
        return None
    return Artist(
        id=coerce_text(entry.get("id")),
        name=name,
        country=blank_to_none(coerce_text(entry.get("country"))),
        disambiguation=blank_to_none(coerce_text(entry.get("disambiguation"))),
        type=blank_to_none(coerce_text(entry.get("type"))),
    )


def parse_artists(payload: Any) -> tuple[Artist, ...]:
    """Extract named artists from a search payload, keeping server order.

    A missing or non-list ``artists`` field means no results.

    Raises:
        MalformedPayloadError: If the payload is not a JSON object or an
            ``artists`` entry is not an object.
    """
    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            f"expected a JSON object, got {type(payload).__name__}"
        )

    artists_raw = cast(dict[str, Any], payload).get(_ARTISTS_KEY)
    if not isinstance(artists_raw, list):
        return ()

    artists: list[Artist] = []
    for index, entry in enumerate(cast(list[object], artists_raw)):
        if not isinstance(entry, dict):
            raise MalformedPayloadError(
                f"artists[{index}] is {type(entry).__name__}, expected an object"
            )
        artist = parse_artist(cast(dict[str, Any], entry))
        if artist is not None:
            artists.append(artist)
    return tuple(artists)


__all__ = [
    "MalformedPayloadError",
    "blank_to_none",
    "coerce_text",
    "parse_artist",
    "parse_artists",
]
