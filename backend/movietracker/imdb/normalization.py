from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from movietracker.core.enums import MovieType
from movietracker.imdb.config import (
    MAX_STORED_INT,
    NOT_AVAILABLE,
    OMDB_SERIES_TYPE,
    UNTITLED,
)
from movietracker.models.movie import DEFAULT_PRIORITY, MovieCreate


def _available(value: Any) -> str | None:
    """Return the value as a string, or None when it is absent, blank or N/A."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text == NOT_AVAILABLE:
        return None
    return text


def _normalize_type(value: Any) -> MovieType:
    if isinstance(value, str) and value.strip().lower() == OMDB_SERIES_TYPE:
        return MovieType.SERIES
    return MovieType.MOVIE


def _split_genres(value: Any) -> list[str]:
    """Split a comma-separated genre field into trimmed, non-empty names."""
    text = _available(value)
    if text is None:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def _round_rating(value: Any) -> int | None:
    """
    Parse a decimal rating such as "7.8" and round it half-up (7.5 -> 8).
    Anything unparseable, non-finite or too large for the integer column
    yields None. No clamping is applied.
    """
    text = _available(value)
    if text is None:
        return None
    try:
        rating = Decimal(text)
        if not rating.is_finite():
            return None
        rounded = int(rating.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return None
    if abs(rounded) > MAX_STORED_INT:
        return None
    return rounded


def normalize_omdb_payload(payload: Mapping[str, Any] | None) -> MovieCreate:
    """
    Map an OMDb title payload onto the data needed to create a Movie.

    Missing optional fields never raise; they fall back to the defaults of a
    new movie. Imported movies always start unwatched with default priority.

    Parameters:
        payload (Mapping[str, Any] | None): The decoded OMDb JSON object.
    Returns:
        MovieCreate: The normalized movie data.
    """
    if not isinstance(payload, Mapping):
        payload = {}

    return MovieCreate(
        title=_available(payload.get("Title")) or UNTITLED,
        type=_normalize_type(payload.get("Type")),
        genre=_split_genres(payload.get("Genre")),
        watched=False,
        priority=DEFAULT_PRIORITY,
        rating=_round_rating(payload.get("imdbRating")),
        review=_available(payload.get("Plot")) or "",
        poster=_available(payload.get("Poster")),
    )
