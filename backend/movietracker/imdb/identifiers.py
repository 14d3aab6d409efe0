from typing import Any

from movietracker.imdb.config import IMDB_ID_RE, IMDB_ID_SEARCH_PATTERNS


def extract_imdb_id(value: Any) -> str | None:
    """
    Pull a canonical IMDb title ID (``tt`` followed by digits) out of a link or ID.

    Accepts full URLs such as ``https://www.imdb.com/title/tt3896198/``, bare
    IDs, or any text containing an ID. Returns None when nothing matches.
    """
    if not isinstance(value, str):
        return None
    candidate = value.strip()
    if not candidate:
        return None

    if IMDB_ID_RE.fullmatch(candidate):
        return candidate

    for pattern in IMDB_ID_SEARCH_PATTERNS:
        match = pattern.search(candidate)
        if match:
            imdb_id = match.group(1)
            return "tt" + imdb_id[2:]
    return None
