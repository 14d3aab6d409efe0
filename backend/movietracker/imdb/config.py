"""Shared OMDb/IMDb constants."""

import re

# OMDb marks a field it has no value for with this literal
NOT_AVAILABLE = "N/A"
OMDB_SERIES_TYPE = "series"
UNTITLED = "Untitled"

# Upper bound of the 32-bit integer rating column
MAX_STORED_INT = 2**31 - 1

IMDB_ID_RE = re.compile(r"tt\d+")
IMDB_ID_SEARCH_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"imdb\.com/title/(tt\d+)", flags=re.IGNORECASE),
    re.compile(r"/title/(tt\d+)", flags=re.IGNORECASE),
    re.compile(r"(tt\d+)", flags=re.IGNORECASE),
)
