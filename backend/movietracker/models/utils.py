import json
from collections.abc import Sequence
from typing import Any

from loguru import logger


def encode_genre(genre: Sequence[str]) -> str:
    return json.dumps(list(genre))


def decode_genre(raw: Any) -> list[str]:
    """
    Turn a stored genre value back into a list of genre names.

    Never raises: anything that is not a JSON array (or an already decoded
    list, as some drivers return for JSON columns) degrades to an empty list.
    Non-string items are dropped.
    """
    if raw is None or raw == "":
        return []
    value = raw
    if isinstance(raw, (str, bytes)):
        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning(f"Failed to parse genre: {raw!r}")
            return []
    if not isinstance(value, list):
        logger.warning(f"Stored genre is not a list: {raw!r}")
        return []
    return [item for item in value if isinstance(item, str) and item]
