import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def clean_skills(values: list[Any] | None) -> list[str]:
    """Keep order, trim entries, drop blanks and non-strings. Duplicates are kept."""
    if not values:
        return []
    return [v.strip() for v in values if isinstance(v, str) and v.strip()]


def encode_skills(values: list[str] | None) -> str:
    return json.dumps(clean_skills(values), ensure_ascii=False)


def decode_skills(raw: str | None) -> list[str]:
    # Stored as a JSON string list; anything else reads back as "no skills".
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed skills payload: %r", raw[:80])
        return []
    if not isinstance(parsed, list):
        return []
    return [s for s in parsed if isinstance(s, str)]
