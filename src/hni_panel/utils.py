from __future__ import annotations

import json
import math
from datetime import datetime, timezone


def strip_markdown_fences(content: str) -> str:
    """Remove markdown code fences (```json ... ```) wrapping a JSON payload."""
    text = content.strip()
    if text.startswith("```"):
        lines = [line for line in text.splitlines() if not line.strip().startswith("```")]
        return "\n".join(lines).strip()
    return text


def safe_json_parse(content: str) -> dict | None:
    """Parse a JSON string, returning *None* on failure instead of raising."""
    try:
        data = json.loads(content)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps; aware ones and *None* pass through."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike :func:`round`."""
    return int(math.floor(value + 0.5))


def json_serializable(obj: object) -> object:
    """Default handler for :func:`json.dumps` covering sets, datetimes and
    other values the panel records carry."""
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    if isinstance(obj, bytes):
        return obj.decode("utf-8", errors="replace")
    return str(obj)
