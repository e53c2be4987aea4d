from __future__ import annotations

from collections import Counter, defaultdict
from datetime import datetime, timedelta, timezone
from typing import Iterable, Sequence

from hni_panel.personas.base import Persona, ResponseRecord
from hni_panel.sentiment.aggregate import aggregate_sentiments, count_sentiments
from hni_panel.sentiment.base import Sentiment
from hni_panel.utils import as_utc

BREAKDOWN_FIELDS = ("hni_type", "profession", "location", "gender", "wealth_tier")
TAG_KINDS = ("likes", "dislikes", "concerns")
TIME_RANGES = {
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
    "90d": timedelta(days=90),
    "1y": timedelta(days=365),
}
_ALL = "all"

_UNKNOWN = "Unknown"


def _group_value(persona: Persona | None, field_name: str) -> str:
    if persona is None:
        return _UNKNOWN
    value = getattr(persona, field_name)
    return str(value) if value else _UNKNOWN


def sentiment_by(
    responses: Iterable[ResponseRecord],
    personas: Sequence[Persona],
    field_name: str,
) -> dict[str, dict[str, int]]:
    """Sentiment counts per persona group, e.g. per ``location`` or ``wealth_tier``."""
    if field_name not in BREAKDOWN_FIELDS:
        raise ValueError(f"unsupported breakdown field: {field_name}")

    by_id = {p.id: p for p in personas}
    grouped: dict[str, list[ResponseRecord]] = defaultdict(list)
    for response in responses:
        grouped[_group_value(by_id.get(response.persona_id), field_name)].append(response)
    return {group: count_sentiments(items) for group, items in sorted(grouped.items())}


def top_tags(responses: Iterable[ResponseRecord], kind: str, limit: int = 5) -> list[dict]:
    if kind not in TAG_KINDS:
        raise ValueError(f"unsupported tag kind: {kind}")
    counts = Counter(tag for response in responses for tag in getattr(response, kind))
    return [{"tag": tag, "frequency": n} for tag, n in counts.most_common(limit)]


def since_for(time_range: str | None, now: datetime | None = None) -> datetime | None:
    """Start of a named time window such as ``"30d"``; ``"all"`` or *None* means no limit."""
    if time_range is None or time_range == _ALL:
        return None
    window = TIME_RANGES.get(time_range)
    if window is None:
        raise ValueError(f"unsupported time range: {time_range}")
    return as_utc(now or datetime.now(timezone.utc)) - window


def _wanted(value: str | None) -> bool:
    return value is not None and value != _ALL


def filter_responses(
    responses: Iterable[ResponseRecord],
    personas: Sequence[Persona],
    location: str | None = None,
    gender: str | None = None,
    wealth_tier: str | None = None,
    hni_type: str | None = None,
    since: datetime | None = None,
) -> list[ResponseRecord]:
    """Keep responses whose persona matches every given attribute.

    A filter left as *None* or ``"all"`` matches everything. Responses from a
    persona missing from *personas* only survive when no persona attribute is
    filtered. *since* drops responses created before it.
    """
    criteria = {
        name: value
        for name, value in (
            ("location", location),
            ("gender", gender),
            ("wealth_tier", wealth_tier),
            ("hni_type", hni_type),
        )
        if _wanted(value)
    }
    cutoff = as_utc(since)
    by_id = {p.id: p for p in personas}

    kept = []
    for response in responses:
        if cutoff is not None and response.created_at < cutoff:
            continue
        if criteria:
            persona = by_id.get(response.persona_id)
            if persona is None or any(getattr(persona, name) != value for name, value in criteria.items()):
                continue
        kept.append(response)
    return kept


def build_report(
    responses: Sequence[ResponseRecord],
    personas: Sequence[Persona],
    location: str | None = None,
    gender: str | None = None,
    wealth_tier: str | None = None,
    hni_type: str | None = None,
    since: datetime | None = None,
) -> dict:
    """Dashboard summary: sentiment split, demographic breakdowns and top tags.

    The filter arguments narrow the responses first, as in :func:`filter_responses`.
    """
    responses = filter_responses(
        responses,
        personas,
        location=location,
        gender=gender,
        wealth_tier=wealth_tier,
        hni_type=hni_type,
        since=since,
    )
    confidences = [r.confidence for r in responses]
    return {
        "total_responses": len(responses),
        "sentiment": aggregate_sentiments(responses),
        "sentiment_counts": count_sentiments(responses),
        "avg_confidence": round(sum(confidences) / len(confidences), 1) if confidences else 0.0,
        "dominant_sentiment": _dominant(responses),
        "demographics": {name: sentiment_by(responses, personas, name) for name in BREAKDOWN_FIELDS},
        "top_likes": top_tags(responses, "likes"),
        "top_dislikes": top_tags(responses, "dislikes"),
        "top_concerns": top_tags(responses, "concerns"),
    }


def _dominant(responses: Sequence[ResponseRecord]) -> str | None:
    if not responses:
        return None
    counts = count_sentiments(responses)
    # Ties resolve in Sentiment declaration order.
    return max(Sentiment, key=lambda s: counts[s.value]).value
