from __future__ import annotations

from collections import Counter
from typing import Iterable, Protocol

from hni_panel.utils import round_half_up

from .base import Sentiment


class _HasSentiment(Protocol):
    sentiment: Sentiment | str


def count_sentiments(results: Iterable[_HasSentiment]) -> dict[str, int]:
    counts = Counter(Sentiment(r.sentiment).value for r in results)
    return {s.value: counts.get(s.value, 0) for s in Sentiment}


def aggregate_sentiments(results: Iterable[_HasSentiment]) -> dict[str, int]:
    """Percentage of results per sentiment, each rounded half-up.

    The three values are rounded independently and may not sum to exactly 100.
    """
    counts = count_sentiments(results)
    total = sum(counts.values())
    if total == 0:
        return {s.value: 0 for s in Sentiment}
    return {label: round_half_up(count / total * 100) for label, count in counts.items()}
