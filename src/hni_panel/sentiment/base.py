from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


@dataclass(frozen=True, slots=True)
class SentimentResult:
    sentiment: Sentiment
    confidence: int
    matched_keywords: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ConfidencePolicy:
    """Score weights and confidence scaling for the keyword classifier.

    Positive and negative confidence is ``min(cap, base + per_match * hits)``;
    neutral confidence is
    ``max(neutral_floor, neutral_base - neutral_step * |pos_score - neg_score|)``.
    """

    name: str
    per_match: int
    cap: int
    base: int = 60
    neutral_base: int = 80
    neutral_step: int = 5
    neutral_floor: int = 50
    positive_weight: int = 2
    negative_weight: int = 2
    neutral_weight: int = 1


# The response pipeline and the quick-look panel score confidence differently.
# Both are kept until product decides which one is canonical.
SERVICE_POLICY = ConfidencePolicy(name="service", per_match=5, cap=95)
QUICK_POLICY = ConfidencePolicy(name="quick", per_match=10, cap=90)

POLICIES: dict[str, ConfidencePolicy] = {
    SERVICE_POLICY.name: SERVICE_POLICY,
    QUICK_POLICY.name: QUICK_POLICY,
}
