from __future__ import annotations

from functools import lru_cache

from hni_panel.config.tables import PanelTables, load_tables

from .base import SERVICE_POLICY, ConfidencePolicy, Sentiment, SentimentResult


def _matches(keywords: tuple[str, ...], text: str) -> tuple[str, ...]:
    return tuple(word for word in keywords if word in text)


class KeywordSentimentClassifier:
    """Labels text by counting keyword substrings from three fixed sets.

    Matching is plain substring search on the lowercased text, so
    ``"inadequate"`` counts for both the negative ``inadequate`` and the
    neutral ``adequate``. Text with no keyword hits is neutral.
    """

    def __init__(
        self,
        policy: ConfidencePolicy = SERVICE_POLICY,
        tables: PanelTables | None = None,
    ) -> None:
        self.policy = policy
        self.tables = tables or load_tables()

    def classify(self, text: str) -> SentimentResult:
        lower = text.lower()
        policy = self.policy

        positive = _matches(self.tables.positive_keywords, lower)
        negative = _matches(self.tables.negative_keywords, lower)
        neutral = _matches(self.tables.neutral_keywords, lower)

        positive_score = len(positive) * policy.positive_weight
        negative_score = len(negative) * policy.negative_weight
        neutral_score = len(neutral) * policy.neutral_weight

        if positive_score > negative_score and positive_score > neutral_score:
            return SentimentResult(
                sentiment=Sentiment.POSITIVE,
                confidence=min(policy.cap, policy.base + policy.per_match * len(positive)),
                matched_keywords=positive,
            )
        if negative_score > positive_score and negative_score > neutral_score:
            return SentimentResult(
                sentiment=Sentiment.NEGATIVE,
                confidence=min(policy.cap, policy.base + policy.per_match * len(negative)),
                matched_keywords=negative,
            )
        spread = abs(positive_score - negative_score)
        return SentimentResult(
            sentiment=Sentiment.NEUTRAL,
            confidence=max(policy.neutral_floor, policy.neutral_base - policy.neutral_step * spread),
            matched_keywords=neutral,
        )

    def classify_batch(self, texts: list[str]) -> list[SentimentResult]:
        return [self.classify(text) for text in texts]


@lru_cache(maxsize=None)
def _classifier_for(policy: ConfidencePolicy) -> KeywordSentimentClassifier:
    return KeywordSentimentClassifier(policy=policy)


def classify_sentiment(text: str, policy: ConfidencePolicy = SERVICE_POLICY) -> SentimentResult:
    """Classify *text* with the packaged keyword tables."""
    return _classifier_for(policy).classify(text)
