from .aggregate import aggregate_sentiments, count_sentiments
from .base import POLICIES, QUICK_POLICY, SERVICE_POLICY, ConfidencePolicy, Sentiment, SentimentResult
from .keyword import KeywordSentimentClassifier, classify_sentiment

__all__ = [
    "POLICIES",
    "QUICK_POLICY",
    "SERVICE_POLICY",
    "ConfidencePolicy",
    "KeywordSentimentClassifier",
    "Sentiment",
    "SentimentResult",
    "aggregate_sentiments",
    "classify_sentiment",
    "count_sentiments",
]
