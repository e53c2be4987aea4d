from ._version import __version__
from .panel.core import Panel, PanelStats, QueryResult
from .personas.base import BrandQuery, NewsContextItem, Persona, ResponseRecord, TagSet
from .personas.registry import PersonaRegistry
from .responses import LLMResponseGenerator, TemplateResponseGenerator, extract_tags, generate_persona_response
from .sentiment import (
    QUICK_POLICY,
    SERVICE_POLICY,
    ConfidencePolicy,
    KeywordSentimentClassifier,
    Sentiment,
    SentimentResult,
    aggregate_sentiments,
    classify_sentiment,
)
from .storage import InMemoryRepository, seed_sample_data

__all__ = [
    "__version__",
    "BrandQuery",
    "ConfidencePolicy",
    "InMemoryRepository",
    "KeywordSentimentClassifier",
    "LLMResponseGenerator",
    "NewsContextItem",
    "Panel",
    "PanelStats",
    "Persona",
    "PersonaRegistry",
    "QUICK_POLICY",
    "QueryResult",
    "ResponseRecord",
    "SERVICE_POLICY",
    "Sentiment",
    "SentimentResult",
    "TagSet",
    "TemplateResponseGenerator",
    "aggregate_sentiments",
    "classify_sentiment",
    "extract_tags",
    "generate_persona_response",
    "seed_sample_data",
]
