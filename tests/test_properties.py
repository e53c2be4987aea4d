from __future__ import annotations

from hypothesis import given, settings, strategies as st

from hni_panel.config.tables import load_tables
from hni_panel.personas.base import NewsContextItem, Persona
from hni_panel.responses.generator import TemplateResponseGenerator
from hni_panel.sentiment.base import QUICK_POLICY, SERVICE_POLICY, Sentiment
from hni_panel.sentiment.keyword import KeywordSentimentClassifier

_TABLES = load_tables()
_ALL_KEYWORDS = _TABLES.positive_keywords + _TABLES.negative_keywords + _TABLES.neutral_keywords
_CLASSIFIERS = [KeywordSentimentClassifier(policy=p) for p in (SERVICE_POLICY, QUICK_POLICY)]

# Letters no keyword is built from, so no keyword can occur as a substring.
_KEYWORD_FREE = st.text(alphabet="bjkqxz0123456789 .,!?-", max_size=200)
_KEYWORDISH = st.lists(
    st.one_of(st.sampled_from(_ALL_KEYWORDS), st.text(max_size=12)),
    max_size=20,
).map(" ".join)


@given(_KEYWORD_FREE)
def test_keyword_free_text_is_neutral(text: str) -> None:
    for classifier in _CLASSIFIERS:
        result = classifier.classify(text)
        assert result.sentiment == Sentiment.NEUTRAL
        assert result.confidence == 80
        assert result.matched_keywords == ()


@given(_KEYWORDISH)
@settings(max_examples=200)
def test_confidence_is_bounded_integer(text: str) -> None:
    for classifier in _CLASSIFIERS:
        result = classifier.classify(text)
        assert isinstance(result.confidence, int)
        assert 50 <= result.confidence <= 95


@given(_KEYWORDISH)
def test_classify_is_pure(text: str) -> None:
    classifier = _CLASSIFIERS[0]
    assert classifier.classify(text) == classifier.classify(text)


@given(_KEYWORDISH)
def test_matched_keywords_belong_to_winning_set(text: str) -> None:
    result = _CLASSIFIERS[0].classify(text)
    winning = {
        Sentiment.POSITIVE: _TABLES.positive_keywords,
        Sentiment.NEGATIVE: _TABLES.negative_keywords,
        Sentiment.NEUTRAL: _TABLES.neutral_keywords,
    }[result.sentiment]
    assert set(result.matched_keywords) <= set(winning)
    assert all(word in text.lower() for word in result.matched_keywords)


class _FirstIndex:
    def choose(self, n: int) -> int:
        return 0


@given(
    profession=st.text(max_size=30),
    hni_type=st.one_of(st.none(), st.text(max_size=30)),
    traits=st.frozensets(st.sampled_from(["analytical", "risk-taking", "conservative", "bold"])),
    query=st.text(max_size=50),
    headlines=st.lists(st.text(max_size=40), max_size=3),
)
def test_generate_is_total(profession, hni_type, traits, query, headlines) -> None:
    persona = Persona(name="P", profession=profession, hni_type=hni_type, personality_traits=traits)
    news = [NewsContextItem(headline=h, summary="") for h in headlines]

    text = TemplateResponseGenerator(tables=_TABLES, chooser=_FirstIndex()).generate(persona, query, news)

    assert isinstance(text, str) and text
