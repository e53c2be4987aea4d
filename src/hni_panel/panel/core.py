from __future__ import annotations

import asyncio
import inspect
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Protocol, Sequence

from hni_panel._defaults import (
    DEFAULT_ACCOUNT_ID,
    DEFAULT_CONCURRENCY,
    DEFAULT_NEWS_LIMIT,
    RESPONSE_TIME_MAX_MS,
    RESPONSE_TIME_MIN_MS,
)
from hni_panel.personas.base import BrandQuery, NewsContextItem, Persona, ResponseRecord
from hni_panel.responses.generator import TemplateResponseGenerator
from hni_panel.responses.tags import extract_tags
from hni_panel.sentiment.keyword import KeywordSentimentClassifier
from hni_panel.storage import PanelRepository


class ResponseGenerator(Protocol):
    def generate(
        self,
        persona: Persona,
        query: str,
        news_context: Sequence[NewsContextItem] = (),
    ) -> str | Awaitable[str]: ...


@dataclass(slots=True)
class PanelStats:
    queries: int = 0
    responses: int = 0
    failures: int = 0

    @property
    def failure_rate(self) -> float:
        attempted = self.responses + self.failures
        return self.failures / attempted if attempted > 0 else 0.0


@dataclass(slots=True)
class QueryResult:
    query: BrandQuery
    responses: list[ResponseRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": {
                "id": self.query.id,
                "content": self.query.content,
                "account_id": self.query.account_id,
                "created_at": self.query.created_at.isoformat(),
            },
            "responses": [r.to_dict() for r in self.responses],
        }


class Panel:
    """Runs a brand query past every active persona.

    Each persona is handled independently: fetch its latest news, generate a
    response, classify it, extract tags and persist the record. A persona
    that fails is logged and left out of the result.
    """

    def __init__(
        self,
        repository: PanelRepository,
        generator: ResponseGenerator | None = None,
        classifier: KeywordSentimentClassifier | None = None,
        news_limit: int = DEFAULT_NEWS_LIMIT,
        concurrency: int = DEFAULT_CONCURRENCY,
        max_responses: int | None = None,
        rng: random.Random | None = None,
        on_response: Callable[[ResponseRecord], None] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.repository = repository
        self.generator = generator or TemplateResponseGenerator()
        self.classifier = classifier or KeywordSentimentClassifier()
        self.news_limit = max(0, news_limit)
        self.concurrency = max(1, concurrency)
        self.max_responses = max_responses
        self.rng = rng or random.Random()
        self.on_response = on_response
        self.logger = logger or logging.getLogger(__name__)
        self._stats = PanelStats()

    async def run_query(self, content: str, account_id: int = DEFAULT_ACCOUNT_ID) -> QueryResult:
        query = self.repository.create_query(BrandQuery(content=content, account_id=account_id))
        self._stats.queries += 1

        personas = self.repository.get_active_personas()
        if self.max_responses is not None:
            personas = personas[: max(0, self.max_responses)]
        self.logger.info("Query %s: asking %d persona(s)", query.id, len(personas))

        sem = asyncio.Semaphore(self.concurrency)

        async def _respond(persona: Persona) -> ResponseRecord | None:
            async with sem:
                try:
                    return await self.respond(persona, query)
                except Exception:
                    self._stats.failures += 1
                    self.logger.exception("Error generating response for persona %s", persona.name)
                    return None

        results = await asyncio.gather(*[_respond(persona) for persona in personas])
        responses = [r for r in results if r is not None]
        return QueryResult(query=query, responses=responses)

    async def respond(self, persona: Persona, query: BrandQuery) -> ResponseRecord:
        news = self.repository.get_latest_news(persona.id, self.news_limit) if self.news_limit else []

        content = self.generator.generate(persona, query.content, news)
        if inspect.isawaitable(content):
            content = await content

        sentiment = self.classifier.classify(content)
        tags = extract_tags(content)
        record = ResponseRecord(
            query_id=query.id,
            persona_id=persona.id,
            content=content,
            sentiment=sentiment.sentiment,
            confidence=sentiment.confidence,
            matched_keywords=sentiment.matched_keywords,
            likes=tags.likes,
            dislikes=tags.dislikes,
            concerns=tags.concerns,
            context_used={
                "news_headlines": [item.headline for item in news],
                "personality_traits": sorted(persona.personality_traits),
                "preferences": dict(persona.preferences),
            },
            response_time_ms=self.rng.randrange(RESPONSE_TIME_MIN_MS, RESPONSE_TIME_MAX_MS),
        )
        saved = self.repository.create_response(record)
        self._stats.responses += 1
        if self.on_response:
            self.on_response(saved)
        return saved

    @property
    def stats(self) -> PanelStats:
        return self._stats
