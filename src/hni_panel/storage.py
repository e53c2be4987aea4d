from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from itertools import count
from typing import Protocol

from hni_panel._defaults import MAX_NEWS_LIMIT
from hni_panel.personas.base import BrandQuery, NewsContextItem, Persona, ResponseRecord
from hni_panel.personas.registry import PersonaRegistry
from hni_panel.sentiment.aggregate import count_sentiments

logger = logging.getLogger(__name__)

_EMPTY_AVG_RESPONSE_MS = 3200
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class PanelRepository(Protocol):
    def get_active_personas(self) -> list[Persona]: ...

    def get_latest_news(self, persona_id: int, limit: int = MAX_NEWS_LIMIT) -> list[NewsContextItem]: ...

    def create_query(self, query: BrandQuery) -> BrandQuery: ...

    def create_response(self, response: ResponseRecord) -> ResponseRecord: ...


class InMemoryRepository:
    """Process-local store for personas, news, queries and responses.

    Records are assigned sequential ids on insert and returned as new
    instances; stored records are never mutated.
    """

    def __init__(self) -> None:
        self._personas: dict[int, Persona] = {}
        self._news: dict[int, list[NewsContextItem]] = {}
        self._queries: dict[int, BrandQuery] = {}
        self._responses: dict[int, ResponseRecord] = {}
        self._persona_ids = count(1)
        self._query_ids = count(1)
        self._response_ids = count(1)

    # -- personas ---------------------------------------------------------

    def add_persona(self, persona: Persona) -> Persona:
        stored = replace(persona, id=next(self._persona_ids))
        self._personas[stored.id] = stored
        return stored

    def get_persona(self, persona_id: int) -> Persona | None:
        return self._personas.get(persona_id)

    def get_all_personas(self) -> list[Persona]:
        return list(self._personas.values())

    def get_active_personas(self) -> list[Persona]:
        return [p for p in self._personas.values() if p.is_active]

    def get_personas_by_type(self, hni_type: str) -> list[Persona]:
        return [p for p in self.get_active_personas() if p.hni_type == hni_type]

    # -- news -------------------------------------------------------------

    def add_news(self, persona_id: int, item: NewsContextItem) -> NewsContextItem:
        if persona_id not in self._personas:
            raise KeyError(f"unknown persona id {persona_id}")
        stored = replace(item, persona_id=persona_id)
        self._news.setdefault(persona_id, []).append(stored)
        return stored

    def get_latest_news(self, persona_id: int, limit: int = MAX_NEWS_LIMIT) -> list[NewsContextItem]:
        # Undated items rank below dated ones; insertion order breaks ties.
        ranked = sorted(
            enumerate(self._news.get(persona_id, [])),
            key=lambda pair: (pair[1].published_at is not None, pair[1].published_at or _EPOCH, pair[0]),
            reverse=True,
        )
        return [item for _, item in ranked[: max(0, limit)]]

    # -- queries ----------------------------------------------------------

    def create_query(self, query: BrandQuery) -> BrandQuery:
        stored = replace(query, id=next(self._query_ids))
        self._queries[stored.id] = stored
        return stored

    def get_queries(self, account_id: int, limit: int = 50) -> list[BrandQuery]:
        queries = [q for q in self._queries.values() if q.account_id == account_id]
        queries.sort(key=lambda q: q.created_at, reverse=True)
        return queries[: max(0, limit)]

    def search_queries(self, account_id: int, term: str) -> list[BrandQuery]:
        needle = term.lower()
        return [q for q in self.get_queries(account_id, limit=len(self._queries)) if needle in q.content.lower()]

    # -- responses --------------------------------------------------------

    def create_response(self, response: ResponseRecord) -> ResponseRecord:
        stored = replace(response, id=next(self._response_ids))
        self._responses[stored.id] = stored
        return stored

    def get_responses_by_query(self, query_id: int) -> list[ResponseRecord]:
        responses = [r for r in self._responses.values() if r.query_id == query_id]
        return sorted(responses, key=lambda r: r.created_at)

    def get_all_responses(self) -> list[ResponseRecord]:
        return list(self._responses.values())

    def response_stats(self, account_id: int) -> dict:
        query_ids = {q.id for q in self._queries.values() if q.account_id == account_id}
        responses = [r for r in self._responses.values() if r.query_id in query_ids]
        if responses:
            avg_ms = sum(r.response_time_ms for r in responses) / len(responses)
        else:
            avg_ms = _EMPTY_AVG_RESPONSE_MS
        return {
            "total_queries": len(query_ids),
            "avg_response_time": f"{avg_ms / 1000:.1f}s",
            "sentiment_breakdown": count_sentiments(responses),
            "active_personas": len(self.get_active_personas()),
        }


def seed_sample_data(repository: InMemoryRepository, personas: list[Persona] | None = None) -> list[Persona]:
    """Load a persona panel and three news items per persona into an empty repository."""
    existing = repository.get_all_personas()
    if existing:
        logger.debug("Repository already holds %d personas; skipping seed", len(existing))
        return existing

    if personas is None:
        personas = PersonaRegistry.hni_archetypes()
    stored = [repository.add_persona(p) for p in personas]
    for persona in stored:
        for item in PersonaRegistry.sample_news(persona):
            repository.add_news(persona.id, item)
    logger.info("Seeded %d personas", len(stored))
    return stored
