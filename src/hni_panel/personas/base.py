from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping

from hni_panel._defaults import DEFAULT_ACCOUNT_ID
from hni_panel.sentiment.base import Sentiment
from hni_panel.utils import as_utc, json_serializable


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class Persona:
    name: str
    profession: str
    id: int | None = None
    hni_type: str | None = None
    personality_traits: frozenset[str] = frozenset()
    preferences: Mapping[str, Any] = field(default_factory=dict, hash=False)
    is_active: bool = True
    gender: str | None = None
    location: str | None = None
    archetype_figure: str | None = None
    bio: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "personality_traits", frozenset(self.personality_traits))
        object.__setattr__(self, "preferences", MappingProxyType(dict(self.preferences)))

    @property
    def wealth_tier(self) -> str:
        return str(self.preferences.get("wealthTier", "HNWI"))


@dataclass(frozen=True, slots=True)
class NewsContextItem:
    headline: str
    summary: str
    url: str | None = None
    published_at: datetime | None = None
    persona_id: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "published_at", as_utc(self.published_at))


@dataclass(frozen=True, slots=True)
class BrandQuery:
    content: str
    account_id: int = DEFAULT_ACCOUNT_ID
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        object.__setattr__(self, "created_at", as_utc(self.created_at))


@dataclass(frozen=True, slots=True)
class TagSet:
    likes: tuple[str, ...] = ()
    dislikes: tuple[str, ...] = ()
    concerns: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ResponseRecord:
    query_id: int | None
    persona_id: int | None
    content: str
    sentiment: Sentiment
    confidence: int
    matched_keywords: tuple[str, ...] = ()
    likes: tuple[str, ...] = ()
    dislikes: tuple[str, ...] = ()
    concerns: tuple[str, ...] = ()
    context_used: dict[str, Any] = field(default_factory=dict)
    response_time_ms: int = 0
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        object.__setattr__(self, "created_at", as_utc(self.created_at))

    def to_dict(self) -> dict:
        data = asdict(self)
        data["sentiment"] = Sentiment(self.sentiment).value
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=json_serializable, ensure_ascii=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResponseRecord":
        created_at = data.get("created_at")
        return cls(
            query_id=data.get("query_id"),
            persona_id=data.get("persona_id"),
            content=str(data.get("content", "")),
            sentiment=Sentiment(data.get("sentiment", Sentiment.NEUTRAL.value)),
            confidence=int(data.get("confidence", 0)),
            matched_keywords=tuple(data.get("matched_keywords") or ()),
            likes=tuple(data.get("likes") or ()),
            dislikes=tuple(data.get("dislikes") or ()),
            concerns=tuple(data.get("concerns") or ()),
            context_used=dict(data.get("context_used") or {}),
            response_time_ms=int(data.get("response_time_ms", 0)),
            id=data.get("id"),
            created_at=datetime.fromisoformat(created_at) if created_at else _utcnow(),
        )
