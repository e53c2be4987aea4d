from __future__ import annotations

import logging
from typing import Sequence

from hni_panel._defaults import DEFAULT_MODEL
from hni_panel.llm.client import LiteLLMClient, LLMClient
from hni_panel.personas.base import NewsContextItem, Persona
from hni_panel.utils import safe_json_parse, strip_markdown_fences

from .generator import TemplateResponseGenerator

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = (
    "You role-play a high-net-worth individual taking part in a market-research panel. "
    "Stay in character, answer in the first person in two or three sentences, and give "
    "an honest reaction to the brand question, including what you like and what concerns you. "
    'Respond with JSON: {"response": "..."}.'
)


def build_persona_prompt(
    persona: Persona,
    query: str,
    news_context: Sequence[NewsContextItem] = (),
) -> str:
    lines = [f"You are {persona.name}, a {persona.profession}."]
    if persona.hni_type:
        lines.append(f"HNI archetype: {persona.hni_type}")
    if persona.location:
        lines.append(f"Based in: {persona.location}")
    if persona.bio:
        lines.append(f"Background: {persona.bio}")
    if persona.personality_traits:
        lines.append(f"Personality: {', '.join(sorted(persona.personality_traits))}")
    if persona.preferences:
        prefs = "; ".join(f"{key}: {value}" for key, value in persona.preferences.items())
        lines.append(f"Preferences: {prefs}")
    if news_context:
        lines.append("Recent news about you:")
        lines.extend(f"- {item.headline}: {item.summary}" for item in news_context)
    lines.append("")
    lines.append(f"Brand question: {query}")
    return "\n".join(lines)


class LLMResponseGenerator:
    """Asks a chat model for the persona's reaction.

    Any transport failure or unusable reply falls back to the template
    generator, so a panel run always gets text for every persona.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        llm_client: LLMClient | None = None,
        fallback: TemplateResponseGenerator | None = None,
        temperature: float = 0.7,
    ) -> None:
        self.model = model
        self.llm_client = llm_client or LiteLLMClient()
        self.fallback = fallback or TemplateResponseGenerator()
        self.temperature = temperature

    async def generate(
        self,
        persona: Persona,
        query: str,
        news_context: Sequence[NewsContextItem] = (),
    ) -> str:
        prompt = build_persona_prompt(persona, query, news_context)
        try:
            reply = await self.llm_client.complete(
                model=self.model,
                system_prompt=_SYSTEM_PROMPT,
                prompt=prompt,
                temperature=self.temperature,
            )
        except Exception:
            logger.warning("LLM call failed for persona %s; using template", persona.name, exc_info=True)
            return self.fallback.generate(persona, query, news_context)

        data = safe_json_parse(strip_markdown_fences(reply.content))
        text = str(data.get("response", "")).strip() if data else ""
        if not text:
            logger.warning("Unusable LLM reply for persona %s; using template", persona.name)
            return self.fallback.generate(persona, query, news_context)
        return text
