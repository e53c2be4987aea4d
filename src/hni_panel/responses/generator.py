from __future__ import annotations

import logging
from typing import Sequence

from hni_panel.config.tables import PanelTables, load_tables
from hni_panel.personas.base import NewsContextItem, Persona

from .chooser import IndexChooser, RandomIndexChooser

logger = logging.getLogger(__name__)

QUERY_PLACEHOLDER = "{query}"
HEADLINE_PLACEHOLDER = "{headline}"


class TemplateResponseGenerator:
    """Builds a persona's canned reaction to a brand query.

    Steps, in order: pick a template for the persona's profession (falling
    back to its HNI type, then the default list), apply the first matching
    personality-trait modifier, insert the query verbatim, append at most one
    preference sentence, then mention the newest news headline if there is one.
    """

    def __init__(
        self,
        tables: PanelTables | None = None,
        chooser: IndexChooser | None = None,
    ) -> None:
        self.tables = tables or load_tables()
        self.chooser = chooser or RandomIndexChooser()

    def generate(
        self,
        persona: Persona,
        query: str,
        news_context: Sequence[NewsContextItem] = (),
    ) -> str:
        templates = self.tables.templates_for(persona.profession, persona.hni_type)
        index = self.chooser.choose(len(templates))
        logger.debug("Persona %s: template %d of %d", persona.name, index, len(templates))

        # Modifiers rewrite the template only; the query goes in untouched.
        text = self._apply_traits(persona, templates[index])
        text = text.replace(QUERY_PLACEHOLDER, query)
        text += self._preference_suffix(persona)
        if news_context:
            headline = news_context[0].headline.lower()
            text += self.tables.news_sentence.replace(HEADLINE_PLACEHOLDER, headline)
        return text

    def _apply_traits(self, persona: Persona, text: str) -> str:
        for modifier in self.tables.trait_modifiers:
            if modifier.trait in persona.personality_traits:
                return modifier.apply(text)
        return text

    def _preference_suffix(self, persona: Persona) -> str:
        for rule in self.tables.preference_suffixes:
            if persona.preferences.get(rule.preference) == rule.value:
                return rule.suffix
        return ""


def generate_persona_response(
    persona: Persona,
    query: str,
    news_context: Sequence[NewsContextItem] = (),
    chooser: IndexChooser | None = None,
) -> str:
    return TemplateResponseGenerator(chooser=chooser).generate(persona, query, news_context)
