from __future__ import annotations

from hni_panel.config.tables import PanelTables, TagRule, load_tables
from hni_panel.personas.base import TagSet


def _labels(rules: tuple[TagRule, ...], text: str) -> tuple[str, ...]:
    return tuple(rule.label for rule in rules if rule.needle in text)


def extract_tags(text: str, tables: PanelTables | None = None) -> TagSet:
    """Derive like/dislike/concern labels from case-sensitive substring hits.

    Categories are checked independently, so ``"authentic"`` yields both the
    ``authenticity`` like and the ``authenticity verification`` concern.
    """
    tables = tables or load_tables()
    return TagSet(
        likes=_labels(tables.like_rules, text),
        dislikes=_labels(tables.dislike_rules, text),
        concerns=_labels(tables.concern_rules, text),
    )
