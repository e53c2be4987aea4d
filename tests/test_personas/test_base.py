from __future__ import annotations

import unittest
from datetime import datetime, timezone

from hni_panel.personas.base import BrandQuery, NewsContextItem, Persona


class PersonaTests(unittest.TestCase):
    def test_preferences_are_read_only(self) -> None:
        persona = Persona(name="A", profession="p", preferences={"spendingHabits": "practical"})

        with self.assertRaises(TypeError):
            persona.preferences["spendingHabits"] = "lavish"  # type: ignore[index]

    def test_preferences_are_copied_from_input(self) -> None:
        source = {"wealthTier": "UHNWI"}
        persona = Persona(name="A", profession="p", preferences=source)
        source["wealthTier"] = "HNWI"

        self.assertEqual(persona.wealth_tier, "UHNWI")

    def test_persona_is_hashable(self) -> None:
        first = Persona(name="A", profession="p", preferences={"wealthTier": "VHNWI"})
        second = Persona(name="A", profession="p", preferences={"wealthTier": "VHNWI"})

        self.assertEqual(first, second)
        self.assertEqual(len({first, second}), 1)

    def test_traits_become_frozenset(self) -> None:
        persona = Persona(name="A", profession="p", personality_traits=["analytical", "analytical"])

        self.assertEqual(persona.personality_traits, frozenset({"analytical"}))


class TimestampTests(unittest.TestCase):
    def test_naive_news_date_is_utc(self) -> None:
        item = NewsContextItem(headline="h", summary="s", published_at=datetime(2024, 5, 1, 9, 30))

        self.assertEqual(item.published_at, datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc))

    def test_undated_news_stays_undated(self) -> None:
        self.assertIsNone(NewsContextItem(headline="h", summary="s").published_at)

    def test_naive_query_timestamp_is_utc(self) -> None:
        query = BrandQuery(content="q", created_at=datetime(2024, 1, 2))

        self.assertIs(query.created_at.tzinfo, timezone.utc)


if __name__ == "__main__":
    unittest.main()
