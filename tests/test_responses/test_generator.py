from __future__ import annotations

import unittest

from tests.helpers import SequenceIndexChooser
from hni_panel.config.tables import load_tables
from hni_panel.personas.base import NewsContextItem, Persona
from hni_panel.responses.chooser import RandomIndexChooser
from hni_panel.responses.generator import TemplateResponseGenerator, generate_persona_response


def _persona(**overrides) -> Persona:
    fields = {"name": "Test Persona", "profession": "Investment Banker"}
    fields.update(overrides)
    return Persona(**fields)


class TemplateResponseGeneratorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tables = load_tables()

    def _generator(self, *indices: int) -> TemplateResponseGenerator:
        return TemplateResponseGenerator(tables=self.tables, chooser=SequenceIndexChooser(indices))

    def test_selects_template_by_profession(self) -> None:
        text = self._generator(0).generate(_persona(), "Brand X")

        self.assertEqual(text, "From a financial perspective, the ROI and market positioning are crucial factors here.")

    def test_chooser_sees_template_count(self) -> None:
        chooser = SequenceIndexChooser([1])
        TemplateResponseGenerator(tables=self.tables, chooser=chooser).generate(_persona(), "q")

        self.assertEqual(chooser.calls, [4])

    def test_falls_back_to_hni_type(self) -> None:
        persona = _persona(profession="Art Curator", hni_type="Heritage Enthusiast")
        text = self._generator(1).generate(persona, "q")

        self.assertIn("cultural preservation", text)

    def test_unknown_label_uses_default_templates(self) -> None:
        persona = _persona(profession="Astronaut", hni_type="Space Tourist")
        text = self._generator(0).generate(persona, "q")

        self.assertEqual(text, self.tables.default_templates[0])

    def test_query_is_interpolated_verbatim(self) -> None:
        persona = _persona(profession="Minimalism Consultant", hni_type="Modern Minimalist Professional")
        text = self._generator(0).generate(persona, "The {Loro} capsule range")

        self.assertIn("The {Loro} capsule range aligns with my philosophy", text)

    def test_conservative_modifier_leaves_query_untouched(self) -> None:
        persona = _persona(
            profession="Minimalism Consultant",
            hni_type="Modern Minimalist Professional",
            personality_traits={"conservative"},
        )
        text = self._generator(0).generate(persona, "A compelling Loro Piana capsule")

        self.assertIn("A compelling Loro Piana capsule aligns with my philosophy", text)
        self.assertTrue(text.endswith(" I prefer established market leaders."))

    def test_analytical_modifier_keeps_query_case(self) -> None:
        persona = _persona(
            profession="Minimalism Consultant",
            hni_type="Modern Minimalist Professional",
            personality_traits={"analytical"},
        )
        text = self._generator(0).generate(persona, "The LVMH Capsule")

        self.assertTrue(text.startswith("Upon careful analysis, as someone who values intentional living"))
        self.assertIn("The LVMH Capsule aligns with my philosophy", text)

    def test_analytical_prefix_lowercases_template(self) -> None:
        persona = _persona(personality_traits={"analytical"})
        text = self._generator(0).generate(persona, "q")

        self.assertEqual(
            text,
            "Upon careful analysis, from a financial perspective, the roi and market positioning are crucial factors here.",
        )

    def test_risk_taking_replaces_phrase(self) -> None:
        persona = _persona(personality_traits={"risk-taking"})
        text = self._generator(2).generate(persona, "q")

        self.assertIn("calculated risk assessment", text)
        self.assertNotIn("careful consideration", text)

    def test_conservative_replaces_and_appends(self) -> None:
        persona = _persona(profession="Tech Entrepreneur", personality_traits={"conservative"})
        text = self._generator(0).generate(persona, "q")

        self.assertEqual(
            text,
            "The innovation factor and technological advancement make this concerning. "
            "I prefer established market leaders.",
        )

    def test_only_first_matching_trait_applies(self) -> None:
        persona = _persona(personality_traits={"conservative", "analytical"})
        text = self._generator(0).generate(persona, "q")

        self.assertTrue(text.startswith("Upon careful analysis, "))
        self.assertNotIn("established market leaders", text)

    def test_preference_suffix(self) -> None:
        practical = _persona(profession="Medical Professional", preferences={"spendingHabits": "practical"})
        tech = _persona(profession="Medical Professional", preferences={"spendingHabits": "technology-focused"})

        self.assertTrue(
            self._generator(0).generate(practical, "q").endswith(
                " Practical utility always outweighs luxury appeal for me."
            )
        )
        self.assertTrue(
            self._generator(0).generate(tech, "q").endswith(
                " The technological innovation justifies the premium pricing."
            )
        )

    def test_no_suffix_for_other_preferences(self) -> None:
        persona = _persona(preferences={"spendingHabits": "status-driven"})

        self.assertEqual(
            self._generator(0).generate(persona, "q"),
            "From a financial perspective, the ROI and market positioning are crucial factors here.",
        )

    def test_first_news_headline_is_appended_lowercased(self) -> None:
        news = [
            NewsContextItem(headline="Emma Watson Launches New Initiative", summary="s1"),
            NewsContextItem(headline="Older Headline", summary="s2"),
        ]
        text = self._generator(0).generate(_persona(), "q", news)

        self.assertTrue(
            text.endswith(
                " This perspective is particularly relevant given recent developments, "
                "including emma watson launches new initiative."
            )
        )
        self.assertNotIn("older headline", text)

    def test_modifiers_apply_in_order(self) -> None:
        persona = _persona(
            profession="Tech Entrepreneur",
            personality_traits={"conservative"},
            preferences={"spendingHabits": "technology-focused"},
        )
        news = [NewsContextItem(headline="Market Rally", summary="")]
        text = self._generator(0).generate(persona, "q", news)

        self.assertEqual(
            text,
            "The innovation factor and technological advancement make this concerning. "
            "I prefer established market leaders. "
            "The technological innovation justifies the premium pricing. "
            "This perspective is particularly relevant given recent developments, including market rally.",
        )

    def test_module_function_with_seeded_chooser_is_repeatable(self) -> None:
        persona = _persona()
        first = generate_persona_response(persona, "q", chooser=RandomIndexChooser(seed=7))
        second = generate_persona_response(persona, "q", chooser=RandomIndexChooser(seed=7))

        self.assertEqual(first, second)
        self.assertIn(first, self.tables.templates["Investment Banker"])


class RandomIndexChooserTests(unittest.TestCase):
    def test_stays_in_range(self) -> None:
        chooser = RandomIndexChooser(seed=1)

        self.assertTrue(all(0 <= chooser.choose(3) < 3 for _ in range(50)))

    def test_rejects_empty(self) -> None:
        with self.assertRaises(ValueError):
            RandomIndexChooser().choose(0)


if __name__ == "__main__":
    unittest.main()
