from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .base import NewsContextItem, Persona


class PersonaRegistry:
    @staticmethod
    def hni_archetypes() -> list[Persona]:
        return [
            Persona(
                name="Joshua Millbrook",
                archetype_figure="Joshua Fields Millburn",
                hni_type="Modern Minimalist Professional",
                profession="Minimalism Consultant",
                gender="Male",
                location="Los Angeles, CA",
                bio=(
                    "Minimalism advocate and documentary filmmaker. Former corporate executive "
                    "who embraced intentional living. Focuses on experiences over possessions."
                ),
                personality_traits=frozenset({"minimalist", "intentional", "experience-focused", "anti-consumerist"}),
                preferences={
                    "values": ["sustainability", "intentionality", "experiences"],
                    "luxuryApproach": "quality over quantity",
                    "spendingStyle": "selective premium purchases",
                    "wealthTier": "HNWI",
                },
            ),
            Persona(
                name="Maya Chen-Fields",
                archetype_figure="Joshua Fields Millburn",
                hni_type="Modern Minimalist Professional",
                profession="Digital Wellness Coach",
                gender="Female",
                location="San Francisco, CA",
                bio=(
                    "Digital minimalism expert helping tech professionals find balance. "
                    "Former Silicon Valley product manager turned wellness advocate."
                ),
                personality_traits=frozenset({"tech-savvy", "wellness-focused", "minimalist", "pragmatic"}),
                preferences={
                    "values": ["digital wellness", "work-life balance", "mindfulness"],
                    "luxuryApproach": "technology that enhances life",
                    "spendingStyle": "investment in experiences and health",
                    "wealthTier": "VHNWI",
                },
            ),
            Persona(
                name="Loyd Ashworth",
                archetype_figure="Loyd Grossman",
                hni_type="Heritage Enthusiast",
                profession="Cultural Heritage Consultant",
                gender="Male",
                location="London, UK",
                bio=(
                    "British heritage preservationist and cultural advisor. Champion of "
                    "traditional craftsmanship and historical luxury brands."
                ),
                personality_traits=frozenset({"traditional", "cultured", "heritage-focused", "quality-conscious"}),
                preferences={
                    "values": ["tradition", "craftsmanship", "heritage"],
                    "luxuryApproach": "timeless over trendy",
                    "spendingStyle": "investment in legacy brands",
                    "wealthTier": "UHNWI",
                },
            ),
            Persona(
                name="Victoria Pemberton",
                archetype_figure="Loyd Grossman",
                hni_type="Heritage Enthusiast",
                profession="Art Curator",
                gender="Female",
                location="Edinburgh, UK",
                bio=(
                    "Museum curator specializing in British decorative arts. Passionate about "
                    "preserving traditional luxury crafts and supporting heritage brands."
                ),
                personality_traits=frozenset({"scholarly", "preservation-minded", "aesthetic", "traditional"}),
                preferences={
                    "values": ["cultural preservation", "artisanship", "historical significance"],
                    "luxuryApproach": "authentic heritage brands",
                    "spendingStyle": "supporting traditional crafts",
                    "wealthTier": "HNWI",
                },
            ),
            Persona(
                name="Emma Richardson",
                archetype_figure="Emma Watson",
                hni_type="Sustainable Fashion Advocate",
                profession="Sustainable Fashion Consultant",
                gender="Female",
                location="New York, NY",
                bio=(
                    "Fashion sustainability expert and ethical brand advocate. Former actor "
                    "turned activist for sustainable luxury and ethical consumption."
                ),
                personality_traits=frozenset({"ethical", "environmentally-conscious", "influential", "principled"}),
                preferences={
                    "values": ["sustainability", "ethical production", "social responsibility"],
                    "luxuryApproach": "sustainable luxury brands",
                    "spendingStyle": "ethical premium purchases",
                    "wealthTier": "VHNWI",
                },
            ),
            Persona(
                name="Sophia Green-Watson",
                archetype_figure="Emma Watson",
                hni_type="Sustainable Fashion Advocate",
                profession="Environmental Lawyer",
                gender="Female",
                location="Vancouver, CA",
                bio=(
                    "Environmental law specialist focusing on corporate sustainability. "
                    "Advocates for transparent supply chains in luxury fashion."
                ),
                personality_traits=frozenset({"analytical", "justice-oriented", "environmentalist", "rigorous"}),
                preferences={
                    "values": ["environmental justice", "transparency", "accountability"],
                    "luxuryApproach": "certified sustainable brands",
                    "spendingStyle": "research-driven ethical purchases",
                    "wealthTier": "HNWI",
                },
            ),
        ]

    @staticmethod
    def professionals() -> list[Persona]:
        return [
            Persona(
                name="Richard Vance",
                profession="Investment Banker",
                gender="Male",
                location="New York, NY",
                personality_traits=frozenset({"risk-taking", "competitive"}),
                preferences={"spendingHabits": "status-driven", "wealthTier": "VHNWI"},
            ),
            Persona(
                name="Dr. Priya Raman",
                profession="Medical Professional",
                gender="Female",
                location="Boston, MA",
                personality_traits=frozenset({"analytical", "cautious"}),
                preferences={"spendingHabits": "practical", "wealthTier": "HNWI"},
            ),
            Persona(
                name="Kenji Aoki",
                profession="Tech Entrepreneur",
                gender="Male",
                location="San Francisco, CA",
                personality_traits=frozenset({"visionary", "risk-taking"}),
                preferences={"spendingHabits": "technology-focused", "wealthTier": "UHNWI"},
            ),
            Persona(
                name="Eleanor Whitfield",
                profession="Legal Professional",
                gender="Female",
                location="London, UK",
                personality_traits=frozenset({"conservative", "detail-oriented"}),
                preferences={"spendingHabits": "reputation-conscious", "wealthTier": "HNWI"},
            ),
            Persona(
                name="Marco Bellini",
                profession="Real Estate Mogul",
                gender="Male",
                location="Miami, FL",
                personality_traits=frozenset({"conservative", "deal-driven"}),
                preferences={"spendingHabits": "asset-focused", "wealthTier": "UHNWI"},
            ),
            Persona(
                name="Jasmine Cole",
                profession="Sports & Entertainment",
                gender="Female",
                location="Los Angeles, CA",
                personality_traits=frozenset({"image-conscious", "ambitious"}),
                preferences={"spendingHabits": "status-driven", "wealthTier": "VHNWI"},
            ),
        ]

    @staticmethod
    def custom(personas: list[dict]) -> list[Persona]:
        return [Persona(**persona) for persona in personas]

    @staticmethod
    def sample_news(persona: Persona, now: datetime | None = None) -> list[NewsContextItem]:
        """Three placeholder news items about the persona's archetype, newest first."""
        now = now or datetime.now(timezone.utc)
        figure = persona.archetype_figure or persona.name
        return [
            NewsContextItem(
                headline=f"{figure} speaks at sustainability conference",
                summary="Recent appearance discussing the future of ethical consumption and luxury brands.",
                url="https://example.com/news1",
                published_at=now - timedelta(days=1),
                persona_id=persona.id,
            ),
            NewsContextItem(
                headline=f"New documentary features {figure}",
                summary="Upcoming documentary explores their impact on modern consumer culture.",
                url="https://example.com/news2",
                published_at=now - timedelta(days=3),
                persona_id=persona.id,
            ),
            NewsContextItem(
                headline=f"{figure} launches new initiative",
                summary=(
                    "Recent project aimed at promoting conscious consumption among "
                    "high-net-worth individuals."
                ),
                url="https://example.com/news3",
                published_at=now - timedelta(days=7),
                persona_id=persona.id,
            ),
        ]
