from __future__ import annotations

import unittest
from unittest import mock

from hni_panel.config.settings import PanelSettings


class PanelSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=True):
            settings = PanelSettings.from_env()

        self.assertEqual(settings.model, "gpt-4o-mini")
        self.assertEqual(settings.news_limit, 3)
        self.assertEqual(settings.concurrency, 5)
        self.assertIsNone(settings.seed)

    def test_reads_environment(self) -> None:
        env = {
            "HNI_PANEL_MODEL": "claude-3-haiku",
            "HNI_PANEL_NEWS_LIMIT": "5",
            "HNI_PANEL_CONCURRENCY": "2",
            "HNI_PANEL_SEED": "42",
        }
        with mock.patch.dict("os.environ", env, clear=True):
            settings = PanelSettings.from_env()

        self.assertEqual(settings.model, "claude-3-haiku")
        self.assertEqual(settings.news_limit, 5)
        self.assertEqual(settings.concurrency, 2)
        self.assertEqual(settings.seed, 42)

    def test_invalid_integer_falls_back_with_warning(self) -> None:
        with mock.patch.dict("os.environ", {"HNI_PANEL_NEWS_LIMIT": "lots"}, clear=True):
            with self.assertLogs("hni_panel.config.settings", level="WARNING"):
                settings = PanelSettings.from_env()

        self.assertEqual(settings.news_limit, 3)

    def test_limits_are_clamped(self) -> None:
        settings = PanelSettings(news_limit=50, concurrency=0)

        self.assertEqual(settings.news_limit, 10)
        self.assertEqual(settings.concurrency, 1)


if __name__ == "__main__":
    unittest.main()
