"""
Tests for settings and retrieval configuration.

Run with: pytest tests/test_config.py -v
"""

from legisview.config import Settings
from legisview.retrieval import RetrievalConfig


class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.base_url == "https://www.legislation.gov.uk"
        assert "www.legislation.gov.uk" in settings.allowed_hosts
        assert settings.min_content_length == 1000

    def test_environment_override(self, monkeypatch):
        """Should read LEGISVIEW_* variables."""
        monkeypatch.setenv("LEGISVIEW_MIN_CONTENT_LENGTH", "500")
        monkeypatch.setenv("LEGISVIEW_INCLUDE_ENACTED_CONTENTS", "false")

        settings = Settings()

        assert settings.min_content_length == 500
        assert settings.include_enacted_contents is False


class TestRetrievalConfig:

    def test_from_settings(self):
        config = RetrievalConfig.from_settings(Settings(interstitial_max_size=10000, search_results_count=20))

        assert config.interstitial_max_size == 10000
        assert config.search_results_count == 20
        assert config.content_selectors[0] == "#viewLegContents"
