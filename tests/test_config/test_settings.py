"""Tests for application settings."""

import os
from unittest.mock import patch

from dag_analytics.config.settings import Settings, get_settings


class TestSettings:
    """Test Settings defaults and overrides."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.is_production is False

    def test_production(self) -> None:
        assert Settings(environment="production").is_production is True

    def test_env_override(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "WARNING", "ENVIRONMENT": "staging"}):
            settings = Settings()
        assert settings.log_level == "WARNING"
        assert settings.environment == "staging"

    def test_fixture_settings(self, test_settings: Settings) -> None:
        assert test_settings.log_level == "DEBUG"

    def test_get_settings_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()

    def test_debug_from_env(self) -> None:
        with patch.dict(os.environ, {"DEBUG": "true"}):
            assert Settings().debug is True
