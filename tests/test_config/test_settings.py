"""Tests for application settings."""

from src.config.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, test_settings):
        assert test_settings.environment == "development"
        assert test_settings.log_level == "DEBUG"
        assert not test_settings.is_production

    def test_production(self):
        assert Settings(environment="production").is_production

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        assert Settings().log_level == "WARNING"

    def test_get_settings_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()

    def test_only_declared_fields(self):
        assert set(Settings.model_fields) == {"environment", "log_level"}
