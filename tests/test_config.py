"""Tests for settings loading."""

from award_engine import __version__
from award_engine.config import Settings
from award_engine.rules import BUNDLED_AWARD_DIR


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("AWARD_CONFIG_PATH", "ENGINE_VERSION", "HOST", "PORT", "DEBUG", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.award_config_path == str(BUNDLED_AWARD_DIR)
        assert settings.engine_version == __version__
        assert settings.PORT == 8000
        assert settings.DEBUG is False
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("AWARD_CONFIG_PATH", str(tmp_path))
        monkeypatch.setenv("ENGINE_VERSION", "2.0.0")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.award_config_path == str(tmp_path)
        assert settings.engine_version == "2.0.0"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
