"""Tests for Settings configuration class."""

import pytest


class TestSettingsDefaults:
    """Test that Settings loads sensible defaults."""

    def test_settings_loads_with_defaults(self, monkeypatch):
        """Settings should load with default values when no env vars are set."""
        for var in ("OUTPUT_INDENT", "FORECAST_SEED", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        from src.config.settings import Settings

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.output_indent == 2
        assert settings.forecast_seed is None
        assert settings.log_level == "INFO"


class TestSettingsFromEnvironment:
    """Test that Settings reads environment variables."""

    def test_settings_reads_environment_variables(self, monkeypatch):
        """Settings should read from environment variables."""
        monkeypatch.setenv("OUTPUT_INDENT", "4")
        monkeypatch.setenv("FORECAST_SEED", "42")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        from src.config.settings import Settings

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.output_indent == 4
        assert settings.forecast_seed == 42
        assert settings.log_level == "DEBUG"

    def test_settings_reads_dotenv_file(self, tmp_path, monkeypatch):
        """Settings should read a .env file in the working directory."""
        monkeypatch.delenv("OUTPUT_INDENT", raising=False)
        (tmp_path / ".env").write_text("OUTPUT_INDENT=0\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        from src.config.settings import Settings

        assert Settings().output_indent == 0


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_invalid_log_level_is_rejected(self):
        """Unknown log levels should fail validation."""
        from pydantic import ValidationError

        from src.config.settings import Settings

        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")  # type: ignore[call-arg]

    def test_negative_indent_is_rejected(self):
        """Indentation must not be negative."""
        from pydantic import ValidationError

        from src.config.settings import Settings

        with pytest.raises(ValidationError):
            Settings(_env_file=None, output_indent=-1)  # type: ignore[call-arg]


class TestSettingsSingleton:
    """Test get_settings / reset_settings."""

    def test_get_settings_returns_same_instance(self):
        """get_settings should cache a single instance until reset."""
        from src.config.settings import get_settings, reset_settings

        first = get_settings()
        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first
