"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from progression_api.backend.settings import Settings, get_settings

ENV_VARS = [
    "PROGRESSION_ENVIRONMENT",
    "PROGRESSION_LOG_LEVEL",
    "PROGRESSION_SENTRY_DSN",
    "PROGRESSION_DEFAULT_OUTPUT_FORMAT",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear settings variables to test true defaults."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.sentry_dsn is None
        assert settings.default_output_format == "json"
        assert settings.is_test is False


@pytest.mark.unit
class TestSettingsFromEnvironment:
    def test_reads_prefixed_variables(self, clean_env, monkeypatch):
        monkeypatch.setenv("PROGRESSION_ENVIRONMENT", "Production")
        monkeypatch.setenv("PROGRESSION_LOG_LEVEL", "debug")
        monkeypatch.setenv("PROGRESSION_DEFAULT_OUTPUT_FORMAT", "TABLE")

        settings = Settings(_env_file=None)

        assert settings.environment == "production"
        assert settings.log_level == "DEBUG"
        assert settings.default_output_format == "table"

    def test_unprefixed_variables_ignored(self, clean_env, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")
        assert Settings(_env_file=None).environment == "development"


@pytest.mark.unit
class TestSettingsValidation:
    @pytest.mark.parametrize(
        "field,value",
        [
            ("environment", "qa"),
            ("log_level", "verbose"),
            ("default_output_format", "xml"),
        ],
    )
    def test_invalid_values_rejected(self, clean_env, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})


@pytest.mark.unit
class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_test_environment_from_fixture(self):
        assert get_settings().is_test is True
