# ABOUTME: Unit tests for ComposeSettings and the settings singleton
# ABOUTME: Tests defaults, alias normalization, environment loading and caching

import pytest
from pydantic import ValidationError

from onionware.config._base import BaseCoreSettings
from onionware.config.settings import ComposeSettings, get_settings


class TestComposeSettings:
    """Test suite for ComposeSettings."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_defaults(self):
        """Test default values."""
        settings = ComposeSettings(_env_file=None)

        assert isinstance(settings, BaseCoreSettings)
        assert settings.APP_NAME == "onionware"
        assert settings.ENV == "development"
        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "txt"
        assert settings.STRICT_ARITY is True
        assert settings.TRACE_DISPATCH is False

    @pytest.mark.unit
    @pytest.mark.config
    def test_alias_normalization(self):
        """Test that ENV, LOG_LEVEL and LOG_FORMAT aliases are normalized."""
        settings = ComposeSettings(_env_file=None, ENV="prod", LOG_LEVEL="trace", LOG_FORMAT="structured")

        assert settings.ENV == "production"
        assert settings.LOG_LEVEL == "TRACE"
        assert settings.LOG_FORMAT == "json"

    @pytest.mark.unit
    @pytest.mark.config
    def test_invalid_env_rejected(self):
        """Test that unknown ENV values fail validation."""
        with pytest.raises(ValidationError):
            ComposeSettings(_env_file=None, ENV="qa")

    @pytest.mark.unit
    @pytest.mark.config
    def test_environment_variables_use_prefix(self, monkeypatch):
        """Test that ONIONWARE_ prefixed variables are read."""
        monkeypatch.setenv("ONIONWARE_STRICT_ARITY", "false")
        monkeypatch.setenv("ONIONWARE_TRACE_DISPATCH", "true")
        monkeypatch.setenv("ONIONWARE_ENV", "stage")

        settings = ComposeSettings(_env_file=None)

        assert settings.STRICT_ARITY is False
        assert settings.TRACE_DISPATCH is True
        assert settings.ENV == "staging"

    @pytest.mark.unit
    @pytest.mark.config
    def test_unprefixed_variables_ignored(self, monkeypatch):
        """Test that variables without the prefix are ignored."""
        monkeypatch.setenv("STRICT_ARITY", "false")

        assert ComposeSettings(_env_file=None).STRICT_ARITY is True

    @pytest.mark.unit
    @pytest.mark.config
    def test_get_settings_is_cached(self, monkeypatch):
        """Test that get_settings returns a cached instance."""
        first = get_settings()
        monkeypatch.setenv("ONIONWARE_TRACE_DISPATCH", "true")

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings().TRACE_DISPATCH is True
