# ABOUTME: Unit tests for the loguru logging configuration helpers
# ABOUTME: Tests sink setup, settings-driven levels and formats, named loggers and environment profiles

import json
from unittest.mock import patch

import pytest
from loguru import logger

from onionware.config.logging import (
    LoggerConfig,
    LoggingSettings,
    config_from_settings,
    configure_for_environment,
    get_logger,
    setup_logging,
)
from onionware.config.settings import get_settings


class TestLoggingConfig:
    """Test suite for logging configuration."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_logger_config_defaults_to_console_only(self):
        """Test that the default LoggerConfig only enables the console sink."""
        config = LoggerConfig()

        assert config.console_enabled is True
        assert config.console_serialize is False
        assert config.file_enabled is False
        assert config.structured_enabled is False

    @pytest.mark.unit
    @pytest.mark.config
    def test_logging_settings_read_environment(self, monkeypatch):
        """Test that sink toggles are read from ONIONWARE_* variables."""
        monkeypatch.setenv("ONIONWARE_LOG_FILE_ENABLED", "true")
        monkeypatch.setenv("ONIONWARE_LOG_CONSOLE_COLORIZE", "false")

        settings = LoggingSettings()

        assert settings.log_file_enabled is True
        assert settings.log_console_colorize is False

    @pytest.mark.unit
    @pytest.mark.config
    def test_config_from_settings_defaults(self):
        """Test that default settings give an INFO text console named onionware."""
        config = config_from_settings()

        assert config.app_name == "onionware"
        assert config.console_level == "INFO"
        assert config.console_serialize is False
        assert config.console_diagnose is False

    @pytest.mark.unit
    @pytest.mark.config
    def test_config_from_settings_uses_log_level_and_format(self, monkeypatch):
        """Test that LOG_LEVEL feeds the sink levels and LOG_FORMAT=json serializes."""
        monkeypatch.setenv("ONIONWARE_LOG_LEVEL", "warning")
        monkeypatch.setenv("ONIONWARE_LOG_FORMAT", "json")
        monkeypatch.setenv("ONIONWARE_APP_NAME", "checkout-service")

        config = config_from_settings()

        assert config.console_level == "WARNING"
        assert config.file_level == "WARNING"
        assert config.console_serialize is True
        assert config.app_name == "checkout-service"

    @pytest.mark.unit
    @pytest.mark.config
    def test_debug_lowers_level_but_keeps_trace(self, monkeypatch):
        """Test that DEBUG lowers the level to DEBUG and leaves TRACE alone."""
        monkeypatch.setenv("ONIONWARE_DEBUG", "true")
        monkeypatch.setenv("ONIONWARE_LOG_LEVEL", "ERROR")

        config = config_from_settings()
        assert config.console_level == "DEBUG"
        assert config.console_diagnose is True

        monkeypatch.setenv("ONIONWARE_LOG_LEVEL", "TRACE")
        get_settings.cache_clear()
        assert config_from_settings().console_level == "TRACE"

    @pytest.mark.unit
    @pytest.mark.config
    def test_config_from_settings_overrides_win(self, monkeypatch):
        """Test that explicit overrides take precedence over settings."""
        monkeypatch.setenv("ONIONWARE_LOG_LEVEL", "ERROR")

        config = config_from_settings(console_level="DEBUG", structured_enabled=True)

        assert config.console_level == "DEBUG"
        assert config.structured_enabled is True

    @pytest.mark.unit
    @pytest.mark.config
    def test_setup_logging_emits_json_when_log_format_is_json(self, monkeypatch, capsys):
        """Test that setup_logging() serializes console records for LOG_FORMAT=json."""
        monkeypatch.setenv("ONIONWARE_LOG_FORMAT", "json")
        monkeypatch.setenv("ONIONWARE_APP_NAME", "checkout-service")

        setup_logging()
        logger.info("stage entered")
        get_logger("tests.logging").warning("named record")

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        records = [json.loads(line)["record"] for line in lines]
        assert [r["message"] for r in records] == ["stage entered", "named record"]
        assert records[0]["extra"]["name"] == "checkout-service"
        assert records[1]["extra"]["name"] == "tests.logging"

    @pytest.mark.unit
    @pytest.mark.config
    def test_setup_logging_honours_log_level(self, monkeypatch, capsys):
        """Test that setup_logging() drops console records below LOG_LEVEL."""
        monkeypatch.setenv("ONIONWARE_LOG_LEVEL", "WARNING")

        setup_logging()
        get_logger("tests.logging").info("below threshold")
        get_logger("tests.logging").warning("above threshold")

        err = capsys.readouterr().err
        assert "above threshold" in err
        assert "below threshold" not in err

    @pytest.mark.unit
    @pytest.mark.config
    def test_setup_logging_writes_file_sink(self, tmp_path):
        """Test that the file sink is created and filters by its level."""
        log_file = tmp_path / "nested" / "onionware.log"
        setup_logging(
            LoggerConfig(
                console_enabled=False,
                file_enabled=True,
                file_path=log_file,
                file_level="INFO",
                file_compression=None,
            )
        )

        get_logger("tests.logging").info("pipeline composed")
        get_logger("tests.logging").debug("below threshold")
        setup_logging(LoggerConfig(console_enabled=False))

        content = log_file.read_text()
        assert "pipeline composed" in content
        assert "tests.logging" in content
        assert "below threshold" not in content

    @pytest.mark.unit
    @pytest.mark.config
    def test_get_logger_binds_name(self, log_records):
        """Test that get_logger binds the given name into extra."""
        get_logger("onionware.example").info("hello")

        assert log_records[-1]["extra"]["name"] == "onionware.example"
        assert log_records[-1]["message"] == "hello"

    @pytest.mark.unit
    @pytest.mark.config
    def test_environment_profiles(self):
        """Test that each environment selects its logging profile."""
        with patch("onionware.config.logging.setup_logging") as mock_setup:
            configure_for_environment("production")
            production_config = mock_setup.call_args.args[0]
            assert production_config.structured_enabled is True
            assert production_config.console_colorize is False

            configure_for_environment("development")
            development_config = mock_setup.call_args.args[0]
            assert development_config.console_level == "DEBUG"

            configure_for_environment("staging")
            assert mock_setup.call_args.args == ()

    @pytest.mark.unit
    @pytest.mark.config
    def test_production_profile_follows_log_format(self, monkeypatch):
        """Test that the production profile still honours LOG_FORMAT and APP_NAME."""
        monkeypatch.setenv("ONIONWARE_LOG_FORMAT", "json")
        monkeypatch.setenv("ONIONWARE_APP_NAME", "checkout-service")

        with patch("onionware.config.logging.setup_logging") as mock_setup:
            configure_for_environment("production")

        production_config = mock_setup.call_args.args[0]
        assert production_config.console_serialize is True
        assert production_config.app_name == "checkout-service"

    @pytest.mark.unit
    @pytest.mark.config
    def test_environment_profile_defaults_to_settings(self, monkeypatch):
        """Test that configure_for_environment() falls back to the ENV setting."""
        monkeypatch.setenv("ONIONWARE_ENV", "prod")

        with patch("onionware.config.logging.configure_for_production") as mock_production:
            configure_for_environment()

        mock_production.assert_called_once()
