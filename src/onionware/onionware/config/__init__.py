# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and logging utilities for the library

from onionware.config.settings import ComposeSettings, get_settings
from onionware.config.logging import (
    LoggerConfig,
    LoggingSettings,
    config_from_settings,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
    configure_for_environment,
)

__all__ = [
    "ComposeSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "config_from_settings",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
    "configure_for_environment",
]
