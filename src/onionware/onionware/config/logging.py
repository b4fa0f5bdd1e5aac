# ABOUTME: Loguru configuration for the onionware library
# ABOUTME: Provides unified logging setup with console colorization and optional file output

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from onionware.config.settings import get_settings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Default logger name for records without a bound name
    app_name: str = "onionware"

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_serialize: bool = False
    console_backtrace: bool = True
    console_diagnose: bool = True

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/onionware.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: Optional[str] = "gz"

    # Structured logging for file output
    structured_enabled: bool = False
    structured_level: str = "DEBUG"
    structured_path: Union[str, Path] = "logs/onionware-structured.jsonl"

    # Performance settings
    enqueue: bool = False
    catch: bool = True


class LoggingSettings(BaseSettings):
    """Sink toggles that can be configured via environment variables.

    Level, format and application name come from ComposeSettings.
    """

    log_file_enabled: bool = Field(default=False, validation_alias="ONIONWARE_LOG_FILE_ENABLED")
    log_file_path: str = Field(default="logs/onionware.log", validation_alias="ONIONWARE_LOG_FILE_PATH")
    log_structured_enabled: bool = Field(default=False, validation_alias="ONIONWARE_LOG_STRUCTURED_ENABLED")
    log_console_colorize: bool = Field(default=True, validation_alias="ONIONWARE_LOG_CONSOLE_COLORIZE")

    model_config = SettingsConfigDict(extra="ignore")


def config_from_settings(**overrides: Any) -> LoggerConfig:
    """
    Build a LoggerConfig from ComposeSettings and LoggingSettings.

    LOG_LEVEL feeds every sink level, DEBUG lowers it to DEBUG (TRACE is kept)
    and enables diagnose, LOG_FORMAT="json" serializes the console sink and
    APP_NAME names records logged without a bound name.

    Args:
        overrides: LoggerConfig fields that take precedence over the settings.
    """
    core = get_settings()
    sinks = LoggingSettings()

    level = core.LOG_LEVEL
    if core.DEBUG and level != "TRACE":
        level = "DEBUG"

    values: Dict[str, Any] = {
        "app_name": core.APP_NAME,
        "console_level": level,
        "console_serialize": core.LOG_FORMAT == "json",
        "console_colorize": sinks.log_console_colorize,
        "console_diagnose": core.DEBUG,
        "file_enabled": sinks.log_file_enabled,
        "file_path": sinks.log_file_path,
        "file_level": level,
        "structured_enabled": sinks.log_structured_enabled,
        "structured_level": level,
    }
    values.update(overrides)
    return LoggerConfig(**values)


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    Args:
        config: Logger configuration. If None, it is built by config_from_settings().
    """
    if config is None:
        config = config_from_settings()

    logger.remove()
    # Records logged without a bound name still render
    logger.configure(extra={"name": config.app_name})

    if config.console_enabled:
        logger.add(
            sys.stderr,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize and not config.console_serialize,
            serialize=config.console_serialize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.structured_enabled:
        structured_path = Path(config.structured_path)
        structured_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.structured_path,
            level=config.structured_level,
            format="{message}",
            serialize=True,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.configure(extra={"name": "onionware"})
    logger.add(
        sys.stderr,
        level="TRACE",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{extra[name]}</cyan> | <level>{message}</level>",
        colorize=False,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )


def configure_for_production() -> None:
    """Configure logging for production environment."""
    config = config_from_settings(
        console_colorize=False,
        console_backtrace=False,
        console_diagnose=False,
        structured_enabled=True,
    )
    setup_logging(config)


def configure_for_development() -> None:
    """Configure logging for development environment."""
    config = config_from_settings(
        console_level="DEBUG",
        console_colorize=True,
        console_backtrace=True,
        console_diagnose=True,
    )
    setup_logging(config)


def configure_for_environment(env: Optional[str] = None) -> None:
    """
    Apply the logging profile matching the runtime environment.

    Args:
        env: One of "development", "staging" or "production". Defaults to the ENV setting.
    """
    if env is None:
        env = get_settings().ENV

    if env == "production":
        configure_for_production()
    elif env == "development":
        configure_for_development()
    else:
        setup_logging()
