"""Configuration management for guard-builder using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .diagnostics import DEFAULT_MAX_VALUE_LENGTH, DEFAULT_REDACTED_PLACEHOLDER, DiagnosticSink, sink

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".guard-builder.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"

    def to_logging_level(self) -> int:
        return {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
        }[self]


class DiagnosticsConfig(BaseModel):
    """Diagnostics configuration section."""
    enabled: bool = True
    log_value_received: bool = Field(alias="logValueReceived", default=True)
    redacted_placeholder: str = Field(alias="redactedPlaceholder", default=DEFAULT_REDACTED_PLACEHOLDER)
    max_value_length: int = Field(alias="maxValueLength", default=DEFAULT_MAX_VALUE_LENGTH)

    @field_validator("redacted_placeholder")
    @classmethod
    def validate_redacted_placeholder(cls, v):
        if not v.strip():
            raise ValueError("redacted_placeholder must not be empty")
        return v

    @field_validator("max_value_length")
    @classmethod
    def validate_max_value_length(cls, v):
        if v < 16:
            raise ValueError("max_value_length must be >= 16")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN


class GuardBuilderConfig(BaseModel):
    """Complete guard-builder configuration model."""
    diagnostics: DiagnosticsConfig = Field(default_factory=DiagnosticsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> GuardBuilderConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .guard-builder.json

    Returns:
        GuardBuilderConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    path = find_config_file() if config_path is None else Path(config_path)
    if path is None or not path.exists():
        logger.debug("No configuration file found; using defaults")
        return create_default_config()

    try:
        config = GuardBuilderConfig.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
    except ValidationError as e:
        raise ValueError(f"Failed to load config from {path}: {e}") from e

    logger.debug(f"Loaded configuration from {path}")
    return config


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest .guard-builder.json at or above start_dir (default: cwd)."""
    start = Path(start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def create_default_config() -> GuardBuilderConfig:
    """Create default configuration."""
    return GuardBuilderConfig()


def apply_config(config: GuardBuilderConfig, target: DiagnosticSink | None = None) -> None:
    """Push diagnostics settings into the process-wide sink (or target)."""
    target = target or sink
    target.configure(
        enabled=config.diagnostics.enabled,
        log_value_received=config.diagnostics.log_value_received,
        redacted_placeholder=config.diagnostics.redacted_placeholder,
        max_value_length=config.diagnostics.max_value_length,
    )
