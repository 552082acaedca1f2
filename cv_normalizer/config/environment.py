"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError
from .models import LogFormat, LogLevel


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        """Initialize environment configuration."""
        self.config_path = config_path
        self.log_level = log_level
        self.log_format = log_format
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - CV_NORMALIZER_CONFIG: Path to a YAML configuration file
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_FORMAT: Override log format (json, key-value)
    - ENVIRONMENT: Environment label attached to every log record

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    config_path_str = os.getenv("CV_NORMALIZER_CONFIG")
    log_level = os.getenv("LOG_LEVEL")
    log_format = os.getenv("LOG_FORMAT")
    environment = os.getenv("ENVIRONMENT")

    config_path = None
    if config_path_str and config_path_str.strip():
        config_path = Path(config_path_str.strip())

    if log_level:
        valid_levels = [level.value for level in LogLevel]
        if log_level.upper() not in valid_levels:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(valid_levels)}"
            )
        else:
            log_level = log_level.upper()

    if log_format:
        valid_formats = [fmt.value for fmt in LogFormat]
        if log_format.lower() not in valid_formats:
            errors.append(
                f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(valid_formats)}"
            )
        else:
            log_format = log_format.lower()

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Unset the variable to fall back to the configuration file",
                "Check the spelling of LOG_LEVEL and LOG_FORMAT values",
            ],
        )

    return EnvironmentConfig(
        config_path=config_path,
        log_level=log_level,
        log_format=log_format,
        environment=environment,
    )
