"""Configuration loader for the CV normalizer."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import NormalizerConfig
from .validators import check_for_warnings, emit_warnings

DEFAULT_CONFIG_CANDIDATES = (
    Path("cv_normalizer.yaml"),
    Path("config") / "cv_normalizer.yaml",
)


def load_config(
    config_path: Optional[Path] = None,
    env_config: Optional[EnvironmentConfig] = None,
) -> NormalizerConfig:
    """
    Load configuration from YAML and apply environment overrides.

    Implements fallback logic for config file location:
    1. Use provided config_path if given
    2. Use CV_NORMALIZER_CONFIG if set
    3. Try cv_normalizer.yaml in current directory
    4. Try ./config/cv_normalizer.yaml
    5. Use built-in defaults

    An explicitly requested file that does not exist is an error; a missing
    file at a default location is not.

    Args:
        config_path: Optional path to configuration file
        env_config: Pre-loaded environment config (loaded from os.environ if None)

    Returns:
        Validated NormalizerConfig

    Raises:
        ConfigurationError: If the file or environment is invalid
    """
    if env_config is None:
        env_config = load_environment_config()

    config_file = _find_config_file(config_path or env_config.config_path)

    if config_file is None:
        config = NormalizerConfig()
    else:
        config = _load_config_file(config_file)

    return apply_environment_overrides(config, env_config)


def apply_environment_overrides(
    config: NormalizerConfig, env_config: EnvironmentConfig
) -> NormalizerConfig:
    """
    Return a copy of config with LOG_LEVEL / LOG_FORMAT overrides applied.

    Priority: environment > configuration file > defaults.
    """
    logging_updates = {}
    if env_config.log_level:
        logging_updates["level"] = env_config.log_level
    if env_config.log_format:
        logging_updates["format"] = env_config.log_format

    if not logging_updates:
        return config

    logging_config = config.logging.model_copy(update=logging_updates)
    return config.model_copy(update={"logging": logging_config})


def _load_config_file(config_file: Path) -> NormalizerConfig:
    try:
        with open(config_file, "r") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        )
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[
                f"Ensure {config_file} is readable",
                "Check file permissions",
            ],
        )

    # An empty file means "all defaults"
    if config_dict is None:
        config_dict = {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration root must be a mapping, got {type(config_dict).__name__}",
            suggestions=["Review cv_normalizer.example.yaml for the expected format"],
        )

    warnings = check_for_warnings(config_dict)
    if warnings:
        emit_warnings(warnings)

    try:
        return NormalizerConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(e, source=str(config_file))


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find configuration file using fallback logic.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Path to configuration file, or None to use defaults

    Raises:
        ConfigurationError: If an explicit path does not exist
    """
    if config_path:
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Unset CV_NORMALIZER_CONFIG to use the built-in defaults",
                ],
            )
        return config_path

    for candidate in DEFAULT_CONFIG_CANDIDATES:
        if candidate.exists():
            return candidate

    return None


def validate_config_file(config_path: Path) -> bool:
    """
    Validate a configuration file without applying environment overrides.

    Useful for pre-deployment checks.

    Args:
        config_path: Path to configuration file

    Returns:
        True if valid, False otherwise (errors printed to stdout)
    """
    try:
        _load_config_file(config_path)
        print(f"✓ Configuration file {config_path} is valid")
        return True
    except ConfigurationError as e:
        print(f"✗ Configuration validation failed:\n{e}")
        return False
