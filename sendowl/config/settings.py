"""
Configuration management for the SendOwl transport.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax, so API
credentials never have to be written into the file itself.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml

from sendowl.exceptions import InvalidConfigurationError
from sendowl.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://www.sendowl.com/api/v1"
CONFIG_PATH_ENV_VAR = "SENDOWL_CONFIG"


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.
    
    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}
    
    Args:
        value: Configuration value (string, dict, list, or other)
    
    Returns:
        Value with environment variables expanded
    
    Examples:
        "${SENDOWL_API_KEY}" -> value of SENDOWL_API_KEY env var
        "${SENDOWL_TIMEOUT:30}" -> value of SENDOWL_TIMEOUT or "30" if not set
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'
        
        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)
        
        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class ApiConfig:
    """API endpoint and credential configuration."""
    
    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    api_secret: str = ""
    timeout: float = 30.0


@dataclass
class LoggingConfig:
    """Logging configuration."""
    
    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class SendOwlConfig:
    """Main SendOwl transport configuration."""
    
    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path, honouring SENDOWL_CONFIG."""
    return os.path.expanduser(
        os.environ.get(CONFIG_PATH_ENV_VAR, "~/.sendowl/config.yaml")
    )


def get_default_config() -> SendOwlConfig:
    """
    Get default configuration with sensible defaults.
    
    Returns:
        SendOwlConfig: Default configuration object
    """
    return SendOwlConfig(api=ApiConfig(), logging=LoggingConfig())


def load_config(config_path: Optional[str] = None) -> SendOwlConfig:
    """
    Load configuration from YAML file with validation.
    
    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.
    
    Args:
        config_path: Path to configuration file. If None, uses default path.
    
    Returns:
        SendOwlConfig: Loaded and validated configuration
    
    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()
    
    config_path = os.path.expanduser(config_path)
    
    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()
    
    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e
    
    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()
    
    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping at the top level"
        )
    
    config_data = _expand_env_vars(config_data)
    
    try:
        config = _build_config_from_dict(config_data)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e
    _validate_config(config)
    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _as_bool(value: Any) -> bool:
    # env-expanded values arrive as strings
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _build_config_from_dict(config_data: Dict[str, Any]) -> SendOwlConfig:
    """
    Build SendOwlConfig from dictionary loaded from YAML.
    
    Merges user configuration with defaults.
    """
    default_config = get_default_config()
    
    api_data = config_data.get('api') or {}
    api = ApiConfig(
        base_url=str(api_data.get('base_url', default_config.api.base_url)),
        api_key=str(api_data.get('api_key', default_config.api.api_key)),
        api_secret=str(api_data.get('api_secret', default_config.api.api_secret)),
        timeout=float(api_data.get('timeout', default_config.api.timeout)),
    )
    
    logging_data = config_data.get('logging') or {}
    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)),
        file=os.path.expanduser(
            str(logging_data.get('file', default_config.logging.file))
        ),
        json_format=_as_bool(logging_data.get('json_format', default_config.logging.json_format)),
    )
    
    return SendOwlConfig(api=api, logging=logging)


def _validate_config(config: SendOwlConfig) -> None:
    """
    Validate configuration values.
    
    Args:
        config: Configuration to validate
    
    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not config.api.base_url:
        raise InvalidConfigurationError("base_url cannot be empty")
    
    scheme = urlparse(config.api.base_url).scheme
    if scheme not in ("http", "https"):
        raise InvalidConfigurationError(
            f"base_url must use http or https, got '{config.api.base_url}'"
        )
    
    if config.api.timeout <= 0:
        raise InvalidConfigurationError(
            f"timeout must be positive, got {config.api.timeout}"
        )
    
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )
