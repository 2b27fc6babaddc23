"""
Configuration management for the SendOwl transport.

Handles loading and validation of configuration files.
"""

from sendowl.config.settings import (
    ApiConfig,
    LoggingConfig,
    SendOwlConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "ApiConfig",
    "LoggingConfig",
    "SendOwlConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
