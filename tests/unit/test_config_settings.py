"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SendOwl Transport, a product of Garudex Labs

Unit tests for configuration management.

Tests configuration loading, environment expansion and validation.
"""

import pytest

from sendowl.config.settings import (
    DEFAULT_BASE_URL,
    ApiConfig,
    LoggingConfig,
    SendOwlConfig,
    _validate_config,
    get_default_config,
    get_default_config_path,
    load_config,
)
from sendowl.exceptions import InvalidConfigurationError


class TestConfigurationDataclasses:
    """Test configuration dataclass structures."""

    def test_api_config_defaults(self):
        """Test ApiConfig has correct defaults."""
        config = ApiConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.api_key == ""
        assert config.api_secret == ""
        assert config.timeout == 30.0

    def test_logging_config_defaults(self):
        """Test LoggingConfig has correct defaults."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file == ""
        assert config.json_format is True

    def test_default_config(self):
        config = get_default_config()
        assert isinstance(config, SendOwlConfig)
        assert config.api == ApiConfig()


class TestLoadConfig:
    """Test loading configuration files."""

    def test_missing_file_returns_defaults(self, temp_dir):
        config = load_config(str(temp_dir / "missing.yaml"))
        assert config == get_default_config()

    def test_empty_file_returns_defaults(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == get_default_config()

    def test_loads_values(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text(
            """
api:
  base_url: https://example.test/api/v1
  api_key: abc
  api_secret: def
  timeout: 12
logging:
  level: DEBUG
  json_format: false
"""
        )
        config = load_config(str(path))
        assert config.api.base_url == "https://example.test/api/v1"
        assert config.api.api_key == "abc"
        assert config.api.api_secret == "def"
        assert config.api.timeout == 12.0
        assert config.logging.level == "DEBUG"
        assert config.logging.json_format is False

    def test_expands_environment_variables(self, temp_dir, monkeypatch):
        monkeypatch.setenv("SENDOWL_API_KEY", "env-key")
        monkeypatch.setenv("SENDOWL_JSON_LOGS", "false")
        monkeypatch.delenv("SENDOWL_API_SECRET", raising=False)
        path = temp_dir / "config.yaml"
        path.write_text(
            """
api:
  api_key: ${SENDOWL_API_KEY}
  api_secret: ${SENDOWL_API_SECRET:fallback}
logging:
  json_format: ${SENDOWL_JSON_LOGS}
"""
        )
        config = load_config(str(path))
        assert config.api.api_key == "env-key"
        assert config.api.api_secret == "fallback"
        assert config.logging.json_format is False

    def test_default_path_honours_env(self, temp_dir, monkeypatch):
        path = temp_dir / "custom.yaml"
        path.write_text("api:\n  api_key: from-env-path\n")
        monkeypatch.setenv("SENDOWL_CONFIG", str(path))
        assert get_default_config_path() == str(path)
        assert load_config().api.api_key == "from-env-path"

    def test_malformed_yaml_raises(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("api: [unclosed\n")
        with pytest.raises(InvalidConfigurationError, match="Failed to parse YAML"):
            load_config(str(path))

    def test_non_mapping_raises(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(InvalidConfigurationError):
            load_config(str(path))

    def test_non_numeric_timeout_raises(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("api:\n  timeout: soon\n")
        with pytest.raises(InvalidConfigurationError):
            load_config(str(path))


class TestValidateConfig:
    """Test configuration validation."""

    def test_empty_base_url(self):
        with pytest.raises(InvalidConfigurationError, match="base_url"):
            _validate_config(SendOwlConfig(api=ApiConfig(base_url="")))

    def test_non_http_scheme(self):
        with pytest.raises(InvalidConfigurationError, match="http or https"):
            _validate_config(SendOwlConfig(api=ApiConfig(base_url="ftp://example.test")))

    def test_non_positive_timeout(self):
        with pytest.raises(InvalidConfigurationError, match="timeout"):
            _validate_config(SendOwlConfig(api=ApiConfig(timeout=0)))

    def test_unknown_log_level(self):
        with pytest.raises(InvalidConfigurationError, match="logging level"):
            _validate_config(SendOwlConfig(logging=LoggingConfig(level="LOUD")))

    def test_defaults_are_valid(self):
        _validate_config(get_default_config())
