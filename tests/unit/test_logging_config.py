"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path

from sendowl.logging_config import (
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_http_exchange,
    set_correlation_id,
    setup_logging,
    setup_logging_from_config,
)
from sendowl.config.settings import LoggingConfig


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""
    
    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        setup_logging()
        
        logger = get_logger("test")
        # Logger can be BoundLogger or BoundLoggerLazyProxy (both are valid)
        assert hasattr(logger, 'info') and hasattr(logger, 'warning') and hasattr(logger, 'error')
    
    def test_setup_logging_with_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(level="DEBUG")
        
        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
    
    def test_setup_logging_json_format(self, temp_dir: Path):
        """Test setup_logging with JSON format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)
        
        logger = get_logger("test")
        logger.info("test_message", key="value")
        
        log_content = log_file.read_text()
        log_lines = [line for line in log_content.strip().split("\n") if line]
        
        log_entry = json.loads(log_lines[0])
        assert log_entry["event"] == "test_message"
        assert log_entry["key"] == "value"
        assert "timestamp" in log_entry
        assert "level" in log_entry
    
    def test_get_logger_prefixes_name_once(self):
        """Test module loggers live under the sendowl namespace."""
        setup_logging(level="INFO", json_format=True)
        assert get_logger("sendowl.sdk.transport") is not None
        assert get_logger("tests") is not None
    
    def test_correlation_id_management(self):
        """Test correlation ID context management."""
        assert get_correlation_id() is None
        
        correlation_id = set_correlation_id("test-correlation-id")
        assert correlation_id == "test-correlation-id"
        assert get_correlation_id() == "test-correlation-id"
        
        clear_correlation_id()
        assert get_correlation_id() is None
    
    def test_correlation_id_auto_generation(self):
        """Test correlation ID auto-generation."""
        correlation_id = set_correlation_id()
        assert correlation_id is not None
        assert len(correlation_id) > 0
        assert get_correlation_id() == correlation_id
        
        clear_correlation_id()
    
    def test_correlation_id_in_logs(self, temp_dir: Path):
        """Test correlation ID appears in log output."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)
        
        logger = get_logger("test")
        
        set_correlation_id("test-correlation-123")
        logger.info("test_message")
        
        log_content = log_file.read_text()
        log_entry = json.loads(log_content.strip().split("\n")[0])
        assert log_entry["correlation_id"] == "test-correlation-123"
        
        clear_correlation_id()
    
    def test_log_http_exchange(self, temp_dir: Path):
        """Test log_http_exchange."""
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file, json_format=True)
        
        logger = get_logger("test")
        log_http_exchange(
            logger,
            method="GET",
            path="products/1",
            status_code=404,
            duration_ms=12.5,
        )
        
        log_content = log_file.read_text()
        log_entry = json.loads(log_content.strip().split("\n")[0])
        assert log_entry["event_type"] == "http_exchange"
        assert log_entry["method"] == "GET"
        assert log_entry["path"] == "products/1"
        assert log_entry["status_code"] == 404
        assert log_entry["duration_ms"] == 12.5
        assert log_entry["level"] == "debug"
    
    def test_log_http_exchange_hidden_at_info(self, temp_dir: Path):
        """Test http exchanges are only emitted at DEBUG."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)
        
        log_http_exchange(
            get_logger("test"),
            method="DELETE",
            path="products/1",
            status_code=204,
            duration_ms=1.0,
        )
        
        assert "http_exchange" not in log_file.read_text()
    
    def test_setup_logging_from_config(self, temp_dir: Path):
        """Test the logging section of a loaded configuration is applied."""
        log_file = temp_dir / "from_config.log"
        setup_logging_from_config(
            LoggingConfig(level="WARNING", file=str(log_file), json_format=True)
        )
        
        assert logging.getLogger().level == logging.WARNING
        get_logger("test").warning("configured", source="config")
        
        log_entry = json.loads(log_file.read_text().strip().split("\n")[0])
        assert log_entry["event"] == "configured"
        assert log_entry["source"] == "config"
