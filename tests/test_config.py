"""Tests for logging configuration."""

import logging
from pathlib import Path

import pytest

from linetrack.config import LoggingConfig, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back after a test reconfigures it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    root.handlers[:] = []
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoggingConfig:
    """Test logging configuration."""
    
    def test_defaults(self):
        """Test default settings."""
        config = LoggingConfig()
        
        assert config.level == "INFO"
        assert config.log_file is None
    
    def test_normalization(self):
        """Test string paths and lowercase levels are normalized."""
        config = LoggingConfig(level="debug", log_file="track.log")
        
        assert config.level == "DEBUG"
        assert config.log_file == Path("track.log")
    
    def test_unknown_level(self):
        """Test unknown levels are rejected."""
        with pytest.raises(ValueError):
            LoggingConfig(level="LOUD")
    
    def test_setup_logging_to_file(self, tmp_path, restore_root_logger):
        """Test records reach the configured log file."""
        log_file = tmp_path / "track.log"
        
        handlers = setup_logging(LoggingConfig(level="DEBUG", log_file=log_file))
        logging.getLogger("linetrack.test").debug("layer added")
        for handler in handlers:
            handler.flush()
        
        assert len(handlers) == 2
        assert logging.getLogger().level == logging.DEBUG
        assert "layer added" in log_file.read_text()
