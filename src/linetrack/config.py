"""
Logging configuration for scripts that build tracks.

The library itself only creates module loggers; handlers are installed
by the application through setup_logging().
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
import logging
import sys


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    log_file: Optional[Path] = None
    fmt: str = DEFAULT_LOG_FORMAT
    
    def __post_init__(self):
        """Validate and normalize configuration."""
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
        self.level = self.level.upper()
        if not isinstance(getattr(logging, self.level, None), int):
            raise ValueError(f"Unknown log level: {self.level}")


def setup_logging(config: LoggingConfig | None = None) -> List[logging.Handler]:
    """Configure root logging.
    
    Args:
        config: Logging settings. Uses defaults if None.
    
    Returns:
        Handlers handed to logging.basicConfig
    """
    config = config or LoggingConfig()
    
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))
    
    logging.basicConfig(
        level=getattr(logging, config.level),
        format=config.fmt,
        handlers=handlers,
    )
    
    return handlers
