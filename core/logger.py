"""
Logging setup for the trainer.

Colour-coded console output with timestamps; modules log through
logging.getLogger(__name__) as usual.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Optional, Union


class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'

    DEBUG = '\033[36m'      # Cyan
    INFO = '\033[32m'       # Green
    WARNING = '\033[33m'    # Yellow
    ERROR = '\033[31m'      # Red
    CRITICAL = '\033[35m'   # Magenta

    TIMESTAMP = '\033[90m'  # Dark Gray


LEVEL_COLORS = {
    'DEBUG': Colors.DEBUG,
    'INFO': Colors.INFO,
    'WARNING': Colors.WARNING,
    'ERROR': Colors.ERROR,
    'CRITICAL': Colors.CRITICAL,
}


class ColoredFormatter(logging.Formatter):
    """Formatter with level colours and a short timestamp."""

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%H:%M:%S.%f')[:-3]

        if self.use_colors:
            level_color = LEVEL_COLORS.get(record.levelname, Colors.RESET)
            reset = Colors.RESET
            timestamp_color = Colors.TIMESTAMP
            bold = Colors.BOLD
        else:
            level_color = reset = timestamp_color = bold = ''

        formatted = (
            f"{timestamp_color}[{timestamp}]{reset} "
            f"{level_color}{record.levelname:8s}{reset} "
            f"{bold}{record.name}{reset} "
            f"| {record.getMessage()}"
        )

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted


def setup_logging(level: Optional[Union[int, str]] = None, use_colors: bool = True) -> logging.Logger:
    """
    Configure the root logger with the coloured console handler.

    Args:
        level: Log level; defaults to LOG_LEVEL from the environment
        use_colors: Colour output when stdout is a terminal

    Returns:
        The root logger
    """
    if level is None:
        from core.config import get_log_level
        level = get_log_level()

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(use_colors=use_colors))

    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # Suppress noisy loggers
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

    return root_logger
