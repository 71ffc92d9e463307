"""
Logging configuration for the REANA client.

Log records go to stderr so that they never mix with command output, using a
plain text format with full timestamps.
"""

import logging
import sys
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Color formatting for console output
_LOG_COLORS = {
    "DEBUG": "\033[94m",  # Blue
    "INFO": "\033[92m",  # Green
    "WARNING": "\033[93m",  # Yellow
    "ERROR": "\033[91m",  # Red
    "CRITICAL": "\033[91m\033[1m",  # Bold Red
    "RESET": "\033[0m",  # Reset
}

_HANDLER_NAME = "reana-cli-console"


class ColorFormatter(logging.Formatter):
    """Formatter that adds colors to log levels for console output."""

    def __init__(self, fmt: str, datefmt: Optional[str] = None, use_color: bool = True):
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record):
        if not self.use_color:
            return super().format(record)

        levelname = record.levelname
        if levelname in _LOG_COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = (
                f"{_LOG_COLORS[levelname]}{levelname}{_LOG_COLORS['RESET']}"
            )
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        A logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the client's console logging.

    Reconfiguring replaces the handler installed by a previous call, so the
    function is safe to call on every command invocation.

    Args:
        level: Logging level name (``DEBUG``, ``INFO``, ``WARNING``) or number
        stream: Output stream, defaults to stderr
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)

    stream = stream if stream is not None else sys.stderr
    console_handler = logging.StreamHandler(stream)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(level)
    use_color = hasattr(stream, "isatty") and stream.isatty()
    console_handler.setFormatter(
        ColorFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT, use_color=use_color)
    )
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)
