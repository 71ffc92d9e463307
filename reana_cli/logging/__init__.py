"""
Logging system for the REANA client.

All modules obtain their logger through ``get_logger(__name__)``; the root
command installs the handler once per invocation with ``configure_logging``.
"""

from reana_cli.logging.config import (
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    ColorFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "LOG_DATE_FORMAT",
    "LOG_FORMAT",
    "ColorFormatter",
    "configure_logging",
    "get_logger",
]
