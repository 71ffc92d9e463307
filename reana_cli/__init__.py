"""
REANA client - command-line interface for the REANA reproducible analysis platform.
"""

from reana_cli.logging import configure_logging, get_logger
from reana_cli.version import __version__

__all__ = ["__version__", "configure_logging", "get_logger"]
