"""
Error handling for the REANA client.
"""

from reana_cli.errors.exceptions import (
    CommandError,
    ConfigurationError,
    EmptyError,
    ReanaError,
    ValidationError,
)

__all__ = [
    "CommandError",
    "ConfigurationError",
    "EmptyError",
    "ReanaError",
    "ValidationError",
]
