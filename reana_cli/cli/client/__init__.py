"""REANA API client module.

Provides the HTTP client used by every command, the typed endpoint layer and
the client error hierarchy.
"""

from reana_cli.cli.client.api import ReanaAPI
from reana_cli.cli.client.errors import (
    APIError,
    CLIClientError,
    ConnectionError,
    TimeoutError,
)
from reana_cli.cli.client.sync_client import SyncCLIClient

__all__ = [
    "ReanaAPI",
    "SyncCLIClient",
    "CLIClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
]
