"""Exception hierarchy for REANA API client errors.

Every client error exposes the text to show to the user through
``message``. Transport failures (connection refused, DNS errors, timeouts)
and error responses of the server are distinguished by type.
"""

from typing import Any, Optional


class CLIClientError(Exception):
    """Base exception for REANA API client errors.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status code if applicable, None otherwise.
        details: Additional error context as a dictionary.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    @property
    def payload_message(self) -> Optional[str]:
        """Message carried by a structured error body, if there is one."""
        return None


class ConnectionError(CLIClientError):
    """Failed to reach the REANA server.

    Raised on network errors: server unreachable, DNS failure, TLS handshake
    failure, connection reset.
    """


class TimeoutError(CLIClientError):
    """Request timed out."""


class APIError(CLIClientError):
    """The REANA server answered with an error status code (4xx/5xx).

    Attributes:
        payload: Decoded JSON body of the response. Most endpoints return an
            object with a ``message`` field; some return other structures,
            e.g. the list of unknown secret names.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message, status_code=status_code, details=details)
        self.payload = payload

    @property
    def payload_message(self) -> Optional[str]:
        if isinstance(self.payload, dict):
            message = self.payload.get("message")
            if isinstance(message, str):
                return message
        return None

    def __str__(self) -> str:
        return self.message
