"""
Exception hierarchy for the REANA client.

Errors raised before any request is sent (configuration and validation) and
errors detected by a command itself all derive from ReanaError. Their
message is shown to the user as-is.
"""

from typing import Any, Optional


class ReanaError(Exception):
    """
    Base exception class for all REANA client errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for reference and documentation
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ReanaError):
    """
    Invalid or missing configuration: log level, access token, server URL or
    workflow. Raised before any API call is made.
    """


class ValidationError(ReanaError):
    """
    Invalid user input: malformed filters, unknown filter keys or format
    columns, values outside an enumerated set.

    Examples:
        >>> raise ValidationError(
        ...     "wrong input format. Please use --filter filter_name=filter_value"
        ... )
    """


class CommandError(ReanaError):
    """A command could not produce its result (e.g. nothing matched a filter)."""


class EmptyError(ReanaError):
    """
    Sentinel for failures that were already reported to the user.

    The process still exits with a non-zero code, but nothing else is printed.
    """

    def __init__(self) -> None:
        super().__init__("", error_code="REANA-Empty")
