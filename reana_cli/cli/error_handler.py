"""
Error translation and reporting for CLI commands.

Every error that reaches the dispatcher goes through ``translate_error``
once, then ``report_error`` prints it on stderr unless it was already shown.
"""

import sys
from typing import Optional, TextIO

from reana_cli.cli.client.errors import (
    CLIClientError,
    ConnectionError,
    TimeoutError,
)
from reana_cli.cli.output import MessageType, display_message
from reana_cli.errors import EmptyError, ReanaError
from reana_cli.logging import get_logger

logger = get_logger(__name__)

SERVER_NOT_FOUND_MSG = (
    "'{server_url}' not found, please verify the provided server URL "
    "or check your internet connection"
)


def translate_error(error: Exception, server_url: str) -> Exception:
    """Convert an error of the call path into the error shown to the user.

    Rules, in order:
    1. Transport errors become the server-not-found message for ``server_url``.
    2. Errors whose structured body carries a ``message`` become that message.
    3. Any other error is returned unchanged.
    """
    if isinstance(error, (ConnectionError, TimeoutError)):
        return ReanaError(
            SERVER_NOT_FOUND_MSG.format(server_url=server_url),
            details=error.details,
        )

    if isinstance(error, CLIClientError):
        message = error.payload_message
        if message is not None:
            return ReanaError(message, details={"status_code": error.status_code})

    return error


def report_error(
    error: Exception, server_url: str, out: Optional[TextIO] = None
) -> None:
    """Translate an error and print it as an error message.

    Nothing is printed for the EmptyError sentinel.

    Args:
        error: Exception raised by a command
        server_url: Configured server URL, used for transport errors
        out: Output stream, defaults to stderr
    """
    translated = translate_error(error, server_url)
    if isinstance(translated, EmptyError):
        return

    logger.debug("Command failed: %r", error, exc_info=error)
    message = str(translated) or type(translated).__name__
    display_message(
        message,
        MessageType.ERROR,
        out=out if out is not None else sys.stderr,
    )


def prefixed_error(error: Exception, server_url: str, prefix: str) -> ReanaError:
    """Translate an error and put a command-specific line in front of it.

    Example:
        "disk usage could not be retrieved:\\n<translated error>"
    """
    return ReanaError(f"{prefix}\n{translate_error(error, server_url)}")
