"""
Validators for user-provided values.

Each validator returns nothing on success and raises ConfigurationError or
ValidationError with the message shown to the user.
"""

import os
from typing import Any, Iterable, Mapping
from urllib.parse import urlparse

from reana_cli.config.constants import AVAILABLE_OPERATIONAL_OPTIONS
from reana_cli.errors import ConfigurationError, ValidationError

INVALID_ACCESS_TOKEN_MSG = (
    "please provide your access token by using the -t/--access-token flag, "
    "or by setting the REANA_ACCESS_TOKEN environment variable"
)
INVALID_SERVER_URL_MSG = "please set REANA_SERVER_URL environment variable"
INVALID_WORKFLOW_MSG = (
    "workflow name must be provided either with `--workflow` option "
    "or with REANA_WORKON environment variable"
)


def _join(values: Iterable[str]) -> str:
    return "', '".join(values)


def validate_access_token(token: str) -> None:
    if not token or not token.strip():
        raise ConfigurationError(INVALID_ACCESS_TOKEN_MSG)


def validate_server_url(server_url: str) -> None:
    """Check that the server URL is an absolute http(s) URL."""
    if not server_url or not server_url.strip():
        raise ConfigurationError(INVALID_SERVER_URL_MSG)

    parsed = urlparse(server_url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(
            f"invalid server URL '{server_url}': expected an absolute "
            "http or https URL, please check REANA_SERVER_URL"
        )


def validate_workflow(workflow: str) -> None:
    if not workflow or not workflow.strip():
        raise ConfigurationError(INVALID_WORKFLOW_MSG)


def validate_choice(arg: str, choices: Iterable[str], name: str) -> None:
    """Check that ``arg`` is one of ``choices``.

    Args:
        arg: Value given by the user
        choices: Accepted values
        name: Name of the option or argument, used in the message
    """
    choices = list(choices)
    if arg not in choices:
        raise ValidationError(
            f"invalid value for '{name}': '{arg}' is not part of '{_join(choices)}'"
        )


def validate_at_least_one(provided: Iterable[str], options: Iterable[str]) -> None:
    """Check that at least one of ``options`` is among the ``provided`` options."""
    provided = set(provided)
    options = list(options)
    if not any(option in provided for option in options):
        raise ValidationError(
            f"at least one of the options: '{_join(options)}' is required"
        )


def validate_input_parameters(
    input_params: Mapping[str, str],
    original_params: Mapping[str, Any],
) -> tuple[dict[str, str], list[str]]:
    """Keep the input parameters declared in the workflow's reana.yaml.

    Returns:
        Tuple of (accepted parameters, error messages for the dropped ones)
    """
    validated: dict[str, str] = {}
    errors: list[str] = []
    for param, value in input_params.items():
        if param in original_params:
            validated[param] = value
        else:
            errors.append(f"given parameter - {param}, is not in reana.yaml")
    return validated, errors


def validate_operational_options(
    workflow_type: str, options: Mapping[str, str]
) -> dict[str, str]:
    """Check operational options against the workflow type and translate them.

    Returns:
        Options renamed to what the workflow engine of ``workflow_type`` expects

    Raises:
        ValidationError: If an option is unknown or not supported by the type
    """
    validated: dict[str, str] = {}
    for option, value in options.items():
        translations = AVAILABLE_OPERATIONAL_OPTIONS.get(option)
        if translations is None:
            raise ValidationError(f"operational option '{option}' not supported")
        translation = translations.get(workflow_type)
        if translation is None:
            raise ValidationError(
                f"operational option '{option}' not supported for "
                f"{workflow_type} workflows"
            )
        validated[translation] = value
    return validated


def validate_file(path: str) -> None:
    """Check that ``path`` is an existing, readable regular file."""
    if not os.path.exists(path):
        raise ValidationError(f"file '{path}' does not exist")
    if os.path.isdir(path):
        raise ValidationError(f"file '{path}' is a directory")
    if not os.access(path, os.R_OK):
        raise ValidationError(f"file '{path}' is not readable")
