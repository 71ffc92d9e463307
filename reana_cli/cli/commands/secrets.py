"""Secrets commands: secrets-add, secrets-list and secrets-delete."""

import base64
import os
from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option

ENV_HELP = (
    "Secrets to be uploaded from literal string. "
    "E.g. PASSWORD=password123"
)
FILE_HELP = "Secrets to be uploaded from file. E.g. /path/to/.keytab"


def parse_secrets(
    env_secrets: list[str], file_secrets: list[str]
) -> tuple[dict[str, dict[str, str]], list[str]]:
    """Build the secrets payload from ``--env`` literals and ``--file`` paths.

    Values are base64-encoded; file secrets are named after the file.

    Returns:
        Tuple of (name -> {type, value}, secret names in input order)
    """
    from reana_cli.cli.filters import split_key_value
    from reana_cli.config.validation import validate_file
    from reana_cli.errors import ValidationError

    secrets: dict[str, dict[str, str]] = {}
    names: list[str] = []

    for literal in env_secrets:
        try:
            name, value = split_key_value(literal)
        except ValueError:
            raise ValidationError(
                f'option "{literal}" is invalid:\n'
                'for literal strings use "SECRET_NAME=VALUE" format'
            ) from None
        names.append(name)
        secrets[name] = {
            "type": "env",
            "value": base64.b64encode(value.encode()).decode(),
        }

    for path in file_secrets:
        try:
            validate_file(path)
        except ValidationError as e:
            raise ValidationError(f"invalid value for '--file': {e}") from None
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ValidationError(f"file {path} could not be uploaded: {e}") from e
        name = os.path.basename(path)
        names.append(name)
        secrets[name] = {"type": "file", "value": base64.b64encode(data).decode()}

    return secrets, names


@reana_command()
def secrets_add(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    env: Optional[list[str]] = typer.Option(None, "--env", help=ENV_HELP),
    file: Optional[list[str]] = typer.Option(None, "--file", help=FILE_HELP),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Overwrite the secret if already present."
    ),
) -> None:
    """Add secrets from literal string or from file.

    Examples:
        reana-client secrets-add --env PASSWORD=password

        reana-client secrets-add --file ~/.keytab

        reana-client secrets-add --env USER=reanauser
        --env PASSWORD=password --file ~/.keytab
    """
    from reana_cli.cli.command_base import (
        connect,
        is_option_set,
        split_list_option,
    )
    from reana_cli.cli.output import MessageType, display_message
    from reana_cli.config.validation import validate_at_least_one

    provided = [name for name in ("env", "file") if is_option_set(ctx, name)]
    validate_at_least_one(provided, ["env", "file"])

    secrets, names = parse_secrets(split_list_option(env), split_list_option(file))
    with connect(ctx.obj, access_token) as api:
        api.add_secrets(secrets, overwrite=overwrite)

    display_message(
        f"Secrets {', '.join(names)} were successfully uploaded.", MessageType.SUCCESS
    )


@reana_command()
def secrets_list(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
) -> None:
    """List user secrets.

    Examples:
        reana-client secrets-list
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import display_table

    with connect(ctx.obj, access_token) as api:
        secrets = api.list_secrets()

    rows = [[secret.get("name", ""), secret.get("type", "")] for secret in secrets]
    display_table(["name", "type"], rows)


@reana_command()
def secrets_delete(
    ctx: typer.Context,
    names: list[str] = typer.Argument(..., help="Names of the secrets to delete."),
    access_token: Optional[str] = access_token_option(),
) -> None:
    """Delete user secrets by name.

    Examples:
        reana-client secrets-delete PASSWORD
    """
    from reana_cli.cli.client import APIError
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import MessageType, display_message
    from reana_cli.errors import ReanaError

    try:
        with connect(ctx.obj, access_token) as api:
            deleted = api.delete_secrets(names)
    except APIError as e:
        if e.status_code == 404 and isinstance(e.payload, list):
            raise ReanaError(
                f"secrets {e.payload} do not exist. Nothing was deleted"
            ) from e
        raise

    display_message(
        f"Secrets {', '.join(deleted)} were successfully deleted.", MessageType.SUCCESS
    )
