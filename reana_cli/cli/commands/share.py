"""Sharing commands: share-add, share-remove and share-status."""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.logging import get_logger

logger = get_logger(__name__)


@reana_command()
def share_add(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    users: list[str] = typer.Option(
        ...,
        "--user",
        "-u",
        help="Users to share the workflow with.",
    ),
    message: str = typer.Option(
        "", "--message", "-m", help="Optional message that is sent to the user(s)."
    ),
    valid_until: str = typer.Option(
        "",
        "--valid-until",
        help="Optional date when access to the workflow will expire for the "
        "given user(s) (format: YYYY-MM-DD).",
    ),
) -> None:
    """Share a workflow with other users (read-only).

    Examples:
        reana-client share-add -w myanalysis.42 --user bob@example.org

        reana-client share-add -w myanalysis.42 --user bob@example.org
        --user cecile@example.org --message "Please review my analysis"
        --valid-until 2025-12-31
    """
    from reana_cli.cli.client import CLIClientError
    from reana_cli.cli.command_base import connect, split_list_option
    from reana_cli.cli.error_handler import translate_error
    from reana_cli.cli.output import MessageType, display_message

    state = ctx.obj
    shared_users: list[str] = []
    share_errors: list[str] = []

    with connect(state, access_token) as api:
        for user in split_list_option(users):
            logger.info("Sharing workflow %s with user %s", workflow, user)
            try:
                api.share_workflow(
                    workflow, user, message=message, valid_until=valid_until
                )
            except CLIClientError as e:
                error = translate_error(e, state.server_url)
                share_errors.append(f"Failed to share {workflow} with {user}: {error}")
            else:
                shared_users.append(user)

    if shared_users:
        display_message(
            f"{workflow} is now read-only shared with {', '.join(shared_users)}",
            MessageType.SUCCESS,
        )
    for error in share_errors:
        display_message(error, MessageType.ERROR)


@reana_command()
def share_remove(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    users: list[str] = typer.Option(
        ...,
        "--user",
        "-u",
        help="Users to unshare the workflow with.",
    ),
) -> None:
    """Unshare a workflow.

    Examples:
        reana-client share-remove -w myanalysis.42 --user bob@example.org
    """
    from reana_cli.cli.client import CLIClientError
    from reana_cli.cli.command_base import connect, split_list_option
    from reana_cli.cli.error_handler import translate_error
    from reana_cli.cli.output import MessageType, display_message

    state = ctx.obj
    unshared_users: list[str] = []
    unshare_errors: list[str] = []

    with connect(state, access_token) as api:
        for user in split_list_option(users):
            logger.info("Unsharing workflow %s with user %s", workflow, user)
            try:
                api.unshare_workflow(workflow, user)
            except CLIClientError as e:
                error = translate_error(e, state.server_url)
                unshare_errors.append(
                    f"Failed to unshare {workflow} with {user}: {error}"
                )
            else:
                unshared_users.append(user)

    if unshared_users:
        display_message(
            f"{workflow} is no longer shared with {', '.join(unshared_users)}",
            MessageType.SUCCESS,
        )
    for error in unshare_errors:
        display_message(error, MessageType.ERROR)


@reana_command()
def share_status(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    format_options: Optional[list[str]] = typer.Option(
        None,
        "--format",
        help="Format output according to column titles or column values. "
        "Use <column_name>=<column_value> format.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Get output in JSON format."),
) -> None:
    """Show with whom a workflow is shared.

    Examples:
        reana-client share-status -w myanalysis.42
    """
    from reana_cli.cli.command_base import connect, print_table, split_list_option
    from reana_cli.cli.formatter import format_table, parse_format_parameters
    from reana_cli.cli.output import MessageType, display_message
    from reana_cli.cli.table import ColumnType, Table

    with connect(ctx.obj, access_token) as api:
        payload = api.get_share_status(workflow)

    shared_with = payload.get("shared_with") or []
    if not shared_with:
        display_message(
            f"Workflow {workflow} is not shared with anyone.", MessageType.INFO
        )
        return

    table = Table.from_columns(
        [
            (
                "user_email",
                ColumnType.STRING,
                [share.get("user_email") for share in shared_with],
            ),
            (
                "valid_until",
                ColumnType.STRING,
                [share.get("valid_until") for share in shared_with],
            ),
        ]
    )
    directives = parse_format_parameters(split_list_option(format_options), True)
    print_table(format_table(table, directives), json_output)
