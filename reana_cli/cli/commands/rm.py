"""Rm command implementation.

Implements `reana-client rm`, which deletes workspace files matching one or
more patterns and reports every deleted and failed file.
"""

from typing import Any, Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option


def report_deletion(pattern: str, payload: dict[str, Any]) -> bool:
    """Print the outcome of deleting one pattern.

    Returns:
        True if anything went wrong (no match or a failed file)
    """
    from reana_cli.cli.output import MessageType, display_message

    deleted = payload.get("deleted") or {}
    failed = payload.get("failed") or {}
    has_error = False

    if not deleted and not failed:
        has_error = True
        display_message(f"{pattern} did not match any existing file", MessageType.ERROR)

    freed_space = 0
    for file_name, info in deleted.items():
        freed_space += int((info or {}).get("size") or 0)
        display_message(f"File {file_name} was successfully deleted.", MessageType.SUCCESS)
    for file_name, info in failed.items():
        has_error = True
        display_message(
            f"Something went wrong while deleting {file_name}.\n"
            f"{(info or {}).get('error', '')}",
            MessageType.ERROR,
        )
    if freed_space > 0:
        display_message(f"{freed_space} bytes freed up.", MessageType.SUCCESS)
    return has_error


@reana_command()
def rm(
    ctx: typer.Context,
    patterns: list[str] = typer.Argument(..., help="Files or patterns to delete."),
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
) -> None:
    """Delete files from workspace.

    Examples:
        reana-client rm -w myanalysis.42 data/mydata.csv

        reana-client rm -w myanalysis.42 'data/*root*'
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.errors import EmptyError

    has_error = False
    with connect(ctx.obj, access_token) as api:
        for pattern in patterns:
            payload = api.delete_file(workflow, pattern)
            has_error = report_deletion(pattern, payload) or has_error

    if has_error:
        raise EmptyError()
