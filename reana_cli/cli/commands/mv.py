"""Mv command implementation."""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option


@reana_command()
def mv(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Source file or directory."),
    target: str = typer.Argument(..., help="Target file or directory."),
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
) -> None:
    """Move files within workspace.

    Examples:
        reana-client mv -w myanalysis.42 data/input.txt input/input.txt
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import MessageType, display_message

    with connect(ctx.obj, access_token) as api:
        api.move_files(workflow, source, target)

    display_message(f"{source} was successfully moved to {target}", MessageType.SUCCESS)
