"""Prune command implementation."""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option


@reana_command()
def prune(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    include_inputs: bool = typer.Option(
        False,
        "--include-inputs",
        "-i",
        help="Delete also the input files of the workflow.",
    ),
    include_outputs: bool = typer.Option(
        False,
        "--include-outputs",
        "-o",
        help="Delete also the output files of the workflow.",
    ),
) -> None:
    """Prune workspace files.

    Deletes the files of the workspace that are neither inputs nor outputs
    of the workflow, unless told otherwise.

    Examples:
        reana-client prune -w myanalysis.42

        reana-client prune -w myanalysis.42 --include-inputs
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import MessageType, display_message

    with connect(ctx.obj, access_token) as api:
        payload = api.prune_workspace(
            workflow, include_inputs=include_inputs, include_outputs=include_outputs
        )

    display_message(payload.get("message", ""), MessageType.SUCCESS)
