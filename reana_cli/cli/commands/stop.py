"""Stop command implementation."""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.logging import get_logger

logger = get_logger(__name__)

GRACEFUL_STOP_MSG = (
    "graceful stop not implemented yet. If you really want to stop your "
    "workflow without waiting for jobs to finish use: --force option"
)


@reana_command()
def stop(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    force: bool = typer.Option(
        False,
        "--force",
        help="Stop a workflow without waiting for jobs to finish.",
    ),
) -> None:
    """Stop a running workflow.

    Examples:
        reana-client stop -w myanalysis.42 --force
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import MessageType, display_message
    from reana_cli.cli.workflows import status_change_message
    from reana_cli.errors import CommandError

    if not force:
        raise CommandError(GRACEFUL_STOP_MSG)

    logger.info("Sending a request to stop workflow %s", workflow)
    with connect(ctx.obj, access_token) as api:
        api.set_workflow_status(workflow, "stop")

    display_message(status_change_message(workflow, "stopped"), MessageType.SUCCESS)
