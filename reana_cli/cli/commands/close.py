"""Close command implementation."""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.logging import get_logger

logger = get_logger(__name__)


@reana_command()
def close(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
) -> None:
    """Close an interactive session.

    Examples:
        reana-client close -w myanalysis.42
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import MessageType, display_message

    logger.info("Closing the interactive session of %s", workflow)
    with connect(ctx.obj, access_token) as api:
        api.close_interactive_session(workflow)

    display_message(
        f"Interactive session for workflow {workflow} was successfully closed",
        MessageType.SUCCESS,
    )
