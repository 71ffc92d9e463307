"""Open command implementation.

Implements `reana-client open`, which opens an interactive session inside
a workflow's workspace.
"""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.logging import get_logger

logger = get_logger(__name__)

IMAGE_HELP = (
    "Docker image which will be used to spawn the interactive session. "
    "Overrides the default image for the selected type."
)


@reana_command()
def open_session(
    ctx: typer.Context,
    session_type: str = typer.Argument(
        "jupyter", help="Type of the interactive session (e.g. jupyter)."
    ),
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    image: str = typer.Option("", "--image", "-i", help=IMAGE_HELP),
) -> None:
    """Open an interactive session inside the workspace.

    The session is available until it is closed with the close command.

    Examples:
        reana-client open -w myanalysis.42 jupyter
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.formatter import format_session_uri
    from reana_cli.cli.output import MessageType, display_message, print_colorable
    from reana_cli.config.constants import INTERACTIVE_SESSION_TYPES
    from reana_cli.config.validation import validate_choice

    state = ctx.obj
    validate_choice(session_type, INTERACTIVE_SESSION_TYPES, "interactive-session-type")

    logger.info("Opening an interactive session on %s", workflow)
    with connect(state, access_token) as api:
        payload = api.open_interactive_session(workflow, session_type, image=image)

    display_message("Interactive session opened successfully", MessageType.SUCCESS)
    uri = format_session_uri(state.server_url, payload.get("path", ""), access_token)
    print_colorable(uri + "\n", "green")
    print("It could take several minutes to start the interactive session.")
