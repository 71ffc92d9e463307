"""Ping command implementation.

Implements `reana-client ping`, which checks the connection to the server
and shows who the access token belongs to.
"""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option


@reana_command()
def ping(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
) -> None:
    """Check connection to REANA server.

    Examples:
        reana-client ping
    """
    from reana_cli import __version__
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.state import CLIState

    state: CLIState = ctx.obj
    with connect(state, access_token) as api:
        you = api.get_you()

    print(
        f"REANA server: {state.config.get('server-url')} \n"
        f"REANA server version: {you.get('reana_server_version', '')} \n"
        f"REANA client version: {__version__} \n"
        f"Authenticated as: <{you.get('email', '')}> \n"
        "Status: Connected "
    )
