"""Leaf command implementations, one module per command or command family.

Shared option declarations live here so every command spells its common
flags the same way.
"""

from typing import Any

import typer

ACCESS_TOKEN_HELP = "Access token of the current user."
WORKFLOW_HELP = "Name or UUID of the workflow. Overrides value of REANA_WORKON environment variable."


def access_token_option() -> Any:
    return typer.Option(None, "--access-token", "-t", help=ACCESS_TOKEN_HELP)


def workflow_option(help: str = WORKFLOW_HELP) -> Any:
    return typer.Option(None, "--workflow", "-w", help=help)
