"""Info command implementation.

Implements `reana-client info`, which lists general information about the
cluster: compute backends, workspaces and job limits.
"""

from typing import Any, Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option

# Fields shown in human output, in display order
INFO_FIELDS = [
    "compute_backends",
    "default_kubernetes_jobs_timeout",
    "default_kubernetes_memory_limit",
    "default_workspace",
    "kubernetes_max_memory_limit",
    "maximum_kubernetes_jobs_timeout",
    "maximum_workspace_retention_period",
    "workspaces_available",
]


def format_info_value(value: Any) -> str:
    """Lists are joined with ", ", a missing value prints as None."""
    if value is None:
        return "None"
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)


@reana_command()
def info(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    json_output: bool = typer.Option(False, "--json", help="Get output in JSON format."),
) -> None:
    """List cluster general information.

    Lists all the available workspaces. It also returns the default workspace
    defined by the admin.

    Examples:
        reana-client info
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import display_json_output

    with connect(ctx.obj, access_token) as api:
        payload = api.info()

    if json_output:
        display_json_output(payload)
        return

    for field in INFO_FIELDS:
        item = payload.get(field)
        if not isinstance(item, dict):
            continue
        print(f"{item.get('title', field)}: {format_info_value(item.get('value'))}")
