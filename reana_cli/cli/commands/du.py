"""Du command implementation.

Implements `reana-client du`, which shows the disk usage of a workflow's
workspace.
"""

from typing import Any, Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option

FILTER_HELP = (
    "Filter results to show only files that match certain filtering criteria "
    "such as file name or size. Use --filter <column_name>=<column_value> pairs. "
    "Available filters are 'name' and 'size'."
)


def build_du_rows(
    disk_usage_info: list[dict[str, Any]], human_readable: bool
) -> list[list[str]]:
    """Rows of (size, ./name), skipping blacklisted paths.

    Raises:
        CommandError: If the server matched no file
    """
    from reana_cli.config.constants import FILES_BLACKLIST
    from reana_cli.errors import CommandError

    if not disk_usage_info:
        raise CommandError("no files matching filter criteria")

    rows = []
    for item in disk_usage_info:
        name = item.get("name", "")
        if name.startswith(FILES_BLACKLIST):
            continue
        size = item.get("size") or {}
        value = size.get("human_readable") if human_readable else size.get("raw")
        rows.append([str(value), "." + name])
    return rows


@reana_command()
def du(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    summarize: bool = typer.Option(False, "--summarize", "-s", help="Display total."),
    human_readable: bool = typer.Option(
        False,
        "--human-readable",
        "-h",
        "-r",
        help="Show disk size in human readable format.",
    ),
    filters: Optional[list[str]] = typer.Option(None, "--filter", help=FILTER_HELP),
) -> None:
    """Get workspace disk usage.

    Examples:
        reana-client du -w myanalysis.42

        reana-client du -w myanalysis.42 -s

        reana-client du -w myanalysis.42 --filter name=data/
    """
    from reana_cli.cli.client import CLIClientError
    from reana_cli.cli.command_base import connect, split_list_option
    from reana_cli.cli.error_handler import prefixed_error
    from reana_cli.cli.filters import Filters
    from reana_cli.cli.output import display_table
    from reana_cli.config.constants import DU_MULTI_FILTERS

    state = ctx.obj
    filter_set = Filters(None, DU_MULTI_FILTERS, split_list_option(filters))
    search = filter_set.get_json(DU_MULTI_FILTERS)

    try:
        with connect(state, access_token) as api:
            payload = api.get_disk_usage(workflow, summarize=summarize, search=search)
    except CLIClientError as e:
        raise prefixed_error(e, state.server_url, "disk usage could not be retrieved:") from e

    rows = build_du_rows(payload.get("disk_usage_info") or [], human_readable)
    display_table(["SIZE", "NAME"], rows)
