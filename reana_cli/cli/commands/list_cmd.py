"""List command implementation.

Implements `reana-client list`, which lists workflow runs or, with
``--sessions``, open interactive sessions.
"""

import sys
from typing import Any, Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option

FORMAT_HELP = (
    "Format output according to column titles or column values. "
    "Use <column_name>=<column_value> format. E.g. display workflow with "
    "failed status and named test_workflow "
    "--format status=failed,name=test_workflow."
)
FILTER_HELP = (
    "Filter workflow that contains certain filtering criteria. Use --filter "
    "<column_name>=<column_value> pairs. Available filters are 'name' and 'status'."
)

HEADERS = {
    "batch": ["name", "run_number", "created", "started", "ended", "status"],
    "interactive": [
        "name",
        "run_number",
        "created",
        "session_type",
        "session_uri",
        "session_status",
    ],
}


def build_header(
    run_type: str,
    verbose: bool = False,
    include_workspace_size: bool = False,
    include_progress: bool = False,
    include_duration: bool = False,
) -> list[str]:
    """Columns of the listing for a run type and the verbosity flags."""
    header = list(HEADERS[run_type])
    if verbose:
        header += ["id", "user"]
    if verbose or include_workspace_size:
        header.append("size")
    if verbose or include_progress:
        header.append("progress")
    if verbose or include_duration:
        header.append("duration")
    return header


def parse_list_filters(
    filters: list[str], show_deleted_runs: bool
) -> tuple[list[str], str]:
    """Turn ``--filter`` values into the status list and the search JSON.

    A user-given status filter replaces the default status list.
    """
    from reana_cli.cli.filters import Filters
    from reana_cli.config.constants import LIST_MULTI_FILTERS, get_run_statuses

    filter_set = Filters(None, LIST_MULTI_FILTERS, filters)
    filter_set.validate_values("status", get_run_statuses(True))

    statuses = filter_set.get_multi("status") or get_run_statuses(show_deleted_runs)
    search = filter_set.get_json([key for key in LIST_MULTI_FILTERS if key != "status"])
    return statuses, search


def _progress_field(value: Any) -> str:
    return str(value) if value else "-"


def _optional(value: Optional[str]) -> Optional[str]:
    return value or None


def build_workflows_table(
    items: list[dict[str, Any]],
    header: list[str],
    server_url: str,
    token: str,
    human_readable: bool = False,
):
    """Build the listing table of the given workflow items."""
    from reana_cli.cli.formatter import format_session_uri
    from reana_cli.cli.table import ColumnType, Table
    from reana_cli.cli.workflows import get_duration, get_name_and_run_number

    columns = []
    for col in header:
        values: list[Any] = []
        for workflow in items:
            name, run_number = get_name_and_run_number(workflow.get("name", ""))
            progress = workflow.get("progress") or {}
            size = workflow.get("size") or {}
            if col == "id":
                value = workflow.get("id")
            elif col == "user":
                value = workflow.get("user")
            elif col == "size":
                value = size.get("human_readable") if human_readable else size.get("raw")
            elif col == "progress":
                finished = (progress.get("finished") or {}).get("total")
                total = (progress.get("total") or {}).get("total")
                value = f"{_progress_field(finished)}/{_progress_field(total)}"
            elif col == "duration":
                value = get_duration(
                    progress.get("run_started_at"), progress.get("run_finished_at")
                )
            elif col == "name":
                value = name
            elif col == "run_number":
                value = run_number
            elif col == "created":
                value = workflow.get("created")
            elif col == "started":
                value = _optional(progress.get("run_started_at"))
            elif col == "ended":
                value = _optional(progress.get("run_finished_at"))
            elif col == "status":
                value = workflow.get("status")
            elif col == "session_uri":
                uri = workflow.get("session_uri")
                value = format_session_uri(server_url, uri, token) if uri else None
            else:
                value = _optional(workflow.get(col))
            values.append(value)

        if col == "duration" or (col == "size" and not human_readable):
            column_type = ColumnType.INT
        else:
            column_type = ColumnType.STRING
        columns.append((col, column_type, values))

    return Table.from_columns(columns)


@reana_command(optional_workflow=True)
def list_workflows(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option("List all runs of the given workflow."),
    sessions: bool = typer.Option(
        False, "--sessions", "-s", help="List all open interactive sessions."
    ),
    format_options: Optional[list[str]] = typer.Option(
        None, "--format", help=FORMAT_HELP
    ),
    json_output: bool = typer.Option(False, "--json", help="Get output in JSON format."),
    show_all: bool = typer.Option(
        False, "--all", help="Show all workflows including deleted ones."
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print out extra information: workflow id, user id, disk usage, progress, duration.",
    ),
    human_readable: bool = typer.Option(
        False, "--human-readable", "-h", help="Show disk size in human readable format."
    ),
    sort_column: str = typer.Option(
        "CREATED", "--sort", help="Sort the output by specified column."
    ),
    filters: Optional[list[str]] = typer.Option(None, "--filter", help=FILTER_HELP),
    include_duration: bool = typer.Option(
        False,
        "--include-duration",
        help="Include the duration of the workflows in seconds. In case a workflow "
        "is in progress, its duration as of now will be shown.",
    ),
    include_progress: bool = typer.Option(
        False, "--include-progress", help="Include progress information of the workflows."
    ),
    include_workspace_size: bool = typer.Option(
        False, "--include-workspace-size", help="Include size information of the workspace."
    ),
    show_deleted_runs: bool = typer.Option(
        False, "--show-deleted-runs", help="Include deleted workflows in the output."
    ),
    page: int = typer.Option(1, "--page", help="Results page number (to be used with --size)."),
    size: int = typer.Option(
        0, "--size", help="Number of results per page (to be used with --page)."
    ),
) -> None:
    """List all workflows and sessions.

    By default, the list of workflows is returned. If you would like to see
    the list of your open interactive sessions, you need to pass the
    --sessions command-line option.

    Examples:
        reana-client list --all

        reana-client list --sessions

        reana-client list --verbose --human-readable
    """
    from reana_cli.cli.command_base import (
        connect,
        is_option_set,
        print_table,
        split_list_option,
    )
    from reana_cli.cli.formatter import format_table, parse_format_parameters, sort_table
    from reana_cli.cli.output import JOB_STATUS_COLORS, MessageType, display_message
    from reana_cli.errors import ReanaError

    state = ctx.obj
    run_type = "interactive" if sessions else "batch"
    statuses, search = parse_list_filters(
        split_list_option(filters), show_deleted_runs or show_all
    )

    with connect(state, access_token) as api:
        payload = api.get_workflows(
            run_type,
            verbose=verbose,
            page=page,
            size=size if is_option_set(ctx, "size") else None,
            status=statuses,
            search=search,
            workflow_id_or_name=workflow,
            include_progress=(
                include_progress if is_option_set(ctx, "include_progress") else None
            ),
            include_workspace_size=(
                include_workspace_size
                if is_option_set(ctx, "include_workspace_size")
                else None
            ),
        )

    header = build_header(
        run_type, verbose, include_workspace_size, include_progress, include_duration
    )
    table = build_workflows_table(
        payload.get("items", []),
        header,
        state.server_url,
        access_token,
        human_readable,
    )

    try:
        table = sort_table(table, sort_column, reverse=True)
    except ReanaError as e:
        display_message(
            f"sort operation was aborted, {e}", MessageType.WARNING, out=sys.stderr
        )

    directives = parse_format_parameters(split_list_option(format_options), True)
    table = format_table(table, directives)
    print_table(table, json_output, cell_colors={"status": JOB_STATUS_COLORS})
