"""Status command implementation.

Implements `reana-client status`, which shows the status of one workflow
run as a single-row table.
"""

from typing import Any, Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option

# Statuses of runs that have a start time worth showing
STARTED_STATUSES = ["running", "finished", "failed", "stopped"]


def build_status_header(
    verbose: bool,
    include_duration: bool,
    progress: dict[str, Any],
    status: str,
) -> list[str]:
    """Columns shown for a run, depending on how far the run went."""
    header = ["name", "run_number", "created"]

    if status in STARTED_STATUSES and progress.get("run_started_at"):
        header.append("started")
        if progress.get("run_finished_at"):
            header.append("ended")
    header.append("status")
    if progress.get("total") is not None:
        header.append("progress")
    if verbose:
        header += ["id", "user"]
        if progress.get("current_command") or progress.get("current_step_name"):
            header.append("command")
    if verbose or include_duration:
        header.append("duration")
    return header


def get_status_progress(progress: dict[str, Any]) -> str:
    """Finished over total jobs, or ``-/-`` when the total is unknown."""
    total = (progress.get("total") or {}).get("total") or 0
    finished = (progress.get("finished") or {}).get("total") or 0
    if total > 0:
        return f"{finished}/{total}"
    return "-/-"


def build_status_table(payload: dict[str, Any], header: list[str]):
    from reana_cli.cli.table import ColumnType, Table
    from reana_cli.cli.workflows import (
        get_duration,
        get_last_command,
        get_name_and_run_number,
    )

    progress = payload.get("progress") or {}
    name, run_number = get_name_and_run_number(payload.get("name", ""))
    values = {
        "name": name,
        "run_number": run_number,
        "created": payload.get("created"),
        "status": payload.get("status"),
        "id": payload.get("id"),
        "user": payload.get("user"),
    }

    columns = []
    for col in header:
        if col == "progress":
            value = get_status_progress(progress)
        elif col == "started":
            value = progress.get("run_started_at")
        elif col == "ended":
            value = progress.get("run_finished_at")
        elif col == "command":
            value = get_last_command(
                progress.get("current_command"), progress.get("current_step_name")
            )
        elif col == "duration":
            value = get_duration(
                progress.get("run_started_at"), progress.get("run_finished_at")
            )
        else:
            value = values.get(col)
        column_type = ColumnType.INT if col == "duration" else ColumnType.STRING
        columns.append((col, column_type, [value]))
    return Table.from_columns(columns)


@reana_command()
def status(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    format_options: Optional[list[str]] = typer.Option(
        None,
        "--format",
        help="Format output by displaying only certain columns. E.g. --format name,status.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Get output in JSON format."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Set status information verbosity."
    ),
    include_duration: bool = typer.Option(
        False,
        "--include-duration",
        help="Include the duration of the workflows in seconds. In case a workflow "
        "is in progress, its duration as of now will be shown.",
    ),
) -> None:
    """Get status of a workflow.

    Examples:
        reana-client status -w myanalysis.42

        reana-client status -w myanalysis.42 -v --json
    """
    from reana_cli.cli.command_base import connect, print_table, split_list_option
    from reana_cli.cli.formatter import format_table, parse_format_parameters
    from reana_cli.cli.output import JOB_STATUS_COLORS

    with connect(ctx.obj, access_token) as api:
        payload = api.get_workflow_status(workflow)

    header = build_status_header(
        verbose,
        include_duration,
        payload.get("progress") or {},
        payload.get("status", ""),
    )
    table = build_status_table(payload, header)
    directives = parse_format_parameters(split_list_option(format_options), False)
    table = format_table(table, directives)
    print_table(table, json_output, cell_colors={"status": JOB_STATUS_COLORS})
