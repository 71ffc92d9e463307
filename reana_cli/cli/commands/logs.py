"""Logs command implementation.

Implements `reana-client logs`, which prints the workflow engine logs and
the logs of every job, optionally filtered by step, compute backend,
docker image or status.
"""

from typing import Any, Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option

FILTER_HELP = (
    "Filter job logs to include only those steps that match certain filtering "
    "criteria. Use --filter name=value pairs. Available filters are "
    "compute_backend, docker_img, status and step."
)

# Filter key -> job log field it is matched against
JOB_LOG_FIELDS = {
    "compute_backend": "compute_backend",
    "docker_img": "docker_img",
    "status": "status",
}

# Optional job log fields shown in human output, with their titles
JOB_LOG_ITEMS = [
    ("workflow_uuid", "Workflow ID"),
    ("compute_backend", "Compute backend"),
    ("backend_job_id", "Job ID"),
    ("docker_img", "Docker image"),
    ("cmd", "Command"),
    ("status", "Status"),
    ("started_at", "Started"),
    ("finished_at", "Finished"),
]


def parse_logs_filters(filters: list[str]) -> tuple[list[str], dict[str, str]]:
    """Split ``--filter`` values into requested steps and job log filters.

    Returns:
        Tuple of (step names, job log field -> required value)
    """
    from reana_cli.cli.filters import Filters
    from reana_cli.config.constants import (
        LOGS_MULTI_FILTERS,
        LOGS_SINGLE_FILTERS,
        REANA_COMPUTE_BACKENDS,
        get_run_statuses,
    )
    from reana_cli.errors import ValidationError

    filter_set = Filters(LOGS_SINGLE_FILTERS, LOGS_MULTI_FILTERS, filters)
    steps = filter_set.get_multi("step")

    chosen: dict[str, str] = {}
    for key, field in JOB_LOG_FIELDS.items():
        value = filter_set.get_single(key)
        if not value:
            continue
        if key == "compute_backend":
            backend = REANA_COMPUTE_BACKENDS.get(value.lower())
            if backend is None:
                raise ValidationError(f"compute_backend value {value} is not valid")
            value = backend
        elif key == "status" and value not in get_run_statuses(True):
            raise ValidationError(f"input status value '{value}' is not valid")
        chosen[field] = value
    return steps, chosen


def filter_job_logs(
    job_logs: dict[str, dict[str, Any]], filters: dict[str, str]
) -> dict[str, dict[str, Any]]:
    """Keep the job logs whose fields match every filter."""
    return {
        job_id: item
        for job_id, item in job_logs.items()
        if all(item.get(field) == value for field, value in filters.items())
    }


def display_human_logs(logs: dict[str, Any], steps: list[str]) -> None:
    from reana_cli.cli.output import error_console
    from reana_cli.config.constants import LEADING_MARK

    if logs.get("workflow_logs"):
        print(f"{LEADING_MARK} Workflow engine logs")
        print(logs["workflow_logs"])

    if logs.get("engine_specific"):
        print(f"\n{LEADING_MARK} Engine internal logs")
        print(logs["engine_specific"])

    job_logs = logs.get("job_logs") or {}
    if steps:
        returned = [item.get("job_name") for item in job_logs.values()]
        missing = [step for step in steps if step not in returned]
        if missing:
            error_console.print(
                f"The logs of step(s) {','.join(missing)} were not found, "
                "check for spelling mistakes in the step names",
                markup=False,
            )

    if not job_logs:
        return

    print(f"\n{LEADING_MARK} Job logs")
    for job_id, item in job_logs.items():
        job_name = item.get("job_name") or job_id
        print(f"{LEADING_MARK} Step: {job_name}")
        for field, title in JOB_LOG_ITEMS:
            if item.get(field):
                print(f"{LEADING_MARK} {title}: {item[field]}")
        if item.get("logs"):
            print(f"{LEADING_MARK} Logs:")
            print(item["logs"])
        else:
            print(f"Step {job_name} emitted no logs.")


@reana_command()
def logs(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    json_output: bool = typer.Option(False, "--json", help="Get output in JSON format."),
    filters: Optional[list[str]] = typer.Option(None, "--filter", help=FILTER_HELP),
    page: int = typer.Option(1, "--page", help="Results page number (to be used with --size)."),
    size: int = typer.Option(
        0, "--size", help="Size of results per page (to be used with --page)."
    ),
) -> None:
    """Get workflow logs.

    Examples:
        reana-client logs -w myanalysis.42

        reana-client logs -w myanalysis.42 --filter status=running --filter step=gendata
    """
    from reana_cli.cli.client import CLIClientError
    from reana_cli.cli.client.api import decode_json_field
    from reana_cli.cli.command_base import connect, is_option_set, split_list_option
    from reana_cli.cli.error_handler import prefixed_error
    from reana_cli.cli.output import display_json_output

    state = ctx.obj
    steps, chosen_filters = parse_logs_filters(split_list_option(filters))

    try:
        with connect(state, access_token) as api:
            payload = api.get_workflow_logs(
                workflow,
                steps=steps,
                page=page,
                size=size if is_option_set(ctx, "size") else None,
            )
    except CLIClientError as e:
        raise prefixed_error(
            e, state.server_url, "workflow logs could not be retrieved:"
        ) from e

    workflow_logs = decode_json_field(payload.get("logs")) or {}
    workflow_logs["job_logs"] = filter_job_logs(
        workflow_logs.get("job_logs") or {}, chosen_filters
    )

    if json_output:
        display_json_output(workflow_logs)
    else:
        display_human_logs(workflow_logs, steps)
