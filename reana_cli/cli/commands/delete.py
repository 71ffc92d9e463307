"""Delete command implementation."""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.logging import get_logger

logger = get_logger(__name__)


@reana_command()
def delete(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    include_workspace: bool = typer.Option(
        True,
        "--include-workspace/--no-include-workspace",
        help="Delete workspace from REANA.",
    ),
    include_all_runs: bool = typer.Option(
        False, "--include-all-runs", help="Delete all runs of a given workflow."
    ),
) -> None:
    """Delete a workflow.

    Examples:
        reana-client delete -w myanalysis.42

        reana-client delete -w myanalysis --include-all-runs
    """
    from reana_cli.cli.command_base import connect
    from reana_cli.cli.output import MessageType, display_message
    from reana_cli.cli.workflows import get_name_and_run_number, status_change_message

    logger.info("Deleting workflow %s", workflow)
    with connect(ctx.obj, access_token) as api:
        api.set_workflow_status(
            workflow,
            "deleted",
            all_runs=include_all_runs,
            workspace=include_workspace,
        )

    if include_all_runs:
        name, _ = get_name_and_run_number(workflow)
        message = f"All workflows named '{name}' have been deleted"
    else:
        message = status_change_message(workflow, "deleted")
    display_message(message, MessageType.SUCCESS)
