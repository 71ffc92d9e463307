"""Start command implementation.

Implements `reana-client start`, which starts a previously created
workflow and can follow its execution until it terminates.
"""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.logging import get_logger

logger = get_logger(__name__)

PARAMETER_FLAG = "-p, --parameter"
OPTION_FLAG = "-o, --option"

PARAMETER_HELP = (
    "Additional input parameters to override original ones from reana.yaml. "
    "E.g. -p myparam1=myval1 -p myparam2=myval2."
)
OPTION_HELP = (
    "Additional operational options for the workflow execution. "
    "E.g. CACHE=off. (workflow engine - serial) "
    "E.g. --debug (workflow engine - cwl)"
)


def validate_start_options_and_params(
    api, workflow: str, options: dict[str, str], parameters: dict[str, str]
) -> tuple[dict[str, str], dict[str, str]]:
    """Check options and parameters against the workflow's specification.

    Unknown operational options are fatal. Unknown input parameters are
    reported as error lines and dropped.

    Returns:
        Tuple of (engine options, accepted parameters)
    """
    from reana_cli.cli.output import MessageType, display_message
    from reana_cli.config.validation import (
        validate_input_parameters,
        validate_operational_options,
    )

    spec = api.get_workflow_parameters(workflow)
    validated_options = validate_operational_options(spec.get("type", ""), options)
    validated_params, errors = validate_input_parameters(
        parameters, spec.get("parameters") or {}
    )
    for error in errors:
        display_message(error, MessageType.ERROR)
    return validated_options, validated_params


def follow_execution(api, state, workflow: str, current_status: str) -> None:
    """Report every status of the run until it terminates.

    Lists the output file URLs when the run finishes.

    Raises:
        CommandError: If the run ends in any other terminal status
    """
    from reana_cli.cli.client.operations import PollSettings, follow_workflow
    from reana_cli.cli.commands.ls import display_file_urls
    from reana_cli.cli.output import MessageType, display_message
    from reana_cli.cli.workflows import status_change_message
    from reana_cli.errors import CommandError

    def on_status(status: str) -> None:
        display_message(status_change_message(workflow, status), MessageType.SUCCESS)

    final_status = follow_workflow(
        api,
        workflow,
        current_status,
        on_status=on_status,
        poll=PollSettings(check_interval=state.check_interval),
    )
    if final_status == "finished":
        display_message("Listing workflow output files...", MessageType.INFO)
        payload = api.get_files(workflow, page=1)
        display_file_urls(payload.get("items") or [], state.server_url, workflow)
    elif final_status in ("deleted", "failed", "stopped"):
        raise CommandError("the workflow did not finish")


@reana_command()
def start(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    parameters: Optional[list[str]] = typer.Option(
        None, "--parameter", "-p", help=PARAMETER_HELP
    ),
    options: Optional[list[str]] = typer.Option(None, "--option", "-o", help=OPTION_HELP),
    follow: bool = typer.Option(
        False,
        "--follow",
        help="If set, follows the execution of the workflow until termination.",
    ),
) -> None:
    """Start previously created workflow.

    The workflow execution can be further influenced by passing input
    parameters and operational options.

    Examples:
        reana-client start -w myanalysis.42 -p sleeptime=10 -p myparam=4

        reana-client start -w myanalysis.42 -p myparam1=myvalue1 -o CACHE=off
    """
    from reana_cli.cli.command_base import connect, parse_key_value_option
    from reana_cli.cli.output import MessageType, display_message
    from reana_cli.cli.workflows import status_change_message

    state = ctx.obj
    input_params = parse_key_value_option(parameters, PARAMETER_FLAG)
    operational_options = parse_key_value_option(options, OPTION_FLAG)

    with connect(state, access_token) as api:
        if input_params or operational_options:
            operational_options, input_params = validate_start_options_and_params(
                api, workflow, operational_options, input_params
            )

        logger.info("Starting workflow %s", workflow)
        payload = api.start_workflow(workflow, input_params, operational_options)
        current_status = payload.get("status", "")
        display_message(
            status_change_message(workflow, current_status), MessageType.SUCCESS
        )

        if follow:
            follow_execution(api, state, workflow, current_status)
