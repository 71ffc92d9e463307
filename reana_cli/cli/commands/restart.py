"""Restart command implementation."""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.cli.commands.start import (
    OPTION_FLAG,
    OPTION_HELP,
    PARAMETER_FLAG,
    PARAMETER_HELP,
)
from reana_cli.logging import get_logger

logger = get_logger(__name__)


@reana_command()
def restart(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    parameters: Optional[list[str]] = typer.Option(
        None, "--parameter", "-p", help=PARAMETER_HELP
    ),
    options: Optional[list[str]] = typer.Option(None, "--option", "-o", help=OPTION_HELP),
    file: str = typer.Option(
        "reana.yaml",
        "--file",
        "-f",
        help="REANA specification file describing the workflow to execute.",
    ),
) -> None:
    """Restart previously run workflow.

    Workflow restarting can be used in combination with the operational
    options FROM and TARGET. Input parameters and operational options can
    be repeated.

    Examples:
        reana-client restart -w myanalysis.42 -p sleeptime=10 -p myparam=4

        reana-client restart -w myanalysis.42 -o TARGET=gendata

        reana-client restart -w myanalysis.42 -o FROM=fitdata
    """
    from reana_cli.cli.command_base import (
        connect,
        is_option_set,
        parse_key_value_option,
    )
    from reana_cli.cli.commands.start import validate_start_options_and_params
    from reana_cli.cli.output import MessageType, display_message
    from reana_cli.cli.workflows import status_change_message
    from reana_cli.config.constants import WORKFLOW_FOLLOW_STATUSES
    from reana_cli.config.validation import validate_file
    from reana_cli.errors import CommandError, ValidationError

    if is_option_set(ctx, "file"):
        try:
            validate_file(file)
        except ValidationError as e:
            raise ValidationError(f"invalid value for '--file': {e}") from None

    input_params = parse_key_value_option(parameters, PARAMETER_FLAG)
    operational_options = parse_key_value_option(options, OPTION_FLAG)

    with connect(ctx.obj, access_token) as api:
        if input_params or operational_options:
            operational_options, input_params = validate_start_options_and_params(
                api, workflow, operational_options, input_params
            )
        logger.info("Restarting workflow %s", workflow)
        payload = api.start_workflow(
            workflow, input_params, operational_options, restart=True
        )

    current_status = payload.get("status", "")
    message = status_change_message(workflow, current_status)
    if current_status not in WORKFLOW_FOLLOW_STATUSES:
        raise CommandError(message)
    display_message(message, MessageType.SUCCESS)
