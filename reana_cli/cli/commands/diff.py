"""Diff command implementation.

Implements `reana-client diff`, which compares the specifications and the
workspaces of two workflows.
"""

from typing import Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option

DIFF_LINE_COLORS = {"@": "cyan", "-": "red", "+": "green"}


def print_diff(lines: list[str]) -> None:
    from reana_cli.cli.output import print_colorable

    for line in lines:
        print_colorable(line, DIFF_LINE_COLORS.get(line[:1], ""))
        print()


def _heading(text: str) -> None:
    from reana_cli.cli.output import print_colorable
    from reana_cli.config.constants import LEADING_MARK

    print_colorable(f"{LEADING_MARK} {text}\n", "yellow", "bold")


def display_diff(payload: dict) -> None:
    """Print the specification sections that differ, then the workspace diff."""
    from reana_cli.cli.client.api import decode_json_field
    from reana_cli.errors import ReanaError

    specification = decode_json_field(payload.get("reana_specification"))
    if specification:
        if "workflow" in specification:
            specification["specification"] = specification.pop("workflow")

        equal = True
        for section, lines in specification.items():
            if not isinstance(lines, list) or not all(
                isinstance(line, str) for line in lines
            ):
                raise ReanaError(f"expected diff to be a list of lines, got {lines}")
            if lines:
                equal = False
                _heading(f"Differences in workflow {section}")
                print_diff(lines)
        if equal:
            _heading("No differences in REANA specifications.")
        print()

    workspace_diff = decode_json_field(payload.get("workspace_listing"))
    if workspace_diff:
        _heading("Differences in workflow workspace")
        print_diff([line for line in workspace_diff.splitlines() if line])


@reana_command()
def diff(
    ctx: typer.Context,
    workflow_a: str = typer.Argument(..., help="Name or UUID of the first workflow."),
    workflow_b: str = typer.Argument(..., help="Name or UUID of the second workflow."),
    access_token: Optional[str] = access_token_option(),
    brief: bool = typer.Option(
        False,
        "--brief",
        "-q",
        help="If not set, differences in the contents of the files in the two "
        "workspaces are shown.",
    ),
    unified: int = typer.Option(
        5,
        "--unified",
        "-u",
        help="Sets number of context lines for workspace diff output.",
    ),
) -> None:
    """Show diff between two workflows.

    The output shows the difference in workflow run parameters, the
    generated files, the logs, etc.

    Examples:
        reana-client diff myanalysis.42 myotheranalysis.43

        reana-client diff myanalysis.42 myotheranalysis.43 --brief
    """
    from reana_cli.cli.command_base import connect

    with connect(ctx.obj, access_token) as api:
        payload = api.get_workflow_diff(
            workflow_a, workflow_b, brief=brief, context_lines=unified
        )
    display_diff(payload)
