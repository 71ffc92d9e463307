"""Retention-rules-list command implementation."""

from typing import Any, Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option


def build_retention_rules_table(rules: list[dict[str, Any]]):
    """Table of retention rules, sorted by retention days."""
    from reana_cli.cli.table import ColumnType, Table

    table = Table.from_columns(
        [
            (
                "workspace_files",
                ColumnType.STRING,
                [rule.get("workspace_files") for rule in rules],
            ),
            (
                "retention_days",
                ColumnType.INT,
                [rule.get("retention_days") for rule in rules],
            ),
            ("apply_on", ColumnType.STRING, [rule.get("apply_on") for rule in rules]),
            ("status", ColumnType.STRING, [rule.get("status") for rule in rules]),
        ]
    )
    return table.sort("retention_days")


@reana_command()
def retention_rules_list(
    ctx: typer.Context,
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    format_options: Optional[list[str]] = typer.Option(
        None,
        "--format",
        help="Format output according to column titles or column values. "
        "Use <column_name>=<column_value> format.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Get output in JSON format."),
) -> None:
    """List the retention rules for a workflow.

    Examples:
        reana-client retention-rules-list -w myanalysis.42
    """
    from reana_cli.cli.command_base import connect, print_table, split_list_option
    from reana_cli.cli.formatter import format_table, parse_format_parameters

    with connect(ctx.obj, access_token) as api:
        payload = api.get_retention_rules(workflow)

    table = build_retention_rules_table(payload.get("retention_rules") or [])
    directives = parse_format_parameters(split_list_option(format_options), True)
    print_table(format_table(table, directives), json_output)
