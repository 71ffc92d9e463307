"""Ls command implementation.

Implements `reana-client ls`, which lists the files of a workflow's
workspace, optionally as download URLs.
"""

from typing import Any, Optional

import typer

from reana_cli.cli.command_base import reana_command
from reana_cli.cli.commands import access_token_option, workflow_option
from reana_cli.logging import get_logger

logger = get_logger(__name__)

LS_HEADER = ["name", "size", "last-modified"]

FORMAT_HELP = (
    "Format output according to column titles or column values. Use "
    "<column_name>=<column_value> format. E.g. display files named data.txt "
    "--format name=data.txt"
)
FILTER_HELP = (
    "Filter results to show only files that match certain filtering criteria "
    "such as file name, size or modification date. Use --filter "
    "<column_name>=<column_value> pairs. Available filters are 'name', 'size' "
    "and 'last-modified'."
)


def build_files_table(items: list[dict[str, Any]], human_readable: bool = False):
    """Table of workspace files; blacklisted paths are left out."""
    from reana_cli.cli.table import ColumnType, Table
    from reana_cli.config.constants import FILES_BLACKLIST

    files = [
        item for item in items if not item.get("name", "").startswith(FILES_BLACKLIST)
    ]
    sizes = [item.get("size") or {} for item in files]
    return Table.from_columns(
        [
            ("name", ColumnType.STRING, [item.get("name") for item in files]),
            (
                "size",
                ColumnType.STRING if human_readable else ColumnType.INT,
                [
                    size.get("human_readable") if human_readable else size.get("raw")
                    for size in sizes
                ],
            ),
            (
                "last-modified",
                ColumnType.STRING,
                [item.get("last-modified") for item in files],
            ),
        ]
    )


def display_file_urls(
    items: list[dict[str, Any]], server_url: str, workflow: str
) -> None:
    """Print the download URL of every file."""
    for item in items:
        print(f"{server_url}/api/workflows/{workflow}/workspace/{item.get('name', '')}")


@reana_command()
def ls(
    ctx: typer.Context,
    file_name: Optional[str] = typer.Argument(
        None, help="Pattern matching files and directories."
    ),
    access_token: Optional[str] = access_token_option(),
    workflow: Optional[str] = workflow_option(),
    format_options: Optional[list[str]] = typer.Option(
        None, "--format", help=FORMAT_HELP
    ),
    json_output: bool = typer.Option(False, "--json", help="Get output in JSON format."),
    display_urls: bool = typer.Option(False, "--url", help="Get URLs of output files."),
    human_readable: bool = typer.Option(
        False, "--human-readable", "-h", help="Show disk size in human readable format."
    ),
    filters: Optional[list[str]] = typer.Option(None, "--filter", help=FILTER_HELP),
    page: int = typer.Option(1, "--page", help="Results page number (to be used with --size)."),
    size: int = typer.Option(
        0, "--size", help="Number of results per page (to be used with --page)."
    ),
) -> None:
    """List workspace files.

    The optional FILE_NAME argument is a pattern matching files and
    directories.

    Examples:
        reana-client ls --workflow myanalysis.42

        reana-client ls --workflow myanalysis.42 --human-readable

        reana-client ls --workflow myanalysis.42 'data/*root*'

        reana-client ls --workflow myanalysis.42 --filter name=hello
    """
    from reana_cli.cli.command_base import (
        connect,
        is_option_set,
        print_table,
        split_list_option,
    )
    from reana_cli.cli.filters import Filters
    from reana_cli.cli.formatter import format_table, parse_format_parameters

    state = ctx.obj
    filter_set = Filters(None, LS_HEADER, split_list_option(filters))
    search = filter_set.get_json(LS_HEADER)

    logger.info("Workflow %s selected", workflow)
    with connect(state, access_token) as api:
        payload = api.get_files(
            workflow,
            file_name=file_name,
            search=search,
            page=page,
            size=size if is_option_set(ctx, "size") else None,
        )

    items = payload.get("items") or []
    if display_urls:
        display_file_urls(items, state.server_url, workflow)
        return

    table = build_files_table(items, human_readable)
    directives = parse_format_parameters(split_list_option(format_options), True)
    table = format_table(table, directives)
    print_table(table, json_output)
