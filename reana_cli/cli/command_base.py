"""Shared plumbing of the leaf commands.

``reana_command`` finishes the pre-hook for a leaf: it reconciles the
``--access-token`` and ``--workflow`` flags with the configuration store,
validates them, and reports any error raised by the command exactly once.
"""

import csv
import functools
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence, TypeVar

import typer

from reana_cli.cli.client import ReanaAPI, SyncCLIClient
from reana_cli.cli.error_handler import report_error
from reana_cli.cli.formatter import table_to_string_data
from reana_cli.cli.output import display_json_output, display_table
from reana_cli.cli.state import CLIState
from reana_cli.cli.table import Table
from reana_cli.config.validation import (
    validate_access_token,
    validate_server_url,
    validate_workflow,
)
from reana_cli.errors import ValidationError
from reana_cli.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Leaf parameter name -> configuration store key
STORE_FLAGS = {
    "access_token": "access-token",
    "workflow": "workflow",
}

_SECRET_PARAMS = {"access_token"}


def is_option_set(ctx: typer.Context, name: str) -> bool:
    """Whether the parameter ``name`` was given on the command line."""
    source = ctx.get_parameter_source(name)
    return source is not None and source.name == "COMMANDLINE"


def _reconcile_flags(
    ctx: typer.Context,
    state: CLIState,
    kwargs: dict[str, Any],
    optional_workflow: bool,
) -> None:
    for name, key in STORE_FLAGS.items():
        if name not in kwargs:
            continue
        if not is_option_set(ctx, name) and state.config.has(key):
            kwargs[name] = state.config.get(key)
        if kwargs[name] is None:
            kwargs[name] = ""

    if "access_token" in kwargs:
        validate_access_token(kwargs["access_token"])
        validate_server_url(state.config.get("server-url"))
    if "workflow" in kwargs and not optional_workflow:
        validate_workflow(kwargs["workflow"])

    for name, value in ctx.params.items():
        if is_option_set(ctx, name):
            shown = "***" if name in _SECRET_PARAMS else value
            logger.debug("flag: %s, value: %s", name, shown)


def reana_command(optional_workflow: bool = False) -> Callable[[F], F]:
    """
    Decorator for leaf commands talking to the server.

    The decorated function takes ``ctx: typer.Context`` first. Errors it
    raises are translated, printed on stderr and turned into exit code 1;
    EmptyError exits with code 1 without printing.

    Args:
        optional_workflow: Do not require a workflow (e.g. ``list``)

    Example:
        @reana_command()
        def close(ctx: typer.Context, workflow: str = ..., access_token: str = ...):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            ctx = kwargs.get("ctx") or args[0]
            state: CLIState = ctx.obj
            try:
                _reconcile_flags(ctx, state, kwargs, optional_workflow)
                return func(*args, **kwargs)
            except (typer.Exit, typer.Abort):
                raise
            except Exception as e:
                report_error(e, state.server_url)
                raise typer.Exit(1) from None

        return wrapper  # type: ignore

    return decorator


def split_list_option(values: Optional[Sequence[str]]) -> list[str]:
    """Flatten a repeatable option whose values may also be comma-separated.

    Values are split like CSV fields, so a quoted field may hold a comma.

    >>> split_list_option(["a,b", "c"])
    ['a', 'b', 'c']
    """
    result: list[str] = []
    for value in values or []:
        if value == "":
            continue
        result.extend(next(csv.reader([value])))
    return result


def parse_key_value_option(
    values: Optional[Sequence[str]], flag: str
) -> dict[str, str]:
    """Parse a repeatable ``KEY=VALUE`` option into a dict.

    Args:
        values: Raw option values
        flag: Flag names shown in the error, e.g. ``"-p, --parameter"``

    Raises:
        ValidationError: If a pair has no ``=``
    """
    result: dict[str, str] = {}
    for value in values or []:
        for pair in split_list_option([value]):
            key, sep, rest = pair.partition("=")
            if not sep:
                raise ValidationError(
                    f'invalid argument "{value}" for "{flag}" flag: '
                    f"{pair} must be formatted as key=value"
                )
            result[key] = rest
    return result


@contextmanager
def connect(state: CLIState, access_token: str) -> Iterator[ReanaAPI]:
    """Open a client on the configured server and yield the API on top of it."""
    with SyncCLIClient(
        state.server_url, access_token, verify=state.verify_tls
    ) as client:
        yield ReanaAPI(client)


def print_table(
    table: Table,
    json_output: bool = False,
    cell_colors: Optional[dict[str, dict[str, str]]] = None,
) -> None:
    """Print a table as text, or as a JSON list of row objects."""
    if json_output:
        display_json_output(table.to_records(), sort_keys=True)
    else:
        display_table(table.names, table_to_string_data(table), cell_colors=cell_colors)
