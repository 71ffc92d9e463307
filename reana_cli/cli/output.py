"""CLI output helpers.

Every command writes through these helpers: status messages with a colored
severity prefix, borderless tables and indented JSON. Each helper takes an
optional output stream and defaults to stdout.

Colors are applied with Rich and only reach the stream when it is a
terminal; NO_COLOR disables them entirely.
"""

import json
import sys
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from reana_cli.config.constants import LEADING_MARK

# Console instances for stdout and stderr
console = Console(highlight=False, soft_wrap=True)
error_console = Console(stderr=True, highlight=False, soft_wrap=True)

JOB_STATUS_COLORS = {
    "failed": "red",
    "finished": "green",
    "running": "cyan",
}

RESOURCE_HEALTH_COLORS = {
    "healthy": "green",
    "warning": "yellow",
    "critical": "red",
}


class MessageType(Enum):
    """Severity of a displayed message: label and color of its prefix."""

    SUCCESS = ("SUCCESS", "green")
    WARNING = ("WARNING", "yellow")
    ERROR = ("ERROR", "red")
    INFO = ("INFO", "cyan")

    def __init__(self, label: str, color: str) -> None:
        self.label = label
        self.color = color


def _console_for(out: Optional[TextIO]) -> Console:
    if out is None:
        return console
    if out is sys.stderr:
        return error_console
    return Console(file=out, highlight=False, soft_wrap=True)


def display_message(
    message: str,
    message_type: MessageType,
    indented: bool = False,
    out: Optional[TextIO] = None,
) -> None:
    """Print a message with a severity prefix.

    Non-indented info messages are printed bold after the leading mark,
    without label. Every other message gets a colored ``LABEL:`` prefix.

    Args:
        message: Text to print
        message_type: Severity of the message
        indented: Use the indented ``  ->`` prefix instead of ``==>``
        out: Output stream, defaults to stdout
    """
    prefix = "  ->" if indented else LEADING_MARK
    text = Text()
    if message_type is MessageType.INFO and not indented:
        text.append(f"{prefix} {message}", style="bold")
    else:
        text.append(
            f"{prefix} {message_type.label}: ",
            style=f"bold {message_type.color}",
        )
        text.append(message)
    _console_for(out).print(text)


def print_colorable(
    content: str, *styles: str, out: Optional[TextIO] = None
) -> None:
    """Print text with the given Rich styles, without adding a newline."""
    style = " ".join(s for s in styles if s)
    _console_for(out).print(Text(content, style=style), end="")


def display_table(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    out: Optional[TextIO] = None,
    cell_colors: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> None:
    """Render rows as a borderless table with bold, uppercase headers.

    Args:
        header: Column names
        rows: Cells as strings, each row with ``len(header)`` cells
        out: Output stream, defaults to stdout
        cell_colors: Optional column name -> cell value -> color mapping
            (e.g. to color the status column)
    """
    for row in rows:
        if len(row) != len(header):
            raise ValueError(
                f"table row has {len(row)} cells, expected {len(header)}"
            )

    cell_colors = cell_colors or {}
    table = Table(
        box=None,
        show_edge=False,
        pad_edge=False,
        header_style="bold",
    )
    for name in header:
        table.add_column(name.upper(), no_wrap=True, overflow="ignore")
    for row in rows:
        cells = []
        for name, cell in zip(header, row):
            color = cell_colors.get(name, {}).get(cell)
            cells.append(Text(cell, style=color or ""))
        table.add_row(*cells)

    widths = [
        max([len(name)] + [len(row[i]) for row in rows])
        for i, name in enumerate(header)
    ]
    stream = out if out is not None else sys.stdout
    table_console = Console(
        file=stream,
        highlight=False,
        width=max(sum(widths) + 2 * len(widths), 1),
    )
    table_console.print(table)


def display_json_output(
    output: Any, out: Optional[TextIO] = None, sort_keys: bool = False
) -> None:
    """Print a value as JSON indented by two spaces, followed by a newline."""
    stream = out if out is not None else sys.stdout
    stream.write(json.dumps(output, indent=2, sort_keys=sort_keys, ensure_ascii=False) + "\n")
