"""Format directives (``--format``) and table transformations.

``--format column`` projects the output to the given columns; with row
filtering enabled, ``--format column=value`` additionally keeps only the
rows whose cell prints as ``value``.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from reana_cli.cli.table import Table, format_cell
from reana_cli.config.validation import validate_choice
from reana_cli.errors import ValidationError

NULL_CELL = "-"


@dataclass(frozen=True)
class FormatFilter:
    """One ``--format`` directive.

    Attributes:
        column: Column to keep
        value: Value rows must have in ``column`` when ``filter_rows`` is set
        filter_rows: Whether rows are filtered on ``value``
    """

    column: str
    value: Optional[str] = None
    filter_rows: bool = False


def parse_format_parameters(
    options: Sequence[str], filter_rows: bool
) -> list[FormatFilter]:
    """Parse ``--format`` options into directives.

    Args:
        options: Raw ``column`` or ``column=value`` options
        filter_rows: Whether ``column=value`` filters rows; when False the
            value part is ignored
    """
    directives = []
    for option in options:
        column, sep, value = option.partition("=")
        if filter_rows and sep:
            directives.append(FormatFilter(column, value, True))
        else:
            directives.append(FormatFilter(column))
    return directives


def format_table(table: Table, directives: Sequence[FormatFilter]) -> Table:
    """Apply format directives: projection first, then row filters.

    Raises:
        ValidationError: If a directive names a column the table lacks
    """
    if not directives:
        return table

    for directive in directives:
        validate_choice(directive.column, table.names, "format column")

    # A column named twice is shown once
    columns = list(dict.fromkeys(directive.column for directive in directives))
    table = table.select(columns)
    for directive in directives:
        if directive.filter_rows:
            table = table.filter_equal(directive.column, directive.value or "")
    return table


def sort_table(table: Table, column: str, reverse: bool = False) -> Table:
    """Sort on ``column`` (case-insensitive name).

    Raises:
        ValidationError: If the column does not exist
    """
    column = column.lower()
    if column not in table:
        raise ValidationError(f"column '{column}' does not exist")
    return table.sort(column, reverse=reverse)


def table_to_string_data(table: Table) -> list[list[str]]:
    """Render every cell as text, null cells as ``-``. Headers are left out."""
    return [
        [NULL_CELL if cell is None else format_cell(cell) for cell in row]
        for row in table.rows()
    ]


def format_session_uri(server_url: str, path: str, token: str) -> str:
    """Build the URL of an interactive session, authenticated by token."""
    return f"{server_url}{path}?token={token}"
