"""Column-oriented result tables.

A Table wraps a pandas DataFrame whose columns use nullable dtypes, so each
column is typed (string, integer, float or boolean) and every cell may be
null. Tables are immutable: every operation returns a new Table.
"""

from enum import Enum
from typing import Any, Iterable, Optional, Sequence

import pandas as pd


class ColumnType(str, Enum):
    """Cell type of a column, mapped to a pandas nullable dtype."""

    STRING = "string"
    INT = "Int64"
    FLOAT = "Float64"
    BOOL = "boolean"


_PYTHON_TYPES = {
    ColumnType.STRING: str,
    ColumnType.INT: int,
    ColumnType.FLOAT: float,
    ColumnType.BOOL: bool,
}


def is_null(value: Any) -> bool:
    return value is None or value is pd.NA or (
        isinstance(value, float) and value != value
    )


def format_cell(value: Any) -> Optional[str]:
    """Printed representation of a cell; None for null cells."""
    if is_null(value):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


class Table:
    """Named, ordered, typed columns of equal length.

    Build tables with ``Table.from_columns``; tests and commands never touch
    the underlying DataFrame directly.
    """

    def __init__(self, frame: pd.DataFrame, types: dict[str, ColumnType]) -> None:
        self._frame = frame.reset_index(drop=True)
        self._types = dict(types)

    @classmethod
    def from_columns(
        cls, columns: Iterable[tuple[str, ColumnType, Sequence[Any]]]
    ) -> "Table":
        """Build a table from ``(name, type, values)`` triples.

        None values become null cells.

        Raises:
            ValueError: If names repeat or columns differ in length
        """
        data: dict[str, Any] = {}
        types: dict[str, ColumnType] = {}
        length: Optional[int] = None
        for name, column_type, values in columns:
            if name in data:
                raise ValueError(f"duplicate column '{name}'")
            values = list(values)
            if length is not None and len(values) != length:
                raise ValueError(
                    f"column '{name}' has {len(values)} cells, expected {length}"
                )
            length = len(values)
            data[name] = pd.array(values, dtype=column_type.value)
            types[name] = column_type
        return cls(pd.DataFrame(data), types)

    @property
    def names(self) -> list[str]:
        return list(self._frame.columns)

    def __len__(self) -> int:
        return len(self._frame)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def column(self, name: str) -> list[Any]:
        """Cells of a column as Python values, None for null cells."""
        python_type = _PYTHON_TYPES[self._types[name]]
        return [
            None if is_null(value) else python_type(value)
            for value in self._frame[name].tolist()
        ]

    def select(self, names: Sequence[str]) -> "Table":
        """Project the table to ``names``, in that order."""
        missing = [name for name in names if name not in self._types]
        if missing:
            raise KeyError(missing[0])
        frame = self._frame.loc[:, list(names)]
        return Table(frame, {name: self._types[name] for name in names})

    def filter_equal(self, name: str, value: str) -> "Table":
        """Keep the rows whose printed cell in ``name`` equals ``value``."""
        mask = [format_cell(cell) == value for cell in self.column(name)]
        return Table(self._frame.loc[mask], self._types)

    def sort(self, name: str, reverse: bool = False) -> "Table":
        """Stable sort on one column; nulls go last, or first when reversed."""
        frame = self._frame.sort_values(
            by=name,
            ascending=not reverse,
            kind="stable",
            na_position="first" if reverse else "last",
        )
        return Table(frame, self._types)

    def rows(self) -> list[list[Any]]:
        """Cells row by row as Python values."""
        columns = [self.column(name) for name in self.names]
        return [list(row) for row in zip(*columns)]

    def to_records(self) -> list[dict[str, Any]]:
        """Rows as dictionaries, null cells as None."""
        names = self.names
        return [dict(zip(names, row)) for row in self.rows()]
