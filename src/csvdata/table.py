"""In-memory CSV table with exact-match narrowing and a row cursor.

A ``Table`` holds an ordered tuple of ``Row`` objects, the header they share,
and a cursor naming the current row::

    table = load("accounts.csv")
    table.filter("region", "west").exclude("status", "closed")
    table.value_of("owner")          # from the current (first) row
    for row in table.rows():         # every row still held
        ...

Narrowing builds a new row tuple and resets the cursor to 0. A clone shares
the tuple it was made from and nothing ever edits a tuple in place.

The table is not iterable. ``rows()`` is the way to visit every
row; ``next_row()`` raises once the last row is reached, so a loop that steps
the cursor until it fails visits rows unevenly. Use ``has_next_row()`` for
bounded cursor walks.
"""

import logging
import operator
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ._types import TableSummary
from .errors import MissingColumnError, NoCurrentRowError, OutOfBoundsError
from .row import Row

logger = logging.getLogger(__name__)


class Table:
    """Ordered rows plus a cursor; the object callers query and narrow."""

    def __init__(
        self,
        rows: Sequence[Row] = (),
        columns: Optional[Sequence[str]] = None,
        source: Optional[str] = None,
    ):
        self._rows: Tuple[Row, ...] = tuple(rows)
        if columns is None:
            columns = self._rows[0].columns if self._rows else ()
        self._columns: Tuple[str, ...] = tuple(columns)
        for row in self._rows:
            if row.columns != self._columns:
                raise ValueError(
                    f"row columns {list(row.columns)} differ from table columns "
                    f"{list(self._columns)}"
                )
        self._cursor = 0
        self.source = source

    # -- Narrowing -----------------------------------------------------------

    def filter(self, column_or_value: str, value: Optional[str] = None) -> "Table":
        """Keep only rows whose cell equals ``value``.

        ``filter(value)`` targets the first column; ``filter(column, value)``
        targets the named one. Returns ``self`` so calls can be chained.
        """
        column, value = self._target(column_or_value, value)
        return self._narrow(column, value, keep_matches=True)

    def exclude(self, column_or_value: str, value: Optional[str] = None) -> "Table":
        """Drop rows whose cell equals ``value``. Same call forms as ``filter``."""
        column, value = self._target(column_or_value, value)
        return self._narrow(column, value, keep_matches=False)

    def _target(self, column_or_value: str, value: Optional[str]) -> Tuple[str, str]:
        if value is None:
            return self._first_column(), column_or_value
        return column_or_value, value

    def _first_column(self) -> str:
        if not self._columns:
            raise ValueError("The table has no columns to filter on.")
        return self._columns[0]

    def _narrow(self, column: str, value: str, keep_matches: bool) -> "Table":
        self._require_column(column)
        before = len(self._rows)
        self._rows = tuple(
            row for row in self._rows if (row.value_of(column) == value) is keep_matches
        )
        self._cursor = 0
        logger.debug(
            "%s %s=%r: %d -> %d rows",
            "filter" if keep_matches else "exclude",
            column,
            value,
            before,
            len(self._rows),
        )
        return self

    # -- Value retrieval -----------------------------------------------------

    def value_of(self, column: str) -> str:
        """Return ``column`` from the current row."""
        self._require_column(column)
        return self.current_row().value_of(column)

    def column_values(self, column: str) -> List[str]:
        """Return ``column`` from every row held, in row order."""
        self._require_column(column)
        return [row.value_of(column) for row in self._rows]

    def current_row(self) -> Row:
        if not self._rows:
            raise NoCurrentRowError()
        return self._rows[self._cursor]

    def current_row_values(self) -> Tuple[str, ...]:
        return self.current_row().values()

    def _require_column(self, column: str) -> None:
        if column not in self._columns:
            raise MissingColumnError(column)

    # -- Cursor --------------------------------------------------------------

    @property
    def cursor(self) -> Optional[int]:
        """Index of the current row, or None when the table holds no rows."""
        return self._cursor if self._rows else None

    def set_current_row(self, index: int) -> None:
        """Move the cursor to ``index``; negative indexes are never wrapped."""
        index = operator.index(index)
        if not 0 <= index < len(self._rows):
            raise OutOfBoundsError(index, len(self._rows))
        self._cursor = index

    def next_row(self) -> None:
        target = self._cursor + 1
        if target >= len(self._rows):
            raise OutOfBoundsError(
                target,
                len(self._rows),
                "No row exists below the current row.",
            )
        self._cursor = target

    def previous_row(self) -> None:
        target = self._cursor - 1
        if target < 0 or not self._rows:
            raise OutOfBoundsError(
                target,
                len(self._rows),
                "No row exists above the current row.",
            )
        self._cursor = target

    def has_next_row(self) -> bool:
        return self._cursor + 1 < len(self._rows)

    def has_previous_row(self) -> bool:
        return bool(self._rows) and self._cursor > 0

    # -- Whole-table access --------------------------------------------------

    @property
    def columns(self) -> Tuple[str, ...]:
        return self._columns

    def length(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def rows(self) -> Tuple[Row, ...]:
        """Return every row held, for exhaustive iteration."""
        return self._rows

    def clone(self) -> "Table":
        """Return an independent table over the same rows, cursor at 0.

        Later filter/exclude calls on either table leave the other untouched.
        """
        return Table(self._rows, self._columns, source=self.source)

    def to_records(self) -> List[Dict[str, str]]:
        return [row.as_dict() for row in self._rows]

    def to_dataframe(self) -> pd.DataFrame:
        """Return the rows held as a string-typed DataFrame in header order."""
        return pd.DataFrame(
            [list(row.cells) for row in self._rows],
            columns=list(self._columns),
            dtype="string",
        )

    def summary(self) -> TableSummary:
        return TableSummary(
            source=self.source,
            columns=list(self._columns),
            rows=len(self._rows),
            cursor=self.cursor,
        )

    def __repr__(self) -> str:
        source = f" source={self.source!r}" if self.source else ""
        return (
            f"<Table{source} columns={list(self._columns)} "
            f"rows={len(self._rows)} cursor={self.cursor}>"
        )

