"""A single data record of a CSV table."""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import MissingColumnError


class Row(BaseModel):
    """One record's cells, addressable by column name, in header order.

    Rows are frozen: tables narrow by discarding rows, never by editing them.
    """

    model_config = ConfigDict(frozen=True)

    columns: Tuple[str, ...]
    cells: Tuple[str, ...]

    @model_validator(mode="after")
    def _cells_match_columns(self) -> "Row":
        if len(self.columns) != len(self.cells):
            raise ValueError(
                f"row has {len(self.cells)} cells for {len(self.columns)} columns"
            )
        return self

    def value_of(self, column: str) -> str:
        """Return the cell under ``column`` (exact, case-sensitive match).

        Raises:
            MissingColumnError: If the column is not part of the header.
        """
        try:
            index = self.columns.index(column)
        except ValueError:
            raise MissingColumnError(column) from None
        return self.cells[index]

    def values(self) -> Tuple[str, ...]:
        """Return the row's cells in header order."""
        return self.cells

    def first_column_name(self) -> str:
        """Return the first header column, the implicit filter/exclude target."""
        return self.columns[0]

    def as_dict(self) -> Dict[str, str]:
        return dict(zip(self.columns, self.cells))

    def __len__(self) -> int:
        return len(self.columns)

    def __contains__(self, column: object) -> bool:
        return column in self.columns
