"""Error types raised by csvdata."""

from typing import Optional


class CsvDataError(Exception):
    """Base error for csvdata."""


class LoadError(CsvDataError):
    """Raised when a CSV source cannot be read, tokenized, or turned into rows."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Error while loading file [{path}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedRowError(LoadError):
    """Raised when a data record's field count does not match the header.

    ``record_number`` counts tokenized records from 1, header included. It
    matches the physical line unless a quoted field spans lines.
    """

    def __init__(self, path: str, record_number: int, expected: int, actual: int):
        self.record_number = record_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            path,
            f"record {record_number} has {actual} fields, header has {expected}",
        )


class MissingColumnError(CsvDataError, KeyError):
    """Raised when a column name is not part of the table's header."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(column)

    def __str__(self) -> str:
        return f"The column [{self.column}] does not exist."


class NoCurrentRowError(CsvDataError, IndexError):
    """Raised when a current-row operation is requested on a table with no rows."""

    def __init__(self, message: str = "The table holds no rows."):
        super().__init__(message)


class OutOfBoundsError(CsvDataError, IndexError):
    """Raised when the cursor would move outside the table's rows."""

    def __init__(self, index: int, length: int, message: Optional[str] = None):
        self.index = index
        self.length = length
        if message is None:
            message = f"Row index [{index}] is outside the bounds of a table with {length} rows."
        super().__init__(message)
