"""csvdata -- Load CSV fixture files into narrowable, cursor-addressed tables.

Quick start::

    from csvdata import load

    table = load("accounts.csv")
    table.filter("region", "west").exclude("status", "closed")
    print(table.length(), "rows;", "first owner:", table.value_of("owner"))

    for row in table.rows():
        print(row.values())
"""

__version__ = "0.3.0"

from ._types import LoadOptions, RowLengthPolicy, TableSummary
from .errors import (
    CsvDataError,
    LoadError,
    MalformedRowError,
    MissingColumnError,
    NoCurrentRowError,
    OutOfBoundsError,
)
from .loader import build_table, load, loads, tokenize
from .row import Row
from .table import Table

__all__ = [
    "__version__",
    # Loading
    "load",
    "loads",
    "build_table",
    "tokenize",
    "LoadOptions",
    "RowLengthPolicy",
    # Data
    "Table",
    "Row",
    "TableSummary",
    # Errors
    "CsvDataError",
    "LoadError",
    "MalformedRowError",
    "MissingColumnError",
    "NoCurrentRowError",
    "OutOfBoundsError",
]
