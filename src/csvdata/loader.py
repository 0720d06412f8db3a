"""CSV loading: tokenizer output to a Table.

The loader owns the data contract between raw records and ``Table``:

- the first record is the header; its names are always stripped;
- a later record with a single field (a line with no separator) or no
  fields (a blank line) is discarded;
- cells are stripped unless ``preserve_spaces`` is set;
- records whose field count differs from the header are handled per
  ``RowLengthPolicy``.

Tokenizing itself is delegated to the stdlib ``csv`` module.
"""

import csv
import io
import logging
from collections import Counter
from typing import List, Optional, Sequence

from ._io import read_text, resolve_path
from ._types import LoadOptions, RowLengthPolicy
from .errors import LoadError, MalformedRowError
from .row import Row
from .table import Table

logger = logging.getLogger(__name__)


def _resolve_options(
    preserve_spaces: Optional[bool],
    options: Optional[LoadOptions],
) -> LoadOptions:
    resolved = options or LoadOptions()
    if preserve_spaces is not None:
        resolved = resolved.model_copy(update={"preserve_spaces": preserve_spaces})
    return resolved


def tokenize(text: str, delimiter: str = ",") -> List[List[str]]:
    """Split delimited text into records of field strings."""
    return list(csv.reader(io.StringIO(text, newline=""), delimiter=delimiter))


def build_table(
    records: Sequence[Sequence[str]],
    preserve_spaces: bool = False,
    *,
    row_length_policy: RowLengthPolicy = RowLengthPolicy.STRICT,
    source: Optional[str] = None,
) -> Table:
    """Build a Table from tokenized records, the first being the header.

    Raises:
        LoadError: If there is no header or the header repeats a name.
        MalformedRowError: Under the strict policy, for a record whose field
            count differs from the header's.
    """
    label = source or "<records>"
    if not records or not records[0]:
        raise LoadError(label, "no header record")

    header = tuple(name.strip() for name in records[0])
    duplicates = [name for name, count in Counter(header).items() if count > 1]
    if duplicates:
        raise LoadError(label, f"duplicate column names: {', '.join(duplicates)}")

    rows: List[Row] = []
    for number, record in enumerate(records[1:], start=2):
        if len(record) <= 1:
            logger.debug("%s: discarding record %d with no separator", label, number)
            continue

        cells = list(record) if preserve_spaces else [cell.strip() for cell in record]

        if len(cells) != len(header):
            if row_length_policy == RowLengthPolicy.STRICT:
                raise MalformedRowError(label, number, len(header), len(cells))
            if row_length_policy == RowLengthPolicy.SKIP:
                logger.warning(
                    "%s: skipping record %d with %d fields (header has %d)",
                    label,
                    number,
                    len(cells),
                    len(header),
                )
                continue
            cells = cells[: len(header)] + [""] * (len(header) - len(cells))

        rows.append(Row(columns=header, cells=tuple(cells)))

    return Table(rows, header, source=source)


def loads(
    text: str,
    preserve_spaces: Optional[bool] = None,
    *,
    options: Optional[LoadOptions] = None,
    source: str = "<string>",
) -> Table:
    """Load a Table from CSV text held in memory."""
    opts = _resolve_options(preserve_spaces, options)
    try:
        records = tokenize(text, opts.delimiter)
    except csv.Error as exc:
        raise LoadError(source, str(exc)) from exc

    return build_table(
        records,
        opts.preserve_spaces,
        row_length_policy=opts.row_length_policy,
        source=source,
    )


def load(
    file_path: str,
    preserve_spaces: Optional[bool] = None,
    *,
    options: Optional[LoadOptions] = None,
) -> Table:
    """Load a CSV file into a Table with the cursor on the first row.

    Args:
        file_path: Path to the CSV file. A relative path that does not exist
            as given is looked up under ``options.search_paths``.
        preserve_spaces: Keep leading/trailing whitespace in cells. Header
            names are stripped either way. Overrides ``options`` when given.
        options: Delimiter, encoding, row-length policy and search paths.

    Returns:
        The loaded Table.

    Raises:
        LoadError: If the file cannot be found, read, or parsed.
    """
    opts = _resolve_options(preserve_spaces, options)
    path = resolve_path(file_path, opts.search_paths)
    text = read_text(path, opts.encoding)
    table = loads(text, options=opts, source=str(file_path))

    logger.info(
        "Loaded %s: %d rows, %d columns", path, table.length(), len(table.columns)
    )
    return table
