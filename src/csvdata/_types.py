"""Shared option and result types for csvdata.

Options are Pydantic models so they can be built from keyword arguments,
dicts, or environment defaults alike.
"""

import os
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

ENV_SEARCH_PATH = "CSVDATA_PATH"
ENV_ENCODING = "CSVDATA_ENCODING"


def _default_encoding() -> str:
    return os.getenv(ENV_ENCODING, "") or "utf-8-sig"


def _default_search_paths() -> List[Path]:
    """Directories tried, in order, when a relative path does not exist as given."""
    cwd = Path.cwd()
    configured = [
        Path(p) for p in os.getenv(ENV_SEARCH_PATH, "").split(os.pathsep) if p
    ]
    return configured + [
        cwd,
        cwd / "data",
        cwd / "tests" / "resources",
        cwd / "resources",
    ]


class RowLengthPolicy(str, Enum):
    """What the loader does with a record whose field count differs from the header."""

    STRICT = "strict"  # raise MalformedRowError
    PAD = "pad"  # pad short records with "", truncate long ones
    SKIP = "skip"  # drop the record and log a warning


class LoadOptions(BaseModel):
    """Options controlling how a CSV source becomes a Table."""

    preserve_spaces: bool = False
    delimiter: str = ","
    encoding: str = Field(default_factory=_default_encoding)
    row_length_policy: RowLengthPolicy = RowLengthPolicy.STRICT
    search_paths: List[Path] = Field(default_factory=_default_search_paths)

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be a single character")
        return value


class TableSummary(BaseModel):
    """Snapshot of a table's shape."""

    source: Optional[str] = None
    columns: List[str]
    rows: int
    cursor: Optional[int] = None
