"""Shared test fixtures for csvdata."""

import pytest

SIX_ROWS = """a,b,c
foo,bar,baz
foo,baz,bar
bar,foo,baz
bar,baz,foo
baz,foo,bar
baz,bar,foo
"""

# Header + 9 data lines; "lonely" has no separator and the header is padded.
MESSY = """ a , b ,c
foo,bar,baz
foo  ,baz,bar
bar, foo ,baz
lonely
bar,baz,foo
baz,foo,bar
,bar,foo
baz,,qux
qux,quux,corge
"""


@pytest.fixture
def table_csv(tmp_path):
    """Create the six-row a,b,c fixture file."""
    path = tmp_path / "table.csv"
    path.write_text(SIX_ROWS)
    return str(path)


@pytest.fixture
def messy_csv(tmp_path):
    """Create a 10-line file with padded cells and a line without a separator."""
    path = tmp_path / "messy.csv"
    path.write_text(MESSY)
    return str(path)


@pytest.fixture
def ragged_csv(tmp_path):
    """Create a file whose second data record is one field short."""
    path = tmp_path / "ragged.csv"
    path.write_text("a,b,c\nfoo,bar,baz\nfoo,bar\nbar,baz,foo,extra\n")
    return str(path)
