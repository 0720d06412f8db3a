"""Tests for loading CSV sources into tables."""

import csv
import logging
from pathlib import Path

import pytest

from csvdata import (
    LoadError,
    LoadOptions,
    MalformedRowError,
    RowLengthPolicy,
    build_table,
    load,
    loads,
    tokenize,
)


class TestLoad:
    def test_basic_load(self, table_csv):
        table = load(table_csv)
        assert table.columns == ("a", "b", "c")
        assert table.length() == 6
        assert table.cursor == 0

    def test_ignore_rows_without_separator(self, messy_csv):
        table = load(messy_csv)
        assert table.length() == 8
        assert "lonely" not in table.column_values("a")

    def test_header_is_stripped(self, messy_csv):
        assert load(messy_csv).columns == ("a", "b", "c")
        assert load(messy_csv, True).columns == ("a", "b", "c")

    def test_cells_stripped_by_default(self, messy_csv):
        table = load(messy_csv)
        table.filter("foo")
        assert table.column_values("a") == ["foo", "foo"]
        assert load(messy_csv).filter("b", "foo").length() == 2

    def test_preserve_trailing_spaces(self, messy_csv):
        table = load(messy_csv, True)
        table.filter("foo  ")
        assert table.column_values("a") == ["foo  "]

    def test_preserve_spaces_keeps_inner_cells(self, messy_csv):
        table = load(messy_csv, preserve_spaces=True)
        assert table.filter("b", " foo ").column_values("a") == ["bar"]

    def test_empty_cells_kept(self, messy_csv):
        table = load(messy_csv)
        assert table.exclude("baz").column_values("a") == ["foo", "foo", "bar", "bar", "", "qux"]
        assert load(messy_csv).filter("").column_values("b") == ["bar"]

    def test_file_not_found(self):
        with pytest.raises(LoadError) as excinfo:
            load("/nonexistent/path/to/file.csv")
        assert excinfo.value.path == "/nonexistent/path/to/file.csv"
        assert "/nonexistent/path/to/file.csv" in str(excinfo.value)

    def test_search_paths(self, table_csv):
        directory = Path(table_csv).parent
        table = load("table.csv", options=LoadOptions(search_paths=[directory]))
        assert table.length() == 6

    def test_search_path_from_environment(self, table_csv, monkeypatch):
        monkeypatch.setenv("CSVDATA_PATH", str(Path(table_csv).parent))
        assert load("table.csv").length() == 6

    def test_not_found_lists_searched_directories(self, tmp_path):
        with pytest.raises(LoadError, match="searched"):
            load("missing.csv", options=LoadOptions(search_paths=[tmp_path]))

    def test_decode_failure(self, tmp_path):
        path = tmp_path / "latin.csv"
        path.write_bytes("a,b\ncaf\xe9,x\n".encode("latin-1"))
        with pytest.raises(LoadError):
            load(str(path))
        table = load(str(path), options=LoadOptions(encoding="latin-1"))
        assert table.value_of("a") == "caf\xe9"

    def test_byte_order_mark_dropped(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes("a,b\nfoo,bar\n".encode("utf-8-sig"))
        table = load(str(path))
        assert table.columns == ("a", "b")
        assert table.value_of("a") == "foo"
        assert table.filter("foo").length() == 1

    def test_unknown_encoding(self, table_csv):
        with pytest.raises(LoadError) as excinfo:
            load(table_csv, options=LoadOptions(encoding="no-such-codec"))
        assert isinstance(excinfo.value.__cause__, LookupError)

    def test_logs_load(self, table_csv, caplog):
        with caplog.at_level(logging.INFO, logger="csvdata.loader"):
            load(table_csv)
        assert "6 rows, 3 columns" in caplog.text


class TestLoads:
    def test_quoted_separator(self):
        table = loads('a,b\n"x, y",z\n')
        assert table.value_of("a") == "x, y"

    def test_custom_delimiter(self):
        table = loads("a;b\n1;2\n", options=LoadOptions(delimiter=";"))
        assert table.current_row_values() == ("1", "2")

    def test_delimiter_must_be_one_character(self):
        with pytest.raises(ValueError):
            LoadOptions(delimiter=";;")

    def test_empty_text(self):
        with pytest.raises(LoadError, match="no header"):
            loads("")

    def test_header_only(self):
        table = loads("a,b,c\n")
        assert table.length() == 0
        assert table.columns == ("a", "b", "c")

    def test_blank_lines_discarded(self):
        assert loads("a,b\n1,2\n\n3,4\n").length() == 2

    def test_duplicate_header_rejected(self):
        with pytest.raises(LoadError, match="duplicate column names: a"):
            loads("a,b, a\n1,2,3\n")

    def test_tokenizer_failure(self):
        text = "a,b\n" + "x" * (csv.field_size_limit() + 1) + ",y\n"
        with pytest.raises(LoadError) as excinfo:
            loads(text, source="big.csv")
        assert excinfo.value.path == "big.csv"
        assert "big.csv" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, csv.Error)

    def test_source_in_error(self):
        with pytest.raises(LoadError) as excinfo:
            loads("", source="inline.csv")
        assert excinfo.value.path == "inline.csv"


class TestRowLengthPolicy:
    def test_strict_is_default(self, ragged_csv):
        with pytest.raises(MalformedRowError) as excinfo:
            load(ragged_csv)
        assert excinfo.value.record_number == 3
        assert excinfo.value.expected == 3
        assert excinfo.value.actual == 2
        assert ragged_csv in str(excinfo.value)

    def test_malformed_row_is_a_load_error(self, ragged_csv):
        with pytest.raises(LoadError):
            load(ragged_csv)

    def test_pad(self, ragged_csv):
        table = load(ragged_csv, options=LoadOptions(row_length_policy="pad"))
        assert table.length() == 3
        assert table.column_values("c") == ["baz", "", "foo"]

    def test_skip(self, ragged_csv, caplog):
        options = LoadOptions(row_length_policy=RowLengthPolicy.SKIP)
        with caplog.at_level(logging.WARNING, logger="csvdata.loader"):
            table = load(ragged_csv, options=options)
        assert table.column_values("a") == ["foo"]
        assert "skipping record 3" in caplog.text
        assert "skipping record 4" in caplog.text


class TestBuildTable:
    def test_records(self):
        table = build_table([["x ", " y"], ["1", " 2 "], ["3", "4"]])
        assert table.columns == ("x", "y")
        assert table.column_values("y") == ["2", "4"]

    def test_preserve_spaces(self):
        table = build_table([["x ", " y"], ["1", " 2 "]], preserve_spaces=True)
        assert table.columns == ("x", "y")
        assert table.value_of("y") == " 2 "

    def test_single_field_records_dropped(self):
        table = build_table([["x", "y"], ["alone"], ["1", "2"]])
        assert table.length() == 1

    def test_no_records(self):
        with pytest.raises(LoadError):
            build_table([])

    def test_tokenize(self):
        assert tokenize("a,b\r\n1,\"2\"\r\n") == [["a", "b"], ["1", "2"]]
