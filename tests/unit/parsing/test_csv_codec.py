"""Unit tests for the CSV codec."""

import pytest

from tablegraph.parsing.csv_codec import parse_csv, stringify_csv


class TestParseCsv:
    def test_simple_rows(self):
        assert parse_csv("a,b\nc,d") == [["a", "b"], ["c", "d"]]

    def test_trailing_newline_does_not_add_row(self):
        assert parse_csv("a,b\nc,d\n") == [["a", "b"], ["c", "d"]]

    def test_crlf(self):
        assert parse_csv("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]

    def test_quoted_comma_and_newline(self):
        text = '"x, y","line1\nline2"\nz,w'
        assert parse_csv(text) == [["x, y", "line1\nline2"], ["z", "w"]]

    def test_escaped_quotes(self):
        assert parse_csv('"say ""hi""",b') == [['say "hi"', "b"]]

    def test_empty_input_yields_no_rows(self):
        assert parse_csv("") == []

    def test_final_row_with_single_empty_field_dropped(self):
        assert parse_csv("a\n") == [["a"]]

    def test_final_row_with_empty_fields_kept(self):
        # A lone comma means two fields, so the row is emitted.
        assert parse_csv("a\n,") == [["a"], ["", ""]]

    def test_blank_line_in_middle_is_kept(self):
        assert parse_csv("a\n\nb") == [["a"], [""], ["b"]]

    def test_ragged_rows(self):
        assert parse_csv("a,b,c\nd") == [["a", "b", "c"], ["d"]]

    def test_carriage_return_inside_quotes_is_literal(self):
        assert parse_csv('"a\rb"') == [["a\rb"]]


class TestStringifyCsv:
    def test_plain_cells(self):
        assert stringify_csv([["a", "b"], ["c", "d"]]) == "a,b\nc,d"

    def test_quotes_when_needed(self):
        out = stringify_csv([['he said "hi"', "x,y", "1\n2", "plain"]])
        assert out == '"he said ""hi""","x,y","1\n2",plain'

    def test_carriage_return_is_quoted(self):
        assert stringify_csv([["a\rb", "c"]]) == '"a\rb",c'

    def test_empty_grid(self):
        assert stringify_csv([]) == ""

    @pytest.mark.parametrize("grid", [
        [["a", "b"], ["c", "d"]],
        [["", "x"], ["y", ""]],
        [['"quoted"', "comma, inside"], ["multi\nline", "cr\rhere"]],
        [["one"], ["two", "three", "four"]],
        [["a"], [""], ["b"]],
    ])
    def test_round_trip(self, grid):
        assert parse_csv(stringify_csv(grid)) == grid
