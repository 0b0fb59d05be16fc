import pytest

from walsh.loader import (
    LoadStatus,
    ParseFailure,
    UnreadableMatrixError,
    load_walsh_matrix,
    parse_chip,
    parse_walsh_matrix,
    split_fields,
)
from conftest import HADAMARD_4


def chips(matrix):
    return [list(row.chips) for row in matrix.rows]


def test_load_two_row_file(matrix_file):
    result = load_walsh_matrix(matrix_file("1 1\n1 -1\n"))

    assert result.ok
    assert result.status == LoadStatus.SUCCESS
    assert result.failures == []
    assert chips(result.matrix) == [[1, 1], [1, -1]]


def test_load_then_sort(matrix_file):
    matrix = load_walsh_matrix(matrix_file(HADAMARD_4)).unwrap()
    assert matrix.sequencies() == [0, 3, 1, 2]
    matrix.sort_by_sequency()
    assert chips(matrix) == [
        [1, 1, 1, 1],
        [1, 1, -1, -1],
        [1, -1, -1, 1],
        [1, -1, 1, -1],
    ]


def test_bad_token_becomes_zero(matrix_file):
    result = load_walsh_matrix(matrix_file("1 x -1\n"))

    assert result.ok
    assert chips(result.matrix) == [[1, 0, -1]]
    assert result.failures == [ParseFailure(row=0, position=1, token="x")]
    assert "Couldn't convert x to int" in str(result.failures[0])


def test_failures_recorded_across_rows():
    result = parse_walsh_matrix("1 1.5\n-1 -1\nabc 1 +\n")

    assert chips(result.matrix) == [[1, 0], [-1, -1], [0, 1, 0]]
    assert [(f.row, f.position, f.token) for f in result.failures] == [
        (0, 1, "1.5"),
        (2, 0, "abc"),
        (2, 2, "+"),
    ]


def test_row_length_matches_token_count():
    text = "1 -1 1\n\n-1\n1 q 1 1 1\n"
    result = parse_walsh_matrix(text)
    assert [len(row) for row in result.matrix.rows] == [3, 0, 1, 5]


def test_blank_lines_yield_empty_rows():
    result = parse_walsh_matrix("1 1\n\n1 -1\n")
    assert chips(result.matrix) == [[1, 1], [], [1, -1]]


def test_line_endings():
    assert chips(parse_walsh_matrix("1 -1\r\n-1 1").matrix) == [[1, -1], [-1, 1]]
    assert len(parse_walsh_matrix("").matrix) == 0
    assert chips(parse_walsh_matrix("\n").matrix) == [[]]


def test_tabs_and_repeated_spaces():
    assert chips(parse_walsh_matrix("  1\t\t-1   1 \n").matrix) == [[1, -1, 1]]


@pytest.mark.parametrize("token, expected", [
    ("1", 1),
    ("-1", -1),
    ("+1", 1),
    ("007", 7),
    ("-0", 0),
    ("x", None),
    ("1.0", None),
    ("1_0", None),
    ("--1", None),
    ("9223372036854775807", 2 ** 63 - 1),
    ("-9223372036854775808", -(2 ** 63)),
    ("9223372036854775808", None),
    ("99999999999999999999", None),
    ("", None),
])
def test_parse_chip(token, expected):
    assert parse_chip(token) == expected


def test_missing_file_is_unreadable(tmp_path):
    path = tmp_path / "missing.txt"
    result = load_walsh_matrix(str(path))

    assert not result.ok
    assert result.status == LoadStatus.UNREADABLE
    assert result.matrix is None
    assert result.failures == []
    assert str(path) in result.error

    with pytest.raises(UnreadableMatrixError):
        result.unwrap()


def test_directory_is_unreadable(tmp_path):
    assert load_walsh_matrix(str(tmp_path)).status == LoadStatus.UNREADABLE


def test_undecodable_bytes_are_parse_failures(tmp_path):
    path = tmp_path / "walsh.txt"
    path.write_bytes(b"1 \xff -1\n")

    result = load_walsh_matrix(str(path))

    assert result.ok
    assert chips(result.matrix) == [[1, 0, -1]]
    assert len(result.failures) == 1


def test_out_of_range_token_is_parse_failure():
    result = parse_walsh_matrix("99999999999999999999 -1\n")

    assert chips(result.matrix) == [[0, -1]]
    assert result.failures == [ParseFailure(row=0, position=0, token="99999999999999999999")]


def test_unit_separators_are_not_whitespace():
    result = parse_walsh_matrix("1\x1f-1 1\n")

    assert chips(result.matrix) == [[0, 1]]
    assert [f.token for f in result.failures] == ["1\x1f-1"]


def test_unicode_spaces_separate_tokens():
    assert split_fields("1 -1\u3000 1\x85-1") == ["1", "-1", "1", "-1"]
