import numpy as np
import pytest

from walsh.codes import (
    SpreadingCode,
    WalshMatrix,
    sequency,
    compare_sequency,
    sort_by_sequency,
    walsh_matrix_from_array,
    generate_walsh_hadamard_codes,
    format_walsh_matrix,
    get_code_properties,
)


@pytest.mark.parametrize("chips, expected", [
    ([], 0),
    ([1], 0),
    ([1, 1, 1], 0),
    ([1, -1, 1, -1], 3),
    ([1, 1, -1, -1, 1], 2),
])
def test_sequency(chips, expected):
    assert sequency(chips) == expected
    assert SpreadingCode(tuple(chips)).sequency() == expected


def test_sequency_counts_any_inequality():
    # 1 -> 2 is not a sign change but still counts
    assert sequency([1, 2, 2, 0]) == 2


def test_spreading_code_is_immutable():
    code = SpreadingCode([1, -1])
    assert code.chips == (1, -1)
    with pytest.raises(AttributeError):
        code.chips = (1, 1)


def test_compare_sequency():
    low = SpreadingCode((1, 1, 1))
    high = SpreadingCode((1, -1, 1))
    assert compare_sequency(low, high) < 0
    assert compare_sequency(high, low) > 0
    assert compare_sequency(low, SpreadingCode((-1, -1))) == 0


def test_sort_orders_by_ascending_sequency():
    matrix = WalshMatrix([
        SpreadingCode((1, -1, 1, -1)),
        SpreadingCode((1, 1, 1, 1)),
        SpreadingCode((1, -1, -1, 1)),
    ])
    before = list(matrix.rows)

    sort_by_sequency(matrix)

    assert matrix.sequencies() == [0, 2, 3]
    assert sorted(matrix.rows, key=lambda r: r.chips) == sorted(before, key=lambda r: r.chips)


def test_sort_keeps_every_row_once_with_ties():
    rows = [
        SpreadingCode((1, -1, -1, -1)),
        SpreadingCode((1, 1, 1, 1)),
        SpreadingCode((1, 1, 1, -1)),
        SpreadingCode((-1, -1, -1, -1)),
    ]
    matrix = WalshMatrix(list(rows))
    matrix.sort_by_sequency()

    assert matrix.sequencies() == [0, 0, 1, 1]
    assert set(matrix.rows[:2]) == {rows[1], rows[3]}
    assert set(matrix.rows[2:]) == {rows[0], rows[2]}


def test_sort_is_idempotent():
    matrix = walsh_matrix_from_array(generate_walsh_hadamard_codes(8)).sort_by_sequency()
    order = list(matrix.rows)
    matrix.sort_by_sequency()
    assert matrix.rows == order


@pytest.mark.parametrize("rows", [[], [SpreadingCode((1, -1))]])
def test_sort_small_matrix_is_noop(rows):
    matrix = WalshMatrix(list(rows))
    matrix.sort_by_sequency()
    assert matrix.rows == rows


@pytest.mark.parametrize("order", [1, 2, 8, 32])
def test_sorted_hadamard_is_sequency_ordered(order):
    matrix = walsh_matrix_from_array(generate_walsh_hadamard_codes(order))
    matrix.sort_by_sequency()
    assert matrix.sequencies() == list(range(order))


@pytest.mark.parametrize("order", [0, 3, 12, 8192])
def test_generate_rejects_bad_order(order):
    with pytest.raises(ValueError):
        generate_walsh_hadamard_codes(order)


def test_to_array_rejects_ragged_matrix():
    matrix = WalshMatrix([SpreadingCode((1, 1)), SpreadingCode((1,))])
    assert not matrix.is_square()
    with pytest.raises(ValueError):
        matrix.to_array()


def test_format_walsh_matrix():
    matrix = WalshMatrix([SpreadingCode((1, 1)), SpreadingCode((1, -1))])
    assert format_walsh_matrix(matrix) == "1 1\n1 -1\n"
    assert format_walsh_matrix(matrix.to_array()) == "1 1\n1 -1\n"


def test_code_properties_of_hadamard():
    codes = generate_walsh_hadamard_codes(16)
    props = get_code_properties(walsh_matrix_from_array(codes))

    assert props["num_codes"] == 16
    assert props["code_length"] == 16
    assert props["auto_correlation_mean"] == 16.0
    assert props["max_cross_correlation"] == 0.0
    assert props["orthogonality_score"] == 1.0
    assert props["min_sequency"] == 0
    assert props["max_sequency"] == 15

    assert get_code_properties(codes) == props


def test_code_properties_of_non_orthogonal_codes():
    codes = np.array([[1, 1, 1, 1], [1, 1, 1, -1]])
    props = get_code_properties(codes)
    assert props["max_cross_correlation"] == 2.0
    assert props["orthogonality_score"] == pytest.approx(0.5)
