import pytest

from dsakit.arrays import (
    column_sums,
    count_zeros_ones,
    extremes,
    find_unique,
    greedy_prefix_count,
    intersection,
    linear_search,
    matrix_contains,
    matrix_maximum,
    matrix_minimum,
    maximum,
    pair_sums,
    reverse_array,
    row_sums,
    sort_zeros_ones,
    transpose,
    triplet_sums,
    union,
)

GRID = [
    [1, 2, 3, 4],
    [2, 3, 14, 1],
    [5, 6, 1, 3],
    [21, 4, 16, 8],
    [1, 4, -9, 0],
]

BITS = [1, 1, 0, 1, 1, 0, 1, 0, 1, 0, 0, 1, 0]


def test_linear_search():
    arr = [1, 3, 5, 7, 8]
    assert linear_search(arr, 8) is True
    assert linear_search(arr, 2) is False
    assert linear_search([], 1) is False


def test_count_zeros_ones():
    arr = [0, 1, 1, 1, 0, 0, 0, 0, 1, 0, 1, 0, 1, 0]
    zeros, ones = count_zeros_ones(arr)
    assert zeros == arr.count(0)
    assert ones == arr.count(1)
    assert zeros + ones == len(arr)


def test_maximum():
    arr = [2, 4, 1, 6, 16, 20, 8, 9, 0, 10, 1, 12, 15]
    assert maximum(arr) == 20


def test_maximum_of_empty_raises():
    with pytest.raises(ValueError):
        maximum([])


def test_extremes_pairs_ends():
    arr = [1, 8, 2, 7, 3, 9, 6, 4, 5]
    pairs = extremes(arr)
    assert pairs[0] == (arr[0], arr[-1])
    assert pairs[-1] == (arr[len(arr) // 2],)
    assert len(pairs) == (len(arr) + 1) // 2
    assert sorted(v for pair in pairs for v in pair) == sorted(arr)


def test_extremes_even_length_has_no_single():
    pairs = extremes([1, 2, 3, 4])
    assert all(len(pair) == 2 for pair in pairs)


def test_reverse_array_does_not_mutate():
    arr = [1, 8, 2, 7, 3, 9, 6, 4, 5]
    original = list(arr)
    result = reverse_array(arr)
    assert arr == original
    assert result[0] == arr[-1] and result[-1] == arr[0]
    assert reverse_array(result) == arr


def test_find_unique():
    assert find_unique([1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 10]) == 10


def test_union_keeps_everything_in_order():
    a, b = [2, 4, 6, 8], [1, 3, 7, 9]
    result = union(a, b)
    assert result[: len(a)] == a
    assert result[len(a):] == b


def test_intersection():
    assert intersection([2, 4, 6, 8], [1, 2, 3, 4, 7, 9]) == [2, 4]


def test_intersection_with_disjoint_is_empty():
    assert intersection([2, 4, 6, 8], [1, 3, 7, 9]) == []


def test_pair_sums():
    arr = [1, 3, 5, 7, 2, 4, 6]
    pairs = pair_sums(arr, 9)
    assert pairs
    for x, y in pairs:
        assert x + y == 9
        assert arr.index(x) < arr.index(y)


def test_triplet_sums():
    arr = [10, 20, 30, 40, 50, 60, 70, 80, 90]
    triples = triplet_sums(arr, 100)
    assert triples
    assert all(sum(t) == 100 for t in triples)
    assert all(list(t) == sorted(t) for t in triples)
    assert len(set(triples)) == len(triples)


def test_sort_zeros_ones():
    result = sort_zeros_ones(BITS)
    assert result == sorted(BITS)
    assert BITS == [1, 1, 0, 1, 1, 0, 1, 0, 1, 0, 0, 1, 0]


def test_sort_zeros_ones_rejects_other_values():
    with pytest.raises(ValueError):
        sort_zeros_ones([0, 2, 1])


def test_matrix_contains():
    assert matrix_contains(GRID, 8) is True
    assert matrix_contains(GRID, 100) is False


def test_matrix_min_and_max():
    assert matrix_maximum(GRID) == 21
    assert matrix_minimum(GRID) == -9


def test_matrix_min_max_of_empty_raise():
    with pytest.raises(ValueError):
        matrix_minimum([])
    with pytest.raises(ValueError):
        matrix_maximum([[]])


def test_transpose_round_trip_and_shape():
    result = transpose(GRID)
    assert len(result) == len(GRID[0])
    assert len(result[0]) == len(GRID)
    assert result[2][3] == GRID[3][2]
    assert transpose(result) == GRID


def test_row_and_column_sums_agree_on_total():
    rows = row_sums(GRID)
    cols = column_sums(GRID)
    assert len(rows) == len(GRID)
    assert len(cols) == len(GRID[0])
    assert sum(rows) == sum(cols)
    assert column_sums(GRID) == row_sums(transpose(GRID))


def test_greedy_prefix_count():
    assert greedy_prefix_count([12, 34, 67, 90], 101) == 2


def test_greedy_prefix_count_edges():
    arr = [12, 34, 67, 90]
    assert greedy_prefix_count(arr, sum(arr)) == len(arr)
    assert greedy_prefix_count(arr, 11) == 0
    assert greedy_prefix_count([], 5) == 0