"""Basic operations on lists and on matrices given as lists of rows."""

from __future__ import annotations

from functools import reduce
from itertools import chain, combinations
from operator import xor
from typing import Sequence

Matrix = Sequence[Sequence[int]]


def linear_search(arr: Sequence[int], key: int) -> bool:
    """True when ``key`` is in ``arr``."""
    return any(value == key for value in arr)


def count_zeros_ones(arr: Sequence[int]) -> tuple[int, int]:
    """How many zeros and how many ones ``arr`` holds, as ``(zeros, ones)``."""
    zeros = sum(1 for value in arr if value == 0)
    ones = sum(1 for value in arr if value == 1)
    return zeros, ones


def maximum(arr: Sequence[int]) -> int:
    """Largest value in ``arr``; ValueError when it is empty."""
    if not arr:
        raise ValueError("maximum of an empty sequence")
    return max(arr)


def extremes(arr: Sequence[int]) -> list[tuple[int, ...]]:
    """Pair the first with the last element, the second with the second last and so on.

    A middle element left without a partner stands alone in a one-element tuple.
    """
    result = []
    start, end = 0, len(arr) - 1
    while start <= end:
        if start == end:
            result.append((arr[start],))
        else:
            result.append((arr[start], arr[end]))
        start += 1
        end -= 1
    return result


def reverse_array(arr: Sequence[int]) -> list[int]:
    """A new list with the elements of ``arr`` in reverse order."""
    return list(reversed(arr))


def find_unique(arr: Sequence[int]) -> int:
    """The one value that is not paired, found by XOR of all elements."""
    return reduce(xor, arr, 0)


def union(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """All elements of ``a`` followed by all elements of ``b``."""
    return [*a, *b]


def intersection(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Every element of ``a`` once for each equal element in ``b``, in the order of ``a``."""
    return [x for x in a for y in b if x == y]


def pair_sums(arr: Sequence[int], target: int) -> list[tuple[int, int]]:
    """All pairs of elements, taken in index order, whose sum is ``target``."""
    return [pair for pair in combinations(arr, 2) if sum(pair) == target]


def triplet_sums(arr: Sequence[int], target: int) -> list[tuple[int, int, int]]:
    """All triplets of elements, taken in index order, whose sum is ``target``."""
    return [triple for triple in combinations(arr, 3) if sum(triple) == target]


def sort_zeros_ones(arr: Sequence[int]) -> list[int]:
    """A new list holding the zeros of ``arr`` before its ones, sorted by two pointers."""
    if any(value not in (0, 1) for value in arr):
        raise ValueError("sort_zeros_ones accepts only zeros and ones")
    result = list(arr)
    i, j = 0, len(result) - 1
    while i < j:
        if result[i] == 0:
            i += 1
        elif result[j] == 1:
            j -= 1
        else:
            result[i], result[j] = result[j], result[i]
            i += 1
            j -= 1
    return result


def matrix_contains(matrix: Matrix, key: int) -> bool:
    """True when any cell of ``matrix`` equals ``key``."""
    return any(value == key for value in chain.from_iterable(matrix))


def _cells(matrix: Matrix) -> list[int]:
    cells = list(chain.from_iterable(matrix))
    if not cells:
        raise ValueError("matrix has no cells")
    return cells


def matrix_minimum(matrix: Matrix) -> int:
    """Smallest cell of ``matrix``; ValueError when it has none."""
    return min(_cells(matrix))


def matrix_maximum(matrix: Matrix) -> int:
    """Largest cell of ``matrix``; ValueError when it has none."""
    return max(_cells(matrix))


def transpose(matrix: Matrix) -> list[list[int]]:
    """Rows become columns."""
    return [list(column) for column in zip(*matrix)]


def row_sums(matrix: Matrix) -> list[int]:
    """Sum of every row."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Matrix) -> list[int]:
    """Sum of every column."""
    return [sum(column) for column in zip(*matrix)]


def greedy_prefix_count(arr: Sequence[int], limit: int) -> int:
    """How many leading elements can be taken before their sum would exceed ``limit``."""
    total = 0
    for count, value in enumerate(arr):
        if total + value > limit:
            return count
        total += value
    return len(arr)