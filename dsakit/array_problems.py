"""Array problems: partitioning, duplicates, matrix walks and digit arithmetic."""

from __future__ import annotations

import math
from collections import Counter
from typing import Sequence

Matrix = Sequence[Sequence[int]]


def sort_colors(arr: Sequence[int]) -> list[int]:
    """A new list with the 0s, 1s and 2s of ``arr`` grouped in order (Dutch national flag)."""
    if any(value not in (0, 1, 2) for value in arr):
        raise ValueError("sort_colors accepts only 0, 1 and 2")
    result = list(arr)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[mid], result[low] = result[low], result[mid]
            low += 1
            mid += 1
        elif result[mid] == 1:
            mid += 1
        else:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
    return result


def move_negatives_left(arr: Sequence[int]) -> list[int]:
    """A new list with every negative value placed before every non-negative one."""
    result = list(arr)
    low, high = 0, len(result) - 1
    while low < high:
        if result[low] < 0:
            low += 1
        else:
            result[low], result[high] = result[high], result[low]
            high -= 1
    return result


def _check_duplicate_input(arr: Sequence[int]) -> None:
    if len(arr) < 2:
        raise ValueError("need at least two values to hold a duplicate")
    if any(not 1 <= value < len(arr) for value in arr):
        raise ValueError("values must lie in 1..len(arr)-1")


def find_duplicate(arr: Sequence[int]) -> int:
    """The repeated value, found by marking visited positions negative.

    Values must lie in ``1..len(arr)-1``, which guarantees a repeat.
    """
    _check_duplicate_input(arr)
    marks = list(arr)
    for value in arr:
        if marks[value] < 0:
            return value
        marks[value] = -marks[value]
    raise AssertionError("unreachable: a duplicate always exists")


def find_duplicate_by_swapping(arr: Sequence[int]) -> int:
    """The repeated value, found by moving each value to its own index."""
    _check_duplicate_input(arr)
    nums = list(arr)
    while nums[0] != nums[nums[0]]:
        target = nums[0]
        nums[0], nums[target] = nums[target], nums[0]
    return nums[0]


def missing_numbers(arr: Sequence[int]) -> list[int]:
    """Values of ``1..len(arr)`` that do not appear in ``arr``, in increasing order."""
    n = len(arr)
    if any(not 1 <= value <= n for value in arr):
        raise ValueError("values must lie in 1..len(arr)")
    marks = list(arr)
    for value in arr:
        index = value - 1
        if marks[index] > 0:
            marks[index] = -marks[index]
    return [index + 1 for index, value in enumerate(marks) if value > 0]


def first_repeating_position(arr: Sequence[int]) -> int:
    """1-based position of the first element that occurs more than once, or -1."""
    counts = Counter(arr)
    return next(
        (position for position, value in enumerate(arr, start=1) if counts[value] > 1),
        -1,
    )


def common_elements(a: Sequence[int], b: Sequence[int], c: Sequence[int]) -> list[int]:
    """Distinct values present in all three sorted sequences, in increasing order."""
    found: set[int] = set()
    i = j = k = 0
    while i < len(a) and j < len(b) and k < len(c):
        if a[i] == b[j] == c[k]:
            found.add(a[i])
            i += 1
            j += 1
            k += 1
        elif a[i] < b[j]:
            i += 1
        elif b[j] < c[k]:
            j += 1
        else:
            k += 1
    return sorted(found)


def wave_order(matrix: Matrix) -> list[int]:
    """Cells read column by column, downwards on even columns and upwards on odd ones."""
    result: list[int] = []
    for col, column in enumerate(zip(*matrix)):
        result.extend(column if col % 2 == 0 else reversed(column))
    return result


def spiral_order(matrix: Matrix) -> list[int]:
    """Cells read clockwise from the top-left corner, spiralling inwards."""
    if not matrix or not matrix[0]:
        return []
    remaining = len(matrix) * len(matrix[0])
    top, left = 0, 0
    bottom, right = len(matrix) - 1, len(matrix[0]) - 1
    result: list[int] = []
    while remaining > 0:
        if remaining > 0:
            for col in range(left, right + 1):
                result.append(matrix[top][col])
                remaining -= 1
        top += 1
        if remaining > 0:
            for row in range(top, bottom + 1):
                result.append(matrix[row][right])
                remaining -= 1
        right -= 1
        if remaining > 0:
            for col in range(right, left - 1, -1):
                result.append(matrix[bottom][col])
                remaining -= 1
        bottom -= 1
        if remaining > 0:
            for row in range(bottom, top - 1, -1):
                result.append(matrix[row][left])
                remaining -= 1
        left += 1
    return result


def add_digit_arrays(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Sum of two numbers given as digit lists, most significant first, without leading zeros."""
    for digits in (a, b):
        if any(not 0 <= d <= 9 for d in digits):
            raise ValueError("digit lists may hold only 0..9")
    result: list[int] = []
    carry = 0
    i, j = len(a) - 1, len(b) - 1
    while i >= 0 or j >= 0:
        x = a[i] if i >= 0 else 0
        y = b[j] if j >= 0 else 0
        carry, digit = divmod(x + y + carry, 10)
        result.append(digit)
        i -= 1
        j -= 1
    result.append(carry)
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    return result[::-1]


def factorial_digits(n: int) -> list[int]:
    """Decimal digits of ``n!``, most significant first."""
    if n < 0:
        raise ValueError(f"factorial is undefined for {n}")
    return [int(d) for d in str(math.factorial(n))]