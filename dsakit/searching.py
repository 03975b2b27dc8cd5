"""Binary search and its variations over sorted, rotated and nearly sorted data."""

from __future__ import annotations

from typing import Sequence

Matrix = Sequence[Sequence[int]]


def _search_range(arr: Sequence[int], start: int, end: int, key: int) -> int:
    while start <= end:
        mid = start + (end - start) // 2
        if arr[mid] == key:
            return mid
        if arr[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def binary_search(arr: Sequence[int], key: int) -> int:
    """Index of ``key`` in sorted ``arr``, or -1."""
    return _search_range(arr, 0, len(arr) - 1, key)


def _occurrence(arr: Sequence[int], key: int, leftmost: bool) -> int:
    start, end = 0, len(arr) - 1
    found = -1
    while start <= end:
        mid = (start + end) // 2
        if arr[mid] == key:
            found = mid
            if leftmost:
                end = mid - 1
            else:
                start = mid + 1
        elif arr[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return found


def first_occurrence(arr: Sequence[int], key: int) -> int:
    """Index of the first ``key`` in sorted ``arr``, or -1."""
    return _occurrence(arr, key, leftmost=True)


def last_occurrence(arr: Sequence[int], key: int) -> int:
    """Index of the last ``key`` in sorted ``arr``, or -1."""
    return _occurrence(arr, key, leftmost=False)


def count_occurrences(arr: Sequence[int], key: int) -> int:
    """How many times ``key`` appears in sorted ``arr``."""
    first = first_occurrence(arr, key)
    if first == -1:
        return 0
    return last_occurrence(arr, key) - first + 1


def peak_index(arr: Sequence[int]) -> int:
    """Index of an element not smaller than its neighbours."""
    if not arr:
        raise ValueError("peak of an empty sequence")
    start, end = 0, len(arr) - 1
    while start < end:
        mid = start + (end - start) // 2
        if arr[mid] < arr[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def integer_sqrt(n: int) -> int:
    """Largest integer whose square does not exceed ``n``."""
    if n < 0:
        raise ValueError(f"square root of negative number {n}")
    start, end = 0, n
    answer = -1
    while start <= end:
        mid = (start + end) // 2
        square = mid * mid
        if square == n:
            return mid
        if square > n:
            end = mid - 1
        else:
            answer = mid
            start = mid + 1
    return answer


def sqrt_with_precision(n: int, precision: int) -> float:
    """Square root of ``n`` truncated to ``precision`` decimal places by stepping."""
    result = float(integer_sqrt(n))
    step = 0.1
    for _ in range(precision):
        candidate = result
        while candidate * candidate <= n:
            result = candidate
            candidate += step
        step /= 10
    return result


def search_2d(matrix: Matrix, key: int) -> tuple[int, int] | None:
    """``(row, col)`` of ``key`` in a matrix sorted row after row, or None."""
    if not matrix or not matrix[0]:
        return None
    cols = len(matrix[0])
    start, end = 0, len(matrix) * cols - 1
    while start <= end:
        mid = (start + end) // 2
        row, col = divmod(mid, cols)
        element = matrix[row][col]
        if element == key:
            return row, col
        if element > key:
            end = mid - 1
        else:
            start = mid + 1
    return None


def nearly_sorted_search(arr: Sequence[int], key: int) -> int:
    """Index of ``key`` in an array where each element is at most one place from sorted."""
    start, end = 0, len(arr) - 1
    while start <= end:
        mid = (start + end) // 2
        if arr[mid] == key:
            return mid
        if mid - 1 >= 0 and arr[mid - 1] == key:
            return mid - 1
        if mid + 1 < len(arr) and arr[mid + 1] == key:
            return mid + 1
        if arr[mid] > key:
            end = mid - 2
        else:
            start = mid + 2
    return -1


def divide(dividend: int, divisor: int) -> int:
    """Integer quotient truncated towards zero, found by binary search."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    divs, divd = abs(divisor), abs(dividend)
    start, end = 0, divd
    answer = 0
    while start <= end:
        mid = (start + end) // 2
        product = divs * mid
        if product == divd:
            answer = mid
            break
        if product < divd:
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return -answer if (dividend < 0) != (divisor < 0) else answer


def divide_with_precision(dividend: int, divisor: int, precision: int) -> float:
    """Quotient refined to ``precision`` decimal places by stepping past the integer part."""
    divs, divd = abs(divisor), abs(dividend)
    quotient = float(abs(divide(dividend, divisor)))
    step = 0.1
    for _ in range(precision):
        candidate = quotient
        while candidate * divs < divd:
            quotient = candidate
            candidate += step
        step /= 10
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def odd_occurring_index(arr: Sequence[int]) -> int:
    """Index of the single element not part of an adjacent equal pair."""
    if not arr:
        raise ValueError("empty sequence has no odd-occurring element")
    start, end = 0, len(arr) - 1
    while start <= end:
        if start == end:
            return start
        mid = start + (end - start) // 2
        if mid % 2 == 0:
            if arr[mid] == arr[mid + 1]:
                start = mid + 2
            else:
                end = mid
        elif arr[mid] == arr[mid - 1]:
            start = mid + 1
        elif arr[mid] == arr[mid + 1]:
            end = mid - 1
        else:
            return mid
    return -1


def find_pivot(arr: Sequence[int]) -> int:
    """Index of the largest element of a rotated sorted array, or -1 when empty."""
    start, end = 0, len(arr) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if start == end:
            return start
        if arr[mid] > arr[mid + 1]:
            return mid
        if mid > 0 and arr[mid - 1] > arr[mid]:
            return mid - 1
        if arr[mid] >= arr[start]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted array of distinct values, or -1."""
    pivot = find_pivot(nums)
    if pivot == -1:
        return -1
    if nums[0] <= target <= nums[pivot]:
        return _search_range(nums, 0, pivot, target)
    return _search_range(nums, pivot + 1, len(nums) - 1, target)