"""Comparison sorts: selection, bubble, insertion, merge and quick sort.

Every function leaves its argument untouched and returns a new sorted list.
"""

from __future__ import annotations

from typing import Sequence


def selection_sort(arr: Sequence[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(arr)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort(arr: Sequence[int]) -> list[int]:
    """Sort by swapping neighbours, stopping early once a pass makes no swap."""
    items = list(arr)
    for i in range(len(items) - 1):
        swapped = False
        for j in range(len(items) - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(arr: Sequence[int]) -> list[int]:
    """Sort by shifting larger elements right and dropping each value into its gap."""
    items = list(arr)
    for i in range(1, len(items)):
        value = items[i]
        j = i - 1
        while j >= 0 and items[j] > value:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(arr: Sequence[int]) -> list[int]:
    """Split in halves, sort each half and merge the two sorted halves."""
    items = list(arr)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], start: int, end: int) -> int:
    """Place ``items[start]`` at its sorted position within ``start..end``."""
    pivot = items[start]
    count = sum(1 for value in items[start + 1:end + 1] if value <= pivot)
    p = start + count
    items[start], items[p] = items[p], items[start]

    i, j = start, end
    while i < p < j:
        while i < p and items[i] <= pivot:
            i += 1
        while j > p and items[j] > pivot:
            j -= 1
        if i < p < j:
            items[i], items[j] = items[j], items[i]
    return p


def _quick_sort(items: list[int], start: int, end: int) -> None:
    if start >= end:
        return
    p = _partition(items, start, end)
    _quick_sort(items, start, p - 1)
    _quick_sort(items, p + 1, end)


def quick_sort(arr: Sequence[int]) -> list[int]:
    """Partition around the first element, then sort both sides."""
    items = list(arr)
    _quick_sort(items, 0, len(items) - 1)
    return items