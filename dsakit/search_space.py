"""Searching on answers: pair counting, nearest elements and allocation problems."""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence


def k_diff_pairs(nums: Sequence[int], k: int) -> int:
    """Number of distinct pairs ``(a, b)`` from ``nums`` with ``b - a == k``, by two pointers."""
    if k < 0:
        raise ValueError(f"difference must be non-negative, got {k}")
    values = sorted(nums)
    pairs: set[tuple[int, int]] = set()
    i, j = 0, 1
    while j < len(values):
        diff = values[j] - values[i]
        if diff == k:
            pairs.add((values[i], values[j]))
            i += 1
            j += 1
        elif diff > k:
            i += 1
        else:
            j += 1
        if i == j:
            j += 1
    return len(pairs)


def k_diff_pairs_binary(nums: Sequence[int], k: int) -> int:
    """Same count as :func:`k_diff_pairs`, searching each partner by bisection."""
    if k < 0:
        raise ValueError(f"difference must be non-negative, got {k}")
    values = sorted(nums)
    pairs: set[tuple[int, int]] = set()
    for i, value in enumerate(values):
        wanted = value + k
        pos = bisect_left(values, wanted, lo=i + 1)
        if pos < len(values) and values[pos] == wanted:
            pairs.add((value, wanted))
    return len(pairs)


def closest_elements(arr: Sequence[int], k: int, x: int) -> list[int]:
    """The ``k`` contiguous elements of sorted ``arr`` closest to ``x``.

    The window shrinks from the end farther from ``x``; on a tie the lower end goes.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    start, end = 0, len(arr) - 1
    while end - start >= k:
        if arr[end] - x > x - arr[start]:
            end -= 1
        else:
            start += 1
    return list(arr[start:end + 1])


def lower_bound(arr: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``arr``, else of the last element below it, else -1."""
    start, end = 0, len(arr) - 1
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer


def _bisect_range(arr: Sequence[int], start: int, end: int, target: int) -> int:
    while start <= end:
        mid = start + (end - start) // 2
        value = arr[mid]
        if value == target:
            return mid
        if value > target:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def exponential_search(arr: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``arr`` found by doubling then bisecting, or -1."""
    if not arr:
        return -1
    if arr[0] == target:
        return 0
    last = len(arr) - 1
    i = 1
    while i <= last and arr[i] <= target:
        i <<= 1
    return _bisect_range(arr, i // 2, min(last, i), target)


class _Unbounded:
    """Reads an indexable sequence, treating positions past its end as infinitely large."""

    def __init__(self, source) -> None:
        self._source = source

    def __getitem__(self, index: int) -> float:
        try:
            return self._source[index]
        except IndexError:
            return float("inf")


def unbounded_search(arr, target: int) -> int:
    """Index of ``target`` in a sorted sequence of unknown length, or -1.

    ``arr`` needs only ``__getitem__``; an IndexError marks the end of the data.
    """
    view = _Unbounded(arr)
    if view[0] == target:
        return 0
    i = 1
    while view[i] < target:
        i <<= 1
    return _bisect_range(view, i // 2, i, target)


def _fits(values: Sequence[int], limit: int, parts: int) -> bool:
    """Whether ``values`` split into at most ``parts`` runs each summing to ``limit`` or less."""
    used = 1
    running = 0
    for value in values:
        if value > limit:
            return False
        if running + value > limit:
            used += 1
            running = value
            if used > parts:
                return False
        else:
            running += value
    return True


def _min_largest_run(values: Sequence[int], parts: int) -> int:
    start, end = 0, sum(values)
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if _fits(values, mid, parts):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def allocate_pages(pages: Sequence[int], students: int) -> int:
    """Least possible maximum of pages read by one student; -1 when books are too few."""
    if students < 1:
        raise ValueError(f"need at least one student, got {students}")
    if students > len(pages):
        return -1
    return _min_largest_run(pages, students)


def painters_partition(boards: Sequence[int], painters: int) -> int:
    """Least possible maximum length painted by one painter over contiguous boards."""
    if painters < 1:
        raise ValueError(f"need at least one painter, got {painters}")
    return _min_largest_run(boards, painters)


def _can_place_cows(stalls: Sequence[int], cows: int, gap: int) -> bool:
    placed = 1
    position = stalls[0]
    for stall in stalls[1:]:
        if placed >= cows:
            break
        if stall - position >= gap:
            placed += 1
            position = stall
    return placed >= cows


def aggressive_cows(stalls: Sequence[int], cows: int) -> int:
    """Largest minimum distance between ``cows`` placed in ``stalls``; -1 when they do not fit."""
    if cows < 1:
        raise ValueError(f"need at least one cow, got {cows}")
    if not stalls:
        raise ValueError("no stalls given")
    positions = sorted(stalls)
    start, end = 0, positions[-1] - positions[0]
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if _can_place_cows(positions, cows, mid):
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer


def _wood_at(trees: Sequence[int], height: int) -> int:
    return sum(tree - height for tree in trees if tree > height)


def eko_saw_height(trees: Sequence[int], wood: int) -> int:
    """Highest saw height that still cuts at least ``wood``; -1 when no height does."""
    if wood <= 0:
        raise ValueError(f"wood required must be positive, got {wood}")
    i = 1
    while _wood_at(trees, i) >= wood:
        i *= 2
    start, end = i // 2, i
    answer = -1
    while start <= end:
        mid = start + ((end - start) >> 1)
        if _wood_at(trees, mid) >= wood:
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer


def _pratas_cooked(ranks: Sequence[int], pratas: int, limit: int) -> bool:
    remaining = pratas
    for rank in ranks:
        elapsed = 0
        batch = 1
        while remaining > 0 and elapsed + batch * rank <= limit:
            elapsed += batch * rank
            batch += 1
            remaining -= 1
        if remaining <= 0:
            return True
    return remaining <= 0


def prata_min_time(ranks: Sequence[int], pratas: int) -> int:
    """Least time for cooks of the given ranks to make ``pratas`` together.

    A cook of rank ``r`` needs ``r`` minutes for the first prata, ``2r`` for the
    second and so on.
    """
    if not ranks:
        raise ValueError("no cooks given")
    if any(rank <= 0 for rank in ranks):
        raise ValueError("cook ranks must be positive")
    if pratas < 0:
        raise ValueError(f"prata count must be non-negative, got {pratas}")
    start = 0
    end = (pratas * (pratas + 1) // 2) * max(ranks)
    answer = -1
    while start <= end:
        mid = start + ((end - start) >> 1)
        if _pratas_cooked(ranks, pratas, mid):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer