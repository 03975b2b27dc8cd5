"""Recursive problems: subarrays, stock profit, robbery, words, wildcards and counting."""

from __future__ import annotations

from bisect import bisect_right
from functools import lru_cache
from math import isqrt
from typing import Sequence

_NUMBER_WORDS: tuple[tuple[int, str], ...] = (
    (1_000_000_000, "Billion"),
    (1_000_000, "Million"),
    (1000, "Thousand"),
    (100, "Hundred"),
    (90, "Ninety"),
    (80, "Eighty"),
    (70, "Seventy"),
    (60, "Sixty"),
    (50, "Fifty"),
    (40, "Forty"),
    (30, "Thirty"),
    (20, "Twenty"),
    (19, "Nineteen"),
    (18, "Eighteen"),
    (17, "Seventeen"),
    (16, "Sixteen"),
    (15, "Fifteen"),
    (14, "Fourteen"),
    (13, "Thirteen"),
    (12, "Twelve"),
    (11, "Eleven"),
    (10, "Ten"),
    (9, "Nine"),
    (8, "Eight"),
    (7, "Seven"),
    (6, "Six"),
    (5, "Five"),
    (4, "Four"),
    (3, "Three"),
    (2, "Two"),
    (1, "One"),
)

_PASS_LENGTHS = (1, 7, 30)


def subarrays(nums: Sequence[int]) -> list[list[int]]:
    """Every contiguous subarray, grouped by start index and growing in length."""
    items = list(nums)
    return [
        items[start:end + 1]
        for start in range(len(items))
        for end in range(start, len(items))
    ]


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 when prices only fall."""
    if not prices:
        raise ValueError("no prices given")
    lowest = prices[0]
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_recursive(prices: Sequence[int]) -> int:
    """Same result as :func:`max_profit`, walking the days recursively."""
    if not prices:
        raise ValueError("no prices given")

    def step(day: int, lowest: int, best: int) -> int:
        if day == len(prices):
            return best
        lowest = min(lowest, prices[day])
        return step(day + 1, lowest, max(best, prices[day] - lowest))

    return step(0, prices[0], 0)


def rob(nums: Sequence[int]) -> int:
    """Largest sum of houses that can be robbed without taking two neighbours."""
    after_next = after = 0
    for value in reversed(nums):
        after_next, after = after, max(value + after_next, after)
    return after


def _words(num: int) -> str:
    value, word = next((v, w) for v, w in _NUMBER_WORDS if num >= v)
    parts = []
    if num >= 100:
        parts.append(_words(num // value))
    parts.append(word)
    rest = num % value
    if rest:
        parts.append(_words(rest))
    return " ".join(parts)


def number_to_words(num: int) -> str:
    """English words for a non-negative integer, e.g. 123 -> 'One Hundred Twenty Three'."""
    if num < 0:
        raise ValueError(f"number must be non-negative, got {num}")
    if num == 0:
        return "Zero"
    return _words(num)


def wildcard_match(s: str, p: str) -> bool:
    """Whether pattern ``p`` matches all of ``s``; '?' is one character, '*' any run."""

    @lru_cache(maxsize=None)
    def match(si: int, pi: int) -> bool:
        if si == len(s):
            return all(char == "*" for char in p[pi:])
        if pi == len(p):
            return False
        if s[si] == p[pi] or p[pi] == "?":
            return match(si + 1, pi + 1)
        if p[pi] == "*":
            return match(si, pi + 1) or match(si + 1, pi)
        return False

    return match(0, 0)


def num_squares(n: int) -> int:
    """Fewest perfect squares that add up to ``n``; 0 for ``n`` of zero."""
    if n < 0:
        raise ValueError(f"number must be non-negative, got {n}")
    best = [0] * (n + 1)
    for m in range(1, n + 1):
        best[m] = 1 + min(best[m - root * root] for root in range(1, isqrt(m) + 1))
    return best[n]


def min_cost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest cover of the sorted travel ``days`` with 1, 7 and 30 day passes.

    ``costs`` holds the prices of the three passes in that order.
    """
    if len(costs) != len(_PASS_LENGTHS):
        raise ValueError("costs must give the prices of the 1, 7 and 30 day passes")
    cheapest = [0] * (len(days) + 1)
    for i in range(len(days) - 1, -1, -1):
        cheapest[i] = min(
            cost + cheapest[bisect_right(days, days[i] + length - 1, lo=i)]
            for cost, length in zip(costs, _PASS_LENGTHS)
        )
    return cheapest[0]


def num_rolls_to_target(n: int, k: int, target: int) -> int:
    """Ways for ``n`` dice with faces 1..k to add up to ``target``."""
    if n < 0:
        raise ValueError(f"dice count must be non-negative, got {n}")
    if k < 1:
        raise ValueError(f"dice need at least one face, got {k}")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for _ in range(n):
        ways = [
            sum(ways[total - face] for face in range(1, k + 1) if total - face >= 0)
            for total in range(target + 1)
        ]
    return ways[target]