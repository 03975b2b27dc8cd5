"""Compact and decorative number patterns.

Every function returns the pattern as a list of lines, without newlines.
"""

from __future__ import annotations

_BAND_WIDTH = 17
_BAND_MAX_ROWS = 9


def compact_numeric_hollow_half_pyramid(n: int) -> list[str]:
    """Unspaced outline of the half pyramid ``1``, ``12``, ``123`` ..."""
    lines = []
    for row in range(n):
        cells = (
            str(col + 1) if col in (0, row) or row == n - 1 else " "
            for col in range(row + 1)
        )
        lines.append("".join(cells))
    return lines


def numeric_hollow_inverted_half_pyramid(n: int) -> list[str]:
    """Unspaced outline of rows ``1..n``, ``2..n``, ... ``n``."""
    lines = []
    for row in range(n):
        cells = (
            str(col) if col == row + 1 or row == 0 or col == n else " "
            for col in range(row + 1, n + 1)
        )
        lines.append("".join(cells))
    return lines


def compact_palindrome_pyramid(n: int) -> list[str]:
    """Centred rows ``1``, ``121``, ``12321`` ... indented by ``n - row``."""
    lines = []
    for row in range(n):
        rising = "".join(str(col + 1) for col in range(row + 1))
        falling = "".join(str(col) for col in range(row, 0, -1))
        lines.append(" " * (n - row) + rising + falling)
    return lines


def solid_half_diamond(n: int) -> list[str]:
    """Stars growing to ``n`` and shrinking back, ``2n - 1`` lines."""
    return [
        "*" * (row + 1 if row < n else 2 * n - 1 - row) for row in range(2 * n - 1)
    ]


def star_number_band(n: int) -> list[str]:
    """A 17-wide band of stars with row ``r`` holding ``r+1`` copies of ``r+1``.

    Raises ValueError when ``n`` is larger than 9, as the band has no room.
    """
    if n > _BAND_MAX_ROWS:
        raise ValueError(f"star_number_band supports at most {_BAND_MAX_ROWS} rows")
    lines = []
    for row in range(n):
        cells = ["*"] * _BAND_WIDTH
        start = 8 - row
        for position in range(start, start + 2 * (row + 1), 2):
            cells[position] = str(row + 1)
        lines.append("".join(cells))
    return lines


def counting_diamond(n: int) -> list[str]:
    """Consecutive numbers joined by ``*`` in a triangle, then mirrored."""
    upper = []
    counter = 1
    for row in range(n):
        values = range(counter, counter + row + 1)
        counter += row + 1
        upper.append("*".join(str(v) for v in values))

    lower = []
    start = counter - n
    for row in range(n):
        width = n - row
        lower.append("*".join(str(start + col) for col in range(width)))
        start -= width - 1
    return upper + lower


def bordered_palindrome_diamond(n: int) -> list[str]:
    """Star-bordered rows ``*1*``, ``*121*`` ... rising to the middle and falling."""
    lines = ["*"]
    for row in range(n):
        cond = 2 * row if row <= n // 2 else 2 * (n - row - 1)
        digits = "".join(
            str(col + 1) if col <= cond // 2 else str(cond - col + 1)
            for col in range(cond + 1)
        )
        lines.append("*" + digits + "*")
    lines.append("*")
    return lines


def floyds_triangle(n: int) -> list[str]:
    """Consecutive integers from 1 laid out one more per row."""
    lines = []
    number = 1
    for row in range(n):
        values = range(number, number + row + 1)
        number += row + 1
        lines.append("".join(f"{v} " for v in values))
    return lines


def pascals_triangle(n: int) -> list[str]:
    """The first ``n`` rows of Pascal's triangle."""
    lines = []
    for row in range(1, n + 1):
        coefficient = 1
        cells = []
        for col in range(1, row + 1):
            cells.append(f"{coefficient} ")
            coefficient = coefficient * (row - col) // col
        lines.append("".join(cells))
    return lines


def butterfly(n: int) -> list[str]:
    """Two star wings meeting in the middle, ``2n`` lines of width ``2n``."""
    upper = [
        "*" * (i + 1) + " " * (2 * (n - 1 - i)) + "*" * (i + 1) for i in range(n)
    ]
    lower = ["*" * (n - i) + " " * (2 * i) + "*" * (n - i) for i in range(n)]
    return upper + lower