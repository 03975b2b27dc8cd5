"""Basic text patterns: pyramids, diamonds and rectangles.

Every function returns the pattern as a list of lines, without newlines.
Trailing spaces are kept exactly as the pattern lays them out.
"""

from __future__ import annotations


def _stars(count: int) -> str:
    return "* " * count


def _numbers(values) -> str:
    return "".join(f"{value} " for value in values)


def _outlined(width: int) -> str:
    """A run of ``width`` cells with a star at each end and blanks inside."""
    return "".join("*" if col in (0, width - 1) else " " for col in range(width))


def hollow_rectangle(n: int) -> list[str]:
    """An ``n`` by ``n`` square of stars with a blank interior."""
    lines = []
    for row in range(n):
        if row in (0, n - 1):
            lines.append(_stars(n))
        else:
            lines.append("* " + "  " * (n - 2) + "* ")
    return lines


def half_pyramid(n: int) -> list[str]:
    """Left-aligned triangle growing from one star to ``n`` stars."""
    return [_stars(row + 1) for row in range(n)]


def inverted_half_pyramid(n: int) -> list[str]:
    """Left-aligned triangle shrinking from ``n`` stars to one."""
    return [_stars(n - row) for row in range(n)]


def numeric_half_pyramid(n: int) -> list[str]:
    """Rows ``1``, ``1 2``, ... up to ``1 .. n``."""
    return [_numbers(range(1, row + 2)) for row in range(n)]


def inverted_numeric_half_pyramid(n: int) -> list[str]:
    """Rows ``1 .. n`` down to ``1``."""
    return [_numbers(range(1, n - row + 1)) for row in range(n)]


def full_pyramid(n: int) -> list[str]:
    """Centred triangle of spaced stars."""
    return [" " * (n - row - 1) + _stars(row + 1) for row in range(n)]


def inverted_full_pyramid(n: int) -> list[str]:
    """Centred triangle of spaced stars, point downwards."""
    return [" " * row + _stars(n - row) for row in range(n)]


def numeric_full_pyramid(n: int) -> list[str]:
    """Centred pyramid whose row ``r`` counts up from ``r+1`` to ``2r+1`` and back."""
    lines = []
    for row in range(n):
        rising = range(row + 1, 2 * row + 2)
        falling = range(2 * row, row, -1)
        lines.append("  " * (n - 1 - row) + _numbers(rising) + _numbers(falling))
    return lines


def solid_full_pyramid(n: int) -> list[str]:
    """Centred triangle of unspaced stars, ``2r+1`` on row ``r``."""
    return [" " * (n - 1 - row) + "*" * (2 * row + 1) for row in range(n)]


def hollow_full_pyramid(n: int) -> list[str]:
    """Outline of :func:`solid_full_pyramid` with a solid base."""
    lines = []
    for row in range(n):
        left, right = n - 1 - row, n - 1 + row
        cells = []
        for col in range(n + row):
            if col < left:
                cells.append(" ")
            elif col in (left, right) or row == n - 1:
                cells.append("*")
            else:
                cells.append(" ")
        lines.append("".join(cells))
    return lines


def hollow_inverted_half_pyramid(n: int) -> list[str]:
    """Outline of :func:`inverted_half_pyramid`."""
    lines = []
    for row in range(n):
        cells = (
            "* " if row == 0 or col == 0 or row == n - 1 - col else "  "
            for col in range(n - row)
        )
        lines.append("".join(cells))
    return lines


def solid_diamond(n: int) -> list[str]:
    """Full pyramid followed by its inverted mirror, ``2n`` lines in all."""
    upper = [" " * (n - 1 - row) + _stars(row + 1) for row in range(n)]
    lower = [" " * row + _stars(n - row) for row in range(n)]
    return upper + lower


def hollow_diamond(n: int) -> list[str]:
    """Outline of a diamond, ``2n`` lines tall."""
    upper = [" " * (n - 1 - row) + _outlined(2 * row + 1) for row in range(n)]
    lower = [" " * row + _outlined(2 * (n - row) - 1) for row in range(n)]
    return upper + lower


def flipped_solid_diamond(n: int) -> list[str]:
    """Stars surrounding a diamond-shaped hole."""
    upper = [
        "*" * (n - row) + " " * (2 * row + 1) + "*" * (n - row) for row in range(n)
    ]
    lower = [
        "*" * (row + 1) + " " * (2 * n - 2 * row - 1) + "*" * (row + 1)
        for row in range(n)
    ]
    return upper + lower


def fancy_number_pattern(n: int) -> list[str]:
    """Rows ``1``, ``2*2``, ``3*3*3`` ... up to ``n`` and back down."""
    upper = ["*".join([str(row + 1)] * (row + 1)) for row in range(n)]
    lower = ["*".join([str(n - row)] * (n - row)) for row in range(n)]
    return upper + lower


def alphabet_palindrome_pyramid(n: int) -> list[str]:
    """Rows ``A``, ``ABA``, ``ABCBA`` and so on."""
    lines = []
    for row in range(n):
        rising = "".join(chr(ord("A") + col) for col in range(row + 1))
        lines.append(rising + rising[-2::-1])
    return lines


def numeric_hollow_half_pyramid(n: int) -> list[str]:
    """Outline of :func:`numeric_half_pyramid`, spaced."""
    lines = []
    for row in range(n):
        cells = (
            f"{col + 1} " if row == n - 1 or col in (0, row) else "  "
            for col in range(row + 1)
        )
        lines.append("".join(cells))
    return lines


def numeric_palindrome_equilateral_pyramid(n: int) -> list[str]:
    """Centred rows ``1``, ``1 2 1``, ``1 2 3 2 1`` and so on."""
    return [
        "  " * (n - 1 - row) + _numbers(range(1, row + 2)) + _numbers(range(row, 0, -1))
        for row in range(n)
    ]


def numeric_hollow_pyramid(n: int) -> list[str]:
    """Centred hollow triangle with ``1`` on the left edge and ``r+1`` on the right."""
    lines = []
    for row in range(n):
        indent = " " * (n - 1 - row)
        if row == n - 1:
            lines.append(indent + _numbers(range(1, n + 1)))
            continue
        width = 2 * row + 1
        cells = []
        for col in range(width):
            if col == 0:
                cells.append("1")
            elif col == width - 1:
                cells.append(str(row + 1))
            else:
                cells.append(" ")
        lines.append(indent + "".join(cells))
    return lines