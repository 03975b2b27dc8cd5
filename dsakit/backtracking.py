"""Backtracking: permutations, maze paths, N queens and balanced parentheses."""

from __future__ import annotations

from typing import Sequence

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def permutations(s: str) -> list[str]:
    """Every arrangement of ``s`` in the order produced by swapping each position in turn."""
    chars = list(s)
    result: list[str] = []

    def place(i: int) -> None:
        if i >= len(chars):
            result.append("".join(chars))
            return
        for j in range(i, len(chars)):
            chars[i], chars[j] = chars[j], chars[i]
            place(i + 1)
            chars[i], chars[j] = chars[j], chars[i]

    place(0)
    return result


def maze_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Routes through open cells (1) from the top-left to the bottom-right corner.

    Each route is a string of moves D, L, R and U; no cell is visited twice.
    Directions are tried in that order.
    """
    if not maze or not maze[0] or maze[0][0] == 0:
        return []
    rows, cols = len(maze), len(maze[0])
    visited = {(0, 0)}
    route: list[str] = []
    paths: list[str] = []

    def walk(i: int, j: int) -> None:
        if (i, j) == (rows - 1, cols - 1):
            paths.append("".join(route))
            return
        for letter, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if (
                0 <= ni < rows
                and 0 <= nj < cols
                and maze[ni][nj] == 1
                and (ni, nj) not in visited
            ):
                visited.add((ni, nj))
                route.append(letter)
                walk(ni, nj)
                route.pop()
                visited.discard((ni, nj))

    walk(0, 0)
    return paths


def n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, filled column by column.

    A board is a list of rows where 'Q' marks a queen and '-' an empty square.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    board = [["-"] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col >= n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            diagonal, anti = n - 1 + col - row, row + col
            if row in used_rows or diagonal in used_diagonals or anti in used_anti_diagonals:
                continue
            board[row][col] = "Q"
            used_rows.add(row)
            used_diagonals.add(diagonal)
            used_anti_diagonals.add(anti)
            place(col + 1)
            board[row][col] = "-"
            used_rows.discard(row)
            used_diagonals.discard(diagonal)
            used_anti_diagonals.discard(anti)

    place(0)
    return solutions


def generate_parentheses(n: int) -> list[str]:
    """Every balanced string of ``n`` pairs of parentheses, opening brackets tried first."""
    if n < 0:
        raise ValueError(f"pair count must be non-negative, got {n}")
    result: list[str] = []
    output: list[str] = []

    def extend(opened: int, closed: int) -> None:
        if opened == 0 and closed == 0:
            result.append("".join(output))
            return
        if opened > 0:
            output.append("(")
            extend(opened - 1, closed)
            output.pop()
        if closed > opened:
            output.append(")")
            extend(opened, closed - 1)
            output.pop()

    extend(n, n)
    return result