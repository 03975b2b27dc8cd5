import itertools
import math

import pytest

from dsakit.backtracking import (
    generate_parentheses,
    maze_paths,
    n_queens,
    permutations,
)

SOURCE_MAZE = [
    [1, 0, 0],
    [1, 1, 0],
    [1, 1, 1],
]

_STEPS = {"D": (1, 0), "L": (0, -1), "R": (0, 1), "U": (-1, 0)}


def _path_is_valid(maze, path):
    rows, cols = len(maze), len(maze[0])
    i = j = 0
    seen = {(0, 0)}
    for move in path:
        di, dj = _STEPS[move]
        i, j = i + di, j + dj
        if not (0 <= i < rows and 0 <= j < cols) or maze[i][j] != 1:
            return False
        if (i, j) in seen:
            return False
        seen.add((i, j))
    return (i, j) == (rows - 1, cols - 1)


def _queens_are_safe(board):
    queens = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell == "Q"]
    if len(queens) != len(board):
        return False
    rows = {r for r, _ in queens}
    cols = {c for _, c in queens}
    diag = {r - c for r, c in queens}
    anti = {r + c for r, c in queens}
    n = len(board)
    return len(rows) == len(cols) == len(diag) == len(anti) == n


def _balanced(text):
    depth = 0
    for char in text:
        depth += 1 if char == "(" else -1
        if depth < 0:
            return False
    return depth == 0


def test_permutations_source_order():
    assert permutations("abc") == ["abc", "acb", "bac", "bca", "cba", "cab"]


def test_permutations_match_every_arrangement():
    word = "abcd"
    result = permutations(word)
    assert result[0] == word
    assert len(result) == math.factorial(len(word))
    assert sorted(result) == sorted("".join(p) for p in itertools.permutations(word))


def test_permutations_of_empty_string():
    assert permutations("") == [""]


def test_maze_source_example():
    assert maze_paths(SOURCE_MAZE) == ["DDRR", "DRDR"]


def test_maze_paths_are_valid_and_distinct():
    maze = [
        [1, 1, 1],
        [1, 1, 1],
        [1, 0, 1],
    ]
    paths = maze_paths(maze)
    assert paths
    assert len(set(paths)) == len(paths)
    assert all(_path_is_valid(maze, path) for path in paths)


def test_maze_blocked_start_has_no_paths():
    assert maze_paths([[0, 1], [1, 1]]) == []


def test_maze_without_route():
    assert maze_paths([[1, 0], [0, 1]]) == []


def test_single_cell_maze_is_already_solved():
    assert maze_paths([[1]]) == [""]


def test_eight_queens_count():
    assert len(n_queens(8)) == 92


def test_four_queens_boards_are_safe_and_symmetric():
    boards = n_queens(4)
    assert boards
    assert all(_queens_are_safe(board) for board in boards)
    mirrored = [[row[::-1] for row in board] for board in boards]
    assert sorted(mirrored) == sorted(boards)


def test_small_queen_boards():
    assert n_queens(1) == [["Q"]]
    assert n_queens(2) == []
    assert n_queens(3) == []


def test_queens_negative_raises():
    with pytest.raises(ValueError):
        n_queens(-1)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_parentheses_are_balanced_unique_and_catalan(n):
    result = generate_parentheses(n)
    assert len(result) == math.comb(2 * n, n) // (n + 1)
    assert len(set(result)) == len(result)
    assert all(len(text) == 2 * n and _balanced(text) for text in result)
    assert result == sorted(result)


def test_parentheses_of_zero_pairs():
    assert generate_parentheses(0) == [""]


def test_parentheses_negative_raises():
    with pytest.raises(ValueError):
        generate_parentheses(-2)