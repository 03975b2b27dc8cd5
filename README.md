# dsakit

Classic data-structure and algorithm routines as plain Python functions, with
no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `dsakit.patterns_basic` | Star, number and letter pyramids, diamonds and a hollow rectangle |
| `dsakit.patterns_fancy` | Floyd's and Pascal's triangles, butterfly, half diamond, star-number band, counting and bordered diamonds |
| `dsakit.numbers` | Digits, set bits, binary/decimal conversion, area of a circle, even/odd, factorial, primes, integer reversal, setting a bit |
| `dsakit.arrays` | Linear search, zero/one counts, extremes, unique element, union/intersection, pair and triplet sums, 0/1 sort, matrix helpers |
| `dsakit.strings` | Last occurrence, reversal, palindromes, adding digit strings, substring and adjacent-duplicate removal, upper-casing |
| `dsakit.array_problems` | Sort colours, negatives first, duplicates, missing numbers, first repeat, common elements, wave and spiral order, digit-list addition, factorial digits |
| `dsakit.searching` | Binary search, first/last occurrence and count, peak, integer and stepped square root, 2-D search, nearly sorted search, division, odd-occurring element, rotated arrays |
| `dsakit.sorting` | Selection, bubble, insertion, merge and quick sort |
| `dsakit.search_space` | K-diff pairs, closest elements, lower bound, exponential and unbounded search, book allocation, painter's partition, aggressive cows, EKO, PRATA |
| `dsakit.recursion` | Subarrays, stock profit, house robber, number to words, wildcard matching, perfect squares, ticket costs, dice rolls |
| `dsakit.backtracking` | String permutations, maze paths, N queens, balanced parentheses |

## Examples

```python
from dsakit.patterns_fancy import pascals_triangle
from dsakit.searching import binary_search, search_rotated
from dsakit.sorting import merge_sort
from dsakit.search_space import allocate_pages
from dsakit.recursion import number_to_words
from dsakit.backtracking import generate_parentheses, n_queens

print("\n".join(pascals_triangle(4)))
print(binary_search([2, 4, 6, 8, 10], 8))          # 3
print(search_rotated([8, 9, 10, 2, 4, 6], 4))      # 4
print(merge_sort([4, 5, 13, 2, 12]))               # [2, 4, 5, 12, 13]
print(allocate_pages([12, 34, 67, 90], 2))         # 113
print(number_to_words(1234567890))
print(generate_parentheses(3))
print(len(n_queens(4)))                            # 2
```

## Conventions

- Pattern functions return a list of lines without newline characters; trailing
  spaces that belong to the layout are kept. Join them with `"\n"` to print.
- Sorting and rearranging functions return a new list and leave their argument
  untouched.
- Index-returning searches give `-1` when nothing is found; `search_2d` returns
  a `(row, col)` tuple or `None`.
- Invalid input, such as a negative count or values outside the range a problem
  requires, raises `ValueError` (`divide` raises `ZeroDivisionError` for a zero
  divisor).

## What it does not do

dsakit is a library only: it has no command-line tool and reads no input of its
own. Call its functions from your own code.