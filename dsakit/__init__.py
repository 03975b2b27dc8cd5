"""Classic algorithm routines: text patterns, numbers, arrays, strings, searching,
sorting, recursion and backtracking."""

__version__ = "0.1.0"