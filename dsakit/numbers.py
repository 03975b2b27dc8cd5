"""Small number utilities: digits, bits, number bases, primes and friends."""

from __future__ import annotations

from functools import reduce
from typing import Iterable

_PI_APPROX = 3.142


def _require_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} requires a non-negative number, got {n}")


def digits(n: int) -> list[int]:
    """Digits of ``n`` from the least significant one; negative numbers give negative digits."""
    sign = -1 if n < 0 else 1
    n = abs(n)
    result = []
    while n:
        n, digit = divmod(n, 10)
        result.append(sign * digit)
    return result


def digits_to_number(digits: Iterable[int]) -> int:
    """Combine digits, most significant first, into one number."""
    return reduce(lambda number, digit: number * 10 + digit, digits, 0)


def count_set_bits(n: int) -> int:
    """Number of 1 bits in the binary form of a non-negative ``n``."""
    _require_non_negative(n, "count_set_bits")
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def decimal_to_binary(n: int) -> int:
    """The binary form of ``n`` written as a decimal number, e.g. 5 -> 101."""
    _require_non_negative(n, "decimal_to_binary")
    result = 0
    place = 1
    while n:
        result += (n & 1) * place
        place *= 10
        n >>= 1
    return result


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as binary digits, e.g. 101 -> 5."""
    _require_non_negative(n, "binary_to_decimal")
    result = 0
    weight = 1
    while n:
        n, digit = divmod(n, 10)
        result += digit * weight
        weight *= 2
    return result


def area_of_circle(r: int) -> int:
    """Area of a circle of radius ``r`` with pi taken as 3.142, truncated to an int."""
    return int(_PI_APPROX * r * r)


def is_even(n: int) -> bool:
    """True when ``n`` is divisible by two."""
    return n % 2 == 0


def is_even_bitwise(n: int) -> bool:
    """True when the least significant bit of ``n`` is clear."""
    return (n & 1) == 0


def factorial(n: int) -> int:
    """Product of 1..n; 1 for ``n`` of zero or less."""
    return reduce(lambda acc, i: acc * i, range(1, n + 1), 1)


def is_prime(n: int) -> bool:
    """Trial division up to ``n // 2``.

    Numbers below 2 have no divisor in that range and are reported as prime.
    """
    return all(n % i for i in range(2, n // 2 + 1))


def primes_up_to(n: int) -> list[int]:
    """Every number in 1..n that :func:`is_prime` accepts, in order."""
    return [i for i in range(1, n + 1) if is_prime(i)]


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign."""
    number = abs(x)
    result = 0
    while number > 0:
        number, digit = divmod(number, 10)
        result = result * 10 + digit
    return -result if x < 0 else result


def set_kth_bit(n: int, k: int) -> int:
    """``n`` with bit ``k`` (counted from zero) set."""
    if k < 0:
        raise ValueError(f"bit index must be non-negative, got {k}")
    return n | (1 << k)