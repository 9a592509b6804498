"""Number classification, GCD, Fibonacci numbers and prime sieving."""

from __future__ import annotations

import math
from functools import lru_cache, reduce
from typing import Iterable


def is_buzz(n: int) -> bool:
    """Return True if ``n`` is divisible by 7 or ends in the digit 7."""
    # A negative number never leaves a remainder of +7, so only positives can end in 7.
    return n % 7 == 0 or (n > 0 and n % 10 == 7)


def gcd_of(numbers: Iterable[int]) -> int:
    """Return the greatest common divisor of all the given numbers."""
    values = list(numbers)
    if not values:
        raise ValueError("gcd_of() needs at least one number")
    return reduce(math.gcd, values, 0)


def _digit_sum(n: int) -> int:
    return sum(int(digit) for digit in str(n))


def is_happy(n: int) -> bool:
    """Return True if repeatedly summing the digits of ``n`` ends at 1."""
    k = n
    while k > 9:
        k = _digit_sum(k)
    return k == 1


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n == 0:
        return 0
    if n <= 2:
        return 1
    if n % 2:
        k = (n + 1) // 2
        return _fib(k) ** 2 + _fib(k - 1) ** 2
    k = n // 2
    return (2 * _fib(k - 1) + _fib(k)) * _fib(k)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number using the fast-doubling identities."""
    if n < 0:
        raise ValueError("Fibonacci index must not be negative")
    return _fib(n)


def sieve(limit: int) -> list[int]:
    """Return every prime between 2 and ``limit`` inclusive, in ascending order."""
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    composite[0] = composite[1] = 1
    for i in range(2, math.isqrt(limit) + 1):
        if not composite[i]:
            multiples = range(i * i, limit + 1, i)
            composite[i * i :: i] = b"\x01" * len(multiples)
    return [i for i, flag in enumerate(composite) if not flag]


def prime_factorization(number: int) -> list[tuple[int, int]]:
    """Return the prime factors of ``number`` as ``(prime, exponent)`` pairs."""
    if number < 1:
        raise ValueError("only positive integers can be factorised")
    factors: list[tuple[int, int]] = []
    remaining = number
    for prime in sieve(number):
        if remaining == 1:
            break
        count = 0
        while remaining % prime == 0:
            remaining //= prime
            count += 1
        if count:
            factors.append((prime, count))
    return factors