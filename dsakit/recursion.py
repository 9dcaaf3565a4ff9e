"""Factorials and Fibonacci numbers."""

from __future__ import annotations

from typing import Iterator


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError("Factorial of a negative number doesn't exist.")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("Fibonacci numbers are defined for n >= 0 only.")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> Iterator[int]:
    """Yield the first ``count`` Fibonacci numbers, starting from F(0)."""
    current, following = 0, 1
    for _ in range(count):
        yield current
        current, following = following, current + following