"""Small number-theory helpers: prime counting and powers of three."""

from __future__ import annotations


def count_primes(n: int) -> int:
    """Return how many primes are at most ``n``; for ``n == 2`` this returns 0."""
    if n == 2 or n < 2:
        return 0
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, int(n**0.5) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return sum(sieve)


def is_power_of_three(n: int) -> bool:
    """Return whether ``n`` equals ``3**k`` for some ``k >= 0``."""
    if n <= 0:
        return False
    while n > 1:
        n, remainder = divmod(n, 3)
        if remainder:
            return False
    return True


def is_sum_of_powers_of_three(n: int) -> bool:
    """Return whether ``n`` is a sum of distinct powers of three."""
    while n > 0:
        n, remainder = divmod(n, 3)
        if remainder == 2:
            return False
    return True