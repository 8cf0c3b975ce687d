"""String algorithms: windows, bracket checks, generated strings and filters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import islice, pairwise, product

_HAPPY_ALPHABET = "abc"
_MAX_DI_PATTERN = 8


def min_window(s: str, pattern: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``pattern``.

    Characters count with multiplicity. Returns ``""`` when there is no such
    substring or when ``pattern`` is empty.
    """
    if not pattern or len(pattern) > len(s):
        return ""
    need = Counter(pattern)
    missing = len(pattern)
    best_start = 0
    best_size: int | None = None
    left = 0
    for right, char in enumerate(s):
        if need[char] > 0:
            missing -= 1
        need[char] -= 1
        while missing == 0:
            size = right - left + 1
            if best_size is None or size < best_size:
                best_start, best_size = left, size
            dropped = s[left]
            need[dropped] += 1
            if need[dropped] > 0:
                missing += 1
            left += 1
    if best_size is None:
        return ""
    return s[best_start : best_start + best_size]


def check_valid_string(s: str) -> bool:
    """Return whether ``s`` can be balanced, each ``*`` being ``(``, ``)`` or empty."""
    balance = 0
    for char in s:
        balance += 1 if char in "(*" else -1
        if balance < 0:
            return False
    balance = 0
    for char in reversed(s):
        balance += 1 if char in ")*" else -1
        if balance < 0:
            return False
    return True


def _happy_strings(n: int):
    for letters in product(_HAPPY_ALPHABET, repeat=n):
        if all(a != b for a, b in pairwise(letters)):
            yield "".join(letters)


def happy_string(n: int, k: int) -> str:
    """Return the ``k``-th (1-based) happy string of length ``n`` in lexicographic order.

    A happy string uses only ``a``, ``b`` and ``c`` with no two equal neighbours.
    Returns ``""`` when there are fewer than ``k`` such strings.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if n < 0:
        raise ValueError("n must not be negative")
    return next(islice(_happy_strings(n), k - 1, None), "")


def find_different_binary_string(nums: Sequence[str]) -> str:
    """Return a binary string of length ``len(nums)`` that is not in ``nums``."""
    return "".join("1" if row[i] == "0" else "0" for i, row in enumerate(nums))


def smallest_number(pattern: str) -> str:
    """Return the smallest digit string from 1-9, used once each, following ``pattern``.

    ``I`` means the next digit is larger, ``D`` that it is smaller.
    """
    if len(pattern) > _MAX_DI_PATTERN:
        raise ValueError(f"pattern may have at most {_MAX_DI_PATTERN} characters")
    digits: list[str] = []
    pending: list[str] = []
    for position in range(len(pattern) + 1):
        pending.append(str(position + 1))
        if position == len(pattern) or pattern[position] == "I":
            digits.extend(reversed(pending))
            pending.clear()
    return "".join(digits)


def clear_digits(s: str) -> str:
    """Remove each digit together with the nearest non-digit to its left."""
    kept: list[str] = []
    for char in s:
        if "0" <= char <= "9":
            if kept:
                kept.pop()
        else:
            kept.append(char)
    return "".join(kept)