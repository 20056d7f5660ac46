"""Primality test and maximum subsequence sum algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Sequence


@dataclass(frozen=True)
class SubsequenceSum:
    """Bounds (inclusive) and total of a maximum subsequence sum."""

    start: int
    end: int
    total: int


def is_prime(n: int) -> bool:
    """Trial-division primality test; 0 and 1 count as prime."""
    if n < 0:
        raise ValueError("n must be non-negative")
    limit = math.floor(math.sqrt(n) + 0.5)
    return all(n % divisor for divisor in range(2, limit + 1))


def format_array(values: Iterable[object]) -> str:
    """Join values with single spaces."""
    return " ".join(str(value) for value in values)


def max_subsequence_sum_cubic(values: Sequence[int]) -> SubsequenceSum:
    """Maximum subsequence sum by checking every pair of bounds.

    Pairs with ``end < start`` count as the empty sum 0.
    """
    best = SubsequenceSum(0, 0, -1)
    n = len(values)
    for start in range(n):
        for end in range(n):
            total = sum(values[start : end + 1])
            if total > best.total:
                best = SubsequenceSum(start, end, total)
    return best


def max_subsequence_sum_quadratic(values: Sequence[int]) -> SubsequenceSum:
    """Maximum subsequence sum with running sums from each start."""
    best = SubsequenceSum(0, 0, -1)
    for start in range(len(values)):
        for end, total in enumerate(accumulate(values[start:]), start):
            if total > best.total:
                best = SubsequenceSum(start, end, total)
    return best


def max_subsequence_sum_linear(values: Sequence[int]) -> SubsequenceSum:
    """Maximum subsequence sum in a single pass."""
    best = SubsequenceSum(0, 0, -1)
    total = 0
    start = 0
    for index, value in enumerate(values):
        total += value
        if total > best.total:
            best = SubsequenceSum(start, index, total)
        if total < 0:
            start = index + 1
            total = 0
    return best