"""Selection sort, randomized quicksort and quickselect with array helpers."""

from __future__ import annotations

import argparse
import random
from typing import Any, MutableSequence, Protocol


class _RandomSource(Protocol):
    def random(self) -> float: ...


def _source(rng: _RandomSource | None) -> _RandomSource:
    return rng if rng is not None else random


def random_int(low: int, high: int, rng: _RandomSource | None = None) -> int:
    """Random integer in ``[low, high]``, rounded from a uniform float."""
    fraction = _source(rng).random()
    return int(fraction * (high - low) + low + 0.5)


def random_array(n: int, rng: _RandomSource | None = None) -> list[float]:
    """``n`` uniform floats in ``[0, 1]``."""
    source = _source(rng)
    return [source.random() for _ in range(n)]


def random_int_array(
    n: int, min_value: int = 0, max_value: int = 100, rng: _RandomSource | None = None
) -> list[float]:
    """``n`` whole-valued floats between ``min_value`` and ``max_value``."""
    return [float(random_int(min_value, max_value, rng)) for _ in range(n)]


def linspace(maximum: int, parts: int) -> list[int]:
    """Multiples of ``maximum / parts`` (integer division) from 1 to ``parts``."""
    step = abs(maximum) // parts
    if maximum < 0:
        step = -step
    return [step * i for i in range(1, parts + 1)]


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by repeated selection of the smallest."""
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def partition(
    values: MutableSequence[Any], lo: int, hi: int, rng: _RandomSource | None = None
) -> int:
    """Partition ``values[lo:hi + 1]`` around a random pivot; return its index."""
    pivot = random_int(lo, hi, rng)
    i, j = lo, hi
    while i < j:
        while i < pivot and values[i] <= values[pivot]:
            i += 1
        while j > pivot and values[j] >= values[pivot]:
            j -= 1
        values[i], values[j] = values[j], values[i]
        if i == pivot:
            pivot = j
        elif j == pivot:
            pivot = i
    return pivot


def quick_sort(values: MutableSequence[Any], rng: _RandomSource | None = None) -> None:
    """Sort ``values`` in place with randomized quicksort."""
    pending = [(0, len(values) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo < hi:
            pivot = partition(values, lo, hi, rng)
            pending.append((pivot + 1, hi))
            pending.append((lo, pivot - 1))


def k_smallest(values: MutableSequence[Any], k: int, rng: _RandomSource | None = None) -> Any:
    """Return the element at sorted position ``k`` (0-based); reorders ``values``."""
    if not 0 <= k < len(values):
        raise IndexError("k out of range")
    lo, hi = 0, len(values) - 1
    while True:
        pivot = partition(values, lo, hi, rng)
        if k == pivot:
            return values[pivot]
        if k < pivot:
            hi = pivot - 1
        else:
            lo = pivot + 1


def _format(value: float) -> str:
    return f"{value:g}"


def main(argv: list[str] | None = None) -> int:
    """Print a random integer array and its k-th smallest element."""
    parser = argparse.ArgumentParser(description="Select the k-th smallest of a random array.")
    parser.add_argument("-n", "--size", type=int, default=10)
    parser.add_argument("-k", type=int, default=2)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    values = random_int_array(args.size, 0, 100, rng)
    print(" ".join(_format(value) for value in values))
    print(_format(k_smallest(values, args.k, rng)))
    return 0