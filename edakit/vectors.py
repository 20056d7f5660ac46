"""Small vector helpers used by the clustering code."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike


def _pair(u: ArrayLike, v: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    a = np.asarray(u, dtype=np.float32).ravel()
    b = np.asarray(v, dtype=np.float32).ravel()
    if a.shape != b.shape:
        raise ValueError(f"vectors differ in length: {a.size} and {b.size}")
    return a, b


def euclidean_distance(u: ArrayLike, v: ArrayLike) -> float:
    """Euclidean (L2) distance between two vectors of equal length."""
    a, b = _pair(u, v)
    diff = a - b
    return float(np.sqrt(np.dot(diff, diff)))


def mean_abs_difference(u: ArrayLike, v: ArrayLike) -> float:
    """Mean of the element-wise absolute differences of two vectors."""
    a, b = _pair(u, v)
    if a.size == 0:
        raise ValueError("vectors must not be empty")
    return float(np.abs(a - b).sum() / a.size)


def argsort(values: Sequence[float]) -> list[int]:
    """Indices that order ``values`` ascending; equal values keep their order."""
    items = list(values)
    return sorted(range(len(items)), key=items.__getitem__)