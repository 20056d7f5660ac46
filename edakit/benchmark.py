"""Timing of nearest-neighbour search with and without k-means buckets."""

from __future__ import annotations

import argparse
import heapq
import sys
from dataclasses import dataclass
from time import perf_counter
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from edakit.cluster import Cluster
from edakit.matrix import Matrix

DEFAULT_KS = (0, 8, 16, 32, 64, 128)
DEFAULT_MS = (16, 32, 64, 128)


@dataclass(frozen=True)
class BenchmarkResult:
    """Averages over all queries for one number of clusters and one ``m``."""

    k: int
    m: int
    avg_comparisons: float
    avg_time_no_sort_ms: float
    avg_time_with_sort_ms: float

    @property
    def error_ms(self) -> float:
        """Time spent sorting: the difference between the two averages."""
        return self.avg_time_with_sort_ms - self.avg_time_no_sort_ms

    def __str__(self) -> str:
        return (
            f"#comparisons (k={self.k}, m={self.m}): {self.avg_comparisons:g}"
            f" | Without sorting: {self.avg_time_no_sort_ms:.3f} ms"
            f" | With sorting: {self.avg_time_with_sort_ms:.3f} ms"
            f" | Error (with - without): {self.error_ms:.3f} ms"
        )


def l2_squared(a: ArrayLike, b: ArrayLike) -> float:
    """Squared Euclidean distance."""
    diff = np.asarray(a, dtype=np.float32) - np.asarray(b, dtype=np.float32)
    return float(np.dot(diff.ravel(), diff.ravel()))


def candidates(
    data: Matrix,
    query_index: int,
    buckets: Sequence[Sequence[int]],
    centroids: Sequence[ArrayLike],
    m: int,
    exclude_self: bool = True,
) -> list[int]:
    """Rows to compare against the query row.

    Without buckets every row is a candidate. Otherwise buckets are taken
    nearest centroid first until at least ``m`` rows are gathered, topped up
    from the start of the data when the buckets do not hold enough.
    """

    def keep(index: int) -> bool:
        return not (exclude_self and index == query_index)

    if not buckets:
        return [i for i in range(data.n) if keep(i)]

    query = data.row(query_index)
    order = sorted(
        (j for j, bucket in enumerate(buckets) if bucket),
        key=lambda j: l2_squared(query, centroids[j]),
    )
    chosen: list[int] = []
    for j in order:
        chosen.extend(i for i in buckets[j] if keep(i))
        if len(chosen) >= m:
            break
    if len(chosen) < m:
        for i in range(data.n):
            if len(chosen) >= m:
                break
            if keep(i):
                chosen.append(i)
    return chosen


def run_benchmark(
    data: Matrix,
    ks: Sequence[int] = DEFAULT_KS,
    ms: Sequence[int] = DEFAULT_MS,
    exclude_self: bool = True,
    rng: np.random.Generator | None = None,
) -> list[BenchmarkResult]:
    """Time the search of every row's neighbours for each ``k`` and ``m``."""
    n, dim = data.n, data.dim
    if n == 0 or dim == 0:
        raise ValueError("the dataset is empty")
    points = data.data
    results: list[BenchmarkResult] = []
    for k in ks:
        buckets: list[list[int]] = []
        centroids: list[np.ndarray] = []
        if k > 0:
            clustering = Cluster(data, k)
            clustering.apply(rng)
            buckets = [clustering.indices(c) for c in range(k)]
            centroids = [
                points[bucket].mean(axis=0) if bucket else np.zeros(dim, dtype=np.float32)
                for bucket in buckets
            ]
        for m in ms:
            comparisons = 0
            time_dist = 0.0
            time_sort = 0.0
            for q in range(n):
                chosen = candidates(data, q, buckets, centroids, m, exclude_self)
                comparisons += len(chosen)
                query = points[q]

                start = perf_counter()
                diff = points[chosen] - query
                pairs = list(zip((diff * diff).sum(axis=1).tolist(), chosen))
                time_dist += (perf_counter() - start) * 1000.0

                start = perf_counter()
                heapq.nsmallest(min(m, len(pairs)), pairs)
                time_sort += (perf_counter() - start) * 1000.0
            results.append(
                BenchmarkResult(
                    k=k,
                    m=m,
                    avg_comparisons=comparisons / n,
                    avg_time_no_sort_ms=time_dist / n,
                    avg_time_with_sort_ms=(time_dist + time_sort) / n,
                )
            )
    return results


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark on a ``.npy`` dataset and print one line per setting."""
    parser = argparse.ArgumentParser(description="Benchmark clustered neighbour search.")
    parser.add_argument("path", nargs="?", default="../data_eda.npy")
    parser.add_argument("--ks", type=int, nargs="+", default=list(DEFAULT_KS))
    parser.add_argument("--ms", type=int, nargs="+", default=list(DEFAULT_MS))
    parser.add_argument("--include-self", action="store_true")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        data = Matrix.from_npy(args.path)
    except (OSError, ValueError):
        data = Matrix()
    if data.n == 0 or data.dim == 0:
        print(f"Could not load the dataset: {args.path}", file=sys.stderr)
        return 1
    rng = np.random.default_rng(args.seed)
    for result in run_benchmark(data, args.ks, args.ms, not args.include_self, rng):
        print(result)
    return 0