"""K-means clustering of the rows of a matrix."""

from __future__ import annotations

import numpy as np

from edakit.matrix import Matrix
from edakit.vectors import mean_abs_difference

EPSILON = 0.001
MAX_ITERATIONS = 10


class Cluster:
    """Groups the rows of ``data`` around ``k`` centroids."""

    def __init__(self, data: Matrix, k: int = 8) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.data = data
        self.k = k
        self.centroids = Matrix(k, data.dim)
        self._indices: list[list[int]] = [[] for _ in range(k)]

    def compute_clusters(self) -> None:
        """Assign every row to its nearest centroid (first one on ties)."""
        self._indices = [[] for _ in range(self.k)]
        points = self.data.data
        if len(points) == 0:
            return
        distances = np.empty((len(points), self.k), dtype=np.float32)
        for j, centroid in enumerate(self.centroids.data):
            diff = points - centroid
            distances[:, j] = np.sqrt((diff * diff).sum(axis=1))
        for i, best in enumerate(distances.argmin(axis=1)):
            self._indices[best].append(i)

    def update_centroids(self) -> None:
        """Move each non-empty cluster's centroid to the mean of its members."""
        for j, members in enumerate(self._indices):
            if members:
                self.centroids.set_row(j, self.data.data[members].mean(axis=0))

    def apply(self, rng: np.random.Generator | None = None) -> int:
        """Run k-means from random centroids; return the iterations used."""
        self.centroids.randomize(rng)
        difference = 1000.0
        iterations = 0
        while difference > EPSILON and iterations < MAX_ITERATIONS:
            previous = self.centroids.data.copy()
            self.compute_clusters()
            self.update_centroids()
            difference = mean_abs_difference(previous, self.centroids.data)
            iterations += 1
        return iterations

    def centroid(self, index: int) -> np.ndarray:
        """Read-only view of centroid ``index``."""
        return self.centroids.row(index)

    def indices(self, index: int) -> list[int]:
        """Row indices assigned to cluster ``index``."""
        return list(self._indices[index])

    def __str__(self) -> str:
        return str(self.centroids)