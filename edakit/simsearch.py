"""Nearest-neighbour search over matrix rows, with and without clusters."""

from __future__ import annotations

from typing import Iterable

import numpy as np
from numpy.typing import ArrayLike

from edakit.cluster import Cluster
from edakit.matrix import Matrix
from edakit.vectors import euclidean_distance


class SimSearch:
    """Finds the rows of ``data`` nearest to a query vector."""

    def __init__(self, data: Matrix, centroids: Matrix) -> None:
        if centroids.dim != data.dim:
            raise ValueError("centroids and data differ in dimension")
        self.data = data
        self.centroids = centroids

    def _query(self, query: ArrayLike, top_k: int) -> np.ndarray:
        if top_k < 0:
            raise ValueError("top_k must not be negative")
        vector = np.asarray(query, dtype=np.float32).ravel()
        if vector.size != self.data.dim:
            raise ValueError(f"query has {vector.size} values, expected {self.data.dim}")
        return vector

    def _rank(self, query: np.ndarray, indices: Iterable[int], top_k: int) -> list[int]:
        ranked = sorted((euclidean_distance(query, self.data.row(i)), i) for i in indices)
        return [index for _, index in ranked[:top_k]]

    def search_without(self, query: ArrayLike, top_k: int) -> list[int]:
        """The ``top_k`` nearest rows found by comparing against every row."""
        vector = self._query(query, top_k)
        return self._rank(vector, range(self.data.n), top_k)

    def search_with_clusters(self, query: ArrayLike, top_k: int) -> list[int]:
        """The ``top_k`` nearest rows among the clusters closest to the query.

        Only the nearest cluster is searched unless it holds fewer than
        ``top_k`` rows; then clusters are added nearest first until enough rows
        are gathered.
        """
        vector = self._query(query, top_k)
        if self.centroids.n == 0:
            raise ValueError("no centroids to search with")
        ranked_clusters = sorted(
            (euclidean_distance(vector, self.centroids.row(j)), j)
            for j in range(self.centroids.n)
        )
        clustering = Cluster(self.data, self.centroids.n)
        clustering.centroids = Matrix(data=self.centroids.data)
        clustering.compute_clusters()

        candidates = clustering.indices(ranked_clusters[0][1])
        if len(candidates) < top_k:
            candidates = []
            for _, j in ranked_clusters:
                candidates.extend(clustering.indices(j))
                if len(candidates) >= top_k:
                    break
        return self._rank(vector, candidates, top_k)