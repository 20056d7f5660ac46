import numpy as np
import pytest

from edakit.cluster import MAX_ITERATIONS, Cluster
from edakit.matrix import Matrix


@pytest.fixture
def four_points():
    return Matrix(data=[[0.0, 0.0], [0.1, 0.0], [1.0, 1.0], [0.9, 1.0]])


def test_k_must_be_positive(four_points):
    with pytest.raises(ValueError):
        Cluster(four_points, 0)


def test_compute_clusters_assigns_nearest(four_points):
    cluster = Cluster(four_points, 2)
    cluster.centroids.set_row(0, [0.0, 0.0])
    cluster.centroids.set_row(1, [1.0, 1.0])
    cluster.compute_clusters()
    assert cluster.indices(0) == [0, 1]
    assert cluster.indices(1) == [2, 3]


def test_update_centroids_uses_means(four_points):
    cluster = Cluster(four_points, 2)
    cluster.centroids.set_row(0, [0.0, 0.0])
    cluster.centroids.set_row(1, [1.0, 1.0])
    cluster.compute_clusters()
    cluster.update_centroids()
    assert np.allclose(cluster.centroid(0), [0.05, 0.0])


def test_empty_cluster_keeps_its_centroid(four_points):
    cluster = Cluster(four_points, 3)
    cluster.centroids.set_row(0, [0.0, 0.0])
    cluster.centroids.set_row(1, [1.0, 1.0])
    cluster.centroids.set_row(2, [5.0, 5.0])
    cluster.compute_clusters()
    cluster.update_centroids()
    assert cluster.indices(2) == []
    assert np.array_equal(cluster.centroid(2), np.array([5.0, 5.0], dtype=np.float32))


def test_ties_go_to_first_centroid(four_points):
    cluster = Cluster(four_points, 2)
    cluster.compute_clusters()
    assert cluster.indices(0) == [0, 1, 2, 3]
    assert cluster.indices(1) == []


def test_apply_partitions_rows_and_centres_clusters():
    data = Matrix(data=np.random.default_rng(1).random((40, 3)))
    cluster = Cluster(data, 4)
    iterations = cluster.apply(np.random.default_rng(2))
    assert 1 <= iterations <= MAX_ITERATIONS
    members = [i for j in range(4) for i in cluster.indices(j)]
    assert sorted(members) == list(range(40))
    for j in range(4):
        rows = cluster.indices(j)
        if rows:
            assert np.allclose(cluster.centroid(j), data.data[rows].mean(axis=0), atol=1e-5)


def test_indices_returns_a_copy(four_points):
    cluster = Cluster(four_points, 1)
    cluster.compute_clusters()
    cluster.indices(0).append(99)
    assert cluster.indices(0) == [0, 1, 2, 3]