import math

import pytest

from edakit.vectors import argsort, euclidean_distance, mean_abs_difference


def test_distance_of_identical_vectors_is_zero():
    assert euclidean_distance([1.5, -2.0, 3.0], [1.5, -2.0, 3.0]) == 0.0


def test_distance_is_symmetric():
    u, v = [0.2, 0.7, -1.0], [1.0, -0.5, 2.5]
    assert euclidean_distance(u, v) == pytest.approx(euclidean_distance(v, u))


def test_distance_agrees_with_math_dist():
    u, v = [0.25, 1.5, -3.0, 2.0], [1.0, -0.5, 2.5, 0.0]
    assert euclidean_distance(u, v) == pytest.approx(math.dist(u, v), rel=1e-6)


def test_distance_triangle_inequality():
    a, b, c = [0.0, 0.0], [1.0, 2.0], [3.0, -1.0]
    assert euclidean_distance(a, c) <= euclidean_distance(a, b) + euclidean_distance(b, c) + 1e-6


def test_distance_length_mismatch_raises():
    with pytest.raises(ValueError):
        euclidean_distance([1.0, 2.0], [1.0, 2.0, 3.0])


def test_mean_abs_difference_of_identical_is_zero():
    assert mean_abs_difference([4.0, 5.0], [4.0, 5.0]) == 0.0


def test_mean_abs_difference_value():
    assert mean_abs_difference([1.0, 2.0, 3.0], [1.0, 2.0, 6.0]) == pytest.approx(1.0)


def test_mean_abs_difference_is_symmetric():
    u, v = [0.5, -1.0, 2.0], [1.5, 1.0, -2.0]
    assert mean_abs_difference(u, v) == pytest.approx(mean_abs_difference(v, u))


def test_mean_abs_difference_empty_raises():
    with pytest.raises(ValueError):
        mean_abs_difference([], [])


def test_argsort_orders_values():
    values = [3.5, -1.0, 2.0, 0.0, 7.25]
    order = argsort(values)
    assert [values[i] for i in order] == sorted(values)
    assert sorted(order) == list(range(len(values)))


def test_argsort_keeps_ties_in_order():
    values = [2.0, 1.0, 2.0, 1.0]
    order = argsort(values)
    assert order == [1, 3, 0, 2]


def test_argsort_empty():
    assert argsort([]) == []