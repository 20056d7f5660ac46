import pytest

from edakit.misc import (
    SubsequenceSum,
    format_array,
    is_prime,
    max_subsequence_sum_cubic,
    max_subsequence_sum_linear,
    max_subsequence_sum_quadratic,
)

ALGORITHMS = [
    max_subsequence_sum_cubic,
    max_subsequence_sum_quadratic,
    max_subsequence_sum_linear,
]


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97])
def test_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [4, 6, 9, 25, 49, 100])
def test_composites(n):
    assert is_prime(n) is False


def test_small_values_count_as_prime():
    assert is_prime(0) is True
    assert is_prime(1) is True


def test_negative_rejected():
    with pytest.raises(ValueError):
        is_prime(-5)


def test_format_array():
    assert format_array([-2, 11, -1, 3, -3, -2]) == "-2 11 -1 3 -3 -2"


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_source_case(algorithm):
    assert algorithm([-2, 11, -1, 3, -3, -2]) == SubsequenceSum(1, 3, 13)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_empty_input(algorithm):
    assert algorithm([]) == SubsequenceSum(0, 0, -1)


def test_all_negative_cubic_counts_empty_range():
    assert max_subsequence_sum_cubic([-2, -3]) == SubsequenceSum(1, 0, 0)


def test_all_negative_quadratic_and_linear():
    assert max_subsequence_sum_quadratic([-2, -3]) == SubsequenceSum(0, 0, -1)
    assert max_subsequence_sum_linear([-2, -3]) == SubsequenceSum(0, 0, -1)


def test_whole_array_best():
    values = [1, 2, 3]
    assert max_subsequence_sum_cubic(values) == SubsequenceSum(0, 2, 6)
    assert max_subsequence_sum_quadratic(values) == SubsequenceSum(0, 2, 6)
    assert max_subsequence_sum_linear(values) == SubsequenceSum(0, 2, 6)


def test_totals_agree():
    values = [4, -1, 2, 1, -5, 4, -3, 6]
    assert max_subsequence_sum_cubic(values).total == 8
    assert max_subsequence_sum_quadratic(values).total == 8
    assert max_subsequence_sum_linear(values).total == 8