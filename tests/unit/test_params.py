"""Unit tests for bloom filter sizing helpers."""

from math import isclose as _isclose

import pytest

from salted_bloom.components.params import (
    MAX_BITS_PER_ELEMENT,
    MIN_BITS_PER_ELEMENT,
    BloomParameters,
    false_positive_rate,
    optimal_k,
    optimal_m,
    plan,
)
from salted_bloom.core.errors import InvalidParameterError, NotFoundError

# Tolerance for floating-point comparisons
TOL = 1e-3


def isclose(a: float, b: float) -> bool:
    """Shadows math.isclose with the included tolerance"""
    return _isclose(a, b, rel_tol=TOL)


def test_false_positive_rate():
    assert isclose(false_positive_rate(3, 30, 1), 0.0029695)
    assert false_positive_rate(3, 30, 1) == pytest.approx(0.00297, abs=1e-5)


def test_false_positive_rate_decreases_with_capacity():
    assert false_positive_rate(3, 200, 10) < false_positive_rate(3, 100, 10)


def test_false_positive_rate_increases_with_elements():
    assert false_positive_rate(3, 100, 20) > false_positive_rate(3, 100, 10)


def test_false_positive_rate_bounds():
    rate = false_positive_rate(5, 1000, 100)
    assert 0 < rate < 1


@pytest.mark.parametrize("m", [1, 0, -5])
def test_false_positive_rate_requires_m_above_one(m):
    with pytest.raises(InvalidParameterError):
        false_positive_rate(3, m, 1)


def test_optimal_k():
    assert optimal_k(30, 2) == 10
    assert optimal_k(26, 2) == 9
    assert optimal_k(100, 100) == 1


@pytest.mark.parametrize("n", [0, -1])
def test_optimal_k_requires_positive_n(n):
    with pytest.raises(InvalidParameterError):
        optimal_k(30, n)


def test_optimal_m():
    """Smallest searched capacity meeting the target."""
    m = optimal_m(2, 0.01)

    assert m == 26
    assert 4 <= m <= 256
    assert false_positive_rate(optimal_k(m, 2), m, 2) <= 0.01


def test_optimal_m_is_first_match():
    """The previous multiplier does not meet the target."""
    m = optimal_m(2, 0.01)
    previous = m - 2
    assert false_positive_rate(optimal_k(previous, 2), previous, 2) > 0.01


def test_optimal_m_is_multiple_of_n():
    for n in (1, 7, 100):
        m = optimal_m(n, 0.05)
        assert m % n == 0
        assert MIN_BITS_PER_ELEMENT <= m // n <= MAX_BITS_PER_ELEMENT


def test_optimal_m_loose_target_uses_smallest_multiplier():
    assert optimal_m(10, 0.99) == 10 * MIN_BITS_PER_ELEMENT


@pytest.mark.parametrize("n, target", [(1000, 1e-40), (10, 0.0), (5, -1.0)])
def test_optimal_m_unreachable_target(n, target):
    with pytest.raises(NotFoundError):
        optimal_m(n, target)


def test_optimal_m_requires_positive_n():
    with pytest.raises(InvalidParameterError):
        optimal_m(0, 0.01)


def test_plan():
    params = plan(2, 0.01)

    assert params == BloomParameters(
        n=2, m=26, k=9, false_positive_rate=false_positive_rate(9, 26, 2)
    )
    assert params.false_positive_rate <= 0.01


def test_plan_is_frozen():
    params = plan(100, 0.01)
    with pytest.raises(AttributeError):
        params.m = 1
