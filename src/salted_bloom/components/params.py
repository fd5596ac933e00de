"""Bloom filter sizing helpers.

Pure functions for planning a filter before it is built:
- k - number of hash functions
- m - bit capacity
- n - expected number of elements
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..core.errors import InvalidParameterError, NotFoundError

logger = logging.getLogger(__name__)

# Bits-per-element multipliers tried by optimal_m, inclusive on both ends
MIN_BITS_PER_ELEMENT = 2
MAX_BITS_PER_ELEMENT = 128


@dataclass(frozen=True)
class BloomParameters:
    """Recommended filter shape for an expected element count."""

    n: int
    m: int
    k: int
    false_positive_rate: float


def false_positive_rate(k: int, m: int, n: int) -> float:
    """Return the probability of a false positive after n insertions.

    Uses ``(1 - exp(-k * (n + 0.5) / (m - 1))) ** k``.
    """
    if m <= 1:
        raise InvalidParameterError(f"Bit capacity must be greater than 1, got {m}")
    x = 1 - math.exp(-k * (n + 0.5) / (m - 1))
    return x**k


def optimal_k(m: int, n: int) -> int:
    """Return the number of hash functions minimising false positives."""
    if n <= 0:
        raise InvalidParameterError(f"Expected element count must be positive, got {n}")
    return round(m / n * math.log(2))


def optimal_m(n: int, target_error: float) -> int:
    """Return the smallest searched bit capacity meeting target_error.

    Tries ``m = n * i`` for i in [2, 128] and raises NotFoundError when none
    of them is good enough.
    """
    if n <= 0:
        raise InvalidParameterError(f"Expected element count must be positive, got {n}")
    for i in range(MIN_BITS_PER_ELEMENT, MAX_BITS_PER_ELEMENT + 1):
        m = n * i
        k = optimal_k(m, n)
        if k < 1:
            continue
        error = false_positive_rate(k, m, n)
        if error <= target_error:
            logger.debug(f"Chose m={m}, k={k} for n={n} (error {error:.3g} <= {target_error})")
            return m
    raise NotFoundError(
        f"No capacity up to {MAX_BITS_PER_ELEMENT} bits per element reaches "
        f"error {target_error} for n={n}"
    )


def plan(n: int, target_error: float) -> BloomParameters:
    """Recommend m and k for n elements and return them with the expected error."""
    m = optimal_m(n, target_error)
    k = optimal_k(m, n)
    return BloomParameters(n=n, m=m, k=k, false_positive_rate=false_positive_rate(k, m, n))
