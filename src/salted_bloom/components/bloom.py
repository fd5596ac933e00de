"""Salted bloom filter implementation.

Bit-array based bloom filter whose k hash functions are distinguished by
per-function salts. The default salts are ``0..k-1`` so two fresh filters of
the same shape mark identical bits.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ..core.errors import InvalidParameterError, LengthMismatchError
from ..core.types import Key, Salt
from ..interfaces.bitarray import BitArray
from ..interfaces.hashing import HashFamily
from .bitarray import SimpleBitArray
from .hashing import SaltedHashFamily
from .params import false_positive_rate, plan

if TYPE_CHECKING:
    from ..core.config import BloomConfig

logger = logging.getLogger(__name__)

# Upper bound for randomly drawn salts
RANDOM_SALT_MAX = 2**63 - 1


class SaltedBloomFilter:
    """Probabilistic set membership test using a bit array and salted hashes.

    Args:
        k: Number of hash functions (must be positive)
        m: Bit capacity (must be positive)

    Invariants:
        - False positives are possible
        - False negatives are not possible
        - k and m are fixed at creation time
        - Exactly k salts are held at all times
        - Bits are never cleared, not even when salts are replaced
    """

    def __init__(self, k: int, m: int):
        if not isinstance(k, int) or k <= 0:
            raise InvalidParameterError(f"Hash function count must be a positive integer, got {k!r}")
        if not isinstance(m, int) or m <= 0:
            raise InvalidParameterError(f"Bit capacity must be a positive integer, got {m!r}")
        self._k = k
        self._m = m
        self._bits: BitArray = SimpleBitArray(m)
        self._hashes: HashFamily = SaltedHashFamily(range(k))
        logger.info(f"Created bloom filter: k={k}, m={m} ({(m + 7) // 8} bytes)")

    @classmethod
    def for_capacity(
        cls, expected_elements: int, target_error: float, seed: int | None = None
    ) -> SaltedBloomFilter:
        """Build a filter sized for expected_elements at target_error.

        Salts are randomized with seed when one is given.
        """
        params = plan(expected_elements, target_error)
        bf = cls(params.k, params.m)
        if seed is not None:
            bf.randomize_salts(seed)
        return bf

    @classmethod
    def from_config(cls, config: BloomConfig) -> SaltedBloomFilter:
        """Build a filter from a validated configuration."""
        config.validate()
        k, m = config.resolve()
        bf = cls(k, m)
        if config.seed is not None:
            bf.randomize_salts(config.seed)
        return bf

    @property
    def k(self) -> int:
        return self._k

    @property
    def m(self) -> int:
        return self._m

    @property
    def salts(self) -> tuple[Salt, ...]:
        return self._hashes.salts

    @property
    def bits(self) -> bytes:
        return self._bits.to_bytes()

    def bit_count(self) -> int:
        """Return how many bits are set."""
        return self._bits.count()

    def add(self, key: Key) -> None:
        """Add key to the filter."""
        for pos in self._hashes.positions(key, self._m):
            self._bits.mark(pos)

    def update(self, keys: Iterable[Key]) -> None:
        """Add every key in keys."""
        for key in keys:
            self.add(key)

    def query(self, key: Key, skip: int = 0) -> bool:
        """Return True if key may be present; False if definitely absent.

        skip drops the last ``skip`` hash functions from the check, which
        weakens it; ``skip == k`` checks nothing and always returns True.
        """
        if not isinstance(skip, int) or not 0 <= skip <= self._k:
            raise InvalidParameterError(f"skip must be in [0, {self._k}], got {skip!r}")
        for pos in self._hashes.positions(key, self._m, self._k - skip):
            if not self._bits.check(pos):
                return False  # definitely not in the set
        return True  # probably in the set

    def __contains__(self, key: Key) -> bool:
        return self.query(key)

    def randomize_salts(self, seed: int = 0) -> None:
        """Replace all salts with draws from a generator seeded by seed.

        The generator is private to this call, so the same seed always gives
        the same salts and the global ``random`` state is left alone.
        """
        rng = random.Random(seed)
        self._replace_salts([rng.randint(0, RANDOM_SALT_MAX) for _ in range(self._k)])

    def set_salts(self, salts: Sequence[Salt]) -> None:
        """Replace salts with the first k values of salts."""
        salts = list(salts)
        if len(salts) < self._k:
            raise LengthMismatchError(f"Expected at least {self._k} salts, got {len(salts)}")
        if len(salts) > self._k:
            logger.warning(f"Ignoring {len(salts) - self._k} extra salts beyond k={self._k}")
        self._replace_salts(salts[: self._k])

    def _replace_salts(self, salts: list[Salt]) -> None:
        # Build (and validate) the new family before touching any state
        hashes = SaltedHashFamily(salts)
        marked = self._bits.count()
        if marked:
            logger.warning(f"Replacing salts on a filter with {marked} bits set; existing bits no longer match")
        self._hashes = hashes
        logger.info(f"Replaced salts for bloom filter: k={self._k}, m={self._m}")

    def estimated_false_positive_rate(self, n: int) -> float:
        """Return the theoretical false positive rate after n insertions."""
        return false_positive_rate(self._k, self._m, n)

    def copy(self) -> SaltedBloomFilter:
        clone = object.__new__(type(self))
        clone._k = self._k
        clone._m = self._m
        clone._bits = self._bits.copy()
        clone._hashes = self._hashes
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SaltedBloomFilter):
            return NotImplemented
        return (
            self._k == other._k
            and self._m == other._m
            and self.salts == other.salts
            and self.bits == other.bits
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"SaltedBloomFilter(k={self._k}, m={self._m}, bits_set={self.bit_count()})"
