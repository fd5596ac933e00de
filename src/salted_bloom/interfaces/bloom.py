"""Protocol definition for Bloom Filter."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..core.types import Key, Salt


@runtime_checkable
class BloomFilter(Protocol):
    """Probabilistic set membership test."""

    def add(self, key: Key) -> None:
        """Add key to the filter."""
        ...

    def query(self, key: Key, skip: int = 0) -> bool:
        """Return True if key may be present; False if definitely absent."""
        ...

    def __contains__(self, key: Key) -> bool:
        """Return True if key may be present; False if definitely absent."""
        ...

    def randomize_salts(self, seed: int = 0) -> None:
        """Replace all salts with values drawn from a generator seeded by seed."""
        ...

    def set_salts(self, salts: Sequence[Salt]) -> None:
        """Replace salts with the first k values of salts."""
        ...
