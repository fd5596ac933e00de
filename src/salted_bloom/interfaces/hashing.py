"""Protocol definition for a family of salted hash functions."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from ..core.types import Key, Position, Salt


@runtime_checkable
class HashFamily(Protocol):
    """k hash functions differentiated by per-function salts."""

    @property
    def salts(self) -> tuple[Salt, ...]:
        """Salts, one per hash function."""
        ...

    def hash(self, index: int, key: Key) -> int:
        """Return the unsigned value of hash function index for key."""
        ...

    def positions(self, key: Key, m: int, count: int | None = None) -> Iterator[Position]:
        """Yield positions in [0, m) from the first count hash functions."""
        ...
