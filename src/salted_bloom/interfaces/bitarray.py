"""Protocol definition for the bit array."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.types import Position


@runtime_checkable
class BitArray(Protocol):
    """Fixed-length set-only bit vector."""

    def mark(self, position: Position) -> None:
        """Set the bit at position."""
        ...

    def check(self, position: Position) -> bool:
        """Return True if the bit at position is set."""
        ...

    def count(self) -> int:
        """Return the number of set bits."""
        ...

    def to_bytes(self) -> bytes:
        """Return a copy of the backing bytes."""
        ...

    def copy(self) -> BitArray:
        """Return an independent bit array with the same bits set."""
        ...
