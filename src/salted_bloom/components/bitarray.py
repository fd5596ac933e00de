"""Fixed-length bit array backing the bloom filter.

Bits are stored most-significant-bit first: position ``p`` lives in byte
``p // 8`` under mask ``1 << (7 - p % 8)``.
"""

from __future__ import annotations

from ..core.errors import InvalidParameterError, OutOfBoundsError
from ..core.types import Position


class SimpleBitArray:
    """Fixed-size bit vector with set-only semantics.

    Args:
        size: Number of addressable bits (must be positive)

    Invariants:
        - Backing store is exactly ceil(size / 8) bytes
        - Bits only transition from unset to set
        - Every accessed position satisfies 0 <= position < size
    """

    def __init__(self, size: int):
        if not isinstance(size, int) or size <= 0:
            raise InvalidParameterError(f"Bit array size must be a positive integer, got {size!r}")
        self._size = size
        self._data = bytearray((size + 7) // 8)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def _locate(self, position: Position) -> tuple[int, int]:
        # Negative indexes would otherwise wrap around silently
        if not 0 <= position < self._size:
            raise OutOfBoundsError(f"Bit position {position} outside [0, {self._size})")
        return position // 8, 1 << (7 - position % 8)

    def mark(self, position: Position) -> None:
        """Set the bit at position. Idempotent."""
        byte_pos, mask = self._locate(position)
        self._data[byte_pos] |= mask

    def check(self, position: Position) -> bool:
        """Return True if the bit at position is set."""
        byte_pos, mask = self._locate(position)
        return bool(self._data[byte_pos] & mask)

    def count(self) -> int:
        """Return the number of set bits."""
        return sum(byte.bit_count() for byte in self._data)

    def to_bytes(self) -> bytes:
        """Return an immutable copy of the backing bytes."""
        return bytes(self._data)

    def copy(self) -> SimpleBitArray:
        clone = SimpleBitArray(self._size)
        clone._data[:] = self._data
        return clone
