"""Salted hash family for the bloom filter.

Each hash function ``i`` is the key digest mixed with the digest of
``salts[i]``. Both digests are 64-bit BLAKE2b values and all arithmetic stays
in the unsigned 64-bit domain, so results are always in ``[0, 2**64)``.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Iterator

from ..core.errors import InvalidParameterError
from ..core.types import Key, Position, Salt

_MASK64 = 0xFFFF_FFFF_FFFF_FFFF

# Largest accepted salt value
MAX_SALT = _MASK64


def encode_key(key: Key) -> bytes:
    """Return the byte form of a key; text is encoded as UTF-8."""
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"Bloom filter keys must be str or bytes, not {type(key).__name__}")


def _digest64(data: bytes) -> int:
    return int.from_bytes(hashlib.blake2b(data, digest_size=8).digest(), "little")


def _check_salt(salt: Salt) -> None:
    if not isinstance(salt, int) or not 0 <= salt <= MAX_SALT:
        raise InvalidParameterError(f"Salt must be an integer in [0, 2**64), got {salt!r}")


def _salt_digest(salt: Salt) -> int:
    return _digest64(salt.to_bytes(8, "little"))


def _mix(h: int, value: int) -> int:
    """Fold value into running hash h (order sensitive)."""
    h = (h + value) & _MASK64
    h = (h + (h << 10)) & _MASK64
    return h ^ (h >> 6)


def _finish(h: int) -> int:
    """Final avalanche step."""
    h = (h + (h << 3)) & _MASK64
    h ^= h >> 11
    return (h + (h << 15)) & _MASK64


def hash_key(salt: Salt, key: Key) -> int:
    """Hash key under salt into an unsigned 64-bit integer."""
    _check_salt(salt)
    return _finish(_mix(_salt_digest(salt), _digest64(encode_key(key))))


class SaltedHashFamily:
    """A family of k hash functions, one per salt.

    Args:
        salts: Non-empty sequence of salts in [0, 2**64)

    Invariants:
        - len(family) == len(salts), fixed for the family's lifetime
        - hash(i, key) == hash_key(salts[i], key)
    """

    def __init__(self, salts: Iterable[Salt]):
        salts = tuple(salts)
        if not salts:
            raise InvalidParameterError("Hash family needs at least one salt")
        for salt in salts:
            _check_salt(salt)
        self._salts = salts
        # Salt digests never change, so compute them once
        self._salt_digests = tuple(_salt_digest(salt) for salt in salts)

    @property
    def salts(self) -> tuple[Salt, ...]:
        return self._salts

    def __len__(self) -> int:
        return len(self._salts)

    def hash(self, index: int, key: Key) -> int:
        """Return the value of hash function index for key."""
        return _finish(_mix(self._salt_digests[index], _digest64(encode_key(key))))

    def positions(self, key: Key, m: int, count: int | None = None) -> Iterator[Position]:
        """Yield bit positions in [0, m) for the first count hash functions.

        Positions are produced lazily so callers can stop at the first miss.
        """
        if count is None:
            count = len(self._salts)
        key_digest = _digest64(encode_key(key))
        for i in range(count):
            yield _finish(_mix(self._salt_digests[i], key_digest)) % m
