"""salted_bloom - Salted Bloom filter implementation in Python."""

from .components.bitarray import SimpleBitArray
from .components.bloom import SaltedBloomFilter
from .components.hashing import SaltedHashFamily, hash_key
from .components.params import (
    BloomParameters,
    false_positive_rate,
    optimal_k,
    optimal_m,
    plan,
)
from .core.config import BloomConfig, load_config
from .core.errors import (
    BloomError,
    ConfigError,
    InvalidParameterError,
    LengthMismatchError,
    NotFoundError,
    OutOfBoundsError,
)
from .core.types import Key, Salt, Position

__all__ = [
    "SaltedBloomFilter",
    "SimpleBitArray",
    "SaltedHashFamily",
    "hash_key",
    "BloomParameters",
    "false_positive_rate",
    "optimal_k",
    "optimal_m",
    "plan",
    "BloomConfig",
    "load_config",
    "BloomError",
    "ConfigError",
    "InvalidParameterError",
    "LengthMismatchError",
    "NotFoundError",
    "OutOfBoundsError",
    "Key",
    "Salt",
    "Position",
]
