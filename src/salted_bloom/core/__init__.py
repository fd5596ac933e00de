"""Core definitions shared by all salted_bloom components."""

from .errors import (
    BloomError,
    ConfigError,
    InvalidParameterError,
    LengthMismatchError,
    NotFoundError,
    OutOfBoundsError,
)
from .config import BloomConfig, load_config

__all__ = [
    "BloomConfig",
    "load_config",
    "BloomError",
    "ConfigError",
    "InvalidParameterError",
    "LengthMismatchError",
    "NotFoundError",
    "OutOfBoundsError",
]
