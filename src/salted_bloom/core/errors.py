"""Exception hierarchy for salted_bloom.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class BloomError(Exception):
    """Base exception for all bloom filter errors."""
    pass


class InvalidParameterError(BloomError, ValueError):
    """Raised when a size, hash count, skip or divisor is out of range."""
    pass


class LengthMismatchError(BloomError, ValueError):
    """Raised when a salt sequence is shorter than the filter's hash count."""
    pass


class OutOfBoundsError(BloomError, IndexError):
    """Raised when a bit position falls outside the bit array."""
    pass


class NotFoundError(BloomError, LookupError):
    """Raised when no capacity in the searched range meets a target error rate."""
    pass


class ConfigError(BloomError):
    """Raised when a filter configuration is missing, malformed or invalid."""
    pass
