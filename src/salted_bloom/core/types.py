"""Common type definitions for salted_bloom.

Defines fundamental types used across all components.
"""

from __future__ import annotations

# Core primitive types
Key = str | bytes
Salt = int
Position = int
