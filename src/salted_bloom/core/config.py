"""Configuration for salted_bloom.

Defines the tunable parameters of a filter and loads them from TOML.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from ..components.params import optimal_k, optimal_m
from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class BloomConfig:
    """Configuration parameters for a bloom filter.

    Attributes:
        expected_elements: Number of keys the filter is planned for (n)
        false_positive_rate: Target FP rate used to size the filter
        num_hashes: Explicit hash function count (k); derived when None
        num_bits: Explicit bit capacity (m); derived when None
        seed: Seed for randomized salts; default salts are kept when None
    """

    expected_elements: int
    false_positive_rate: float = 0.01
    num_hashes: int | None = None
    num_bits: int | None = None
    seed: int | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> BloomConfig:
        allowed = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - allowed)
        if unknown:
            raise ConfigError(f"Unknown bloom config keys: {', '.join(unknown)}")
        if "expected_elements" not in d:
            raise ConfigError("Missing required field: expected_elements")
        return cls(**d)

    def validate(self) -> None:
        """Raise ConfigError if any parameter is out of range."""
        if not isinstance(self.expected_elements, int) or self.expected_elements <= 0:
            raise ConfigError(f"expected_elements must be a positive integer, got {self.expected_elements!r}")
        if not isinstance(self.false_positive_rate, (int, float)) or not 0 < self.false_positive_rate < 1:
            raise ConfigError(f"false_positive_rate must be in (0, 1), got {self.false_positive_rate!r}")
        for name in ("num_hashes", "num_bits"):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, int) or value <= 0):
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.seed is not None and not isinstance(self.seed, int):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")

    def resolve(self) -> tuple[int, int]:
        """Return (k, m), deriving whichever was not given explicitly."""
        m = self.num_bits if self.num_bits is not None else optimal_m(self.expected_elements, self.false_positive_rate)
        if self.num_hashes is not None:
            return self.num_hashes, m
        return max(1, optimal_k(m, self.expected_elements)), m


def load_config(path: str | Path) -> BloomConfig:
    """Load a BloomConfig from a TOML file.

    Settings may sit at the top level or under a ``[bloom]`` table.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = data.get("bloom", data)
    if not isinstance(section, dict):
        raise ConfigError(f"[bloom] in {path} must be a table")
    config = BloomConfig.from_dict(section)
    config.validate()
    logger.info(f"Loaded bloom config from {path}")
    return config
