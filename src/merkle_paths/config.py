"""
Configuration

Settings are read from the environment, after loading a ``.env`` file from
the working directory when one exists.

Environment variables:
    MERKLE_HASH: Hash oracle name (default ``sha256``)
    MERKLE_MAX_DEPTH: Optional maximum tree height and padding depth
    MERKLE_LOG_LEVEL: Logging level name (default ``INFO``)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_HASH_ALGORITHM, DEFAULT_LOG_LEVEL
from .errors import ConfigurationError
from .hashing import HashOracle, available_oracles, get_oracle

# Load environment variables
load_dotenv()


@dataclass
class Settings:
    """Resolved configuration values."""
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    max_depth: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def oracle(self) -> HashOracle:
        return get_oracle(self.hash_algorithm)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse_max_depth(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        depth = int(raw)
    except ValueError:
        raise ConfigurationError(f"MERKLE_MAX_DEPTH must be an integer, got '{raw}'")
    if depth < 0:
        raise ConfigurationError(f"MERKLE_MAX_DEPTH must be non-negative, got {depth}")
    return depth


def load_settings() -> Settings:
    """
    Build ``Settings`` from the current environment.

    Raises:
        ConfigurationError: If any variable holds an invalid value
    """
    hash_algorithm = (os.getenv("MERKLE_HASH") or DEFAULT_HASH_ALGORITHM).lower()
    if hash_algorithm not in available_oracles():
        raise ConfigurationError(
            f"MERKLE_HASH must be one of {', '.join(available_oracles())}, got '{hash_algorithm}'"
        )

    log_level = (os.getenv("MERKLE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"MERKLE_LOG_LEVEL is not a logging level: '{log_level}'")

    return Settings(
        hash_algorithm=hash_algorithm,
        max_depth=_parse_max_depth(os.getenv("MERKLE_MAX_DEPTH")),
        log_level=log_level,
    )
