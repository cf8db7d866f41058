"""
Hash Oracles

Pluggable hash capabilities consumed by the merkle tree. Any callable taking
a sequence of one or two ``bytes`` values and returning ``bytes`` works; the
classes here wrap ``hashlib`` primitives.
"""

from .oracle import (
    HashOracle,
    Sha256Oracle,
    Blake2bOracle,
    Sha3Oracle,
    TaggedSha256Oracle,
    available_oracles,
    get_oracle,
)

__all__ = [
    'HashOracle',
    'Sha256Oracle',
    'Blake2bOracle',
    'Sha3Oracle',
    'TaggedSha256Oracle',
    'available_oracles',
    'get_oracle',
]
