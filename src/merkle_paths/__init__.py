"""
Merkle Paths

Binary merkle trees over opaque hash values: construction with odd-node
promotion, inclusion proofs, standalone proof verification and ``O(log n)``
single leaf updates.

Usage:
    from merkle_paths import MerkleTree, verify_proof

    tree = MerkleTree([b"a", b"b", b"c"])
    path = tree.prove_inclusion(1)
    verify_proof(path, tree.leaf_hash(b"b"), tree.root())
"""

from .constants import Direction
from .errors import (
    MerkleTreeError,
    ConfigurationError,
    IndexOutOfRange,
    EmptyTreeError,
)
from .hashing import (
    HashOracle,
    Sha256Oracle,
    Blake2bOracle,
    Sha3Oracle,
    TaggedSha256Oracle,
    get_oracle,
)
from .merkle import MerklePath, PathElement, pad_path
from .tree import LevelMatrix, MerkleTree, verify_proof

__version__ = "0.1.0"

__all__ = [
    'Direction',
    'MerkleTreeError',
    'ConfigurationError',
    'IndexOutOfRange',
    'EmptyTreeError',
    'HashOracle',
    'Sha256Oracle',
    'Blake2bOracle',
    'Sha3Oracle',
    'TaggedSha256Oracle',
    'get_oracle',
    'MerklePath',
    'PathElement',
    'pad_path',
    'LevelMatrix',
    'MerkleTree',
    'verify_proof',
]
