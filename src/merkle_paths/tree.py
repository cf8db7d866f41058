"""
Merkle Tree

``MerkleTree`` owns a ``LevelMatrix`` and exposes the public operations:
building from raw items, root lookup, inclusion proofs, single leaf updates
and appends. Inclusion proofs are checked with the standalone
``verify_proof``, which needs no tree instance.

Example:
    >>> tree = MerkleTree([b"a", b"b", b"c"])
    >>> path = tree.prove_inclusion(2)
    >>> verify_proof(path, tree.leaf_hash(b"c"), tree.root())
    True
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import ConfigurationError, EmptyTreeError, IndexOutOfRange
from .hashing import HashOracle, Sha256Oracle
from .merkle import (
    MerklePath,
    build_levels,
    get_proof,
    pad_path,
    tree_height,
    update_leaf,
    verify_merkle_path,
)

logger = logging.getLogger(__name__)

_DEFAULT_ORACLE = Sha256Oracle()


class LevelMatrix:
    """
    In-memory tree levels.

    ``levels[0]`` is the root level and ``levels[-1]`` mirrors ``leaves``.
    Both are empty together. Accessors hand out tuples; the lists themselves
    are never exposed.
    """

    def __init__(self):
        self._leaves: List[bytes] = []
        self._levels: List[List[bytes]] = []

    @property
    def leaves(self) -> Tuple[bytes, ...]:
        return tuple(self._leaves)

    @property
    def levels(self) -> Tuple[Tuple[bytes, ...], ...]:
        return tuple(tuple(level) for level in self._levels)

    @property
    def leaf_count(self) -> int:
        return len(self._leaves)

    @property
    def root(self) -> Optional[bytes]:
        if not self._levels:
            return None
        return self._levels[0][0]

    def rebuild(self, leaves: Sequence[bytes], oracle: HashOracle) -> None:
        """Replace every level with a fresh build over ``leaves``."""
        self._leaves = list(leaves)
        self._levels = build_levels(self._leaves, oracle)

    def prove(self, index: int) -> MerklePath:
        self._check_index(index)
        return get_proof(self._levels, index)

    def update(self, index: int, new_hash: bytes, oracle: HashOracle) -> None:
        self._check_index(index)
        self._leaves[index] = new_hash
        update_leaf(self._levels, index, new_hash, oracle)

    def _check_index(self, index: int) -> None:
        if not self._leaves:
            raise EmptyTreeError("Merkle tree has no leaves")
        if not 0 <= index < len(self._leaves):
            raise IndexOutOfRange(index, len(self._leaves))


class MerkleTree:
    """
    Binary merkle tree over an ordered sequence of items.

    Args:
        items: Raw items (hashed once each when ``hash_leaves`` is set) or
            ready-made leaf hashes
        hash_leaves: Whether raw items are hashed before becoming leaves
        oracle: Hash oracle; SHA-256 when omitted
        max_depth: Optional limit on the tree height. Trees that would grow
            taller raise ``ConfigurationError`` and padded proofs are padded
            to this depth.
    """

    def __init__(
        self,
        items: Iterable[bytes] = (),
        hash_leaves: bool = True,
        oracle: Optional[HashOracle] = None,
        max_depth: Optional[int] = None,
    ):
        if max_depth is not None and max_depth < 0:
            raise ConfigurationError(f"max_depth must be non-negative, got {max_depth}")

        self.hash_leaves = hash_leaves
        self.oracle = oracle or _DEFAULT_ORACLE
        self.max_depth = max_depth
        self._matrix = LevelMatrix()

        leaves = self._to_leaves(items, hash_leaves)
        self._check_depth(len(leaves))
        self._matrix.rebuild(leaves, self.oracle)
        logger.debug(f"Built merkle tree with {len(leaves)} leaves using {self.oracle!r}")

    def __len__(self) -> int:
        return self._matrix.leaf_count

    def __repr__(self) -> str:
        root = self.root()
        root_hex = root.hex() if root is not None else None
        return f"MerkleTree(leaves={len(self)}, root={root_hex})"

    @property
    def leaves(self) -> Tuple[bytes, ...]:
        return self._matrix.leaves

    @property
    def levels(self) -> Tuple[Tuple[bytes, ...], ...]:
        return self._matrix.levels

    @property
    def height(self) -> int:
        """Number of levels above the leaves."""
        return tree_height(len(self))

    def leaf_hash(self, item: bytes, hash_leaves: Optional[bool] = None) -> bytes:
        """
        Leaf hash the tree would store for ``item``.

        Args:
            item: Raw item or leaf hash
            hash_leaves: Overrides the tree's default for this call
        """
        if hash_leaves is None:
            hash_leaves = self.hash_leaves
        if not isinstance(item, (bytes, bytearray)):
            raise TypeError(f"Leaf items must be bytes, got {type(item).__name__}")
        return self.oracle([bytes(item)]) if hash_leaves else bytes(item)

    def root(self) -> Optional[bytes]:
        """Root hash, or ``None`` when the tree has no leaves."""
        return self._matrix.root

    def root_or_raise(self) -> bytes:
        """
        Root hash of a non-empty tree.

        Raises:
            EmptyTreeError: If the tree has no leaves
        """
        root = self._matrix.root
        if root is None:
            raise EmptyTreeError("Merkle tree has no leaves, so it has no root")
        return root

    def prove_inclusion(self, index: int, padded: bool = False) -> MerklePath:
        """
        Merkle path for the leaf at ``index``.

        Args:
            index: Leaf position
            padded: Pad the path to ``max_depth`` with no-op entries

        Raises:
            EmptyTreeError: If the tree has no leaves
            IndexOutOfRange: If ``index`` is not a leaf position
            ConfigurationError: If ``padded`` is requested without ``max_depth``
        """
        path = self._matrix.prove(index)
        if padded:
            if self.max_depth is None:
                raise ConfigurationError("Padded proofs require a tree with max_depth set")
            path = pad_path(path, self.max_depth, pad_hash=b"\x00" * len(self.root_or_raise()))
        return path

    def update_leaf(self, item: bytes, index: int, hash_leaves: Optional[bool] = None) -> None:
        """
        Replace the leaf at ``index`` and refresh its ancestors in ``O(log n)``.

        Raises:
            EmptyTreeError: If the tree has no leaves
            IndexOutOfRange: If ``index`` is not a leaf position
        """
        digest = self.leaf_hash(item, hash_leaves)
        self._matrix.update(index, digest, self.oracle)
        logger.debug(f"Updated leaf {index}, new root {self.root().hex()}")

    def append_leaves(self, items: Iterable[bytes], hash_leaves: Optional[bool] = None) -> None:
        """
        Append ``items`` and rebuild the whole tree.

        Raises:
            ConfigurationError: If the grown tree would exceed ``max_depth``
        """
        if hash_leaves is None:
            hash_leaves = self.hash_leaves
        new_leaves = self._to_leaves(items, hash_leaves)
        leaves = list(self._matrix.leaves) + new_leaves
        self._check_depth(len(leaves))
        self._matrix.rebuild(leaves, self.oracle)
        logger.debug(f"Appended {len(new_leaves)} leaves, tree now has {len(leaves)}")

    def index_of(self, item: bytes, hash_leaves: Optional[bool] = None) -> Optional[int]:
        """Position of the first leaf matching ``item``, or ``None``."""
        target = self.leaf_hash(item, hash_leaves)
        for i, leaf in enumerate(self._matrix.leaves):
            if leaf == target:
                return i
        return None

    def verify(self, path: MerklePath, leaf_hash: bytes) -> bool:
        """Verify ``path`` for ``leaf_hash`` against this tree's current root."""
        root = self.root()
        if root is None:
            return False
        return verify_merkle_path(path, leaf_hash, root, self.oracle)

    def _to_leaves(self, items: Iterable[bytes], hash_leaves: bool) -> List[bytes]:
        return [self.leaf_hash(item, hash_leaves) for item in items]

    def _check_depth(self, leaf_count: int) -> None:
        if self.max_depth is None:
            return
        height = tree_height(leaf_count)
        if height > self.max_depth:
            raise ConfigurationError(
                f"{leaf_count} leaves need a tree of height {height}, "
                f"which exceeds max_depth {self.max_depth}"
            )


def verify_proof(
    path: MerklePath,
    leaf_hash: bytes,
    root: bytes,
    oracle: Optional[HashOracle] = None,
) -> bool:
    """
    Verify an inclusion proof without a tree instance.

    Args:
        path: Merkle path from ``MerkleTree.prove_inclusion``
        leaf_hash: Hash of the leaf being proven (see ``MerkleTree.leaf_hash``)
        root: Claimed root hash
        oracle: Hash oracle the tree was built with; SHA-256 when omitted

    Returns:
        True if replaying ``path`` from ``leaf_hash`` reproduces ``root``
    """
    return verify_merkle_path(path, leaf_hash, root, oracle or _DEFAULT_ORACLE)
