"""
Merkle Tree Exceptions

All failures raised by the tree are local, recoverable conditions. They share
``MerkleTreeError`` as a base so callers can catch the whole family at once.
"""


class MerkleTreeError(Exception):
    """Base exception for merkle tree operations."""
    pass


class ConfigurationError(MerkleTreeError):
    """The leaf set or settings violate a structural precondition."""
    pass


class IndexOutOfRange(MerkleTreeError, IndexError):
    """A leaf or proof index is outside ``[0, leaf_count)``."""

    def __init__(self, index: int, leaf_count: int):
        self.index = index
        self.leaf_count = leaf_count
        if leaf_count:
            message = f"Leaf index {index} out of range (0-{leaf_count - 1})"
        else:
            message = f"Leaf index {index} out of range (tree has no leaves)"
        super().__init__(message)


class EmptyTreeError(MerkleTreeError):
    """Root or proof requested on a tree with zero leaves."""
    pass
