"""
Core Merkle Tree Construction

Builds the level matrix of a binary merkle tree from its leaf hashes.

Tree shape rules:
- Pairs ``(2i, 2i+1)`` of a level are combined with ``oracle([left, right])``
- The unpaired last node of an odd-length level is promoted unchanged to the
  next level up (it is never hashed with itself)
- Building stops at a level of length one, the root

Levels are stored root first: ``levels[0]`` holds the root and ``levels[-1]``
the leaves. An empty leaf sequence produces no levels at all.
"""

import logging
from typing import List, Sequence

from ..hashing import HashOracle

logger = logging.getLogger(__name__)


def parent_hash(level: Sequence[bytes], parent_index: int, oracle: HashOracle) -> bytes:
    """
    Compute the parent of the pair at ``(2 * parent_index, 2 * parent_index + 1)``.

    Args:
        level: Child level
        parent_index: Position of the parent in the level above
        oracle: Hash oracle combining the two children

    Returns:
        ``oracle([left, right])``, or the left child itself when it has no
        right sibling (promotion)
    """
    left_index = 2 * parent_index
    if left_index + 1 < len(level):
        return oracle([level[left_index], level[left_index + 1]])
    return level[left_index]


def next_level(level: Sequence[bytes], oracle: HashOracle) -> List[bytes]:
    """
    Derive the level above ``level``.

    Args:
        level: Non-empty list of node hashes

    Returns:
        List of ``ceil(len(level) / 2)`` parent hashes
    """
    return [parent_hash(level, i, oracle) for i in range((len(level) + 1) // 2)]


def build_levels(leaves: Sequence[bytes], oracle: HashOracle) -> List[List[bytes]]:
    """
    Build every level of the tree over ``leaves``.

    Args:
        leaves: Leaf hashes in tree order
        oracle: Hash oracle used for inner nodes

    Returns:
        Levels from root (index 0) to leaves (last index); empty when there
        are no leaves

    Examples:
        >>> levels = build_levels([a, b, c], oracle)
        >>> levels == [[oracle([oracle([a, b]), c])], [oracle([a, b]), c], [a, b, c]]
        True
    """
    if not leaves:
        return []

    levels = [list(leaves)]
    while len(levels[0]) > 1:
        levels.insert(0, next_level(levels[0], oracle))

    logger.debug(f"Built {len(levels)} levels over {len(leaves)} leaves")
    return levels


def tree_height(leaf_count: int) -> int:
    """
    Number of levels above the leaves for ``leaf_count`` leaves.

    Equals ``ceil(log2(leaf_count))``; zero for one leaf or none.
    """
    if leaf_count <= 1:
        return 0
    return (leaf_count - 1).bit_length()


def validate_levels(levels: Sequence[Sequence[bytes]]) -> bool:
    """
    Check that ``levels`` has the shape ``build_levels`` produces.

    Each level must hold ``ceil(len(child) / 2)`` nodes and the root level
    exactly one. Hash values themselves are not checked.
    """
    if not levels:
        return True

    for k in range(len(levels) - 1):
        if len(levels[k]) != (len(levels[k + 1]) + 1) // 2:
            return False

    return len(levels[0]) == 1
