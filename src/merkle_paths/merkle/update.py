"""
Incremental Merkle Tree Updates

Replacing one leaf only changes the hashes on its path to the root. Updating
those ``O(log n)`` ancestors in place gives exactly the levels a full rebuild
over the modified leaves would produce, as long as the leaf count is
unchanged.
"""

import logging
from typing import List

from ..hashing import HashOracle
from .core import parent_hash

logger = logging.getLogger(__name__)


def update_leaf(levels: List[List[bytes]], index: int, new_hash: bytes, oracle: HashOracle) -> int:
    """
    Replace the leaf at ``index`` and recompute its ancestors in place.

    Args:
        levels: Tree levels, root first; mutated in place
        index: Leaf position; callers check ``0 <= index < len(levels[-1])``
        new_hash: New leaf hash
        oracle: Hash oracle the tree was built with

    Returns:
        Number of oracle calls performed
    """
    levels[-1][index] = new_hash

    calls = 0
    child_index = index
    for k in range(len(levels) - 1, 0, -1):
        child_level = levels[k]
        parent_index = child_index // 2
        if 2 * parent_index + 1 < len(child_level):
            calls += 1
        levels[k - 1][parent_index] = parent_hash(child_level, parent_index, oracle)
        child_index = parent_index

    logger.debug(f"Updated leaf {index} with {calls} oracle calls")
    return calls
