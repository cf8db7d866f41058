"""
Merkle Path Generation and Verification

A merkle path lists, from the leaf level upward, the sibling hashes needed to
recompute the root together with the side each sibling sits on. Levels where
the proved node was promoted contribute no entry, so a path can be shorter
than the tree height.

Verification is a pure function of the path, the leaf hash and the claimed
root. It needs no tree instance and is the part meant to be embedded in
other verifiers.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..constants import Direction, PAD_HASH
from ..errors import ConfigurationError
from ..hashing import HashOracle


@dataclass(frozen=True)
class PathElement:
    """One level of a merkle path: the sibling's side and its hash."""
    direction: Direction
    sibling: bytes


MerklePath = List[PathElement]


def get_proof(levels: Sequence[Sequence[bytes]], index: int) -> MerklePath:
    """
    Extract the merkle path for the leaf at ``index``.

    Walks from the leaf level up to, but not including, the root level. At a
    level where the node is the unpaired last element of an odd-length level
    no entry is emitted; the node was promoted without hashing.

    Args:
        levels: Tree levels, root first, as returned by ``build_levels``
        index: Leaf position; callers check ``0 <= index < len(levels[-1])``

    Returns:
        Path elements ordered from the leaf level toward the root

    Example:
        >>> levels = build_levels([a, b, c], oracle)
        >>> get_proof(levels, 2)
        [PathElement(direction=<Direction.LEFT: 1>, sibling=oracle([a, b]))]
    """
    path: MerklePath = []
    i = index

    for level in reversed(levels[1:]):
        count = len(level)
        if i == count - 1 and count % 2 == 1:
            # Promoted, nothing hashed at this level
            i //= 2
            continue

        if i % 2 == 0:
            path.append(PathElement(Direction.RIGHT, level[i + 1]))
        else:
            path.append(PathElement(Direction.LEFT, level[i - 1]))
        i //= 2

    return path


def _select(flag: int, if_one: bytes, if_zero: bytes) -> bytes:
    # Index instead of branching so both candidates are always computed
    return (if_zero, if_one)[flag]


def compute_root_from_path(leaf_hash: bytes, path: Iterable[PathElement], oracle: HashOracle) -> bytes:
    """
    Replay ``path`` from ``leaf_hash`` and return the resulting root.

    For each element both orderings are hashed and one is selected by the
    direction, so control flow does not depend on the direction values.
    Padding elements leave the accumulator unchanged.

    Args:
        leaf_hash: Hash of the leaf being proven
        path: Path elements as produced by ``get_proof`` (optionally padded)
        oracle: Hash oracle the tree was built with

    Returns:
        The recomputed root hash

    Raises:
        ValueError: If an element carries an unknown direction
    """
    current = leaf_hash
    for element in path:
        direction = Direction(element.direction)
        is_pad = int(direction == Direction.PAD)
        is_left = int(direction == Direction.LEFT)

        sibling_left = oracle([element.sibling, current])
        sibling_right = oracle([current, element.sibling])
        combined = _select(is_left, sibling_left, sibling_right)
        current = _select(is_pad, current, combined)
    return current


def verify_merkle_path(path: Iterable[PathElement], leaf_hash: bytes, root: bytes, oracle: HashOracle) -> bool:
    """
    Verify that ``leaf_hash`` is included under ``root``.

    An empty path is valid exactly when ``leaf_hash == root``. Malformed
    paths (wrong length, unknown directions) yield ``False``; this function
    never raises for well-typed inputs.

    Examples:
        >>> verify_merkle_path(tree.prove_inclusion(3), tree.leaves[3], tree.root(), oracle)
        True
    """
    try:
        return compute_root_from_path(leaf_hash, path, oracle) == root
    except ValueError:
        return False


def pad_path(path: Sequence[PathElement], depth: int, pad_hash: bytes = PAD_HASH) -> MerklePath:
    """
    Pad ``path`` to exactly ``depth`` elements with no-op entries.

    Fixed-depth verifiers expect a path of constant length; padding entries
    use ``Direction.PAD`` and are skipped during root recomputation.

    Raises:
        ConfigurationError: If ``path`` is already longer than ``depth``
    """
    if len(path) > depth:
        raise ConfigurationError(
            f"Merkle path of length {len(path)} does not fit fixed depth {depth}"
        )
    padding = [PathElement(Direction.PAD, pad_hash)] * (depth - len(path))
    return list(path) + padding


def strip_padding(path: Iterable[PathElement]) -> MerklePath:
    """Drop padding entries, leaving the elements that are actually hashed."""
    return [element for element in path if element.direction != Direction.PAD]


def validate_path_length(path: Sequence[PathElement], tree_depth: int) -> bool:
    """
    Check that ``path`` is no longer than a tree of ``tree_depth`` allows.

    Padding entries are not counted.
    """
    return len(strip_padding(path)) <= tree_depth


def batch_verify_paths(
    leaf_hashes: Sequence[bytes],
    paths: Sequence[Sequence[PathElement]],
    root: bytes,
    oracle: HashOracle,
) -> List[bool]:
    """
    Verify several paths against the same root.

    Returns:
        One result per ``(leaf_hash, path)`` pair
    """
    results = []
    for leaf_hash, path in zip(leaf_hashes, paths):
        results.append(verify_merkle_path(path, leaf_hash, root, oracle))
    return results
