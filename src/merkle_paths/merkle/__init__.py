"""
Merkle Tree Operations

This package provides binary merkle tree functionality over opaque hash
values, organized into three components:
- core: Level-by-level tree construction with odd-node promotion
- proof: Merkle path generation, padding and verification
- update: In-place single leaf updates
"""

# Tree construction
from .core import (
    parent_hash,
    next_level,
    build_levels,
    tree_height,
    validate_levels,
)

# Path generation and verification
from .proof import (
    PathElement,
    MerklePath,
    get_proof,
    compute_root_from_path,
    verify_merkle_path,
    pad_path,
    strip_padding,
    validate_path_length,
    batch_verify_paths,
)

# Incremental updates
from .update import update_leaf

__all__ = [
    # Core functions
    "parent_hash",
    "next_level",
    "build_levels",
    "tree_height",
    "validate_levels",
    # Proof functions
    "PathElement",
    "MerklePath",
    "get_proof",
    "compute_root_from_path",
    "verify_merkle_path",
    "pad_path",
    "strip_padding",
    "validate_path_length",
    "batch_verify_paths",
    # Update functions
    "update_leaf",
]
