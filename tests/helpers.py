"""
Shared test oracles.

``ConcatOracle`` renders the tree structure into the hash value itself, so a
root built over ``[a, b, c]`` reads ``((a,b),c)``. ``CountingOracle`` wraps
another oracle and counts calls.
"""

import os
import sys
from typing import List, Sequence

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from merkle_paths.hashing import Sha256Oracle


class ConcatOracle:
    name = "concat"
    digest_size = 0

    def __call__(self, children: Sequence[bytes]) -> bytes:
        if len(children) == 1:
            return b"h(" + children[0] + b")"
        return b"(" + b",".join(children) + b")"


class CountingOracle:
    name = "counting"

    def __init__(self, inner=None):
        self.inner = inner or Sha256Oracle()
        self.digest_size = getattr(self.inner, "digest_size", 32)
        self.calls = 0

    def __call__(self, children: Sequence[bytes]) -> bytes:
        self.calls += 1
        return self.inner(children)


def letters(n: int) -> List[bytes]:
    """``n`` distinct single-token items: a, b, ..., z, a1, b1, ..."""
    items = []
    for i in range(n):
        suffix = str(i // 26) if i >= 26 else ""
        items.append(chr(ord("a") + i % 26).encode() + suffix.encode())
    return items


def ceil_log2(n: int) -> int:
    return (n - 1).bit_length() if n > 1 else 0
