"""
Merkle Path Constants

Direction encoding shared by proof generation and verification, and the
default values used by configuration.
"""

from enum import IntEnum


class Direction(IntEnum):
    """
    Side occupied by the sibling at one level of a merkle path.

    The numeric values are the wire encoding: ``0`` when the proved node is a
    left child, ``1`` when it is a right child, ``2`` for padding entries that
    fixed-depth verifiers skip.
    """
    RIGHT = 0
    LEFT = 1
    PAD = 2


# Sibling hash placed in padding entries; never fed to the oracle
PAD_HASH = b"\x00" * 32

DEFAULT_HASH_ALGORITHM = "sha256"
DEFAULT_LOG_LEVEL = "INFO"
