"""
Hash Oracles

The tree never hashes anything itself. It hands one child (leaf hashing) or
two children (node hashing) to a ``HashOracle`` and stores whatever comes
back. Hash values are opaque ``bytes`` of a fixed width per oracle.
"""

import hashlib
from hashlib import sha256
from typing import Callable, Dict, Protocol, Sequence

from ..errors import ConfigurationError


class HashOracle(Protocol):
    """Pure, deterministic combination of one or two hash values."""

    name: str
    digest_size: int

    def __call__(self, children: Sequence[bytes]) -> bytes:
        ...


class Sha256Oracle:
    """
    Plain SHA-256 over the concatenated children.

    ``oracle([left, right]) == sha256(left + right)``, the pairing rule used
    by SSZ-style trees.
    """

    name = "sha256"
    digest_size = 32

    def __call__(self, children: Sequence[bytes]) -> bytes:
        return sha256(b"".join(children)).digest()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Blake2bOracle(Sha256Oracle):
    """BLAKE2b with a 32-byte digest."""

    name = "blake2b"

    def __call__(self, children: Sequence[bytes]) -> bytes:
        return hashlib.blake2b(b"".join(children), digest_size=self.digest_size).digest()


class Sha3Oracle(Sha256Oracle):
    """SHA3-256 over the concatenated children."""

    name = "sha3_256"

    def __call__(self, children: Sequence[bytes]) -> bytes:
        return hashlib.sha3_256(b"".join(children)).digest()


class TaggedSha256Oracle(Sha256Oracle):
    """
    Domain-separated SHA-256.

    Leaf hashing prefixes ``0x00`` and node hashing prefixes ``0x01`` so a leaf
    can never be confused with an inner node of the same bytes.
    """

    name = "tagged_sha256"
    LEAF_TAG = b"\x00"
    NODE_TAG = b"\x01"

    def __call__(self, children: Sequence[bytes]) -> bytes:
        tag = self.LEAF_TAG if len(children) == 1 else self.NODE_TAG
        return sha256(tag + b"".join(children)).digest()


_ORACLES: Dict[str, Callable[[], HashOracle]] = {
    Sha256Oracle.name: Sha256Oracle,
    Blake2bOracle.name: Blake2bOracle,
    Sha3Oracle.name: Sha3Oracle,
    TaggedSha256Oracle.name: TaggedSha256Oracle,
}


def available_oracles() -> Sequence[str]:
    """Names accepted by ``get_oracle``."""
    return sorted(_ORACLES)


def get_oracle(name: str) -> HashOracle:
    """
    Resolve an oracle by name.

    Raises:
        ConfigurationError: If no oracle is registered under ``name``
    """
    try:
        factory = _ORACLES[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown hash algorithm '{name}'. Choose one of: {', '.join(available_oracles())}"
        )
    return factory()
