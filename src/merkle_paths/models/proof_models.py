"""
Proof Models

This module defines Pydantic models for the JSON form of merkle paths and
inclusion proofs. Hash values are carried as ``0x``-prefixed hex strings.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..constants import Direction
from ..merkle import MerklePath, PathElement
from ..utils import bytes_to_hex, hex_to_bytes, normalize_hex


class PathElementModel(BaseModel):
    """
    One serialized level of a merkle path.

    Attributes:
        direction: Sibling side (0 = right, 1 = left, 2 = padding)
        hash: Sibling hash as hex string
    """
    direction: int = Field(..., description="Sibling side: 0 right, 1 left, 2 padding")
    hash: str = Field(..., description="Sibling hash (hex string with 0x prefix)")

    @field_validator('direction')
    @classmethod
    def validate_direction(cls, v):
        """Validate direction is one of the known encodings."""
        if v not in set(Direction):
            raise ValueError(f"Direction must be one of {[int(d) for d in Direction]}")
        return v

    @field_validator('hash')
    @classmethod
    def validate_hash(cls, v):
        return normalize_hex(v)

    @classmethod
    def from_element(cls, element: PathElement) -> 'PathElementModel':
        return cls(direction=int(element.direction), hash=bytes_to_hex(element.sibling))

    def to_element(self) -> PathElement:
        return PathElement(Direction(self.direction), hex_to_bytes(self.hash))


class InclusionProofModel(BaseModel):
    """
    Serialized inclusion proof.

    Attributes:
        leaf_index: Position of the proven leaf
        leaf_hash: Leaf hash as hex string
        root: Root the proof was generated against
        path: Merkle path from the leaf level upward
        algorithm: Name of the hash oracle used
    """
    leaf_index: int = Field(..., ge=0, description="Position of the proven leaf")
    leaf_hash: str = Field(..., description="Leaf hash (hex string with 0x prefix)")
    root: str = Field(..., description="Merkle root (hex string with 0x prefix)")
    path: List[PathElementModel] = Field(default_factory=list, description="Merkle path")
    algorithm: str = Field(default="sha256", description="Hash oracle name")
    depth: Optional[int] = Field(default=None, ge=0, description="Fixed depth the path is padded to")

    @field_validator('leaf_hash', 'root')
    @classmethod
    def validate_hex_fields(cls, v):
        return normalize_hex(v)

    @classmethod
    def from_path(
        cls,
        leaf_index: int,
        leaf_hash: bytes,
        root: bytes,
        path: MerklePath,
        algorithm: str = "sha256",
        depth: Optional[int] = None,
    ) -> 'InclusionProofModel':
        return cls(
            leaf_index=leaf_index,
            leaf_hash=bytes_to_hex(leaf_hash),
            root=bytes_to_hex(root),
            path=[PathElementModel.from_element(element) for element in path],
            algorithm=algorithm,
            depth=depth,
        )

    def to_path(self) -> MerklePath:
        return [element.to_element() for element in self.path]

    @property
    def leaf_hash_bytes(self) -> bytes:
        return hex_to_bytes(self.leaf_hash)

    @property
    def root_bytes(self) -> bytes:
        return hex_to_bytes(self.root)
