"""
Proof Models Package

Pydantic models for validation and serialization of merkle paths and
inclusion proofs.

Usage:
    from merkle_paths.models import InclusionProofModel

    proof = InclusionProofModel.from_path(0, leaf, root, path)
    proof.model_dump_json()
"""

from .proof_models import (
    PathElementModel,
    InclusionProofModel,
)

__all__ = [
    'PathElementModel',
    'InclusionProofModel',
]
