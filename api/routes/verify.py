"""
Verify Route

Verify a membership proof against a published root.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from api.deps import resolve_hasher
from api.models.requests import VerifyRequest
from api.models.responses import VerifyResponse
from core.merkle.merkle_proofs import MerkleVerifier


logger = logging.getLogger(__name__)

router = APIRouter(tags=["verification"])


@router.post("/verify", response_model=VerifyResponse)
async def verify_proof(request: VerifyRequest) -> VerifyResponse:
    """
    Verify a leaf digest and its sibling path against a root.

    A proof that does not fold to the root is a normal result
    (valid=false); malformed digests are a 400 MERKLE_PROOF_INVALID.
    """
    verifier = MerkleVerifier(request.root, resolve_hasher(request.hash_algorithm))
    valid = verifier.verify_leaf(request.leaf, request.proof)
    if not valid:
        logger.warning(f"Proof for leaf {request.leaf} rejected")
    return VerifyResponse(ok=True, valid=valid, root=request.root.lower())
