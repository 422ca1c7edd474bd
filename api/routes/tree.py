"""
Tree Routes

Build a tree from a posted identifier list and return its root
commitment or a membership proof. Nothing is stored between requests.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from api.deps import resolve_hasher
from api.models.requests import ProofRequest, TreeRequest
from core.merkle.merkle_proofs import MerkleProver
from core.schemas.commitment import MembershipProof, RootCommitment


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tree", tags=["tree"])


@router.post("/root", response_model=RootCommitment)
async def tree_root(request: TreeRequest) -> RootCommitment:
    """Compute the root commitment to publish on-chain."""
    prover = MerkleProver.from_identifiers(
        request.identifiers, resolve_hasher(request.hash_algorithm)
    )
    commitment = prover.commitment()
    logger.info(f"Computed root {commitment.root} over {commitment.leaf_count} leaves")
    return commitment


@router.post("/proof", response_model=MembershipProof)
async def tree_proof(request: ProofRequest) -> MembershipProof:
    """Generate the membership proof for one identifier."""
    prover = MerkleProver.from_identifiers(
        request.identifiers, resolve_hasher(request.hash_algorithm)
    )
    return prover.prove(request.identifier)
