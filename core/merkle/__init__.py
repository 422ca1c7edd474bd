"""
Merkle Tree and Commitments
Deterministic allowlist Merkle tree construction + proof generation/verification.

This module provides:
- MerkleTree: immutable levels of digests
- build_tree: Build a tree from raw identifiers
- merkle_root: Extract the root commitment
- build_proof: Generate the sibling path for an identifier
- verify_proof: Verify a sibling path against a root

Commitment Rules:
1. Leaf hashing: H(identifier), keccak256 by default
2. Parent hashing: H(sorted(left, right) concatenated)
3. Padding: Pair the last node with itself if a level is odd
4. Empty input: EmptyInputError
5. Single leaf: root = leaf

Usage:
    from core.merkle import build_tree, build_proof, verify_proof

    tree = build_tree(addresses)
    proof = build_proof(tree, addresses[0])
    assert verify_proof(tree.hasher.hash(addresses[0]), proof, tree.root)
"""
from .merkle_tree import (
    MerkleTree,
    build_tree,
    build_tree_from_leaves,
    merkle_root,
    build_proof,
    build_proof_for_index,
    verify_proof,
    compute_tree_depth,
    expected_level_count,
)

from .merkle_proofs import (
    decode_identifiers,
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Core types
    "MerkleTree",
    # Core functions
    "build_tree",
    "build_tree_from_leaves",
    "merkle_root",
    "build_proof",
    "build_proof_for_index",
    "verify_proof",
    "compute_tree_depth",
    "expected_level_count",
    # Convenience classes
    "decode_identifiers",
    "MerkleProver",
    "MerkleVerifier",
]
