"""
Merkle Proofs Convenience Wrappers
Hex-string interfaces around the core Merkle tree functions.

This module provides class-based interfaces:
- MerkleProver: Build commitments and proofs from hex identifiers
- MerkleVerifier: Verify hex proofs against a published root

These produce the values handed to the external contract environment.
"""
from __future__ import annotations

import logging
from typing import Sequence

from core.crypto.hashing import DEFAULT_HASHER, Hasher, from_hex, parse_identifier, to_hex
from core.merkle.merkle_tree import MerkleTree, build_proof, build_tree, verify_proof
from core.schemas.commitment import MembershipProof, RootCommitment
from core.schemas.errors import InvalidIdentifierError, InvalidProofError


logger = logging.getLogger(__name__)


def decode_identifiers(identifiers: Sequence[str]) -> list[bytes]:
    """
    Decode 0x-prefixed identifier strings into raw bytes.

    Raises:
        InvalidIdentifierError: If any entry is not valid 0x hex
    """
    decoded: list[bytes] = []
    for i, text in enumerate(identifiers):
        try:
            decoded.append(parse_identifier(text))
        except ValueError as e:
            raise InvalidIdentifierError(
                f"Identifier {i} is not valid hex: {e}",
                details={"index": i},
            ) from e
    return decoded


def _decode_digest(text: str, what: str, sibling_index: int | None = None) -> bytes:
    try:
        return from_hex(text)
    except ValueError as e:
        raise InvalidProofError(
            f"{what} is not valid hex: {e}", sibling_index=sibling_index
        ) from e


class MerkleProver:
    """
    Builds commitments and membership proofs from hex identifiers.

    Example:
        >>> prover = MerkleProver.from_identifiers(["0x00...0539", "0x9af2...8db7"])
        >>> prover.commitment().root
        '0x...'
    """

    def __init__(self, tree: MerkleTree) -> None:
        self.tree = tree

    @classmethod
    def from_identifiers(
        cls,
        identifiers: Sequence[str],
        hasher: Hasher = DEFAULT_HASHER,
    ) -> "MerkleProver":
        """
        Decode hex identifiers and build the tree.

        Raises:
            InvalidIdentifierError: If any identifier is not valid hex
            EmptyInputError: If identifiers is empty
        """
        return cls(build_tree(decode_identifiers(identifiers), hasher))

    @property
    def hex_root(self) -> str:
        return self.tree.hex_root

    def commitment(self) -> RootCommitment:
        """Return the root commitment to publish."""
        return RootCommitment(
            root=self.tree.hex_root,
            hash_algorithm=self.tree.hasher.name,
            leaf_count=self.tree.leaf_count,
            depth=self.tree.depth,
        )

    def prove(self, identifier: str) -> MembershipProof:
        """
        Build a membership proof for a hex identifier.

        Raises:
            InvalidIdentifierError: If the identifier is not valid hex
            NotFoundError: If the identifier is not in the tree
        """
        raw = decode_identifiers([identifier])[0]
        siblings = build_proof(self.tree, raw)
        leaf = self.tree.hasher.hash(raw)
        return MembershipProof(
            leaf=to_hex(leaf),
            proof=[to_hex(s) for s in siblings],
            root=self.tree.hex_root,
            index=self.tree.leaf_index_of_digest(leaf),
        )


class MerkleVerifier:
    """
    Verifies hex membership proofs against a published root.

    Only the root and the hash algorithm are needed; the leaf set is not.
    """

    def __init__(self, root: str, hasher: Hasher = DEFAULT_HASHER) -> None:
        self.root = _decode_digest(root, "Root")
        self.hasher = hasher

    def verify_leaf(self, leaf: str, proof: Sequence[str]) -> bool:
        """
        Verify a leaf digest against the root.

        Raises:
            InvalidProofError: If the leaf or any sibling is malformed
        """
        siblings = [
            _decode_digest(s, f"Sibling {i}", sibling_index=i)
            for i, s in enumerate(proof)
        ]
        ok = verify_proof(_decode_digest(leaf, "Leaf"), siblings, self.root, self.hasher)
        if not ok:
            logger.debug("Proof for leaf %s does not fold to %s", leaf, to_hex(self.root))
        return ok

    def verify_identifier(self, identifier: str, proof: Sequence[str]) -> bool:
        """Hash a raw hex identifier, then verify it against the root."""
        raw = decode_identifiers([identifier])[0]
        return self.verify_leaf(to_hex(self.hasher.hash(raw)), proof)

    def verify(self, membership: MembershipProof) -> bool:
        """Verify a MembershipProof; its own root must match this verifier's."""
        if from_hex(membership.root) != self.root:
            return False
        return self.verify_leaf(membership.leaf, membership.proof)


__all__ = [
    "decode_identifiers",
    "MerkleProver",
    "MerkleVerifier",
]
