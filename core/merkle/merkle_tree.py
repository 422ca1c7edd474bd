"""
Merkle Tree Implementation
Deterministic allowlist Merkle tree construction, proof generation, and verification.

This module provides:
- MerkleTree: immutable levels of digests built from raw identifiers
- build_tree / merkle_root / build_proof / verify_proof
- Standard padding rule for odd number of nodes

Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = H(identifier)
   - Input order is preserved, duplicates keep their own positions
2. Parent hashing: parent = H(sorted(left, right) concatenated)
   - Implemented via Hasher.combine()
3. Padding rule: the last node of an odd level is paired with itself.
   The duplicate is used for that one parent and never stored.
4. Empty input: rejected with EmptyInputError
5. Single leaf: root = leaf, proof = []

Level count for N leaves: ceil(log2(N)) + 1.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from core.crypto.hashing import DEFAULT_HASHER, Hasher, to_hex
from core.schemas.errors import EmptyInputError, InvalidProofError, NotFoundError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MerkleTree:
    """
    A fully built Merkle tree.

    Attributes:
        levels: Level 0 holds the leaves in input order, the last level
                holds only the root
        hasher: Hasher used for leaves and parents
    """
    levels: tuple[tuple[bytes, ...], ...]
    hasher: Hasher = field(default=DEFAULT_HASHER)

    def __post_init__(self) -> None:
        if not self.levels or not self.levels[0]:
            raise EmptyInputError()
        if len(self.levels[-1]) != 1:
            raise ValueError(
                f"Top level must hold exactly one node, got {len(self.levels[-1])}"
            )

    @property
    def leaves(self) -> tuple[bytes, ...]:
        return self.levels[0]

    @property
    def leaf_count(self) -> int:
        return len(self.levels[0])

    @property
    def depth(self) -> int:
        """Number of parent levels above the leaves (also the proof length)."""
        return len(self.levels) - 1

    @property
    def root(self) -> bytes:
        return self.levels[-1][0]

    @property
    def hex_root(self) -> str:
        return to_hex(self.root)

    @property
    def hex_leaves(self) -> list[str]:
        return [to_hex(leaf) for leaf in self.leaves]

    @property
    def hex_levels(self) -> list[list[str]]:
        return [[to_hex(node) for node in level] for level in self.levels]

    def leaf_index(self, identifier: bytes) -> int:
        """Return the first position whose leaf is H(identifier), or -1."""
        return self.leaf_index_of_digest(self.hasher.hash(identifier))

    def leaf_index_of_digest(self, leaf: bytes) -> int:
        """Return the first position holding the given leaf digest, or -1."""
        try:
            return self.leaves.index(leaf)
        except ValueError:
            return -1

    def prove(self, identifier: bytes) -> list[bytes]:
        return build_proof(self, identifier)

    def hex_proof(self, identifier: bytes) -> list[str]:
        return [to_hex(sibling) for sibling in build_proof(self, identifier)]

    def verify(self, leaf: bytes, proof: Sequence[bytes]) -> bool:
        """Verify a proof against this tree's root."""
        return verify_proof(leaf, proof, self.root, hasher=self.hasher)

    def render(self) -> str:
        """
        Render the tree as text, root first, one node per line.

        The odd trailing node of a level has a single stored child.
        """
        lines = [f"└─ {to_hex(self.root)}"]
        self._render_children(len(self.levels) - 1, 0, "   ", lines)
        return "\n".join(lines)

    def _render_children(
        self, level: int, index: int, prefix: str, lines: list[str]
    ) -> None:
        if level == 0:
            return
        below = self.levels[level - 1]
        children = [i for i in (2 * index, 2 * index + 1) if i < len(below)]
        for n, child in enumerate(children):
            last = n == len(children) - 1
            lines.append(f"{prefix}{'└─' if last else '├─'} {to_hex(below[child])}")
            self._render_children(
                level - 1, child, prefix + ("   " if last else "│  "), lines
            )

    def __str__(self) -> str:
        return self.render()


def _next_level(level: Sequence[bytes], hasher: Hasher) -> tuple[bytes, ...]:
    """Pair adjacent nodes left-to-right; an odd trailing node pairs with itself."""
    parents: list[bytes] = []
    for i in range(0, len(level), 2):
        left = level[i]
        right = level[i + 1] if i + 1 < len(level) else left
        parents.append(hasher.combine(left, right))
    return tuple(parents)


def build_tree_from_leaves(
    leaves: Sequence[bytes], hasher: Hasher = DEFAULT_HASHER
) -> MerkleTree:
    """
    Build a tree from already-hashed leaf digests.

    Raises:
        EmptyInputError: If leaves is empty
    """
    if len(leaves) == 0:
        raise EmptyInputError()

    levels: list[tuple[bytes, ...]] = [tuple(leaves)]
    while len(levels[-1]) > 1:
        levels.append(_next_level(levels[-1], hasher))

    tree = MerkleTree(levels=tuple(levels), hasher=hasher)
    logger.debug(
        "Built %s Merkle tree: %d leaves, %d levels, root=%s",
        hasher.name, tree.leaf_count, len(tree.levels), tree.hex_root,
    )
    return tree


def build_tree(
    identifiers: Iterable[bytes], hasher: Hasher = DEFAULT_HASHER
) -> MerkleTree:
    """
    Build a Merkle tree from raw identifiers.

    Algorithm:
    1. Hash every identifier in input order (duplicates retained)
    2. Combine adjacent pairs left-to-right into the next level,
       pairing an odd trailing node with itself
    3. Stop at a level of length 1

    Example: [a, b, c] -> [H(a), H(b), H(c)] -> [ab, cc] -> [root]

    Args:
        identifiers: Ordered raw byte strings (e.g. 20-byte addresses)
        hasher: Digest algorithm, keccak256 by default

    Returns:
        Immutable MerkleTree

    Raises:
        EmptyInputError: If no identifiers are supplied
    """
    leaves = [hasher.hash(identifier) for identifier in identifiers]
    return build_tree_from_leaves(leaves, hasher)


def merkle_root(tree: MerkleTree) -> bytes:
    """Return the single node of the top level."""
    return tree.root


def build_proof(tree: MerkleTree, identifier: bytes) -> list[bytes]:
    """
    Generate the sibling path for the first leaf equal to H(identifier).

    At each level the sibling is the other member of the leaf's pairing.
    An odd trailing node is its own sibling.

    Args:
        tree: Built MerkleTree
        identifier: Raw identifier to prove

    Returns:
        Sibling digests ordered from leaf level to root level

    Raises:
        NotFoundError: If no leaf matches the identifier
    """
    leaf = tree.hasher.hash(identifier)
    index = tree.leaf_index_of_digest(leaf)
    if index < 0:
        logger.debug("Leaf %s not present in tree %s", to_hex(leaf), tree.hex_root)
        raise NotFoundError(
            f"Identifier {to_hex(identifier)} is not in the tree",
            leaf=to_hex(leaf),
        )
    return build_proof_for_index(tree, index)


def build_proof_for_index(tree: MerkleTree, index: int) -> list[bytes]:
    """
    Generate the sibling path for the leaf at a known position.

    Raises:
        IndexError: If index is out of range
    """
    if index < 0 or index >= tree.leaf_count:
        raise IndexError(
            f"Leaf index {index} out of range for {tree.leaf_count} leaves"
        )

    siblings: list[bytes] = []
    for level in tree.levels[:-1]:
        if index % 2 == 1:
            sibling_index = index - 1
        elif index + 1 < len(level):
            sibling_index = index + 1
        else:
            sibling_index = index
        siblings.append(level[sibling_index])
        index //= 2
    return siblings


def verify_proof(
    leaf: bytes,
    proof: Sequence[bytes],
    expected_root: bytes,
    hasher: Hasher = DEFAULT_HASHER,
    expected_depth: int | None = None,
) -> bool:
    """
    Verify a membership proof.

    Folds the leaf with each sibling in order using the sorted-pair
    combine rule, then compares the result with the expected root.

    Args:
        leaf: Leaf digest, H(identifier)
        proof: Sibling digests ordered from leaf level to root level
        expected_root: Published root
        hasher: Digest algorithm the tree was built with
        expected_depth: If given, the proof must have exactly this many siblings

    Returns:
        True if the folded value equals expected_root, False otherwise

    Raises:
        InvalidProofError: If the leaf, root or any sibling has the wrong
                           width, or the proof length differs from expected_depth
    """
    width = hasher.digest_size
    if not isinstance(leaf, bytes) or len(leaf) != width:
        raise InvalidProofError(f"Leaf must be a {width}-byte digest")
    if not isinstance(expected_root, bytes) or len(expected_root) != width:
        raise InvalidProofError(f"Root must be a {width}-byte digest")
    if expected_depth is not None and len(proof) != expected_depth:
        raise InvalidProofError(
            f"Proof has {len(proof)} siblings, expected {expected_depth}",
            details={"proof_length": len(proof), "expected_depth": expected_depth},
        )

    current = leaf
    for i, sibling in enumerate(proof):
        if not isinstance(sibling, bytes) or len(sibling) != width:
            raise InvalidProofError(
                f"Sibling {i} must be a {width}-byte digest", sibling_index=i
            )
        current = hasher.combine(current, sibling)

    return current == expected_root


def compute_tree_depth(num_leaves: int) -> int:
    """
    Number of parent levels above N leaves, i.e. ceil(log2(N)).

    This is also the length of every proof in the tree.
    A single leaf (or none) has depth 0.
    """
    if num_leaves < 0:
        raise ValueError(f"num_leaves must be non-negative, got {num_leaves}")
    if num_leaves <= 1:
        return 0
    return (num_leaves - 1).bit_length()


def expected_level_count(num_leaves: int) -> int:
    """Total levels, leaves and root included: ceil(log2(max(N, 1))) + 1."""
    return compute_tree_depth(num_leaves) + 1


__all__ = [
    "MerkleTree",
    "build_tree",
    "build_tree_from_leaves",
    "merkle_root",
    "build_proof",
    "build_proof_for_index",
    "verify_proof",
    "compute_tree_depth",
    "expected_level_count",
]
