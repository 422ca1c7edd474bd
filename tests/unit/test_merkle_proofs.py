"""
Merkle Proofs Unit Tests
Tests for core/merkle/merkle_proofs.py (hex interfaces)
"""
import pytest

from core.crypto.hashing import get_hasher, keccak256, to_hex
from core.merkle.merkle_proofs import MerkleProver, MerkleVerifier, decode_identifiers
from core.merkle.merkle_tree import build_tree
from core.schemas.commitment import MembershipProof
from core.schemas.errors import (
    EmptyInputError,
    InvalidIdentifierError,
    InvalidProofError,
    NotFoundError,
)

from fixtures import (
    ABSENT_ADDRESS,
    ADDRESS_A,
    ADDRESS_B,
    SCENARIO_ADDRESSES,
    make_hex_addresses,
    scenario_identifiers,
)


class TestDecodeIdentifiers:

    def test_decodes_in_order(self):
        assert decode_identifiers(SCENARIO_ADDRESSES) == scenario_identifiers()

    def test_invalid_entry_reports_index(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            decode_identifiers([ADDRESS_A, "not-hex"])
        assert exc_info.value.details["index"] == 1
        assert exc_info.value.code == "IDENTIFIER_INVALID"


class TestMerkleProver:
    """Tests for MerkleProver."""

    def test_commitment(self):
        prover = MerkleProver.from_identifiers(SCENARIO_ADDRESSES)
        commitment = prover.commitment()

        assert commitment.root == prover.tree.hex_root
        assert commitment.hash_algorithm == "keccak256"
        assert commitment.leaf_count == 3
        assert commitment.depth == 2

    def test_commitment_matches_raw_tree(self):
        prover = MerkleProver.from_identifiers(SCENARIO_ADDRESSES)
        assert prover.hex_root == build_tree(scenario_identifiers()).hex_root

    def test_prove(self):
        prover = MerkleProver.from_identifiers(SCENARIO_ADDRESSES)
        membership = prover.prove(ADDRESS_A)

        assert membership.leaf == to_hex(keccak256(scenario_identifiers()[0]))
        assert membership.index == 0
        assert len(membership.proof) == 2
        assert membership.root == prover.hex_root

    def test_prove_duplicate_uses_first_position(self):
        membership = MerkleProver.from_identifiers(SCENARIO_ADDRESSES).prove(ADDRESS_B)
        assert membership.index == 1

    def test_prove_uppercase_hex(self):
        prover = MerkleProver.from_identifiers(SCENARIO_ADDRESSES)
        assert prover.prove(ADDRESS_B.upper().replace("0X", "0x")).index == 1

    def test_prove_absent(self):
        prover = MerkleProver.from_identifiers(SCENARIO_ADDRESSES)
        with pytest.raises(NotFoundError):
            prover.prove(ABSENT_ADDRESS)

    def test_empty_list(self):
        with pytest.raises(EmptyInputError):
            MerkleProver.from_identifiers([])

    def test_sha256(self):
        prover = MerkleProver.from_identifiers(SCENARIO_ADDRESSES, get_hasher("sha256"))
        assert prover.commitment().hash_algorithm == "sha256"
        assert prover.hex_root != MerkleProver.from_identifiers(SCENARIO_ADDRESSES).hex_root

    def test_wraps_existing_tree(self):
        tree = build_tree(scenario_identifiers())
        assert MerkleProver(tree).hex_root == tree.hex_root


class TestMerkleVerifier:
    """Tests for MerkleVerifier."""

    def test_every_member_verifies(self):
        addresses = make_hex_addresses(9)
        prover = MerkleProver.from_identifiers(addresses)
        verifier = MerkleVerifier(prover.hex_root)

        for address in addresses:
            membership = prover.prove(address)
            assert verifier.verify_leaf(membership.leaf, membership.proof)
            assert verifier.verify_identifier(address, membership.proof)
            assert verifier.verify(membership)

    def test_other_root_rejects(self):
        membership = MerkleProver.from_identifiers(SCENARIO_ADDRESSES).prove(ADDRESS_A)
        other_root = MerkleProver.from_identifiers(make_hex_addresses(3)).hex_root

        verifier = MerkleVerifier(other_root)
        assert not verifier.verify_leaf(membership.leaf, membership.proof)
        assert not verifier.verify(membership)

    def test_membership_for_other_root_rejected(self):
        """A MembershipProof naming a different root is rejected outright."""
        prover = MerkleProver.from_identifiers(SCENARIO_ADDRESSES)
        membership = prover.prove(ADDRESS_A)
        forged = MembershipProof(
            leaf=membership.leaf,
            proof=membership.proof,
            root=to_hex(keccak256(b"other")),
            index=0,
        )
        assert not MerkleVerifier(prover.hex_root).verify(forged)

    def test_malformed_sibling_hex(self):
        prover = MerkleProver.from_identifiers(SCENARIO_ADDRESSES)
        membership = prover.prove(ADDRESS_A)

        with pytest.raises(InvalidProofError) as exc_info:
            MerkleVerifier(prover.hex_root).verify_leaf(
                membership.leaf, [membership.proof[0], "0xnothex"]
            )
        assert exc_info.value.details["sibling_index"] == 1

    def test_short_sibling(self):
        prover = MerkleProver.from_identifiers(SCENARIO_ADDRESSES)
        membership = prover.prove(ADDRESS_A)

        with pytest.raises(InvalidProofError):
            MerkleVerifier(prover.hex_root).verify_leaf(
                membership.leaf, [membership.proof[0], "0xabcd"]
            )

    def test_malformed_root(self):
        with pytest.raises(InvalidProofError):
            MerkleVerifier("deadbeef")
