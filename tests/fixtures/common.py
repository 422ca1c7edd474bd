"""
Common test fixtures shared by all modules.

Provides factory functions for allowlist test data:
- Raw 20-byte identifiers (account addresses)
- Hex identifier lists
- Built trees
"""

from core.crypto.hashing import DEFAULT_HASHER, Hasher, to_hex
from core.merkle.merkle_tree import MerkleTree, build_tree


# The allowlist from the deployment script: B and C are the same address.
ADDRESS_A = "0x0000000000000000000000000000000000000539"
ADDRESS_B = "0x9af2e2b7e57c1cd7c68c5c3796d8ea67e0018db7"
ADDRESS_C = "0x9af2e2b7e57c1cd7c68c5c3796d8ea67e0018db7"

SCENARIO_ADDRESSES = [ADDRESS_A, ADDRESS_B, ADDRESS_C]

ABSENT_ADDRESS = "0x00000000000000000000000000000000000000ff"


def make_address(n: int) -> bytes:
    """A deterministic 20-byte identifier."""
    return n.to_bytes(20, "big")


def make_addresses(count: int, start: int = 1) -> list[bytes]:
    """`count` distinct 20-byte identifiers."""
    return [make_address(start + i) for i in range(count)]


def make_hex_addresses(count: int, start: int = 1) -> list[str]:
    return [to_hex(a) for a in make_addresses(count, start)]


def make_tree(count: int, hasher: Hasher = DEFAULT_HASHER) -> MerkleTree:
    return build_tree(make_addresses(count), hasher)


def scenario_identifiers() -> list[bytes]:
    return [bytes.fromhex(a[2:]) for a in SCENARIO_ADDRESSES]
