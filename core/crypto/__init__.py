"""
Core cryptographic utilities.

Digest primitives and the sorted-pair combine rule used by the Merkle engine.
"""
from .hashing import (
    DIGEST_SIZE,
    KECCAK256,
    SHA256,
    HASH_FUNCTIONS,
    Hasher,
    DEFAULT_HASHER,
    keccak256,
    sha256,
    get_hasher,
    hash_leaf,
    combine,
    to_hex,
    from_hex,
    parse_identifier,
)

__all__ = [
    "DIGEST_SIZE",
    "KECCAK256",
    "SHA256",
    "HASH_FUNCTIONS",
    "Hasher",
    "DEFAULT_HASHER",
    "keccak256",
    "sha256",
    "get_hasher",
    "hash_leaf",
    "combine",
    "to_hex",
    "from_hex",
    "parse_identifier",
]
