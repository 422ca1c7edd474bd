"""
Hashing Utilities
Digest primitives and the pairwise combine rule for allowlist Merkle trees.

This module provides:
- Keccak-256 and SHA-256 hashing for raw bytes
- Hasher: a named digest function with the sorted-pair combine rule
- Hex encoding/decoding with 0x prefix

Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = H(identifier_bytes)
2. Parent hashing: parent = H(min(a, b) + max(a, b))
   - Children are ordered by byte value before concatenation, so
     combine(a, b) == combine(b, a). A verifier only needs sibling values,
     never their left/right position.
3. No validation is performed here; callers reject malformed input.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Callable

from eth_utils import keccak


DIGEST_SIZE = 32

KECCAK256 = "keccak256"
SHA256 = "sha256"


def keccak256(data: bytes) -> bytes:
    """
    Compute Keccak-256 hash of raw bytes (the EVM hash, not NIST SHA3-256).

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    return keccak(data)


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


HASH_FUNCTIONS: dict[str, Callable[[bytes], bytes]] = {
    KECCAK256: keccak256,
    SHA256: sha256,
}


@dataclass(frozen=True)
class Hasher:
    """
    A named digest function plus the order-independent combine rule.

    Attributes:
        name: Algorithm name ("keccak256" or "sha256")
        digest: Function mapping bytes to a fixed-width digest
        digest_size: Width of every digest in bytes
    """
    name: str
    digest: Callable[[bytes], bytes]
    digest_size: int = DIGEST_SIZE

    def hash(self, data: bytes) -> bytes:
        """Hash raw bytes into a leaf digest."""
        return self.digest(data)

    def combine(self, a: bytes, b: bytes) -> bytes:
        """
        Hash two child digests into their parent.

        The pair is sorted by byte value first, which makes the result
        independent of argument order.
        """
        if b < a:
            a, b = b, a
        return self.digest(a + b)


def get_hasher(name: str = KECCAK256) -> Hasher:
    """
    Look up a Hasher by algorithm name.

    Raises:
        ValueError: If the algorithm is not supported
    """
    key = name.lower()
    if key not in HASH_FUNCTIONS:
        raise ValueError(
            f"Unsupported hash algorithm: {name!r} "
            f"(expected one of {sorted(HASH_FUNCTIONS)})"
        )
    return Hasher(name=key, digest=HASH_FUNCTIONS[key])


DEFAULT_HASHER: Hasher = get_hasher(KECCAK256)


def hash_leaf(data: bytes, hasher: Hasher = DEFAULT_HASHER) -> bytes:
    """Hash one raw identifier into a leaf digest."""
    return hasher.hash(data)


def combine(a: bytes, b: bytes, hasher: Hasher = DEFAULT_HASHER) -> bytes:
    """Combine two digests with the sorted-pair rule."""
    return hasher.combine(a, b)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters

    Example:
        >>> from_hex("0xdeadbeef").hex()
        'deadbeef'
    """
    if not hex_string.startswith(("0x", "0X")):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


def parse_identifier(text: str) -> bytes:
    """
    Decode an identifier such as an account address into raw bytes.

    Only hex decoding is performed; the width and checksum of the
    identifier are not validated.
    """
    return from_hex(text.strip())


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
