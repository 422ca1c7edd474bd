"""
Allowlist CLI

Command-line interface for building allowlist commitments and proofs.

Usage:
    python -m allowlist_cli root addresses.txt
    python -m allowlist_cli proof addresses.txt 0x...0539
    python -m allowlist_cli verify 0x...0539 --root 0x... --proof 0x... 0x...
    python -m allowlist_cli show addresses.txt
"""

__version__ = "0.1.0"
