"""
CLI Verify Command

Verify a membership proof against a published root, offline.
No identifier list is needed.

Usage:
    allowlist verify 0x...0539 --root 0x... --proof 0x... 0x...
    allowlist verify 0x<leaf digest> --leaf --root 0x... --proof 0x...
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field

from allowlist_cli.inputs import resolve_hasher
from core.merkle.merkle_proofs import MerkleVerifier
from core.schemas.errors import AllowlistException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Summary of proof verification for CLI output."""
    value: str = ""
    is_leaf: bool = False
    root: str = ""
    proof_length: int = 0
    valid: bool = False
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        d = asdict(self)
        if not d["errors"]:
            del d["errors"]
        return d


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    print(f"{'leaf' if summary.is_leaf else 'identifier'}: {summary.value}")
    print(f"root: {summary.root}")
    print(f"proof_length: {summary.proof_length}")
    print(f"valid: {str(summary.valid).lower()}")
    for err in summary.errors:
        print(f"  ✗ {err}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (2 when the proof does not fold to the root)
    """
    summary = VerifySummary(
        value=args.value,
        is_leaf=args.leaf,
        root=args.root,
        proof_length=len(args.proof),
    )

    try:
        verifier = MerkleVerifier(args.root, resolve_hasher(args))
        if args.leaf:
            summary.valid = verifier.verify_leaf(args.value, args.proof)
        else:
            summary.valid = verifier.verify_identifier(args.value, args.proof)
    except AllowlistException as e:
        summary.errors.append(f"{e.code}: {e.message}")
        if args.json:
            print(json.dumps(summary.to_dict(), indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    if summary.valid:
        logger.info("Verification passed")
        return EXIT_SUCCESS

    logger.warning("Verification failed")
    return EXIT_VERIFICATION_FAILED
