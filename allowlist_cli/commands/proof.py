"""
CLI Proof Command

Print the membership proof for one identifier.

Usage:
    allowlist proof addresses.txt 0x0000000000000000000000000000000000000539 [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from allowlist_cli.inputs import load_identifiers, resolve_hasher
from core.merkle.merkle_proofs import MerkleProver
from core.schemas.errors import AllowlistException, ErrorCodes


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_NOT_FOUND = 2


def proof_cmd(args: Namespace) -> int:
    """
    Execute the proof command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (2 when the identifier is not in the list)
    """
    try:
        identifiers = load_identifiers(args.source)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        prover = MerkleProver.from_identifiers(identifiers, resolve_hasher(args))
        membership = prover.prove(args.identifier)
    except AllowlistException as e:
        if e.code == ErrorCodes.LEAF_NOT_FOUND:
            logger.warning(f"Identifier not in allowlist: {args.identifier}")
        if args.json:
            print(json.dumps(e.to_error_model().model_dump(), indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_NOT_FOUND if e.code == ErrorCodes.LEAF_NOT_FOUND else EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps(membership.model_dump(), indent=2))
    else:
        print(f"leaf: {membership.leaf}")
        print(f"index: {membership.index}")
        print(f"root: {membership.root}")
        print(f"proof ({len(membership.proof)}):")
        for sibling in membership.proof:
            print(f"  {sibling}")

    return EXIT_SUCCESS
