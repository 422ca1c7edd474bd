"""
CLI Root Command

Build a tree from an identifier list and print the root commitment.

Usage:
    allowlist root addresses.txt [--json]
    cat addresses.txt | allowlist root - --json
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from allowlist_cli.inputs import load_identifiers, resolve_hasher
from core.merkle.merkle_proofs import MerkleProver
from core.schemas.errors import AllowlistException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        identifiers = load_identifiers(args.source)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    logger.info(f"Building tree from {len(identifiers)} identifiers")

    try:
        prover = MerkleProver.from_identifiers(identifiers, resolve_hasher(args))
    except AllowlistException as e:
        if args.json:
            print(json.dumps(e.to_error_model().model_dump(), indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    commitment = prover.commitment()

    if args.json:
        print(json.dumps(commitment.model_dump(), indent=2))
    else:
        print(f"root: {commitment.root}")
        print(f"hash_algorithm: {commitment.hash_algorithm}")
        print(f"leaf_count: {commitment.leaf_count}")
        print(f"depth: {commitment.depth}")

    return EXIT_SUCCESS
