"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m allowlist_cli root <file|-> [--json]
    python -m allowlist_cli proof <file|-> <identifier> [--json]
    python -m allowlist_cli verify <identifier> --root HEX --proof HEX [HEX ...] [--leaf] [--json]
    python -m allowlist_cli show <file|-> [--json]
    python -m allowlist_cli config --init

Environment Variables:
    ALLOWLIST_HASH_ALGORITHM    keccak256 (default) or sha256
    ALLOWLIST_LOG_LEVEL         Log level (default: INFO)
    ALLOWLIST_LOG_FILE          Optional log file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from allowlist_cli.commands import root, proof, verify, show
from core.config.runtime import get_default_config_template, load_config
from core.crypto.hashing import HASH_FUNCTIONS


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="allowlist",
        description="Allowlist Merkle CLI - Build root commitments, generate and verify membership proofs.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./allowlist.json or ~/.config/allowlist/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--hash",
        type=str,
        default=None,
        choices=sorted(HASH_FUNCTIONS),
        help="Hash algorithm (overrides config, default: keccak256)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Compute the root commitment of an identifier list",
        description="Build the Merkle tree and print the root to publish on-chain.",
    )
    root_parser.add_argument(
        "source",
        type=str,
        help="File with one 0x identifier per line ('-' for stdin)",
    )
    root_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    root_parser.set_defaults(func=root.root_cmd)

    # --- proof command ---
    proof_parser = subparsers.add_parser(
        "proof",
        help="Generate a membership proof",
        description="Build the Merkle tree and print the sibling path for one identifier.",
    )
    proof_parser.add_argument(
        "source",
        type=str,
        help="File with one 0x identifier per line ('-' for stdin)",
    )
    proof_parser.add_argument(
        "identifier",
        type=str,
        help="0x identifier to prove",
    )
    proof_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    proof_parser.set_defaults(func=proof.proof_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a membership proof offline",
        description="Fold an identifier (or leaf digest) with its proof and compare to the root.",
    )
    verify_parser.add_argument(
        "value",
        type=str,
        help="0x identifier, or leaf digest with --leaf",
    )
    verify_parser.add_argument(
        "--root",
        type=str,
        required=True,
        help="Published 0x root",
    )
    verify_parser.add_argument(
        "--proof",
        type=str,
        nargs="*",
        default=[],
        help="Sibling digests, leaf level first",
    )
    verify_parser.add_argument(
        "--leaf",
        action="store_true",
        default=False,
        help="Treat VALUE as an already-hashed leaf digest",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON report",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- show command ---
    show_parser = subparsers.add_parser(
        "show",
        help="Print the full tree",
        description="Print every level of the tree, root first.",
    )
    show_parser.add_argument(
        "source",
        type=str,
        help="File with one 0x identifier per line ('-' for stdin)",
    )
    show_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output levels as JSON",
    )
    show_parser.set_defaults(func=show.show_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="allowlist.json",
        help="Path for config file (default: allowlist.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (ALLOWLIST_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: allowlist config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed or not found)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
