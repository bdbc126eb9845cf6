"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m pod_cli hash <entries.json> [--simplified] [--json]
    python -m pod_cli sign <entries.json> [--key HEX] [--simplified] [--out PATH] [--json]
    python -m pod_cli verify <pod.json> [--json]
    python -m pod_cli keygen [--json]
    python -m pod_cli config [--init|--show] [--path FILE]

Environment Variables:
    POD_PRIVATE_KEY         Default signing key (64 hex chars)
    POD_JSON_INDENT         JSON indent for written documents (default: 2)
    POD_SIMPLIFIED_JSON     Read entries in simplified format (default: false)
    POD_LOG_LEVEL           Log level (default: INFO)
    POD_LOG_FILE            Also write logs to this file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from pod_cli import __version__
from pod_cli.commands import content_id, keygen, sign, verify
from pod_cli.config import get_default_config_template, load_config


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
        prog="pod",
        description="POD CLI - Hash, sign and verify content-addressed PODs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./pod.yaml or ~/.config/pod/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Compute the content ID of an entries file",
        description="Validate entries and print their Merkle root (content ID).",
    )
    hash_parser.add_argument(
        "entries_path",
        type=str,
        help="Path to entries JSON",
    )
    hash_parser.add_argument(
        "--simplified",
        action="store_true",
        default=False,
        help="Read entries in simplified JSON format",
    )
    hash_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    hash_parser.set_defaults(func=content_id.content_id_cmd)

    # --- sign command ---
    sign_parser = subparsers.add_parser(
        "sign",
        help="Sign an entries file",
        description="Build a POD from entries and sign its content ID.",
    )
    sign_parser.add_argument(
        "entries_path",
        type=str,
        help="Path to entries JSON",
    )
    sign_parser.add_argument(
        "--key", "-k",
        type=str,
        default=None,
        help="Private key, 64 hex chars (default: from config / POD_PRIVATE_KEY)",
    )
    sign_parser.add_argument(
        "--simplified",
        action="store_true",
        default=False,
        help="Read entries in simplified JSON format",
    )
    sign_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Write the signed POD document here instead of stdout",
    )
    sign_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    sign_parser.set_defaults(func=sign.sign_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a signed POD document",
        description="Recompute the content ID and check the signature.",
    )
    verify_parser.add_argument(
        "pod_path",
        type=str,
        help="Path to signed POD JSON",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON report",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- keygen command ---
    keygen_parser = subparsers.add_parser(
        "keygen",
        help="Generate a random key pair",
        description="Print a fresh private key and its packed public key.",
    )
    keygen_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    keygen_parser.set_defaults(func=keygen.keygen_cmd)

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
        help="Show current configuration (private key redacted)",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="pod.yaml",
        help="Path for config file (default: pod.yaml)",
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
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (POD_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        config_path = Path(args.path) if args.path else None
        if config_path is not None and config_path.exists():
            config = load_config(config_path)
        else:
            config = args.cli_config
        print(json.dumps(config.to_dict(), indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: pod config [--init|--show] [--path FILE]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
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
