"""
CLI Hash Command

Compute the content ID of an entries file.

Usage:
    pod hash entries.json [--simplified] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from pod import PODContent, PODFormatException
from pod_cli.documents import load_entries


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def content_id_cmd(args: Namespace) -> int:
    """
    Execute the hash command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.cli_config
    simplified = args.simplified or config.output.simplified

    try:
        entries = load_entries(args.entries_path, simplified=simplified)
        content = PODContent.from_entries(entries)
    except (FileNotFoundError, PODFormatException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    logger.info(f"Hashed {content.size} entries from {args.entries_path}")

    if args.json:
        print(json.dumps({
            "content_id": str(content.content_id),
            "size": content.size,
            "names": content.list_names(),
        }, indent=2))
    else:
        print(content.content_id)

    return EXIT_SUCCESS
