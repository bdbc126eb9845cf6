"""
CLI Sign Command

Sign an entries file and write a signed POD document.

Usage:
    pod sign entries.json [--key HEX] [--simplified] [--out PATH] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass
from typing import Any

from pod import POD, PODFormatException
from pod_cli.documents import SignedPODDocument, load_entries, save_signed_pod


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


@dataclass
class SignSummary:
    """Summary of a signing run for CLI output."""
    entries_path: str = ""
    output_path: str | None = None
    content_id: str = ""
    signer_public_key: str = ""
    signature: str = ""

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if d["output_path"] is None:
            del d["output_path"]
        return d


def sign_cmd(args: Namespace) -> int:
    """
    Execute the sign command.

    The key comes from --key, else from configuration (POD_PRIVATE_KEY).

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.cli_config
    simplified = args.simplified or config.output.simplified
    private_key = args.key or config.signing.private_key

    if not private_key:
        print(
            "Error: No private key. Pass --key or set POD_PRIVATE_KEY.",
            file=sys.stderr,
        )
        return EXIT_RUNTIME_ERROR

    try:
        entries = load_entries(args.entries_path, simplified=simplified)
        pod = POD.sign(entries, private_key)
    except (FileNotFoundError, PODFormatException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    logger.info(f"Signed {pod.content.size} entries, content_id={pod.content_id}")

    summary = SignSummary(
        entries_path=str(args.entries_path),
        content_id=str(pod.content_id),
        signer_public_key=pod.signer_public_key,
        signature=pod.signature,
    )

    if args.out:
        saved = save_signed_pod(pod, args.out, indent=config.output.json_indent)
        summary.output_path = str(saved)
        logger.info(f"Wrote signed POD to {saved}")

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    elif args.out:
        print(f"content_id: {summary.content_id}")
        print(f"signer_public_key: {summary.signer_public_key}")
        print(f"output: {summary.output_path}")
    else:
        print(SignedPODDocument.from_pod(pod).to_json(indent=config.output.json_indent))

    return EXIT_SUCCESS
