"""
CLI Verify Command

Verify a signed POD document offline:
- Parse the document and check key/signature formats
- Recompute the content ID from the entries
- Check the signature against the signer public key

Usage:
    pod verify pod.json [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field
from typing import Any

from pod import PODFormatException
from pod_cli.documents import load_signed_pod


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Summary of POD verification for CLI output."""
    pod_path: str = ""
    content_id: str = ""
    signer_public_key: str = ""
    signature_ok: bool = False
    entry_count: int = 0
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if not d["errors"]:
            del d["errors"]
        return d


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    print(f"pod: {summary.pod_path}")
    print(f"content_id: {summary.content_id}")
    print(f"signer_public_key: {summary.signer_public_key}")
    print(f"entries: {summary.entry_count}")
    print(f"signature_ok: {str(summary.signature_ok).lower()}")

    if summary.errors:
        print(f"\nerrors ({len(summary.errors)}):")
        for err in summary.errors:
            print(f"  ✗ {err}")


def print_summary_json(summary: VerifySummary) -> None:
    """Print summary as JSON."""
    print(json.dumps(summary.to_dict(), indent=2))


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 valid, 2 invalid signature, 1 malformed input)
    """
    try:
        pod = load_signed_pod(args.pod_path)
        signature_ok = pod.verify_signature()
    except (FileNotFoundError, PODFormatException) as e:
        print(f"Error loading POD: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    summary = VerifySummary(
        pod_path=str(args.pod_path),
        content_id=str(pod.content_id),
        signer_public_key=pod.signer_public_key,
        signature_ok=signature_ok,
        entry_count=pod.content.size,
    )
    if not signature_ok:
        summary.errors.append("Signature does not match content ID and signer key")

    if args.json:
        print_summary_json(summary)
    else:
        print_summary_human(summary)

    if signature_ok:
        logger.info("Verification passed")
        return EXIT_SUCCESS

    logger.warning("Verification failed")
    return EXIT_VERIFICATION_FAILED
