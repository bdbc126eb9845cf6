"""
CLI Keygen Command

Generate a random private key and print it with its public key.

Usage:
    pod keygen [--json]
"""

from __future__ import annotations

import json
import logging
import secrets
from argparse import Namespace

from pod import derive_pod_public_key, encode_private_key
from pod.crypto.eddsa import PRIVATE_KEY_SIZE


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0


def keygen_cmd(args: Namespace) -> int:
    """
    Execute the keygen command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    private_key = encode_private_key(secrets.token_bytes(PRIVATE_KEY_SIZE))
    public_key = derive_pod_public_key(private_key)
    logger.debug(f"Generated key pair with public key {public_key}")

    if args.json:
        print(json.dumps({"private_key": private_key, "public_key": public_key}, indent=2))
    else:
        print(f"private_key: {private_key}")
        print(f"public_key: {public_key}")

    return EXIT_SUCCESS
