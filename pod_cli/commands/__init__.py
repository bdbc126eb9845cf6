"""
CLI command modules.
"""

from pod_cli.commands import content_id, keygen, sign, verify

__all__ = ["content_id", "keygen", "sign", "verify"]
