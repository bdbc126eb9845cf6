"""
POD CLI

Command-line interface for hashing, signing and verifying PODs.

Usage:
    python -m pod_cli hash entries.json
    python -m pod_cli sign entries.json --out pod.json
    python -m pod_cli verify pod.json
    python -m pod_cli keygen
"""

__version__ = "0.1.0"
