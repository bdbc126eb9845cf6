"""
Module 06 - POD Objects

Provides:
- PODContent: validated, sorted, content-addressed entries
- POD: content + signature + signer public key
"""
from .pod import POD
from .pod_content import EntryProof, PODContent

__all__ = ["POD", "PODContent", "EntryProof"]
