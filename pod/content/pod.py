"""
Module 06 - POD
Signed POD: content plus the signer's signature over its content ID.

Owner: Protocol Engineer
Module ID: M06
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pod.content.pod_content import PODContent
from pod.crypto.context import CryptoContext
from pod.crypto.encoding import check_public_key_format, check_signature_format
from pod.crypto.signatures import sign_pod_root, verify_pod_root_signature


class POD:
    """
    A POD: entries, signature and signer public key.

    POD.sign() produces a valid POD. POD.load() only checks formats; call
    verify_signature() before trusting loaded data.
    """

    def __init__(self, content: PODContent, signature: str, signer_public_key: str) -> None:
        self._content = content
        self._signature = signature
        self._signer_public_key = signer_public_key

    @classmethod
    def sign(
        cls,
        entries: Mapping[str, Any],
        private_key: Any,
        context: Optional[CryptoContext] = None,
    ) -> "POD":
        """
        Build content from entries and sign its content ID.

        Raises:
            PODFormatException: On invalid entries or a malformed private key
        """
        content = PODContent.from_entries(entries, context=context)
        signed = sign_pod_root(content.content_id, private_key, context=context)
        return cls(content, signed.signature, signed.public_key)

    @classmethod
    def load(
        cls,
        entries: Mapping[str, Any],
        signature: str,
        signer_public_key: str,
        context: Optional[CryptoContext] = None,
    ) -> "POD":
        """
        Rebuild a POD from its parts. Checks formats, not the signature.

        Raises:
            PODFormatException: On invalid entries, signature or key syntax
        """
        check_signature_format(signature)
        check_public_key_format(signer_public_key)
        content = PODContent.from_entries(entries, context=context)
        return cls(content, signature.lower(), signer_public_key.lower())

    @property
    def content(self) -> PODContent:
        return self._content

    @property
    def content_id(self) -> int:
        return self._content.content_id

    @property
    def signature(self) -> str:
        return self._signature

    @property
    def signer_public_key(self) -> str:
        return self._signer_public_key

    def verify_signature(self, context: Optional[CryptoContext] = None) -> bool:
        """
        Check the signature against the content ID and signer key.

        Raises:
            PODFormatException: If the stored signature or key does not decode
        """
        return verify_pod_root_signature(
            self.content_id,
            self._signature,
            self._signer_public_key,
            context=context,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, POD):
            return NotImplemented
        return (
            self._content == other._content
            and self._signature == other._signature
            and self._signer_public_key == other._signer_public_key
        )

    def __hash__(self) -> int:
        return hash((self.content_id, self._signature, self._signer_public_key))

    def __repr__(self) -> str:
        return (
            f"POD(content_id={self.content_id}, "
            f"signer_public_key={self._signer_public_key!r})"
        )


__all__ = ["POD"]
