"""
CLI Document I/O

Reading entry files and reading/writing signed POD documents.

Signed POD document format:
    {
      "entries": {<exact-format entries>},
      "signature": "<128 hex chars>",
      "signerPublicKey": "<64 hex chars>"
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pod import (
    POD,
    ErrorCodes,
    PODEntries,
    PODFormatException,
    deserialize_pod_entries,
    pod_entries_from_simplified_json,
    serialize_pod_entries,
)


class SignedPODDocument(BaseModel):
    """On-disk shape of a signed POD."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    entries: dict[str, Any] = Field(..., description="Exact-format entries object")
    signature: str = Field(..., description="Packed signature, hex")
    signer_public_key: str = Field(
        ...,
        alias="signerPublicKey",
        description="Packed signer public key, hex",
    )

    @classmethod
    def from_pod(cls, pod: POD) -> "SignedPODDocument":
        entries = json.loads(serialize_pod_entries(pod.content.as_entries()))
        return cls(
            entries=entries,
            signature=pod.signature,
            signer_public_key=pod.signer_public_key,
        )

    def to_pod(self) -> POD:
        """Rebuild the POD. Checks formats only; the signature is not verified."""
        entries = deserialize_pod_entries(json.dumps(self.entries))
        return POD.load(entries, self.signature, self.signer_public_key)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.model_dump(by_alias=True), indent=indent, ensure_ascii=False)


def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file, raising FileNotFoundError with the path."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def load_entries(path: str | Path, simplified: bool = False) -> PODEntries:
    """Load entries from an exact- or simplified-format JSON file."""
    text = read_text(path)
    if simplified:
        return pod_entries_from_simplified_json(text)
    return deserialize_pod_entries(text)


def load_signed_pod(path: str | Path) -> POD:
    """
    Load a signed POD document.

    Raises:
        FileNotFoundError: If the file does not exist
        PODFormatException: If the document or any of its parts is malformed
    """
    text = read_text(path)
    try:
        document = SignedPODDocument.model_validate_json(text)
    except ValidationError as e:
        raise PODFormatException(
            f"Invalid signed POD document: {e.errors()[0]['msg']}",
            code=ErrorCodes.SERIALIZATION_ERROR,
            details={"path": str(path)},
        ) from e
    return document.to_pod()


def save_signed_pod(pod: POD, path: str | Path, indent: Optional[int] = 2) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SignedPODDocument.from_pod(pod).to_json(indent=indent) + "\n", encoding="utf-8")
    return path
