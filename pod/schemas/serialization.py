"""
Module 07 - Serialization Protocols
File: serialization.py

Purpose: JSON codecs for whole POD entry mappings.

Two formats are supported:
- Exact: {"name": {"type": "int", "value": "123"}, ...}. Every value keeps
  its type. Numeric values are written as decimal strings.
- Simplified: {"name": 123, ...}. Strings stay strings; numeric values are
  bare JSON integers. Types are inferred on load, so a small cryptographic
  value comes back as int.

Both writers emit names in canonical (sorted) order.
"""

import json
import re
from typing import Any, Optional

from .errors import ErrorCodes, PODFormatException
from .values import (
    POD_CRYPTOGRAPHIC_MAX,
    POD_INT_MAX,
    POD_INT_MIN,
    PODEntries,
    PODValue,
    check_bigint_bounds,
    check_pod_entries,
    check_pod_name,
    check_pod_value,
    is_pod_numeric_value,
)

# Compact separators, used when no indent is requested
CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")

_DECIMAL_REGEX = re.compile(r"-?[0-9]+")


def _dumps(obj: Any, indent: Optional[int]) -> str:
    return json.dumps(
        obj,
        indent=indent,
        separators=CANONICAL_JSON_SEPARATORS if indent is None else None,
        ensure_ascii=False,
    )


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise PODFormatException(
                f"Duplicate key {key!r} in POD JSON.",
                label=key,
                code=ErrorCodes.SERIALIZATION_ERROR,
            )
        result[key] = value
    return result


def _reject_constant(name: str) -> Any:
    raise PODFormatException(
        f"Non-finite number {name} is not allowed in POD JSON.",
        code=ErrorCodes.SERIALIZATION_ERROR,
    )


def _loads_object(text: Any) -> dict[str, Any]:
    """Parse a JSON document that must be an object."""
    if not isinstance(text, (str, bytes, bytearray)):
        raise PODFormatException(
            f"POD JSON must be text, got {type(text).__name__}.",
            code=ErrorCodes.SERIALIZATION_ERROR,
        )
    try:
        parsed = json.loads(
            text,
            object_pairs_hook=_reject_duplicates,
            parse_constant=_reject_constant,
        )
    except ValueError as e:
        raise PODFormatException(
            f"Invalid POD JSON: {e}",
            code=ErrorCodes.SERIALIZATION_ERROR,
            details={"error": str(e)},
        ) from e
    if not isinstance(parsed, dict):
        raise PODFormatException(
            f"POD JSON must be an object, got {type(parsed).__name__}.",
            code=ErrorCodes.SERIALIZATION_ERROR,
        )
    return parsed


# =============================================================================
# Exact Format
# =============================================================================

def pod_value_to_json(value: PODValue) -> dict[str, Any]:
    """Render one value in the exact format."""
    if is_pod_numeric_value(value):
        return {"type": value.type, "value": str(value.value)}
    return {"type": value.type, "value": value.value}


def pod_value_from_json(label: str, data: Any) -> PODValue:
    """
    Parse one value in the exact format.

    Numeric payloads may be decimal strings or JSON integers.
    """
    if not isinstance(data, dict):
        raise PODFormatException(
            f"Invalid value for entry {label}.  Expected an object with "
            f"'type' and 'value', got {type(data).__name__}.",
            label=label,
            code=ErrorCodes.SERIALIZATION_ERROR,
        )
    value_type = data.get("type")
    payload = data.get("value")
    if value_type in ("int", "cryptographic") and isinstance(payload, str):
        if not _DECIMAL_REGEX.fullmatch(payload):
            raise PODFormatException(
                f"Invalid value for entry {label}.  {payload!r} is not a "
                f"decimal integer.",
                label=label,
            )
        try:
            number = int(payload, 10)
        except ValueError as e:
            raise PODFormatException(
                f"Invalid value for entry {label}.  {e}",
                label=label,
            ) from e
        data = {**data, "value": number}
    return check_pod_value(label, data)


def serialize_pod_entries(entries: PODEntries, indent: Optional[int] = None) -> str:
    """
    Serialize entries to exact-format JSON.

    Args:
        entries: Mapping of names to PODValues
        indent: Optional JSON indent; compact when None

    Returns:
        JSON text with names in sorted order

    Raises:
        PODFormatException: On an invalid name or value
    """
    checked = check_pod_entries(entries)
    return _dumps(
        {name: pod_value_to_json(checked[name]) for name in sorted(checked)},
        indent,
    )


def deserialize_pod_entries(text: str) -> PODEntries:
    """
    Parse exact-format JSON into entries.

    Raises:
        PODFormatException: On malformed JSON, names or values
    """
    parsed = _loads_object(text)
    entries: PODEntries = {}
    for name, data in parsed.items():
        check_pod_name(name)
        entries[name] = pod_value_from_json(name, data)
    return entries


# =============================================================================
# Simplified Format
# =============================================================================

def pod_entries_to_simplified_json(entries: PODEntries, indent: Optional[int] = None) -> str:
    """
    Serialize entries to simplified JSON: strings as text, numbers as integers.

    Type information is dropped; see pod_entries_from_simplified_json.
    """
    checked = check_pod_entries(entries)
    return _dumps({name: checked[name].value for name in sorted(checked)}, indent)


def _simplified_value(name: str, raw: Any) -> PODValue:
    if isinstance(raw, str):
        return PODValue(type="string", value=raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        if raw > POD_INT_MAX:
            check_bigint_bounds(name, raw, POD_INT_MIN, POD_CRYPTOGRAPHIC_MAX)
            return PODValue(type="cryptographic", value=raw)
        check_bigint_bounds(name, raw, POD_INT_MIN, POD_INT_MAX)
        return PODValue(type="int", value=raw)
    raise PODFormatException(
        f"Invalid value for entry {name}.  Simplified POD JSON only supports "
        f"strings and integers, got {type(raw).__name__}.",
        label=name,
    )


def pod_entries_from_simplified_json(text: str) -> PODEntries:
    """
    Parse simplified JSON into entries.

    Type inference:
    - string -> string
    - integer in [POD_INT_MIN, POD_INT_MAX] -> int
    - integer in (POD_INT_MAX, POD_CRYPTOGRAPHIC_MAX] -> cryptographic
    - anything else -> PODFormatException

    Raises:
        PODFormatException: On malformed JSON, names or unsupported values
    """
    parsed = _loads_object(text)
    entries: PODEntries = {}
    for name, raw in parsed.items():
        check_pod_name(name)
        entries[name] = _simplified_value(name, raw)
    return entries


__all__ = [
    "CANONICAL_JSON_SEPARATORS",
    "pod_value_to_json",
    "pod_value_from_json",
    "serialize_pod_entries",
    "deserialize_pod_entries",
    "pod_entries_to_simplified_json",
    "pod_entries_from_simplified_json",
]
