"""
Module 01 - Values, Names & Errors
File: values.py

Purpose: Typed POD values, entry-name syntax and numeric bounds.

A POD value is a tagged union with exactly three variants:
- string: arbitrary text
- int: signed 64-bit integer
- cryptographic: unsigned element of the BN254 scalar field

Values are immutable. Construction and check_pod_value run the same
checks, so a PODValue instance is always valid for its tag.
"""

import re
from collections.abc import Mapping
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, model_validator

from pod.crypto.field import BABY_JUB_NEGATIVE_ONE
from pod.schemas.errors import ErrorCodes, PODBoundsException, PODFormatException


# =============================================================================
# Bounds & Syntax
# =============================================================================

POD_CRYPTOGRAPHIC_MIN: int = 0
POD_CRYPTOGRAPHIC_MAX: int = BABY_JUB_NEGATIVE_ONE

POD_INT_MIN: int = -(1 << 63)
POD_INT_MAX: int = (1 << 63) - 1

POD_NAME_REGEX = re.compile(r"^[A-Za-z_]\w*$", re.ASCII)

PODValueType = Literal["string", "int", "cryptographic"]

_NUMERIC_BOUNDS: dict[str, tuple[int, int]] = {
    "int": (POD_INT_MIN, POD_INT_MAX),
    "cryptographic": (POD_CRYPTOGRAPHIC_MIN, POD_CRYPTOGRAPHIC_MAX),
}


# =============================================================================
# Primitive Checks
# =============================================================================

def _type_name(value: Any) -> str:
    return type(value).__name__


def require_type(label: str, value: Any, expected: Union[type, tuple[type, ...]]) -> Any:
    """
    Check the native Python type of a value.

    bool is never accepted where int is expected.

    Raises:
        PODFormatException: If the value has the wrong type
    """
    expected_types = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool) and bool not in expected_types:
        ok = False
    else:
        ok = isinstance(value, expected_types)
    if not ok:
        names = " or ".join(t.__name__ for t in expected_types)
        raise PODFormatException(
            f"Invalid value for entry {label}.  Expected type {names}, "
            f"got {_type_name(value)}.",
            label=label,
        )
    return value


def check_bigint_bounds(label: str, value: int, minimum: int, maximum: int) -> int:
    """
    Check that minimum <= value <= maximum.

    Raises:
        PODBoundsException: If the value is outside the closed interval
    """
    if value < minimum or value > maximum:
        raise PODBoundsException(
            f"Invalid value for entry {label}.  Value {value} outside supported "
            f"bounds: (min {minimum}, max {maximum}).",
            label=label,
            minimum=minimum,
            maximum=maximum,
        )
    return value


def check_pod_name(name: Any) -> str:
    """
    Check that a name is a valid POD entry name.

    Returns:
        The name, unchanged

    Raises:
        PODFormatException: If the name is not a string or has invalid syntax
    """
    if not isinstance(name, str):
        raise PODFormatException(
            f"POD name must be a string, got {_type_name(name)}.",
            code=ErrorCodes.INVALID_NAME,
        )
    if not POD_NAME_REGEX.fullmatch(name):
        raise PODFormatException(
            f"Invalid POD name {name!r}.  Names must start with a letter or "
            f"underscore and contain only alphanumerics and underscores.",
            label=name,
            code=ErrorCodes.INVALID_NAME,
        )
    return name


def _check_typed_payload(label: str, value_type: Any, payload: Any) -> None:
    if value_type == "string":
        require_type(label, payload, str)
    elif value_type in _NUMERIC_BOUNDS:
        require_type(label, payload, int)
        minimum, maximum = _NUMERIC_BOUNDS[value_type]
        check_bigint_bounds(label, payload, minimum, maximum)
    else:
        raise PODFormatException(
            f"Invalid POD value type {value_type!r} for entry {label}.",
            label=label,
        )


# =============================================================================
# Value Model
# =============================================================================

class PODValue(BaseModel):
    """
    A single typed POD value.

    Equality is structural: two values are equal when both tag and payload
    are equal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    type: PODValueType
    value: Union[str, int]

    @model_validator(mode="before")
    @classmethod
    def _check_payload(cls, data: Any, info: ValidationInfo) -> Any:
        label = "value"
        if info.context and "label" in info.context:
            label = info.context["label"]
        if isinstance(data, PODValue):
            return data
        if not isinstance(data, Mapping):
            raise PODFormatException(
                f"Invalid value for entry {label}.  Expected a POD value, "
                f"got {_type_name(data)}.",
                label=label,
            )
        if "type" not in data or "value" not in data:
            raise PODFormatException(
                f"Invalid value for entry {label}.  POD values need both "
                f"'type' and 'value'.",
                label=label,
            )
        _check_typed_payload(label, data["type"], data["value"])
        return data


PODEntries = dict[str, PODValue]


def pod_string_value(value: str) -> PODValue:
    return PODValue(type="string", value=value)


def pod_int_value(value: int) -> PODValue:
    return PODValue(type="int", value=value)


def pod_cryptographic_value(value: int) -> PODValue:
    return PODValue(type="cryptographic", value=value)


# =============================================================================
# Value & Entry Checks
# =============================================================================

def check_pod_value(label: str, value: Any) -> PODValue:
    """
    Validate a POD value.

    Args:
        label: Entry name used in error messages
        value: A PODValue, or a mapping with "type" and "value" keys

    Returns:
        The PODValue itself, or a new PODValue built from the mapping

    Raises:
        PODFormatException: On a missing or unknown tag, a payload of the
            wrong type, or a numeric payload outside its bounds
    """
    if isinstance(value, PODValue):
        return value
    try:
        return PODValue.model_validate(value, context={"label": label})
    except ValidationError as e:
        raise PODFormatException(
            f"Invalid value for entry {label}.  {e.errors()[0]['msg']}.",
            label=label,
        ) from e


def check_pod_entries(entries: Any) -> PODEntries:
    """
    Validate every name and value of an entries mapping.

    Returns:
        A new dict of validated PODValues, in the input's order
    """
    if not isinstance(entries, Mapping):
        raise PODFormatException(
            f"POD entries must be a mapping, got {_type_name(entries)}.",
        )
    checked: PODEntries = {}
    for name, value in entries.items():
        check_pod_name(name)
        checked[name] = check_pod_value(name, value)
    return checked


def is_pod_numeric_value(value: PODValue) -> bool:
    """Check whether a value's payload is an integer (int or cryptographic)."""
    return value.type in _NUMERIC_BOUNDS


def get_pod_value_for_circuit(value: PODValue) -> Optional[int]:
    """
    Get the payload a ZK circuit would see for this value.

    Numeric values are represented directly; strings only through their
    hash, so None is returned for them.
    """
    if is_pod_numeric_value(value):
        return int(value.value)
    return None


# =============================================================================
# Cloning
# =============================================================================

def clone_pod_value(value: PODValue) -> PODValue:
    return value.model_copy()


def clone_optional_pod_value(value: Optional[PODValue]) -> Optional[PODValue]:
    if value is None:
        return None
    return clone_pod_value(value)


def clone_pod_entries(entries: Mapping[str, PODValue]) -> PODEntries:
    return {name: clone_pod_value(value) for name, value in entries.items()}


__all__ = [
    "POD_CRYPTOGRAPHIC_MIN",
    "POD_CRYPTOGRAPHIC_MAX",
    "POD_INT_MIN",
    "POD_INT_MAX",
    "POD_NAME_REGEX",
    "PODValueType",
    "PODValue",
    "PODEntries",
    "pod_string_value",
    "pod_int_value",
    "pod_cryptographic_value",
    "require_type",
    "check_bigint_bounds",
    "check_pod_name",
    "check_pod_value",
    "check_pod_entries",
    "is_pod_numeric_value",
    "get_pod_value_for_circuit",
    "clone_pod_value",
    "clone_optional_pod_value",
    "clone_pod_entries",
]
