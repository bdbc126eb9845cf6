"""
Module 01 - Values, Names & Errors
File: __init__.py

Purpose: Export the public API for the schemas module.
This is the main entry point for other modules to import value
definitions, error types and JSON codecs.
"""

# Error models and exceptions
from .errors import (
    ErrorCodes,
    PODBoundsException,
    PODCurvePointException,
    PODEntryNotFoundException,
    PODError,
    PODException,
    PODFormatException,
)

# Values, names and bounds
from .values import (
    POD_CRYPTOGRAPHIC_MAX,
    POD_CRYPTOGRAPHIC_MIN,
    POD_INT_MAX,
    POD_INT_MIN,
    POD_NAME_REGEX,
    PODEntries,
    PODValue,
    PODValueType,
    check_bigint_bounds,
    check_pod_entries,
    check_pod_name,
    check_pod_value,
    clone_optional_pod_value,
    clone_pod_entries,
    clone_pod_value,
    get_pod_value_for_circuit,
    is_pod_numeric_value,
    pod_cryptographic_value,
    pod_int_value,
    pod_string_value,
    require_type,
)

# JSON codecs
from .serialization import (
    CANONICAL_JSON_SEPARATORS,
    deserialize_pod_entries,
    pod_entries_from_simplified_json,
    pod_entries_to_simplified_json,
    pod_value_from_json,
    pod_value_to_json,
    serialize_pod_entries,
)

__all__ = [
    # Errors
    "ErrorCodes",
    "PODError",
    "PODException",
    "PODFormatException",
    "PODBoundsException",
    "PODCurvePointException",
    "PODEntryNotFoundException",
    # Values
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
    # Serialization
    "CANONICAL_JSON_SEPARATORS",
    "pod_value_to_json",
    "pod_value_from_json",
    "serialize_pod_entries",
    "deserialize_pod_entries",
    "pod_entries_to_simplified_json",
    "pod_entries_from_simplified_json",
]
