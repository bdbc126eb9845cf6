"""
Test fixtures package for POD tests.

Organized into layers:
- common.py: keys, hash inputs, sample entries, known vectors and
  malformed inputs shared by all modules
- alternate_crypto.py: an independent implementation of the POD crypto
  helpers, used to cross-check the library

Usage:
    from fixtures.common import PRIVATE_KEY, make_sample_entries_1

    def test_something():
        pod = POD.sign(make_sample_entries_1(), PRIVATE_KEY)
"""

from .common import (
    EXPECTED_PUBLIC_KEY,
    PRIVATE_KEY,
    TEST_INTS_TO_HASH,
    TEST_PRIVATE_KEYS,
    TEST_STRINGS_TO_HASH,
    make_hello_entries,
    make_sample_entries_1,
    make_sample_entries_2,
)

__all__ = [
    "PRIVATE_KEY",
    "TEST_PRIVATE_KEYS",
    "EXPECTED_PUBLIC_KEY",
    "TEST_STRINGS_TO_HASH",
    "TEST_INTS_TO_HASH",
    "make_sample_entries_1",
    "make_sample_entries_2",
    "make_hello_entries",
]
