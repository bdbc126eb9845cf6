"""
Common test fixtures shared by all modules.

Provides:
- Test keys and the values derived from them
- Strings and integers to hash
- Sample entries factories
- Known vectors from circomlibjs and saved POD outputs
- Malformed keys, signatures, names and values

Saved outputs exist to detect breaking changes. If the sample inputs change,
update the expected outputs with them; otherwise think about why they moved.
"""

from typing import Any

from pod.schemas.values import (
    POD_CRYPTOGRAPHIC_MAX,
    POD_CRYPTOGRAPHIC_MIN,
    POD_INT_MAX,
    POD_INT_MIN,
    PODEntries,
    pod_cryptographic_value,
    pod_int_value,
    pod_string_value,
)


# =============================================================================
# Keys
# =============================================================================

PRIVATE_KEY = "0001020304050607080900010203040506070809000102030405060708090001"

TEST_PRIVATE_KEYS = [
    PRIVATE_KEY,
    "00112233445566778899aabbccddeeff00112233445566778899aabbccddeeff",
    "0000000000000000000000000000000000000000000000000000000000000000",
    "FFEEDDCCBBAA99887766554433221100FFEEDDCCBBAA99887766554433221100",
]

EXPECTED_PUBLIC_KEY = "c433f7a696b7aa3a5224efb3993baf0ccd9e92eecee0c29a3f6c8208a9e81d9e"

EXPECTED_PUBLIC_KEY_POINT = (
    13277427435165878497778222415993513565335242147425444199013288855685581939618,
    13622229784656158136036771217484571176836296686641868549125388198837476602820,
)


# =============================================================================
# Hash Inputs
# =============================================================================

TEST_STRINGS_TO_HASH = [
    "",
    "a",
    "b",
    "hello",
    "hello world",
    "Hello",
    "!@#$%^&*()_+[]{};':",
    " spaces are okay\t",
    "été",
    "\U0001f600",
    "owner",
    "pod_type",
]

TEST_INTS_TO_HASH = [
    0,
    1,
    2,
    3,
    123,
    0xDEADBEEF,
    POD_INT_MAX,
    POD_INT_MIN,
    POD_CRYPTOGRAPHIC_MAX,
]


# =============================================================================
# Known Vectors
# =============================================================================

# Poseidon (circomlib)
POSEIDON_1_2 = 7853200120776062878684798364095072458815029376092732009249414926327459813530
POSEIDON_1 = 18586133768512220936620570745912940619677854269274689475585506675881198879027
POSEIDON_T3_FIRST_CONSTANT = 0x0EE9A592BA9A9518D05986D656F40C2114C4993C11BB29938D21D47304CD8E6E

# BLAKE-512 of the empty string
BLAKE512_EMPTY = (
    "a8cfbbd73726062df0c6864dda65defe58ef0cc52a5625090fa17601e1eecd1b"
    "628e94f396ae402a00acc9eab77b4d4c2e852aaaa25a636d80af3fc7913ef5b8"
)

KECCAK256_EMPTY = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
KECCAK256_HELLO = "1c8aff950685c2ed4bc3174f3472287b56d9517b9c948127319a09a7a36deac8"

# circomlibjs "Sign (using Poseidon) a single 10 bytes from 0 to 9":
# the message is the little-endian integer of 000102030405060708090000
EDDSA_VECTOR_MESSAGE = 0x09080706050403020100
EDDSA_VECTOR_R8 = (
    11384336176656855268977457483345535180380036354188103142384839473266348197733,
    15383486972088797283337779941324724402501462225528836549661220478783371668959,
)
EDDSA_VECTOR_S = 1672775540645840396591609181675628451599263765380031905495115170613215233181
EDDSA_VECTOR_PACKED = (
    "dfedb4315d3f2eb4de2d3c510d7a987dcab67089c8ace06308827bf5bcbe02a2"
    "9d043ece562a8f82bfc0adb640c0107a7d3a27c1c7c1a6179a0da73de5c1b203"
)

# A point on the curve, and an (R8, S) pair that encodes
VALID_CURVE_POINT = (
    19879349823480797868120364375424621653830878247025192709471350836146439599027,
    7225418044708316876718756729591926814699419466870832454238122032268923115810,
)
VALID_SIGNATURE_R8 = (
    2761500685455248442045931126633580804486469170950780600207147306993842322749,
    7470920674419555099993516343830958292850298714433272421923039412950342163357,
)
VALID_SIGNATURE_S = 2008068972763198314434684370521945787982800179691435935299161494036401992969
VALID_PACKED_SIGNATURE = (
    "9ddb5d339c774911a3b4919d6e23e3d1fb6e486a116b187c96fb252b29648410"
    "09b54198965c357db1913fd82e6ff8b0340219dd6006dc1b32ff07d9d9867004"
)


# =============================================================================
# Sample Entries
# =============================================================================

OWNER = 18711405342588116796533073928767088921854096266145046362753928030796553161041


def make_sample_entries_1() -> PODEntries:
    """Entries covering every value type and the numeric bounds."""
    return {
        "E": pod_cryptographic_value(123),
        "F": pod_cryptographic_value(POD_CRYPTOGRAPHIC_MAX),
        "C": pod_string_value("hello"),
        "D": pod_string_value("foobar"),
        "A": pod_int_value(123),
        "B": pod_int_value(321),
        "G": pod_int_value(-7),
        "H": pod_int_value(8),
        "I": pod_int_value(9),
        "J": pod_int_value(10),
        "K": pod_int_value(POD_INT_MIN),
        "L": pod_int_value(POD_INT_MAX),
        "owner": pod_cryptographic_value(OWNER),
    }


def make_sample_entries_2() -> PODEntries:
    """Entries shaped like an event ticket."""
    return {
        "attendee": pod_cryptographic_value(OWNER),
        "eventID": pod_cryptographic_value(456),
        "ticketID": pod_cryptographic_value(999),
        "isConsumed": pod_int_value(0),
        "isRevoked": pod_int_value(0),
        "pod_type": pod_string_value("zupass.ticket"),
        "ticketHolderName": pod_string_value("Alice"),
        "ticketHolderEmail": pod_string_value("alice@example.com"),
        "timestampConsumed": pod_int_value(1609459200),
    }


def make_hello_entries() -> PODEntries:
    """The two-entry record {"a": "hello", "b": 123}."""
    return {
        "a": pod_string_value("hello"),
        "b": pod_int_value(123),
    }


EXPECTED_CONTENT_ID_1 = 11896275148956897181744809161453848165472072522589526040227789626818465247015
EXPECTED_SIGNATURE_1 = (
    "9d57d3942f1d7cd13d32b6bcebb38e3a7fe70af6de1e88ddf135c4c140f9612a"
    "f84ccd62b4f5339ab2a63fca92e2502b6e03c29a9bf8ff8479b2102e139caa00"
)

EXPECTED_CONTENT_ID_2 = 15222265066292176843399901826772507564685974436755255872163012496283480357754
EXPECTED_SIGNATURE_2 = (
    "1897f4a037296c0e073623360ebf5f7721731824d8c8b6a80aa30cc79086c42d"
    "a27a91304fcf92b5e65d4740c3b84efc1a995da474b96fafcc62548164da7d03"
)

EXPECTED_HELLO_CONTENT_ID = 13097945297502665019331255333081407477384192382299017334784904242051926897448
EXPECTED_HELLO_SIGNATURE = (
    "25c44b30fb49ade03180c41fe2702726a2441c2e9a171f31a6f2de8fb8e5d20f"
    "f4ff425bd361fec93236f4f084a3b3358b5dd3a05955425ebb1f0f9b0c503d01"
)

# {"a": "hello"} alone: H(nameHash("a"), stringHash("hello"))
EXPECTED_SINGLE_ENTRY_CONTENT_ID = 4052279642465224226687414654714801216398951729792527747104360372469341064298


# =============================================================================
# Malformed Inputs
# =============================================================================

_LONG_HEX = (
    "00112233445566778899AABBCCDDEEFF00112233445566778899aabbccddeeff"
    "00112233445566778899AABBCCDDEEFF00112233445566778899aabbccddeeff"
)

BAD_PRIVATE_KEY_INPUTS: list[Any] = [
    "",
    "password",
    "12345678901234567890123456789012",
    bytes.fromhex(_LONG_HEX),
    bytes.fromhex("1122334455"),
    None,
    12345,
    True,
]

BAD_PRIVATE_KEY_STRINGS: list[Any] = [
    "",
    "password",
    "12345",
    _LONG_HEX,
    "0x00112233445566778899AABBCCDDEEFF00112233445566778899aabbccddeeff",
    "00112233445566778899AABBCCDDEEFF00112233445566778899iijjkkllmmnn",
    " 00112233445566778899aabbccddeeff00112233445566778899aabbccddeeff",
    None,
    12345,
]

BAD_PUBLIC_KEY_INPUTS: list[Any] = [
    "",
    "password",
    None,
    12345,
    [],
    [1, 2, 3],
    [VALID_CURVE_POINT[0], VALID_CURVE_POINT[1] + 10**75],
    [str(VALID_CURVE_POINT[0]), str(VALID_CURVE_POINT[1] + 10**75)],
    [0, 1],
    ["0x12", "zz"],
]

BAD_PUBLIC_KEY_STRINGS: list[Any] = [
    "",
    "password",
    "12345",
    _LONG_HEX,
    "0x00112233445566778899AABBCCDDEEFF00112233445566778899aabbccddeeff",
    "00112233445566778899AABBCCDDEEFF00112233445566778899iijjkkllmmnn",
    "c433f7a696b7aa3a5224efb3993baf0ccd9e92eecee0c29a3f6c8208a9e81fff",
    None,
    12345,
]

BAD_SIGNATURE_INPUTS: list[Any] = [
    "",
    "password",
    None,
    12345,
    [],
    [0, 1],
    ["0", "1"],
    {
        "R8": [VALID_SIGNATURE_R8[0], VALID_SIGNATURE_R8[1] + 2 * 10**75],
        "S": VALID_SIGNATURE_S,
    },
    {"R8": list(VALID_SIGNATURE_R8)},
    {"R8": list(VALID_SIGNATURE_R8), "S": "not a number"},
    bytes(10),
]

BAD_SIGNATURE_STRINGS: list[Any] = [
    "",
    "password",
    "12345",
    _LONG_HEX,
    _LONG_HEX + "00112233445566778899AABBCCDDEEFF00112233445566778899aabbccddeeff",
    "0x00112233445566778899AABBCCDDEEFF00112233445566778899aabbccddeeff",
    "00112233445566778899AABBCCDDEEFF00112233445566778899iijjkkllmmnn",
    VALID_PACKED_SIGNATURE[:61] + "fff" + VALID_PACKED_SIGNATURE[64:],
    VALID_PACKED_SIGNATURE[:64] + "_" + VALID_PACKED_SIGNATURE[64:],
    None,
    12345,
]

VALID_NAMES = [
    "validCamelCase",
    "ALL_CAPS_IDENTIFIER",
    "_prefix",
    "_",
    "A",
    "a",
    "_1",
    "abc123",
    "xyz123abc",
    "no_size_limit_" * 20,
    "pod_type",
]

BAD_NAMES: list[Any] = [
    "",
    "1",
    "0x123",
    "123abc",
    "1_2_3",
    "foo.bar.baz",
    "foo:bar",
    ":",
    "!bang",
    "no spaces",
    "no\ttabs",
    "trailing_newline\n",
    "café",
    None,
    123,
    bytes.fromhex(PRIVATE_KEY),
]

VALID_VALUES: list[dict[str, Any]] = [
    {"type": "string", "value": "hello"},
    {"type": "string", "value": "!@#$%^&*()_+[]{};':"},
    {"type": "string", "value": " spaces are okay\t"},
    {"type": "string", "value": "no_size_limit_" * 20},
    {"type": "cryptographic", "value": 0},
    {"type": "cryptographic", "value": 123},
    {"type": "cryptographic", "value": POD_CRYPTOGRAPHIC_MIN},
    {"type": "cryptographic", "value": POD_CRYPTOGRAPHIC_MAX},
    {"type": "int", "value": 0},
    {"type": "int", "value": 123},
    {"type": "int", "value": -123},
    {"type": "int", "value": POD_INT_MIN},
    {"type": "int", "value": POD_INT_MAX},
]

BAD_VALUES: list[Any] = [
    None,
    {},
    {"type": "int"},
    {"value": 0},
    {"type": None, "value": 0},
    {"type": "string", "value": None},
    {"type": "something", "value": 0},
    {"type": "bigint", "value": 0},
    {"type": "something", "value": "something"},
    {"type": "string", "value": 0},
    {"type": "string", "value": 123},
    {"type": "cryptographic", "value": "hello"},
    {"type": "cryptographic", "value": "123"},
    {"type": "cryptographic", "value": 1.5},
    {"type": "cryptographic", "value": True},
    {"type": "cryptographic", "value": -1},
    {"type": "cryptographic", "value": POD_CRYPTOGRAPHIC_MIN - 1},
    {"type": "cryptographic", "value": POD_CRYPTOGRAPHIC_MAX + 1},
    {"type": "int", "value": "hello"},
    {"type": "int", "value": 12.0},
    {"type": "int", "value": False},
    {"type": "int", "value": POD_INT_MIN - 1},
    {"type": "int", "value": POD_INT_MAX + 1},
    {"type": "int", "value": 1, "extra": 2},
    "hello",
    123,
]
