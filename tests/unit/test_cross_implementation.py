"""
Cross-Implementation Tests
Checks pod.crypto against tests/fixtures/alternate_crypto.py, which computes
the same values by different arithmetic (Montgomery Poseidon, projective
curve points, Cipolla square roots).
"""
import pytest

from fixtures import alternate_crypto as alt
from fixtures.common import (
    EXPECTED_CONTENT_ID_1,
    EXPECTED_CONTENT_ID_2,
    EXPECTED_HELLO_CONTENT_ID,
    EXPECTED_PUBLIC_KEY,
    PRIVATE_KEY,
    TEST_INTS_TO_HASH,
    TEST_PRIVATE_KEYS,
    TEST_STRINGS_TO_HASH,
)
from pod.crypto.babyjub import BASE8, mul_point_escalar, pack_point, unpack_point
from pod.crypto.eddsa import derive_public_key, sign_message, verify_signature
from pod.crypto.encoding import (
    decode_private_key,
    decode_public_key,
    decode_signature,
    encode_public_key,
    encode_signature,
)
from pod.crypto.field import field_sqrt
from pod.crypto.hashing import pod_int_hash, pod_merkle_tree_hash, pod_string_hash
from pod.crypto.poseidon import poseidon_hash
from pod.crypto.signatures import sign_pod_root, verify_pod_root_signature


class TestHashes:
    """Hash outputs agree across implementations."""

    def test_string_hash(self):
        for s in TEST_STRINGS_TO_HASH:
            assert pod_string_hash(s) == alt.pod_string_hash(s)

    def test_int_hash(self):
        for i in TEST_INTS_TO_HASH:
            assert pod_int_hash(i) == alt.pod_int_hash(i)

    def test_merkle_tree_hash(self):
        leaves = [pod_int_hash(i) for i in TEST_INTS_TO_HASH[:4]]
        for left in leaves:
            for right in leaves:
                assert pod_merkle_tree_hash(left, right) == alt.pod_merkle_tree_hash(left, right)

    @pytest.mark.parametrize("width", [1, 2, 3, 5, 8, 16])
    def test_poseidon_widths(self, width):
        """Every supported input count agrees."""
        inputs = list(range(7, 7 + width))
        assert poseidon_hash(inputs) == alt.poseidon(inputs)


class TestCurve:
    """Curve arithmetic agrees across implementations."""

    def test_scalar_multiplication(self):
        for k in (1, 2, 3, 8, 12345, 2**200 + 7):
            assert mul_point_escalar(BASE8, k) == alt.scalar_mul(BASE8, k)

    def test_square_roots_agree_up_to_sign(self):
        """Tonelli-Shanks and Cipolla find the same pair of roots."""
        for n in (4, 9, 12345 ** 2, 2**100 + 1):
            ours = field_sqrt(n)
            theirs = alt.cipolla_sqrt(n)
            if ours is None:
                assert theirs is None
            else:
                assert theirs is not None
                assert theirs in (ours, (alt.P - ours) % alt.P)

    def test_point_packing(self):
        for k in (1, 5, 99):
            point = mul_point_escalar(BASE8, k)
            assert pack_point(point) == alt.pack_point(point)
            assert unpack_point(alt.pack_point(point)) == alt.unpack_point(pack_point(point))


class TestKeysAndSignatures:
    """Keys, signatures and their encodings agree across implementations."""

    @pytest.mark.parametrize("key", TEST_PRIVATE_KEYS)
    def test_public_keys(self, key):
        raw = decode_private_key(key)
        point = derive_public_key(raw)
        assert point == alt.derive_public_key(raw)
        assert encode_public_key(point) == alt.encode_public_key(point)
        assert decode_public_key(encode_public_key(point)) == alt.decode_public_key(
            alt.encode_public_key(point)
        )

    def test_known_public_key(self):
        assert alt.encode_public_key(alt.derive_public_key(bytes.fromhex(PRIVATE_KEY))) == (
            EXPECTED_PUBLIC_KEY
        )

    @pytest.mark.slow
    @pytest.mark.parametrize("key", TEST_PRIVATE_KEYS)
    def test_signatures(self, key):
        raw = decode_private_key(key)
        for message in (0, 1, EXPECTED_HELLO_CONTENT_ID):
            sig = sign_message(raw, message)
            r8, s = alt.sign(raw, message)
            assert (sig.r8, sig.s) == (r8, s)
            assert encode_signature(sig) == alt.encode_signature(r8, s)
            assert alt.decode_signature(encode_signature(sig)) == (r8, s)
            decoded = decode_signature(alt.encode_signature(r8, s))
            assert (decoded.r8, decoded.s) == (r8, s)

    @pytest.mark.parametrize("root", [
        EXPECTED_CONTENT_ID_1,
        EXPECTED_CONTENT_ID_2,
        EXPECTED_HELLO_CONTENT_ID,
    ])
    def test_sign_pod_root(self, root):
        signed = sign_pod_root(root, PRIVATE_KEY)
        assert signed.to_dict() == alt.sign_pod_root(root, PRIVATE_KEY)

    def test_verification_both_ways(self):
        """Each side verifies the other's signatures."""
        ours = sign_pod_root(EXPECTED_HELLO_CONTENT_ID, TEST_PRIVATE_KEYS[1])
        assert alt.verify_pod_root_signature(
            EXPECTED_HELLO_CONTENT_ID, ours.signature, ours.public_key
        )

        theirs = alt.sign_pod_root(EXPECTED_HELLO_CONTENT_ID, TEST_PRIVATE_KEYS[1])
        assert verify_pod_root_signature(
            EXPECTED_HELLO_CONTENT_ID, theirs["signature"], theirs["publicKey"]
        )

    def test_rejection_agrees(self):
        """Both sides reject a signature over another root."""
        signed = sign_pod_root(EXPECTED_HELLO_CONTENT_ID, PRIVATE_KEY)
        other = EXPECTED_HELLO_CONTENT_ID - 1
        assert not verify_pod_root_signature(other, signed.signature, signed.public_key)
        assert not alt.verify_pod_root_signature(other, signed.signature, signed.public_key)

    def test_raw_verify_agrees(self):
        raw = decode_private_key(PRIVATE_KEY)
        sig = sign_message(raw, 77)
        point = derive_public_key(raw)
        assert verify_signature(77, sig, point)
        assert alt.verify(77, sig.r8, sig.s, point)
