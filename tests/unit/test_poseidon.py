"""
Module 02 - Poseidon & BLAKE-512 Unit Tests
Tests for pod/crypto/poseidon.py, pod/crypto/context.py and pod/crypto/blake512.py
"""
import pytest

from fixtures.common import (
    BLAKE512_EMPTY,
    POSEIDON_1,
    POSEIDON_1_2,
    POSEIDON_T3_FIRST_CONSTANT,
)
from pod.crypto.blake512 import BLOCK_SIZE, DIGEST_SIZE, blake512
from pod.crypto.context import (
    DEFAULT_INPUT_COUNTS,
    CryptoContext,
    build_crypto_context,
    get_default_context,
    set_default_context,
)
from pod.crypto.field import BABY_JUB_PRIME
from pod.crypto.poseidon import (
    FULL_ROUNDS,
    MAX_INPUTS,
    PARTIAL_ROUNDS,
    generate_poseidon_params,
    poseidon_hash,
    poseidon_permute,
)


class TestPoseidonParams:
    """Tests for Grain LFSR parameter generation."""

    def test_first_round_constant_matches_circomlib(self):
        """The first t=3 round constant is the published circomlib value."""
        params = generate_poseidon_params(3)
        assert params.round_constants[0] == POSEIDON_T3_FIRST_CONSTANT

    @pytest.mark.parametrize("t", [2, 3, 6])
    def test_shapes(self, t):
        """Constant count and MDS size follow the round table."""
        params = generate_poseidon_params(t)
        assert params.t == t
        assert params.full_rounds == FULL_ROUNDS
        assert params.partial_rounds == PARTIAL_ROUNDS[t]
        assert len(params.round_constants) == (FULL_ROUNDS + PARTIAL_ROUNDS[t]) * t
        assert len(params.mds) == t
        assert all(len(row) == t for row in params.mds)

    def test_constants_are_field_elements(self):
        """Every constant and MDS entry is reduced."""
        params = generate_poseidon_params(3)
        assert all(0 <= c < BABY_JUB_PRIME for c in params.round_constants)
        assert all(0 <= m < BABY_JUB_PRIME for row in params.mds for m in row)

    def test_generation_is_cached(self):
        """Repeated generation returns the same object."""
        assert generate_poseidon_params(3) is generate_poseidon_params(3)

    @pytest.mark.parametrize("t", [0, 1, 18])
    def test_unknown_width_raises(self, t):
        """Widths outside the table are rejected."""
        with pytest.raises(ValueError):
            generate_poseidon_params(t)


class TestPoseidonHash:
    """Tests for the Poseidon hash."""

    def test_known_vector_two_inputs(self):
        """poseidon([1, 2]) matches circomlib."""
        assert poseidon_hash([1, 2]) == POSEIDON_1_2

    def test_known_vector_one_input(self):
        """poseidon([1]) matches circomlib."""
        assert poseidon_hash([1]) == POSEIDON_1

    def test_hash_is_first_state_element(self):
        """The hash is state[0] of the permutation over [0, inputs...]."""
        params = generate_poseidon_params(3)
        assert poseidon_permute([0, 1, 2], params)[0] == POSEIDON_1_2

    def test_inputs_are_reduced(self):
        """Inputs are taken modulo p."""
        assert poseidon_hash([1 + BABY_JUB_PRIME, 2]) == POSEIDON_1_2
        assert poseidon_hash([-1]) == poseidon_hash([BABY_JUB_PRIME - 1])

    def test_order_sensitive(self):
        """Swapping inputs changes the hash."""
        assert poseidon_hash([1, 2]) != poseidon_hash([2, 1])

    @pytest.mark.parametrize("inputs", [[], list(range(MAX_INPUTS + 1))])
    def test_input_count_limits(self, inputs):
        """Zero inputs and more than sixteen are rejected."""
        with pytest.raises(ValueError):
            poseidon_hash(inputs)

    def test_permute_rejects_wrong_width(self):
        """The permutation needs exactly t elements."""
        with pytest.raises(ValueError):
            poseidon_permute([0, 1], generate_poseidon_params(3))


class TestCryptoContext:
    """Tests for the immutable parameter cache."""

    def test_build_default_counts(self, crypto_context):
        """The default context covers 1, 2 and 5 inputs."""
        assert crypto_context.input_counts == tuple(sorted(DEFAULT_INPUT_COUNTS))
        assert crypto_context.params_for(2).t == 3

    def test_explicit_context_gives_same_hash(self, crypto_context):
        """Hashing with an explicit context matches the default."""
        assert poseidon_hash([1, 2], context=crypto_context) == POSEIDON_1_2

    def test_missing_width_is_derived(self):
        """A context without a width derives it on demand."""
        context = CryptoContext()
        assert context.params_for(2) is generate_poseidon_params(3)

    def test_invalid_counts_rejected(self):
        """Counts outside 1..16 are rejected at build time."""
        with pytest.raises(ValueError):
            build_crypto_context([0])
        with pytest.raises(ValueError):
            CryptoContext().params_for(17)

    def test_default_context_can_be_replaced(self):
        """set_default_context swaps the process default; None resets it."""
        custom = build_crypto_context([2])
        try:
            set_default_context(custom)
            assert get_default_context() is custom
        finally:
            set_default_context(None)
        assert get_default_context() is not custom
        assert get_default_context().input_counts == tuple(sorted(DEFAULT_INPUT_COUNTS))

    def test_context_is_frozen(self, crypto_context):
        """Contexts cannot be reassigned."""
        with pytest.raises(AttributeError):
            crypto_context.params = {}


class TestBlake512:
    """Tests for the original BLAKE-512."""

    def test_empty_string_vector(self):
        """BLAKE-512("") matches the reference digest."""
        assert blake512(b"").hex() == BLAKE512_EMPTY

    def test_digest_size(self):
        """Digests are 64 bytes for any input length."""
        for size in (0, 1, 111, 112, BLOCK_SIZE, BLOCK_SIZE + 1, 300):
            assert len(blake512(bytes(size))) == DIGEST_SIZE

    def test_not_blake2b(self):
        """The digest differs from BLAKE2b-512."""
        import hashlib
        assert blake512(b"") != hashlib.blake2b(b"").digest()

    def test_distinct_inputs_distinct_digests(self):
        """Padding boundaries do not collide."""
        digests = {blake512(bytes(size)) for size in range(108, 132)}
        assert len(digests) == 24

    def test_accepts_bytearray(self):
        """Bytes-like input is accepted."""
        assert blake512(bytearray(b"abc")) == blake512(b"abc")
