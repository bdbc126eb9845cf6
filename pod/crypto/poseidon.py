"""
Module 02 - Poseidon Hash
Circomlib-compatible Poseidon over the BN254 scalar field.

Owner: Protocol/Crypto Engineer
Module ID: M02

Parameters follow the reference Poseidon instantiation used by circomlib:
- S-box x^5
- 8 full rounds, partial rounds by state width (table below)
- Round constants and a Cauchy MDS matrix drawn from the Grain LFSR
  in self-shrinking mode, seeded with the instance description

The hash of n inputs runs the permutation on [0, inputs...] with width
t = n + 1 and returns the first state element.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Sequence

from pod.crypto.field import BABY_JUB_PRIME


FIELD_BITS = 254
FULL_ROUNDS = 8

# Partial rounds indexed by state width t (= number of inputs + 1)
PARTIAL_ROUNDS: dict[int, int] = {
    2: 56, 3: 57, 4: 56, 5: 60, 6: 60, 7: 63, 8: 64, 9: 63,
    10: 60, 11: 66, 12: 60, 13: 65, 14: 70, 15: 60, 16: 64, 17: 68,
}

MIN_INPUTS = 1
MAX_INPUTS = max(PARTIAL_ROUNDS) - 1


@dataclass(frozen=True)
class PoseidonParams:
    """Round constants and MDS matrix for one state width."""

    t: int
    full_rounds: int
    partial_rounds: int
    round_constants: tuple[int, ...]
    mds: tuple[tuple[int, ...], ...]

    @property
    def total_rounds(self) -> int:
        return self.full_rounds + self.partial_rounds


# =============================================================================
# Grain LFSR
# =============================================================================

def _bits_msb_first(value: int, width: int) -> list[int]:
    return [(value >> (width - 1 - i)) & 1 for i in range(width)]


class _GrainLFSR:
    """80-bit Grain LFSR, in self-shrinking mode after a 160-step warm-up."""

    def __init__(self, t: int, full_rounds: int, partial_rounds: int) -> None:
        state = (
            _bits_msb_first(1, 2)            # prime field
            + _bits_msb_first(0, 4)          # x^alpha S-box
            + _bits_msb_first(FIELD_BITS, 12)
            + _bits_msb_first(t, 12)
            + _bits_msb_first(full_rounds, 10)
            + _bits_msb_first(partial_rounds, 10)
            + [1] * 30
        )
        self._state = state
        for _ in range(160):
            self._step()

    def _step(self) -> int:
        s = self._state
        bit = s[62] ^ s[51] ^ s[38] ^ s[23] ^ s[13] ^ s[0]
        s.pop(0)
        s.append(bit)
        return bit

    def bits(self) -> Iterator[int]:
        while True:
            selector = self._step()
            while selector == 0:
                self._step()
                selector = self._step()
            yield self._step()


def _random_int(source: Iterator[int], num_bits: int) -> int:
    value = 0
    for _ in range(num_bits):
        value = (value << 1) | next(source)
    return value


def _generate_round_constants(source: Iterator[int], count: int) -> list[int]:
    constants = []
    for _ in range(count):
        candidate = _random_int(source, FIELD_BITS)
        while candidate >= BABY_JUB_PRIME:
            candidate = _random_int(source, FIELD_BITS)
        constants.append(candidate)
    return constants


def _generate_mds(source: Iterator[int], t: int) -> list[list[int]]:
    p = BABY_JUB_PRIME
    while True:
        samples = [_random_int(source, FIELD_BITS) % p for _ in range(2 * t)]
        while len(set(samples)) != len(samples):
            samples = [_random_int(source, FIELD_BITS) % p for _ in range(2 * t)]
        xs, ys = samples[:t], samples[t:]
        if any((x + y) % p == 0 for x in xs for y in ys):
            continue
        return [[pow(x + y, -1, p) for y in ys] for x in xs]


@lru_cache(maxsize=None)
def generate_poseidon_params(t: int) -> PoseidonParams:
    """
    Derive the circomlib Poseidon parameters for state width t.

    Deterministic and cached per process.

    Raises:
        ValueError: If t has no known partial round count
    """
    if t not in PARTIAL_ROUNDS:
        raise ValueError(
            f"Unsupported Poseidon width t={t}; expected {min(PARTIAL_ROUNDS)}"
            f"..{max(PARTIAL_ROUNDS)}"
        )
    partial_rounds = PARTIAL_ROUNDS[t]
    source = _GrainLFSR(t, FULL_ROUNDS, partial_rounds).bits()

    # MDS sampling continues the same bit stream after the constants
    constants = _generate_round_constants(source, (FULL_ROUNDS + partial_rounds) * t)
    mds = _generate_mds(source, t)

    return PoseidonParams(
        t=t,
        full_rounds=FULL_ROUNDS,
        partial_rounds=partial_rounds,
        round_constants=tuple(constants),
        mds=tuple(tuple(row) for row in mds),
    )


# =============================================================================
# Permutation
# =============================================================================

def _pow5(x: int) -> int:
    x2 = x * x % BABY_JUB_PRIME
    return x2 * x2 % BABY_JUB_PRIME * x % BABY_JUB_PRIME


def poseidon_permute(state: Sequence[int], params: PoseidonParams) -> list[int]:
    """Apply the Poseidon permutation to a full state of width params.t."""
    p = BABY_JUB_PRIME
    t = params.t
    if len(state) != t:
        raise ValueError(f"Poseidon state must have {t} elements, got {len(state)}")

    half_full = params.full_rounds // 2
    first_partial = half_full
    last_partial = half_full + params.partial_rounds
    c = params.round_constants
    m = params.mds

    s = [x % p for x in state]
    for r in range(params.total_rounds):
        s = [(x + c[r * t + i]) % p for i, x in enumerate(s)]
        if first_partial <= r < last_partial:
            s[0] = _pow5(s[0])
        else:
            s = [_pow5(x) for x in s]
        s = [sum(m_ij * x for m_ij, x in zip(row, s)) % p for row in m]
    return s


def poseidon_hash(inputs: Iterable[int], context=None) -> int:
    """
    Hash 1 to 16 field elements.

    Inputs are reduced modulo p before hashing.

    Args:
        inputs: Integers to hash
        context: Optional CryptoContext holding prebuilt parameters

    Returns:
        The Poseidon digest as a field element
    """
    values = [int(x) % BABY_JUB_PRIME for x in inputs]
    if not MIN_INPUTS <= len(values) <= MAX_INPUTS:
        raise ValueError(
            f"Poseidon takes {MIN_INPUTS}..{MAX_INPUTS} inputs, got {len(values)}"
        )
    if context is None:
        from pod.crypto.context import get_default_context
        context = get_default_context()
    params = context.params_for(len(values))
    return poseidon_permute([0] + values, params)[0]


__all__ = [
    "FIELD_BITS",
    "FULL_ROUNDS",
    "PARTIAL_ROUNDS",
    "MIN_INPUTS",
    "MAX_INPUTS",
    "PoseidonParams",
    "generate_poseidon_params",
    "poseidon_permute",
    "poseidon_hash",
]
