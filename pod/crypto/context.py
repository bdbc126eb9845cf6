"""
Module 02 - Crypto Context
Immutable holder for the Poseidon parameters used by POD hashing.

Owner: Protocol/Crypto Engineer
Module ID: M02

Parameter generation is deterministic, so a context can be rebuilt at any
time and shared freely between threads. POD hashing needs widths for 1
input (values), 2 inputs (Merkle nodes) and 5 inputs (EdDSA challenge).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from pod.crypto.poseidon import MAX_INPUTS, MIN_INPUTS, PoseidonParams, generate_poseidon_params


DEFAULT_INPUT_COUNTS: tuple[int, ...] = (1, 2, 5)


@dataclass(frozen=True)
class CryptoContext:
    """Poseidon parameters keyed by input count."""

    params: dict[int, PoseidonParams] = field(default_factory=dict)

    def params_for(self, input_count: int) -> PoseidonParams:
        """
        Get the parameters for hashing input_count elements.

        Widths the context was not built with are derived on demand
        (generation itself is cached per process).
        """
        found = self.params.get(input_count)
        if found is not None:
            return found
        if not MIN_INPUTS <= input_count <= MAX_INPUTS:
            raise ValueError(
                f"Poseidon takes {MIN_INPUTS}..{MAX_INPUTS} inputs, got {input_count}"
            )
        return generate_poseidon_params(input_count + 1)

    @property
    def input_counts(self) -> tuple[int, ...]:
        return tuple(sorted(self.params))


def build_crypto_context(
    input_counts: Iterable[int] = DEFAULT_INPUT_COUNTS,
) -> CryptoContext:
    """
    Build a context with parameters for the given input counts.

    Args:
        input_counts: Numbers of Poseidon inputs to prepare

    Returns:
        A new CryptoContext
    """
    params = {}
    for count in input_counts:
        if not MIN_INPUTS <= count <= MAX_INPUTS:
            raise ValueError(
                f"Poseidon takes {MIN_INPUTS}..{MAX_INPUTS} inputs, got {count}"
            )
        params[count] = generate_poseidon_params(count + 1)
    return CryptoContext(params=params)


# Default context instance (lazy-loaded)
_default_context: Optional[CryptoContext] = None


def get_default_context() -> CryptoContext:
    """Get the default crypto context, building it on first use."""
    global _default_context
    if _default_context is None:
        _default_context = build_crypto_context()
    return _default_context


def set_default_context(context: Optional[CryptoContext]) -> None:
    """Set the default crypto context. None resets it to lazy rebuild."""
    global _default_context
    _default_context = context


__all__ = [
    "DEFAULT_INPUT_COUNTS",
    "CryptoContext",
    "build_crypto_context",
    "get_default_context",
    "set_default_context",
]
