"""PCG32 (XSH-RR): 64-bit LCG state with a permuted 32-bit output.

The state and increment are persisted as 32-bit hi/lo halves so payloads
stay within 32-bit words.
"""

from __future__ import annotations

from seedforge.core.enums import Algorithm
from seedforge.core.hashing import MASK32, MASK64, seed_word
from seedforge.core.state import Pcg32State
from seedforge.generators.base import BitGenerator, normalize_seed

_MULTIPLIER = 6364136223846793005
DEFAULT_SEQUENCE = 1


class Pcg32(BitGenerator):
    """Permuted congruential generator, period 2**64 per sequence."""

    __slots__ = ("_original_seed", "_original_sequence", "_state", "_inc")

    algorithm = Algorithm.PCG32
    state_type = Pcg32State

    def __init__(self, seed: str | int, sequence: int = DEFAULT_SEQUENCE) -> None:
        self._original_seed = normalize_seed(seed)
        self._original_sequence = int(sequence)
        self._seed_state()

    def _seed_state(self) -> None:
        # Two warm-up steps around folding in the seed, as pcg32_srandom_r does.
        self._state = 0
        self._inc = ((self._original_sequence << 1) | 1) & MASK64
        self._step()
        self._state = (self._state + seed_word(self._original_seed)) & MASK64
        self._step()

    def _step(self) -> int:
        old = self._state
        self._state = (old * _MULTIPLIER + self._inc) & MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK32

    def next_uint32(self) -> int:
        return self._step()

    def get_state(self) -> Pcg32State:
        return Pcg32State(
            state_hi=self._state >> 32,
            state_lo=self._state & MASK32,
            inc_hi=self._inc >> 32,
            inc_lo=self._inc & MASK32,
            original_seed=self._original_seed,
            original_sequence=self._original_sequence,
        )

    def _restore(self, state: Pcg32State) -> None:
        self._state = (state.state_hi << 32) | state.state_lo
        self._inc = (state.inc_hi << 32) | state.inc_lo
        self._original_seed = state.original_seed
        self._original_sequence = state.original_sequence

    def reset(self) -> None:
        self._seed_state()
