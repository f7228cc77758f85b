"""Classic linear congruential generator, ``state = (a*state + c) mod m``.

Low quality; kept for compatibility with textbook sequences.
"""

from __future__ import annotations

from seedforge.core.enums import Algorithm
from seedforge.core.errors import ConfigurationError
from seedforge.core.hashing import MASK32, TWO_POW_32, seed_word
from seedforge.core.state import LcgState
from seedforge.generators.base import BitGenerator, normalize_seed

# Numerical Recipes constants.
DEFAULT_MULTIPLIER = 1664525
DEFAULT_INCREMENT = 1013904223
DEFAULT_MODULUS = TWO_POW_32


class Lcg(BitGenerator):
    __slots__ = ("_seed", "_state", "_a", "_c", "_m")

    algorithm = Algorithm.LCG
    state_type = LcgState

    def __init__(
        self,
        seed: str | int,
        a: int = DEFAULT_MULTIPLIER,
        c: int = DEFAULT_INCREMENT,
        m: int = DEFAULT_MODULUS,
    ) -> None:
        if a <= 0 or c < 0 or m <= 0:
            raise ConfigurationError(f"Invalid LCG parameters a={a}, c={c}, m={m}")
        self._seed = seed_word(normalize_seed(seed))
        self._state = self._seed
        self._a = a
        self._c = c
        self._m = m

    def next_uint32(self) -> int:
        self._state = (self._a * self._state + self._c) % self._m
        return self._state & MASK32

    def next_float(self) -> float:
        return self.next_uint32() / self._m

    def get_state(self) -> LcgState:
        return LcgState(state=self._state, seed=self._seed, a=self._a, c=self._c, m=self._m)

    def _restore(self, state: LcgState) -> None:
        self._state = state.state
        self._seed = state.seed
        self._a = state.a
        self._c = state.c
        self._m = state.m

    def reset(self) -> None:
        self._state = self._seed
