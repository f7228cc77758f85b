"""SFC32 (Small Fast Counter): three mixing words plus a counter."""

from __future__ import annotations

from seedforge.core.enums import Algorithm
from seedforge.core.hashing import MASK32, cyrb128, rotl, seed_text
from seedforge.core.state import Sfc32State
from seedforge.generators.base import BitGenerator, normalize_seed


class Sfc32(BitGenerator):
    """Add-rotate-xor step; the counter guarantees a minimum period of 2**32."""

    __slots__ = ("_original_seed", "_a", "_b", "_c", "_counter")

    algorithm = Algorithm.SFC32
    state_type = Sfc32State

    def __init__(self, seed: str | int) -> None:
        self._original_seed = normalize_seed(seed)
        self._a, self._b, self._c, self._counter = cyrb128(seed_text(self._original_seed))

    def next_uint32(self) -> int:
        a, b, c, counter = self._a, self._b, self._c, self._counter
        t = (a + b + counter) & MASK32
        self._counter = (counter + 1) & MASK32
        self._a = b ^ (b >> 9)
        self._b = (c + (c << 3)) & MASK32
        self._c = (rotl(c, 21) + t) & MASK32
        return t

    def get_state(self) -> Sfc32State:
        return Sfc32State(
            a=self._a, b=self._b, c=self._c, counter=self._counter,
            original_seed=self._original_seed,
        )

    def _restore(self, state: Sfc32State) -> None:
        self._a = state.a
        self._b = state.b
        self._c = state.c
        self._counter = state.counter
        self._original_seed = state.original_seed

    def reset(self) -> None:
        self._a, self._b, self._c, self._counter = cyrb128(seed_text(self._original_seed))
