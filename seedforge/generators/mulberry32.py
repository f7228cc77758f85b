"""Mulberry32: one 32-bit word, period 2**32. Fast, fine for games."""

from __future__ import annotations

from seedforge.core.enums import Algorithm
from seedforge.core.hashing import MASK32, imul, seed_word
from seedforge.core.state import Mulberry32State
from seedforge.generators.base import BitGenerator, normalize_seed

_INCREMENT = 0x6D2B79F5


class Mulberry32(BitGenerator):
    """Additive counter followed by two multiply-xorshift rounds."""

    __slots__ = ("_seed", "_state")

    algorithm = Algorithm.MULBERRY32
    state_type = Mulberry32State

    def __init__(self, seed: str | int) -> None:
        self._seed = seed_word(normalize_seed(seed))
        self._state = self._seed

    def next_uint32(self) -> int:
        self._state = t = (self._state + _INCREMENT) & MASK32
        t = imul(t ^ (t >> 15), t | 1)
        t ^= (t + imul(t ^ (t >> 7), t | 61)) & MASK32
        return t ^ (t >> 14)

    def get_state(self) -> Mulberry32State:
        return Mulberry32State(state=self._state, seed=self._seed)

    def _restore(self, state: Mulberry32State) -> None:
        self._state = state.state
        self._seed = state.seed

    def reset(self) -> None:
        self._state = self._seed
