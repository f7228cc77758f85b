"""Xorshift128 over four 32-bit words (the 32-bit take on xorshift128+)."""

from __future__ import annotations

from seedforge.core.enums import Algorithm
from seedforge.core.hashing import MASK32, cyrb128, seed_text
from seedforge.core.state import Xorshift128State
from seedforge.generators.base import BitGenerator, normalize_seed


class Xorshift128(BitGenerator):
    __slots__ = ("_original_seed", "_s")

    algorithm = Algorithm.XORSHIFT128PLUS
    state_type = Xorshift128State

    def __init__(self, seed: str | int) -> None:
        self._original_seed = normalize_seed(seed)
        self._s = cyrb128(seed_text(self._original_seed))

    def next_uint32(self) -> int:
        s0, s1, s2, s3 = self._s
        t = s3
        t ^= (t << 11) & MASK32
        t ^= t >> 8
        head = t ^ s0 ^ (s0 >> 19)
        # Words rotate down one slot; the new word enters at the front.
        self._s = (head, s0, s1, s2)
        return head

    def get_state(self) -> Xorshift128State:
        return Xorshift128State(s=self._s, original_seed=self._original_seed)

    def _restore(self, state: Xorshift128State) -> None:
        self._s = tuple(state.s)
        self._original_seed = state.original_seed

    def reset(self) -> None:
        self._s = cyrb128(seed_text(self._original_seed))
