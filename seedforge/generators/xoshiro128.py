"""Xoshiro128**: 128-bit state, period 2**128 - 1, with a 2**64 jump."""

from __future__ import annotations

from seedforge.core.enums import Algorithm
from seedforge.core.hashing import MASK32, cyrb128, imul, rotl, seed_text
from seedforge.core.state import Xoshiro128State
from seedforge.generators.base import BitGenerator, normalize_seed

# Jump polynomial equivalent to 2**64 calls to next_uint32().
_JUMP = (0x8764000B, 0xF542D2D3, 0x6FA035C3, 0x77F2DB5B)


class Xoshiro128(BitGenerator):
    """Rotate-shift-xor update with the ``**`` output scrambler."""

    __slots__ = ("_original_seed", "_s")

    algorithm = Algorithm.XOSHIRO128SS
    state_type = Xoshiro128State

    def __init__(self, seed: str | int) -> None:
        self._original_seed = normalize_seed(seed)
        self._s = cyrb128(seed_text(self._original_seed))

    def next_uint32(self) -> int:
        s0, s1, s2, s3 = self._s
        result = imul(rotl(imul(s1, 5), 7), 9)
        t = (s1 << 9) & MASK32

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotl(s3, 11)

        self._s = (s0, s1, s2, s3)
        return result

    def jump(self) -> None:
        """Advance the stream by 2**64 draws.

        Gives 2**64 non-overlapping subsequences for parallel streams.
        """
        acc = (0, 0, 0, 0)
        for word in _JUMP:
            for bit in range(32):
                if word & (1 << bit):
                    acc = tuple(a ^ s for a, s in zip(acc, self._s))
                self.next_uint32()
        self._s = acc

    def get_state(self) -> Xoshiro128State:
        return Xoshiro128State(s=self._s, original_seed=self._original_seed)

    def _restore(self, state: Xoshiro128State) -> None:
        self._s = tuple(state.s)
        self._original_seed = state.original_seed

    def reset(self) -> None:
        self._s = cyrb128(seed_text(self._original_seed))
