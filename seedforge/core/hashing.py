"""Seed hashing: strings and integers to 32/128-bit seed material.

Every operation wraps at 32 bits so results are platform independent.
Strings are hashed as UTF-16 code units, which keeps seeds interchangeable
with state payloads produced by other SeedForge implementations.
"""

from __future__ import annotations

import struct
from typing import Iterator

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
TWO_POW_32 = 4294967296

_CYRB_INIT = (1779033703, 3144134277, 1013904242, 2773480762)
_CYRB_MULT = (597399067, 2869860233, 951274213, 2716044179)

_SPLITMIX_GAMMA = 0x9E3779B97F4A7C15


def imul(a: int, b: int) -> int:
    """32-bit wrapping multiply, returned unsigned."""
    return (a * b) & MASK32


def rotl(x: int, k: int) -> int:
    """Rotate a 32-bit word left by *k* bits."""
    x &= MASK32
    return ((x << k) | (x >> (32 - k))) & MASK32


def code_units(s: str) -> tuple[int, ...]:
    """Return the UTF-16 code units of *s*."""
    data = s.encode("utf-16-le", errors="surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def seed_text(seed: str | int) -> str:
    """Canonical string form of a seed, as fed to cyrb128()."""
    if isinstance(seed, str):
        return seed
    return str(seed)


def seed_word(seed: str | int) -> int:
    """Fold a seed to one unsigned 32-bit word."""
    if isinstance(seed, str):
        return string_to_seed(seed)
    return int(seed) & MASK32


def string_to_seed(s: str) -> int:
    """Rolling ``31*h + c`` hash folded to an unsigned 32-bit integer."""
    h = 0
    for unit in code_units(s):
        h = (h * 31 + unit) & MASK32
    return h


def cyrb128(s: str) -> tuple[int, int, int, int]:
    """Four independent 32-bit hashes of *s* (128 bits of seed material)."""
    h1, h2, h3, h4 = _CYRB_INIT
    m1, m2, m3, m4 = _CYRB_MULT
    for k in code_units(s):
        h1 = h2 ^ imul(h1 ^ k, m1)
        h2 = h3 ^ imul(h2 ^ k, m2)
        h3 = h4 ^ imul(h3 ^ k, m3)
        h4 = h1 ^ imul(h4 ^ k, m4)
    h1 = imul(h3 ^ (h1 >> 18), m1)
    h2 = imul(h4 ^ (h2 >> 22), m2)
    h3 = imul(h1 ^ (h3 >> 17), m3)
    h4 = imul(h2 ^ (h4 >> 19), m4)
    h1 ^= h2 ^ h3 ^ h4
    h2 ^= h1
    h3 ^= h1
    h4 ^= h1
    return h1, h2, h3, h4


def splitmix64(seed: int) -> Iterator[int]:
    """Endless SplitMix64 stream yielding the low 32 bits of each output.

    Handy for expanding a single integer into several seed words.
    """
    state = seed & MASK64
    while True:
        state = (state + _SPLITMIX_GAMMA) & MASK64
        z = state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        z ^= z >> 31
        yield z & MASK32
