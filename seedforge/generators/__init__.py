"""Bit-generators: the closed set of six deterministic engines."""

from __future__ import annotations

from typing import Any

from seedforge.core.enums import Algorithm, resolve_algorithm
from seedforge.generators.base import BitGenerator, normalize_seed
from seedforge.generators.lcg import Lcg
from seedforge.generators.mulberry32 import Mulberry32
from seedforge.generators.pcg32 import Pcg32
from seedforge.generators.sfc32 import Sfc32
from seedforge.generators.xorshift128 import Xorshift128
from seedforge.generators.xoshiro128 import Xoshiro128

GENERATORS: dict[Algorithm, type[BitGenerator]] = {
    Algorithm.MULBERRY32: Mulberry32,
    Algorithm.XOSHIRO128SS: Xoshiro128,
    Algorithm.XORSHIFT128PLUS: Xorshift128,
    Algorithm.PCG32: Pcg32,
    Algorithm.SFC32: Sfc32,
    Algorithm.LCG: Lcg,
}


def create_generator(algorithm: str | Algorithm, seed: str | int) -> BitGenerator:
    """Instantiate the generator named by *algorithm* (aliases accepted)."""
    return GENERATORS[resolve_algorithm(algorithm)](seed)


def generator_from_state(algorithm: str | Algorithm, state: Any) -> BitGenerator:
    """Rebuild a generator from a state record or payload dict."""
    return GENERATORS[resolve_algorithm(algorithm)].from_state(state)


__all__ = [
    "GENERATORS",
    "BitGenerator",
    "Lcg",
    "Mulberry32",
    "Pcg32",
    "Sfc32",
    "Xorshift128",
    "Xoshiro128",
    "create_generator",
    "generator_from_state",
    "normalize_seed",
]
