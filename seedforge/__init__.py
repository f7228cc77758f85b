"""SeedForge: deterministic seedable random generation.

>>> from seedforge import create
>>> rng = create("my-seed")
>>> rng.integer(1, 6) == create("my-seed").integer(1, 6)
True
"""

from __future__ import annotations

from seedforge.config import ForgeConfig
from seedforge.core.enums import DEFAULT_ALGORITHM, Algorithm, DistanceMetric
from seedforge.core.errors import ConfigurationError
from seedforge.core.hashing import cyrb128, splitmix64, string_to_seed
from seedforge.core.state import ForgeState
from seedforge.generators import create_generator
from seedforge.noise import (
    BillowedNoise,
    PerlinNoise,
    RidgedNoise,
    SimplexNoise,
    ValueNoise,
    WorleyNoise,
)
from seedforge.systems.rng import SeededRNG

__version__ = "1.1.0"


def create(seed: str | int, algorithm: str | Algorithm = DEFAULT_ALGORITHM) -> SeededRNG:
    """Shorthand for ``SeededRNG(seed, algorithm)``."""
    return SeededRNG(seed, algorithm)


__all__ = [
    "Algorithm",
    "BillowedNoise",
    "ConfigurationError",
    "DistanceMetric",
    "ForgeConfig",
    "ForgeState",
    "PerlinNoise",
    "RidgedNoise",
    "SeededRNG",
    "SimplexNoise",
    "ValueNoise",
    "WorleyNoise",
    "create",
    "create_generator",
    "cyrb128",
    "splitmix64",
    "string_to_seed",
]
