"""Shared machinery for noise fields: permutation tables and dispatch."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from seedforge.core.enums import Algorithm
from seedforge.noise import fractal
from seedforge.systems.rng import SeededRNG

logger = logging.getLogger(__name__)

TABLE_SIZE = 256
TABLE_MASK = TABLE_SIZE - 1


def fade(t: float) -> float:
    """Quintic smoothstep 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def build_permutation(rng: SeededRNG) -> tuple[int, ...]:
    """Shuffle 0..255 with *rng* and double it to 512 entries.

    The doubled table lets lookups add two masked indices without wrapping.
    """
    table = rng.shuffle(list(range(TABLE_SIZE)))
    return tuple(table) + tuple(table)


class NoiseField(ABC):
    """A continuous pseudo-random field built from one seed.

    The owned SeededRNG is used only while constructing lookup tables;
    sampling never draws from it.
    """

    __slots__ = ("_seed", "_rng", "perm")

    def __init__(self, seed: str | int) -> None:
        self._seed = seed
        self._rng = SeededRNG(seed, Algorithm.XOSHIRO128SS)
        self.perm = build_permutation(self._rng)
        logger.debug("%s table built for seed %r", type(self).__name__, seed)

    @property
    def seed(self) -> str | int:
        return self._seed

    @abstractmethod
    def noise_1d(self, x: float) -> float: ...

    @abstractmethod
    def noise_2d(self, x: float, y: float) -> float: ...

    @abstractmethod
    def noise_3d(self, x: float, y: float, z: float) -> float: ...

    def sample(self, x: float, y: float | None = None, z: float | None = None) -> float:
        """Evaluate in 1D, 2D or 3D depending on which coordinates are given."""
        if z is not None:
            return self.noise_3d(x, 0.0 if y is None else y, z)
        if y is not None:
            return self.noise_2d(x, y)
        return self.noise_1d(x)

    # -- fractal shortcuts --

    def fbm(
        self,
        x: float,
        y: float | None = None,
        z: float | None = None,
        octaves: int = fractal.DEFAULT_OCTAVES,
        lacunarity: float = fractal.DEFAULT_LACUNARITY,
        persistence: float = fractal.DEFAULT_PERSISTENCE,
    ) -> float:
        return fractal.fbm(self, x, y, z, octaves, lacunarity, persistence)

    def turbulence(
        self,
        x: float,
        y: float | None = None,
        z: float | None = None,
        octaves: int = fractal.DEFAULT_OCTAVES,
        lacunarity: float = fractal.DEFAULT_LACUNARITY,
        persistence: float = fractal.DEFAULT_PERSISTENCE,
    ) -> float:
        return fractal.turbulence(self, x, y, z, octaves, lacunarity, persistence)

    def warp(self, x: float, y: float, strength: float = 1.0, octaves: int = fractal.DEFAULT_OCTAVES) -> float:
        return fractal.warp(self, x, y, strength, octaves)
