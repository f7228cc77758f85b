"""Fractal combinators over any field exposing ``sample(x, y, z)``."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Protocol

from seedforge.core.errors import ConfigurationError

DEFAULT_OCTAVES = 4
DEFAULT_LACUNARITY = 2.0
DEFAULT_PERSISTENCE = 0.5
DEFAULT_RIDGE_OFFSET = 1.0


class Sampler(Protocol):
    def sample(self, x: float, y: float | None = None, z: float | None = None) -> float: ...


def _scaled(c: float | None, frequency: float) -> float | None:
    return None if c is None else c * frequency


def _accumulate(
    field: Sampler,
    x: float,
    y: float | None,
    z: float | None,
    octaves: int,
    lacunarity: float,
    persistence: float,
    shape: Callable[[float], float],
) -> tuple[float, float]:
    """Return (weighted sum of shaped octaves, sum of amplitudes)."""
    if octaves < 1:
        raise ConfigurationError(f"octaves must be at least 1, got {octaves}")
    total = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_value = 0.0
    for _ in range(octaves):
        n = field.sample(x * frequency, _scaled(y, frequency), _scaled(z, frequency))
        total += amplitude * shape(n)
        max_value += amplitude
        amplitude *= persistence
        frequency *= lacunarity
    return total, max_value


def fbm(
    field: Sampler,
    x: float,
    y: float | None = None,
    z: float | None = None,
    octaves: int = DEFAULT_OCTAVES,
    lacunarity: float = DEFAULT_LACUNARITY,
    persistence: float = DEFAULT_PERSISTENCE,
) -> float:
    """Fractional Brownian motion, normalised by the amplitude sum.

    The result stays within the range of the underlying field.
    """
    total, max_value = _accumulate(field, x, y, z, octaves, lacunarity, persistence, float)
    return total / max_value


def turbulence(
    field: Sampler,
    x: float,
    y: float | None = None,
    z: float | None = None,
    octaves: int = DEFAULT_OCTAVES,
    lacunarity: float = DEFAULT_LACUNARITY,
    persistence: float = DEFAULT_PERSISTENCE,
) -> float:
    """Unnormalised sum of amplitude-weighted ``|n|``."""
    total, _ = _accumulate(field, x, y, z, octaves, lacunarity, persistence, abs)
    return total


def ridged(
    field: Sampler,
    x: float,
    y: float | None = None,
    z: float | None = None,
    octaves: int = DEFAULT_OCTAVES,
    lacunarity: float = DEFAULT_LACUNARITY,
    persistence: float = DEFAULT_PERSISTENCE,
    offset: float = DEFAULT_RIDGE_OFFSET,
) -> float:
    """Normalised sum of ``(offset - |n|)^2``; sharp crests where n crosses 0."""
    total, max_value = _accumulate(
        field, x, y, z, octaves, lacunarity, persistence,
        lambda n: (offset - abs(n)) ** 2,
    )
    return total / max_value


def billow(
    field: Sampler,
    x: float,
    y: float | None = None,
    z: float | None = None,
    octaves: int = DEFAULT_OCTAVES,
    lacunarity: float = DEFAULT_LACUNARITY,
    persistence: float = DEFAULT_PERSISTENCE,
) -> float:
    """Normalised sum of ``|n|``: rounded, cloud-like lobes."""
    total, max_value = _accumulate(field, x, y, z, octaves, lacunarity, persistence, abs)
    return total / max_value


def warp(
    field: Sampler,
    x: float,
    y: float,
    strength: float = 1.0,
    octaves: int = DEFAULT_OCTAVES,
) -> float:
    """Domain-warped fBm: displace (x, y) by two decorrelated fBm lookups."""
    qx = fbm(field, x, y, octaves=octaves)
    qy = fbm(field, x + 5.2, y + 1.3, octaves=octaves)
    return fbm(field, x + strength * qx, y + strength * qy, octaves=octaves)


class _FractalSimplex(ABC):
    """A simplex field viewed through one fractal combinator."""

    __slots__ = ("base", "octaves", "lacunarity", "persistence")

    def __init__(
        self,
        seed: str | int,
        octaves: int = DEFAULT_OCTAVES,
        lacunarity: float = DEFAULT_LACUNARITY,
        persistence: float = DEFAULT_PERSISTENCE,
    ) -> None:
        # Imported here: seedforge.noise.base imports this module.
        from seedforge.noise.simplex import SimplexNoise

        if octaves < 1:
            raise ConfigurationError(f"octaves must be at least 1, got {octaves}")
        self.base = SimplexNoise(seed)
        self.octaves = octaves
        self.lacunarity = lacunarity
        self.persistence = persistence

    @property
    def seed(self) -> str | int:
        return self.base.seed

    @abstractmethod
    def sample(self, x: float, y: float | None = None, z: float | None = None) -> float: ...

    def noise_1d(self, x: float) -> float:
        return self.sample(x)

    def noise_2d(self, x: float, y: float) -> float:
        return self.sample(x, y)

    def noise_3d(self, x: float, y: float, z: float) -> float:
        return self.sample(x, y, z)


class RidgedNoise(_FractalSimplex):
    """Ridged multifractal simplex; output in [0, offset^2] for |n| <= 1."""

    __slots__ = ("offset",)

    def __init__(
        self,
        seed: str | int,
        octaves: int = DEFAULT_OCTAVES,
        lacunarity: float = DEFAULT_LACUNARITY,
        persistence: float = DEFAULT_PERSISTENCE,
        offset: float = DEFAULT_RIDGE_OFFSET,
    ) -> None:
        super().__init__(seed, octaves, lacunarity, persistence)
        self.offset = offset

    def sample(self, x: float, y: float | None = None, z: float | None = None) -> float:
        return ridged(self.base, x, y, z, self.octaves, self.lacunarity, self.persistence, self.offset)


class BillowedNoise(_FractalSimplex):
    """Billowed simplex; output is non-negative."""

    __slots__ = ()

    def sample(self, x: float, y: float | None = None, z: float | None = None) -> float:
        return billow(self.base, x, y, z, self.octaves, self.lacunarity, self.persistence)
