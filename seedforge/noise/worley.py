"""Worley (cellular) noise: distance to jittered feature points."""

from __future__ import annotations

import math

from seedforge.core.enums import DistanceMetric
from seedforge.core.errors import ConfigurationError
from seedforge.noise.base import TABLE_MASK, TABLE_SIZE, NoiseField

_NEIGHBOURS = (-1, 0, 1)


def distance(dx: float, dy: float, dz: float, metric: DistanceMetric) -> float:
    if metric is DistanceMetric.MANHATTAN:
        return abs(dx) + abs(dy) + abs(dz)
    if metric is DistanceMetric.CHEBYSHEV:
        return max(abs(dx), abs(dy), abs(dz))
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def _resolve_metric(metric: str | DistanceMetric) -> DistanceMetric:
    try:
        return DistanceMetric(metric)
    except ValueError:
        raise ConfigurationError(f"Unknown distance metric: {metric}") from None


class WorleyNoise(NoiseField):
    """One feature point per unit cell, placed by per-cell jitter tables.

    ``feature=1`` returns the distance to the nearest point (F1);
    ``feature=2`` returns F2 - F1, which outlines cell borders.
    """

    __slots__ = ("metric", "feature", "_jitter")

    def __init__(
        self,
        seed: str | int,
        metric: str | DistanceMetric = DistanceMetric.EUCLIDEAN,
        feature: int = 1,
    ) -> None:
        super().__init__(seed)
        if feature not in (1, 2):
            raise ConfigurationError(f"Worley feature must be 1 or 2, got {feature}")
        self.metric = _resolve_metric(metric)
        self.feature = feature
        rng = self._rng
        self._jitter = tuple(
            tuple(rng.random() for _ in range(TABLE_SIZE)) for _axis in range(3)
        )

    def _cell_hash(self, cx: int, cy: int, cz: int = 0) -> int:
        p = self.perm
        return p[p[p[cx & TABLE_MASK] + (cy & TABLE_MASK)] + (cz & TABLE_MASK)]

    def _result(self, f1: float, f2: float) -> float:
        return f1 if self.feature == 1 else f2 - f1

    def noise_1d(self, x: float) -> float:
        return self.noise_2d(x, 0.0)

    def noise_2d(self, x: float, y: float) -> float:
        jx, jy, _ = self._jitter
        cx = math.floor(x)
        cy = math.floor(y)
        f1 = f2 = math.inf
        for dx in _NEIGHBOURS:
            for dy in _NEIGHBOURS:
                gx = cx + dx
                gy = cy + dy
                h = self._cell_hash(gx, gy)
                d = distance(gx + jx[h] - x, gy + jy[h] - y, 0.0, self.metric)
                if d < f1:
                    f2 = f1
                    f1 = d
                elif d < f2:
                    f2 = d
        return self._result(f1, f2)

    def noise_3d(self, x: float, y: float, z: float) -> float:
        jx, jy, jz = self._jitter
        cx = math.floor(x)
        cy = math.floor(y)
        cz = math.floor(z)
        f1 = f2 = math.inf
        for dx in _NEIGHBOURS:
            for dy in _NEIGHBOURS:
                for dz in _NEIGHBOURS:
                    gx = cx + dx
                    gy = cy + dy
                    gz = cz + dz
                    h = self._cell_hash(gx, gy, gz)
                    d = distance(gx + jx[h] - x, gy + jy[h] - y, gz + jz[h] - z, self.metric)
                    if d < f1:
                        f2 = f1
                        f1 = d
                    elif d < f2:
                        f2 = d
        return self._result(f1, f2)
