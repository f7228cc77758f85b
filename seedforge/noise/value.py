"""Lattice (value) noise: hashed lattice values, quintic interpolation."""

from __future__ import annotations

import math

from seedforge.noise.base import TABLE_MASK, NoiseField, fade, lerp

_INV_MAX = 1.0 / 255.0


class ValueNoise(NoiseField):
    """Value noise in 1D, 2D and 3D; output lies in [0, 1]."""

    __slots__ = ()

    def _hash(self, *coords: int) -> float:
        perm = self.perm
        h = 0
        for c in coords:
            h = perm[(h + c) & TABLE_MASK]
        return h * _INV_MAX

    def noise_1d(self, x: float) -> float:
        x0 = math.floor(x)
        xi = x0 & TABLE_MASK
        u = fade(x - x0)
        return lerp(self._hash(xi), self._hash(xi + 1), u)

    def noise_2d(self, x: float, y: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        xi = x0 & TABLE_MASK
        yi = y0 & TABLE_MASK
        u = fade(x - x0)
        v = fade(y - y0)
        h = self._hash
        return lerp(
            lerp(h(xi, yi), h(xi + 1, yi), u),
            lerp(h(xi, yi + 1), h(xi + 1, yi + 1), u),
            v,
        )

    def noise_3d(self, x: float, y: float, z: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        z0 = math.floor(z)
        xi = x0 & TABLE_MASK
        yi = y0 & TABLE_MASK
        zi = z0 & TABLE_MASK
        u = fade(x - x0)
        v = fade(y - y0)
        w = fade(z - z0)
        h = self._hash
        return lerp(
            lerp(
                lerp(h(xi, yi, zi), h(xi + 1, yi, zi), u),
                lerp(h(xi, yi + 1, zi), h(xi + 1, yi + 1, zi), u),
                v,
            ),
            lerp(
                lerp(h(xi, yi, zi + 1), h(xi + 1, yi, zi + 1), u),
                lerp(h(xi, yi + 1, zi + 1), h(xi + 1, yi + 1, zi + 1), u),
                v,
            ),
            w,
        )
