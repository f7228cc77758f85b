"""Improved Perlin gradient noise."""

from __future__ import annotations

import math

from seedforge.noise.base import TABLE_MASK, NoiseField, fade, lerp


def _grad1(h: int, x: float) -> float:
    g = ((h & 7) + 1) / 8.0
    return -g * x if h & 8 else g * x


def _grad3(h: int, x: float, y: float, z: float) -> float:
    # 12 cube-edge gradients, padded to 16 so the low nibble indexes them.
    h &= 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


class PerlinNoise(NoiseField):
    """Classic lattice gradient noise; output is approximately within [-1, 1]."""

    __slots__ = ()

    def noise_1d(self, x: float) -> float:
        p = self.perm
        x0 = math.floor(x)
        xi = x0 & TABLE_MASK
        xf = x - x0
        u = fade(xf)
        return 2.0 * lerp(_grad1(p[xi], xf), _grad1(p[xi + 1], xf - 1.0), u)

    def noise_2d(self, x: float, y: float) -> float:
        p = self.perm
        x0 = math.floor(x)
        y0 = math.floor(y)
        xi = x0 & TABLE_MASK
        yi = y0 & TABLE_MASK
        xf = x - x0
        yf = y - y0
        u = fade(xf)
        v = fade(yf)

        a = p[xi] + yi
        b = p[xi + 1] + yi
        return lerp(
            lerp(_grad3(p[a], xf, yf, 0.0), _grad3(p[b], xf - 1.0, yf, 0.0), u),
            lerp(_grad3(p[a + 1], xf, yf - 1.0, 0.0), _grad3(p[b + 1], xf - 1.0, yf - 1.0, 0.0), u),
            v,
        )

    def noise_3d(self, x: float, y: float, z: float) -> float:
        p = self.perm
        x0 = math.floor(x)
        y0 = math.floor(y)
        z0 = math.floor(z)
        xi = x0 & TABLE_MASK
        yi = y0 & TABLE_MASK
        zi = z0 & TABLE_MASK
        xf = x - x0
        yf = y - y0
        zf = z - z0
        u = fade(xf)
        v = fade(yf)
        w = fade(zf)

        a = p[xi] + yi
        aa = p[a] + zi
        ab = p[a + 1] + zi
        b = p[xi + 1] + yi
        ba = p[b] + zi
        bb = p[b + 1] + zi

        return lerp(
            lerp(
                lerp(_grad3(p[aa], xf, yf, zf), _grad3(p[ba], xf - 1.0, yf, zf), u),
                lerp(_grad3(p[ab], xf, yf - 1.0, zf), _grad3(p[bb], xf - 1.0, yf - 1.0, zf), u),
                v,
            ),
            lerp(
                lerp(_grad3(p[aa + 1], xf, yf, zf - 1.0), _grad3(p[ba + 1], xf - 1.0, yf, zf - 1.0), u),
                lerp(
                    _grad3(p[ab + 1], xf, yf - 1.0, zf - 1.0),
                    _grad3(p[bb + 1], xf - 1.0, yf - 1.0, zf - 1.0),
                    u,
                ),
                v,
            ),
            w,
        )
