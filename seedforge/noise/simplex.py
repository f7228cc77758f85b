"""Simplex noise in 2D and 3D (skewed-lattice gradient noise)."""

from __future__ import annotations

import math

from seedforge.noise.base import TABLE_MASK, NoiseField

# The 12 edge midpoints of a cube; 2D lookups ignore the z component.
GRAD3: tuple[tuple[int, int, int], ...] = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)

F2 = 0.5 * (math.sqrt(3.0) - 1.0)
G2 = (3.0 - math.sqrt(3.0)) / 6.0
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0


def _corner_2d(gi: int, x: float, y: float) -> float:
    t = 0.5 - x * x - y * y
    if t < 0.0:
        return 0.0
    t *= t
    g = GRAD3[gi]
    return t * t * (g[0] * x + g[1] * y)


def _corner_3d(gi: int, x: float, y: float, z: float) -> float:
    t = 0.6 - x * x - y * y - z * z
    if t < 0.0:
        return 0.0
    t *= t
    g = GRAD3[gi]
    return t * t * (g[0] * x + g[1] * y + g[2] * z)


class SimplexNoise(NoiseField):
    """Simplex noise; output is approximately within [-1, 1].

    noise_1d() is the 2D field sampled along y = 0.
    """

    __slots__ = ("perm_mod12",)

    def __init__(self, seed: str | int) -> None:
        super().__init__(seed)
        self.perm_mod12 = tuple(p % 12 for p in self.perm)

    def noise_1d(self, x: float) -> float:
        return self.noise_2d(x, 0.0)

    def noise_2d(self, xin: float, yin: float) -> float:
        perm = self.perm
        pm12 = self.perm_mod12

        s = (xin + yin) * F2
        i = math.floor(xin + s)
        j = math.floor(yin + s)
        t = (i + j) * G2
        x0 = xin - (i - t)
        y0 = yin - (j - t)

        # Lower or upper triangle of the skewed cell.
        if x0 > y0:
            i1, j1 = 1, 0
        else:
            i1, j1 = 0, 1

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1.0 + 2.0 * G2
        y2 = y0 - 1.0 + 2.0 * G2

        ii = i & TABLE_MASK
        jj = j & TABLE_MASK
        gi0 = pm12[ii + perm[jj]]
        gi1 = pm12[ii + i1 + perm[jj + j1]]
        gi2 = pm12[ii + 1 + perm[jj + 1]]

        return 70.0 * (
            _corner_2d(gi0, x0, y0)
            + _corner_2d(gi1, x1, y1)
            + _corner_2d(gi2, x2, y2)
        )

    def noise_3d(self, xin: float, yin: float, zin: float) -> float:
        perm = self.perm
        pm12 = self.perm_mod12

        s = (xin + yin + zin) * F3
        i = math.floor(xin + s)
        j = math.floor(yin + s)
        k = math.floor(zin + s)
        t = (i + j + k) * G3
        x0 = xin - (i - t)
        y0 = yin - (j - t)
        z0 = zin - (k - t)

        # Pick the tetrahedron by ranking the offsets.
        if x0 >= y0:
            if y0 >= z0:
                i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0
            elif x0 >= z0:
                i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1
            else:
                i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1
        else:
            if y0 < z0:
                i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1
            elif x0 < z0:
                i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1
            else:
                i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0

        x1 = x0 - i1 + G3
        y1 = y0 - j1 + G3
        z1 = z0 - k1 + G3
        x2 = x0 - i2 + 2.0 * G3
        y2 = y0 - j2 + 2.0 * G3
        z2 = z0 - k2 + 2.0 * G3
        x3 = x0 - 1.0 + 3.0 * G3
        y3 = y0 - 1.0 + 3.0 * G3
        z3 = z0 - 1.0 + 3.0 * G3

        ii = i & TABLE_MASK
        jj = j & TABLE_MASK
        kk = k & TABLE_MASK
        gi0 = pm12[ii + perm[jj + perm[kk]]]
        gi1 = pm12[ii + i1 + perm[jj + j1 + perm[kk + k1]]]
        gi2 = pm12[ii + i2 + perm[jj + j2 + perm[kk + k2]]]
        gi3 = pm12[ii + 1 + perm[jj + 1 + perm[kk + 1]]]

        return 32.0 * (
            _corner_3d(gi0, x0, y0, z0)
            + _corner_3d(gi1, x1, y1, z1)
            + _corner_3d(gi2, x2, y2, z2)
            + _corner_3d(gi3, x3, y3, z3)
        )
