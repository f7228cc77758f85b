from seedforge.noise.base import NoiseField, build_permutation, fade, lerp
from seedforge.noise.fractal import BillowedNoise, RidgedNoise, billow, fbm, ridged, turbulence, warp
from seedforge.noise.perlin import PerlinNoise
from seedforge.noise.simplex import GRAD3, SimplexNoise
from seedforge.noise.value import ValueNoise
from seedforge.noise.worley import WorleyNoise

__all__ = [
    "GRAD3",
    "BillowedNoise",
    "NoiseField",
    "PerlinNoise",
    "RidgedNoise",
    "SimplexNoise",
    "ValueNoise",
    "WorleyNoise",
    "billow",
    "build_permutation",
    "fade",
    "fbm",
    "lerp",
    "ridged",
    "turbulence",
    "warp",
]
