"""GET /api/v1/noise/{kind}: sample a noise field over a regular grid."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from seedforge.api.dependencies import get_config
from seedforge.api.schemas import ERROR_RESPONSES, NoiseResponse
from seedforge.config import ForgeConfig
from seedforge.core.enums import DistanceMetric, NoiseKind
from seedforge.core.errors import ConfigurationError
from seedforge.noise import (
    BillowedNoise,
    PerlinNoise,
    RidgedNoise,
    SimplexNoise,
    ValueNoise,
    WorleyNoise,
)
from seedforge.noise.fractal import fbm

router = APIRouter(responses={422: ERROR_RESPONSES[422]})

_BASE_FIELDS = {
    NoiseKind.VALUE: ValueNoise,
    NoiseKind.SIMPLEX: SimplexNoise,
    NoiseKind.PERLIN: PerlinNoise,
}


def build_field(kind: NoiseKind, seed: str | int, octaves: int, cfg: ForgeConfig, metric: DistanceMetric):
    if kind is NoiseKind.RIDGED:
        return RidgedNoise(seed, octaves, cfg.noise_lacunarity, cfg.noise_persistence)
    if kind is NoiseKind.BILLOWED:
        return BillowedNoise(seed, octaves, cfg.noise_lacunarity, cfg.noise_persistence)
    if kind is NoiseKind.WORLEY:
        return WorleyNoise(seed, metric=metric)
    return _BASE_FIELDS[kind](seed)


@router.get("/noise/{kind}", response_model=NoiseResponse)
def sample_noise(
    kind: NoiseKind,
    seed: str | None = Query(None, description="Field seed (defaults to the configured seed)"),
    width: int = Query(16, ge=1),
    height: int = Query(16, ge=1),
    scale: float = Query(0.1, gt=0.0, description="World units per grid cell"),
    octaves: int | None = Query(None, ge=1, le=16, description="Defaults to the configured noise_octaves"),
    z: float | None = Query(None, description="Sample a 3D slice at this depth"),
    metric: DistanceMetric = Query(DistanceMetric.EUCLIDEAN),
    cfg: ForgeConfig = Depends(get_config),
) -> NoiseResponse:
    if width > cfg.max_noise_grid or height > cfg.max_noise_grid:
        raise ConfigurationError(f"Grid exceeds max_noise_grid {cfg.max_noise_grid}")
    if seed is None:
        seed = cfg.default_seed
    if octaves is None:
        octaves = cfg.noise_octaves

    field = build_field(kind, seed, octaves, cfg, metric)
    fractal_octaves = octaves if kind in _BASE_FIELDS else 1

    values: list[list[float]] = []
    for j in range(height):
        row: list[float] = []
        for i in range(width):
            x, y = i * scale, j * scale
            if fractal_octaves > 1:
                row.append(fbm(field, x, y, z, fractal_octaves, cfg.noise_lacunarity, cfg.noise_persistence))
            else:
                row.append(field.sample(x, y, z))
        values.append(row)

    return NoiseResponse(
        kind=kind,
        seed=seed,
        width=width,
        height=height,
        scale=scale,
        octaves=octaves,
        values=values,
    )
