"""GET /api/v1/config: expose service configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from seedforge.api.dependencies import get_registry
from seedforge.api.registry import SessionRegistry
from seedforge.api.schemas import ForgeConfigResponse
from seedforge.core.enums import Algorithm

router = APIRouter()


@router.get("/config", response_model=ForgeConfigResponse)
def get_config(
    registry: SessionRegistry = Depends(get_registry),
) -> ForgeConfigResponse:
    cfg = registry.config
    return ForgeConfigResponse(
        default_seed=cfg.default_seed,
        default_algorithm=cfg.default_algorithm.value,
        algorithms=[a.value for a in Algorithm],
        noise_octaves=cfg.noise_octaves,
        noise_lacunarity=cfg.noise_lacunarity,
        noise_persistence=cfg.noise_persistence,
        max_noise_grid=cfg.max_noise_grid,
        max_batch_size=cfg.max_batch_size,
        max_sessions=cfg.max_sessions,
        active_sessions=len(registry),
    )
