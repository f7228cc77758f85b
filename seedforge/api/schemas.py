"""Pydantic request and response models for the REST API."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field

from seedforge.core.enums import DrawKind, NoiseKind

DrawValue = Union[bool, int, float, str]


# --- Generators ---

class CreateGeneratorRequest(BaseModel):
    seed: Union[int, str, None] = None
    algorithm: str | None = None


class GeneratorInfo(BaseModel):
    id: str
    algorithm: str
    seed: Union[int, str]
    fingerprint: str


class DrawRequest(BaseModel):
    kind: DrawKind = DrawKind.RANDOM
    count: int = Field(1, ge=1)
    params: dict[str, Any] = Field(default_factory=dict)


class DrawResponse(BaseModel):
    id: str
    kind: DrawKind
    values: list[DrawValue]
    fingerprint: str


class ForkRequest(BaseModel):
    label: str = ""


class ForkResponse(BaseModel):
    parent: GeneratorInfo
    child: GeneratorInfo


# --- Noise ---

class NoiseResponse(BaseModel):
    kind: NoiseKind
    seed: Union[int, str]
    width: int
    height: int
    scale: float
    octaves: int
    values: list[list[float]]


# --- Config ---

class ForgeConfigResponse(BaseModel):
    default_seed: Union[int, str]
    default_algorithm: str
    algorithms: list[str]
    noise_octaves: int
    noise_lacunarity: float
    noise_persistence: float
    max_noise_grid: int
    max_batch_size: int
    max_sessions: int
    active_sessions: int


class ErrorResponse(BaseModel):
    """Body of every 4xx reply; request validation failures carry a list."""

    detail: Union[str, list[dict[str, Any]]]


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Unknown session"},
    409: {"model": ErrorResponse, "description": "Session limit reached"},
    422: {"model": ErrorResponse, "description": "Invalid seed, algorithm or parameters"},
}
