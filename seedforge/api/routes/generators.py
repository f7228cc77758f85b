"""/api/v1/generators: create, draw from, snapshot and fork seeded sessions."""

from __future__ import annotations

import inspect
from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from seedforge.api.dependencies import get_registry
from seedforge.api.registry import Session, SessionRegistry
from seedforge.api.schemas import (
    ERROR_RESPONSES,
    CreateGeneratorRequest,
    DrawRequest,
    DrawResponse,
    ForkRequest,
    ForkResponse,
    GeneratorInfo,
)
from seedforge.core.enums import DrawKind
from seedforge.core.errors import ConfigurationError
from seedforge.systems.rng import SeededRNG

router = APIRouter(prefix="/generators", responses=ERROR_RESPONSES)


def _info(session: Session) -> GeneratorInfo:
    return GeneratorInfo(
        id=session.session_id,
        algorithm=session.algorithm.value,
        seed=session.seed,
        fingerprint=session.rng.get_state().fingerprint(),
    )


def _origin_seed(rng: SeededRNG) -> str | int:
    """The seed recorded in the generator state."""
    state = rng.generator.get_state()
    if hasattr(state, "original_seed"):
        return state.original_seed
    return state.seed


def _draw(rng: SeededRNG, kind: DrawKind, count: int, params: dict[str, Any]) -> tuple[list[Any], SeededRNG]:
    """Draw on a clone of *rng*; the caller adopts the clone only on success."""
    trial = rng.clone()
    method = getattr(trial, kind.value)
    try:
        inspect.signature(method).bind(**params)
        return [method(**params) for _ in range(count)], trial
    except ConfigurationError:
        raise
    except (TypeError, ValueError, ArithmeticError) as exc:
        raise ConfigurationError(f"Invalid parameters for {kind.value}: {exc}") from None


@router.post("", response_model=GeneratorInfo, status_code=201)
def create_generator(
    body: CreateGeneratorRequest,
    registry: SessionRegistry = Depends(get_registry),
) -> GeneratorInfo:
    session = registry.create(body.seed, body.algorithm)
    return _info(session)


@router.get("/{session_id}", response_model=GeneratorInfo)
def get_generator(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> GeneratorInfo:
    with registry.locked(session_id) as session:
        return _info(session)


@router.delete("/{session_id}", status_code=204)
def delete_generator(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> Response:
    registry.remove(session_id)
    return Response(status_code=204)


@router.post("/{session_id}/draw", response_model=DrawResponse)
def draw(
    session_id: str,
    body: DrawRequest,
    registry: SessionRegistry = Depends(get_registry),
) -> DrawResponse:
    limit = registry.config.max_batch_size
    if body.count > limit:
        raise ConfigurationError(f"count {body.count} exceeds max_batch_size {limit}")
    with registry.locked(session_id) as session:
        values, session.rng = _draw(session.rng, body.kind, body.count, body.params)
        return DrawResponse(
            id=session.session_id,
            kind=body.kind,
            values=values,
            fingerprint=session.rng.get_state().fingerprint(),
        )


@router.get("/{session_id}/state")
def get_state(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> dict[str, Any]:
    with registry.locked(session_id) as session:
        return session.rng.get_state().to_payload()


@router.put("/{session_id}/state", response_model=GeneratorInfo)
def put_state(
    session_id: str,
    payload: dict[str, Any] = Body(...),
    registry: SessionRegistry = Depends(get_registry),
) -> GeneratorInfo:
    with registry.locked(session_id) as session:
        session.rng.set_state(payload)
        return _info(session)


@router.post("/{session_id}/reset", response_model=GeneratorInfo)
def reset(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> GeneratorInfo:
    with registry.locked(session_id) as session:
        session.rng.reset()
        return _info(session)


@router.post("/{session_id}/fork", response_model=ForkResponse, status_code=201)
def fork(
    session_id: str,
    body: ForkRequest | None = None,
    registry: SessionRegistry = Depends(get_registry),
) -> ForkResponse:
    label = body.label if body is not None else ""
    with registry.locked(session_id) as session:
        child_rng = session.rng.fork(label)
        parent = _info(session)
    child = registry.adopt(_origin_seed(child_rng), child_rng)
    return ForkResponse(parent=parent, child=_info(child))
