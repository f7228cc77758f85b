"""Versioned API route modules."""

from fastapi import APIRouter

from seedforge.api.routes.config import router as config_router
from seedforge.api.routes.generators import router as generators_router
from seedforge.api.routes.noise import router as noise_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(generators_router, tags=["Generators"])
api_router.include_router(noise_router, tags=["Noise"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
