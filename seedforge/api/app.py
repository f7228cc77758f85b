"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from seedforge.api.dependencies import set_registry
from seedforge.api.registry import SessionLimitError, SessionNotFoundError, SessionRegistry
from seedforge.api.routes import api_router
from seedforge.config import ForgeConfig
from seedforge.core.errors import ConfigurationError
from seedforge.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ConfigurationError)
    async def _configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(SessionNotFoundError)
    async def _session_not_found(request: Request, exc: SessionNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(SessionLimitError)
    async def _session_limit(request: Request, exc: SessionLimitError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})


def create_app(config: ForgeConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = ForgeConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        registry = SessionRegistry(_config)
        set_registry(registry)
        logger.info("SeedForge API started (default algorithm %s).", _config.default_algorithm.value)
        yield
        registry.clear()
        set_registry(None)
        logger.info("SeedForge API shutting down.")

    app = FastAPI(
        title="SeedForge",
        description=(
            "Deterministic seedable random generation.\n\n"
            "## API Groups\n\n"
            "- **Generators**: seeded sessions, draws, state snapshots, reset and fork\n"
            "- **Noise**: value, simplex, Perlin, Worley and fractal fields sampled on a grid\n"
            "- **Config**: read-only service configuration\n"
        ),
        version="1.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Generators", "description": "Server-side SeededRNG sessions. Every draw is a pure function of seed, algorithm and prior calls."},
            {"name": "Noise", "description": "Stateless noise sampling; the same seed always yields the same grid."},
            {"name": "Config", "description": "Read-only service configuration and supported algorithms."},
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)
    app.include_router(api_router)

    return app
