"""Request dependencies backed by the process-wide SessionRegistry.

The app lifespan installs the registry on startup and detaches it on
shutdown; routes reach it (or just its configuration) through ``Depends``.
"""

from __future__ import annotations

import logging

from fastapi import Depends

from seedforge.api.registry import SessionRegistry
from seedforge.config import ForgeConfig

logger = logging.getLogger(__name__)

_registry: SessionRegistry | None = None


class RegistryUnavailableError(RuntimeError):
    """A route ran outside the lifespan of an app built by ``create_app``."""


def set_registry(registry: SessionRegistry | None) -> None:
    """Install *registry* for request handlers, or detach with ``None``."""
    global _registry
    if registry is not None and _registry is not None and _registry is not registry:
        logger.warning("Replacing a live session registry holding %d sessions", len(_registry))
    _registry = registry


def get_registry() -> SessionRegistry:
    if _registry is None:
        raise RegistryUnavailableError(
            "No session registry installed; serve the app built by create_app()"
        )
    return _registry


def get_config(registry: SessionRegistry = Depends(get_registry)) -> ForgeConfig:
    return registry.config
