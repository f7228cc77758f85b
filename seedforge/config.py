"""Runtime configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from seedforge.core.enums import DEFAULT_ALGORITHM, Algorithm, resolve_algorithm


@dataclass(frozen=True)
class ForgeConfig:
    """Immutable configuration shared by the CLI and the HTTP service."""

    # Seeding
    default_seed: str | int = 42
    default_algorithm: Algorithm = DEFAULT_ALGORITHM

    # Noise
    noise_octaves: int = 4
    noise_lacunarity: float = 2.0
    noise_persistence: float = 0.5
    max_noise_grid: int = 256              # cells per side for /noise requests

    # Service limits
    max_batch_size: int = 10_000           # draws per /draw request
    max_sessions: int = 1_024

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    def with_overrides(self, **changes: Any) -> ForgeConfig:
        """Copy with the given fields replaced; ``None`` values are ignored."""
        changes = {k: v for k, v in changes.items() if v is not None}
        if "default_algorithm" in changes:
            changes["default_algorithm"] = resolve_algorithm(changes["default_algorithm"])
        return replace(self, **changes)
