"""Seeded random facade: one bit-generator plus distributions and utilities.

The Golden Rule: the value of any draw depends ONLY on the seed, the
algorithm and the sequence of calls made before it. Nothing is read from the
clock or the environment.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from seedforge.core.enums import DEFAULT_ALGORITHM, Algorithm
from seedforge.core.errors import ConfigurationError
from seedforge.core.state import ForgeState, GeneratorState, NormalCache
from seedforge.generators import BitGenerator, create_generator, generator_from_state
from seedforge.generators.xoshiro128 import Xoshiro128
from seedforge.systems.distributions import DistributionMixin
from seedforge.systems.sampling import SamplingMixin

logger = logging.getLogger(__name__)


class SeededRNG(DistributionMixin, SamplingMixin):
    """Deterministic pseudo-random number generator.

    Owns exactly one bit-generator and one cached Box-Muller spare. Instances
    are not thread-safe; give each consumer its own ``fork()`` or serialise
    calls externally.
    """

    __slots__ = ("_generator", "_origin", "_spare_normal", "_has_spare_normal")

    def __init__(self, seed: str | int, algorithm: str | Algorithm = DEFAULT_ALGORITHM) -> None:
        self._generator: BitGenerator | None = None
        self.set_seed(seed, algorithm)
        # reset() returns here, even after later set_seed() calls.
        self._origin: tuple[Algorithm, GeneratorState] = (
            self._generator.algorithm,
            self._generator.get_state(),
        )

    # -- properties --

    @property
    def algorithm(self) -> Algorithm:
        return self._generator.algorithm

    @property
    def generator(self) -> BitGenerator:
        return self._generator

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def set_seed(self, seed: str | int, algorithm: str | Algorithm | None = None) -> None:
        """Replace the generator; *algorithm* defaults to the active one."""
        if algorithm is None:
            algorithm = self._generator.algorithm if self._generator is not None else DEFAULT_ALGORITHM
        self._generator = create_generator(algorithm, seed)
        self._spare_normal: float | None = None
        self._has_spare_normal = False
        logger.debug("Seeded %s with %r", self._generator.algorithm.value, seed)

    # ------------------------------------------------------------------
    # Uniform draws
    # ------------------------------------------------------------------

    def random(self) -> float:
        """Float in [0, 1)."""
        return self._generator.next_float()

    def random_int(self) -> int:
        """Raw unsigned 32-bit integer."""
        return self._generator.next_uint32()

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        """Float in [low, high)."""
        return low + self.random() * (high - low)

    def integer(self, low: float, high: float) -> int:
        """Integer in [low, high], both ends inclusive."""
        low = math.ceil(low)
        high = math.floor(high)
        return math.floor(self.random() * (high - low + 1)) + low

    def boolean(self, probability: float = 0.5) -> bool:
        return self.random() < probability

    def sign(self, probability: float = 0.5) -> int:
        """+1 with *probability*, otherwise -1."""
        return 1 if self.boolean(probability) else -1

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def get_state(self) -> ForgeState:
        return ForgeState(
            algorithm=self._generator.algorithm,
            generator_state=self._generator.get_state(),
            normal_cache=NormalCache(spare=self._spare_normal, has_spare=self._has_spare_normal),
        )

    def set_state(self, state: ForgeState | dict[str, Any]) -> None:
        """Restore generator state and normal cache from a snapshot or payload.

        The restored generator's own seed becomes the reset() target.
        """
        forge_state = ForgeState.from_payload(state)
        generator = generator_from_state(forge_state.algorithm, forge_state.generator_state)
        pristine = generator.clone()
        pristine.reset()

        self._generator = generator
        self._origin = (generator.algorithm, pristine.get_state())
        self._spare_normal = forge_state.normal_cache.spare if forge_state.normal_cache.has_spare else None
        self._has_spare_normal = forge_state.normal_cache.has_spare
        logger.debug("Restored %s state", generator.algorithm.value)

    def reset(self) -> None:
        """Return to the state right after construction; clears the normal cache."""
        algorithm, state = self._origin
        self._generator = generator_from_state(algorithm, state)
        self._spare_normal = None
        self._has_spare_normal = False

    def clone(self) -> SeededRNG:
        """Fully independent copy, including the normal cache."""
        twin = type(self).__new__(type(self))
        twin._generator = self._generator.clone()
        twin._origin = self._origin
        twin._spare_normal = self._spare_normal
        twin._has_spare_normal = self._has_spare_normal
        return twin

    def fork(self, label: str = "") -> SeededRNG:
        """Child generator seeded from ``"<algorithm>_<draw>_<label>"``.

        Consumes exactly one raw draw from this stream, so forking is
        reproducible but not free: the parent's sequence moves on by one.
        """
        name = self._generator.algorithm.value
        derived_seed = f"{name}_{self.random_int()}_{label}"
        logger.debug("Forked %s stream %r", name, derived_seed)
        return type(self)(derived_seed, self._generator.algorithm)

    def jump(self) -> None:
        """Skip 2**64 draws ahead (xoshiro128** only)."""
        if not isinstance(self._generator, Xoshiro128):
            raise ConfigurationError(f"jump() is not supported by {self._generator.algorithm.value}")
        self._generator.jump()

    @classmethod
    def from_state(cls, state: ForgeState | dict[str, Any]) -> SeededRNG:
        """Build an instance directly from a saved state."""
        rng = cls.__new__(cls)
        rng.set_state(state)
        return rng

    def __repr__(self) -> str:
        return f"SeededRNG(algorithm={self._generator.algorithm.value!r})"
