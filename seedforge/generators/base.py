"""The bit-generator contract shared by every algorithm."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

from pydantic import ValidationError

from seedforge.core.enums import Algorithm
from seedforge.core.errors import ConfigurationError
from seedforge.core.hashing import TWO_POW_32

G = TypeVar("G", bound="BitGenerator")


def normalize_seed(seed: Any) -> str | int:
    """Accept str and int seeds; integral floats are treated as ints."""
    if isinstance(seed, bool) or not isinstance(seed, (str, int, float)):
        raise ConfigurationError(f"Seed must be a string or integer, got {type(seed).__name__}")
    if isinstance(seed, float):
        if not (math.isfinite(seed) and seed.is_integer()):
            raise ConfigurationError(f"Seed must be a string or integer, got {seed!r}")
        return int(seed)
    return seed


class BitGenerator(ABC):
    """Deterministic engine producing raw unsigned 32-bit integers.

    Subclasses set:
      - algorithm:  the Algorithm member they implement
      - state_type: the state record returned by get_state()
    and implement next_uint32(), get_state(), _restore() and reset().
    """

    __slots__ = ()

    algorithm: ClassVar[Algorithm]
    state_type: ClassVar[type]

    @abstractmethod
    def next_uint32(self) -> int:
        """Advance the state and return an integer in [0, 2**32)."""

    def next_float(self) -> float:
        """Return a float in [0, 1)."""
        return self.next_uint32() / TWO_POW_32

    @abstractmethod
    def get_state(self) -> Any:
        """Snapshot of the full state; never aliases live storage."""

    @abstractmethod
    def _restore(self, state: Any) -> None:
        """Overwrite every state field from an already-validated record."""

    @abstractmethod
    def reset(self) -> None:
        """Rebuild the state exactly as the constructor did from the original seed."""

    def set_state(self, state: Any) -> None:
        """Restore from a record (or its payload dict) of this algorithm."""
        self._restore(self._coerce_state(state))

    def clone(self: G) -> G:
        """Independent copy with identical state."""
        return type(self).from_state(self.get_state())

    @classmethod
    def from_state(cls: type[G], state: Any) -> G:
        """Build an instance directly from a state record, skipping seeding."""
        instance = cls.__new__(cls)
        instance._restore(cls._coerce_state(state))
        return instance

    @classmethod
    def _coerce_state(cls, state: Any) -> Any:
        if isinstance(state, dict):
            try:
                return cls.state_type.model_validate(state)
            except ValidationError as exc:
                raise ConfigurationError(f"Malformed {cls.algorithm.value} state: {exc}") from exc
        if not isinstance(state, cls.state_type):
            raise ConfigurationError(
                f"{cls.algorithm.value} cannot restore a {type(state).__name__} snapshot"
            )
        return state

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_state()!r})"
