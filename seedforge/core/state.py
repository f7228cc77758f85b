"""Immutable state records for bit-generators and the facade.

Each algorithm has its own frozen pydantic record; the persisted payload is
the camelCase dump of these records::

    {
      "algorithm": "xoshiro128**",
      "generatorState": {"s": [...], "originalSeed": "my-seed"},
      "normalCache": {"spare": null, "hasSpare": false}
    }
"""

from __future__ import annotations

import json
from typing import Annotated, Any, ClassVar, Union

import xxhash
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from seedforge.core.enums import Algorithm, resolve_algorithm
from seedforge.core.errors import ConfigurationError
from seedforge.core.hashing import MASK32

# Signed or overflowed words written by other implementations fold to
# unsigned 32 bits.
Word = Annotated[int, Field(ge=-(2**31), le=2**53), AfterValidator(lambda v: v & MASK32)]
Seed = Union[int, str]


class _Record(BaseModel):
    """Base for payload records: frozen, camelCase on the wire, strict keys."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Per-algorithm generator state
# ---------------------------------------------------------------------------

class Mulberry32State(_Record):
    algorithm: ClassVar[Algorithm] = Algorithm.MULBERRY32

    state: Word
    seed: Word


class Xoshiro128State(_Record):
    algorithm: ClassVar[Algorithm] = Algorithm.XOSHIRO128SS

    s: tuple[Word, Word, Word, Word]
    original_seed: Seed


class Xorshift128State(_Record):
    algorithm: ClassVar[Algorithm] = Algorithm.XORSHIFT128PLUS

    s: tuple[Word, Word, Word, Word]
    original_seed: Seed


class Pcg32State(_Record):
    algorithm: ClassVar[Algorithm] = Algorithm.PCG32

    state_hi: Word
    state_lo: Word
    inc_hi: Word
    inc_lo: Word
    original_seed: Seed
    original_sequence: int


class Sfc32State(_Record):
    algorithm: ClassVar[Algorithm] = Algorithm.SFC32

    a: Word
    b: Word
    c: Word
    counter: Word
    original_seed: Seed


class LcgState(_Record):
    algorithm: ClassVar[Algorithm] = Algorithm.LCG

    state: int = Field(ge=0, le=2**53)
    seed: Word
    a: int = Field(gt=0)
    c: int = Field(ge=0)
    m: int = Field(gt=0)


GeneratorState = Union[
    Mulberry32State,
    Xoshiro128State,
    Xorshift128State,
    Pcg32State,
    Sfc32State,
    LcgState,
]

STATE_RECORDS: dict[Algorithm, type[_Record]] = {
    Algorithm.MULBERRY32: Mulberry32State,
    Algorithm.XOSHIRO128SS: Xoshiro128State,
    Algorithm.XORSHIFT128PLUS: Xorshift128State,
    Algorithm.PCG32: Pcg32State,
    Algorithm.SFC32: Sfc32State,
    Algorithm.LCG: LcgState,
}


# ---------------------------------------------------------------------------
# Facade state
# ---------------------------------------------------------------------------

class NormalCache(_Record):
    """The unused Box-Muller value from the last normal() pair."""

    spare: float | None = None
    has_spare: bool = False


class ForgeState(_Record):
    """Complete, restorable state of a SeededRNG."""

    algorithm: Algorithm
    generator_state: GeneratorState
    normal_cache: NormalCache = NormalCache()

    @classmethod
    def from_payload(cls, payload: Any) -> ForgeState:
        """Validate a payload dict, resolving the record type from ``algorithm``."""
        if isinstance(payload, ForgeState):
            return payload
        if not isinstance(payload, dict):
            raise ConfigurationError(f"State payload must be a mapping, got {type(payload).__name__}")
        for key in ("algorithm", "generatorState"):
            if key not in payload:
                raise ConfigurationError(f"State payload missing {key!r}")
        algorithm = resolve_algorithm(payload["algorithm"])
        record_type = STATE_RECORDS[algorithm]
        try:
            generator_state = record_type.model_validate(payload["generatorState"])
            normal_cache = NormalCache.model_validate(
                payload.get("normalCache") or {"spare": None, "hasSpare": False}
            )
        except ValidationError as exc:
            raise ConfigurationError(f"Malformed {algorithm.value} state: {exc}") from exc
        if normal_cache.has_spare and normal_cache.spare is None:
            raise ConfigurationError("Normal cache flags a spare value but carries none")
        return cls(
            algorithm=algorithm,
            generator_state=generator_state,
            normal_cache=normal_cache,
        )

    def to_json(self) -> str:
        return json.dumps(self.to_payload(), sort_keys=True)

    @classmethod
    def from_json(cls, text: str) -> ForgeState:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"State is not valid JSON: {exc}") from exc
        return cls.from_payload(payload)

    def fingerprint(self) -> str:
        """Short xxh64 digest of the canonical payload, for cheap equality checks."""
        return xxhash.xxh64(self.to_json().encode("utf-8")).hexdigest()
