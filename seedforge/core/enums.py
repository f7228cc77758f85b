"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, unique

from seedforge.core.errors import ConfigurationError


@unique
class Algorithm(str, Enum):
    """The closed set of bit-generation algorithms.

    Values are the canonical names written into persisted state.
    """

    MULBERRY32 = "mulberry32"
    XOSHIRO128SS = "xoshiro128**"
    XORSHIFT128PLUS = "xorshift128+"
    PCG32 = "pcg32"
    SFC32 = "sfc32"
    LCG = "lcg"


DEFAULT_ALGORITHM = Algorithm.XOSHIRO128SS

# Lowercase lookup keys accepted by resolve_algorithm().
ALGORITHM_ALIASES: dict[str, Algorithm] = {
    "mulberry32": Algorithm.MULBERRY32,
    "mulberry": Algorithm.MULBERRY32,
    "xoshiro128**": Algorithm.XOSHIRO128SS,
    "xoshiro128": Algorithm.XOSHIRO128SS,
    "xoshiro": Algorithm.XOSHIRO128SS,
    "xorshift128+": Algorithm.XORSHIFT128PLUS,
    "xorshift128": Algorithm.XORSHIFT128PLUS,
    "xorshift": Algorithm.XORSHIFT128PLUS,
    "pcg32": Algorithm.PCG32,
    "pcg": Algorithm.PCG32,
    "sfc32": Algorithm.SFC32,
    "sfc": Algorithm.SFC32,
    "lcg": Algorithm.LCG,
}


def resolve_algorithm(key: str | Algorithm) -> Algorithm:
    """Map an algorithm name or alias (any case) to its enum member."""
    if isinstance(key, Algorithm):
        return key
    if not isinstance(key, str):
        raise ConfigurationError(f"Unknown algorithm: {key!r}")
    try:
        return ALGORITHM_ALIASES[key.strip().lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown algorithm: {key}") from None


@unique
class DistanceMetric(str, Enum):
    """Distance functions for cellular (Worley) noise."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    CHEBYSHEV = "chebyshev"


@unique
class DrawKind(str, Enum):
    """Draw operations exposed by the HTTP service."""

    RANDOM = "random"
    RANDOM_INT = "random_int"
    UNIFORM = "uniform"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    SIGN = "sign"
    NORMAL = "normal"
    EXPONENTIAL = "exponential"
    POISSON = "poisson"
    BINOMIAL = "binomial"
    PARETO = "pareto"
    GAMMA = "gamma"
    BETA = "beta"
    TRIANGULAR = "triangular"
    LOG_NORMAL = "log_normal"
    WEIBULL = "weibull"
    CAUCHY = "cauchy"
    GEOMETRIC = "geometric"
    ZIPF = "zipf"
    CHI_SQUARED = "chi_squared"
    STUDENT_T = "student_t"
    VON_MISES = "von_mises"
    HYPERGEOMETRIC = "hypergeometric"
    UUID = "uuid"
    COLOR = "color"


@unique
class NoiseKind(str, Enum):
    """Noise fields exposed by the HTTP service."""

    VALUE = "value"
    SIMPLEX = "simplex"
    PERLIN = "perlin"
    WORLEY = "worley"
    RIDGED = "ridged"
    BILLOWED = "billowed"
