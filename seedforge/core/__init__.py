"""Core data types: algorithms, seed hashing, state records, errors."""

from seedforge.core.enums import Algorithm, DistanceMetric, resolve_algorithm
from seedforge.core.errors import ConfigurationError
from seedforge.core.hashing import cyrb128, splitmix64, string_to_seed
from seedforge.core.models import HSL, RGB, Point2D, Point3D
from seedforge.core.state import ForgeState, GeneratorState, NormalCache

__all__ = [
    "Algorithm",
    "ConfigurationError",
    "DistanceMetric",
    "ForgeState",
    "GeneratorState",
    "HSL",
    "NormalCache",
    "Point2D",
    "Point3D",
    "RGB",
    "cyrb128",
    "resolve_algorithm",
    "splitmix64",
    "string_to_seed",
]
