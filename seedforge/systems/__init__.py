"""Engine systems: the seeded random facade and its samplers."""

from seedforge.systems.rng import SeededRNG
from seedforge.systems.sampling import DEFAULT_CHARSET

__all__ = ["DEFAULT_CHARSET", "SeededRNG"]
