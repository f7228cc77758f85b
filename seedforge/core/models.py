"""Small value types returned by the geometric and colour helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point2D:
    """Immutable 2D point."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return (self.x * self.x + self.y * self.y) ** 0.5


@dataclass(frozen=True, slots=True)
class Point3D:
    """Immutable 3D point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return (self.x * self.x + self.y * self.y + self.z * self.z) ** 0.5


@dataclass(frozen=True, slots=True)
class RGB:
    r: int
    g: int
    b: int

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True, slots=True)
class HSL:
    h: int
    s: int
    l: int  # noqa: E741
