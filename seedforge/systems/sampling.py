"""Array, geometric and special-value helpers on top of the uniform stream."""

from __future__ import annotations

import math
from typing import Callable, Hashable, Iterable, Mapping, MutableSequence, Sequence, TypeVar

from seedforge.core.errors import ConfigurationError
from seedforge.core.models import HSL, RGB, Point2D, Point3D

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

DEFAULT_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
_HEX = "0123456789abcdef"
_TWO_PI = 2.0 * math.pi


class SamplingMixin:
    """Helpers built on ``random()`` and ``integer()``."""

    __slots__ = ()

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates shuffle in place; returns *items*."""
        for i in range(len(items) - 1, 0, -1):
            j = self.integer(0, i)
            items[i], items[j] = items[j], items[i]
        return items

    def shuffled(self, items: Iterable[T]) -> list[T]:
        """Shuffled copy; *items* is left untouched."""
        return self.shuffle(list(items))

    def pick(self, items: Sequence[T]) -> T | None:
        """Uniformly chosen element, or None when *items* is empty."""
        if not items:
            return None
        return items[self.integer(0, len(items) - 1)]

    def sample(self, items: Sequence[T], n: int) -> list[T]:
        """Up to *n* distinct positions of *items*, without replacement."""
        pool = self.shuffled(items)
        return pool[: max(0, min(n, len(pool)))]

    def weighted_pick(self, items: Sequence[T], weights: Sequence[float]) -> T | None:
        """Pick by cumulative subtraction over *weights*.

        The last item is returned if rounding leaves a positive remainder.
        """
        if len(items) != len(weights):
            raise ConfigurationError("Items and weights must have same length")
        if not items:
            return None
        remaining = self.random() * sum(weights)
        for item, weight in zip(items, weights):
            remaining -= weight
            if remaining <= 0:
                return item
        return items[-1]

    def weighted_pick_mapping(self, weighted: Mapping[K, float]) -> K | None:
        """weighted_pick() over a ``{item: weight}`` mapping, in insertion order."""
        return self.weighted_pick(list(weighted.keys()), list(weighted.values()))

    def array(self, length: int, fn: Callable[[], T] | None = None) -> list[T]:
        """*length* values from *fn* (default: ``random()``)."""
        draw = fn if fn is not None else self.random
        return [draw() for _ in range(length)]

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def point_in_circle(self, radius: float = 1.0) -> Point2D:
        """Uniform over the disc area (sqrt radius, no centre bias)."""
        r = radius * math.sqrt(self.random())
        theta = self.random() * _TWO_PI
        return Point2D(r * math.cos(theta), r * math.sin(theta))

    def point_on_circle(self, radius: float = 1.0) -> Point2D:
        theta = self.random() * _TWO_PI
        return Point2D(radius * math.cos(theta), radius * math.sin(theta))

    def point_in_sphere(self, radius: float = 1.0) -> Point3D:
        """Uniform over the ball volume (cube-root radius)."""
        theta = self.random() * _TWO_PI
        phi = math.acos(2.0 * self.random() - 1.0)
        r = radius * self.random() ** (1.0 / 3.0)
        return _spherical(r, theta, phi)

    def point_on_sphere(self, radius: float = 1.0) -> Point3D:
        theta = self.random() * _TWO_PI
        phi = math.acos(2.0 * self.random() - 1.0)
        return _spherical(radius, theta, phi)

    def direction_2d(self) -> Point2D:
        angle = self.random() * _TWO_PI
        return Point2D(math.cos(angle), math.sin(angle))

    def direction_3d(self) -> Point3D:
        return self.point_on_sphere(1.0)

    def point_in_rect(self, x: float, y: float, width: float, height: float) -> Point2D:
        return Point2D(x + self.random() * width, y + self.random() * height)

    def point_in_box(
        self, x: float, y: float, z: float, width: float, height: float, depth: float,
    ) -> Point3D:
        return Point3D(
            x + self.random() * width,
            y + self.random() * height,
            z + self.random() * depth,
        )

    # ------------------------------------------------------------------
    # Special values
    # ------------------------------------------------------------------

    def uuid(self) -> str:
        """RFC 4122 version-4 UUID string built from this stream."""
        chars: list[str] = []
        for i in range(36):
            if i in (8, 13, 18, 23):
                chars.append("-")
            elif i == 14:
                chars.append("4")
            elif i == 19:
                chars.append(_HEX[(self.integer(0, 15) & 0x3) | 0x8])
            else:
                chars.append(_HEX[self.integer(0, 15)])
        return "".join(chars)

    def color(self) -> str:
        """Hex colour ``#rrggbb``."""
        return f"#{self.integer(0, 0xFFFFFF):06x}"

    def color_rgb(self) -> RGB:
        return RGB(r=self.integer(0, 255), g=self.integer(0, 255), b=self.integer(0, 255))

    def color_hsl(self, saturation: int | None = None, lightness: int | None = None) -> HSL:
        """Random hue; saturation and lightness are drawn only when not given."""
        h = self.integer(0, 360)
        s = saturation if saturation is not None else self.integer(0, 100)
        l = lightness if lightness is not None else self.integer(0, 100)  # noqa: E741
        return HSL(h=h, s=s, l=l)

    def char(self, charset: str = DEFAULT_CHARSET) -> str:
        if not charset:
            return ""
        return charset[self.integer(0, len(charset) - 1)]

    def string(self, length: int, charset: str = DEFAULT_CHARSET) -> str:
        return "".join(self.char(charset) for _ in range(length))


def _spherical(r: float, theta: float, phi: float) -> Point3D:
    sin_phi = math.sin(phi)
    return Point3D(
        r * sin_phi * math.cos(theta),
        r * sin_phi * math.sin(theta),
        r * math.cos(phi),
    )
