"""Uniform random numbers, vectors and colours."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Union

from saffron2d.vector import Vector2, Vector3, Vector4

Number = Union[int, float]

_rng = random.Random()


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


def integer(lower: int = 0, upper: int = 100) -> int:
    """A uniform integer in ``[lower, upper]``."""
    if lower > upper:
        raise ValueError(f"lower bound {lower} exceeds upper bound {upper}")
    return _rng.randint(lower, upper)


def real(lower: float = 0.0, upper: float = 1.0) -> float:
    """A uniform real number in ``[lower, upper)``."""
    if lower > upper:
        raise ValueError(f"lower bound {lower} exceeds upper bound {upper}")
    return lower + _rng.random() * (upper - lower)


def _component(low: Number, high: Number) -> Number:
    if isinstance(low, int) and isinstance(high, int):
        return integer(low, high)
    return real(low, high)


def vec2(low: Vector2, high: Vector2) -> Vector2:
    """A vector with each component drawn between ``low`` and ``high``."""
    return Vector2(_component(low.x, high.x), _component(low.y, high.y))


def vec3(low: Vector3, high: Vector3) -> Vector3:
    return Vector3(_component(low.x, high.x), _component(low.y, high.y), _component(low.z, high.z))


def vec4(low: Vector4, high: Vector4) -> Vector4:
    return Vector4(
        _component(low.x, high.x),
        _component(low.y, high.y),
        _component(low.z, high.z),
        _component(low.w, high.w),
    )


def color(randomize_alpha: bool = False) -> Color:
    """A random colour, opaque unless ``randomize_alpha`` is set."""
    v = vec4(Vector4(0, 0, 0, 0 if randomize_alpha else 255), Vector4(255, 255, 255, 255))
    return Color(int(v.x), int(v.y), int(v.z), int(v.w))


class RandomGenerator:
    """Draws values between ``lower`` and ``upper``; integers when both bounds are."""

    def __init__(self, lower: Number = 0, upper: Number = 100) -> None:
        self.lower = lower
        self.upper = upper

    def generate(self) -> Number:
        lower, upper = self.lower, self.upper
        if isinstance(lower, int) and isinstance(upper, int):
            low, high = sorted((lower, upper))
            return _rng.randint(low, high)
        return lower + _rng.random() * (upper - lower)