"""Affine 2D transforms held as a 4x4 column-major matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass

from saffron2d.vector import Vector2

_DEG_TO_RAD = 3.141592654 / 180.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0


class Transform:
    """A 3x3 affine transform, stored as a 4x4 matrix in column-major order.

    The in-place operations return the transform itself so they can be chained.
    """

    __slots__ = ("_m",)
    __hash__ = None  # mutable

    def __init__(self, a00: float = 1.0, a01: float = 0.0, a02: float = 0.0,
                 a10: float = 0.0, a11: float = 1.0, a12: float = 0.0,
                 a20: float = 0.0, a21: float = 0.0, a22: float = 1.0) -> None:
        self._m = [
            a00, a10, 0.0, a20,
            a01, a11, 0.0, a21,
            0.0, 0.0, 1.0, 0.0,
            a02, a12, 0.0, a22,
        ]

    @classmethod
    def identity(cls) -> Transform:
        """A new identity transform."""
        return cls()

    def matrix(self) -> tuple[float, ...]:
        """The 16 matrix entries in column-major order."""
        return tuple(self._m)

    def copy(self) -> Transform:
        result = Transform()
        result._m = list(self._m)
        return result

    def inverse(self) -> Transform:
        """The inverse transform, or the identity if this one is singular."""
        m = self._m
        det = (m[0] * (m[15] * m[5] - m[7] * m[13])
               - m[1] * (m[15] * m[4] - m[7] * m[12])
               + m[3] * (m[13] * m[4] - m[5] * m[12]))
        if det == 0.0:
            return Transform()
        return Transform(
            (m[15] * m[5] - m[7] * m[13]) / det,
            -(m[15] * m[4] - m[7] * m[12]) / det,
            (m[13] * m[4] - m[5] * m[12]) / det,
            -(m[15] * m[1] - m[3] * m[13]) / det,
            (m[15] * m[0] - m[3] * m[12]) / det,
            -(m[13] * m[0] - m[1] * m[12]) / det,
            (m[7] * m[1] - m[3] * m[5]) / det,
            -(m[7] * m[0] - m[3] * m[4]) / det,
            (m[5] * m[0] - m[1] * m[4]) / det,
        )

    def transform_point(self, point: Vector2) -> Vector2:
        m = self._m
        return Vector2(m[0] * point.x + m[4] * point.y + m[12],
                       m[1] * point.x + m[5] * point.y + m[13])

    def transform_rect(self, rect: Rect) -> Rect:
        """The axis-aligned bounding box of the transformed rectangle."""
        right = rect.left + rect.width
        bottom = rect.top + rect.height
        corners = [
            self.transform_point(Vector2(rect.left, rect.top)),
            self.transform_point(Vector2(rect.left, bottom)),
            self.transform_point(Vector2(right, rect.top)),
            self.transform_point(Vector2(right, bottom)),
        ]
        xs = [p.x for p in corners]
        ys = [p.y for p in corners]
        left, top = min(xs), min(ys)
        return Rect(left, top, max(xs) - left, max(ys) - top)

    def combine(self, other: Transform) -> Transform:
        """Multiply this transform by ``other`` in place (``self = self * other``)."""
        a = self._m
        b = other._m
        combined = Transform(
            a[0] * b[0] + a[4] * b[1] + a[12] * b[3],
            a[0] * b[4] + a[4] * b[5] + a[12] * b[7],
            a[0] * b[12] + a[4] * b[13] + a[12] * b[15],
            a[1] * b[0] + a[5] * b[1] + a[13] * b[3],
            a[1] * b[4] + a[5] * b[5] + a[13] * b[7],
            a[1] * b[12] + a[5] * b[13] + a[13] * b[15],
            a[3] * b[0] + a[7] * b[1] + a[15] * b[3],
            a[3] * b[4] + a[7] * b[5] + a[15] * b[7],
            a[3] * b[12] + a[7] * b[13] + a[15] * b[15],
        )
        self._m = combined._m
        return self

    def translate(self, offset: Vector2) -> Transform:
        return self.combine(Transform(1, 0, offset.x, 0, 1, offset.y, 0, 0, 1))

    def rotate(self, angle: float, center: Vector2 | None = None) -> Transform:
        """Rotate by ``angle`` degrees, around ``center`` if given."""
        rad = angle * _DEG_TO_RAD
        cos = math.cos(rad)
        sin = math.sin(rad)
        if center is None:
            rotation = Transform(cos, -sin, 0, sin, cos, 0, 0, 0, 1)
        else:
            cx, cy = center.x, center.y
            rotation = Transform(cos, -sin, cx * (1 - cos) + cy * sin,
                                 sin, cos, cy * (1 - cos) - cx * sin,
                                 0, 0, 1)
        return self.combine(rotation)

    def scale(self, factors: Vector2, center: Vector2 | None = None) -> Transform:
        """Scale by ``factors``, around ``center`` if given."""
        sx, sy = factors.x, factors.y
        if center is None:
            scaling = Transform(sx, 0, 0, 0, sy, 0, 0, 0, 1)
        else:
            scaling = Transform(sx, 0, center.x * (1 - sx), 0, sy, center.y * (1 - sy), 0, 0, 1)
        return self.combine(scaling)

    def __mul__(self, other: object) -> Transform | Vector2:
        if isinstance(other, Transform):
            return self.copy().combine(other)
        if isinstance(other, Vector2):
            return self.transform_point(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        a, b = self._m, other._m
        return all(a[i] == b[i] for i in (0, 1, 3, 4, 5, 7, 12, 13, 15))

    def __repr__(self) -> str:
        return f"Transform({', '.join(repr(v) for v in self._m)})"