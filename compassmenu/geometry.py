"""Pure 2D geometry - vectors, affine transforms and ring sectors.

No state, no rendering. Coordinates follow screen conventions: x grows to the
right, y grows downward, so increasing angles run clockwise on screen.
"""

from __future__ import annotations
import bisect
import math
from dataclasses import dataclass
from typing import Tuple

from .config import SLOT_COUNT

TWO_PI = 2.0 * math.pi

# Lower bounds of sectors 1..7; sector 0 wraps around angle 0.
SECTOR_BOUNDARIES: Tuple[float, ...] = tuple(
    (2 * i - 1) / 16.0 * TWO_PI for i in range(1, SLOT_COUNT + 1)
)


class GeometryError(ValueError):
    """Raised for undefined geometric operations (zero-length normalize, singular matrix)."""


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


@dataclass(frozen=True)
class Vector2D:
    """Immutable 2D vector / point."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vector2D:
        return self.scale(factor)

    __rmul__ = __mul__

    def plus(self, other: Vector2D) -> Vector2D:
        return self + other

    def diff(self, other: Vector2D) -> Vector2D:
        """Vector from other to self."""
        return self - other

    def scale(self, factor: float) -> Vector2D:
        return Vector2D(factor * self.x, factor * self.y)

    def norm_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def norm(self) -> float:
        return math.sqrt(self.norm_squared())

    def distance_squared(self, other: Vector2D) -> float:
        """Squared distance between two points (avoids sqrt for comparisons)."""
        return (self - other).norm_squared()

    def distance(self, other: Vector2D) -> float:
        return math.sqrt(self.distance_squared(other))

    def normalize(self) -> Vector2D:
        """Unit vector in the same direction.

        Raises:
            GeometryError: if the vector has zero length.
        """
        n = self.norm()
        if n == 0.0:
            raise GeometryError("cannot normalize a zero-length vector")
        return self.scale(1.0 / n)

    def apply_transform(self, matrix: AffineTransform) -> Vector2D:
        return matrix.apply(self)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class AffineTransform:
    """2D affine matrix in SVG order.

        | a c e |
        | b d f |
        | 0 0 1 |
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> AffineTransform:
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> AffineTransform:
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx: float, sy: float = None) -> AffineTransform:
        return cls(a=sx, d=sx if sy is None else sy)

    def apply(self, v: Vector2D) -> Vector2D:
        x = self.a * v.x + self.c * v.y + self.e
        y = self.b * v.x + self.d * v.y + self.f
        return Vector2D(x, y)

    def apply_linear(self, v: Vector2D) -> Vector2D:
        """Apply the matrix without its translation part (for offsets)."""
        return Vector2D(self.a * v.x + self.c * v.y, self.b * v.x + self.d * v.y)

    def multiply(self, other: AffineTransform) -> AffineTransform:
        """Return self x other (other is applied first)."""
        return AffineTransform(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def inverse(self) -> AffineTransform:
        det = self.determinant()
        if det == 0.0:
            raise GeometryError("affine transform is not invertible")
        a = self.d / det
        b = -self.b / det
        c = -self.c / det
        d = self.a / det
        e = -(a * self.e + c * self.f)
        f = -(b * self.e + d * self.f)
        return AffineTransform(a, b, c, d, e, f)


def normalized_angle(point: Vector2D, center: Vector2D) -> float:
    """Angle of point around center, in [0, 2*pi)."""
    dx = point.x - center.x
    dy = point.y - center.y
    theta = math.atan2(dy, dx)
    if theta < 0.0:
        theta += TWO_PI
    return theta


def sector_for_angle(theta: float) -> int:
    """Sector index for an angle already normalized into [0, 2*pi).

    Each sector is 45 degrees wide and centered on a compass point; sector 0
    is centered on angle 0 (east). Lower bounds are inclusive, upper bounds
    exclusive.
    """
    if theta < SECTOR_BOUNDARIES[0] or theta >= SECTOR_BOUNDARIES[-1]:
        return 0
    return bisect.bisect_right(SECTOR_BOUNDARIES, theta, 0, SLOT_COUNT - 1)


def sector_index(point: Vector2D, center: Vector2D) -> int:
    """Index (0..7) of the ring sector containing point.

    A point equal to the center resolves to sector 0.
    """
    return sector_for_angle(normalized_angle(point, center))


def sector_direction(index: int) -> Vector2D:
    """Unit vector pointing at the middle of the given sector."""
    theta = index * TWO_PI / SLOT_COUNT
    return Vector2D(math.cos(theta), math.sin(theta))
