"""Mutable 3D vector builder and its read-only snapshots.

Every ``Vector3`` method that changes the vector does so in place and
returns ``self`` so calls can be chained; callers that need an
independent copy ask for one with :meth:`Vector3.clone`. Components are
validated on construction and on every assignment, so a vector never
holds NaN.
"""
from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple, Union

if TYPE_CHECKING:
    from .rotation import DualAxisRotation

_COMPONENTS = ("x", "y", "z")


def require_number(value: object, name: str = "value") -> float:
    """Return ``value`` unchanged when it is a real, non-NaN number."""

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    if math.isnan(value):
        raise ValueError(f"{name} must not be NaN")
    return value


def xyz_of(value: object, name: str = "vector") -> Tuple[float, float, float]:
    """Read ``x``, ``y`` and ``z`` from any object shaped like a 3D vector."""

    try:
        components = (value.x, value.y, value.z)  # type: ignore[attr-defined]
    except AttributeError:
        raise TypeError(f"{name} must expose x, y and z, got {type(value).__name__}") from None
    return tuple(require_number(c, f"{name}.{axis}") for c, axis in zip(components, _COMPONENTS))  # type: ignore[return-value]


def format_components(template: str, digits: int, named: Dict[str, float]) -> str:
    """Substitute ``$<name>`` tokens, then positional ``$c`` tokens.

    Named tokens are replaced everywhere. The first ``$c`` receives the
    first component, the second ``$c`` the second and so on; surplus
    ``$c`` tokens are removed.
    """

    require_number(digits, "digits")
    if not 0 <= digits <= 20:
        raise ValueError(f"digits must lie in [0, 20], got {digits!r}")
    quantum = Decimal(1).scaleb(-int(digits))
    texts = []
    for value in named.values():
        # -0.0 prints as "0" and halves round away from zero.
        exact = Decimal(0.0 if value == 0 else value)
        texts.append(f"{exact.quantize(quantum, rounding=ROUND_HALF_UP):f}")
    result = template
    for name, text in zip(named, texts):
        result = result.replace(f"${name}", text)
    for text in texts:
        result = result.replace("$c", text, 1)
    return result.replace("$c", "")


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


class Direction(Enum):
    """Cardinal faces of a voxel."""

    UP = "up"
    DOWN = "down"
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


@dataclass(frozen=True)
class FrozenVector3:
    """Read-only snapshot of a :class:`Vector3`."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        for axis in _COMPONENTS:
            require_number(getattr(self, axis), axis)


@dataclass(frozen=True)
class Vector2:
    x: float
    y: float

    def __post_init__(self) -> None:
        require_number(self.x, "x")
        require_number(self.y, "y")


@dataclass(frozen=True)
class VectorXZ:
    x: float
    z: float

    def __post_init__(self) -> None:
        require_number(self.x, "x")
        require_number(self.z, "z")


VectorLike = Union["Vector3", FrozenVector3]


@dataclass(eq=False)
class Vector3:
    """Mutable 3D vector with chainable in-place operations."""

    x: float
    y: float
    z: float

    def __setattr__(self, name: str, value: object) -> None:
        if name in _COMPONENTS:
            value = require_number(value, name)
        super().__setattr__(name, value)

    # -- Comparison -------------------------------------------------------

    def equals(self, other: object) -> bool:
        try:
            return (self.x, self.y, self.z) == xyz_of(other)
        except (TypeError, ValueError):
            return False

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def is_zero(self) -> bool:
        return self.equals(Vector3.zero())

    # -- Component mapping ------------------------------------------------

    def map_unary(self, fn: Callable[[float], float]) -> "Vector3":
        self.x = fn(self.x)
        self.y = fn(self.y)
        self.z = fn(self.z)
        return self

    def map_binary(self, other: VectorLike, fn: Callable[[float, float], float]) -> "Vector3":
        ox, oy, oz = xyz_of(other, "other")
        self.x = fn(self.x, ox)
        self.y = fn(self.y, oy)
        self.z = fn(self.z, oz)
        return self

    # -- Arithmetic -------------------------------------------------------

    def add(self, other: VectorLike) -> "Vector3":
        return self.map_binary(other, operator.add)

    def subtract(self, other: VectorLike) -> "Vector3":
        return self.add(Vector3.from_vector(other).invert())

    def scale(self, scalar: float) -> "Vector3":
        require_number(scalar, "scalar")
        return self.map_unary(lambda component: component * scalar)

    def divide(self, scalar: float) -> "Vector3":
        require_number(scalar, "scalar")
        if scalar == 0:
            raise ValueError("Cannot divide a vector by zero")
        return self.map_unary(lambda component: component / scalar)

    def invert(self) -> "Vector3":
        return self.scale(-1)

    def dot(self, other: VectorLike) -> float:
        ox, oy, oz = xyz_of(other, "other")
        return self.x * ox + self.y * oy + self.z * oz

    def cross(self, other: VectorLike) -> "Vector3":
        x2, y2, z2 = xyz_of(other, "other")
        return Vector3(
            self.y * z2 - self.z * y2,
            self.z * x2 - self.x * z2,
            self.x * y2 - self.y * x2,
        )

    def hadamard(self, other: VectorLike) -> "Vector3":
        return self.clone().map_binary(other, operator.mul)

    # -- Geometry ---------------------------------------------------------

    def length(self, target: Optional[float] = None) -> Union[float, "Vector3"]:
        """Return the Euclidean norm, or rescale in place to ``target``.

        A zero vector has no direction, so rescaling it leaves it
        untouched.
        """

        if target is None:
            return math.sqrt(self.dot(self))
        require_number(target, "target")
        previous = math.sqrt(self.dot(self))
        if previous == 0:
            return self
        return self.map_unary(lambda component: component / previous * target)

    def normalize(self) -> "Vector3":
        return self.length(1.0)  # type: ignore[return-value]

    def angle_between(self, other: VectorLike) -> float:
        """Angle in degrees; NaN when either vector has zero length."""

        denominator = self.length() * Vector3.from_vector(other).length()
        if denominator == 0:
            return math.nan
        cosine = self.dot(other) / denominator
        return math.degrees(math.acos(_clamp_unit(cosine)))

    def distance_to(self, other: VectorLike) -> float:
        ox, oy, oz = xyz_of(other, "other")
        return math.hypot(self.x - ox, self.y - oy, self.z - oz)

    def direction_to(self, other: VectorLike) -> "Vector3":
        return Vector3.from_vector(other).subtract(self).normalize()

    def project(self, other: VectorLike) -> "Vector3":
        target = Vector3.from_vector(other)
        denominator = target.dot(target)
        # A zero-length target yields a NaN factor, which scale() rejects.
        factor = self.dot(target) / denominator if denominator != 0 else math.nan
        return target.scale(factor)

    def reject(self, other: VectorLike) -> "Vector3":
        return self.clone().subtract(self.project(other))

    def reflect(self, normal: VectorLike) -> "Vector3":
        dot = self.dot(normal)
        return self.clone().map_binary(normal, lambda a, b: a - 2 * dot * b)

    def lerp(self, other: VectorLike, t: float) -> "Vector3":
        require_number(t, "t")
        ox, oy, oz = xyz_of(other, "other")
        return Vector3(
            (1 - t) * self.x + t * ox,
            (1 - t) * self.y + t * oy,
            (1 - t) * self.z + t * oz,
        )

    def slerp(self, other: VectorLike, s: float) -> "Vector3":
        require_number(s, "s")
        angle = math.radians(self.angle_between(other))
        sin_angle = math.sin(angle)
        if sin_angle == 0:
            raise ValueError("Cannot slerp between parallel vectors")
        p1 = math.sin(angle * (1 - s)) / sin_angle
        p2 = math.sin(angle * s) / sin_angle
        return self.clone().scale(p1).add(Vector3.from_vector(other).scale(p2))

    def clamp(self, minimum: VectorLike, maximum: VectorLike) -> "Vector3":
        lx, ly, lz = xyz_of(minimum, "minimum")
        hx, hy, hz = xyz_of(maximum, "maximum")
        self.x = max(lx, min(self.x, hx))
        self.y = max(ly, min(self.y, hy))
        self.z = max(lz, min(self.z, hz))
        return self

    def rotate(self, axis: VectorLike, angle: float) -> "Vector3":
        """Rotate in place around ``axis`` by ``angle`` degrees.

        The Rodrigues matrix uses the raw axis components; a non-unit axis
        also scales the result, so pass a unit axis for a pure rotation.
        """

        require_number(angle, "angle")
        x, y, z = xyz_of(axis, "axis")
        radians = math.radians(angle)
        sin = math.sin(radians)
        cos = math.cos(radians)
        matrix = (
            (cos + x * x * (1 - cos), x * y * (1 - cos) - z * sin, x * z * (1 - cos) + y * sin),
            (y * x * (1 - cos) + z * sin, cos + y * y * (1 - cos), y * z * (1 - cos) - x * sin),
            (z * x * (1 - cos) - y * sin, z * y * (1 - cos) + x * sin, cos + z * z * (1 - cos)),
        )
        vx, vy, vz = self.x, self.y, self.z
        self.x, self.y, self.z = (row[0] * vx + row[1] * vy + row[2] * vz for row in matrix)
        return self

    def get_rotation2d(self) -> "DualAxisRotation":
        from .rotation import DualAxisRotation

        normalized = self.clone().normalize()
        return DualAxisRotation(
            -math.degrees(math.atan2(normalized.x, normalized.z)),
            -math.degrees(math.asin(_clamp_unit(normalized.y))),
        )

    # -- Copies and text --------------------------------------------------

    def clone(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def freeze(self) -> FrozenVector3:
        return FrozenVector3(self.x, self.y, self.z)

    def freeze_xz(self) -> VectorXZ:
        return VectorXZ(self.x, self.z)

    def format(self, template: str, digits: int) -> str:
        return format_components(template, digits, {"x": self.x, "y": self.y, "z": self.z})

    def __str__(self) -> str:
        return self.format("($x, $y, $z)", 1)

    # -- Named constructors -----------------------------------------------

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def forward() -> "Vector3":
        return Vector3(0.0, 0.0, 1.0)

    @staticmethod
    def back() -> "Vector3":
        return Vector3(0.0, 0.0, -1.0)

    @staticmethod
    def left() -> "Vector3":
        return Vector3(1.0, 0.0, 0.0)

    @staticmethod
    def right() -> "Vector3":
        return Vector3(-1.0, 0.0, 0.0)

    @staticmethod
    def up() -> "Vector3":
        return Vector3(0.0, 1.0, 0.0)

    @staticmethod
    def down() -> "Vector3":
        return Vector3(0.0, -1.0, 0.0)

    @staticmethod
    def filled(value: float) -> "Vector3":
        return Vector3(value, value, value)

    @staticmethod
    def from_vector(vector: VectorLike) -> "Vector3":
        return Vector3(*xyz_of(vector))

    @staticmethod
    def from_xz(vector: VectorXZ, y: float = 0.0) -> "Vector3":
        try:
            x, z = vector.x, vector.z
        except AttributeError:
            raise TypeError(f"vector must expose x and z, got {type(vector).__name__}") from None
        return Vector3(x, y, z)

    @staticmethod
    def from_direction(direction: Direction) -> "Vector3":
        if not isinstance(direction, Direction):
            raise TypeError(f"Unknown direction value: {direction!r}")
        return _DIRECTION_FACTORIES[direction]()

    @staticmethod
    def min_of(a: VectorLike, b: VectorLike) -> "Vector3":
        return Vector3.from_vector(a).map_binary(b, min)

    @staticmethod
    def max_of(a: VectorLike, b: VectorLike) -> "Vector3":
        return Vector3.from_vector(a).map_binary(b, max)


_DIRECTION_FACTORIES: Dict[Direction, Callable[[], Vector3]] = {
    Direction.UP: Vector3.up,
    Direction.DOWN: Vector3.down,
    Direction.NORTH: Vector3.back,
    Direction.SOUTH: Vector3.forward,
    Direction.EAST: Vector3.left,
    Direction.WEST: Vector3.right,
}
