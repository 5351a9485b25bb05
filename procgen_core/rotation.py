"""Yaw/pitch(/roll) rotation builders expressed in degrees.

Both builders expose the generic ``x``/``y`` accessors of a 2D vector
with ``x`` mapped to pitch and ``y`` mapped to yaw. That swap is part of
the contract: bounds and operands handed over as plain 2D vectors are
read through the same mapping.
"""
from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Tuple, Union

from .vector import Vector2, Vector3, format_components, require_number

if TYPE_CHECKING:
    from .frame import ObjectCoordinateSystem

_ANGLES = ("yaw", "pitch", "roll")


def _xy_of(value: object, name: str) -> Tuple[float, float]:
    try:
        components = (value.x, value.y)  # type: ignore[attr-defined]
    except AttributeError:
        raise TypeError(f"{name} must expose x and y, got {type(value).__name__}") from None
    return require_number(components[0], f"{name}.x"), require_number(components[1], f"{name}.y")


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(value, maximum))


def direction_from_angles(yaw: float, pitch: float) -> Vector3:
    """Unit forward vector for a yaw/pitch pair given in degrees."""

    yaw_rad = math.radians(yaw)
    pitch_rad = math.radians(pitch)
    return Vector3(
        -math.sin(yaw_rad) * math.cos(pitch_rad),
        -math.sin(pitch_rad),
        math.cos(yaw_rad) * math.cos(pitch_rad),
    )


class _RotationBuilder:
    """Behaviour shared by both rotation builders."""

    yaw: float
    pitch: float

    def __setattr__(self, name: str, value: object) -> None:
        if name in _ANGLES:
            value = require_number(value, name)
        super().__setattr__(name, value)

    @property
    def x(self) -> float:
        return self.pitch

    @x.setter
    def x(self, value: float) -> None:
        self.pitch = value

    @property
    def y(self) -> float:
        return self.yaw

    @y.setter
    def y(self, value: float) -> None:
        self.yaw = value

    def map_unary(self, fn: Callable[[float], float]):
        for name in self._angles():
            setattr(self, name, fn(getattr(self, name)))
        return self

    def add(self, other):
        return self.map_binary(other, operator.add)

    def subtract(self, other):
        return self.map_binary(other, operator.sub)

    def scale(self, scalar: float):
        require_number(scalar, "scalar")
        return self.map_unary(lambda component: component * scalar)

    def divide(self, scalar: float):
        require_number(scalar, "scalar")
        if scalar == 0:
            raise ValueError("Cannot divide a rotation by zero")
        return self.map_unary(lambda component: component / scalar)

    def get_direction3d(self) -> Vector3:
        return direction_from_angles(self.yaw, self.pitch)

    def is_zero(self) -> bool:
        return self.equals(type(self).zero())

    def format(self, template: str, digits: int) -> str:
        return format_components(template, digits, {name: getattr(self, name) for name in self._angles()})

    def __str__(self) -> str:
        return self.format("(" + ", ".join(f"${name}" for name in self._angles()) + ")", 1)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def _angles(self) -> Tuple[str, ...]:
        raise NotImplementedError


@dataclass(eq=False)
class DualAxisRotation(_RotationBuilder):
    """Yaw/pitch rotation; ``x`` reads pitch and ``y`` reads yaw."""

    yaw: float
    pitch: float

    def _angles(self) -> Tuple[str, ...]:
        return ("yaw", "pitch")

    def equals(self, other: object) -> bool:
        try:
            return (self.x, self.y) == _xy_of(other, "other")
        except (TypeError, ValueError):
            return False

    def map_binary(self, other: Union["DualAxisRotation", Vector2], fn: Callable[[float, float], float]) -> "DualAxisRotation":
        pitch, yaw = _xy_of(other, "other")
        self.yaw = fn(self.yaw, yaw)
        self.pitch = fn(self.pitch, pitch)
        return self

    def invert(self) -> "DualAxisRotation":
        self.yaw += 180
        self.pitch *= -1
        return self

    def clamp(self, minimum: Union["DualAxisRotation", Vector2], maximum: Union["DualAxisRotation", Vector2]) -> "DualAxisRotation":
        min_x, min_y = _xy_of(minimum, "minimum")
        max_x, max_y = _xy_of(maximum, "maximum")
        self.x = _clamp(self.x, min_x, max_x)
        self.y = _clamp(self.y, min_y, max_y)
        return self

    def clone(self) -> "DualAxisRotation":
        return DualAxisRotation(self.yaw, self.pitch)

    def freeze(self) -> Vector2:
        return Vector2(self.x, self.y)

    @staticmethod
    def zero() -> "DualAxisRotation":
        return DualAxisRotation(0.0, 0.0)

    @staticmethod
    def filled(value: float) -> "DualAxisRotation":
        return DualAxisRotation(value, value)

    @staticmethod
    def from_vector2(vector: Vector2) -> "DualAxisRotation":
        pitch, yaw = _xy_of(vector, "vector")
        return DualAxisRotation(yaw, pitch)


@dataclass(eq=False)
class TripleAxisRotation(_RotationBuilder):
    """Yaw/pitch/roll rotation; roll spins the object around its forward axis."""

    yaw: float
    pitch: float
    roll: float

    def _angles(self) -> Tuple[str, ...]:
        return _ANGLES

    def equals(self, other: object) -> bool:
        if not isinstance(other, TripleAxisRotation):
            return False
        return (self.yaw, self.pitch, self.roll) == (other.yaw, other.pitch, other.roll)

    def map_binary(self, other: "TripleAxisRotation", fn: Callable[[float, float], float]) -> "TripleAxisRotation":
        if not isinstance(other, TripleAxisRotation):
            raise TypeError(f"other must be a TripleAxisRotation, got {type(other).__name__}")
        self.yaw = fn(self.yaw, other.yaw)
        self.pitch = fn(self.pitch, other.pitch)
        self.roll = fn(self.roll, other.roll)
        return self

    def invert(self) -> "TripleAxisRotation":
        """Turn to face backwards, keeping the object's up axis."""

        rotation = self.get_object_coordinate_system().back()
        self.yaw = rotation.yaw
        self.pitch = rotation.pitch
        self.roll = rotation.roll
        return self

    def clamp(self, minimum, maximum) -> "TripleAxisRotation":
        """Clamp yaw and pitch; roll only when both bounds carry a roll."""

        min_x, min_y = _xy_of(minimum, "minimum")
        max_x, max_y = _xy_of(maximum, "maximum")
        self.x = _clamp(self.x, min_x, max_x)
        self.y = _clamp(self.y, min_y, max_y)
        if isinstance(minimum, TripleAxisRotation) and isinstance(maximum, TripleAxisRotation):
            self.roll = _clamp(self.roll, minimum.roll, maximum.roll)
        return self

    def clone(self) -> "TripleAxisRotation":
        return TripleAxisRotation(self.yaw, self.pitch, self.roll)

    def to_dual(self) -> DualAxisRotation:
        return DualAxisRotation(self.yaw, self.pitch)

    def get_object_coordinate_system(self) -> "ObjectCoordinateSystem":
        from .frame import object_coordinate_system

        return object_coordinate_system(self)

    @staticmethod
    def zero() -> "TripleAxisRotation":
        return TripleAxisRotation(0.0, 0.0, 0.0)

    @staticmethod
    def filled(value: float) -> "TripleAxisRotation":
        return TripleAxisRotation(value, value, value)

    @staticmethod
    def from_vector2(vector: Vector2, roll: float = 0.0) -> "TripleAxisRotation":
        pitch, yaw = _xy_of(vector, "vector")
        return TripleAxisRotation(yaw, pitch, roll)
