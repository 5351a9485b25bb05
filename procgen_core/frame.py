"""Orthonormal object frames derived from yaw/pitch/roll rotations."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .rotation import TripleAxisRotation
from .vector import Vector3


@dataclass(frozen=True)
class ObjectCoordinateSystem:
    """Local axes of an object oriented by ``yaw``, ``pitch`` and ``roll``.

    ``axis_z`` points forward, ``axis_x`` to the object's left and
    ``axis_y`` up. The angles are a frozen snapshot; the axes are
    recomputed on every call and handed out as fresh vectors, so callers
    may mutate them.
    """

    yaw: float
    pitch: float
    roll: float

    @property
    def source(self) -> TripleAxisRotation:
        """A fresh rotation built from the snapshot angles."""

        return TripleAxisRotation(self.yaw, self.pitch, self.roll)

    def axis_z(self) -> Vector3:
        return self.source.get_direction3d()

    def axis_x(self) -> Vector3:
        forward = self.axis_z()
        return Vector3(forward.z, 0.0, -forward.x).normalize().rotate(forward, self.roll)

    def axis_y(self) -> Vector3:
        return self.axis_z().cross(self.axis_x())

    def forward(self) -> TripleAxisRotation:
        return self.source

    def back(self) -> TripleAxisRotation:
        return rotation_from_axes(self.axis_x().invert(), self.axis_y())

    def left(self) -> TripleAxisRotation:
        return rotation_from_axes(self.axis_z().invert(), self.axis_y())

    def right(self) -> TripleAxisRotation:
        return rotation_from_axes(self.axis_z(), self.axis_y())

    def up(self) -> TripleAxisRotation:
        return rotation_from_axes(self.axis_x(), self.axis_z().invert())

    def down(self) -> TripleAxisRotation:
        return rotation_from_axes(self.axis_x(), self.axis_z())


def object_coordinate_system(rotation: TripleAxisRotation) -> ObjectCoordinateSystem:
    """Snapshot ``rotation`` and expose its local axes."""

    return ObjectCoordinateSystem(rotation.yaw, rotation.pitch, rotation.roll)


def rotation_from_axes(x: Vector3, y: Vector3) -> TripleAxisRotation:
    """Recover yaw/pitch/roll from an orthonormal left (``x``) and up (``y``) pair."""

    z = x.cross(y)
    return TripleAxisRotation(
        math.degrees(math.atan2(-z.x, z.z)),
        math.degrees(math.asin(max(-1.0, min(1.0, -z.y)))),
        math.degrees(math.atan2(x.y, y.y)),
    )
