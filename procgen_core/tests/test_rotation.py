"""Rotation builders and object coordinate system tests."""
from __future__ import annotations

import dataclasses
import math

import pytest

from procgen_core.frame import object_coordinate_system, rotation_from_axes
from procgen_core.rotation import DualAxisRotation, TripleAxisRotation
from procgen_core.vector import Vector2, Vector3


def assert_vector_close(actual: Vector3, expected: Vector3, abs_tol: float = 1e-9) -> None:
    assert actual.x == pytest.approx(expected.x, abs=abs_tol)
    assert actual.y == pytest.approx(expected.y, abs=abs_tol)
    assert actual.z == pytest.approx(expected.z, abs=abs_tol)


def assert_rotation_close(actual: TripleAxisRotation, expected, abs_tol: float = 1e-9) -> None:
    assert actual.yaw == pytest.approx(expected[0], abs=abs_tol)
    assert actual.pitch == pytest.approx(expected[1], abs=abs_tol)
    assert actual.roll == pytest.approx(expected[2], abs=abs_tol)


# //1.- Dual-axis behaviour, including the pitch/yaw swap on x/y.
def test_zero_rotation_points_forward():
    assert DualAxisRotation(0, 0).get_direction3d().equals(Vector3(0.0, 0.0, 1.0))


def test_generic_accessors_are_swapped():
    rotation = DualAxisRotation(yaw=10.0, pitch=20.0)
    assert rotation.x == 20.0
    assert rotation.y == 10.0
    rotation.x = 5.0
    assert rotation.pitch == 5.0
    assert rotation.freeze() == Vector2(5.0, 10.0)
    assert DualAxisRotation.from_vector2(Vector2(5.0, 10.0)).equals(rotation)


def test_dual_arithmetic_reads_vector2_through_swap():
    rotation = DualAxisRotation(10.0, 20.0).add(Vector2(1.0, 2.0))
    assert (rotation.yaw, rotation.pitch) == (12.0, 21.0)
    rotation.subtract(DualAxisRotation(2.0, 1.0))
    assert (rotation.yaw, rotation.pitch) == (10.0, 20.0)
    with pytest.raises(ValueError):
        rotation.divide(0)
    with pytest.raises(ValueError):
        rotation.yaw = math.nan


def test_dual_invert_turns_around():
    rotation = DualAxisRotation(10.0, 20.0).invert()
    assert (rotation.yaw, rotation.pitch) == (190.0, -20.0)


def test_dual_clamp_uses_vector2_bounds():
    rotation = DualAxisRotation(200.0, -100.0).clamp(Vector2(-90.0, -180.0), Vector2(90.0, 180.0))
    assert (rotation.yaw, rotation.pitch) == (180.0, -90.0)


def test_dual_format_and_string():
    rotation = DualAxisRotation(10.0, 20.0)
    assert str(rotation) == "(10.0, 20.0)"
    assert rotation.format("$pitch/$yaw", 0) == "20/10"
    assert DualAxisRotation.zero().is_zero()


# //2.- Triple-axis arithmetic and clamping rules.
def test_triple_equality_requires_triple():
    assert TripleAxisRotation(1.0, 2.0, 3.0).equals(TripleAxisRotation(1.0, 2.0, 3.0))
    assert not TripleAxisRotation(1.0, 2.0, 3.0).equals(DualAxisRotation(1.0, 2.0))
    with pytest.raises(TypeError):
        TripleAxisRotation.zero().add(DualAxisRotation(1.0, 2.0))


def test_triple_subtract_is_component_wise():
    rotation = TripleAxisRotation(30.0, 20.0, 10.0).subtract(TripleAxisRotation(10.0, 5.0, 1.0))
    assert (rotation.yaw, rotation.pitch, rotation.roll) == (20.0, 15.0, 9.0)


def test_triple_clamp_touches_roll_only_with_triple_bounds():
    rotation = TripleAxisRotation(0.0, 0.0, 500.0)
    rotation.clamp(Vector2(-90.0, -180.0), Vector2(90.0, 180.0))
    assert rotation.roll == 500.0
    rotation.clamp(TripleAxisRotation(-180.0, -90.0, -180.0), TripleAxisRotation(180.0, 90.0, 180.0))
    assert rotation.roll == 180.0


def test_triple_string_and_conversions():
    rotation = TripleAxisRotation.from_vector2(Vector2(5.0, 7.0), 3.0)
    assert (rotation.yaw, rotation.pitch, rotation.roll) == (7.0, 5.0, 3.0)
    assert str(rotation) == "(7.0, 5.0, 3.0)"
    assert rotation.to_dual().equals(DualAxisRotation(7.0, 5.0))


# //3.- Object coordinate system derived from a triple-axis rotation.
def test_forward_is_the_source_rotation():
    rotation = TripleAxisRotation(30.0, 20.0, 10.0)
    frame = rotation.get_object_coordinate_system()
    assert frame.forward().equals(rotation)
    rotation.yaw = 99.0
    assert frame.forward().yaw == 30.0


def test_axes_are_orthonormal():
    frame = object_coordinate_system(TripleAxisRotation(30.0, 20.0, 10.0))
    x, y, z = frame.axis_x(), frame.axis_y(), frame.axis_z()
    for axis in (x, y, z):
        assert axis.length() == pytest.approx(1.0)
    assert x.dot(y) == pytest.approx(0.0, abs=1e-12)
    assert y.dot(z) == pytest.approx(0.0, abs=1e-12)
    assert z.dot(x) == pytest.approx(0.0, abs=1e-12)


def test_derived_rotations_face_along_local_axes():
    frame = object_coordinate_system(TripleAxisRotation(30.0, 20.0, 10.0))
    x, y, z = frame.axis_x(), frame.axis_y(), frame.axis_z()
    assert_vector_close(frame.back().get_direction3d(), z.clone().invert())
    assert_vector_close(frame.left().get_direction3d(), x)
    assert_vector_close(frame.right().get_direction3d(), x.clone().invert())
    assert_vector_close(frame.up().get_direction3d(), y)
    assert_vector_close(frame.down().get_direction3d(), y.clone().invert())


def test_axes_reconstruct_the_rotation():
    frame = object_coordinate_system(TripleAxisRotation(30.0, 20.0, 10.0))
    assert_rotation_close(rotation_from_axes(frame.axis_x(), frame.axis_y()), (30.0, 20.0, 10.0))


def test_triple_invert_twice_restores_rotation():
    rotation = TripleAxisRotation(30.0, 20.0, 10.0)
    flipped = rotation.clone().invert()
    assert_vector_close(flipped.get_direction3d(), rotation.get_direction3d().invert())
    assert flipped.pitch == pytest.approx(-20.0)
    assert_rotation_close(flipped.invert(), (30.0, 20.0, 10.0))


def test_coordinate_system_snapshot_cannot_be_mutated():
    frame = object_coordinate_system(TripleAxisRotation(30.0, 20.0, 10.0))
    frame.source.yaw = 99.0
    frame.forward().roll = -5.0
    assert (frame.yaw, frame.pitch, frame.roll) == (30.0, 20.0, 10.0)
    assert frame.forward().equals(TripleAxisRotation(30.0, 20.0, 10.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        frame.yaw = 99.0
