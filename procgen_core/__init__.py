"""Procedural generation core.

Vector and rotation builders, seeded xorshift engines, a distribution
facade and Perlin gradient noise. Everything here is pure computation:
the same seed and the same call sequence always produce the same values.
"""

from .ranges import BigIntRange, FiniteRange, IntRange, NumberRange
from .vector import Direction, FrozenVector3, Vector2, Vector3, VectorXZ
from .rotation import DualAxisRotation, TripleAxisRotation
from .frame import ObjectCoordinateSystem, object_coordinate_system, rotation_from_axes
from .engines import RandomNumberGenerator, Xorshift32, Xorshift128Plus, ambient_uint32, ambient_uint64
from .noise import GradientNoise, NoiseConfig
from .randomizer import Random
from .config import RandomConfig, load_random_config

__all__ = [
    "NumberRange",
    "FiniteRange",
    "IntRange",
    "BigIntRange",
    "Direction",
    "FrozenVector3",
    "Vector2",
    "Vector3",
    "VectorXZ",
    "DualAxisRotation",
    "TripleAxisRotation",
    "ObjectCoordinateSystem",
    "object_coordinate_system",
    "rotation_from_axes",
    "RandomNumberGenerator",
    "Xorshift32",
    "Xorshift128Plus",
    "ambient_uint32",
    "ambient_uint64",
    "GradientNoise",
    "NoiseConfig",
    "Random",
    "RandomConfig",
    "load_random_config",
]
