"""Deterministic Perlin gradient noise seeded from a random engine."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .engines import RandomNumberGenerator
from .ranges import FiniteRange, IntRange
from .vector import FrozenVector3, Vector3, require_number, xyz_of

LOGGER = logging.getLogger(__name__)

TABLE_SIZE = 256


@dataclass(frozen=True)
class NoiseConfig:
    amplitude: float = 1.0
    frequency: float = 1.0

    def __post_init__(self) -> None:
        require_number(self.amplitude, "amplitude")
        require_number(self.frequency, "frequency")


# -- Interpolation helpers ------------------------------------------------

def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float, z: float) -> float:
    # Low four bits pick one of the twelve cube-edge gradients (four repeated).
    h = hash_value & 15
    u = x if h < 8 else y
    v = y if h < 4 else (x if h in (12, 14) else z)
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)


# -- Generator ------------------------------------------------------------

class GradientNoise:
    """Classic improved Perlin noise with a table shuffled by ``engine``.

    The engine is consumed only during construction: three offset draws
    followed by the Fisher-Yates shuffle of the permutation table.
    """

    def __init__(self, engine: RandomNumberGenerator) -> None:
        # Offsets lie in [0, TABLE_SIZE): the top of the range is the float just below it.
        offset_range = FiniteRange.min_max(0.0, float(np.nextafter(float(TABLE_SIZE), 0.0)))
        self.offset = FrozenVector3(
            engine.draw_real(offset_range),
            engine.draw_real(offset_range),
            engine.draw_real(offset_range),
        )
        table = list(range(TABLE_SIZE))
        for i in range(TABLE_SIZE - 1, 0, -1):
            j = engine.draw_int(IntRange.min_max(0, i))
            table[i], table[j] = table[j], table[i]
        self._permutation: Tuple[int, ...] = tuple(table + table)
        LOGGER.debug("Permutation table built with offset %s", self.offset)

    @property
    def permutation(self) -> Tuple[int, ...]:
        return self._permutation

    def noise3(self, point: Vector3, config: NoiseConfig = NoiseConfig()) -> float:
        px, py, pz = xyz_of(point, "point")
        x = px * config.frequency + self.offset.x
        y = py * config.frequency + self.offset.y
        z = pz * config.frequency + self.offset.z

        xf = math.floor(x)
        yf = math.floor(y)
        zf = math.floor(z)
        xi = xf & 255
        yi = yf & 255
        zi = zf & 255
        x -= xf
        y -= yf
        z -= zf

        u = _fade(x)
        v = _fade(y)
        w = _fade(z)

        p = self._permutation
        a = p[xi] + yi
        aa = p[a] + zi
        ab = p[a + 1] + zi
        b = p[xi + 1] + yi
        ba = p[b] + zi
        bb = p[b + 1] + zi

        value = _lerp(
            _lerp(
                _lerp(_grad(p[aa], x, y, z), _grad(p[ba], x - 1, y, z), u),
                _lerp(_grad(p[ab], x, y - 1, z), _grad(p[bb], x - 1, y - 1, z), u),
                v,
            ),
            _lerp(
                _lerp(_grad(p[aa + 1], x, y, z - 1), _grad(p[ba + 1], x - 1, y, z - 1), u),
                _lerp(_grad(p[ab + 1], x, y - 1, z - 1), _grad(p[bb + 1], x - 1, y - 1, z - 1), u),
                v,
            ),
            w,
        )
        return value * config.amplitude

    def noise2(self, point, config: NoiseConfig = NoiseConfig()) -> float:
        try:
            x, y = point.x, point.y
        except AttributeError:
            raise TypeError(f"point must expose x and y, got {type(point).__name__}") from None
        return self.noise3(FrozenVector3(x, y, 0.0), config)

    def noise1(self, x: float, config: NoiseConfig = NoiseConfig()) -> float:
        return self.noise3(FrozenVector3(x, 0.0, 0.0), config)

    def fractal3(
        self,
        point: Vector3,
        *,
        octaves: int = 4,
        persistence: float = 0.5,
        lacunarity: float = 2.0,
        config: NoiseConfig = NoiseConfig(),
    ) -> float:
        """Sum of octaves, normalised so the result stays within ``amplitude``."""

        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        total = 0.0
        weight = 1.0
        weight_sum = 0.0
        frequency = config.frequency
        for _ in range(int(octaves)):
            total += weight * self.noise3(point, NoiseConfig(amplitude=1.0, frequency=frequency))
            weight_sum += weight
            weight *= persistence
            frequency *= lacunarity
        return total / weight_sum * config.amplitude

    def grid3(
        self,
        shape: Tuple[int, int, int],
        *,
        origin: Vector3 = FrozenVector3(0.0, 0.0, 0.0),
        step: float = 1.0,
        config: NoiseConfig = NoiseConfig(),
    ) -> np.ndarray:
        """Sample ``noise3`` on a regular lattice; axis order is (x, y, z)."""

        ox, oy, oz = xyz_of(origin, "origin")
        field = np.zeros(shape, dtype=np.float64)
        for index in np.ndindex(*shape):
            i, j, k = index
            field[index] = self.noise3(FrozenVector3(ox + i * step, oy + j * step, oz + k * step), config)
        return field
