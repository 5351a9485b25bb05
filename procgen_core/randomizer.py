"""Distribution helpers layered over a single random engine."""
from __future__ import annotations

import logging
import math
from typing import Collection, Hashable, List, Mapping, Sequence, TypeVar

from .engines import RandomNumberGenerator, Xorshift32, Xorshift128Plus
from .noise import GradientNoise, NoiseConfig
from .ranges import FiniteRange, IntRange, is_safe_integer
from .rotation import DualAxisRotation, TripleAxisRotation
from .vector import Vector3

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

_UUID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"
_UNIT = FiniteRange.min_max(0.0, 1.0)
_YAW = FiniteRange.min_max(-180.0, 180.0)
_PITCH = FiniteRange.min_max(-90.0, 90.0)


def _require_weights(weights: Sequence[object]) -> None:
    for weight in weights:
        if not (is_safe_integer(weight) and weight > 0):
            raise ValueError(f"Weights must be positive integers, got {weight!r}")


class Random:
    """Façade over one engine; also owns the noise generator seeded from it."""

    def __init__(self, engine: RandomNumberGenerator) -> None:
        self._engine = engine
        self._noise = GradientNoise(engine)
        LOGGER.debug("Random facade ready over %s", type(engine).__name__)

    @classmethod
    def xorshift32(cls) -> "Random":
        return cls(Xorshift32.unseeded())

    @classmethod
    def xorshift128plus(cls) -> "Random":
        return cls(Xorshift128Plus.unseeded())

    @property
    def engine(self) -> RandomNumberGenerator:
        return self._engine

    @property
    def noise_generator(self) -> GradientNoise:
        return self._noise

    def _int(self, low: int, high: int) -> int:
        return self._engine.draw_int(IntRange.min_max(low, high))

    def _real(self, value_range: FiniteRange) -> float:
        return self._engine.draw_real(value_range)

    # -- Scalars ----------------------------------------------------------

    def uuid(self) -> str:
        """Version-4 shaped identifier drawn from the engine."""

        chars = []
        for char in _UUID_TEMPLATE:
            if char == "x":
                chars.append(format(self._int(0, 15), "x"))
            elif char == "y":
                chars.append(format(self._int(8, 11), "x"))
            else:
                chars.append(char)
        return "".join(chars)

    def chance(self, probability: float) -> bool:
        return self._real(_UNIT) < probability

    def sign(self) -> int:
        return 1 if self.chance(0.5) else -1

    def box_muller(self, mean: float = 0.0, deviation: float = 1.0) -> float:
        """Normally distributed sample via the basic Box-Muller transform."""

        u1 = 0.0
        while u1 == 0.0:
            u1 = self._real(_UNIT)
        u2 = 1.0
        while u2 == 1.0:
            u2 = self._real(_UNIT)
        z0 = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return mean + deviation * z0

    # -- Collections ------------------------------------------------------

    def choice(self, sequence: Sequence[T]) -> T:
        if len(sequence) == 0:
            raise ValueError("Cannot choose from an empty sequence")
        return sequence[self._int(0, len(sequence) - 1)]

    def choice_index_by_weight(self, weights: Sequence[int]) -> int:
        if len(weights) == 0:
            raise ValueError("Cannot choose from an empty weight list")
        _require_weights(weights)
        target = self._int(1, int(sum(weights)))
        cumulative = 0
        for index, weight in enumerate(weights):
            cumulative += weight
            if cumulative >= target:
                return index
        raise AssertionError("cumulative weight never reached the draw")

    def weighted_choice(self, weights_by_key: Mapping[K, int]) -> K:
        """Pick a key with probability proportional to its integer weight."""

        keys = list(weights_by_key)
        return keys[self.choice_index_by_weight([weights_by_key[key] for key in keys])]

    def shuffled_clone(self, sequence: Sequence[T]) -> List[T]:
        clone = list(sequence)
        if len(clone) <= 1:
            return clone
        for i in range(len(clone) - 1, -1, -1):
            j = self._int(0, i)
            clone[i], clone[j] = clone[j], clone[i]
        return clone

    def sample(self, collection: Collection[T], count: int) -> List[T]:
        """``count`` distinct elements of ``collection`` in random order.

        Iteration order of ``collection`` feeds the shuffle, so sets of
        strings are only reproducible with a fixed ``PYTHONHASHSEED``.
        """

        if not is_safe_integer(count) or count < 0 or count > len(collection):
            raise ValueError(f"count must lie in [0, {len(collection)}], got {count!r}")
        return self.shuffled_clone(list(collection))[: int(count)]

    # -- Geometry ---------------------------------------------------------

    def rotation2(self) -> DualAxisRotation:
        return DualAxisRotation(self._real(_YAW), self._real(_PITCH))

    def rotation3(self) -> TripleAxisRotation:
        return TripleAxisRotation(self._real(_YAW), self._real(_PITCH), self._real(_YAW))

    # -- Noise ------------------------------------------------------------

    def noise1(self, x: float, config: NoiseConfig = NoiseConfig()) -> float:
        return self._noise.noise1(x, config)

    def noise2(self, point, config: NoiseConfig = NoiseConfig()) -> float:
        return self._noise.noise2(point, config)

    def noise3(self, point: Vector3, config: NoiseConfig = NoiseConfig()) -> float:
        return self._noise.noise3(point, config)
