"""Seeded pseudo-random engines built on fixed-width numpy words.

Both engines implement :class:`RandomNumberGenerator`. Their state lives
in ``numpy.uint32``/``numpy.uint64`` scalars so every shift, xor and
addition wraps exactly like the reference algorithms; Python integers
only appear when a raw word is mapped into a caller's range.
"""
from __future__ import annotations

import logging
import numbers
from typing import Protocol

import numpy as np

from .ranges import UINT32_MAX_RANGE, BigIntRange, FiniteRange, IntRange

LOGGER = logging.getLogger(__name__)

WARM_UP_DRAWS = 4
REAL_DIGITS = 10

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_SIGN_BIT32 = np.uint32(0x80000000)
_SHIFT_5 = np.uint64(5)
_SHIFT_8 = np.uint32(8)
_SHIFT_11 = np.uint32(11)
_SHIFT_18 = np.uint64(18)
_SHIFT_19 = np.uint32(19)
_SHIFT_23 = np.uint64(23)

# Process-wide entropy; only used to pick seeds, never inside a draw.
_AMBIENT = np.random.default_rng()


class RandomNumberGenerator(Protocol):
    """Capability shared by every engine: inclusive integer and real draws."""

    def draw_int(self, value_range: IntRange) -> int:
        ...

    def draw_real(self, value_range: FiniteRange) -> float:
        ...


def ambient_uint32() -> int:
    """Non-reproducible unsigned 32-bit value for ad-hoc seeding."""

    return int(_AMBIENT.integers(0, 1 << 32))


def ambient_uint64() -> int:
    """Non-reproducible unsigned 64-bit value for ad-hoc seeding."""

    high = ambient_uint32()
    low = ambient_uint32()
    return (high << 32) | low


def _require_seed(seed: object, name: str) -> int:
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(seed).__name__}")
    return int(seed)


class Xorshift32:
    """Marsaglia's four-word xorshift generator with 32-bit output."""

    def __init__(self, seed: int) -> None:
        seed = _require_seed(seed, "seed")
        self._x = np.uint32(123456789)
        self._y = np.uint32(362436069)
        self._z = np.uint32(521288629)
        self._w = np.uint32(seed & _MASK32)
        for _ in range(WARM_UP_DRAWS):
            self.next_uint32()
        LOGGER.debug("Xorshift32 seeded with %d after %d warm-up draws", seed, WARM_UP_DRAWS)

    @classmethod
    def unseeded(cls) -> "Xorshift32":
        return cls(ambient_uint32())

    def next_uint32(self) -> int:
        """Advance the state and return the raw word in ``[0, 2**32 - 1]``."""

        t = self._x ^ (self._x << _SHIFT_11)
        self._x = self._y
        self._y = self._z
        self._z = self._w
        self._w = (self._w ^ (self._w >> _SHIFT_19)) ^ (t ^ (t >> _SHIFT_8))
        # Signed reading of w shifted up by 2**31 equals flipping the sign bit.
        return int(self._w ^ _SIGN_BIT32)

    def draw_int(self, value_range: IntRange) -> int:
        low = value_range.get_min()
        high = value_range.get_max()
        # Plain modulo: widths that do not divide 2**32 keep a slight bias.
        return self.next_uint32() % (high - low + 1) + low

    def draw_real(self, value_range: FiniteRange) -> float:
        low = value_range.get_min()
        high = value_range.get_max()
        return (self.next_uint32() / UINT32_MAX_RANGE.get_max()) * (high - low) + low


class Xorshift128Plus:
    """xorshift128+ over two 64-bit words; the state is never all zero."""

    def __init__(self, seed0: int, seed1: int) -> None:
        seed0 = _require_seed(seed0, "seed0") & _MASK64
        seed1 = _require_seed(seed1, "seed1") & _MASK64
        if seed0 == 0 and seed1 == 0:
            LOGGER.debug("Xorshift128Plus seed (0, 0) corrected to (0, 1)")
            seed1 = 1
        self._state = np.array([seed0, seed1], dtype=np.uint64)
        for _ in range(WARM_UP_DRAWS):
            self.next_uint64()
        LOGGER.debug("Xorshift128Plus seeded with (%d, %d) after %d warm-up draws", seed0, seed1, WARM_UP_DRAWS)

    @classmethod
    def unseeded(cls) -> "Xorshift128Plus":
        return cls(ambient_uint64(), ambient_uint64())

    def next_uint64(self) -> int:
        """Advance the state and return ``s[0] + s[1]`` modulo ``2**64``."""

        s1 = self._state[0]
        s0 = self._state[1]
        self._state[0] = s0
        s1 ^= s1 << _SHIFT_23
        s1 ^= s1 >> _SHIFT_18
        s1 ^= s0
        s1 ^= s0 >> _SHIFT_5
        self._state[1] = s1
        with np.errstate(over="ignore"):
            return int(self._state[0] + self._state[1])

    def draw_big_int(self, value_range: BigIntRange) -> int:
        low = value_range.get_min()
        high = value_range.get_max()
        return self.next_uint64() % (high - low + 1) + low

    def draw_int(self, value_range: IntRange) -> int:
        return self.draw_big_int(value_range.to_big_int())

    def draw_real(self, value_range: FiniteRange) -> float:
        """Quantise a 64-bit draw to ``REAL_DIGITS`` decimals before scaling."""

        scale = 10**REAL_DIGITS
        ratio = self.draw_big_int(BigIntRange.min_max(0, scale)) / scale
        low = value_range.get_min()
        high = value_range.get_max()
        return ratio * (high - low) + low
