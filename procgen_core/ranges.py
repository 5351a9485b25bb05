"""Closed numeric intervals used as draw bounds by the random engines."""
from __future__ import annotations

import math
import numbers
import re
import sys
from dataclasses import dataclass
from typing import Optional, Tuple, Union

Number = Union[int, float]

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -(2**53 - 1)
UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)


# //1.- Recognise real numbers while rejecting booleans that subclass int.
def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


# //2.- Only floats can be NaN or infinite; large ints must not reach math.isnan.
def _is_nan(value: Number) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_infinite(value: Number) -> bool:
    return isinstance(value, float) and math.isinf(value)


# //3.- Mirror the "safe integer" notion: integral and exactly representable as a double.
def is_safe_integer(value: object) -> bool:
    if not _is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return MIN_SAFE_INTEGER <= int(value) <= MAX_SAFE_INTEGER
    if not float(value).is_integer():
        return False
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


# //4.- Split a range literal ("3", "3..", "..3", "1..5") into optional bounds.
def _parse_range_text(text: str, allow_sign: bool, int_only: bool) -> Tuple[Optional[Number], Optional[Number]]:
    number = r"\d+" if int_only else r"(?:\d+\.?\d*|\.\d+)"
    if allow_sign:
        number = r"[+-]?" + number

    def convert(token: str) -> Number:
        return int(token) if int_only else float(token)

    match = re.fullmatch(f"({number})", text)
    if match:
        value = convert(match.group(1))
        return value, value
    match = re.fullmatch(rf"({number})\.\.", text)
    if match:
        return convert(match.group(1)), None
    match = re.fullmatch(rf"\.\.({number})", text)
    if match:
        return None, convert(match.group(1))
    match = re.fullmatch(rf"({number})\.\.({number})", text)
    if match:
        return convert(match.group(1)), convert(match.group(2))
    raise ValueError(f"Invalid range literal: {text!r}")


@dataclass(frozen=True)
class NumberRange:
    """Closed interval ``[min, max]`` whose bounds may be infinite."""

    min: Number
    max: Number

    def __post_init__(self) -> None:
        for name in ("min", "max"):
            value = getattr(self, name)
            if not _is_number(value):
                raise TypeError(f"Range bound {name!r} must be a real number, got {type(value).__name__}")
            if _is_nan(value):
                raise ValueError(f"Range bound {name!r} must not be NaN")
        if self.max < self.min:
            raise ValueError(f"max < min ({self.max!r} < {self.min!r})")

    def get_min(self) -> Optional[Number]:
        return None if _is_infinite(self.min) else self.min

    def get_max(self) -> Optional[Number]:
        return None if _is_infinite(self.max) else self.max

    def within(self, value: Number) -> bool:
        return self.min <= value <= self.max

    def clamp(self, value: Number) -> Number:
        return max(self.min, min(self.max, value))

    @classmethod
    def exact_value(cls, value: Number):
        return cls(value, value)

    @classmethod
    def min_only(cls, minimum: Number):
        return cls(minimum, math.inf)

    @classmethod
    def max_only(cls, maximum: Number):
        return cls(-math.inf, maximum)

    @classmethod
    def min_max(cls, minimum: Number, maximum: Number):
        if maximum < minimum:
            raise ValueError(f"max < min ({maximum!r} < {minimum!r})")
        return cls(minimum, maximum)

    @classmethod
    def parse(cls, text: str, allow_sign: bool = False, int_only: bool = False):
        """Build a range from ``N``, ``N..``, ``..N`` or ``N..M``."""

        low, high = _parse_range_text(text, allow_sign, int_only)
        if high is None:
            return cls.min_only(low)
        if low is None:
            return cls.max_only(high)
        if low == high:
            return cls.exact_value(low)
        return cls.min_max(low, high)


@dataclass(frozen=True)
class FiniteRange(NumberRange):
    """Range whose bounds are both finite reals."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if _is_infinite(self.min) or _is_infinite(self.max):
            raise ValueError("FiniteRange bounds must be finite")

    def get_min(self) -> Number:
        return self.min

    def get_max(self) -> Number:
        return self.max

    @classmethod
    def min_only(cls, minimum: Number):
        return cls(minimum, sys.float_info.max)

    @classmethod
    def max_only(cls, maximum: Number):
        return cls(-sys.float_info.max, maximum)


@dataclass(frozen=True)
class IntRange(FiniteRange):
    """Range over safe integers; the bounds are stored as ``int``."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if not (is_safe_integer(self.min) and is_safe_integer(self.max)):
            raise ValueError(f"IntRange bounds must be safe integers, got [{self.min!r}, {self.max!r}]")
        object.__setattr__(self, "min", int(self.min))
        object.__setattr__(self, "max", int(self.max))

    def within(self, value: Number) -> bool:
        if not is_safe_integer(value):
            raise ValueError(f"IntRange.within expects a safe integer, got {value!r}")
        return super().within(value)

    def clamp(self, value: Number) -> int:
        if value > self.max:
            return self.max
        if value < self.min:
            return self.min
        # Half-up rounding for in-range fractional values.
        return int(math.floor(value + 0.5))

    def to_big_int(self) -> "BigIntRange":
        return BigIntRange(self.min, self.max)

    @classmethod
    def min_only(cls, minimum: Number):
        return cls(minimum, MAX_SAFE_INTEGER)

    @classmethod
    def max_only(cls, maximum: Number):
        return cls(MIN_SAFE_INTEGER, maximum)

    @classmethod
    def parse(cls, text: str, allow_sign: bool = False, int_only: bool = True):
        return super().parse(text, allow_sign, True)


@dataclass(frozen=True)
class BigIntRange(NumberRange):
    """Integer range without the safe-integer limit, used by 64-bit engines."""

    def __post_init__(self) -> None:
        for name in ("min", "max"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"BigIntRange bound {name!r} must be an integer, got {type(value).__name__}")
            object.__setattr__(self, name, int(value))
        super().__post_init__()

    @classmethod
    def min_only(cls, minimum: int):
        return cls(minimum, UINT64_MAX)

    @classmethod
    def max_only(cls, maximum: int):
        return cls(INT64_MIN, maximum)

    @classmethod
    def parse(cls, text: str, allow_sign: bool = False, int_only: bool = True):
        return super().parse(text, allow_sign, True)


UINT32_MAX_RANGE = IntRange.min_max(0, 2**32 - 1)
INT32_MAX_RANGE = IntRange.min_max(-(2**31), 2**31 - 1)
