"""Configuration helpers for building seeded random engines."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Union

from .engines import RandomNumberGenerator, Xorshift32, Xorshift128Plus, ambient_uint32, ambient_uint64
from .randomizer import Random

LOGGER = logging.getLogger(__name__)

ENGINE_NAMES = ("xorshift32", "xorshift128plus")


# //1.- Define dataclass capturing which engine to build and how to seed it.
@dataclass(frozen=True)
class RandomConfig:
    """Engine selection; a missing ``seed`` means ambient entropy."""

    engine: str = "xorshift32"
    seed: Optional[int] = None
    seed_high: int = 0

    def __post_init__(self) -> None:
        if self.engine not in ENGINE_NAMES:
            raise ValueError(f"Unknown engine {self.engine!r}; expected one of {ENGINE_NAMES}")

    # //2.- Provide helper to build the config from a plain mapping.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Union[str, int]]] = None) -> "RandomConfig":
        if not payload:
            return cls()
        seed = payload.get("seed")
        return cls(
            engine=str(payload.get("engine", "xorshift32")).strip().lower(),
            seed=None if seed is None else int(seed),
            seed_high=int(payload.get("seed_high", 0)),
        )

    # //3.- Allow overriding the engine and seeds through environment variables.
    @classmethod
    def from_environment(cls, prefix: str = "PROCGEN") -> "RandomConfig":
        mapping: Dict[str, Union[str, int]] = {}
        engine = os.getenv(f"{prefix}_ENGINE")
        seed = os.getenv(f"{prefix}_SEED")
        seed_high = os.getenv(f"{prefix}_SEED_HIGH")
        if engine is not None:
            mapping["engine"] = engine
        if seed is not None:
            mapping["seed"] = int(seed)
        if seed_high is not None:
            mapping["seed_high"] = int(seed_high)
        return cls.from_mapping(mapping)

    # //4.- Build the configured engine, drawing ambient seeds when none is set.
    def create_engine(self) -> RandomNumberGenerator:
        if self.engine == "xorshift128plus":
            if self.seed is None:
                LOGGER.info("No seed configured; seeding xorshift128plus from ambient entropy")
                return Xorshift128Plus(ambient_uint64(), ambient_uint64())
            return Xorshift128Plus(self.seed_high, self.seed)
        if self.seed is None:
            LOGGER.info("No seed configured; seeding xorshift32 from ambient entropy")
            return Xorshift32(ambient_uint32())
        return Xorshift32(self.seed)

    # //5.- Wrap the engine in the distribution facade.
    def create_random(self) -> Random:
        return Random(self.create_engine())


# //6.- Provide canonical configuration accessor used by the demo and tests.
def load_random_config(
    mapping: Optional[Mapping[str, Union[str, int]]] = None,
    *,
    env_prefix: str = "PROCGEN",
) -> RandomConfig:
    if mapping is not None:
        return RandomConfig.from_mapping(mapping)
    return RandomConfig.from_environment(prefix=env_prefix)
