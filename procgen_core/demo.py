"""Small demonstration harness: print a solid/air voxel block from noise."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

import numpy as np

from .config import ENGINE_NAMES, RandomConfig
from .noise import NoiseConfig

LOGGER = logging.getLogger(__name__)

SOLID = "#"
AIR = "."


def render_layers(field: np.ndarray) -> List[str]:
    """Render each y-layer of an (x, y, z) field; non-negative cells are solid."""

    lines: List[str] = []
    for y in range(field.shape[1]):
        lines.append(f"y={y}")
        for z in range(field.shape[2]):
            lines.append("".join(SOLID if field[x, y, z] >= 0 else AIR for x in range(field.shape[0])))
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a noise-carved voxel block.")
    parser.add_argument("--engine", choices=ENGINE_NAMES, default="xorshift32")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--size", type=int, default=10)
    parser.add_argument("--frequency", type=float, default=0.4)
    parser.add_argument("--amplitude", type=float, default=1.0)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(message)s")
    args = build_parser().parse_args(argv)
    random = RandomConfig(engine=args.engine, seed=args.seed).create_random()
    LOGGER.info("Sampling %d^3 block with %s seed=%d", args.size, args.engine, args.seed)
    field = random.noise_generator.grid3(
        (args.size, args.size, args.size),
        config=NoiseConfig(amplitude=args.amplitude, frequency=args.frequency),
    )
    solid = int(np.count_nonzero(field >= 0))
    for line in render_layers(field):
        print(line)
    LOGGER.info("%d of %d cells solid", solid, field.size)


if __name__ == "__main__":
    main()
