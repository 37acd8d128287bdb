"""Simulation of random bit updates until every capacity lane of a sponge is nonzero."""

from __future__ import annotations

import random

CAPACITY_LANES = 16
LANE_SIZE = 64


def steps_to_fill_capacity(
    rng: random.Random | None = None,
    lanes: int = CAPACITY_LANES,
    lane_size: int = LANE_SIZE,
) -> int:
    """Count random single-bit updates until each of ``lanes`` lanes has a bit set."""
    if lanes < 1:
        raise ValueError(f"lanes must be positive, got {lanes}")
    if lane_size < 1:
        raise ValueError(f"lane size must be positive, got {lane_size}")
    generator = rng if rng is not None else random.Random()
    state = [0] * lanes
    steps = 0
    while not all(state):
        lane = generator.randrange(lanes)
        bit = generator.randrange(lane_size)
        state[lane] |= 1 << bit
        steps += 1
    return steps