"""Seed number factories."""

import random
from typing import Callable

SEED_UPPER_BOUND = 100.0

SeedFactory = Callable[[], float]


def random_seed_number() -> float:
    """Return a random seed number in [0, 100)."""
    return random.random() * SEED_UPPER_BOUND
