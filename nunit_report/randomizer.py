"""Process-wide initial random seed recorded in results documents."""

import random

_initial_seed = random.SystemRandom().randrange(0x7FFFFFFF)


def initial_seed() -> int:
    """Return the seed this process's randomized tests start from."""
    return _initial_seed


def set_initial_seed(seed: int) -> None:
    """Replace the initial seed, e.g. with one given on a command line."""
    global _initial_seed
    _initial_seed = seed
