"""Linear congruential randomizer with the seed threaded through game state"""
import time
from typing import Tuple

# GCC's constants
LCG_M = 0x80000000
LCG_A = 1103515245
LCG_C = 12345


def hash_seed(seed: int) -> int:
    """Advance the LCG one step. Call repeatedly to generate the sequence."""
    return (LCG_A * seed + LCG_C) % LCG_M


def random_int(seed: int, low: int, high: int) -> Tuple[int, int]:
    """Return (value in [low, high], next seed)."""
    if high < low:
        raise ValueError(f"empty range [{low}, {high}]")
    nxt = hash_seed(seed)
    scale = nxt / LCG_M
    return low + int(scale * (high - low + 1)), nxt


def clock_seed() -> int:
    return int(time.time() * 1000) % LCG_M
