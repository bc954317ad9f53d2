import random
import logging

from perlin2d import config

logger = logging.getLogger(__name__)


def _zigzag(seed):
    """Map any int onto a distinct non-negative int (0, -1, 1, -2 -> 0, 1, 2, 3)."""
    return seed * 2 if seed >= 0 else -seed * 2 - 1


def build_permutation_table(seed, size=config.PERMUTATION_SIZE):
    """Build the doubled, seed-shuffled permutation table used by the noise kernel."""
    if size <= 0 or size & (size - 1):
        raise ValueError(f"Permutation size must be a power of two, got {size}")

    # random.Random seeds from abs(seed), which would make s and -s collide
    rnd = random.Random(_zigzag(int(seed)))
    p = list(range(size))
    rnd.shuffle(p)
    logger.debug(f"Permutation table of size {size} built for seed {seed}")

    # Double it so p[p[X] + Y + 1] never needs wrapping
    return p + p


def is_valid_permutation_table(table):
    """Check that a table is two identical copies of a permutation of [0, N)."""
    if len(table) % 2:
        return False
    size = len(table) // 2
    first, second = list(table[:size]), list(table[size:])
    return first == second and sorted(first) == list(range(size))
