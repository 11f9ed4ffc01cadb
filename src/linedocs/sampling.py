"""Random start-offset selection for corpus reads."""

from __future__ import annotations

import numpy as np

# Seek offsets are rounded to this many bytes.
CHAR_SIZE = 4

_INT63_MAX = (1 << 63) - 1


def as_generator(random: int | np.random.Generator | None) -> np.random.Generator | None:
    """Coerce a seed or generator into a ``numpy.random.Generator``."""
    if random is None or isinstance(random, np.random.Generator):
        return random
    return np.random.default_rng(random)


def random_seek_pos(random: np.random.Generator | None, size: int) -> int:
    """Pick an aligned byte offset in the first third of ``size`` bytes.

    Returns 0 when there is nothing to sample from (no generator, or a corpus
    of three bytes or fewer), which means "read from the start".
    """
    if random is None or size <= 3:
        return 0

    result = int(random.integers(0, _INT63_MAX, dtype=np.int64)) % (size // 3)
    if result > size - 7:
        result = max(size - 8, 0)
    return result - result % CHAR_SIZE
