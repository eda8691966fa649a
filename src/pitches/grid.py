"""Location grid geometry and random sources for sign generation."""

import logging
from typing import Iterable, Protocol

import numpy as np

log = logging.getLogger("pitchsign.pitches.grid")

GRID_SIZE = 5   # 5x5 location grid
ZONE_SIZE = 3   # centered 3x3 strike zone


def strike_zone_bounds(grid_size: int = GRID_SIZE,
                       zone_size: int = ZONE_SIZE) -> tuple[int, int]:
    """Inclusive (first, last) row/col index of the centered strike zone."""
    start = (grid_size - zone_size) // 2
    return start, start + zone_size - 1


def is_in_strike_zone(row: int, col: int) -> bool:
    """True if the cell lies inside the strike zone (rows/cols 1..3)."""
    first, last = strike_zone_bounds()
    return first <= row <= last and first <= col <= last


class RandomSource(Protocol):
    """Uniform integer source used for every draw."""

    def randrange(self, n: int) -> int:
        """Return an integer uniformly from 0..n-1."""
        ...


class NumpyRandomSource:
    """Default random source backed by a numpy Generator."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randrange() needs a positive bound, got {n}")
        return int(self._rng.integers(0, n))


class SequenceRandomSource:
    """Replays a fixed sequence of integers.

    Each value is reduced modulo the requested bound so a scripted
    sequence can never produce an out-of-range index.
    """

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self._pos = 0

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randrange() needs a positive bound, got {n}")
        if not self._values:
            raise ValueError("SequenceRandomSource has no values")
        value = self._values[self._pos % len(self._values)]
        self._pos += 1
        return value % n

    @property
    def consumed(self) -> int:
        return self._pos
