"""
Deterministic random pyramid generator.

Each generator owns a private ``random.Random`` built from an explicit seed, so
generation never reads or mutates the process-wide ``random`` state and equal
``(seed, rows, value_range, signed)`` always produce equal pyramids.
"""

from __future__ import annotations

import random
from typing import Optional

from .levels import level_length
from .pyramid import Pyramid


class RandomPyramidGenerator:
    """
    Builds ``rows``-level pyramids with values in ``[0, value_range)``.

    With ``signed=True`` values are drawn from ``(-value_range, value_range)``.
    Repeated ``generate_pyramid()`` calls continue the same random stream.
    """

    def __init__(self, rows: int, value_range: int, *, seed: Optional[int] = None, signed: bool = False) -> None:
        if rows < 1:
            raise ValueError(f"rows must be positive: {rows}")
        if value_range < 1:
            raise ValueError(f"value_range must be positive: {value_range}")
        self.rows = rows
        self.value_range = value_range
        self.seed = seed
        self.signed = signed
        self._rng = random.Random(seed)

    def _draw(self) -> int:
        if self.signed:
            return self._rng.randrange(-self.value_range + 1, self.value_range)
        return self._rng.randrange(self.value_range)

    def generate_pyramid(self) -> Pyramid:
        levels = [
            [self._draw() for _ in range(level_length(self.rows, row))]
            for row in range(self.rows)
        ]
        return Pyramid(levels)


def generate_pyramid(rows: int, value_range: int, *, seed: Optional[int] = None, signed: bool = False) -> Pyramid:
    return RandomPyramidGenerator(rows, value_range, seed=seed, signed=signed).generate_pyramid()
