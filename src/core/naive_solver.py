"""
Reference solver: plain recursion, no memoization.

Exponential in the number of levels. Used as the oracle the tabulating solver
is parity-tested against, so it stays deliberately literal.
"""

from __future__ import annotations

from .levels import successor_columns
from .pyramid import Pyramid


def total_above(pyramid: Pyramid, row: int, column: int) -> int:
    """Best total of a path from ``(row, column)`` up to the top level, inclusive."""
    value = pyramid.get(row, column)
    if row == 0:
        # The top cell counts toward the total.
        return value
    return value + max(total_above(pyramid, row - 1, c) for c in successor_columns(column))


def maximum_total(pyramid: Pyramid) -> int:
    return total_above(pyramid, pyramid.rows - 1, 0)


class NaivePyramidSolver:
    def pyramid_maximum_total(self, pyramid: Pyramid) -> int:
        return maximum_total(pyramid)
