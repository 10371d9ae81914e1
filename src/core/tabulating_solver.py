"""
Efficient solver: bottom-up dynamic programming.

Algorithm Design:
- Type: Tabulation over levels, bottom apex first
- Time Complexity: O(rows^2), every valid cell is visited once
- Space Complexity: O(rows^2) for the table of best totals
- Recurrence: best[r][c] = value(r, c) + max(best[r+1][p] for p in predecessors(r, c))

``best[r][c]`` is the largest total of any path from the bottom apex up to
``(r, c)``, inclusive of both ends. Levels are filled in strictly decreasing
order because each level depends only on the one below it.

Example (sample pyramid and its table):

    5 9 8 4        20 24 23 19
     6 4 5           15 14 15
      6 7              9 10
       3                 3

Best path 3 -> 6 -> 6 -> 9 = 24.
"""

from __future__ import annotations

import logging

from .levels import level_length, predecessor_columns
from .pyramid import Pyramid

logger = logging.getLogger(__name__)


def _max_from_below(below: list[int], rows: int, row: int, column: int) -> int:
    return max(below[c] for c in predecessor_columns(rows, row, column))


def best_totals(pyramid: Pyramid) -> tuple[tuple[int, ...], ...]:
    """
    Full table of best totals, one tuple per level (top level first).

    A fresh table is built on every call.
    """
    rows = pyramid.rows
    table: list[list[int]] = [[] for _ in range(rows)]
    table[rows - 1] = [pyramid.get(rows - 1, 0)]

    for row in range(rows - 2, -1, -1):
        below = table[row + 1]
        table[row] = [
            pyramid.get(row, column) + _max_from_below(below, rows, row, column)
            for column in range(level_length(rows, row))
        ]

    return tuple(tuple(level) for level in table)


def maximum_total(pyramid: Pyramid) -> int:
    """Maximum path total; any top-level cell may end the path."""
    total = max(best_totals(pyramid)[0])
    logger.debug("tabulating solver rows=%d total=%d", pyramid.rows, total)
    return total


class TabulatingPyramidSolver:
    def pyramid_maximum_total(self, pyramid: Pyramid) -> int:
        return maximum_total(pyramid)
