"""
Level indexing shared by both solvers.

Level ``r`` of an ``n``-level pyramid holds ``n - r`` valid cells. A path
ascends from ``(r, c)`` to ``(r - 1, c)`` or ``(r - 1, c + 1)``, so seen from
above a cell ``(r, c)`` is reached from ``(r + 1, c - 1)`` or ``(r + 1, c)``.
"""

from __future__ import annotations


def level_length(rows: int, row: int) -> int:
    """Number of valid cells in level ``row``."""
    return rows - row


def next_level_length(rows: int, row: int) -> int:
    """Number of valid cells in the level below ``row`` (``row + 1``)."""
    return level_length(rows, row + 1)


def predecessor_columns(rows: int, row: int, column: int) -> tuple[int, ...]:
    """
    Columns of level ``row + 1`` from which ``(row, column)`` can be reached.

    Both candidates are checked against the next level's bound, never the
    current one. The result is never empty for a valid ``(row, column)`` with
    ``row < rows - 1``.
    """
    bound = next_level_length(rows, row)
    return tuple(c for c in (column - 1, column) if 0 <= c < bound)


def successor_columns(column: int) -> tuple[int, int]:
    """Columns of level ``row - 1`` that a path at ``column`` may step to."""
    return column, column + 1
