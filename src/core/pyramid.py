"""
Triangular grid ("inverted pyramid") of integers.

Level 0 is the widest level at the top and the last level holds the single apex
cell at the bottom. Input data may be rectangular (``rows x rows``) with filler
past each level's valid-length bound; the filler is dropped at construction and
can never be read back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .errors import InvalidPyramidError
from .levels import level_length


def _require_int(name: str, value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _require_sequence(name: str, value: Any) -> None:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence")


@dataclass(frozen=True)
class Pyramid:
    """
    Immutable triangular grid.

    ``levels`` may be passed as any sequence of sequences; it is validated and
    stored as a tuple of tuples holding only the valid cells of each level.
    """

    levels: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        data = self.levels
        _require_sequence("pyramid data", data)
        rows = len(data)
        if rows < 1:
            raise InvalidPyramidError("pyramid must have at least one level")

        normalized: list[tuple[int, ...]] = []
        for row, values in enumerate(data):
            _require_sequence(f"level {row}", values)
            bound = level_length(rows, row)
            if len(values) < bound:
                raise InvalidPyramidError(
                    f"level {row} has {len(values)} cells, expected at least {bound}"
                )
            level = tuple(values[:bound])
            for column, value in enumerate(level):
                _require_int(f"cell ({row}, {column})", value)
            normalized.append(level)

        object.__setattr__(self, "levels", tuple(normalized))

    @property
    def rows(self) -> int:
        return len(self.levels)

    @property
    def data(self) -> tuple[tuple[int, ...], ...]:
        """Valid cells of every level, top level first."""
        return self.levels

    def level(self, row: int) -> tuple[int, ...]:
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} out of range for {self.rows} levels")
        return self.levels[row]

    def get(self, row: int, column: int) -> int:
        """Value at ``(row, column)``; ``column`` must be inside the level's bound."""
        level = self.level(row)
        if not 0 <= column < len(level):
            raise IndexError(f"column {column} out of range for level {row} ({len(level)} cells)")
        return level[column]

    def __str__(self) -> str:
        width = max(len(str(v)) for level in self.levels for v in level)
        step = (width + 1) // 2
        lines = []
        for row, level in enumerate(self.levels):
            cells = " ".join(str(v).rjust(width) for v in level)
            lines.append(" " * (row * step) + cells)
        return "\n".join(lines)
