"""Exception types for the pyramid solvers.

Argument-shape problems (non-integer cells) raise plain ``TypeError``; structural
problems with a grid raise ``InvalidPyramidError`` so callers can catch them
either as a ``PyramidError`` or as a ``ValueError``.
"""

from __future__ import annotations

from typing import Mapping


class PyramidError(Exception):
    """Base class for pyramid errors."""


class InvalidPyramidError(PyramidError, ValueError):
    """Raised when grid data has no levels or a level is shorter than its bound."""


class SolverMismatchError(PyramidError):
    """Raised when two solvers disagree on the same pyramid."""

    def __init__(self, totals: Mapping[str, int]) -> None:
        self.totals = dict(totals)
        rendered = ", ".join(f"{name}={total}" for name, total in self.totals.items())
        super().__init__(f"solver totals disagree: {rendered}")
