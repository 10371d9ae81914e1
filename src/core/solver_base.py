"""Solver contract and cross-checking helper."""

from __future__ import annotations

import logging
from typing import Mapping, Protocol, runtime_checkable

from .errors import SolverMismatchError
from .pyramid import Pyramid

logger = logging.getLogger(__name__)


@runtime_checkable
class PyramidSolver(Protocol):
    """Computes the maximum path total of a pyramid."""

    def pyramid_maximum_total(self, pyramid: Pyramid) -> int: ...


def check_totals(totals: Mapping[str, int]) -> int:
    """
    Return the agreed total of already computed per-solver ``totals``.

    Raises ``SolverMismatchError`` when any two totals differ.
    """
    if not totals:
        raise ValueError("check_totals needs at least one total")
    if len(set(totals.values())) != 1:
        raise SolverMismatchError(totals)
    return next(iter(totals.values()))


def cross_check(pyramid: Pyramid, solvers: Mapping[str, PyramidSolver]) -> int:
    """
    Run every solver once on ``pyramid`` and return the agreed total.

    Raises ``SolverMismatchError`` when any two totals differ.
    """
    if not solvers:
        raise ValueError("cross_check needs at least one solver")

    totals = {name: solver.pyramid_maximum_total(pyramid) for name, solver in solvers.items()}
    logger.debug("cross_check rows=%d totals=%s", pyramid.rows, totals)
    return check_totals(totals)
