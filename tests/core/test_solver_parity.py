"""Parity tests: tabulating solver vs the naive recursive oracle.

Uses Hypothesis to fuzz small pyramids (the oracle is exponential) and checks
that both solvers return the same total, leave the pyramid untouched, and agree
with `cross_check`.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from src.core import (
    NaivePyramidSolver,
    Pyramid,
    SolverMismatchError,
    TabulatingPyramidSolver,
    check_totals,
    cross_check,
    generate_pyramid,
)

MAX_ORACLE_ROWS = 10

SOLVERS = {"naive": NaivePyramidSolver(), "tabulating": TabulatingPyramidSolver()}

# ---------------------------------------------------------------------------
# Hypothesis strategies
# ---------------------------------------------------------------------------


def pyramid_strategy(
    *, max_rows: int = MAX_ORACLE_ROWS, min_value: int = -1_000_000, max_value: int = 1_000_000
) -> st.SearchStrategy[Pyramid]:
    """Pyramids with 1..max_rows levels, each level exactly its valid length."""
    cells = st.integers(min_value=min_value, max_value=max_value)

    def levels_for(rows: int) -> st.SearchStrategy[tuple[list[int], ...]]:
        return st.tuples(
            *[st.lists(cells, min_size=rows - r, max_size=rows - r) for r in range(rows)]
        )

    return st.integers(min_value=1, max_value=max_rows).flatmap(levels_for).map(Pyramid)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestOracleEquivalence:
    @given(pyramid=pyramid_strategy())
    @settings(max_examples=300, deadline=2000)
    def test_totals_match(self, pyramid: Pyramid):
        naive = SOLVERS["naive"].pyramid_maximum_total(pyramid)
        tabulating = SOLVERS["tabulating"].pyramid_maximum_total(pyramid)
        assert naive == tabulating, f"naive={naive} tabulating={tabulating} for\n{pyramid}"

    @given(pyramid=pyramid_strategy(min_value=-5, max_value=5))
    @settings(max_examples=300, deadline=2000)
    def test_totals_match_with_many_ties(self, pyramid: Pyramid):
        assert cross_check(pyramid, SOLVERS) == SOLVERS["naive"].pyramid_maximum_total(pyramid)

    @given(pyramid=pyramid_strategy(max_rows=6))
    @settings(max_examples=100, deadline=2000)
    def test_solvers_do_not_mutate(self, pyramid: Pyramid):
        before = pyramid.data
        for solver in SOLVERS.values():
            solver.pyramid_maximum_total(pyramid)
            solver.pyramid_maximum_total(pyramid)
        assert pyramid.data == before

    @given(pyramid=pyramid_strategy(max_rows=6), offset=st.integers(min_value=-100, max_value=100))
    @settings(max_examples=100, deadline=2000)
    def test_uniform_shift_adds_rows_times_offset(self, pyramid: Pyramid, offset: int):
        # Every path visits exactly one cell per level.
        shifted = Pyramid([[v + offset for v in level] for level in pyramid.data])
        for solver in SOLVERS.values():
            assert solver.pyramid_maximum_total(shifted) == (
                solver.pyramid_maximum_total(pyramid) + pyramid.rows * offset
            )


class TestSeededSweep:
    @pytest.mark.parametrize("rows", range(1, MAX_ORACLE_ROWS + 1))
    def test_seeded_unsigned(self, rows: int):
        pyramid = generate_pyramid(rows, 1000, seed=rows * 7919)
        cross_check(pyramid, SOLVERS)

    @pytest.mark.parametrize("rows", range(1, MAX_ORACLE_ROWS + 1))
    def test_seeded_signed(self, rows: int):
        pyramid = generate_pyramid(rows, 1000, seed=rows * 104729, signed=True)
        cross_check(pyramid, SOLVERS)


class _OffByOne:
    def pyramid_maximum_total(self, pyramid: Pyramid) -> int:
        return SOLVERS["tabulating"].pyramid_maximum_total(pyramid) + 1


def test_cross_check_reports_mismatch():
    pyramid = Pyramid([[10, 20], [5, 0]])
    with pytest.raises(SolverMismatchError, match="naive=25, broken=26") as excinfo:
        cross_check(pyramid, {"naive": SOLVERS["naive"], "broken": _OffByOne()})
    assert excinfo.value.totals == {"naive": 25, "broken": 26}


def test_cross_check_requires_a_solver():
    with pytest.raises(ValueError, match="at least one solver"):
        cross_check(Pyramid([[1]]), {})


def test_check_totals_uses_precomputed_values():
    assert check_totals({"naive": 24, "tabulating": 24}) == 24
    with pytest.raises(SolverMismatchError, match="naive=24, tabulating=23"):
        check_totals({"naive": 24, "tabulating": 23})
    with pytest.raises(ValueError, match="at least one total"):
        check_totals({})
