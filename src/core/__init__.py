"""
Core pyramid path-sum algorithms
"""

from .errors import InvalidPyramidError, PyramidError, SolverMismatchError
from .generator import RandomPyramidGenerator, generate_pyramid
from .naive_solver import NaivePyramidSolver
from .pyramid import Pyramid
from .solver_base import PyramidSolver, check_totals, cross_check
from .tabulating_solver import TabulatingPyramidSolver, best_totals

__all__ = [
    "Pyramid",
    "PyramidSolver",
    "NaivePyramidSolver",
    "TabulatingPyramidSolver",
    "best_totals",
    "check_totals",
    "cross_check",
    "RandomPyramidGenerator",
    "generate_pyramid",
    "PyramidError",
    "InvalidPyramidError",
    "SolverMismatchError",
]
