"""
Core numerical algorithms for interpolation and curve fitting.

This module provides binary search over sorted tables, piecewise interpolation
(linear, log-linear, nearest, bilinear), Akima spline interpolation, a dense linear
solver, least-squares polynomial, rational and vector fitting, and goodness-of-fit
metrics.
"""

from .search import find_insertion_point
from .linear_solver import solve_linear_system
from .interpolation import linear, linear_segment, batch_linear, log_linear, nearest, bilinear, as_grid_table
from .akima import AkimaSpline, akima
from .polynomial_fit import fit_polynomial, evaluate_polynomial, polynomial_to_sympy
from .rational_fit import RationalFitResult, fit_rational, evaluate_rational
from .vector_fit import VectorFitResult, fit_vector, evaluate_vector
from .error_metrics import (
    FitErrorMetrics,
    compute_error_metrics,
    polynomial_error_metrics,
    rational_error_metrics,
    vector_error_metrics,
)
from .piecewise_builder import PiecewiseBuilder

__all__ = [
    "find_insertion_point",
    "solve_linear_system",
    "linear",
    "linear_segment",
    "batch_linear",
    "log_linear",
    "nearest",
    "bilinear",
    "as_grid_table",
    "AkimaSpline",
    "akima",
    "fit_polynomial",
    "evaluate_polynomial",
    "polynomial_to_sympy",
    "RationalFitResult",
    "fit_rational",
    "evaluate_rational",
    "VectorFitResult",
    "fit_vector",
    "evaluate_vector",
    "FitErrorMetrics",
    "compute_error_metrics",
    "polynomial_error_metrics",
    "rational_error_metrics",
    "vector_error_metrics",
    "PiecewiseBuilder",
]
