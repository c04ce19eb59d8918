"""
pycurvefit - A Python library for interpolation and least-squares curve fitting.

This library provides tools for interpolating measurement tables and fitting
closed-form models to sampled data, with goodness-of-fit metrics, symbolic export
and YAML-driven model definitions.

Key Features:
- Linear, log-linear, nearest-neighbour and bilinear table interpolation
- Akima spline interpolation without overshoot near slope changes
- Least-squares polynomial, rational and vector-valued polynomial fits
- Goodness-of-fit metrics (R², RMSE, MAE, max error, relative error)
- Symbolic mathematics integration with SymPy
- Model definitions from YAML files and CSV/TXT/XLSX sample data
- Fit and residual visualization

Main Components:
- Core: Exceptions, shared types and the fitted model container
- Algorithms: Search, interpolation, linear solver and fitting routines
- Parsing: YAML configuration parsing and sample data loading
- Visualization: Fit and residual plotting
- Data: Numerical constants and message templates
"""

# Enhanced version handling with multiple fallbacks
try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        try:
            __version__ = version("pycurvefit")
        except PackageNotFoundError:
            __version__ = "0.1.0+unknown"
    except ImportError:
        __version__ = "0.1.0+unknown"  # Fallback version

# Core definitions
from .core.exceptions import (
    CurveFitError,
    EmptyInputError,
    LengthMismatchError,
    DimensionMismatchError,
    InsufficientPointsError,
    InvalidDomainError,
    SingularMatrixError,
    NearSingularDenominatorError,
)
from .core.fitted_model import FittedModel

# Algorithms
from .algorithms.search import find_insertion_point
from .algorithms.linear_solver import solve_linear_system
from .algorithms.interpolation import linear, linear_segment, batch_linear, log_linear, nearest, bilinear
from .algorithms.akima import AkimaSpline, akima
from .algorithms.polynomial_fit import fit_polynomial, evaluate_polynomial
from .algorithms.rational_fit import RationalFitResult, fit_rational, evaluate_rational
from .algorithms.vector_fit import VectorFitResult, fit_vector, evaluate_vector
from .algorithms.error_metrics import (
    FitErrorMetrics,
    compute_error_metrics,
    polynomial_error_metrics,
    rational_error_metrics,
    vector_error_metrics,
)
from .algorithms.piecewise_builder import PiecewiseBuilder

# Main API functions
from .parsing.api import (
    create_model,
    get_model_info,
    get_supported_methods,
    validate_yaml_file
)
from .parsing.io.data_handler import load_sample_data

# Visualization
from .visualization.plotters import FitVisualizer

__all__ = [
    # Version
    '__version__',

    # Errors
    'CurveFitError',
    'EmptyInputError',
    'LengthMismatchError',
    'DimensionMismatchError',
    'InsufficientPointsError',
    'InvalidDomainError',
    'SingularMatrixError',
    'NearSingularDenominatorError',

    # Core classes
    'FittedModel',

    # Algorithms
    'find_insertion_point',
    'solve_linear_system',
    'linear',
    'linear_segment',
    'batch_linear',
    'log_linear',
    'nearest',
    'bilinear',
    'AkimaSpline',
    'akima',
    'fit_polynomial',
    'evaluate_polynomial',
    'RationalFitResult',
    'fit_rational',
    'evaluate_rational',
    'VectorFitResult',
    'fit_vector',
    'evaluate_vector',
    'FitErrorMetrics',
    'compute_error_metrics',
    'polynomial_error_metrics',
    'rational_error_metrics',
    'vector_error_metrics',
    'PiecewiseBuilder',

    # Main API
    'create_model',
    'get_model_info',
    'get_supported_methods',
    'validate_yaml_file',
    'load_sample_data',

    # Visualization
    'FitVisualizer'
]

# Package metadata
__description__ = "Interpolation and least-squares curve fitting library"
