"""
Core definitions shared by every pycurvefit module.

This module contains the error taxonomy raised by the interpolation and fitting
algorithms and the type aliases used in their signatures.
"""

from .exceptions import (
    CurveFitError,
    EmptyInputError,
    LengthMismatchError,
    DimensionMismatchError,
    InsufficientPointsError,
    InvalidDomainError,
    SingularMatrixError,
    NearSingularDenominatorError,
)
from .typedefs import ArrayTypes, ScalarOrArray, PredictFunction

__all__ = [
    "CurveFitError",
    "EmptyInputError",
    "LengthMismatchError",
    "DimensionMismatchError",
    "InsufficientPointsError",
    "InvalidDomainError",
    "SingularMatrixError",
    "NearSingularDenominatorError",
    "ArrayTypes",
    "ScalarOrArray",
    "PredictFunction",
]
