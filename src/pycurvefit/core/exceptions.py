"""Custom exceptions for pycurvefit core functionality."""
from typing import Optional


class CurveFitError(ValueError):
    """Base exception for all interpolation and fitting errors."""
    pass


class EmptyInputError(CurveFitError):
    """Exception raised when a sample sequence contains no points."""
    pass


class LengthMismatchError(CurveFitError):
    """Exception raised when paired sample sequences differ in length."""

    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class DimensionMismatchError(CurveFitError):
    """Exception raised when grid, table, matrix or vector dimensions disagree."""
    pass


class InsufficientPointsError(CurveFitError):
    """Exception raised when there are too few samples for the requested degree or order."""

    def __init__(self, message: str, required: Optional[int] = None, available: Optional[int] = None):
        self.required = required
        self.available = available
        super().__init__(message)


class InvalidDomainError(CurveFitError):
    """Exception raised when an argument lies outside the domain of an operation."""
    pass


class SingularMatrixError(CurveFitError):
    """Exception raised when the linear solver meets a pivot below tolerance."""

    def __init__(self, message: str, column: Optional[int] = None):
        self.column = column
        super().__init__(message)


class NearSingularDenominatorError(CurveFitError):
    """Exception raised when a rational function is evaluated at a root of its denominator."""
    pass
