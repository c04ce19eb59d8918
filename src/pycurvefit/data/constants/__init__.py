"""Numerical and file-processing constants for pycurvefit."""

from .processing_constants import NumericalConstants, ErrorMessages, FileConstants

__all__ = [
    "NumericalConstants",
    "ErrorMessages",
    "FileConstants"
]
