"""
Constants used throughout pycurvefit.

This package provides the numerical tolerances, iteration limits and file-processing
settings shared by the algorithms, the data loader and the configuration parser.
"""

from .constants.processing_constants import NumericalConstants, ErrorMessages, FileConstants

__all__ = [
    "NumericalConstants",
    "ErrorMessages",
    "FileConstants",
]
