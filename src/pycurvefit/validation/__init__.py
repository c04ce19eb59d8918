"""Validation utilities for pycurvefit."""

from .array_validator import as_float_array, validate_sample_arrays, require_points, require_finite, is_monotonic

__all__ = [
    "as_float_array",
    "validate_sample_arrays",
    "require_points",
    "require_finite",
    "is_monotonic"
]
