"""General sample-array validation utilities."""

import logging
from typing import Tuple

import numpy as np

from pycurvefit.core.exceptions import EmptyInputError, InsufficientPointsError, InvalidDomainError, LengthMismatchError
from pycurvefit.core.typedefs import ArrayTypes
from pycurvefit.data.constants import ErrorMessages, NumericalConstants

logger = logging.getLogger(__name__)


def as_float_array(values: ArrayTypes, name: str = "Array") -> np.ndarray:
    """Convert a sequence to a one-dimensional float64 array."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        logger.error("%s must be one-dimensional, got shape %s", name, arr.shape)
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    return arr


def validate_sample_arrays(x_data: ArrayTypes, y_data: ArrayTypes,
                           x_name: str = "x_data", y_name: str = "y_data") -> Tuple[np.ndarray, np.ndarray]:
    """Convert paired samples to float arrays, rejecting length mismatches and empty input."""
    x_array = as_float_array(x_data, x_name)
    y_array = as_float_array(y_data, y_name)
    if len(x_array) != len(y_array):
        logger.error("Array length mismatch: %s(%d) != %s(%d)", x_name, len(x_array), y_name, len(y_array))
        raise LengthMismatchError(
            ErrorMessages.LENGTH_MISMATCH.format(first=x_name, first_len=len(x_array),
                                                 second=y_name, second_len=len(y_array)),
            expected=len(x_array), actual=len(y_array))
    if len(x_array) == 0:
        logger.error("Empty sample arrays provided")
        raise EmptyInputError(ErrorMessages.EMPTY_INPUT.format(name="Input arrays"))
    return x_array, y_array


def require_points(count: int, required: int, what: str) -> None:
    """Raise InsufficientPointsError unless ``count >= required``."""
    if count < required:
        logger.error("Insufficient data points for %s: %d < %d", what, count, required)
        raise InsufficientPointsError(
            ErrorMessages.INSUFFICIENT_POINTS.format(count=count, what=what, required=required),
            required=required, available=count)


def require_finite(value: float, name: str = "Query") -> float:
    """Return ``value`` as a float, raising InvalidDomainError for NaN or infinite input."""
    if not np.isfinite(value):
        logger.error("%s must be finite, got %s", name, value)
        raise InvalidDomainError(f"{name} must be finite, got {value}")
    return float(value)


def is_monotonic(arr: np.ndarray, name: str = "Array",
                 mode: str = "non_decreasing",
                 threshold: float = NumericalConstants.MONOTONICITY_THRESHOLD,
                 raise_error: bool = True) -> bool:
    """Universal monotonicity checker supporting multiple modes."""
    for i in range(1, len(arr)):
        diff = arr[i] - arr[i-1]
        violation = False
        if mode == "strictly_increasing" and diff <= threshold:
            violation = True
        elif mode == "non_decreasing" and diff < -threshold:
            violation = True
        elif mode == "strictly_decreasing" and diff >= -threshold:
            violation = True
        elif mode == "non_increasing" and diff > threshold:
            violation = True
        if violation:
            start_idx = max(0, i-2)
            end_idx = min(len(arr), i+3)
            context = "\nSurrounding values:\n"
            for j in range(start_idx, end_idx):
                context += f"Index {j}: {arr[j]:.10e}\n"
            error_msg = (
                f"{name} is not {mode.replace('_', ' ')} at index {i}:\n"
                f"Previous value ({i-1}): {arr[i-1]:.10e}\n"
                f"Current value ({i}): {arr[i]:.10e}\n"
                f"Difference: {diff:.10e}\n"
                f"{context}"
            )
            if raise_error:
                raise ValueError(error_msg)
            else:
                logger.warning("%s", error_msg)
                return False
    logger.debug("%s is %s", name, mode.replace('_', ' '))
    return True
