import logging
from typing import List

import numpy as np

from pycurvefit.algorithms.search import find_insertion_point
from pycurvefit.core.exceptions import DimensionMismatchError, EmptyInputError, InvalidDomainError
from pycurvefit.core.typedefs import ArrayTypes
from pycurvefit.data.constants import ErrorMessages
from pycurvefit.validation.array_validator import as_float_array, require_finite, validate_sample_arrays

logger = logging.getLogger(__name__)


def linear_segment(x0: float, y0: float, x1: float, y1: float, x: float) -> float:
    """Two-point form of the line through (x0, y0) and (x1, y1), evaluated at x."""
    return y0 + (y1 - y0) * (x - x0) / (x1 - x0)


def linear(x_data: ArrayTypes, y_data: ArrayTypes, x: float) -> float:
    """Linearly interpolate at x, clamping to the end values outside the data range."""
    x_array, y_array = validate_sample_arrays(x_data, y_data)
    return _linear_sorted(x_array, y_array, x)


def _linear_sorted(x_array: np.ndarray, y_array: np.ndarray, x: float) -> float:
    x = require_finite(x, "x")
    if len(x_array) == 1:
        logger.debug("Single-point array: returning constant value %.6f", y_array[0])
        return float(y_array[0])
    if x <= x_array[0]:
        return float(y_array[0])
    if x >= x_array[-1]:
        return float(y_array[-1])
    i = find_insertion_point(x_array, x)
    logger.debug("Linear interpolation at x=%g between knots %d and %d", x, i - 1, i)
    return float(linear_segment(x_array[i - 1], y_array[i - 1], x_array[i], y_array[i], x))


def batch_linear(x_data: ArrayTypes, y_data: ArrayTypes, x_targets: ArrayTypes) -> np.ndarray:
    """Apply :func:`linear` independently to every target abscissa."""
    x_array, y_array = validate_sample_arrays(x_data, y_data)
    targets = as_float_array(x_targets, "x_targets")
    logger.debug("Batch linear interpolation of %d targets over %d samples", len(targets), len(x_array))
    return np.array([_linear_sorted(x_array, y_array, xt) for xt in targets], dtype=np.float64)


def log_linear(freq: ArrayTypes, value_db: ArrayTypes, target_freq: float) -> float:
    """
    Interpolate a dB-vs-frequency table linearly in log10(frequency).
    Args:
        freq: Ascending, strictly positive frequencies
        value_db: Values (typically in dB) at those frequencies
        target_freq: Query frequency, must be > 0
    Returns:
        float: Interpolated value, clamped to the end values outside the table
    """
    if not target_freq > 0:
        logger.error("Frequency must be positive, got %s", target_freq)
        raise InvalidDomainError(f"Frequency must be positive, got {target_freq}")
    target_freq = require_finite(target_freq, "Frequency")
    freq_array, value_array = validate_sample_arrays(freq, value_db, "freq", "value_db")
    if np.any(freq_array <= 0):
        logger.error("Frequency table contains non-positive values")
        raise InvalidDomainError("Frequency table must contain only positive values")
    return _linear_sorted(np.log10(freq_array), value_array, np.log10(target_freq))


def nearest(x_data: ArrayTypes, y_data: ArrayTypes, x: float) -> float:
    """Return the y value of the knot closest to x; ties go to the left neighbour."""
    x = require_finite(x, "x")
    x_array, y_array = validate_sample_arrays(x_data, y_data)
    if x <= x_array[0]:
        return float(y_array[0])
    if x >= x_array[-1]:
        return float(y_array[-1])
    i = find_insertion_point(x_array, x)
    left_dist = x - x_array[i - 1]
    right_dist = x_array[i] - x
    logger.debug("Nearest lookup at x=%g: left distance %g, right distance %g", x, left_dist, right_dist)
    return float(y_array[i - 1] if left_dist <= right_dist else y_array[i])


def bilinear(x_grid: ArrayTypes, y_grid: ArrayTypes, table: ArrayTypes, x: float, y: float) -> float:
    """
    Bilinear interpolation on a rectangular grid.

    ``table[i][j]`` holds the value at ``(x_grid[i], y_grid[j])``. When the query leaves
    the grid along one axis, the result is a 1D linear interpolation along the nearest
    edge row or column; there is no 2D extrapolation.
    Args:
        x_grid: Ascending x coordinates (one per table row)
        y_grid: Ascending y coordinates (one per table column)
        table: 2D values, shape (len(x_grid), len(y_grid))
        x: Query x
        y: Query y
    Returns:
        float: Interpolated value
    Raises:
        DimensionMismatchError: If the table shape does not match the grids
        InvalidDomainError: If x or y is NaN or infinite
    """
    x = require_finite(x, "x")
    y = require_finite(y, "y")
    xs = as_float_array(x_grid, "x_grid")
    ys = as_float_array(y_grid, "y_grid")
    z = as_grid_table(table, len(xs), len(ys))
    if x <= xs[0]:
        return _linear_sorted(ys, z[0], y)
    if x >= xs[-1]:
        return _linear_sorted(ys, z[-1], y)
    if y <= ys[0]:
        return _linear_sorted(xs, z[:, 0], x)
    if y >= ys[-1]:
        return _linear_sorted(xs, z[:, -1], x)
    i = find_insertion_point(xs, x) - 1
    j = find_insertion_point(ys, y) - 1
    logger.debug("Bilinear cell (%d, %d) for query (%g, %g)", i, j, x, y)
    tx = (x - xs[i]) / (xs[i + 1] - xs[i])
    ty = (y - ys[j]) / (ys[j + 1] - ys[j])
    z0 = z[i, j] * (1 - tx) + z[i + 1, j] * tx
    z1 = z[i, j + 1] * (1 - tx) + z[i + 1, j + 1] * tx
    return float(z0 * (1 - ty) + z1 * ty)


def as_grid_table(table: ArrayTypes, rows: int, cols: int) -> np.ndarray:
    """Convert a table to a float array of shape (rows, cols), rejecting ragged or mis-sized input."""
    if rows == 0 or cols == 0:
        raise EmptyInputError(ErrorMessages.EMPTY_INPUT.format(name="Grid"))
    row_list: List = list(table)
    if len(row_list) != rows or any(len(row) != cols for row in row_list):
        logger.error("Table dimensions do not match grids: expected %dx%d", rows, cols)
        raise DimensionMismatchError(f"Table dimensions do not match grids: expected {rows}x{cols}")
    return np.asarray(row_list, dtype=np.float64)
