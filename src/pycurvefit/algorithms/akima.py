"""
Akima spline interpolation.

The Akima spline is a piecewise cubic whose knot derivatives are weighted averages
of the neighbouring secant slopes. Compared to a classic cubic spline it does not
overshoot near abrupt changes of slope, which makes it a good fit for measurement
tables with sudden-but-real transitions such as calibration curves.
"""

import logging
from typing import List, Optional, Union

import numpy as np
import sympy as sp

from pycurvefit.algorithms.piecewise_builder import PiecewiseBuilder
from pycurvefit.algorithms.search import find_insertion_point
from pycurvefit.core.typedefs import ArrayTypes, ScalarOrArray
from pycurvefit.data.constants import NumericalConstants
from pycurvefit.validation.array_validator import require_finite, require_points, validate_sample_arrays

logger = logging.getLogger(__name__)


class AkimaSpline:
    """
    Immutable Akima spline through a set of samples.

    The per-segment coefficients are computed once at construction; every query
    evaluates ``y[i] + b[i]*dx + c[i]*dx**2 + d[i]*dx**3`` on the segment containing
    the query. Queries at or beyond either end return the end value.

    Examples:
        >>> spline = AkimaSpline([0, 1, 2, 3, 4, 5], [0, 0, 1, 1, 1, 0])
        >>> spline(2.5)
    """

    def __init__(self, x: ArrayTypes, y: ArrayTypes):
        x_array, y_array = validate_sample_arrays(x, y, "x", "y")
        require_points(len(x_array), NumericalConstants.AKIMA_MIN_POINTS, "Akima spline")
        n = len(x_array)
        logger.debug("Building Akima spline over %d points, x∈[%g, %g]", n, x_array[0], x_array[-1])
        slope = np.diff(y_array) / np.diff(x_array)
        weight = self._compute_weights(slope)
        deriv = np.array([self._knot_derivative(slope, weight, i) for i in range(n)])
        h = np.diff(x_array)
        p = deriv[:-1]
        q = deriv[1:]
        self._x = x_array.copy()
        self._y = y_array.copy()
        self._b = p.copy()
        self._c = (3 * slope - 2 * p - q) / h
        self._d = (p + q - 2 * slope) / (h * h)
        for arr in (self._x, self._y, self._b, self._c, self._d):
            arr.setflags(write=False)
        logger.debug("Akima spline built with %d segments", n - 1)

    @staticmethod
    def _compute_weights(slope: np.ndarray) -> List[Optional[float]]:
        """
        Weight table of ``n + 4`` cells; segment ``i`` stores its weight at ``i + 2``.

        ``None`` marks an absent weight: the two cells on either side of the table and
        every segment whose neighbourhood is degenerate. An absent weight acts as an
        infinitely large one when the knot derivatives are averaged.
        """
        n = len(slope) + 1
        weight: List[Optional[float]] = [None] * (n + 4)
        abs_slope = np.abs(slope)
        for i in range(n - 1):
            s1 = abs_slope[i]
            s0 = abs_slope[i - 1] if i > 0 else s1
            s2 = abs_slope[i + 1] if i < n - 2 else s1
            s3 = abs_slope[i + 2] if i < n - 3 else s2
            if s1 == s0 or s2 == s3 or s1 + s2 == 0:
                continue
            weight[i + 2] = float((s0 + s1) / (s1 + s2))
        return weight

    @staticmethod
    def _knot_derivative(slope: np.ndarray, weight: List[Optional[float]], i: int) -> float:
        """Weighted average of the secant slopes on either side of knot ``i``."""
        left = slope[i - 1] if i > 0 else None
        right = slope[i] if i < len(slope) else None
        if left is None:
            return float(right)
        if right is None:
            return float(left)
        w1, w2 = weight[i + 2], weight[i + 3]
        if w1 is None:
            # Two absent weights compare equal; the left one wins the tie
            return float(left)
        if w2 is None:
            return float(right)
        if abs(w2 - w1) < NumericalConstants.AKIMA_WEIGHT_EPSILON:
            return float(left if w1 > NumericalConstants.AKIMA_LARGE_WEIGHT else right)
        return float((w1 * left + w2 * right) / (w1 + w2))

    @property
    def x(self) -> np.ndarray:
        return self._x

    @property
    def y(self) -> np.ndarray:
        return self._y

    @property
    def coefficients(self):
        """Per-segment ``(b, c, d)`` coefficient arrays, each of length ``n - 1``."""
        return self._b, self._c, self._d

    def __len__(self) -> int:
        return len(self._x)

    def __call__(self, x: ScalarOrArray) -> Union[float, np.ndarray]:
        return self.evaluate(x)

    def evaluate(self, x: ScalarOrArray) -> Union[float, np.ndarray]:
        """Evaluate the spline at a scalar or at every element of an array, keeping its shape."""
        if np.ndim(x) == 0:
            return self._evaluate_scalar(float(x))
        x_array = np.asarray(x, dtype=np.float64)
        values = [self._evaluate_scalar(xi) for xi in x_array.ravel()]
        return np.array(values, dtype=np.float64).reshape(x_array.shape)

    def _evaluate_scalar(self, xi: float) -> float:
        xi = require_finite(xi, "x")
        if xi <= self._x[0]:
            return float(self._y[0])
        if xi >= self._x[-1]:
            return float(self._y[-1])
        i = find_insertion_point(self._x, xi) - 1
        dx = xi - self._x[i]
        return float(self._y[i] + self._b[i] * dx + self._c[i] * dx * dx + self._d[i] * dx * dx * dx)

    def to_piecewise(self, symbol: sp.Symbol) -> sp.Piecewise:
        """Export the spline as a ``sympy.Piecewise`` with constant bounds."""
        return PiecewiseBuilder.build_from_segments(self._x, self._y, self._b, self._c, self._d, symbol)


def akima(x: ArrayTypes, y: ArrayTypes, xi: ScalarOrArray) -> Union[float, np.ndarray]:
    """Build an Akima spline through (x, y) and evaluate it at xi."""
    return AkimaSpline(x, y).evaluate(xi)
