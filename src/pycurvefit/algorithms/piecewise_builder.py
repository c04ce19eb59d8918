import logging
from typing import List, Tuple

import numpy as np
import sympy as sp

from pycurvefit.core.exceptions import LengthMismatchError
from pycurvefit.core.typedefs import ArrayTypes
from pycurvefit.validation.array_validator import validate_sample_arrays

logger = logging.getLogger(__name__)


class PiecewiseBuilder:
    """Symbolic export of piecewise interpolants with constant bounds."""

    @staticmethod
    def build_from_data(x: ArrayTypes, y: ArrayTypes, symbol: sp.Symbol) -> sp.Piecewise:
        """
        Create the linear-interpolation piecewise function through the samples.
        Args:
            x: Ascending sample abscissae
            y: Sample values
            symbol: Independent variable of the expression
        Returns:
            sp.Piecewise: Constant below the first and above the last knot, linear in between
        """
        x_array, y_array = validate_sample_arrays(x, y, "x", "y")
        logger.debug("Building linear interpolation piecewise: %d data points", len(x_array))
        if len(x_array) == 1:
            return sp.Piecewise((sp.Float(y_array[0]), True))
        segments = []
        for i in range(len(x_array) - 1):
            slope = (y_array[i + 1] - y_array[i]) / (x_array[i + 1] - x_array[i])
            expr = sp.Float(y_array[i]) + sp.Float(slope) * (symbol - sp.Float(x_array[i]))
            segments.append(expr)
        return PiecewiseBuilder._assemble(x_array, y_array, segments, symbol)

    @staticmethod
    def build_from_segments(x: np.ndarray, y: np.ndarray, b: np.ndarray, c: np.ndarray,
                            d: np.ndarray, symbol: sp.Symbol) -> sp.Piecewise:
        """
        Create a piecewise cubic from per-segment coefficients.

        Segment ``i`` is ``y[i] + b[i]*dx + c[i]*dx**2 + d[i]*dx**3`` with
        ``dx = symbol - x[i]``.
        """
        if not (len(b) == len(c) == len(d) == len(x) - 1):
            logger.error("Coefficient count mismatch: %d knots, (%d, %d, %d) coefficients",
                         len(x), len(b), len(c), len(d))
            raise LengthMismatchError(
                f"Expected {len(x) - 1} coefficients per segment, got ({len(b)}, {len(c)}, {len(d)})",
                expected=len(x) - 1, actual=len(b))
        logger.debug("Building cubic piecewise with %d segments", len(b))
        segments = []
        for i in range(len(b)):
            dx = symbol - sp.Float(x[i])
            segments.append(sp.Float(y[i]) + sp.Float(b[i]) * dx + sp.Float(c[i]) * dx ** 2
                            + sp.Float(d[i]) * dx ** 3)
        return PiecewiseBuilder._assemble(x, y, segments, symbol)

    @staticmethod
    def _assemble(x: np.ndarray, y: np.ndarray, segments: List[sp.Expr], symbol: sp.Symbol) -> sp.Piecewise:
        conditions: List[Tuple[sp.Expr, sp.Basic]] = [(sp.Float(y[0]), symbol < float(x[0]))]
        for i, expr in enumerate(segments):
            conditions.append((expr, sp.And(symbol >= float(x[i]), symbol < float(x[i + 1]))))
        conditions.append((sp.Float(y[-1]), symbol >= float(x[-1])))
        logger.debug("Created piecewise function with %d total conditions", len(conditions))
        return sp.Piecewise(*conditions)
