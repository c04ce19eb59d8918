import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

import numpy as np
import sympy as sp

from pycurvefit.algorithms.akima import AkimaSpline
from pycurvefit.algorithms.error_metrics import FitErrorMetrics
from pycurvefit.algorithms.interpolation import batch_linear, bilinear, linear, log_linear, nearest
from pycurvefit.algorithms.piecewise_builder import PiecewiseBuilder
from pycurvefit.algorithms.polynomial_fit import evaluate_polynomial, polynomial_to_sympy
from pycurvefit.core.typedefs import ScalarOrArray

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FittedModel:
    """
    A model built from a YAML definition: its samples, fit result and quality metrics.

    For 1D methods ``x`` and ``y`` hold the samples. For ``vector`` fits ``y`` holds the
    sample vectors as an (n_samples, dimension) array. For ``bilinear`` tables ``x`` and
    ``y`` hold the grid axes and ``table`` the grid values.

    ``result`` depends on the method: polynomial coefficients, a RationalFitResult, a
    VectorFitResult, an AkimaSpline, or None for the table interpolators. ``metrics``
    is only set for least-squares fits.
    """
    name: str
    method: str
    x: np.ndarray
    y: np.ndarray
    result: Any = None
    metrics: Optional[FitErrorMetrics] = None
    table: Optional[np.ndarray] = None

    def __call__(self, x: ScalarOrArray, y: Optional[ScalarOrArray] = None) -> Union[float, np.ndarray]:
        return self.evaluate(x, y)

    def evaluate(self, x: ScalarOrArray, y: Optional[ScalarOrArray] = None) -> Union[float, np.ndarray]:
        """
        Evaluate the model at x (and y for bilinear tables).

        Scalars give a float (or a vector for ``vector`` fits); arrays give one result
        per element in the shape of the query, with a trailing component axis for
        ``vector`` fits.
        """
        if self.method == "bilinear":
            if y is None:
                logger.error("Bilinear model '%s' evaluated without a y coordinate", self.name)
                raise ValueError(f"Model '{self.name}' is bilinear and needs both x and y")
            return self._evaluate_grid(x, y)
        if y is not None:
            logger.error("Model '%s' (%s) does not take a y coordinate", self.name, self.method)
            raise ValueError(f"Model '{self.name}' ({self.method}) takes a single abscissa")
        if self.method == "linear":
            if np.ndim(x) == 0:
                return linear(self.x, self.y, float(x))
            return batch_linear(self.x, self.y, np.ravel(x)).reshape(np.shape(x))
        if self.method == "log_linear":
            return self._map_scalar(lambda xi: log_linear(self.x, self.y, xi), x)
        if self.method == "nearest":
            return self._map_scalar(lambda xi: nearest(self.x, self.y, xi), x)
        if self.method == "polynomial":
            return evaluate_polynomial(self.result, x)
        if self.method in ("akima", "rational"):
            return self.result.evaluate(x)
        if self.method == "vector":
            if np.ndim(x) == 0:
                return self.result.evaluate(float(x))
            rows = np.vstack([self.result.evaluate(xi) for xi in np.ravel(np.asarray(x, dtype=np.float64))])
            return rows.reshape(np.shape(x) + (self.result.dimension,))
        logger.error("Unknown model method: %s", self.method)
        raise ValueError(f"Unknown model method: {self.method}")

    def to_sympy(self, symbol: sp.Symbol) -> Union[sp.Expr, sp.Piecewise, sp.Matrix]:
        """
        Render the model as a sympy expression in ``symbol``.
        Raises:
            ValueError: For nearest, log-linear and bilinear models, which have no
                single-variable closed form here
        """
        if self.method == "linear":
            return PiecewiseBuilder.build_from_data(self.x, self.y, symbol)
        if self.method == "polynomial":
            return polynomial_to_sympy(self.result, symbol)
        if isinstance(self.result, AkimaSpline):
            return self.result.to_piecewise(symbol)
        if self.method in ("rational", "vector"):
            return self.result.to_sympy(symbol)
        logger.error("Symbolic export is not available for method '%s'", self.method)
        raise ValueError(f"Symbolic export is not available for method '{self.method}'")

    def _evaluate_grid(self, x: ScalarOrArray, y: ScalarOrArray) -> Union[float, np.ndarray]:
        if np.ndim(x) == 0 and np.ndim(y) == 0:
            return bilinear(self.x, self.y, self.table, float(x), float(y))
        xs, ys = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
        values = [bilinear(self.x, self.y, self.table, xi, yi) for xi, yi in zip(xs.ravel(), ys.ravel())]
        return np.array(values, dtype=np.float64).reshape(xs.shape)

    @staticmethod
    def _map_scalar(func, x: ScalarOrArray) -> Union[float, np.ndarray]:
        if np.ndim(x) == 0:
            return func(float(x))
        x_array = np.asarray(x, dtype=np.float64)
        return np.array([func(xi) for xi in x_array.ravel()], dtype=np.float64).reshape(x_array.shape)
