import logging
from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np

from pycurvefit.algorithms.polynomial_fit import evaluate_polynomial
from pycurvefit.algorithms.rational_fit import RationalFitResult
from pycurvefit.algorithms.vector_fit import VectorFitResult, as_vector_samples, evaluate_vector
from pycurvefit.core.exceptions import DimensionMismatchError, LengthMismatchError
from pycurvefit.core.typedefs import ArrayTypes, PredictFunction
from pycurvefit.data.constants import ErrorMessages, NumericalConstants
from pycurvefit.validation.array_validator import as_float_array, validate_sample_arrays

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FitErrorMetrics:
    """
    Goodness-of-fit statistics of a model against reference samples.

    Attributes:
        r_squared: Coefficient of determination; 1.0 for constant reference data
        rmse: Root mean squared error
        mae: Mean absolute error
        max_error: Largest absolute residual
        mean_relative_error: Mean of |residual| / |y| in percent, over samples with |y| > 1e-10
        sse: Sum of squared residuals
    """
    r_squared: float
    rmse: float
    mae: float
    max_error: float
    mean_relative_error: float
    sse: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def __str__(self) -> str:
        return (f"R² = {self.r_squared:.6f}, RMSE = {self.rmse:.6f}, "
                f"MAE = {self.mae:.6f}, MaxError = {self.max_error:.6f}")


def _r_squared(sse: float, ss_total: float) -> float:
    if ss_total < NumericalConstants.SS_TOTAL_EPSILON:
        return 1.0
    return 1.0 - sse / ss_total


def compute_error_metrics(x: ArrayTypes, y: ArrayTypes, predict: PredictFunction) -> FitErrorMetrics:
    """
    Score a pointwise predictor against reference samples.
    Args:
        x: Reference abscissae
        y: Reference values
        predict: Callable mapping one abscissa to one predicted value
    Returns:
        FitErrorMetrics: R², RMSE, MAE, max error, mean relative error (%) and SSE
    """
    x_array, y_array = validate_sample_arrays(x, y, "x", "y")
    n = len(x_array)
    predicted = np.array([predict(xi) for xi in x_array], dtype=np.float64)
    errors = y_array - predicted
    abs_errors = np.abs(errors)
    sse = float(np.sum(errors ** 2))
    ss_total = float(np.sum((y_array - np.mean(y_array)) ** 2))
    valid = np.abs(y_array) > NumericalConstants.RELATIVE_ERROR_FLOOR
    if np.any(valid):
        mean_relative = float(np.mean(abs_errors[valid] / np.abs(y_array[valid]))) * NumericalConstants.PERCENT
    else:
        mean_relative = 0.0
    metrics = FitErrorMetrics(
        r_squared=_r_squared(sse, ss_total),
        rmse=float(np.sqrt(sse / n)),
        mae=float(np.sum(abs_errors) / n),
        max_error=float(np.max(abs_errors)),
        mean_relative_error=mean_relative,
        sse=sse,
    )
    logger.debug("Error metrics over %d samples: %s", n, metrics)
    return metrics


def polynomial_error_metrics(x: ArrayTypes, y: ArrayTypes, coeffs: ArrayTypes) -> FitErrorMetrics:
    """Score fitted polynomial coefficients against the samples."""
    return compute_error_metrics(x, y, lambda xi: evaluate_polynomial(coeffs, xi))


def rational_error_metrics(x: ArrayTypes, y: ArrayTypes, result: RationalFitResult) -> FitErrorMetrics:
    """Score a rational fit against the samples."""
    return compute_error_metrics(x, y, result.evaluate)


def vector_error_metrics(x: ArrayTypes, vectors: ArrayTypes, result: VectorFitResult) -> FitErrorMetrics:
    """
    Score a vector fit, aggregating errors over every component of every sample.

    RMSE and MAE are averaged over ``n_samples * dimension`` residuals, and R² uses a
    per-component mean for the total sum of squares. No relative error is computed
    for vector fits; ``mean_relative_error`` is always 0.
    """
    x_array = as_float_array(x, "x")
    samples = as_vector_samples(vectors)
    if len(x_array) != len(samples):
        logger.error("Array length mismatch: x(%d) != vectors(%d)", len(x_array), len(samples))
        raise LengthMismatchError(
            ErrorMessages.LENGTH_MISMATCH.format(first="x", first_len=len(x_array),
                                                 second="vectors", second_len=len(samples)),
            expected=len(x_array), actual=len(samples))
    if samples.shape[1] != result.dimension:
        logger.error("Sample dimension %d does not match fit dimension %d", samples.shape[1], result.dimension)
        raise DimensionMismatchError(
            f"Sample dimension {samples.shape[1]} does not match fit dimension {result.dimension}")
    predicted = np.vstack([evaluate_vector(result, xi) for xi in x_array])
    errors = samples - predicted
    abs_errors = np.abs(errors)
    count = errors.size
    sse = float(np.sum(errors ** 2))
    ss_total = float(np.sum((samples - samples.mean(axis=0)) ** 2))
    metrics = FitErrorMetrics(
        r_squared=_r_squared(sse, ss_total),
        rmse=float(np.sqrt(sse / count)),
        mae=float(np.sum(abs_errors) / count),
        max_error=float(np.max(abs_errors)),
        mean_relative_error=0.0,
        sse=sse,
    )
    logger.debug("Vector error metrics over %d samples x %d components: %s",
                 len(x_array), result.dimension, metrics)
    return metrics
