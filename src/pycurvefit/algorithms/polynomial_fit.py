import logging
from typing import Union

import numpy as np
import sympy as sp

from pycurvefit.algorithms.linear_solver import solve_linear_system
from pycurvefit.core.exceptions import InvalidDomainError
from pycurvefit.core.typedefs import ArrayTypes, ScalarOrArray
from pycurvefit.validation.array_validator import require_points, validate_sample_arrays

logger = logging.getLogger(__name__)


def fit_polynomial(x: ArrayTypes, y: ArrayTypes, degree: int) -> np.ndarray:
    """
    Least-squares polynomial regression via the normal equations.
    Args:
        x: Sample abscissae (need not be sorted)
        y: Sample values
        degree: Polynomial degree, at least 0
    Returns:
        np.ndarray: Read-only coefficients, index k holding the coefficient of x**k
    Raises:
        InvalidDomainError: If degree is negative
        InsufficientPointsError: If there are fewer than degree + 1 samples
        SingularMatrixError: If the abscissae cannot determine the coefficients
    """
    x_array, y_array = validate_sample_arrays(x, y, "x", "y")
    if degree < 0:
        logger.error("Invalid polynomial degree: %d (must be >= 0)", degree)
        raise InvalidDomainError(f"Polynomial degree must be at least 0, got {degree}")
    require_points(len(x_array), degree + 1, f"polynomial fit of degree {degree}")
    logger.debug("Fitting degree-%d polynomial to %d points", degree, len(x_array))
    design = np.vander(x_array, degree + 1, increasing=True)
    coeffs = solve_linear_system(design.T @ design, design.T @ y_array)
    coeffs.setflags(write=False)
    logger.debug("Polynomial coefficients: %s", coeffs.tolist())
    return coeffs


def evaluate_polynomial(coeffs: ArrayTypes, x: ScalarOrArray) -> Union[float, np.ndarray]:
    """Evaluate ``sum(coeffs[k] * x**k)``; an empty coefficient sequence evaluates to 0."""
    scalar = np.ndim(x) == 0
    x_array = np.asarray(x, dtype=np.float64)
    result = np.zeros_like(x_array)
    for k, c in enumerate(coeffs):
        result = result + c * x_array ** k
    return float(result) if scalar else result


def polynomial_to_sympy(coeffs: ArrayTypes, symbol: sp.Symbol) -> sp.Expr:
    """Render polynomial coefficients as a sympy expression in ``symbol``."""
    return sp.Add(*[sp.Float(c) * symbol ** k for k, c in enumerate(coeffs)])
