"""
Rational function fitting.

Fits ``y ≈ P(x) / Q(x)`` by iteratively reweighted linear least squares. The model is
non-linear in the denominator coefficients, so each pass linearizes it around the
denominator of the previous pass (Sanathanan-Koerner iteration):

    y * Q(x) / q_prev(x) ≈ P(x) / q_prev(x)

The constant term of Q is fixed at 1, which removes the trivial all-zero solution.
"""

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np
import sympy as sp

from pycurvefit.algorithms.linear_solver import solve_linear_system
from pycurvefit.algorithms.polynomial_fit import evaluate_polynomial, polynomial_to_sympy
from pycurvefit.core.exceptions import InvalidDomainError, NearSingularDenominatorError
from pycurvefit.core.typedefs import ArrayTypes, ScalarOrArray
from pycurvefit.data.constants import ErrorMessages, NumericalConstants
from pycurvefit.validation.array_validator import require_points, validate_sample_arrays

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RationalFitResult:
    """
    Result of a rational fit.

    Attributes:
        numerator: Numerator coefficients, low to high degree
        denominator: Denominator coefficients, low to high degree; ``denominator[0] == 1``
        iterations: Number of refinement passes that were run
        converged: Whether the SSE change fell below the tolerance before the iteration cap
    """
    numerator: np.ndarray
    denominator: np.ndarray
    iterations: int = 0
    converged: bool = False

    @property
    def numerator_degree(self) -> int:
        return len(self.numerator) - 1

    @property
    def denominator_degree(self) -> int:
        return len(self.denominator) - 1

    def evaluate(self, x: ScalarOrArray) -> Union[float, np.ndarray]:
        return evaluate_rational(self.numerator, self.denominator, x)

    def __call__(self, x: ScalarOrArray) -> Union[float, np.ndarray]:
        return self.evaluate(x)

    def to_sympy(self, symbol: sp.Symbol) -> sp.Expr:
        return polynomial_to_sympy(self.numerator, symbol) / polynomial_to_sympy(self.denominator, symbol)


def evaluate_rational(num_coeffs: ArrayTypes, den_coeffs: ArrayTypes,
                      x: ScalarOrArray) -> Union[float, np.ndarray]:
    """
    Evaluate ``P(x) / Q(x)``.
    Raises:
        NearSingularDenominatorError: If ``|Q(x)|`` is below 1e-10 at any query point
    """
    num = evaluate_polynomial(num_coeffs, x)
    den = evaluate_polynomial(den_coeffs, x)
    den_abs = np.abs(den)
    if np.any(den_abs < NumericalConstants.DENOMINATOR_EPSILON):
        bad = int(np.argmin(den_abs)) if np.ndim(den) else 0
        bad_x = np.ravel(np.asarray(x, dtype=np.float64))[bad]
        logger.error("Denominator close to zero at x=%g", bad_x)
        raise NearSingularDenominatorError(
            ErrorMessages.NEAR_SINGULAR_DENOMINATOR.format(value=float(np.ravel(den)[bad]), x=bad_x))
    return num / den


def fit_rational(x: ArrayTypes, y: ArrayTypes, num_degree: int, den_degree: int,
                 max_iterations: int = NumericalConstants.DEFAULT_MAX_ITERATIONS,
                 tolerance: float = NumericalConstants.DEFAULT_RATIONAL_TOLERANCE) -> RationalFitResult:
    """
    Fit a rational function with the given numerator and denominator degrees.
    Args:
        x: Sample abscissae
        y: Sample values
        num_degree: Degree of the numerator polynomial P
        den_degree: Degree of the denominator polynomial Q
        max_iterations: Upper bound on refinement passes (default: 100)
        tolerance: Stop once the SSE changes by less than this between passes (default: 1e-6)
    Returns:
        RationalFitResult: Numerator and denominator coefficients
    Raises:
        InvalidDomainError: For negative degrees or a non-positive iteration cap
        InsufficientPointsError: If there are fewer than num_degree + den_degree + 1 samples
        SingularMatrixError: If a pass produces a rank-deficient normal-equation matrix
    """
    x_array, y_array = validate_sample_arrays(x, y, "x", "y")
    if num_degree < 0 or den_degree < 0:
        logger.error("Invalid rational degrees: numerator=%d, denominator=%d", num_degree, den_degree)
        raise InvalidDomainError(f"Rational degrees must be at least 0, got ({num_degree}, {den_degree})")
    if max_iterations < 1:
        logger.error("Invalid iteration cap: %d", max_iterations)
        raise InvalidDomainError(f"max_iterations must be at least 1, got {max_iterations}")
    total_params = num_degree + den_degree + 1
    require_points(len(x_array), total_params, f"rational fit of degree ({num_degree}, {den_degree})")
    logger.info("Starting rational fit: numerator degree=%d, denominator degree=%d, %d points",
                num_degree, den_degree, len(x_array))
    num_powers = np.vander(x_array, num_degree + 1, increasing=True)
    den_powers = np.vander(x_array, den_degree + 1, increasing=True)[:, 1:]
    num_coeffs = np.zeros(num_degree + 1)
    den_coeffs = np.zeros(den_degree + 1)
    den_coeffs[0] = 1.0
    prev_error = np.inf
    converged = False
    iterations = 0
    for iteration in range(max_iterations):
        iterations = iteration + 1
        q = evaluate_polynomial(den_coeffs, x_array)
        q = np.where(np.abs(q) < NumericalConstants.DENOMINATOR_EPSILON,
                     NumericalConstants.DENOMINATOR_EPSILON, q)
        design = np.hstack((num_powers, -y_array[:, None] * den_powers)) / q[:, None]
        target = y_array / q
        params = solve_linear_system(design.T @ design, design.T @ target)
        num_coeffs = params[:num_degree + 1]
        den_coeffs = np.concatenate(([1.0], params[num_degree + 1:]))
        current_error = _sum_squared_error(x_array, y_array, num_coeffs, den_coeffs)
        logger.debug("Rational fit pass %d: SSE=%.6e", iterations, current_error)
        if abs(prev_error - current_error) < tolerance:
            converged = True
            break
        prev_error = current_error
    if converged:
        logger.info("Rational fit converged after %d passes", iterations)
    else:
        logger.warning("Rational fit reached the iteration cap (%d) without converging", max_iterations)
    num_coeffs.setflags(write=False)
    den_coeffs.setflags(write=False)
    return RationalFitResult(numerator=num_coeffs, denominator=den_coeffs,
                             iterations=iterations, converged=converged)


def _sum_squared_error(x: np.ndarray, y: np.ndarray, num_coeffs: np.ndarray, den_coeffs: np.ndarray) -> float:
    """SSE of the rational function on the samples; infinite if the denominator vanishes at a sample."""
    try:
        predicted = evaluate_rational(num_coeffs, den_coeffs, x)
    except NearSingularDenominatorError:
        logger.debug("Denominator vanishes at a sample; treating SSE as infinite for this pass")
        return float(np.inf)
    return float(np.sum((y - predicted) ** 2))
