import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
import sympy as sp

from pycurvefit.algorithms.polynomial_fit import evaluate_polynomial, fit_polynomial, polynomial_to_sympy
from pycurvefit.core.exceptions import DimensionMismatchError, EmptyInputError, LengthMismatchError
from pycurvefit.core.typedefs import ArrayTypes
from pycurvefit.data.constants import ErrorMessages
from pycurvefit.validation.array_validator import as_float_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VectorFitResult:
    """
    Per-component polynomial fit of vector-valued samples.

    Attributes:
        component_coeffs: One coefficient array per vector component, low to high degree
        degree: Polynomial degree shared by every component
    """
    component_coeffs: Tuple[np.ndarray, ...]
    degree: int

    @property
    def dimension(self) -> int:
        return len(self.component_coeffs)

    def evaluate(self, x: float) -> np.ndarray:
        return evaluate_vector(self, x)

    def __call__(self, x: float) -> np.ndarray:
        return self.evaluate(x)

    def to_sympy(self, symbol: sp.Symbol) -> sp.Matrix:
        return sp.Matrix([polynomial_to_sympy(coeffs, symbol) for coeffs in self.component_coeffs])


def as_vector_samples(vectors: ArrayTypes) -> np.ndarray:
    """Convert a sequence of equally sized vectors to an (n_samples, dimension) float array."""
    rows = [as_float_array(v, f"vectors[{i}]") for i, v in enumerate(vectors)]
    if len(rows) == 0:
        logger.error("No vector samples provided")
        raise EmptyInputError(ErrorMessages.EMPTY_INPUT.format(name="Vector samples"))
    dimension = len(rows[0])
    if dimension == 0:
        logger.error("Vector samples have zero dimension")
        raise EmptyInputError(ErrorMessages.EMPTY_INPUT.format(name="Vector dimension"))
    for i, row in enumerate(rows):
        if len(row) != dimension:
            logger.error("Vector %d has dimension %d, expected %d", i, len(row), dimension)
            raise DimensionMismatchError(
                f"All vectors must have the same dimension: vectors[{i}] has {len(row)}, expected {dimension}")
    return np.vstack(rows)


def fit_vector(x: ArrayTypes, vectors: ArrayTypes, degree: int) -> VectorFitResult:
    """
    Fit a polynomial of the given degree to every component of vector-valued samples.
    Args:
        x: Sample abscissae, one per vector
        vectors: Sample vectors, all of the same dimension
        degree: Polynomial degree used for every component
    Returns:
        VectorFitResult: One coefficient array per component
    Raises:
        EmptyInputError: If there are no samples or the vectors are empty
        LengthMismatchError: If x and vectors differ in length
        DimensionMismatchError: If the vectors differ in dimension
    """
    x_array = as_float_array(x, "x")
    samples = as_vector_samples(vectors)
    if len(x_array) != len(samples):
        logger.error("Array length mismatch: x(%d) != vectors(%d)", len(x_array), len(samples))
        raise LengthMismatchError(
            ErrorMessages.LENGTH_MISMATCH.format(first="x", first_len=len(x_array),
                                                 second="vectors", second_len=len(samples)),
            expected=len(x_array), actual=len(samples))
    dimension = samples.shape[1]
    logger.info("Fitting %d-dimensional vector samples with degree-%d polynomials", dimension, degree)
    component_coeffs = tuple(fit_polynomial(x_array, samples[:, d], degree) for d in range(dimension))
    return VectorFitResult(component_coeffs=component_coeffs, degree=degree)


def evaluate_vector(result: VectorFitResult, x: float) -> np.ndarray:
    """Evaluate every component polynomial at x."""
    return np.array([evaluate_polynomial(coeffs, x) for coeffs in result.component_coeffs], dtype=np.float64)
