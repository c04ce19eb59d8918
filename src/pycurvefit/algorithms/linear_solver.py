import logging

import numpy as np

from pycurvefit.core.exceptions import DimensionMismatchError, SingularMatrixError
from pycurvefit.core.typedefs import ArrayTypes
from pycurvefit.data.constants import ErrorMessages, NumericalConstants

logger = logging.getLogger(__name__)


def solve_linear_system(a: ArrayTypes, b: ArrayTypes,
                        tolerance: float = NumericalConstants.SINGULAR_PIVOT_TOLERANCE) -> np.ndarray:
    """
    Solve the dense square system ``a @ x = b``.

    Gaussian elimination with partial pivoting on an augmented copy, followed by
    back-substitution. Intended for the small normal-equation systems of the fitting
    routines (one row per fit parameter).
    Args:
        a: Square coefficient matrix of shape (n, n)
        b: Right-hand side of length n
        tolerance: Smallest pivot magnitude accepted
    Returns:
        np.ndarray: Solution vector of length n
    Raises:
        DimensionMismatchError: If ``a`` is not square or ``b`` does not match it
        SingularMatrixError: If a pivot magnitude falls below ``tolerance``
    """
    matrix = np.array(a, dtype=np.float64)
    rhs = np.array(b, dtype=np.float64)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        logger.error("Coefficient matrix must be square, got shape %s", matrix.shape)
        raise DimensionMismatchError(f"Coefficient matrix must be square, got shape {matrix.shape}")
    n = matrix.shape[0]
    if rhs.ndim != 1 or len(rhs) != n:
        logger.error("Right-hand side shape %s does not match %dx%d matrix", rhs.shape, n, n)
        raise DimensionMismatchError(f"Right-hand side of shape {rhs.shape} does not match a {n}x{n} matrix")
    logger.debug("Solving %dx%d linear system", n, n)
    augmented = np.column_stack((matrix, rhs))
    # Forward elimination
    for i in range(n):
        max_row = i + int(np.argmax(np.abs(augmented[i:, i])))
        if max_row != i:
            augmented[[i, max_row], i:] = augmented[[max_row, i], i:]
        pivot = augmented[i, i]
        if abs(pivot) < tolerance:
            logger.error("Singular matrix: pivot %.3e in column %d", pivot, i)
            raise SingularMatrixError(
                ErrorMessages.SINGULAR_MATRIX.format(pivot=abs(pivot), column=i, tolerance=tolerance),
                column=i)
        factors = augmented[i + 1:, i] / pivot
        augmented[i + 1:, i:] -= np.outer(factors, augmented[i, i:])
    # Back-substitution
    solution = np.zeros(n)
    for i in range(n - 1, -1, -1):
        solution[i] = (augmented[i, n] - augmented[i, i + 1:n] @ solution[i + 1:]) / augmented[i, i]
    logger.debug("Linear system solved: %s", solution.tolist())
    return solution
