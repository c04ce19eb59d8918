"""Unit tests for the dense linear solver."""

import pytest
import numpy as np
from pycurvefit.algorithms.linear_solver import solve_linear_system
from pycurvefit.core.exceptions import CurveFitError, DimensionMismatchError, SingularMatrixError


class TestSolveLinearSystem:
    """Test cases for solve_linear_system."""
    def test_solves_well_conditioned_system(self):
        """Test a small well-conditioned system against numpy."""
        a = np.array([[4.0, 1.0, 2.0], [1.0, 5.0, 1.0], [2.0, 1.0, 6.0]])
        b = np.array([7.0, 7.0, 9.0])
        result = solve_linear_system(a, b)
        np.testing.assert_allclose(result, np.linalg.solve(a, b))
        np.testing.assert_allclose(a @ result, b)

    def test_requires_pivoting(self):
        """Test a system with a zero leading entry that needs a row swap."""
        a = [[0.0, 1.0], [1.0, 0.0]]
        b = [2.0, 3.0]
        result = solve_linear_system(a, b)
        np.testing.assert_allclose(result, [3.0, 2.0])

    def test_inputs_not_mutated(self):
        """Test that the caller's arrays are left untouched."""
        a = np.array([[0.0, 2.0], [3.0, 1.0]])
        b = np.array([4.0, 5.0])
        a_copy, b_copy = a.copy(), b.copy()
        solve_linear_system(a, b)
        np.testing.assert_array_equal(a, a_copy)
        np.testing.assert_array_equal(b, b_copy)

    def test_singular_matrix(self):
        """Test that linearly dependent rows are detected."""
        a = [[1.0, 2.0], [2.0, 4.0]]
        with pytest.raises(SingularMatrixError, match="singular") as exc_info:
            solve_linear_system(a, [1.0, 2.0])
        assert exc_info.value.column == 1

    def test_last_pivot_is_checked(self):
        """Test that a vanishing final pivot is reported."""
        a = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1e-14]]
        with pytest.raises(SingularMatrixError) as exc_info:
            solve_linear_system(a, [1.0, 1.0, 1.0])
        assert exc_info.value.column == 2

    def test_zero_matrix(self):
        """Test that an all-zero matrix fails on the first pivot."""
        with pytest.raises(SingularMatrixError) as exc_info:
            solve_linear_system(np.zeros((3, 3)), np.ones(3))
        assert exc_info.value.column == 0

    def test_singular_is_curve_fit_error(self):
        """Test that singular errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            solve_linear_system([[0.0]], [1.0])
        assert issubclass(SingularMatrixError, CurveFitError)

    def test_non_square_matrix(self):
        """Test that non-square matrices are rejected."""
        with pytest.raises(DimensionMismatchError, match="square"):
            solve_linear_system([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], [1.0, 2.0])

    def test_rhs_length_mismatch(self):
        """Test that a mis-sized right-hand side is rejected."""
        with pytest.raises(DimensionMismatchError):
            solve_linear_system(np.eye(3), [1.0, 2.0])

    def test_identity(self):
        """Test that the identity returns the right-hand side."""
        b = np.array([1.5, -2.0, 3.25, 0.0])
        np.testing.assert_allclose(solve_linear_system(np.eye(4), b), b)
