"""Unit tests for array validation functions."""

import pytest
import numpy as np
from pycurvefit.core.exceptions import EmptyInputError, InsufficientPointsError, InvalidDomainError, LengthMismatchError
from pycurvefit.validation.array_validator import (
    as_float_array, validate_sample_arrays, require_points, require_finite, is_monotonic
)


class TestAsFloatArray:
    """Test cases for as_float_array."""
    def test_converts_lists(self):
        """Test that integer lists become float64 arrays."""
        arr = as_float_array([1, 2, 3], "values")
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_rejects_two_dimensional(self):
        """Test that nested sequences are rejected."""
        with pytest.raises(ValueError, match="one-dimensional"):
            as_float_array([[1.0, 2.0], [3.0, 4.0]], "values")


class TestValidateSampleArrays:
    """Test cases for validate_sample_arrays."""
    def test_valid_pair(self):
        """Test that matching arrays pass through."""
        x, y = validate_sample_arrays([0, 1, 2], (3, 4, 5))
        assert len(x) == len(y) == 3

    def test_length_mismatch(self):
        """Test that differing lengths report both counts."""
        with pytest.raises(LengthMismatchError, match="mismatch") as exc_info:
            validate_sample_arrays([0.0, 1.0], [0.0], "freq", "gain")
        assert "freq" in str(exc_info.value)
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    def test_empty(self):
        """Test that empty input is rejected."""
        with pytest.raises(EmptyInputError, match="empty"):
            validate_sample_arrays([], [])

    def test_errors_are_value_errors(self):
        """Test that validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_sample_arrays([], [])


class TestRequirePoints:
    """Test cases for require_points."""
    def test_enough_points(self):
        """Test that sufficient counts pass silently."""
        require_points(5, 5, "Akima spline")

    def test_too_few_points(self):
        """Test that insufficient counts are reported."""
        with pytest.raises(InsufficientPointsError, match="Akima spline") as exc_info:
            require_points(3, 5, "Akima spline")
        assert exc_info.value.required == 5
        assert exc_info.value.available == 3


class TestIsMonotonic:
    """Test cases for is_monotonic."""
    def test_strictly_increasing(self):
        """Test strictly increasing array validation."""
        assert is_monotonic(np.array([1, 2, 3, 4, 5]), mode="strictly_increasing") is True

    def test_not_strictly_increasing(self):
        """Test arrays that are not strictly increasing."""
        array_equal = np.array([1.0, 2.0, 2.0, 3.0])
        assert is_monotonic(array_equal, mode="strictly_increasing", raise_error=False) is False
        with pytest.raises(ValueError, match="not strictly increasing"):
            is_monotonic(array_equal, "x", mode="strictly_increasing", raise_error=True)

    def test_non_decreasing_allows_ties(self):
        """Test that ties pass the non-decreasing check."""
        assert is_monotonic(np.array([1.0, 1.0, 2.0]), mode="non_decreasing") is True

    def test_decreasing_modes(self):
        """Test the decreasing modes."""
        assert is_monotonic(np.array([3.0, 2.0, 1.0]), mode="strictly_decreasing") is True
        assert is_monotonic(np.array([3.0, 3.0, 1.0]), mode="non_increasing") is True
        assert is_monotonic(np.array([3.0, 3.0, 1.0]), mode="strictly_decreasing", raise_error=False) is False

    def test_single_and_empty(self):
        """Test trivially monotonic arrays."""
        assert is_monotonic(np.array([42.0]), mode="strictly_increasing") is True
        assert is_monotonic(np.array([]), mode="strictly_increasing") is True


class TestRequireFinite:
    """Test cases for require_finite."""
    def test_finite_value(self):
        """Test that finite values come back as floats."""
        assert require_finite(np.int64(3), "x") == 3.0

    @pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
    def test_non_finite_value(self, value):
        """Test that NaN and infinities are rejected."""
        with pytest.raises(InvalidDomainError, match="x must be finite"):
            require_finite(value, "x")
