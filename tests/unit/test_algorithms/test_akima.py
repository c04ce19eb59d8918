"""Unit tests for Akima spline interpolation."""

import pytest
import numpy as np
import sympy as sp
from pycurvefit.algorithms.akima import AkimaSpline, akima
from pycurvefit.core.exceptions import InsufficientPointsError, InvalidDomainError, LengthMismatchError


class TestAkimaConstruction:
    """Test cases for building an Akima spline."""
    def test_requires_five_points(self):
        """Test that fewer than five samples are rejected."""
        with pytest.raises(InsufficientPointsError) as exc_info:
            AkimaSpline([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0])
        assert exc_info.value.required == 5
        assert exc_info.value.available == 4

    def test_length_mismatch(self):
        """Test that differing lengths are rejected."""
        with pytest.raises(LengthMismatchError):
            AkimaSpline([0.0, 1.0, 2.0, 3.0, 4.0], [0.0, 1.0, 2.0, 3.0])

    def test_coefficients_are_read_only(self):
        """Test that the precomputed state cannot be modified."""
        spline = AkimaSpline([0.0, 1.0, 2.0, 3.0, 4.0], [0.0, 1.0, 0.0, 1.0, 0.0])
        b, c, d = spline.coefficients
        assert len(b) == len(c) == len(d) == 4
        for arr in (spline.x, spline.y, b, c, d):
            assert not arr.flags.writeable
        assert len(spline) == 5

    def test_input_not_aliased(self):
        """Test that changing the caller's array does not change the spline."""
        x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
        y = np.array([0.0, 1.0, 4.0, 9.0, 16.0])
        spline = AkimaSpline(x, y)
        y[2] = 100.0
        assert spline(2.0) == 4.0


class TestAkimaWeights:
    """Test cases for the weight table and knot derivative rules."""
    def test_boundary_cells_absent(self):
        """Test that the padding cells of the weight table are absent."""
        slope = np.array([1.0, 2.0, 4.0, 8.0, 16.0])
        weight = AkimaSpline._compute_weights(slope)
        assert len(weight) == len(slope) + 5
        assert weight[0] is None and weight[1] is None
        assert weight[-1] is None and weight[-2] is None

    def test_degenerate_neighbourhood_absent(self):
        """Test that equal neighbouring slope magnitudes give an absent weight."""
        slope = np.array([1.0, 1.0, 1.0, 1.0, 1.0])
        weight = AkimaSpline._compute_weights(slope)
        assert all(w is None for w in weight)

    def test_interior_weight_value(self):
        """Test an interior weight against its closed form."""
        slope = np.array([1.0, 2.0, 4.0, 8.0, 16.0])
        weight = AkimaSpline._compute_weights(slope)
        # Segment 2: s0=2, s1=4, s2=8 -> (2 + 4) / (4 + 8)
        assert np.isclose(weight[4], 0.5)

    def test_end_knots_use_only_slope(self):
        """Test that the end knots take the single adjacent slope."""
        slope = np.array([1.0, 2.0, 3.0])
        weight = [None] * 8
        assert AkimaSpline._knot_derivative(slope, weight, 0) == 1.0
        assert AkimaSpline._knot_derivative(slope, weight, 3) == 3.0

    def test_absent_weights(self):
        """Test the fallbacks for absent weights."""
        slope = np.array([1.0, 2.0, 3.0])
        weight = [None] * 8
        # Both absent: the left slope wins the tie
        assert AkimaSpline._knot_derivative(slope, weight, 1) == 1.0
        weight[4] = 2.0
        # Only the right weight present: the absent left weight dominates
        assert AkimaSpline._knot_derivative(slope, weight, 1) == 1.0
        weight[3], weight[4] = 2.0, None
        # Only the left weight present: the absent right weight dominates
        assert AkimaSpline._knot_derivative(slope, weight, 1) == 2.0

    def test_equal_weights(self):
        """Test the selection rule for equal weights."""
        slope = np.array([1.0, 2.0, 3.0])
        weight = [None] * 8
        weight[3], weight[4] = 0.5, 0.5
        assert AkimaSpline._knot_derivative(slope, weight, 1) == 2.0
        weight[3], weight[4] = 2e5, 2e5
        assert AkimaSpline._knot_derivative(slope, weight, 1) == 1.0

    def test_weighted_average(self):
        """Test the weighted average of the neighbouring slopes."""
        slope = np.array([1.0, 2.0, 3.0])
        weight = [None] * 8
        weight[3], weight[4] = 1.0, 3.0
        assert np.isclose(AkimaSpline._knot_derivative(slope, weight, 1), 1.75)


class TestAkimaEvaluation:
    """Test cases for evaluating an Akima spline."""
    @pytest.fixture
    def parabola(self):
        """Spline through y = x^2 on x = 0..6."""
        x = np.arange(7, dtype=float)
        return AkimaSpline(x, x ** 2)

    def test_knots_exact(self, parabola):
        """Test that every knot reproduces its sample."""
        for xi, yi in zip(parabola.x, parabola.y):
            assert parabola(xi) == yi

    def test_clamped(self, parabola):
        """Test clamping at both ends."""
        assert parabola(-1.0) == 0.0
        assert parabola(10.0) == 36.0

    def test_continuity_at_knots(self, parabola):
        """Test that each segment ends at the next knot value."""
        for i in range(1, len(parabola) - 1):
            left = parabola(parabola.x[i] - 1e-9)
            assert np.isclose(left, parabola.y[i], atol=1e-6)

    def test_monotone_data_stays_monotone(self, parabola):
        """Test that monotone data gives a monotone interpolant."""
        values = parabola(np.linspace(0.0, 6.0, 601))
        assert np.all(np.diff(values) >= -1e-12)

    def test_linear_data_reproduced(self):
        """Test that samples of a line are interpolated by that line."""
        x = np.array([0.0, 1.0, 2.5, 3.0, 4.0, 6.0])
        spline = AkimaSpline(x, 3.0 * x - 2.0)
        query = np.linspace(0.0, 6.0, 50)
        np.testing.assert_allclose(spline(query), 3.0 * query - 2.0, atol=1e-12)

    def test_flat_run_stays_flat(self):
        """Test that there is no overshoot inside a flat run before a step."""
        x = np.arange(8, dtype=float)
        y = np.array([0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 4.0])
        spline = AkimaSpline(x, y)
        np.testing.assert_array_equal(spline(np.linspace(0.0, 2.0, 21)), 0.0)

    def test_array_and_scalar(self, parabola):
        """Test that arrays give arrays and scalars give floats."""
        result = parabola.evaluate([0.5, 1.5, 2.5])
        assert isinstance(result, np.ndarray)
        assert result.shape == (3,)
        assert isinstance(parabola.evaluate(0.5), float)

    def test_convenience_function(self, parabola):
        """Test that akima() matches a spline built once."""
        x = np.arange(7, dtype=float)
        assert np.isclose(akima(x, x ** 2, 2.3), parabola(2.3))


class TestAkimaSymbolicExport:
    """Test cases for exporting an Akima spline to sympy."""
    def test_piecewise_matches_numeric(self, x_symbol):
        """Test that the Piecewise agrees with numeric evaluation."""
        x = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
        y = np.array([0.0, 2.0, 1.0, 3.0, 2.0, 4.0])
        spline = AkimaSpline(x, y)
        expr = spline.to_piecewise(x_symbol)
        assert isinstance(expr, sp.Piecewise)
        for xi in [-1.0, 0.0, 0.7, 2.2, 3.9, 5.0, 7.0]:
            assert np.isclose(float(expr.subs(x_symbol, xi)), spline(xi))


class TestAkimaQueryHandling:
    """Test cases for query validation and result shapes."""
    @pytest.fixture
    def spline(self):
        """Spline through y = x^2 on x = 0..5."""
        x = np.arange(6, dtype=float)
        return AkimaSpline(x, x ** 2)

    def test_nan_query_rejected(self, spline):
        """Test that a NaN query raises instead of indexing past the table."""
        with pytest.raises(InvalidDomainError, match="finite"):
            spline(np.nan)
        with pytest.raises(InvalidDomainError):
            spline.evaluate([1.0, np.nan])

    def test_two_dimensional_query_keeps_shape(self, spline):
        """Test that a 2-D query returns a result of the same shape."""
        queries = np.array([[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]])
        result = spline.evaluate(queries)
        assert result.shape == (2, 3)
        np.testing.assert_array_equal(result, queries ** 2)
