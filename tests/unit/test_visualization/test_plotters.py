"""Tests for fit visualization."""

import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest
from pycurvefit.algorithms.error_metrics import polynomial_error_metrics
from pycurvefit.algorithms.polynomial_fit import fit_polynomial
from pycurvefit.algorithms.vector_fit import fit_vector
from pycurvefit.core.fitted_model import FittedModel
from pycurvefit.visualization.plotters import FitVisualizer


class TestFitVisualizer:
    """Test that plots are written for each model shape."""

    def test_polynomial_plot(self, tmp_path, quadratic_samples):
        """Test a curve with residuals and metrics in the title."""
        x, y = quadratic_samples
        coeffs = fit_polynomial(x, y, 1)
        model = FittedModel(name="line fit", method="polynomial", x=x, y=y, result=coeffs,
                            metrics=polynomial_error_metrics(x, y, coeffs))
        path = FitVisualizer(tmp_path / "plots").plot_model(model, num_points=50)
        assert path.exists()
        assert path.suffix == ".png"
        assert path.name.startswith("line_fit_polynomial_")

    def test_log_linear_plot(self, tmp_path, attenuation_table):
        """Test a log-scaled table plot with an explicit file name."""
        freq, value_db = attenuation_table
        model = FittedModel(name="atten", method="log_linear", x=freq, y=value_db)
        path = FitVisualizer(tmp_path).plot_model(model, num_points=50, filename="atten.png")
        assert path == tmp_path / "atten.png"
        assert path.stat().st_size > 0

    def test_vector_plot(self, tmp_path):
        """Test one curve per vector component."""
        x = np.array([0.0, 1.0, 2.0, 3.0])
        vectors = np.column_stack([x, x ** 2, np.ones_like(x)])
        model = FittedModel(name="v", method="vector", x=x, y=vectors, result=fit_vector(x, vectors, 2))
        assert FitVisualizer(tmp_path).plot_model(model, num_points=30).exists()

    def test_bilinear_plot(self, tmp_path):
        """Test a grid table plot."""
        model = FittedModel(name="grid", method="bilinear", x=np.array([0.0, 1.0]),
                            y=np.array([0.0, 1.0, 2.0]), table=np.array([[0.0, 1.0, 2.0], [10.0, 11.0, 12.0]]))
        assert FitVisualizer(tmp_path).plot_model(model, num_points=30).exists()

    def test_plot_failure_is_reported(self, tmp_path):
        """Test that evaluation errors during plotting surface as ValueError."""
        model = FittedModel(name="bad", method="nearest", x=np.array([0.0, 1.0]), y=np.array([0.0]))
        with pytest.raises(ValueError, match="Unexpected error visualizing model bad"):
            FitVisualizer(tmp_path).plot_model(model, num_points=10)
