"""Tests for the public YAML API functions."""

import pytest
from pycurvefit.parsing.api import create_model, get_model_info, get_supported_methods, validate_yaml_file

POLYNOMIAL_YAML = """
name: calibration
method: polynomial
degree: 1
data:
  x: [0.0, 1.0, 2.0, 3.0]
  y: [1.0, 3.0, 5.0, 7.0]
"""


class TestGetSupportedMethods:
    """Test the method listing."""

    def test_lists_every_method(self):
        """Test that all model methods are listed in sorted order."""
        methods = get_supported_methods()
        assert methods == sorted(methods)
        assert set(methods) == {"akima", "bilinear", "linear", "log_linear", "nearest",
                                "polynomial", "rational", "vector"}


class TestValidateYamlFile:
    """Test validation without fitting."""

    def test_valid_file(self, write_yaml):
        """Test that a well-formed file validates."""
        assert validate_yaml_file(write_yaml(POLYNOMIAL_YAML)) is True

    def test_invalid_file(self, write_yaml):
        """Test that errors are prefixed with the validation context."""
        path = write_yaml("method: spline\ndata:\n  x: [0, 1]\n  y: [0, 1]\n")
        with pytest.raises(ValueError, match="YAML validation failed"):
            validate_yaml_file(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="YAML file not found"):
            validate_yaml_file(tmp_path / "absent.yaml")

    def test_does_not_load_data_file(self, write_yaml):
        """Test that a referenced data file is not opened during validation."""
        path = write_yaml("method: linear\ndata:\n  file_path: absent.csv\n  x_column: 0\n  y_column: 1\n")
        assert validate_yaml_file(path) is True


class TestGetModelInfo:
    """Test model summaries."""

    def test_inline_model(self, write_yaml):
        """Test the summary of an inline polynomial definition."""
        info = get_model_info(write_yaml(POLYNOMIAL_YAML))
        assert info == {
            'name': 'calibration',
            'method': 'polynomial',
            'data_source': 'inline',
            'parameters': {'degree': 1},
        }

    def test_file_model(self, write_yaml):
        """Test that file-backed models report their data file."""
        path = write_yaml("method: nearest\ndata:\n  file_path: table.csv\n  x_column: a\n  y_column: b\n",
                          name="lookup.yaml")
        info = get_model_info(path)
        assert info['name'] == 'lookup'
        assert info['data_source'] == 'table.csv'
        assert info['parameters'] == {}


class TestCreateModel:
    """Test the create_model entry point."""

    def test_creates_fitted_model(self, write_yaml):
        """Test that a line is fitted exactly."""
        model = create_model(write_yaml(POLYNOMIAL_YAML))
        assert model.name == 'calibration'
        assert model.evaluate(10.0) == pytest.approx(21.0)
        assert model.metrics.max_error == pytest.approx(0.0, abs=1e-9)

    def test_errors_propagate(self, write_yaml):
        """Test that configuration errors reach the caller."""
        with pytest.raises(ValueError, match="Missing required fields"):
            create_model(write_yaml("method: rational\nnumerator_degree: 1\ndata:\n  x: [0]\n  y: [0]\n"))
