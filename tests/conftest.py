"""Shared pytest fixtures for pycurvefit tests."""
import pytest
import numpy as np
import sympy as sp
from pathlib import Path


@pytest.fixture
def x_symbol():
    """Independent variable for symbolic export tests."""
    return sp.Symbol('x')


@pytest.fixture
def quadratic_samples():
    """Samples of y = 1 + 2x + 2x^2 on x = 0..5."""
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    y = np.array([1.0, 5.0, 13.0, 25.0, 41.0, 61.0])
    return x, y


@pytest.fixture
def half_step_grid():
    """Samples on x = 0, 0.5, ..., 6 with y = 10 * x."""
    x = np.arange(0.0, 6.5, 0.5)
    return x, 10.0 * x


@pytest.fixture
def rational_samples():
    """Noiseless samples of (1 + 2x) / (1 + 0.5x) on x = 0..9."""
    x = np.linspace(0.0, 9.0, 10)
    y = (1.0 + 2.0 * x) / (1.0 + 0.5 * x)
    return x, y


@pytest.fixture
def attenuation_table():
    """Attenuation in dB against frequency in Hz."""
    freq = np.array([10.0, 100.0, 1000.0, 10000.0])
    value_db = np.array([0.0, -3.0, -9.0, -20.0])
    return freq, value_db


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a file in a temporary directory and return its path."""
    def _write(content: str, name: str = "model.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
