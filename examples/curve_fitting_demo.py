"""Demonstration script for building and evaluating fitted models."""
import logging
from pathlib import Path
import numpy as np
import sympy as sp

from pycurvefit.parsing.api import create_model, get_model_info, get_supported_methods


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def demonstrate_models():
    """Build every example model, print its fit quality and evaluate it."""
    setup_logging()
    x = sp.Symbol('x')
    models_dir = Path(__file__).parent / "models"
    print(f"Supported methods: {', '.join(get_supported_methods())}")
    for yaml_path in sorted(models_dir.glob("*.yaml")):
        info = get_model_info(yaml_path)
        print(f"\n{'=' * 80}")
        print(f"MODEL: {info['name']} ({info['method']}, data: {info['data_source']})")
        print(f"{'=' * 80}")
        try:
            model = create_model(yaml_path, enable_plotting=True)
        except (ValueError, FileNotFoundError) as e:
            print(f"Error - {str(e)}")
            continue
        if model.metrics is not None:
            print(f"Fit quality: {model.metrics}")
        if model.method == "bilinear":
            x_mid = 0.5 * (model.x[0] + model.x[-1])
            y_mid = 0.5 * (model.y[0] + model.y[-1])
            print(f"Value at ({x_mid:g}, {y_mid:g}): {model.evaluate(x_mid, y_mid):.4f}")
            continue
        queries = np.linspace(model.x[0], model.x[-1], 5)
        for q, value in zip(queries, model.evaluate(queries)):
            print(f"  f({q:>12.4g}) = {value}")
        try:
            print(f"Symbolic form: {model.to_sympy(x)}")
        except ValueError as e:
            print(f"Symbolic form: {str(e)}")


if __name__ == "__main__":
    demonstrate_models()
