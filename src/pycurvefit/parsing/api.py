import logging
from pathlib import Path
from typing import Optional, Union

from pycurvefit.core.fitted_model import FittedModel
from pycurvefit.parsing.config.model_yaml_parser import ModelYAMLParser
from pycurvefit.parsing.config.yaml_keys import DATA_KEY, FILE_PATH_KEY, METHOD_KEY, NAME_KEY

logger = logging.getLogger(__name__)


def create_model(yaml_path: Union[str, Path], enable_plotting: bool = False,
                 plot_dir: Optional[Union[str, Path]] = None) -> FittedModel:
    """
    Create a fitted model from a YAML definition file.

    This function is the main entry point for building interpolation tables and
    least-squares fits from configuration files. The file names the method and its
    samples (inline or from a data file); the returned model can be evaluated,
    inspected for its fit quality and exported to sympy.
    Args:
        yaml_path: Path to the YAML configuration file
        enable_plotting: Whether to save a plot of the data, the model and its residuals (default: False)
        plot_dir: Directory for the plot (default: ``pycurvefit_plots`` next to the YAML file)
    Returns:
        The fitted model
    Examples:
        # Polynomial calibration curve
        model = create_model('calibration.yaml')
        print(model.metrics)
        model.evaluate(2.5)

        # Symbolic form of the fit
        import sympy as sp
        x = sp.Symbol('x')
        expr = model.to_sympy(x)
    """
    logger.info("Creating model from: %s, plotting=%s", yaml_path, enable_plotting)
    try:
        parser = ModelYAMLParser(yaml_path=yaml_path)
        model = parser.create_model(enable_plotting=enable_plotting, plot_dir=plot_dir)
        logger.info("Successfully created model: %s (%s)", model.name, model.method)
        return model
    except Exception as e:
        logger.error("Failed to create model from %s: %s", yaml_path, e, exc_info=True)
        raise


def get_supported_methods() -> list:
    """
    Returns a list of all supported model methods.
    Returns:
        Sorted list of strings that are valid values of the ``method`` key in YAML files.
    """
    return sorted(ModelYAMLParser.VALID_METHODS)


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a YAML file without fitting the model.
    Args:
        yaml_path: Path to the YAML configuration file to validate
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    try:
        _ = ModelYAMLParser(yaml_path)
        logger.info("YAML validation successful for: %s", yaml_path)
        return True
    except FileNotFoundError as e:
        logger.error("YAML file not found: %s", yaml_path)
        raise FileNotFoundError(f"YAML file not found: {yaml_path}") from e
    except ValueError as e:
        logger.error("YAML validation failed for %s: %s", yaml_path, e)
        raise ValueError(f"YAML validation failed: {str(e)}") from e
    except Exception as e:
        logger.error("Unexpected error validating YAML %s: %s", yaml_path, e, exc_info=True)
        raise ValueError(f"Unexpected error validating YAML: {str(e)}") from e


def get_model_info(yaml_path: Union[str, Path]) -> dict:
    """
    Get basic information about a model definition without fitting it.
    Args:
        yaml_path: Path to the YAML configuration file
    Returns:
        Dictionary with the model name, method, data source and fit parameters
    Example:
        info = get_model_info('calibration.yaml')
        print(f"{info['name']}: {info['method']} from {info['data_source']}")
    """
    try:
        parser = ModelYAMLParser(yaml_path=yaml_path)
        data = parser.config[DATA_KEY]
        parameters = {key: value for key, value in parser.config.items()
                      if key not in (NAME_KEY, METHOD_KEY, DATA_KEY)}
        return {
            'name': parser.config.get(NAME_KEY, parser.config_path.stem),
            'method': parser.method,
            'data_source': data[FILE_PATH_KEY] if FILE_PATH_KEY in data else 'inline',
            'parameters': parameters,
        }
    except Exception as e:
        logger.error("Failed to get model info from %s: %s", yaml_path, e, exc_info=True)
        raise
