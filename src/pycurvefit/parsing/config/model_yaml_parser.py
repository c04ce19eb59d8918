import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
from ruamel.yaml import YAML, constructor, scanner

from pycurvefit.algorithms.akima import AkimaSpline
from pycurvefit.algorithms.error_metrics import (polynomial_error_metrics, rational_error_metrics,
                                                 vector_error_metrics)
from pycurvefit.algorithms.interpolation import as_grid_table
from pycurvefit.algorithms.polynomial_fit import fit_polynomial
from pycurvefit.algorithms.rational_fit import fit_rational
from pycurvefit.algorithms.vector_fit import as_vector_samples, fit_vector
from pycurvefit.core.exceptions import CurveFitError
from pycurvefit.core.fitted_model import FittedModel
from pycurvefit.data.constants import NumericalConstants
from pycurvefit.parsing.io.data_handler import load_sample_data
from pycurvefit.validation.array_validator import as_float_array, is_monotonic, validate_sample_arrays
from pycurvefit.parsing.config.yaml_keys import NAME_KEY, METHOD_KEY, DATA_KEY, X_KEY, Y_KEY, VECTORS_KEY, \
    X_GRID_KEY, Y_GRID_KEY, TABLE_KEY, FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY, DEGREE_KEY, \
    NUMERATOR_DEGREE_KEY, DENOMINATOR_DEGREE_KEY, MAX_ITERATIONS_KEY, TOLERANCE_KEY, LINEAR_KEY, \
    LOG_LINEAR_KEY, NEAREST_KEY, AKIMA_KEY, POLYNOMIAL_KEY, RATIONAL_KEY, VECTOR_KEY, BILINEAR_KEY

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ValueError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class ModelYAMLParser(YAMLFileParser):
    """Parser for curve-fitting model definitions in YAML format."""

    VALID_METHODS = {
        LINEAR_KEY,
        LOG_LINEAR_KEY,
        NEAREST_KEY,
        AKIMA_KEY,
        POLYNOMIAL_KEY,
        RATIONAL_KEY,
        VECTOR_KEY,
        BILINEAR_KEY,
    }

    # Method-specific top-level keys on top of name/method/data
    METHOD_PARAMETERS = {
        LINEAR_KEY: (set(), set()),
        LOG_LINEAR_KEY: (set(), set()),
        NEAREST_KEY: (set(), set()),
        AKIMA_KEY: (set(), set()),
        BILINEAR_KEY: (set(), set()),
        POLYNOMIAL_KEY: ({DEGREE_KEY}, set()),
        VECTOR_KEY: ({DEGREE_KEY}, set()),
        RATIONAL_KEY: ({NUMERATOR_DEGREE_KEY, DENOMINATOR_DEGREE_KEY}, {MAX_ITERATIONS_KEY, TOLERANCE_KEY}),
    }

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        logger.info("Initializing ModelYAMLParser for: %s", yaml_path)
        self._validate_config()
        self.method = self.config[METHOD_KEY]
        logger.info("ModelYAMLParser initialized successfully for method: %s", self.method)

    # --- Public API ---
    def create_model(self, enable_plotting: bool = False, plot_dir: Optional[Union[str, Path]] = None) -> FittedModel:
        """
        Fit or tabulate the configured model.
        Args:
            enable_plotting: Whether to save a fit plot (default: False)
            plot_dir: Output directory for the plot (default: ``pycurvefit_plots`` next to the YAML file)
        """
        name = self.config.get(NAME_KEY, self.config_path.stem)
        logger.info("Creating model '%s' (method: %s) from %s", name, self.method, self.config_path)
        try:
            builders = {
                LINEAR_KEY: self._build_table_model,
                LOG_LINEAR_KEY: self._build_table_model,
                NEAREST_KEY: self._build_table_model,
                AKIMA_KEY: self._build_akima_model,
                POLYNOMIAL_KEY: self._build_polynomial_model,
                RATIONAL_KEY: self._build_rational_model,
                VECTOR_KEY: self._build_vector_model,
                BILINEAR_KEY: self._build_bilinear_model,
            }
            model = builders[self.method](name)
        except (CurveFitError, FileNotFoundError):
            raise
        except Exception as e:
            logger.error("Failed to create model from %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Failed to create model \n -> {str(e)}") from e
        if model.metrics is not None:
            logger.info("Model '%s' fitted: %s", name, model.metrics)
        if enable_plotting:
            from pycurvefit.visualization.plotters import FitVisualizer
            output_dir = Path(plot_dir) if plot_dir is not None else self.base_dir / "pycurvefit_plots"
            FitVisualizer(output_dir).plot_model(model)
        logger.info("Successfully created model: %s", name)
        return model

    # --- Validation Methods ---
    def _validate_config(self) -> None:
        """Validate the configuration structure and content."""
        logger.debug("Starting configuration validation")
        if not isinstance(self.config, dict):
            logger.error("Invalid YAML structure - expected dictionary at root level")
            raise ValueError("The YAML file must start with a dictionary/object structure with key-value pairs, "
                             "not a list or scalar value")
        self._validate_method()
        self._validate_fields()
        self._validate_data_section()
        self._validate_parameters()
        logger.info("Configuration validation completed successfully")

    def _validate_method(self) -> None:
        if METHOD_KEY not in self.config:
            logger.error("Missing required field: %s", METHOD_KEY)
            raise ValueError("Missing required field: method")
        method = self.config[METHOD_KEY]
        if not isinstance(method, str) or method not in self.VALID_METHODS:
            logger.error("Invalid method: %s", method)
            matches = get_close_matches(str(method), self.VALID_METHODS, n=1, cutoff=0.6)
            suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
            raise ValueError(f"Invalid method: '{method}'{suggestion}. "
                             f"Supported methods are: {', '.join(sorted(self.VALID_METHODS))}")

    def _validate_fields(self) -> None:
        """Validate that required fields are present and no unknown fields are given."""
        method = self.config[METHOD_KEY]
        required, optional = self.METHOD_PARAMETERS[method]
        required_fields = {METHOD_KEY, DATA_KEY} | required
        allowed_fields = required_fields | optional | {NAME_KEY}
        missing_fields = required_fields - set(self.config.keys())
        if missing_fields:
            logger.error("Missing required fields for %s: %s", method, missing_fields)
            raise ValueError(f"Missing required fields for {method}: {', '.join(sorted(missing_fields))}")
        extra_fields = set(self.config.keys()) - allowed_fields
        if extra_fields:
            logger.error("Extra fields found in configuration: %s", extra_fields)
            raise ValueError(self._format_unknown_keys("Extra fields found in configuration", extra_fields,
                                                       allowed_fields))

    def _validate_data_section(self) -> None:
        data = self.config[DATA_KEY]
        method = self.config[METHOD_KEY]
        if not isinstance(data, dict):
            logger.error("Data section is not a dictionary: %s", type(data))
            raise ValueError("The 'data' section in your YAML file must be a dictionary with key-value pairs")
        if method == BILINEAR_KEY:
            allowed = {X_GRID_KEY, Y_GRID_KEY, TABLE_KEY}
            required = allowed
        elif method == VECTOR_KEY:
            allowed = {X_KEY, VECTORS_KEY}
            required = allowed
        elif FILE_PATH_KEY in data:
            allowed = {FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY}
            required = allowed
        else:
            allowed = {X_KEY, Y_KEY}
            required = allowed
        missing = required - set(data.keys())
        if missing:
            logger.error("Data section for %s is missing: %s", method, missing)
            raise ValueError(f"The 'data' section for method '{method}' is missing: {', '.join(sorted(missing))}")
        extra = set(data.keys()) - allowed
        if extra:
            logger.error("Unknown keys in data section: %s", extra)
            raise ValueError(self._format_unknown_keys("Unknown keys in 'data' section", extra, allowed))

    def _validate_parameters(self) -> None:
        for key in (DEGREE_KEY, NUMERATOR_DEGREE_KEY, DENOMINATOR_DEGREE_KEY, MAX_ITERATIONS_KEY):
            if key in self.config:
                value = self.config[key]
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    logger.error("Invalid value for '%s': %r", key, value)
                    raise ValueError(f"'{key}' must be a non-negative integer, got {value!r}")
        if MAX_ITERATIONS_KEY in self.config and self.config[MAX_ITERATIONS_KEY] < 1:
            raise ValueError(f"'{MAX_ITERATIONS_KEY}' must be at least 1, got {self.config[MAX_ITERATIONS_KEY]}")
        if TOLERANCE_KEY in self.config:
            tolerance = self.config[TOLERANCE_KEY]
            if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float)) or tolerance <= 0:
                logger.error("Invalid tolerance: %r", tolerance)
                raise ValueError(f"'{TOLERANCE_KEY}' must be a positive number, got {tolerance!r}")

    @staticmethod
    def _format_unknown_keys(title: str, unknown: set, valid: set) -> str:
        error_msg = f"{title}: \n ->"
        for key in sorted(unknown):
            matches = get_close_matches(str(key), valid, n=1, cutoff=0.6)
            suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
            error_msg += f" - '{key}'{suggestion}\n"
        return error_msg

    # --- Processing Methods ---
    def _load_samples(self) -> Tuple[np.ndarray, np.ndarray]:
        """Read 1D samples inline or from a data file; file paths are relative to the YAML file."""
        data = self.config[DATA_KEY]
        if FILE_PATH_KEY in data:
            file_path = Path(data[FILE_PATH_KEY])
            if not file_path.is_absolute():
                file_path = self.base_dir / file_path
            file_config = {FILE_PATH_KEY: str(file_path), X_COLUMN_KEY: data[X_COLUMN_KEY],
                           Y_COLUMN_KEY: data[Y_COLUMN_KEY]}
            return load_sample_data(file_config)
        return validate_sample_arrays(data[X_KEY], data[Y_KEY], X_KEY, Y_KEY)

    def _load_sorted_samples(self) -> Tuple[np.ndarray, np.ndarray]:
        x_array, y_array = self._load_samples()
        is_monotonic(x_array, "x", mode="strictly_increasing", raise_error=True)
        return x_array, y_array

    def _build_table_model(self, name: str) -> FittedModel:
        x_array, y_array = self._load_sorted_samples()
        logger.debug("Table model '%s' with %d samples", name, len(x_array))
        return FittedModel(name=name, method=self.method, x=x_array, y=y_array)

    def _build_akima_model(self, name: str) -> FittedModel:
        x_array, y_array = self._load_sorted_samples()
        spline = AkimaSpline(x_array, y_array)
        return FittedModel(name=name, method=self.method, x=x_array, y=y_array, result=spline)

    def _build_polynomial_model(self, name: str) -> FittedModel:
        x_array, y_array = self._load_samples()
        coeffs = fit_polynomial(x_array, y_array, self.config[DEGREE_KEY])
        metrics = polynomial_error_metrics(x_array, y_array, coeffs)
        return FittedModel(name=name, method=self.method, x=x_array, y=y_array, result=coeffs, metrics=metrics)

    def _build_rational_model(self, name: str) -> FittedModel:
        x_array, y_array = self._load_samples()
        result = fit_rational(
            x_array, y_array,
            self.config[NUMERATOR_DEGREE_KEY],
            self.config[DENOMINATOR_DEGREE_KEY],
            max_iterations=self.config.get(MAX_ITERATIONS_KEY, NumericalConstants.DEFAULT_MAX_ITERATIONS),
            tolerance=float(self.config.get(TOLERANCE_KEY, NumericalConstants.DEFAULT_RATIONAL_TOLERANCE)),
        )
        metrics = rational_error_metrics(x_array, y_array, result)
        return FittedModel(name=name, method=self.method, x=x_array, y=y_array, result=result, metrics=metrics)

    def _build_vector_model(self, name: str) -> FittedModel:
        data = self.config[DATA_KEY]
        x_array = as_float_array(data[X_KEY], X_KEY)
        samples = as_vector_samples(data[VECTORS_KEY])
        result = fit_vector(x_array, samples, self.config[DEGREE_KEY])
        metrics = vector_error_metrics(x_array, samples, result)
        return FittedModel(name=name, method=self.method, x=x_array, y=samples, result=result, metrics=metrics)

    def _build_bilinear_model(self, name: str) -> FittedModel:
        data = self.config[DATA_KEY]
        x_grid = as_float_array(data[X_GRID_KEY], X_GRID_KEY)
        y_grid = as_float_array(data[Y_GRID_KEY], Y_GRID_KEY)
        table = as_grid_table(data[TABLE_KEY], len(x_grid), len(y_grid))
        is_monotonic(x_grid, X_GRID_KEY, mode="strictly_increasing", raise_error=True)
        is_monotonic(y_grid, Y_GRID_KEY, mode="strictly_increasing", raise_error=True)
        logger.debug("Bilinear model '%s' on a %dx%d grid", name, len(x_grid), len(y_grid))
        return FittedModel(name=name, method=self.method, x=x_grid, y=y_grid, table=table)
