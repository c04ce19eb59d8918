"""Constants used for YAML parsing of model definitions."""

# Top-level keys
NAME_KEY = "name"
METHOD_KEY = "method"
DATA_KEY = "data"

# Inline sample keys
X_KEY = "x"
Y_KEY = "y"
VECTORS_KEY = "vectors"

# Grid keys
X_GRID_KEY = "x_grid"
Y_GRID_KEY = "y_grid"
TABLE_KEY = "table"

# File data keys
FILE_PATH_KEY = "file_path"
X_COLUMN_KEY = "x_column"
Y_COLUMN_KEY = "y_column"

# Fit parameter keys
DEGREE_KEY = "degree"
NUMERATOR_DEGREE_KEY = "numerator_degree"
DENOMINATOR_DEGREE_KEY = "denominator_degree"
MAX_ITERATIONS_KEY = "max_iterations"
TOLERANCE_KEY = "tolerance"

# Method names
LINEAR_KEY = "linear"
LOG_LINEAR_KEY = "log_linear"
NEAREST_KEY = "nearest"
AKIMA_KEY = "akima"
POLYNOMIAL_KEY = "polynomial"
RATIONAL_KEY = "rational"
VECTOR_KEY = "vector"
BILINEAR_KEY = "bilinear"

__all__ = [
    "NAME_KEY",
    "METHOD_KEY",
    "DATA_KEY",
    "X_KEY",
    "Y_KEY",
    "VECTORS_KEY",
    "X_GRID_KEY",
    "Y_GRID_KEY",
    "TABLE_KEY",
    "FILE_PATH_KEY",
    "X_COLUMN_KEY",
    "Y_COLUMN_KEY",
    "DEGREE_KEY",
    "NUMERATOR_DEGREE_KEY",
    "DENOMINATOR_DEGREE_KEY",
    "MAX_ITERATIONS_KEY",
    "TOLERANCE_KEY",
    "LINEAR_KEY",
    "LOG_LINEAR_KEY",
    "NEAREST_KEY",
    "AKIMA_KEY",
    "POLYNOMIAL_KEY",
    "RATIONAL_KEY",
    "VECTOR_KEY",
    "BILINEAR_KEY",
]
