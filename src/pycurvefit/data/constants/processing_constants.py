from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class NumericalConstants:
    """Numerical tolerances and limits shared by the interpolation and fitting algorithms."""
    # Linear solver
    SINGULAR_PIVOT_TOLERANCE: Final[float] = 1e-10
    # Rational fit
    DENOMINATOR_EPSILON: Final[float] = 1e-10
    DEFAULT_MAX_ITERATIONS: Final[int] = 100
    DEFAULT_RATIONAL_TOLERANCE: Final[float] = 1e-6
    # Akima spline
    AKIMA_MIN_POINTS: Final[int] = 5
    AKIMA_WEIGHT_EPSILON: Final[float] = 1e-10
    AKIMA_LARGE_WEIGHT: Final[float] = 1e5
    # Error metrics
    SS_TOTAL_EPSILON: Final[float] = 1e-10
    RELATIVE_ERROR_FLOOR: Final[float] = 1e-10
    PERCENT: Final[float] = 100.0
    # Data validation
    MIN_DATA_POINTS: Final[int] = 1
    MONOTONICITY_THRESHOLD: Final[float] = 0.0
    # Visualization
    DEFAULT_VISUALIZATION_POINTS: Final[int] = 1000
    RANGE_PADDING_FACTOR: Final[float] = 0.05
    # File processing
    MAX_MISSING_VALUE_PERCENTAGE: Final[float] = 50.0


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    EMPTY_INPUT: Final[str] = "{name} cannot be empty"
    LENGTH_MISMATCH: Final[str] = "Array length mismatch: {first}({first_len}) != {second}({second_len})"
    INSUFFICIENT_POINTS: Final[str] = "Insufficient data points ({count}) for {what}, minimum required: {required}"
    SINGULAR_MATRIX: Final[str] = "Matrix is singular: pivot {pivot:.3e} in column {column} is below {tolerance:.1e}"
    NEAR_SINGULAR_DENOMINATOR: Final[str] = "Denominator is close to zero ({value:.3e}) at x={x}"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.csv', '.xlsx', '.txt')
    MAX_FILE_SIZE_MB: Final[int] = 100
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    # Missing value indicators
    NA_VALUES: Final[tuple] = ('', ' ', '  ', '   ', 'nan', 'NaN', 'NULL', 'null', 'N/A', 'n/a', 'NA')
