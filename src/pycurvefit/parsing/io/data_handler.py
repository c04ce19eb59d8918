import logging
import numpy as np
from typing import Union, Tuple, Dict
import pandas as pd
from pathlib import Path

from pycurvefit.parsing.config.yaml_keys import FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY
from pycurvefit.data.constants import NumericalConstants, FileConstants

logger = logging.getLogger(__name__)

ColumnId = Union[str, int]


def load_sample_data(file_config: Dict[str, ColumnId], header: bool = True) -> Tuple[np.ndarray, np.ndarray]:
    """
    Reads abscissa and ordinate samples from a tabular data file.
    Args:
        file_config: Dictionary containing file configuration with keys:
            - file_path: Path to data file (.csv, .txt or .xlsx)
            - x_column: Abscissa column name or zero-based position
            - y_column: Ordinate column name or zero-based position
        header: Whether the first row holds column names
    Returns:
        Tuple of (x_array, y_array) as float64 numpy arrays, sorted by x with duplicate
        abscissae removed (first occurrence kept)
    Raises:
        FileNotFoundError: If the specified file doesn't exist
        ValueError: If data validation fails or file format is unsupported
        PermissionError: If file cannot be read due to permissions
    """
    file_path = _resolve_data_file(file_config)
    x_col, y_col = file_config[X_COLUMN_KEY], file_config[Y_COLUMN_KEY]
    logger.info("Loading sample data from %s (x=%s, y=%s)", file_path, x_col, y_col)
    try:
        frame = _read_table(file_path, header)
        if frame.empty:
            raise ValueError(f"No data rows in {file_path}")
        x_array = _numeric_column(frame, x_col, "x", file_path)
        y_array = _numeric_column(frame, y_col, "y", file_path)
    except PermissionError as e:
        logger.error("Permission denied reading %s", file_path)
        raise PermissionError(f"Cannot read {file_path}: {str(e)}") from e
    except ValueError:
        raise
    except Exception as e:
        logger.error("Could not parse data file %s: %s", file_path, e, exc_info=True)
        raise ValueError(f"Could not parse {file_path}: {str(e)}") from e
    x_array, y_array = _drop_missing_rows(x_array, y_array, file_path)
    x_array, y_array = _sorted_unique(x_array, y_array)
    logger.info("Loaded %d samples from %s", len(x_array), file_path)
    return x_array, y_array


def _resolve_data_file(file_config: Dict[str, ColumnId]) -> Path:
    """Check the configuration keys and the file itself; return the file path."""
    if not isinstance(file_config, dict):
        raise ValueError(f"File configuration must be a dictionary, got {type(file_config).__name__}")
    missing_keys = {FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY} - set(file_config)
    if missing_keys:
        logger.error("Missing file configuration keys: %s", missing_keys)
        raise ValueError(f"Missing required configuration keys: {sorted(missing_keys)}")
    if not file_config[FILE_PATH_KEY]:
        raise ValueError(f"'{FILE_PATH_KEY}' must not be empty")
    file_path = Path(file_config[FILE_PATH_KEY])
    if not file_path.exists():
        logger.error("Data file not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        logger.error("Data path is a directory: %s", file_path)
        raise ValueError(f"Expected a data file, got a directory: {file_path}")
    suffix = file_path.suffix.lower()
    if suffix not in FileConstants.SUPPORTED_EXTENSIONS:
        logger.error("Unsupported data file type: %s", suffix)
        raise ValueError(f"Unsupported file type: '{suffix}' (expected one of "
                         f"{', '.join(FileConstants.SUPPORTED_EXTENSIONS)})")
    size_mb = file_path.stat().st_size / (1024 * 1024)
    if size_mb > FileConstants.MAX_FILE_SIZE_MB:
        logger.error("Data file too large: %.2f MB", size_mb)
        raise ValueError(f"{file_path} is {size_mb:.2f} MB, above the {FileConstants.MAX_FILE_SIZE_MB} MB limit")
    return file_path


def _read_table(file_path: Path, header: bool) -> pd.DataFrame:
    """Read any supported file into a DataFrame; text files are whitespace separated."""
    header_row = 0 if header else None
    na_values = list(FileConstants.NA_VALUES)
    suffix = file_path.suffix.lower()
    if suffix == '.xlsx':
        return pd.read_excel(file_path, header=header_row, na_values=na_values)
    read_options = {'sep': r'\s+', 'engine': 'python'} if suffix == '.txt' else {}
    try:
        return pd.read_csv(file_path, header=header_row, na_values=na_values,
                           encoding=FileConstants.DEFAULT_ENCODING, **read_options)
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"{file_path} is empty") from e


def _numeric_column(frame: pd.DataFrame, column: ColumnId, axis_name: str, file_path: Path) -> np.ndarray:
    """Select a column by name or position and coerce it to float64, turning bad cells into NaN."""
    if isinstance(column, str):
        if column not in frame.columns:
            available = ', '.join(str(name) for name in frame.columns)
            raise ValueError(f"{axis_name} column '{column}' is not in {file_path}. Available columns: {available}")
        series = frame[column]
    else:
        if not 0 <= column < frame.shape[1]:
            raise ValueError(f"{axis_name} column position {column} is outside 0..{frame.shape[1] - 1} "
                             f"in {file_path}")
        series = frame.iloc[:, column]
    values = pd.to_numeric(series, errors='coerce').to_numpy(dtype=np.float64)
    bad_cells = int(np.isnan(values).sum())
    if bad_cells:
        logger.warning("%s column of %s has %d missing or non-numeric cells", axis_name, file_path, bad_cells)
    return values


def _drop_missing_rows(x_array: np.ndarray, y_array: np.ndarray,
                       file_path: Union[str, Path]) -> Tuple[np.ndarray, np.ndarray]:
    """Remove rows where either coordinate is NaN, refusing mostly-empty files."""
    if len(x_array) == 0:
        raise ValueError(f"No valid data found in file: {file_path}")
    keep = ~(np.isnan(x_array) | np.isnan(y_array))
    dropped = len(keep) - int(keep.sum())
    if dropped:
        missing_share = NumericalConstants.PERCENT * dropped / len(keep)
        logger.warning("Dropping %d of %d rows (%.1f%%) with missing values in %s",
                       dropped, len(keep), missing_share, file_path)
        if missing_share > NumericalConstants.MAX_MISSING_VALUE_PERCENTAGE:
            logger.error("Too many missing values (%.1f%%) in %s", missing_share, file_path)
            raise ValueError(f"Too many missing values ({missing_share:.1f}%) in file: {file_path}")
        x_array, y_array = x_array[keep], y_array[keep]
    if len(x_array) < NumericalConstants.MIN_DATA_POINTS:
        raise ValueError(f"Only {len(x_array)} complete rows in {file_path}, "
                         f"need at least {NumericalConstants.MIN_DATA_POINTS}")
    return x_array, y_array


def _sorted_unique(x_array: np.ndarray, y_array: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Sort by x and keep the first row of every repeated abscissa."""
    # stable: the first occurrence of a repeated x sorts first
    order = np.argsort(x_array, kind='stable')
    x_sorted, y_sorted = x_array[order], y_array[order]
    first = np.concatenate(([True], np.diff(x_sorted) != 0))
    if not first.all():
        logger.warning("Removing %d rows with duplicate x values", int((~first).sum()))
    return x_sorted[first], y_sorted[first]
