"""
typedefs.py

Type aliases shared across pycurvefit.

Type Aliases:
    ArrayTypes: Numerical sample data, given as numpy arrays, lists or tuples.
    ScalarOrArray: A single query point or a batch of query points.
    PredictFunction: A pointwise model, mapping one abscissa to one predicted value.
"""

from typing import Callable, List, Tuple, Union

import numpy as np

# Sample sequences can be represented as numpy arrays, lists, or tuples
ArrayTypes = Union[np.ndarray, List, Tuple]
ScalarOrArray = Union[float, ArrayTypes]
PredictFunction = Callable[[float], float]
