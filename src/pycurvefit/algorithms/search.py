import logging

import numpy as np

from pycurvefit.core.typedefs import ArrayTypes

logger = logging.getLogger(__name__)


def find_insertion_point(sorted_values: ArrayTypes, value: float) -> int:
    """
    Locate the insertion index of ``value`` in an ascending sequence.

    Values at or below the first element map to 0 and values at or above the last
    element map to ``len(sorted_values)``. In between, the result ``i`` satisfies
    ``sorted_values[i-1] <= value < sorted_values[i]``; duplicate coordinates are
    resolved to the slot after the last equal element. Sortedness is not checked.
    """
    n = len(sorted_values)
    if n == 0:
        return 0
    if value <= sorted_values[0]:
        return 0
    if value >= sorted_values[n - 1]:
        return n
    return int(np.searchsorted(sorted_values, value, side='right'))
