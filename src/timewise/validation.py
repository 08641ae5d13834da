"""
Input validation for the regression engine.

Every public operation converts its inputs here before doing any arithmetic,
so errors surface at entry and non-finite values are never coerced.
"""

import numpy as np
from typing import Sequence, Tuple

from .errors import EmptyDataError, InsufficientDataError, InvalidInputError


def as_float_array(values: Sequence[float], name: str = "data") -> np.ndarray:
    """
    Convert a 1-D sequence of numbers to a `float64` numpy array.

    Args:
        values: List, tuple, `numpy.ndarray` or `pandas.Series` of numbers
        name: Argument name used in error messages

    Returns:
        1-D `numpy.ndarray` of dtype float64

    Raises:
        InvalidInputError: If the values are not numeric or not 1-D
    """
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must contain real numbers: {e}") from e

    if arr.ndim != 1:
        raise InvalidInputError(
            f"{name} must be one-dimensional, got shape {arr.shape}."
        )
    return arr


def check_finite(arr: np.ndarray, name: str = "data") -> None:
    """Raise `InvalidInputError` if `arr` holds NaN or infinite values."""
    bad = ~np.isfinite(arr)
    if bad.any():
        first = int(np.argmax(bad))
        raise InvalidInputError(
            f"{name} contains {int(bad.sum())} non-finite value(s); "
            f"first at index {first}: {arr[first]}"
        )


def validate_series(data: Sequence[float]) -> np.ndarray:
    """
    Validate an observation sequence for fitting.

    Checks, in order: empty input, a single observation, non-finite values.

    Returns:
        Observations as a float64 array
    """
    arr = as_float_array(data)

    if len(arr) == 0:
        raise EmptyDataError()
    if len(arr) < 2:
        raise InsufficientDataError(
            f"At least 2 observations are needed to fit a line, got {len(arr)}."
        )
    check_finite(arr)
    return arr


def validate_pair(
    actual: Sequence[float], predicted: Sequence[float]
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Validate actual and predicted values for a fit-quality metric.

    Both must be non-empty, of equal length and finite.
    """
    actual = as_float_array(actual, name="actual")
    predicted = as_float_array(predicted, name="predicted")

    if len(actual) == 0 or len(predicted) == 0:
        raise InvalidInputError("actual and predicted must be non-empty.")
    if len(actual) != len(predicted):
        raise InvalidInputError(
            f"Dimensions in actual ({len(actual)}) and predicted "
            f"({len(predicted)}) do not match."
        )
    check_finite(actual, name="actual")
    check_finite(predicted, name="predicted")
    return actual, predicted
